from __future__ import annotations

from typing import Optional, Protocol

from ..subjects.model import Profile


class ProfileRepository(Protocol):
    """Durable storage for the single profile snapshot.

    The whole Profile is the unit of durability: ``save`` replaces the stored
    snapshot, there is no field-level write path.
    """

    def load(self) -> Optional[Profile]:
        """Return the stored profile, or None if nothing was ever saved.

        Raises PersistenceError on I/O or decoding faults.
        """

        raise NotImplementedError

    def save(self, profile: Profile) -> None:
        raise NotImplementedError
