from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from ..core.constants import DEFAULT_STORAGE_KEY
from ..core.exceptions import PersistenceError
from ..subjects.model import Profile
from .codec import decode_profile, encode_profile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


def key_to_filename(key: str) -> str:
    """One file per key; hex keeps distinct keys on distinct files."""
    return f"profile-{key.encode('utf-8').hex()}.json"


class JsonFileProfileRepository(ProfileRepository):
    """Key-value storage backed by one JSON file per key.

    Saves write a temp file next to the target and ``os.replace`` it in, so a
    reader sees either the old snapshot or the new one, never a mix.
    """

    def __init__(self, directory: Path | str, key: str = DEFAULT_STORAGE_KEY):
        self._directory = Path(directory)
        self._key = key
        self._path = self._directory / key_to_filename(key)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Optional[Profile]:
        try:
            payload = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            # Undecodable bytes count as a read fault.
            raise PersistenceError(f"Cannot read stored profile '{self._key}'") from exc
        return decode_profile(payload)

    def save(self, profile: Profile) -> None:
        tmp_name = None
        try:
            payload = encode_profile(profile).encode("utf-8")
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=".profile-", suffix=".tmp")
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except (OSError, ValueError) as exc:
            # ValueError covers UnicodeEncodeError (e.g. lone surrogates in a name).
            raise PersistenceError(f"Cannot write stored profile '{self._key}'") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_name)
        logger.debug("Profile saved to %s", self._path)
