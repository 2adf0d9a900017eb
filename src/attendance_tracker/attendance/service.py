from __future__ import annotations

import logging
import threading
from typing import Optional, Tuple

from ..common.validators import require_non_empty, require_unique_name
from ..core.enums import OnboardingState
from ..core.exceptions import StoreNotReadyError, SubjectIndexError, ValidationError
from ..export.csv_exporter import export_csv
from ..storage.repository import ProfileRepository
from ..subjects.model import AttendanceTotals, Profile, Subject
from ..subjects.search import filter_subjects
from .calculator import PercentageCalculator, StandardPercentageCalculator

logger = logging.getLogger(__name__)


class AttendanceStore:
    """Owns the live profile and every mutation on it.

    Mutations are optimistic: the new snapshot is installed in memory, then
    saved. If the save fails, the last durably confirmed snapshot is put back
    and PersistenceError is raised, so callers never keep working on changes
    that were not written.
    """

    def __init__(
        self,
        profiles: ProfileRepository,
        *,
        calculator: Optional[PercentageCalculator] = None,
    ):
        self._profiles = profiles
        self._calculator = calculator or StandardPercentageCalculator()
        self._lock = threading.RLock()

        self._profile = Profile.empty()
        self._durable = Profile.empty()
        self._state = OnboardingState.UNINITIALIZED

    # -- read side -----------------------------------------------------------

    @property
    def profile(self) -> Profile:
        return self._profile

    @property
    def state(self) -> OnboardingState:
        return self._state

    @property
    def is_ready(self) -> bool:
        return self._state == OnboardingState.READY

    @property
    def calculator(self) -> PercentageCalculator:
        return self._calculator

    def compute_subject_percentage(self, subject: Subject) -> str:
        return self._calculator.percentage(subject.present, subject.absent)

    def compute_total_attendance(self) -> AttendanceTotals:
        subjects = self._profile.subjects
        present = sum(s.present for s in subjects)
        absent = sum(s.absent for s in subjects)
        return AttendanceTotals(
            present=present,
            total=present + absent,
            percentage=self._calculator.percentage(present, absent),
        )

    def filter_subjects(self, query: str) -> Tuple[Subject, ...]:
        return filter_subjects(self._profile.subjects, query)

    def export_csv(self, *, quoted: bool = False) -> str:
        return export_csv(self._profile, calculator=self._calculator, quoted=quoted)

    # -- lifecycle -----------------------------------------------------------

    def initialize(self) -> OnboardingState:
        """Load the stored profile.

        Returns READY when a named profile was found, NAME_PROMPT otherwise.
        On a load failure the store still ends up in NAME_PROMPT with an empty
        profile before PersistenceError is raised.
        """

        with self._lock:
            try:
                loaded = self._profiles.load()
            except Exception:
                logger.exception("Error loading attendance data")
                self._install(Profile.empty(), durable=True)
                raise

            profile = loaded or Profile.empty()
            self._install(profile, durable=True)
            logger.info(
                "Attendance data loaded (state=%s, subjects=%d)",
                self._state.value,
                len(profile.subjects),
            )
            return self._state

    # -- mutations -----------------------------------------------------------

    def set_name(self, name: str) -> Profile:
        with self._lock:
            self._require_initialized()
            name = require_non_empty(name, "Please enter a valid name")
            return self._commit(self._profile.with_name(name))

    def add_subject(self, name: str) -> Profile:
        with self._lock:
            self._require_ready()
            name = require_non_empty(name, "Please enter a subject name")
            require_unique_name(name, (s.name for s in self._profile.subjects), "This subject already exists")
            return self._commit(self._profile.with_subject_added(Subject(name=name)))

    def record_attendance(self, index: int, present: bool) -> Profile:
        with self._lock:
            self._require_ready()
            subject = self._subject_at(index)
            return self._commit(self._profile.with_subject_replaced(index, subject.mark(bool(present))))

    def delete_subject(self, index: int, *, confirmed: bool = False) -> Profile:
        """Remove the subject at ``index``. Irreversible, so ``confirmed`` must be True."""

        with self._lock:
            self._require_ready()
            self._subject_at(index)
            if confirmed is not True:
                raise ValidationError("Deleting a subject must be confirmed")
            return self._commit(self._profile.with_subject_removed(index))

    # -- internals -----------------------------------------------------------

    def _subject_at(self, index: int) -> Subject:
        subjects = self._profile.subjects
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(subjects):
            raise SubjectIndexError(f"No subject at position {index}")
        return subjects[index]

    def _require_initialized(self) -> None:
        if self._state == OnboardingState.UNINITIALIZED:
            raise StoreNotReadyError("initialize() must complete before using the store")

    def _require_ready(self) -> None:
        self._require_initialized()
        if self._state != OnboardingState.READY:
            raise StoreNotReadyError("A profile name must be set before managing subjects")

    def _install(self, profile: Profile, *, durable: bool) -> None:
        self._profile = profile
        if durable:
            self._durable = profile
        self._state = OnboardingState.READY if profile.name else OnboardingState.NAME_PROMPT

    def _commit(self, profile: Profile) -> Profile:
        self._install(profile, durable=False)
        try:
            self._profiles.save(profile)
        except Exception:
            # Roll back on any failed write.
            logger.exception("Error saving data, restoring last saved profile")
            self._install(self._durable, durable=True)
            raise
        self._durable = profile
        logger.debug("Profile saved (subjects=%d)", len(profile.subjects))
        return profile
