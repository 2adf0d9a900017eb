from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass(frozen=True)
class Subject:
    """Thực thể miền (domain): Môn học với bộ đếm có mặt/vắng cộng dồn."""

    name: str
    present: int = 0
    absent: int = 0

    @property
    def total(self) -> int:
        return self.present + self.absent

    def mark(self, present: bool) -> "Subject":
        if present:
            return replace(self, present=self.present + 1)
        return replace(self, absent=self.absent + 1)


@dataclass(frozen=True)
class Profile:
    """Hồ sơ gốc: tên người dùng + danh sách môn học có thứ tự.

    Instances are immutable snapshots; every mutation builds a new Profile.
    """

    name: str = ""
    subjects: Tuple[Subject, ...] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> "Profile":
        return cls(name="", subjects=())

    def with_name(self, name: str) -> "Profile":
        return replace(self, name=name)

    def with_subject_added(self, subject: Subject) -> "Profile":
        return replace(self, subjects=self.subjects + (subject,))

    def with_subject_replaced(self, index: int, subject: Subject) -> "Profile":
        subjects = list(self.subjects)
        subjects[index] = subject
        return replace(self, subjects=tuple(subjects))

    def with_subject_removed(self, index: int) -> "Profile":
        return replace(self, subjects=self.subjects[:index] + self.subjects[index + 1 :])


@dataclass(frozen=True)
class AttendanceTotals:
    """Read-model phục vụ hiển thị tổng hợp (aggregate over all subjects)."""

    present: int
    total: int
    percentage: str
