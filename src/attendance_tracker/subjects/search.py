from __future__ import annotations

from typing import Sequence, Tuple

from .model import Subject


def filter_subjects(subjects: Sequence[Subject], query: str) -> Tuple[Subject, ...]:
    """Case-insensitive substring search on subject names.

    Keeps the original relative order and never mutates ``subjects``.
    An empty query matches everything.
    """
    needle = (query or "").lower()
    return tuple(s for s in subjects if needle in s.name.lower())
