from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def normalize_name(value: str) -> str:
    """Comparison key for subject names (trim + lowercase)."""
    return value.strip().lower()


def require_unique_name(value: str, existing: Iterable[str], message: str) -> str:
    key = normalize_name(value)
    if any(normalize_name(name) == key for name in existing):
        raise ValidationError(message)
    return value
