"""JSON encoding of the persisted profile.

Shape: ``{"name": str, "subjects": [{"name": str, "present": int, "absent": int}]}``
"""

from __future__ import annotations

import json
from typing import Any

from ..common.validators import normalize_name
from ..core.exceptions import PersistenceError
from ..subjects.model import Profile, Subject


def profile_to_dict(profile: Profile) -> dict:
    return {
        "name": profile.name,
        "subjects": [
            {"name": s.name, "present": s.present, "absent": s.absent}
            for s in profile.subjects
        ],
    }


def encode_profile(profile: Profile) -> str:
    return json.dumps(profile_to_dict(profile), ensure_ascii=False)


def _require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise PersistenceError(f"Stored profile is corrupt: '{field_name}' must be a string")
    return value


def _require_count(value: Any, field_name: str) -> int:
    # bool is a subclass of int; reject it explicitly.
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise PersistenceError(f"Stored profile is corrupt: '{field_name}' must be a non-negative integer")
    return value


def profile_from_dict(data: Any) -> Profile:
    if not isinstance(data, dict):
        raise PersistenceError("Stored profile is corrupt: expected an object")

    raw_subjects = data.get("subjects", [])
    if not isinstance(raw_subjects, list):
        raise PersistenceError("Stored profile is corrupt: 'subjects' must be a list")

    subjects = []
    seen = set()
    for raw in raw_subjects:
        if not isinstance(raw, dict):
            raise PersistenceError("Stored profile is corrupt: subject must be an object")
        name = _require_str(raw.get("name"), "subjects.name").strip()
        if not name:
            raise PersistenceError("Stored profile is corrupt: empty subject name")
        if normalize_name(name) in seen:
            raise PersistenceError(f"Stored profile is corrupt: duplicate subject '{name}'")
        seen.add(normalize_name(name))
        subjects.append(
            Subject(
                name=name,
                present=_require_count(raw.get("present", 0), "subjects.present"),
                absent=_require_count(raw.get("absent", 0), "subjects.absent"),
            )
        )

    # A blank name loads as "" so the store asks for it again.
    name = _require_str(data.get("name", ""), "name").strip()
    return Profile(name=name, subjects=tuple(subjects))


def decode_profile(payload: str) -> Profile:
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise PersistenceError("Stored profile is not valid JSON") from exc
    return profile_from_dict(data)
