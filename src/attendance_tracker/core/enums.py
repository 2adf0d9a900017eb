from __future__ import annotations

from enum import Enum


class OnboardingState(str, Enum):
    """Vòng đời của hồ sơ: chưa tải, chờ nhập tên, sẵn sàng."""

    UNINITIALIZED = "UNINITIALIZED"
    NAME_PROMPT = "NAME_PROMPT"
    READY = "READY"


class StorageBackend(str, Enum):
    JSON = "json"
    MYSQL = "mysql"
