from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.service import AttendanceStore
from .core.constants import DEFAULT_STORAGE_KEY
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .export.service import ExportService
from .storage.json_file_repository import JsonFileProfileRepository
from .storage.mysql_profile_repository import MySQLProfileRepository
from .storage.repository import ProfileRepository


@dataclass(frozen=True)
class Container:
    profiles_repo: ProfileRepository
    attendance_store: AttendanceStore
    export_service: ExportService
    conn: Optional[DatabaseConnection] = None


def build_profile_repository(
    *,
    backend: str,
    storage_key: str = DEFAULT_STORAGE_KEY,
    data_dir: str | Path = "data",
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
) -> tuple[ProfileRepository, Optional[DatabaseConnection]]:
    backend = StorageBackend(str(backend).lower())

    if backend == StorageBackend.MYSQL:
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLProfileRepository(conn, key=storage_key), conn

    return JsonFileProfileRepository(Path(data_dir), key=storage_key), None


def build_container(
    *,
    storage_backend: str = "json",
    storage_key: str = DEFAULT_STORAGE_KEY,
    data_dir: str | Path = "data",
    export_dir: str | Path = "exports",
    db_config: Optional[dict] = None,
    auto_init_db: bool = False,
    profiles_repo: Optional[ProfileRepository] = None,
) -> Container:
    conn = None
    if profiles_repo is None:
        profiles_repo, conn = build_profile_repository(
            backend=storage_backend,
            storage_key=storage_key,
            data_dir=data_dir,
            db_config=db_config,
            auto_init_db=auto_init_db,
        )

    attendance_store = AttendanceStore(profiles_repo)
    export_service = ExportService(attendance_store, export_dir)

    return Container(
        profiles_repo=profiles_repo,
        attendance_store=attendance_store,
        export_service=export_service,
        conn=conn,
    )


def build_container_from_settings(settings, **overrides) -> Container:
    params = dict(
        storage_backend=getattr(settings, "STORAGE_BACKEND", "json"),
        storage_key=getattr(settings, "STORAGE_KEY", DEFAULT_STORAGE_KEY),
        data_dir=getattr(settings, "DATA_DIR", "data"),
        export_dir=getattr(settings, "EXPORT_DIR", "exports"),
        db_config=dict(getattr(settings, "DB_CONFIG", {})),
        auto_init_db=bool(getattr(settings, "AUTO_INIT_DB", False)),
    )
    params.update(overrides)
    return build_container(**params)
