import importlib

import pytest

from attendance_tracker.container import build_container, build_container_from_settings
from attendance_tracker.settings import get_settings_module
from attendance_tracker.storage.json_file_repository import JsonFileProfileRepository, key_to_filename


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "attendance_tracker.settings.production"),
        ("PROD", "attendance_tracker.settings.production"),
        ("testing", "attendance_tracker.settings.testing"),
        ("anything", "attendance_tracker.settings.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_json_backend_wiring(tmp_path):
    container = build_container(storage_backend="json", data_dir=tmp_path, storage_key="@k", export_dir=tmp_path / "out")

    assert isinstance(container.profiles_repo, JsonFileProfileRepository)
    assert container.profiles_repo.path == tmp_path / key_to_filename("@k")
    assert container.export_service.export_dir == tmp_path / "out"
    assert container.conn is None


def test_unknown_backend_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        build_container(storage_backend="sqlite", data_dir=tmp_path)


def test_build_from_testing_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = importlib.import_module(get_settings_module())

    container = build_container_from_settings(settings, data_dir=tmp_path)
    container.attendance_store.initialize()
    container.attendance_store.set_name("Alex")

    assert JsonFileProfileRepository(tmp_path).load().name == "Alex"
