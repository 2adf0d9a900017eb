import pytest

from attendance_tracker.core.exceptions import PersistenceError
from attendance_tracker.storage.json_file_repository import JsonFileProfileRepository, key_to_filename
from attendance_tracker.subjects.model import Profile, Subject


def test_load_returns_none_when_nothing_saved(tmp_path):
    repo = JsonFileProfileRepository(tmp_path / "data")

    assert repo.load() is None


def test_save_then_load_round_trip(tmp_path):
    repo = JsonFileProfileRepository(tmp_path / "data")
    profile = Profile(name="Alex", subjects=(Subject("Math", 3, 1), Subject("Art", 0, 2)))

    repo.save(profile)

    assert repo.path.name == key_to_filename("@attendance_data")
    assert JsonFileProfileRepository(tmp_path / "data").load() == profile


def test_save_replaces_whole_snapshot_and_leaves_no_temp_files(tmp_path):
    repo = JsonFileProfileRepository(tmp_path)
    repo.save(Profile(name="Alex", subjects=(Subject("Math", 3, 1),)))
    repo.save(Profile(name="Alex", subjects=()))

    assert repo.load() == Profile(name="Alex", subjects=())
    assert sorted(p.name for p in tmp_path.iterdir()) == [repo.path.name]


def test_keys_are_stored_separately(tmp_path):
    first = JsonFileProfileRepository(tmp_path, key="@first")
    second = JsonFileProfileRepository(tmp_path, key="@second")
    first.save(Profile(name="One"))

    assert second.load() is None
    assert first.load() == Profile(name="One")


@pytest.mark.parametrize("a, b", [("@a", "@a!"), ("a b", "a_b"), ("@x", "x")])
def test_similar_keys_do_not_share_a_file(tmp_path, a, b):
    assert key_to_filename(a) != key_to_filename(b)

    JsonFileProfileRepository(tmp_path, key=a).save(Profile(name="A"))
    assert JsonFileProfileRepository(tmp_path, key=b).load() is None


def test_corrupt_file_raises_persistence_error(tmp_path):
    repo = JsonFileProfileRepository(tmp_path)
    repo.path.write_text("{broken", encoding="utf-8")

    with pytest.raises(PersistenceError):
        repo.load()


def test_non_utf8_file_raises_persistence_error(tmp_path):
    repo = JsonFileProfileRepository(tmp_path)
    repo.path.write_bytes(b'{"name": "\xff\xfe"}')

    with pytest.raises(PersistenceError):
        repo.load()


def test_unencodable_name_raises_persistence_error_and_keeps_old_file(tmp_path):
    repo = JsonFileProfileRepository(tmp_path)
    repo.save(Profile(name="Alex"))

    with pytest.raises(PersistenceError):
        repo.save(Profile(name="Alex", subjects=(Subject("\ud800"),)))

    assert repo.load() == Profile(name="Alex")
    assert sorted(p.name for p in tmp_path.iterdir()) == [repo.path.name]


def test_unwritable_location_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    repo = JsonFileProfileRepository(blocker / "data")

    with pytest.raises(PersistenceError):
        repo.save(Profile(name="Alex"))
