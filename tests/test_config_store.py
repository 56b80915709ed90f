import json
import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from identity import derive
from profiles import ConfigFileRepository, ConfigFormatError, ConfigStorageError, ProfileError, SyncConfig


@pytest.fixture
def system_id():
    return derive(["salt", "Linux", "host-b", "8000000000", "4"])


def test_path_is_id_plus_json_extension(tmp_path, system_id):
    repo = ConfigFileRepository(str(tmp_path))
    assert repo.path_for(system_id) == str(tmp_path / f"{system_id.id}.json")


def test_create_makes_directory_and_preserves_field_names(tmp_path, system_id):
    repo = ConfigFileRepository(str(tmp_path / "nested" / "system-configs"))
    path = repo.create(system_id, SyncConfig(sync_directory="/data"))

    assert json.loads(pathlib.Path(path).read_text(encoding="utf-8")) == {"sync_directory": "/data"}
    assert repo.load(system_id) == SyncConfig(sync_directory="/data")
    # no temp files left behind
    assert [p.name for p in pathlib.Path(repo.base_dir).iterdir()] == [f"{system_id.id}.json"]


def test_create_never_overwrites(tmp_path, system_id):
    repo = ConfigFileRepository(str(tmp_path))
    repo.create(system_id, SyncConfig(sync_directory="keep"))

    with pytest.raises(ConfigStorageError) as excinfo:
        repo.create(system_id, SyncConfig())

    assert excinfo.value.operation == "write"
    assert repo.load(system_id).sync_directory == "keep"


def test_unreadable_entry_reports_path_and_operation(tmp_path, system_id):
    repo = ConfigFileRepository(str(tmp_path))
    # a directory in place of the file cannot be opened for reading
    pathlib.Path(repo.path_for(system_id)).mkdir()

    with pytest.raises(ConfigStorageError) as excinfo:
        repo.load(system_id)

    assert excinfo.value.path == repo.path_for(system_id)
    assert excinfo.value.operation == "read"
    assert isinstance(excinfo.value, OSError)
    assert isinstance(excinfo.value, ProfileError)


@pytest.mark.parametrize(
    "payload",
    [
        b"[]",
        b"{}",
        b'{"sync_directory": 3}',
        b"",
        b'{"sync_directory": "\xff\xfe"}',
    ],
)
def test_malformed_payloads_are_rejected(tmp_path, system_id, payload):
    repo = ConfigFileRepository(str(tmp_path))
    pathlib.Path(repo.path_for(system_id)).write_bytes(payload)

    with pytest.raises(ConfigFormatError):
        repo.load(system_id)


def test_unknown_fields_are_ignored(tmp_path, system_id):
    repo = ConfigFileRepository(str(tmp_path))
    pathlib.Path(repo.path_for(system_id)).write_text(
        '{"sync_directory": "/x", "extra": true}', encoding="utf-8"
    )
    assert repo.load(system_id) == SyncConfig(sync_directory="/x")
