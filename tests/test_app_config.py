import os
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import AppConfig


def test_portable_mode_keeps_configs_next_to_program(monkeypatch, tmp_path):
    monkeypatch.setenv("MACHINESYNC_PORTABLE", "1")
    monkeypatch.setattr(AppConfig, "_program_base", lambda: str(tmp_path))
    assert AppConfig.default_config_dir() == os.path.join(str(tmp_path), "data", "system-configs")
    # resolving the path has no side effects
    assert not (tmp_path / "data").exists()


def test_portable_flag_file(monkeypatch, tmp_path):
    monkeypatch.delenv("MACHINESYNC_PORTABLE", raising=False)
    monkeypatch.setattr(AppConfig, "_program_base", lambda: str(tmp_path))
    assert not AppConfig._is_portable()
    (tmp_path / "portable.flag").write_text("", encoding="utf-8")
    assert AppConfig._is_portable()


def test_default_dir_is_per_user_and_named_after_app(monkeypatch, tmp_path):
    monkeypatch.delenv("MACHINESYNC_PORTABLE", raising=False)
    monkeypatch.setattr(AppConfig, "_program_base", lambda: str(tmp_path))
    path = AppConfig.default_config_dir()
    assert path.endswith(os.path.join("MachineSync", "system-configs"))


def test_atomic_write_json_replaces_target(tmp_path):
    target = tmp_path / "out.json"
    AppConfig.atomic_write_json(str(target), {"sync_directory": "é"})
    assert target.read_text(encoding="utf-8") == '{\n  "sync_directory": "é"\n}\n'
    assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


def test_expand_norm_handles_empty_and_home():
    assert AppConfig.expand_norm("") == ""
    assert AppConfig.expand_norm("~/x/../y") == os.path.normpath(os.path.expanduser("~/y"))
