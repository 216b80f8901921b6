import json

import pytest

from pomodoro_desk.utils import config_manager
from pomodoro_desk.utils.config_manager import DEFAULT_CONFIG, load_config, read_config_file


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Points the loader at tmp_path and clears any POMODORO_* overrides."""
    for var in list(config_manager.ENV_OVERRIDES) + ["POMODORO_CONFIG"]:
        # setenv first so monkeypatch restores the original value afterwards
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
    monkeypatch.setenv("POMODORO_CONFIG", str(tmp_path / "config.json"))
    return tmp_path


def write_config(tmp_path, data):
    (tmp_path / "config.json").write_text(json.dumps(data))


def test_defaults_when_nothing_is_configured(tmp_path):
    config = load_config(dotenv_path=tmp_path / "missing.env")

    assert config == DEFAULT_CONFIG


def test_file_values_override_defaults(tmp_path):
    write_config(tmp_path, {"work_minutes": 50, "break_minutes": 15, "muted": True, "unknown": 1})

    config = load_config(dotenv_path=tmp_path / "missing.env")

    assert config["work_minutes"] == 50
    assert config["break_minutes"] == 15
    assert config["muted"] is True
    assert "unknown" not in config


def test_environment_overrides_file(tmp_path, monkeypatch):
    write_config(tmp_path, {"work_minutes": 50})
    monkeypatch.setenv("POMODORO_WORK_MINUTES", "20")
    monkeypatch.setenv("POMODORO_MUTED", "yes")
    monkeypatch.setenv("POMODORO_LOG_LEVEL", "debug")

    config = load_config(dotenv_path=tmp_path / "missing.env")

    assert config["work_minutes"] == 20
    assert config["muted"] is True
    assert config["log_level"] == "DEBUG"


def test_dotenv_file_is_loaded(tmp_path, monkeypatch):
    dotenv = tmp_path / ".env"
    dotenv.write_text("POMODORO_BREAK_MINUTES=7\n")

    config = load_config(dotenv_path=dotenv)

    assert config["break_minutes"] == 7


def test_minutes_are_clamped_to_bounds(tmp_path):
    write_config(tmp_path, {"work_minutes": 999, "break_minutes": 0})

    config = load_config(dotenv_path=tmp_path / "missing.env")

    assert config["work_minutes"] == 240
    assert config["break_minutes"] == 1


def test_invalid_values_fall_back_to_defaults(tmp_path, monkeypatch):
    write_config(tmp_path, {"break_minutes": "lots", "popup_duration_ms": None})
    monkeypatch.setenv("POMODORO_WORK_MINUTES", "forever")

    config = load_config(dotenv_path=tmp_path / "missing.env")

    assert config["work_minutes"] == DEFAULT_CONFIG["work_minutes"]
    assert config["break_minutes"] == DEFAULT_CONFIG["break_minutes"]
    assert config["popup_duration_ms"] == DEFAULT_CONFIG["popup_duration_ms"]


def test_malformed_json_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert read_config_file(str(path)) == {}


def test_non_object_json_is_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("[1, 2, 3]")

    assert read_config_file(str(path)) == {}


def test_loading_never_writes_the_config_file(tmp_path):
    load_config(dotenv_path=tmp_path / "missing.env")

    assert not (tmp_path / "config.json").exists()
