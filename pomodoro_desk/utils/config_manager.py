import json
import logging
import os

from dotenv import load_dotenv

from pomodoro_desk.core.controller import (TimerKind, clamp_minutes,
                                           DEFAULT_WORK_MINUTES, DEFAULT_BREAK_MINUTES)
from pomodoro_desk.core.popup_lifecycle import DEFAULT_TOTAL_DURATION_MS

logger = logging.getLogger(__name__)

CONFIG_PATH = os.path.expanduser("~/.config/pomodoro_desk/config.json")

DEFAULT_CONFIG = {
    "work_minutes": DEFAULT_WORK_MINUTES,
    "break_minutes": DEFAULT_BREAK_MINUTES,
    "popup_duration_ms": DEFAULT_TOTAL_DURATION_MS,
    "muted": False,
    "start_sound": None,
    "expired_sound": None,
    "log_level": "INFO",
}

ENV_OVERRIDES = {
    "POMODORO_WORK_MINUTES": ("work_minutes", int),
    "POMODORO_BREAK_MINUTES": ("break_minutes", int),
    "POMODORO_MUTED": ("muted", lambda value: value.strip().lower() in ("1", "true", "yes", "on")),
    "POMODORO_LOG_LEVEL": ("log_level", str),
}

def config_path():
    return os.path.expanduser(os.environ.get("POMODORO_CONFIG", CONFIG_PATH))

def read_config_file(path):
    """Loads the JSON config file, or {} when it is missing or unreadable."""
    if not os.path.exists(path):
        return {}
    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("ignoring config file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("ignoring config file %s: expected a JSON object", path)
        return {}
    return data

def load_config(dotenv_path=None):
    """
    Builds the startup configuration: defaults, then the JSON file, then
    environment variables (a .env file is loaded first). Never written back.
    """
    load_dotenv(dotenv_path)
    config = dict(DEFAULT_CONFIG)
    config.update({k: v for k, v in read_config_file(config_path()).items() if k in DEFAULT_CONFIG})

    for var, (key, convert) in ENV_OVERRIDES.items():
        raw = os.environ.get(var)
        if raw is None:
            continue
        try:
            config[key] = convert(raw)
        except ValueError:
            logger.warning("ignoring %s=%r: not a valid value", var, raw)

    return normalize_config(config)

def normalize_config(config):
    try:
        config["work_minutes"] = clamp_minutes(TimerKind.WORK, config["work_minutes"])
    except (TypeError, ValueError):
        config["work_minutes"] = DEFAULT_WORK_MINUTES
    try:
        config["break_minutes"] = clamp_minutes(TimerKind.BREAK, config["break_minutes"])
    except (TypeError, ValueError):
        config["break_minutes"] = DEFAULT_BREAK_MINUTES
    try:
        config["popup_duration_ms"] = max(1000, int(config["popup_duration_ms"]))
    except (TypeError, ValueError):
        config["popup_duration_ms"] = DEFAULT_TOTAL_DURATION_MS
    config["muted"] = bool(config["muted"])
    config["log_level"] = str(config["log_level"]).upper()
    return config
