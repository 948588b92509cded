"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores preview-host preferences that must be known before opening the DB
(db_folder, screen density, platform version). Config lives in
~/.whales_widget/config.json.
"""
import json
import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".whales_widget"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULTS = {
    "density": 1.0,
    "platform_version": 34,
    "pin_supported": True,
    "refresh_interval_ms": 30 * 60 * 1000,
    "log_level": "INFO",
}


def load_config() -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            data = json.load(f)
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.whales_widget/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except Exception:
        try:
            tmp.unlink(missing_ok=True)
        except Exception:
            pass


def get_option(key: str, config: dict | None = None):
    """Return config[key], falling back to DEFAULTS[key]."""
    cfg = load_config() if config is None else config
    return cfg.get(key, DEFAULTS.get(key))


def get_db_folder() -> str | None:
    """Return config["db_folder"] or None if not set."""
    return load_config().get("db_folder")


def get_density(config: dict | None = None) -> float:
    """Screen density multiplier for dp → px; bad values fall back to 1.0."""
    try:
        density = float(get_option("density", config))
    except (TypeError, ValueError):
        return DEFAULTS["density"]
    return density if density > 0 else DEFAULTS["density"]
