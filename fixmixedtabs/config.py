# fixmixedtabs/config.py
from __future__ import annotations

import contextlib
import json
import os
import shutil
import tempfile
from datetime import datetime

from .columns import check_tab_width

APP_DIR = os.path.expanduser("~/.fixmixedtabs")
CONFIG_PATH = os.path.join(APP_DIR, "config.json")

DEFAULTS = {
    "tab_width": 4,
    "check_on_focus": True,
    "check_on_load": True,
    "check_on_save": True,
    "animate_info_bar": True,
    "info_bar_height_px": 27,
    "info_bar_animation_ms": 175,
    "font_family": "TkFixedFont",
    "font_size": 12,
    "fg": "#141414",
    "bg": "#f4f4f4",
    "info_bar_bg": "#fff3c4",
    "open_maximized": False,
    "log_level": "WARNING",
}


class ConfigSaveError(Exception):
    """Raised when the configuration cannot be written to disk."""


def _backup_corrupt_config() -> None:
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    with contextlib.suppress(OSError):
        shutil.copyfile(CONFIG_PATH, f"{CONFIG_PATH}.corrupt-{stamp}")


def load_config() -> dict:
    try:
        os.makedirs(APP_DIR, exist_ok=True)
        if not os.path.exists(CONFIG_PATH):
            with contextlib.suppress(ConfigSaveError):
                save_config(DEFAULTS)
            return DEFAULTS.copy()
        with open(CONFIG_PATH, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
    except (OSError, ValueError):
        if os.path.exists(CONFIG_PATH):
            _backup_corrupt_config()
        with contextlib.suppress(ConfigSaveError, OSError):
            save_config(DEFAULTS)
        return DEFAULTS.copy()

    changed = False
    for k, v in DEFAULTS.items():
        if k not in data:
            data[k] = v
            changed = True
    if changed:
        with contextlib.suppress(ConfigSaveError, OSError):
            save_config(data)
    return data


def save_config(cfg: dict) -> None:
    os.makedirs(APP_DIR, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix="config.", suffix=".tmp", dir=APP_DIR)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(cfg, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, CONFIG_PATH)
    except Exception as exc:
        with contextlib.suppress(Exception):
            os.unlink(tmp_path)
        raise ConfigSaveError(f"Failed to save config to {CONFIG_PATH}: {exc}") from exc


def tab_width_from_config(cfg: dict) -> int:
    """Return the configured tab width, rejecting values that are not usable."""
    return check_tab_width(cfg.get("tab_width", DEFAULTS["tab_width"]))
