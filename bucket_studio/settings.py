import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

log = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

ARRAY_SIZE     = 12
MAX_ARRAY_SIZE = 64
MIN_VALUE      = 5
INITIAL_SPEED  = 800
MIN_SPEED      = 1
MAX_SPEED      = 1000

# JSON file read on startup for user overrides; never written
SETTINGS_ENV  = "BUCKET_STUDIO_SETTINGS"
SETTINGS_JSON = os.path.join(os.path.expanduser("~/.bucket_studio"), "settings.json")


class SettingsError(ValueError):
    """Settings file exists but cannot be used."""


@dataclass
class Settings:
    array_size: int = ARRAY_SIZE
    speed: int = INITIAL_SPEED
    seed: Optional[int] = None


# ============================================================
# ===================== SETTINGS JSON ========================
# ============================================================

def settings_path(override: Optional[str] = None) -> str:
    if override:
        return override
    return os.getenv(SETTINGS_ENV) or SETTINGS_JSON


def _int_field(data: dict, key: str, lo: int, hi: int, default):
    if key not in data or data[key] is None:
        return default
    val = data[key]
    # bool is an int subclass; reject it explicitly
    if isinstance(val, bool) or not isinstance(val, int):
        raise SettingsError(f"{key} must be an integer, got {val!r}")
    if not lo <= val <= hi:
        raise SettingsError(f"{key} must be between {lo} and {hi}, got {val}")
    return val


def load_settings(path: Optional[str] = None) -> Settings:
    """
    Read overrides from the settings JSON.
    A missing file yields defaults; a malformed one raises SettingsError.
    """
    path = settings_path(path)
    if not os.path.exists(path):
        log.debug("no settings file at %s, using defaults", path)
        return Settings()
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise SettingsError(f"cannot read settings file {path}: {e}") from e
    if not isinstance(data, dict):
        raise SettingsError(f"settings file {path} must hold a JSON object")

    unknown = sorted(set(data) - {"array_size", "speed", "seed"})
    if unknown:
        log.warning("ignoring unknown settings in %s: %s", path, ", ".join(unknown))

    settings = Settings(
        array_size=_int_field(data, "array_size", 0, MAX_ARRAY_SIZE, ARRAY_SIZE),
        speed=_int_field(data, "speed", MIN_SPEED, MAX_SPEED, INITIAL_SPEED),
        seed=_int_field(data, "seed", 0, 2**63 - 1, None),
    )
    log.info("loaded settings from %s", path)
    return settings
