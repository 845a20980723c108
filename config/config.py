"""Shared settings helpers and defaults.

Environment modules (development/testing/production) read the environment
through these helpers so every variable is parsed the same way.
"""

import os

from dotenv import load_dotenv

load_dotenv(override=False)


def env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


def env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    try:
        return int(value) if value not in (None, "") else default
    except ValueError:
        return default


def env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    try:
        return float(value) if value not in (None, "") else default
    except ValueError:
        return default


def env_csv(name: str, default: list) -> list:
    value = os.getenv(name)
    if not value:
        return list(default)
    parsed = [item.strip() for item in value.split(",") if item.strip()]
    return parsed or list(default)


def db_config(default_password: str = "") -> dict:
    return {
        "host": os.getenv("DB_HOST", "localhost"),
        "port": env_int("DB_PORT", 3306),
        "user": os.getenv("DB_USER", "root"),
        "password": os.getenv("DB_PASSWORD", default_password),
        "database": os.getenv("DB_NAME", "fingerprint_clock"),
    }


# Reader / matching defaults shared by every environment
READER_IDS = env_csv("READER_IDS", ["reader-0"])
TEMPLATE_FORMAT = os.getenv("TEMPLATE_FORMAT", "PNG").upper()
CAPTURE_TIMEOUT_MS = env_int("CAPTURE_TIMEOUT_MS", 15000)
CONFIRMATION_PAUSE_MS = env_int("CONFIRMATION_PAUSE_MS", 2000)
MATCH_THRESHOLD = env_float("MATCH_THRESHOLD", 70.0)
BYTE_TOLERANCE = env_int("BYTE_TOLERANCE", 5)
ATTENDANCE_ASSUME_IN_ON_STORE_ERROR = env_bool("ATTENDANCE_ASSUME_IN_ON_STORE_ERROR", False)
USE_DB_LOCKS = env_bool("USE_DB_LOCKS", True)
STATUS_HISTORY = env_int("STATUS_HISTORY", 50)
