# src/target_locker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app (normal "settings layer").
- Nothing required at import time: every value has a local default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

ENV_PREFIX = "TARGET_LOCKER"

_PERMISSION_VALUES = {"default", "granted", "denied"}


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    targets_path: Path

    # ---- Reminder scheduler ----
    check_interval_seconds: float
    reminder_threshold_seconds: float

    # ---- Notifications ----
    banner_seconds: float
    notifications_enabled: bool
    notification_permission: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "Target Locker")
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/target_locker"))
        targets_path = _env_path(_k("TARGETS_PATH"), data_dir / "targets.json")

        # 6 minutes is a demo-friendly threshold, not a product constant.
        check_interval_seconds = _env_float(_k("CHECK_INTERVAL_SECONDS"), 60.0)
        reminder_threshold_seconds = _env_float(_k("REMINDER_THRESHOLD_SECONDS"), 360.0)

        banner_seconds = _env_float(_k("BANNER_SECONDS"), 5.0)
        notifications_enabled = _env_bool(_k("NOTIFICATIONS_ENABLED"), True)

        notification_permission = _env(_k("NOTIFICATION_PERMISSION"), "default").strip().lower()
        if notification_permission not in _PERMISSION_VALUES:
            notification_permission = "default"

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            targets_path=targets_path,
            check_interval_seconds=check_interval_seconds,
            reminder_threshold_seconds=reminder_threshold_seconds,
            banner_seconds=banner_seconds,
            notifications_enabled=notifications_enabled,
            notification_permission=notification_permission,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
