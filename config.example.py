# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TARGET_LOCKER_APP_NAME": "App display name (default: Target Locker).",
    "TARGET_LOCKER_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "TARGET_LOCKER_DATA_DIR": "Local data directory (default: .local/target_locker).",
    "TARGET_LOCKER_TARGETS_PATH": "Targets JSON path (default: <data_dir>/targets.json).",
    # Reminder scheduler
    "TARGET_LOCKER_CHECK_INTERVAL_SECONDS": "Seconds between reminder checks (default: 60).",
    "TARGET_LOCKER_REMINDER_THRESHOLD_SECONDS": (
        "Minimum target age before a reminder fires (default: 360)."
    ),
    # Notifications
    "TARGET_LOCKER_BANNER_SECONDS": "In-app banner lifetime (default: 5).",
    "TARGET_LOCKER_NOTIFICATIONS_ENABLED": "Desktop notification capability (true/false).",
    "TARGET_LOCKER_NOTIFICATION_PERMISSION": (
        "Initial permission: default | granted | denied (default: default => ask once)."
    ),
}
