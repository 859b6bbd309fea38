# src/target_locker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations into AppState (store / gateway / desktop notifier),
- builds the reminder scheduler from the same settings.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import PermissionPrompt
from ..core.state import AppState
from ..notify.desktop import DesktopNotifier
from ..notify.gateway import NotificationGateway
from ..targets.reminder_scheduler import ReminderScheduler
from ..targets.target_api import load_targets
from ..targets.target_store import TargetStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.targets_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None, prompt: PermissionPrompt | None = None) -> AppState:
    """
    Create AppState from the provided settings and load the persisted targets.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    notifier = DesktopNotifier(
        enabled=settings.notifications_enabled,
        permission=settings.notification_permission,
        prompt=prompt,
        app_name=settings.app_name,
    )

    state = AppState(
        settings=settings,
        store=TargetStore(settings.targets_path),
        gateway=NotificationGateway(notifier, banner_seconds=settings.banner_seconds),
    )
    load_targets(state)
    state.gateway.refresh_permission()
    return state


def create_scheduler(state: AppState) -> ReminderScheduler:
    settings = state.settings
    return ReminderScheduler(
        state.store,
        state.gateway,
        interval_seconds=float(getattr(settings, "check_interval_seconds", 60.0)),
        threshold_seconds=float(getattr(settings, "reminder_threshold_seconds", 360.0)),
    )
