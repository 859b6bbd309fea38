# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from target_locker.core.state import AppState
from target_locker.notify.gateway import NotificationGateway
from target_locker.targets.target_store import TargetStore

from .fakes import BannerRecorder, FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and core modules.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="Target Locker",
        data_dir=tmp_path,
        targets_path=tmp_path / "targets.json",
        check_interval_seconds=60.0,
        reminder_threshold_seconds=360.0,
        banner_seconds=5.0,
        notifications_enabled=True,
        notification_permission="granted",
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier(permission="granted")


@pytest.fixture()
def banners() -> BannerRecorder:
    return BannerRecorder()


@pytest.fixture()
def state(settings: SimpleNamespace, notifier: FakeNotifier, banners: BannerRecorder) -> AppState:
    """
    AppState wired with a fake notifier.

    NOTE: We keep the real JSON TargetStore here because its write-through
    behaviour is part of what we want to test.
    """
    gateway = NotificationGateway(notifier, banner_seconds=settings.banner_seconds)
    gateway.add_banner_listener(banners)
    return AppState(
        settings=settings,
        store=TargetStore(settings.targets_path),
        gateway=gateway,
    )
