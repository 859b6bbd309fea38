# tests/test_gateway.py

from __future__ import annotations

import asyncio

import pytest

from target_locker.notify.gateway import BannerKind, NotificationGateway, PermissionState
from target_locker.targets.target_api import add_target

from .fakes import BannerRecorder, FakeNotifier


class FakeClock:
    def __init__(self, now: float = 1_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_banner_expires_and_newer_banner_replaces_it() -> None:
    clock = FakeClock()
    gateway = NotificationGateway(None, banner_seconds=5.0, clock=clock)

    first = gateway.show_banner("Target Locked! 🔒", "a", BannerKind.SUCCESS)
    clock.now += 4
    assert gateway.current_banner() == first

    second = gateway.show_banner("Target Removed", "b", BannerKind.INFO)
    assert second.id != first.id
    clock.now += 4
    # 8s after the first banner, but the second restarted the window.
    assert gateway.current_banner() == second

    clock.now += 1
    assert gateway.current_banner() is None


def test_banner_listener_errors_do_not_escape() -> None:
    gateway = NotificationGateway(None)
    recorder = BannerRecorder()

    def broken(_banner) -> None:
        raise RuntimeError("render failed")

    gateway.add_banner_listener(broken)
    gateway.add_banner_listener(recorder)
    gateway.show_banner("t", "m")
    assert recorder.titles == ["t"]


def test_permission_first_check_reads_backend() -> None:
    assert NotificationGateway(FakeNotifier(permission="granted")).permission is PermissionState.GRANTED
    assert NotificationGateway(FakeNotifier(permission="denied")).permission is PermissionState.DENIED
    assert NotificationGateway(FakeNotifier(permission="weird")).permission is PermissionState.DEFAULT
    assert NotificationGateway(None).permission is PermissionState.DEFAULT


@pytest.mark.asyncio
async def test_request_permission_grant_shows_confirmation() -> None:
    notifier = FakeNotifier(permission="default", answer="granted")
    gateway = NotificationGateway(notifier)
    recorder = BannerRecorder()
    gateway.add_banner_listener(recorder)

    assert await gateway.request_permission() is PermissionState.GRANTED
    assert recorder.titles == ["Notifications Enabled"]

    # Terminal: no second prompt.
    assert await gateway.request_permission() is PermissionState.GRANTED
    assert notifier.requests == 1


@pytest.mark.asyncio
async def test_denied_is_terminal_for_the_session() -> None:
    notifier = FakeNotifier(permission="default", answer="denied")
    gateway = NotificationGateway(notifier)
    recorder = BannerRecorder()
    gateway.add_banner_listener(recorder)

    assert await gateway.request_permission() is PermissionState.DENIED
    assert gateway.ensure_permission() is None
    assert await gateway.request_permission() is PermissionState.DENIED
    assert notifier.requests == 1
    assert recorder.banners == []


@pytest.mark.asyncio
async def test_unavailable_capability_never_prompts() -> None:
    notifier = FakeNotifier(available=False, permission="default")
    gateway = NotificationGateway(notifier)

    assert gateway.ensure_permission() is None
    assert await gateway.request_permission() is PermissionState.DEFAULT
    assert notifier.requests == 0
    assert gateway.notify("t", "b") is False


@pytest.mark.asyncio
async def test_ensure_permission_keeps_one_request_in_flight() -> None:
    notifier = FakeNotifier(permission="default", answer="granted")
    gateway = NotificationGateway(notifier)

    first = gateway.ensure_permission()
    second = gateway.ensure_permission()
    assert first is not None
    assert first is second

    assert await first is PermissionState.GRANTED
    assert gateway.pending_request is None
    assert notifier.requests == 1


def test_ensure_permission_without_loop_is_noop() -> None:
    notifier = FakeNotifier(permission="default")
    gateway = NotificationGateway(notifier)
    assert gateway.ensure_permission() is None
    assert notifier.requests == 0


def test_notify_requires_granted_permission() -> None:
    notifier = FakeNotifier(permission="default")
    gateway = NotificationGateway(notifier)
    assert gateway.notify("t", "b") is False
    assert notifier.shown == []

    granted = FakeNotifier(permission="granted")
    assert NotificationGateway(granted).notify("t", "b") is True
    assert granted.shown == [("t", "b")]


def test_notify_backend_failure_is_swallowed() -> None:
    notifier = FakeNotifier(permission="granted", fail_show=True)
    assert NotificationGateway(notifier).notify("t", "b") is False


@pytest.mark.asyncio
async def test_add_target_triggers_lazy_permission_request(state, notifier, banners) -> None:
    notifier.permission = "default"
    notifier.answer = "granted"

    target = add_target(state, "Finish report")
    assert target is not None

    pending = state.gateway.pending_request
    assert pending is not None
    await pending

    assert state.gateway.permission is PermissionState.GRANTED
    assert banners.titles == ["Target Locked! 🔒", "Notifications Enabled"]

    # Second add does not prompt again.
    add_target(state, "Another one")
    assert state.gateway.pending_request is None
    await asyncio.sleep(0)
    assert notifier.requests == 1
