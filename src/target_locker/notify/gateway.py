# src/target_locker/notify/gateway.py

"""
Notification gateway.

Two channels:
- in-app banner: always available, one at a time, expires after banner_seconds;
- native notification: delegated to a NativeNotifier backend and gated by permission.

Permission state machine (per session):
    unknown -> default | granted | denied   (first check)
    default -> granted | denied             (only via request_permission)
    granted / denied are terminal; we never re-prompt on our own.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from ..core.ports import NativeNotifier

logger = logging.getLogger(__name__)


class PermissionState(StrEnum):
    UNKNOWN = "unknown"
    DEFAULT = "default"
    GRANTED = "granted"
    DENIED = "denied"

    @classmethod
    def from_raw(cls, raw: str | None) -> PermissionState:
        if not raw:
            return cls.DEFAULT
        try:
            state = cls(str(raw).strip().lower())
        except ValueError:
            return cls.DEFAULT
        # A backend never legitimately reports "unknown".
        return cls.DEFAULT if state is cls.UNKNOWN else state


class BannerKind(StrEnum):
    SUCCESS = "success"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class Banner:
    id: str
    title: str
    message: str
    kind: BannerKind
    expires_at: float


BannerListener = Callable[[Banner], None]


class NotificationGateway:
    def __init__(
        self,
        notifier: NativeNotifier | None,
        *,
        banner_seconds: float = 5.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._notifier = notifier
        self._banner_seconds = max(0.0, float(banner_seconds))
        self._clock = clock

        self._banner: Banner | None = None
        self._banner_seq = 0
        self._listeners: list[BannerListener] = []

        self._permission = PermissionState.UNKNOWN
        self._pending: asyncio.Task[PermissionState] | None = None

    # ---- banners ----

    def add_banner_listener(self, listener: BannerListener) -> None:
        self._listeners.append(listener)

    def show_banner(self, title: str, message: str, kind: BannerKind = BannerKind.SUCCESS) -> Banner:
        """Replace the current banner (if any) and restart the expiry window."""
        now = self._clock()
        self._banner_seq += 1
        banner = Banner(
            id=f"{int(now * 1000)}-{self._banner_seq}",
            title=title,
            message=message,
            kind=kind,
            expires_at=now + self._banner_seconds,
        )
        self._banner = banner

        for listener in list(self._listeners):
            try:
                listener(banner)
            except Exception:
                logger.exception("Banner listener failed banner_id=%s", banner.id)
        return banner

    def current_banner(self, now: float | None = None) -> Banner | None:
        banner = self._banner
        if banner is None:
            return None
        now = self._clock() if now is None else now
        if now >= banner.expires_at:
            self._banner = None
            return None
        return banner

    # ---- permission ----

    @property
    def native_available(self) -> bool:
        if self._notifier is None:
            return False
        try:
            return bool(self._notifier.is_available())
        except Exception:
            logger.debug("Notifier availability check failed.", exc_info=True)
            return False

    @property
    def permission(self) -> PermissionState:
        return self.refresh_permission()

    @property
    def pending_request(self) -> asyncio.Task[PermissionState] | None:
        task = self._pending
        if task is None or task.done():
            return None
        return task

    def refresh_permission(self) -> PermissionState:
        """Resolve the initial permission once; later calls return the session state."""
        if self._permission is not PermissionState.UNKNOWN:
            return self._permission

        if not self.native_available:
            # No capability: stays "default" and request_permission() does nothing.
            self._permission = PermissionState.DEFAULT
        else:
            try:
                raw = self._notifier.current_permission()  # type: ignore[union-attr]
            except Exception:
                logger.debug("Notifier permission check failed.", exc_info=True)
                raw = None
            self._permission = PermissionState.from_raw(raw)

        logger.info("Notification permission: %s", self._permission.value)
        return self._permission

    async def request_permission(self) -> PermissionState:
        """
        Ask the user once. Only acts when the capability exists and nothing was decided yet.
        The new state is applied after the answer arrives (on the event loop thread).
        """
        state = self.refresh_permission()
        if state is not PermissionState.DEFAULT or not self.native_available:
            return state

        try:
            raw = await self._notifier.request_permission()  # type: ignore[union-attr]
        except Exception:
            logger.exception("Notification permission request failed")
            return self._permission

        self._permission = PermissionState.from_raw(raw)
        logger.info("Notification permission resolved: %s", self._permission.value)

        if self._permission is PermissionState.GRANTED:
            self.show_banner(
                "Notifications Enabled",
                "You will receive reminders about your targets!",
                BannerKind.SUCCESS,
            )
        return self._permission

    def ensure_permission(self) -> asyncio.Task[PermissionState] | None:
        """
        Lazy, non-blocking permission trigger.

        Schedules request_permission() on the running loop (one request in flight at most)
        and returns the task so callers may await it. Returns None when there is nothing to ask.
        """
        state = self.refresh_permission()
        if state is not PermissionState.DEFAULT or not self.native_available:
            return None

        pending = self.pending_request
        if pending is not None:
            return pending

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; permission request skipped.")
            return None

        self._pending = loop.create_task(self.request_permission())
        return self._pending

    # ---- native ----

    def notify(self, title: str, body: str) -> bool:
        """Show a native notification. Silent no-op unless permission is granted."""
        if self._notifier is None or self.refresh_permission() is not PermissionState.GRANTED:
            return False
        try:
            self._notifier.show(title, body)
        except Exception:
            logger.warning("Native notification failed title=%r", title, exc_info=True)
            return False
        return True
