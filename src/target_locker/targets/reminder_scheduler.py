# src/target_locker/targets/reminder_scheduler.py

from __future__ import annotations

"""
Reminder scheduler.

A small polling loop that:
- re-reads the persisted target list (not the in-memory copy),
- picks incomplete targets whose due date is exactly today,
- fires a native reminder once the target is older than the threshold.

There is no de-duplication: a matching target is reminded on every tick
while the app keeps running.
"""

import asyncio
import contextlib
import logging
from datetime import datetime

from ..core.ports import TargetRepo
from ..notify.gateway import NotificationGateway
from .target_models import Target, to_epoch_ms

logger = logging.getLogger(__name__)

REMINDER_TITLE = "🎯 Target Reminder"


def is_reminder_due(target: Target, *, now: datetime, threshold_seconds: float) -> bool:
    if target.completed:
        return False
    # Calendar-day equality, not "due soon": a target locked today is never due today.
    if target.due_date != now.date():
        return False
    elapsed_ms = to_epoch_ms(now) - target.created_at
    return elapsed_ms > threshold_seconds * 1000


def check_targets(
    store: TargetRepo,
    gateway: NotificationGateway,
    *,
    now: datetime | None = None,
    threshold_seconds: float = 360.0,
) -> int:
    """One tick. Returns how many reminders were handed to the gateway."""
    now = now or datetime.now()
    targets = store.load()
    if not targets:
        return 0

    fired = 0
    for target in targets:
        if not is_reminder_due(target, now=now, threshold_seconds=threshold_seconds):
            continue
        gateway.notify(REMINDER_TITLE, f"Don't forget: {target.text}")
        fired += 1

    if fired:
        logger.info("Reminder tick fired=%d of %d targets", fired, len(targets))
    return fired


async def run_reminder_scheduler(
        store: TargetRepo,
        gateway: NotificationGateway,
        *,
        interval_seconds: float = 60.0,
        threshold_seconds: float = 360.0,
) -> None:
    """
    Tick once immediately, then every interval_seconds.

    To stop the scheduler, cancel the coroutine/task.
    """
    sleep_s = max(0.5, float(interval_seconds))

    while True:
        try:
            check_targets(store, gateway, threshold_seconds=threshold_seconds)
        except Exception:
            logger.exception("Reminder tick failed")

        await asyncio.sleep(sleep_s)


class ReminderScheduler:
    """Owns the scheduler task: start() on startup, stop() on teardown."""

    def __init__(
        self,
        store: TargetRepo,
        gateway: NotificationGateway,
        *,
        interval_seconds: float = 60.0,
        threshold_seconds: float = 360.0,
    ) -> None:
        self._store = store
        self._gateway = gateway
        self._interval_seconds = interval_seconds
        self._threshold_seconds = threshold_seconds
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(
            run_reminder_scheduler(
                self._store,
                self._gateway,
                interval_seconds=self._interval_seconds,
                threshold_seconds=self._threshold_seconds,
            ),
            name="reminder-scheduler",
        )
        logger.info(
            "Reminder scheduler started (interval=%ss threshold=%ss)",
            self._interval_seconds,
            self._threshold_seconds,
        )

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        logger.info("Reminder scheduler stopped")
