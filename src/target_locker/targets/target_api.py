# src/target_locker/targets/target_api.py

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, datetime, timedelta

from ..core.state import AppState
from ..notify.gateway import BannerKind
from .target_models import Target, TargetStats

logger = logging.getLogger(__name__)


def _persist(state: AppState) -> None:
    # Always the full list: the scheduler re-reads the store independently.
    try:
        state.store.save(list(state.targets))
    except Exception:
        logger.exception("Failed to persist %d targets", len(state.targets))


def load_targets(state: AppState) -> list[Target]:
    """Refresh the in-memory list from the store (startup)."""
    state.targets = list(state.store.load())
    logger.info("Loaded %d targets", len(state.targets))
    return state.targets


def add_target(state: AppState, raw_text: str, *, now: datetime | None = None) -> Target | None:
    """
    Lock a new target for tomorrow.

    Empty / whitespace-only input is a silent no-op (returns None, no banner).
    """
    text = (raw_text or "").strip()
    if not text:
        return None

    # Lazy permission prompt; never blocks the add itself.
    state.gateway.ensure_permission()

    target = Target.create(text, now=now or datetime.now())
    state.targets.append(target)
    _persist(state)
    logger.info("Target locked id=%s due=%s", target.id, target.due_date.isoformat())

    state.gateway.show_banner(
        "Target Locked! 🔒",
        f'"{target.text}" is set for tomorrow',
        BannerKind.SUCCESS,
    )
    return target


def toggle_complete(state: AppState, target_id: str) -> Target | None:
    """Flip completion. Only the false -> true transition notifies."""
    for i, target in enumerate(state.targets):
        if target.id != target_id:
            continue

        updated = target.toggled()
        state.targets[i] = updated
        _persist(state)
        logger.info("Target %s completed=%s", target_id, updated.completed)

        if updated.completed:
            state.gateway.show_banner(
                "Target Completed! 🎉",
                f"Great job completing: {updated.text}",
                BannerKind.SUCCESS,
            )
            state.gateway.notify("🎉 Target Completed!", updated.text)
        return updated

    return None


def delete_target(state: AppState, target_id: str) -> bool:
    """
    Remove a target. The info banner is shown even when the id is unknown.
    Returns True if something was removed.
    """
    before = len(state.targets)
    state.targets = [t for t in state.targets if t.id != target_id]
    removed = len(state.targets) != before

    if removed:
        _persist(state)
        logger.info("Target %s deleted", target_id)

    state.gateway.show_banner("Target Removed", "Target has been deleted", BannerKind.INFO)
    return removed


def compute_stats(targets: Iterable[Target]) -> TargetStats:
    total = 0
    completed = 0
    for t in targets:
        total += 1
        if t.completed:
            completed += 1
    return TargetStats(total=total, completed=completed, pending=total - completed)


def format_due_date(due: date, *, today: date | None = None) -> str:
    """'Today', 'Tomorrow', or a short 'Oct 21' label."""
    today = today or date.today()
    if due == today:
        return "Today"
    if due == today + timedelta(days=1):
        return "Tomorrow"
    return f"{due:%b} {due.day}"


def find_target(state: AppState, ref: str) -> Target | None:
    """
    Resolve a console reference: 1-based list position, exact id, or unique id prefix.

    An all-digit ref outside the list range is tried as an id prefix too
    (hex ids sometimes start with digits only).
    """
    ref = (ref or "").strip()
    if not ref:
        return None

    if ref.isdecimal() and ref.isascii():
        pos = int(ref)
        if 1 <= pos <= len(state.targets):
            return state.targets[pos - 1]

    for t in state.targets:
        if t.id == ref:
            return t

    matches = [t for t in state.targets if t.id.startswith(ref)]
    if len(matches) == 1:
        return matches[0]
    return None
