# src/target_locker/targets/target_models.py

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, replace
from datetime import date, datetime, timedelta
from typing import Any

# Shape produced by the browser build (Date.prototype.toDateString).
_LEGACY_DATE_FORMAT = "%a %b %d %Y"


def parse_due_date(raw: Any) -> date:
    """
    Parse a stored due date.

    Accepts ISO "YYYY-MM-DD" (what we write) and the older "Tue Oct 20 2026" shape.
    Raises ValueError for anything else.
    """
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"due date must be a non-empty string, got {raw!r}")
    s = raw.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    return datetime.strptime(s, _LEGACY_DATE_FORMAT).date()


def to_epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


@dataclass(frozen=True, slots=True)
class Target:
    """
    A committed short-term goal.

    Notes:
    - due_date is fixed at creation (the day after) and never changes.
    - locked is a display label only; nothing checks it before complete/delete.
    """

    id: str
    text: str
    due_date: date
    created_at: int  # epoch milliseconds
    completed: bool = False
    locked: bool = True

    @classmethod
    def create(cls, text: str, *, now: datetime) -> Target:
        clean = (text or "").strip()
        if not clean:
            raise ValueError("text is required")
        return cls(
            id=uuid.uuid4().hex,
            text=clean,
            due_date=now.date() + timedelta(days=1),
            created_at=to_epoch_ms(now),
            completed=False,
            locked=True,
        )

    def toggled(self) -> Target:
        return replace(self, completed=not self.completed)

    def to_record(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "date": self.due_date.isoformat(),
            "completed": self.completed,
            "locked": self.locked,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, raw: Any) -> Target:
        if not isinstance(raw, dict):
            raise ValueError("target record must be an object")

        target_id = raw.get("id")
        if not isinstance(target_id, str) or not target_id:
            raise ValueError("target record has no id")

        text = str(raw.get("text") or "").strip()
        if not text:
            raise ValueError(f"target {target_id} has empty text")

        created_at = raw.get("createdAt")
        if (
            isinstance(created_at, bool)
            or not isinstance(created_at, (int, float))
            or not math.isfinite(created_at)
        ):
            raise ValueError(f"target {target_id} has invalid createdAt")

        return cls(
            id=target_id,
            text=text,
            due_date=parse_due_date(raw.get("date")),
            created_at=int(created_at),
            completed=bool(raw.get("completed", False)),
            locked=bool(raw.get("locked", True)),
        )


@dataclass(frozen=True, slots=True)
class TargetStats:
    total: int
    completed: int
    pending: int
