# src/target_locker/targets/target_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .target_models import Target

logger = logging.getLogger(__name__)


class TargetStore:
    """
    JSON file target store.

    The whole list lives under one file and is always written in full:
    - save() replaces the file atomically (tmp + os.replace)
    - load() never raises; unreadable content means "no targets"

    No schema versioning: unknown keys are ignored, broken records are skipped.
    """

    def __init__(self, path: str | Path = "targets.json") -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("TargetStore ready path=%s total=%s", self._path, self.count())

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Target]:
        if not self._path.exists():
            return []

        try:
            data = json.loads(self._path.read_text("utf-8"))
        except Exception:
            logger.exception("Failed to read targets from %s; treating as empty", self._path)
            return []

        if not isinstance(data, list):
            logger.warning("Targets file %s does not hold a list; treating as empty", self._path)
            return []

        out: list[Target] = []
        seen: set[str] = set()
        for raw in data:
            try:
                target = Target.from_record(raw)
            except (ValueError, TypeError, OverflowError) as e:
                logger.warning("Skipping malformed target record: %s", e)
                continue
            if target.id in seen:
                logger.warning("Skipping duplicate target id=%s", target.id)
                continue
            seen.add(target.id)
            out.append(target)
        return out

    def save(self, targets: Iterable[Target]) -> None:
        payload = [t.to_record() for t in targets]

        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, ensure_ascii=False, indent=2), "utf-8")
        os.replace(tmp, self._path)
        with contextlib.suppress(Exception):
            # Best-effort: targets are personal notes, keep the file private on disk.
            os.chmod(self._path, 0o600)
        logger.debug("Saved %d targets to %s", len(payload), self._path)

    def count(self) -> int:
        return len(self.load())
