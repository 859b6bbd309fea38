# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from target_locker.notify.gateway import Banner
from target_locker.targets.target_models import Target


@dataclass(slots=True)
class FakeNotifier:
    """
    Deterministic NativeNotifier for unit tests.

    - `answer` is what the "user" replies when asked for permission
    - every shown notification is captured in `shown`
    """

    available: bool = True
    permission: str = "default"
    answer: str = "granted"
    fail_show: bool = False

    requests: int = 0
    shown: list[tuple[str, str]] = field(default_factory=list)

    def is_available(self) -> bool:
        return self.available

    def current_permission(self) -> str:
        return self.permission

    async def request_permission(self) -> str:
        self.requests += 1
        self.permission = self.answer
        return self.answer

    def show(self, title: str, body: str) -> None:
        if self.fail_show:
            raise NotImplementedError("no notification backend")
        self.shown.append((title, body))


@dataclass(slots=True)
class BannerRecorder:
    banners: list[Banner] = field(default_factory=list)

    def __call__(self, banner: Banner) -> None:
        self.banners.append(banner)

    @property
    def titles(self) -> list[str]:
        return [b.title for b in self.banners]


class MemoryTargetRepo:
    """In-memory TargetRepo; counts loads so tests can see the scheduler re-reading."""

    def __init__(self, targets: Iterable[Target] = ()) -> None:
        self.targets = list(targets)
        self.loads = 0
        self.saves = 0

    def load(self) -> list[Target]:
        self.loads += 1
        return list(self.targets)

    def save(self, targets: Iterable[Target]) -> None:
        self.saves += 1
        self.targets = list(targets)
