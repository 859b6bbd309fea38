# src/target_locker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage and notification backends swappable and makes testing easier.
"""

from collections.abc import Awaitable, Callable, Iterable
from typing import Any, Protocol

PermissionPrompt = Callable[[], Awaitable[bool]]
# Asks the user whether native notifications may be shown; True means "allow".


class TargetRepo(Protocol):
    """Durable target list. save() always receives the complete list."""

    def load(self) -> list[Any]: ...
    def save(self, targets: Iterable[Any]) -> None: ...


class NativeNotifier(Protocol):
    """
    Host notification facility with a permission gate.

    Permission values are plain strings ("default" | "granted" | "denied"),
    kept as str to avoid import coupling with the gateway.
    """

    def is_available(self) -> bool: ...
    def current_permission(self) -> str: ...
    def request_permission(self) -> Awaitable[str]: ...
    def show(self, title: str, body: str) -> None: ...
