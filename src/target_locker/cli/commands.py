# src/target_locker/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from datetime import date
from typing import cast

from ..core.state import AppState
from ..notify.gateway import PermissionState
from ..targets.target_api import (
    add_target,
    compute_stats,
    delete_target,
    find_target,
    format_due_date,
    toggle_complete,
)

CommandHandler2 = Callable[[AppState, list[str]], str]
# The third argument is the raw text after the command name (whitespace kept).
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        rest = line[1:].lstrip()[len(parts[0]) :].strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except Exception:
            nparams = 2

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, rest)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  Any text without a leading '/' locks it as a target for tomorrow.")
        return "\n".join(lines)


registry = CommandRegistry()


def render_targets(state: AppState, *, today: date | None = None) -> str:
    if not state.targets:
        return "No targets yet. Lock your first target for tomorrow!"

    lines = ["Targets:"]
    for i, t in enumerate(state.targets, start=1):
        box = "[x]" if t.completed else "[ ]"
        badge = "  🔒 Locked" if t.locked and not t.completed else ""
        due = format_due_date(t.due_date, today=today)
        lines.append(f"  {i}. {box} {t.text}  📅 {due}{badge}  (id {t.id[:8]})")
    return "\n".join(lines)


def render_banner(state: AppState) -> str | None:
    """The banner still inside its display window, if any."""
    banner = state.gateway.current_banner()
    if banner is None:
        return None
    return f"[{banner.kind.value}] {banner.title}: {banner.message}"


def add_from_text(state: AppState, text: str) -> str:
    target = add_target(state, text)
    if target is None:
        return "Nothing to lock: the target text is empty."
    return render_targets(state)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    return add_from_text(state, rest)


def cmd_list(state: AppState, args: list[str]) -> str:
    banner = render_banner(state)
    listing = render_targets(state)
    return f"{banner}\n{listing}" if banner else listing


def cmd_toggle(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /done <number|id>"
    target = find_target(state, args[0])
    if target is None:
        return f"No target matches {args[0]!r}."
    toggle_complete(state, target.id)
    return render_targets(state)


def cmd_delete(state: AppState, args: list[str]) -> str:
    if not args:
        return "Usage: /delete <number|id>"
    target = find_target(state, args[0])
    # Unknown refs still go through delete_target so the banner behaviour stays uniform.
    delete_target(state, target.id if target is not None else args[0])
    return render_targets(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    s = compute_stats(state.targets)
    return (
        "Stats:\n"
        f"  Total targets: {s.total}\n"
        f"  Completed: {s.completed}\n"
        f"  Pending: {s.pending}"
    )


def cmd_notify(state: AppState, args: list[str]) -> str:
    gateway = state.gateway
    if not gateway.native_available:
        return "Desktop notifications are not available on this machine."

    permission = gateway.permission
    if permission is PermissionState.GRANTED:
        return "Notifications are already enabled."
    if permission is PermissionState.DENIED:
        return "Notifications were denied for this session."

    logger.debug("Notification permission requested from the console")
    if gateway.ensure_permission() is None:
        return "Could not request notification permission right now."
    return "Enable notifications to receive reminders!"


def cmd_status(state: AppState, args: list[str]) -> str:
    settings = state.settings
    available = "yes" if state.gateway.native_available else "no"
    banner = render_banner(state) or "none"
    return (
        "Status:\n"
        f"  Targets file: {getattr(settings, 'targets_path', '?')}\n"
        f"  Check interval: {getattr(settings, 'check_interval_seconds', '?')}s\n"
        f"  Reminder threshold: {getattr(settings, 'reminder_threshold_seconds', '?')}s\n"
        f"  Desktop notifications available: {available}\n"
        f"  Notification permission: {state.gateway.permission.value}\n"
        f"  Active banner: {banner}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Lock a target for tomorrow: /add <text>.", aliases=["lock"])
registry.register("list", cmd_list, help_text="Show all targets.", aliases=["ls"])
registry.register(
    "done",
    cmd_toggle,
    help_text="Toggle completion: /done <number|id>.",
    aliases=["undo", "toggle"],
)
registry.register("delete", cmd_delete, help_text="Delete a target: /delete <number|id>.", aliases=["rm"])
registry.register("stats", cmd_stats, help_text="Show total / completed / pending.")
registry.register("notify", cmd_notify, help_text="Enable desktop notifications.")
registry.register("status", cmd_status, help_text="Show settings and notification permission.")
