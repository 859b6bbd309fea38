# src/target_locker/connectors/console_connector.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime

from ..cli.commands import add_from_text, render_targets
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..notify.gateway import Banner, BannerKind

logger = logging.getLogger(__name__)

LineReader = Callable[[str], Awaitable[str]]

_BANNER_ICONS = {BannerKind.SUCCESS: "✅", BannerKind.INFO: "ℹ️"}


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


async def read_line(prompt: str) -> str:
    # input() blocks; run it off the loop so the reminder task keeps ticking.
    return await asyncio.to_thread(input, prompt)


async def ask_notification_permission() -> bool:
    answer = await read_line("Allow desktop notifications for reminders? [y/N] ")
    return answer.strip().lower() in ("y", "yes")


def print_banner(banner: Banner) -> None:
    icon = _BANNER_ICONS.get(banner.kind, "")
    _print_ts(f"{icon} {banner.title}: {banner.message}")


async def run_console_loop(state: AppState, *, reader: LineReader = read_line) -> None:
    logger.info("Console connector started (targets=%d).", len(state.targets))
    app_name = str(getattr(state.settings, "app_name", "Target Locker"))

    _print_ts(f"[{app_name}] Lock your targets for tomorrow and achieve your goals.")
    _print_ts("Type a target to lock it. Use /help for commands. Use /exit to quit.\n")
    print(render_targets(state))

    while True:
        try:
            user_input = (await reader(">>> Target: ")).strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, user_input)
            if response is None:
                response = add_from_text(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        print(response)

        # The permission prompt shares stdin with us: let it finish before reading again.
        pending = state.gateway.pending_request
        if pending is not None:
            await pending

    logger.info("Console connector finished.")
