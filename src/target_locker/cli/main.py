# src/target_locker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs on a single event loop:
- reminder scheduler task (immediate check, then every interval),
- console REPL until /exit or EOF.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging

from ..cli.bootstrap import create_initial_state, create_scheduler
from ..config import get_settings
from ..connectors.console_connector import (
    LineReader,
    ask_notification_permission,
    print_banner,
    read_line,
    run_console_loop,
)
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


async def run_app(settings, *, reader: LineReader = read_line) -> None:
    state = create_initial_state(settings=settings, prompt=ask_notification_permission)
    state.gateway.add_banner_listener(print_banner)

    scheduler = create_scheduler(state)
    scheduler.start()
    try:
        await run_console_loop(state, reader=reader)
    finally:
        await scheduler.stop()

        pending = state.gateway.pending_request
        if pending is not None:
            pending.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await pending


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)
    logging.getLogger("plyer").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    try:
        asyncio.run(run_app(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
