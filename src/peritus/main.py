"""
Main entry point for the peritus dashboard.
"""

import logging
import sys
from contextlib import ExitStack
from typing import Optional

from rich.console import Console
from rich.markup import escape

from .config import DashboardConfig, load_config
from .store import JsonFileStore, StoreError
from .utils.logging import setup_logging
from .utils.ui import Dashboard, EventMultiplexer, LiveSurface, TerminalKeySource
from .utils.ui.theme import THEME

logger = logging.getLogger(__name__)


def main(config: Optional[DashboardConfig] = None) -> int:
    """
    Run one interactive dashboard session.

    Args:
        config: Settings to use; loaded from the environment when omitted

    Returns:
        Process exit code (0 after quit)
    """
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    store = JsonFileStore(config.db_path)
    if config.create_db_if_missing:
        store.initialize()

    key_source = TerminalKeySource()
    multiplexer = EventMultiplexer(key_source, tick_rate=config.tick_rate)
    surface = LiveSurface()
    dashboard = Dashboard(store, multiplexer, surface)

    logger.info("Starting dashboard (db=%s)", config.db_path)
    # Callbacks run in reverse order; each runs even if another one raised.
    with ExitStack() as teardown:
        teardown.callback(key_source.close)
        teardown.callback(multiplexer.stop)
        teardown.callback(surface.stop)
        key_source.open()
        surface.start()
        multiplexer.start()
        dashboard.run()

    return 0


def cli():
    """CLI entry point."""
    error_console = Console(stderr=True)
    try:
        code = main()
    except StoreError as e:
        logger.exception("Unrecoverable store error (%s)", e.kind.value)
        error_console.print(f"[{THEME['error']}]Error:[/] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        logger.exception("Dashboard terminated unexpectedly")
        error_console.print(f"[{THEME['error']}]Error:[/] {escape(str(e))}")
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    cli()
