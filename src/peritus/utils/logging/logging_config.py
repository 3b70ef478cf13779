"""
Centralized logging configuration.

The dashboard owns the whole terminal while it runs, so log records never go
to the console: they are written to a file when one is configured and
discarded otherwise.
"""

import logging
from pathlib import Path
from typing import Optional

NOISY_LIBRARIES = [
    "asyncio",
    "prompt_toolkit",
]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Configure the root logger for a dashboard session.

    Safe to call more than once; existing root handlers are replaced.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
        log_file: File to append records to; None discards them
    """
    resolved = getattr(logging, str(level).upper().strip(), logging.WARNING)
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = NullHandler()
    handler.setLevel(resolved)

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
        existing.close()
    root.setLevel(resolved)
    root.addHandler(handler)

    for logger_name in NOISY_LIBRARIES:
        logging.getLogger(logger_name).setLevel(max(resolved, logging.WARNING))

    logging.getLogger("peritus").info(
        "Logging enabled (file=%s, level=%s)", log_file, logging.getLevelName(resolved)
    )
