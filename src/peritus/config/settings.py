"""
Dashboard configuration.

Values come from environment variables, with a `.env` file in the working
directory loaded first. All durations are in seconds.
"""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

DEFAULT_DB_PATH = Path("./data/db.json")
DEFAULT_TICK_RATE = 0.2

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class DashboardConfig:
    """
    Runtime settings for the dashboard.

    Environment Variables:
    - PERITUS_DB_PATH: JSON file holding the experts
    - PERITUS_TICK_RATE_MS: Redraw period in milliseconds
    - PERITUS_CREATE_DB: Create an empty store on startup if missing
    - PERITUS_LOG_FILE: Log file (logging is discarded when unset)
    - PERITUS_LOG_LEVEL: Logging level name
    """

    db_path: Path = DEFAULT_DB_PATH
    """Location of the expert container"""

    tick_rate: float = DEFAULT_TICK_RATE
    """Seconds between Tick events"""

    create_db_if_missing: bool = True
    """Write an empty container at startup when none exists"""

    log_file: Optional[Path] = None
    """Where log records go; None discards them"""

    log_level: str = "WARNING"
    """Logging level name"""

    def __post_init__(self) -> None:
        if not math.isfinite(self.tick_rate) or self.tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive and finite, got {self.tick_rate}")


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_tick_rate(name: str, raw: str) -> float:
    try:
        millis = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of milliseconds, got {raw!r}") from None
    if not math.isfinite(millis) or millis <= 0:
        raise ValueError(f"{name} must be positive and finite, got {raw!r}")
    return millis / 1000.0


def load_config(environ: Optional[Mapping[str, str]] = None) -> DashboardConfig:
    """
    Build a configuration from environment variables.

    Args:
        environ: Variables to read; defaults to os.environ after loading `.env`

    Returns:
        DashboardConfig with overrides applied

    Raises:
        ValueError: A variable holds a value that cannot be parsed
    """
    if environ is None:
        load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    config = DashboardConfig()

    db_path = environ.get("PERITUS_DB_PATH")
    if db_path:
        config.db_path = Path(db_path).expanduser()

    tick_rate = environ.get("PERITUS_TICK_RATE_MS")
    if tick_rate:
        config.tick_rate = _parse_tick_rate("PERITUS_TICK_RATE_MS", tick_rate)

    create_db = environ.get("PERITUS_CREATE_DB")
    if create_db:
        config.create_db_if_missing = _parse_bool("PERITUS_CREATE_DB", create_db)

    log_file = environ.get("PERITUS_LOG_FILE")
    if log_file:
        config.log_file = Path(log_file).expanduser()

    log_level = environ.get("PERITUS_LOG_LEVEL")
    if log_level:
        config.log_level = log_level.strip().upper()

    return config
