"""
Tests for session wiring and terminal teardown in main().
"""

from __future__ import annotations

from typing import List

import pytest

from peritus import main as main_module
from peritus.config import DashboardConfig


class _Calls:
    def __init__(self) -> None:
        self.log: List[str] = []


@pytest.fixture
def session(monkeypatch, tmp_path):
    """Replace terminal-facing collaborators with recorders."""
    calls = _Calls()
    failures = {}

    def step(name):
        def run(*args, **kwargs):
            calls.log.append(name)
            if name in failures:
                raise failures[name]

        return run

    class FakeKeySource:
        open = step("key_source.open")
        close = step("key_source.close")

    class FakeMultiplexer:
        def __init__(self, key_source, tick_rate):
            self.tick_rate = tick_rate

        start = step("multiplexer.start")
        stop = step("multiplexer.stop")

    class FakeSurface:
        start = step("surface.start")
        stop = step("surface.stop")

    class FakeDashboard:
        def __init__(self, store, events, surface):
            pass

        run = step("dashboard.run")

    monkeypatch.setattr(main_module, "setup_logging", lambda level, log_file: None)
    monkeypatch.setattr(main_module, "TerminalKeySource", FakeKeySource)
    monkeypatch.setattr(main_module, "EventMultiplexer", FakeMultiplexer)
    monkeypatch.setattr(main_module, "LiveSurface", FakeSurface)
    monkeypatch.setattr(main_module, "Dashboard", FakeDashboard)

    config = DashboardConfig(db_path=tmp_path / "db.json")
    return calls, failures, config


def test_clean_session_tears_down_in_reverse(session) -> None:
    """Verify resources are released in reverse order after quit."""
    calls, _, config = session

    assert main_module.main(config) == 0
    assert calls.log == [
        "key_source.open",
        "surface.start",
        "multiplexer.start",
        "dashboard.run",
        "surface.stop",
        "multiplexer.stop",
        "key_source.close",
    ]
    assert config.db_path.read_text().strip() == "[]"


def test_failing_stop_still_restores_terminal(session) -> None:
    """Verify a raising multiplexer stop does not skip leaving raw mode."""
    calls, failures, config = session
    failures["multiplexer.stop"] = ValueError("bad timeout")

    with pytest.raises(ValueError, match="bad timeout"):
        main_module.main(config)
    assert calls.log[-3:] == ["surface.stop", "multiplexer.stop", "key_source.close"]


def test_dashboard_error_runs_every_teardown_step(session) -> None:
    """Verify a session aborted by the driver still releases everything."""
    calls, failures, config = session
    failures["dashboard.run"] = RuntimeError("store gone")

    with pytest.raises(RuntimeError, match="store gone"):
        main_module.main(config)
    assert calls.log[-3:] == ["surface.stop", "multiplexer.stop", "key_source.close"]
