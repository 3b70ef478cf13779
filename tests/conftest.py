"""
Pytest configuration and fixtures.
"""

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from peritus.schemas.expert import Expert  # noqa: E402
from peritus.store.json_store import JsonFileStore  # noqa: E402


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "store: expert store behaviour")
    config.addinivalue_line("markers", "tui: terminal UI behaviour")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        nodeid = item.nodeid.lower()
        if "store" in nodeid:
            item.add_marker("store")
        if any(word in nodeid for word in ("dashboard", "multiplexer", "frame", "key_source")):
            item.add_marker("tui")


def make_expert(expert_id: int, name: str, **overrides) -> Expert:
    """Build an expert with fixed defaults for deterministic tests."""
    fields = {
        "id": expert_id,
        "name": name,
        "category": "areas",
        "age": 6,
        "created_at": datetime(2021, 3, 4, 5, 6, 7, 123456, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Expert(**fields)


@pytest.fixture
def abc_experts() -> list:
    """Three experts named A, B and C."""
    return [make_expert(1, "A"), make_expert(2, "B"), make_expert(3, "C")]


@pytest.fixture
def file_store(tmp_path: Path) -> JsonFileStore:
    """An initialized, empty file store under a temp directory."""
    store = JsonFileStore(tmp_path / "data" / "db.json")
    store.initialize()
    return store
