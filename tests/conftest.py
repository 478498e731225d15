"""
Pytest configuration for recordkeeper.

Provides fixtures for:
- Settings pointed at a per-test data directory
- A fixed clock so seeded timestamps are deterministic
- Sample records and student input files
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Generator, List

import pytest

from recordkeeper.config import Settings, get_settings
from recordkeeper.domain.models import InventoryItem


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None, None, None]:
    """
    Undo `configure_logging` calls made by CLI tests.

    CliRunner swaps sys.stderr per invocation; a handler left bound to it
    would write to a closed stream in later tests.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        # pytest's own capture handlers are StreamHandler subclasses; keep them.
        if type(handler) is logging.StreamHandler and handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings fixture with every file under the test's tmp_path.
    """
    return Settings(data_dir=tmp_path, log_level="DEBUG")


@pytest.fixture
def env_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """
    Point the cached settings at tmp_path through the environment.

    Used by CLI tests, which read settings via `get_settings()`.
    """
    monkeypatch.setenv("DATA_DIR", str(tmp_path))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


@pytest.fixture
def inventory_items(fixed_now: datetime) -> List[InventoryItem]:
    return [
        InventoryItem(id=1, name="Laptop", quantity=5, date_added=fixed_now),
        InventoryItem(id=2, name="Printer", quantity=2, date_added=fixed_now),
        InventoryItem(id=3, name="Desk Chair", quantity=10, date_added=fixed_now),
    ]


@pytest.fixture
def students_file(tmp_path: Path) -> Path:
    path = tmp_path / "students.txt"
    path.write_text(
        "1,Ama Mensah,80\n"
        "2,Kofi Adu,79\n"
        "3,Esi Owusu,59\n"
        "4,Yaw Darko,49\n",
        encoding="utf-8",
    )
    return path
