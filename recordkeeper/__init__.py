"""
recordkeeper - small record-keeping console demos on a shared core.

The core is a generic insertion-ordered record store, a grouping index built
from a store snapshot, JSON file persistence that tolerates a missing file,
and pure report formatters. Four demos exercise it:

- Finance transaction processing against a savings account
- Patient/prescription lookup through a grouping index
- Inventory logging with save and reload
- Student grading from a delimited file into a text report
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from recordkeeper.config import Settings, get_settings
from recordkeeper.domain.grades import grade_for
from recordkeeper.exceptions import (
    CorruptDataError,
    InvalidFormatError,
    InvalidScoreFormatError,
    MalformedRecordError,
    MissingFieldError,
    RecordKeeperError,
    StorageIOError,
)
from recordkeeper.grouping import GroupingIndex
from recordkeeper.persistence import FileBackedStore, LoadResult, load_records, save_records
from recordkeeper.runner import available_demos, run_demos
from recordkeeper.store import RecordStore
from recordkeeper.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Core
    "RecordStore",
    "GroupingIndex",
    "LoadResult",
    "save_records",
    "load_records",
    "FileBackedStore",
    "grade_for",
    # Demos
    "available_demos",
    "run_demos",
    # Errors
    "RecordKeeperError",
    "MalformedRecordError",
    "MissingFieldError",
    "InvalidFormatError",
    "InvalidScoreFormatError",
    "StorageIOError",
    "CorruptDataError",
    # Logging
    "configure_logging",
    "get_logger",
]
