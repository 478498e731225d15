"""
JSON file persistence for record stores.

Records are written as one top-level JSON array of field-labeled objects,
indented for humans, with the model's field names as keys. Loading validates
every object back into the record model.

A missing file is not an error: `load_records` reports it through
`LoadResult.found` so callers can start from an empty store.

Usage:
    from recordkeeper.persistence import FileBackedStore

    store = FileBackedStore(Path("inventory.json"), InventoryItem)
    store.add(item)
    store.save()

    fresh = FileBackedStore(Path("inventory.json"), InventoryItem)
    if not fresh.load():
        print("No saved data file found.")
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Generic, List, Sequence, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from recordkeeper.exceptions import CorruptDataError, StorageIOError
from recordkeeper.store import RecordStore
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


@dataclass
class LoadResult(Generic[M]):
    """
    Outcome of reading a record file.

    `found` is False when the file did not exist ("no prior data"); `records`
    is then empty.
    """

    records: List[M] = field(default_factory=list)
    found: bool = True


def save_records(records: Sequence[BaseModel], path: Path | str) -> None:
    """
    Write `records` to `path` as a JSON array, replacing any previous content.

    Raises
    ------
    StorageIOError
        If the file cannot be opened or written (missing directory,
        permission denied, path is a directory).
    """
    path = Path(path)
    payload = [record.model_dump(mode="json") for record in records]
    try:
        with path.open("w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")
    except OSError as exc:
        log.error("Failed to save records", extra={"path": str(path), "error": str(exc)})
        raise StorageIOError(f"Cannot write {path}: {exc}", path=path) from exc

    log.info("Records saved", extra={"path": str(path), "count": len(payload)})


def load_records(path: Path | str, model: Type[M]) -> LoadResult[M]:
    """
    Read a JSON array written by `save_records` and validate it into `model`.

    Raises
    ------
    StorageIOError
        If the file exists but cannot be read.
    CorruptDataError
        If the content is not valid JSON or does not match `model`.
    """
    path = Path(path)
    if not path.exists():
        log.info("No saved data file found", extra={"path": str(path)})
        return LoadResult(records=[], found=False)

    try:
        with path.open("r", encoding="utf-8") as f:
            raw = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise CorruptDataError(f"{path} is not valid JSON: {exc}", path=path) from exc
    except OSError as exc:
        raise StorageIOError(f"Cannot read {path}: {exc}", path=path) from exc

    try:
        records = TypeAdapter(List[model]).validate_python(raw)  # type: ignore[valid-type]
    except ValidationError as exc:
        raise CorruptDataError(
            f"{path} does not contain a list of {model.__name__} records: {exc}", path=path
        ) from exc

    log.info("Records loaded", extra={"path": str(path), "count": len(records)})
    return LoadResult(records=records, found=True)


class FileBackedStore(RecordStore[M]):
    """
    A RecordStore bound to one JSON file.

    `save` writes the store's contents to the file. `load` replaces the
    contents entirely with the file's records; nothing is merged.
    """

    def __init__(self, path: Path | str, model: Type[M]) -> None:
        super().__init__()
        self.path = Path(path)
        self.model = model

    def save(self) -> None:
        save_records(self.get_all(), self.path)

    def load(self) -> bool:
        """
        Restore the store from its file.

        Returns False when there was no prior data; the store is then empty.
        On a read or parse error the current contents are left untouched.
        """
        result = load_records(self.path, self.model)
        self.replace_all(result.records)
        return result.found


__all__ = ["LoadResult", "save_records", "load_records", "FileBackedStore"]
