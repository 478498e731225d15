"""
Inventory demo: seed items, save them, and restore them in a fresh session.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional

from recordkeeper.config import Settings
from recordkeeper.demos.abstract import AbstractDemo, DemoResult
from recordkeeper.domain.models import InventoryItem
from recordkeeper.persistence import FileBackedStore
from recordkeeper.reporter import format_inventory_item
from recordkeeper.utils.logging import get_logger

log = get_logger(__name__)

SAMPLE_ITEMS = (
    (1, "Laptop", 5),
    (2, "Printer", 2),
    (3, "Desk Chair", 10),
    (4, "Mouse", 25),
    (5, "Keyboard", 15),
)


class InventoryDemo(AbstractDemo):
    name: str = "inventory"
    description: str = "Persist inventory items to JSON and reload them."

    def __init__(self, path: Optional[Path] = None, now: Optional[datetime] = None) -> None:
        self._path = path
        self._now = now

    def seed(self, store: FileBackedStore[InventoryItem]) -> None:
        now = self._now or datetime.now()
        for item_id, name, quantity in SAMPLE_ITEMS:
            store.add(InventoryItem(id=item_id, name=name, quantity=quantity, date_added=now))

    def execute(self, settings: Settings) -> DemoResult:
        path = self._path or settings.resolve(settings.inventory_file)

        writer = FileBackedStore(path, InventoryItem)
        self.seed(writer)
        writer.save()

        log.info("Simulating new session", extra={"path": str(path)})
        reader = FileBackedStore(path, InventoryItem)
        found = reader.load()

        items = reader.get_all()
        lines: List[str] = []
        if not found:
            lines.append("No saved data file found.")
        if not items:
            lines.append("No inventory items found.")
        else:
            lines.append("Inventory Items:")
            lines.extend(format_inventory_item(item) for item in items)
        return DemoResult(demo=self.name, lines=lines, records=len(items))


__all__ = ["InventoryDemo", "SAMPLE_ITEMS"]
