"""Application service for the persisted inventory log."""

import logging
from datetime import datetime
from typing import Optional

from recordkeeper.application.report_writer import ReportWriter
from recordkeeper.domain.entities import InventoryItem
from recordkeeper.infrastructure.persistent_log import PersistenceResult, PersistentLog

logger = logging.getLogger(__name__)


class InventoryApp:
    """Seeds, saves, reloads and prints an inventory log."""

    def __init__(self, file_path: Optional[str] = None, writer: Optional[ReportWriter] = None):
        self.writer = writer or ReportWriter()
        self.log: PersistentLog[InventoryItem] = PersistentLog(InventoryItem, file_path)

    def seed_sample_data(self, now: Optional[datetime] = None):
        now = now or datetime.now()
        self.log.append(InventoryItem(1, "Laptop", 5, now))
        self.log.append(InventoryItem(2, "Mouse", 20, now))
        self.log.append(InventoryItem(3, "Keyboard", 15, now))
        self.log.append(InventoryItem(4, "Monitor", 10, now))
        self.log.append(InventoryItem(5, "Printer", 3, now))

    def save_data(self) -> PersistenceResult:
        result = self.log.flush()
        self.writer.line(result.message)
        return result

    def load_data(self) -> PersistenceResult:
        result = self.log.reload()
        self.writer.line(result.message)
        return result

    def print_all_items(self):
        self.writer.entities(self.log.list_all())
