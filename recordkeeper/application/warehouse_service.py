"""Application service for warehouse stock."""

import logging
from datetime import datetime, timedelta
from typing import Optional

from recordkeeper.application.report_writer import ReportWriter
from recordkeeper.domain.entities import ElectronicItem, GroceryItem
from recordkeeper.domain.errors import RecordError
from recordkeeper.infrastructure.repository import InventoryRepository

logger = logging.getLogger(__name__)


class WarehouseManager:
    """
    Manages electronics and groceries stock.

    Stock and removal operations report failures to the writer and carry on;
    they return False instead of raising.
    """

    def __init__(self, writer: Optional[ReportWriter] = None):
        self.writer = writer or ReportWriter()
        self.electronics: InventoryRepository[ElectronicItem] = InventoryRepository()
        self.groceries: InventoryRepository[GroceryItem] = InventoryRepository()

    def seed_data(self, now: Optional[datetime] = None):
        now = now or datetime.now()

        self.electronics.add(ElectronicItem(1, "Laptop", 10, "Dell", 24))
        self.electronics.add(ElectronicItem(2, "Smartphone", 20, "Samsung", 12))
        self.electronics.add(ElectronicItem(3, "Headphones", 15, "Sony", 6))

        self.groceries.add(GroceryItem(1, "Milk", 50, now + timedelta(days=7)))
        self.groceries.add(GroceryItem(2, "Bread", 30, now + timedelta(days=3)))
        self.groceries.add(GroceryItem(3, "Apples", 40, now + timedelta(days=14)))

    def print_all_items(self, repository: InventoryRepository):
        self.writer.entities(repository.list_all())

    def increase_stock(self, repository: InventoryRepository, item_id: int, quantity: int) -> bool:
        try:
            item = repository.get_by_id(item_id)
            updated = repository.update_quantity(item_id, item.quantity + quantity)
        except RecordError as e:
            logger.warning(f"Stock update failed for item {item_id}: {e.message}")
            self.writer.line(f"Error updating stock: {e.message}")
            return False

        self.writer.line(f"Stock updated for item ID {item_id}. New quantity: {updated.quantity}")
        return True

    def remove_item_by_id(self, repository: InventoryRepository, item_id: int) -> bool:
        try:
            repository.remove(item_id)
        except RecordError as e:
            logger.warning(f"Removal failed for item {item_id}: {e.message}")
            self.writer.line(f"Error removing item: {e.message}")
            return False

        self.writer.line(f"Item ID {item_id} removed successfully.")
        return True

    def run_demo(self):
        """Print stock and exercise the duplicate, missing and negative paths."""
        self.writer.heading("Grocery Items")
        self.print_all_items(self.groceries)

        self.writer.heading("Electronic Items")
        self.print_all_items(self.electronics)

        self.writer.heading("Testing Exceptions")
        try:
            self.electronics.add(ElectronicItem(1, "Tablet", 5, "Apple", 12))
        except RecordError as e:
            self.writer.line(f"Duplicate error: {e.message}")

        self.remove_item_by_id(self.groceries, 999)

        try:
            self.electronics.update_quantity(2, -5)
        except RecordError as e:
            self.writer.line(f"Quantity error: {e.message}")
