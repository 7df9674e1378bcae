#!/usr/bin/env python3
"""Script to save an inventory log and reload it in a new session."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from recordkeeper.config import get_settings
from recordkeeper.application.inventory_service import InventoryApp

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Save seeded items, then load and print them from a fresh app."""
    try:
        file_path = get_settings().inventory_file

        app = InventoryApp(file_path)
        app.seed_sample_data()
        app.save_data()

        print("\n--- New Session ---\n")
        new_app = InventoryApp(file_path)
        result = new_app.load_data()
        new_app.print_all_items()
        return 0 if result.ok else 1

    except Exception as e:
        logger.error(f"Inventory program failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
