#!/usr/bin/env python3
"""Script to print warehouse stock and demonstrate error reporting."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from recordkeeper.config import get_settings
from recordkeeper.application.warehouse_service import WarehouseManager

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Seed stock and run the demonstration."""
    try:
        manager = WarehouseManager()
        manager.seed_data()
        manager.run_demo()
        return 0
    except Exception as e:
        logger.error(f"Warehouse program failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
