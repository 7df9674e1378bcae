#!/usr/bin/env python3
"""Script to process sample transactions against a savings account."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from recordkeeper.config import get_settings
from recordkeeper.application.finance_service import FinanceService

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Run the sample transactions."""
    try:
        FinanceService().run()
        return 0
    except Exception as e:
        logger.error(f"Finance program failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
