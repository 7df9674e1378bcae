#!/usr/bin/env python3
"""Script to list patients and show prescriptions for an entered patient id."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from recordkeeper.config import get_settings
from recordkeeper.application.healthcare_service import HealthcareService

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def main():
    """Seed records, print patients and prompt for a patient id."""
    try:
        app = HealthcareService()
        app.seed_data()
        app.build_prescription_index()

        app.print_all_patients()
        app.prompt_for_prescriptions()
        return 0

    except (EOFError, KeyboardInterrupt):
        print("\nNo patient ID entered.")
        return 1
    except Exception as e:
        logger.error(f"Healthcare program failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
