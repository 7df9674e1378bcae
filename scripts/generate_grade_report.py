#!/usr/bin/env python3
"""Script to grade a student results file and write the report."""

import logging
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from recordkeeper.config import get_settings
from recordkeeper.domain.errors import ErrorKind, RecordError
from recordkeeper.application.grading_service import GradingService

logging.basicConfig(
    level=get_settings().log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

ERROR_PREFIXES = {
    ErrorKind.IO_FAILURE: "File error",
    ErrorKind.MISSING_FIELD: "Missing field error",
    ErrorKind.INVALID_FORMAT: "Format error",
    ErrorKind.INVALID_ARGUMENT: "Score error",
}


def main():
    """Read students, write the graded report."""
    service = GradingService()
    try:
        service.generate_report()
        print(f"Report generated successfully: {service.output_file_path}")
        return 0
    except RecordError as e:
        prefix = ERROR_PREFIXES.get(e.kind, "Error")
        print(f"{prefix}: {e.message}")
        return 1
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
