"""Settings read from environment variables."""

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    inventory_file: str
    students_file: str
    report_file: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        inventory_file=os.getenv("RECORDKEEPER_INVENTORY_FILE", "inventory.json"),
        students_file=os.getenv("RECORDKEEPER_STUDENTS_FILE", "students.txt"),
        report_file=os.getenv("RECORDKEEPER_REPORT_FILE", "report.txt"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
