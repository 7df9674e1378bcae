"""
Tests for environment-driven settings.
"""

from recordkeeper.config import get_settings


def test_defaults(monkeypatch):
    for name in ("RECORDKEEPER_INVENTORY_FILE", "RECORDKEEPER_STUDENTS_FILE",
                 "RECORDKEEPER_REPORT_FILE", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.inventory_file == "inventory.json"
    assert settings.students_file == "students.txt"
    assert settings.report_file == "report.txt"
    assert settings.log_level == "INFO"


def test_log_level_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"
