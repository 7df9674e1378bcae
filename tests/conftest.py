"""Shared fixtures for the record-keeper tests."""

import io
from datetime import datetime

import pytest

from recordkeeper.application.report_writer import ReportWriter
from recordkeeper.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Force settings to be re-read from the environment in every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def output():
    return io.StringIO()


@pytest.fixture
def writer(output):
    return ReportWriter(output)


@pytest.fixture
def fixed_now():
    return datetime(2024, 3, 15, 9, 30, 0)
