"""Pytest configuration and shared fixtures for the html2tbl test suite."""

import pytest

from html2tbl.options import TableOptions
from html2tbl.renderer import TblTableRenderer


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def renderer() -> TblTableRenderer:
    """Provide a renderer with default options."""
    return TblTableRenderer()


@pytest.fixture
def lenient_options() -> TableOptions:
    """Options that leave unconvertible tables in place."""
    return TableOptions(fail_on_table_errors=False)
