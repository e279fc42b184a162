"""Pytest configuration and shared fixtures."""

import os

import pytest

from config.settings import Settings

ONLINE_ENV = "HOTEL_SEARCH_ONLINE"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "online: drives a real browser against the live hotel site")


def pytest_collection_modifyitems(config, items):
    if os.getenv(ONLINE_ENV) == "1":
        return
    skip_online = pytest.mark.skip(reason=f"set {ONLINE_ENV}=1 to run live browser tests")
    for item in items:
        if "online" in item.keywords:
            item.add_marker(skip_online)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fast_settings(tmp_path):
    """Settings with sub-second waits and files under tmp_path."""
    return Settings(
        wait_timeout=0.2,
        optional_timeout=0.05,
        poll_frequency=0.01,
        settle_delay=0,
        pages=2,
        input_path=tmp_path / "RunSet.xlsx",
        output_path=tmp_path / "CityResults.xlsx",
        screenshot_dir=tmp_path / "screenshots",
    )


@pytest.fixture
def workbook_path(tmp_path):
    return tmp_path / "CityResults.xlsx"
