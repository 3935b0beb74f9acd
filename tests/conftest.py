"""
Pytest fixtures for esimqa tests.

This module provides the fixtures and hooks shared by the offline unit
tests and the live web/API suites.
"""

import logging
import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from esimqa.config import Settings, reload_settings  # noqa: E402


def pytest_addoption(parser):
    """Register the --live switch."""
    parser.addoption(
        "--live",
        action="store_true",
        default=False,
        help="Run tests against the live storefront and partner API",
    )


def pytest_configure(config):
    """Register markers and configure suite logging."""
    config.addinivalue_line(
        "markers", "live: talks to the live storefront or partner API"
    )
    config.addinivalue_line("markers", "web: storefront purchase flow")
    config.addinivalue_line("markers", "api: partner API scenarios")

    log_settings = reload_settings().logging
    logging.getLogger("esimqa").setLevel(log_settings.level)


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless --live or ESIMQA_LIVE is set."""
    if config.getoption("--live") or reload_settings().live:
        return

    skip_live = pytest.mark.skip(
        reason="live test: pass --live or set ESIMQA_LIVE=true")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Store each phase's report on the item for failure-aware fixtures."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Settings for the whole session, read once from env/TOML."""
    return reload_settings()
