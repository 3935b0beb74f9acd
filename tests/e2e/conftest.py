"""
Pytest fixtures for the Playwright storefront tests.

This module provides the Playwright driver, browser, per-test context
and page, and the page object fixtures used by the web scenarios.
"""

import logging
import os
from typing import AsyncGenerator

import pytest_asyncio
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
)

from esimqa.config import Settings
from esimqa.pages import HomePage

logger = logging.getLogger(__name__)

SCREENSHOT_DIR = os.environ.get("ESIMQA_SCREENSHOT_DIR", "test-results/screenshots")


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def playwright() -> AsyncGenerator[Playwright, None]:
    """Create a Playwright instance for the test session."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser(
    playwright: Playwright, settings: Settings
) -> AsyncGenerator[Browser, None]:
    """Launch the configured browser engine once per session."""
    browser_type: BrowserType = getattr(playwright, settings.web.browser)
    browser = await browser_type.launch(
        headless=settings.web.headless,
        slow_mo=settings.web.slow_mo,
    )
    yield browser
    await browser.close()


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser: Browser, settings: Settings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies,
    storage, and other browser state.
    """
    context = await browser.new_context(
        viewport={
            "width": settings.web.viewport_width,
            "height": settings.web.viewport_height,
        },
        base_url=settings.web.base_url,
        locale="en-US",
    )
    context.set_default_timeout(settings.web.timeout)

    yield context
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(
    context: BrowserContext, settings: Settings
) -> AsyncGenerator[Page, None]:
    """Create a new page for each test."""
    page = await context.new_page()
    page.set_default_navigation_timeout(settings.web.timeout)
    page.set_default_timeout(settings.web.timeout)

    yield page
    await page.close()


# =============================================================================
# Page Object Fixtures
# =============================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def home_page(
    request, page: Page, settings: Settings
) -> AsyncGenerator[HomePage, None]:
    """Create a HomePage instance; screenshot it if the test failed."""
    home = HomePage(page, settings.web.base_url)

    yield home

    rep_call = getattr(request.node, "rep_call", None)
    if rep_call is not None and rep_call.failed:
        os.makedirs(SCREENSHOT_DIR, exist_ok=True)
        path = os.path.join(SCREENSHOT_DIR, f"{request.node.name}.png")
        await home.take_screenshot(path)
        logger.info("Saved failure screenshot to %s", path)
