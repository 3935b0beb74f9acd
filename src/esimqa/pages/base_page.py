"""
Base Page Object class with common functionality for all pages.
"""

import logging
from typing import Optional

from playwright.async_api import Locator, Page, expect

logger = logging.getLogger(__name__)


class BasePage:
    """Base class for all Page Objects with common functionality."""

    def __init__(self, page: Page, base_url: str = "https://www.airalo.com"):
        self.page = page
        self.base_url = base_url.rstrip("/")

    # Common selectors
    def by_test_id(self, test_id: str) -> Locator:
        """Element carrying a ``data-testid`` attribute."""
        return self.page.get_by_test_id(test_id)

    def button(self, name: str, exact: bool = False) -> Locator:
        """Button located by its accessible name."""
        return self.page.get_by_role("button", name=name, exact=exact)

    # Common navigation methods
    async def navigate_to(self, path: str = "") -> None:
        """Navigate to a specific path."""
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url
        logger.debug("Navigating to %s", url)
        await self.page.goto(url)

    # Common interaction methods
    async def fill_input(
        self, locator: Locator, value: str, click_first: bool = True
    ) -> None:
        """Fill an input field, focusing it first as a user would."""
        if click_first:
            await locator.click()
        await locator.fill(value)

    async def read_text(self, locator: Locator) -> Optional[str]:
        """Raw text content of an element."""
        return await locator.text_content()

    # Common assertion helpers
    async def assert_visible(self, locator: Locator) -> None:
        """Assert that an element is visible."""
        await expect(locator).to_be_visible()

    # Screenshot helper
    async def take_screenshot(self, path: str) -> bytes:
        """Take a full-page screenshot at the given path."""
        return await self.page.screenshot(path=path, full_page=True)
