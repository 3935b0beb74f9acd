"""
Home Page Object for the storefront purchase flow.

Covers everything from the landing page to the package detail panel:
consent banners, the currency switcher, country search, package
selection and the five detail fields.
"""

import logging

from playwright.async_api import Locator, Page

from ..models import PackageDetails
from ..text import format_quantity, normalize_whitespace, strip_currency_code
from .base_page import BasePage

logger = logging.getLogger(__name__)

# Moshi Moshi, the 1 GB / 7 day local Japan eSIM.
DEFAULT_PACKAGE = PackageDetails(
    title="Moshi Moshi",
    coverage="Japan",
    data="1 GB",
    validity="7 Days",
    price="$4.50",
)
DEFAULT_PACKAGE_LINK = (
    "Moshi Moshi Moshi Moshi  COVERAGE Japan  DATA 1 GB  "
    "VALIDITY 7 Days PRICE $4"
)


class HomePage(BasePage):
    """Page Object for the storefront home page and package panel."""

    def __init__(self, page: Page, base_url: str = "https://www.airalo.com"):
        super().__init__(page, base_url)
        self.path = "/"

    # Selectors
    @property
    def logo(self) -> Locator:
        """Storefront logo in the header."""
        return self.by_test_id("airalo-logo")

    @property
    def accept_privacy_button(self) -> Locator:
        """Cookie/privacy consent button."""
        return self.button("ACCEPT")

    @property
    def allow_notifications_button(self) -> Locator:
        """Push-notification opt-in button."""
        return self.button("ALLOW", exact=True)

    @property
    def search_input(self) -> Locator:
        """Country/region search box."""
        return self.by_test_id("search-input")

    @property
    def update_currency_button(self) -> Locator:
        """Confirms the currency picker selection."""
        return self.by_test_id("UPDATE-button")

    @property
    def operator_title(self) -> Locator:
        """Operator title block of the package panel."""
        return self.by_test_id("sim-detail-operator-title")

    @property
    def info_list(self) -> Locator:
        """Coverage/data/validity/price list of the package panel."""
        return self.by_test_id("sim-detail-info-list")

    def currency_menu(self, label: str) -> Locator:
        """Header entry showing the currently displayed currency."""
        return self.by_test_id(f"{label}-header-language")

    def currency_option(self, code: str) -> Locator:
        """Currency option in the picker."""
        return self.by_test_id(f"{code}-currency-select")

    def country_result(self, country: str) -> Locator:
        """Search result entry whose text contains the country name."""
        return self.page.locator("li").filter(has_text=country)

    def package_link(self, name: str) -> Locator:
        """Package card link, matched on its accessible name."""
        return self.page.get_by_role("link", name=name)

    # Actions
    async def goto(self) -> None:
        """Open the storefront landing page."""
        await self.navigate_to(self.path)

    async def accept_privacy(self) -> None:
        """Accept the privacy/cookie banner."""
        logger.debug("Accepting privacy banner")
        await self.accept_privacy_button.click()

    async def allow_notifications(self) -> None:
        """Grant the notification prompt (only shown in headed browsers)."""
        logger.debug("Allowing notifications")
        await self.page.wait_for_selector("//button[@id='wzrk-confirm']")
        await self.allow_notifications_button.click()

    async def change_currency(
        self, from_label: str = "€ EUR", to_code: str = "USD"
    ) -> None:
        """Switch the displayed currency: open picker, choose, confirm."""
        logger.debug("Changing currency from %s to %s", from_label, to_code)
        await self.currency_menu(from_label).click()
        await self.currency_option(to_code).click()
        await self.update_currency_button.click()

    async def select_country(self, country: str) -> None:
        """Search for a country and open it from the filtered list."""
        logger.debug("Selecting country %s", country)
        await self.fill_input(self.search_input, country)
        await self.country_result(country).click()

    async def select_package(self, name: str = DEFAULT_PACKAGE_LINK) -> None:
        """Open a package card by its visible text."""
        logger.debug("Selecting package %r", name)
        await self.package_link(name).click()

    # Field readers
    async def get_package_title(self, title: str = DEFAULT_PACKAGE.title) -> str:
        text = await self.read_text(self.operator_title.get_by_text(title))
        return normalize_whitespace(text)

    async def get_package_coverage(
        self, coverage: str = DEFAULT_PACKAGE.coverage
    ) -> str:
        text = await self.read_text(self.info_list.get_by_text(coverage))
        return normalize_whitespace(text)

    async def get_package_data(self, data: str = DEFAULT_PACKAGE.data) -> str:
        text = await self.read_text(self.info_list.get_by_text(data))
        return format_quantity(text)

    async def get_package_validity(
        self, validity: str = DEFAULT_PACKAGE.validity
    ) -> str:
        text = await self.read_text(self.info_list.get_by_text(validity))
        return format_quantity(text)

    async def get_package_price(
        self, price: str = DEFAULT_PACKAGE.price, currency: str = "USD"
    ) -> str:
        """Displayed price without its currency code, e.g. '$4.50'."""
        text = await self.read_text(
            self.info_list.get_by_text(f"{price} {currency}"))
        return strip_currency_code(text, currency)

    async def read_package_details(
        self, expected: PackageDetails = DEFAULT_PACKAGE
    ) -> PackageDetails:
        """
        Read the five package panel fields in check order.

        Args:
            expected: Golden record; its values locate each field.

        Returns:
            The cleaned values as displayed.
        """
        return PackageDetails(
            title=await self.get_package_title(expected.title),
            coverage=await self.get_package_coverage(expected.coverage),
            data=await self.get_package_data(expected.data),
            validity=await self.get_package_validity(expected.validity),
            price=await self.get_package_price(expected.price),
        )
