"""
Page Object Model classes for the storefront.

These classes provide reusable selectors and methods for interacting
with the storefront pages the web scenarios drive.
"""

from .base_page import BasePage
from .home_page import DEFAULT_PACKAGE, DEFAULT_PACKAGE_LINK, HomePage

__all__ = [
    "BasePage",
    "HomePage",
    "DEFAULT_PACKAGE",
    "DEFAULT_PACKAGE_LINK",
]
