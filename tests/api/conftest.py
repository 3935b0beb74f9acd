"""
Pytest fixtures for the partner API tests.

Each test module gets its own request context and bearer token: the
token is acquired once in setup, shared read-only by every case of the
module, and the context is disposed in teardown whatever the outcome.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import async_playwright, Playwright

from esimqa.api import PartnerApiClient
from esimqa.config import Settings


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def api_playwright() -> AsyncGenerator[Playwright, None]:
    """Playwright driver used only for HTTP request contexts."""
    async with async_playwright() as pw:
        yield pw


@pytest_asyncio.fixture(scope="module", loop_scope="session")
async def api_client(
    api_playwright: Playwright, settings: Settings
) -> AsyncGenerator[PartnerApiClient, None]:
    """Authenticated partner API client for one test module."""
    if not settings.api.has_credentials:
        pytest.skip("ESIMQA_API_CLIENT_ID/ESIMQA_API_CLIENT_SECRET not set")

    client = await PartnerApiClient.create(api_playwright, settings.api)
    try:
        await client.authenticate(settings.api)

        yield client
    finally:
        await client.dispose()
