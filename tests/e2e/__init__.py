"""
esimqa storefront E2E tests.

This package contains the live purchase-flow tests for the storefront,
driven through Playwright's async API.

Test Modules:
    - test_package_selection: currency change, country search, package
      selection and package detail verification

Page Objects:
    - esimqa.pages: Page Object Model classes for reusable selectors

Running Tests:
    # Run the web suite against the live storefront
    pytest tests/e2e/ --live

    # Run in a visible browser
    ESIMQA_WEB_HEADLESS=false pytest tests/e2e/ --live

    # Run with slow motion
    ESIMQA_WEB_SLOW_MO=500 pytest tests/e2e/ --live

Environment Variables:
    ESIMQA_WEB_BASE_URL: Storefront URL (default: https://www.airalo.com)
    ESIMQA_WEB_BROWSER: chromium, firefox or webkit (default: chromium)
    ESIMQA_WEB_HEADLESS: Run in headless mode (default: true)
    ESIMQA_WEB_TIMEOUT: Default timeout in ms (default: 30000)
    ESIMQA_WEB_COUNTRY: Country to search for (default: Japan)
"""
