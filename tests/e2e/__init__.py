"""
Demo Web Shop E2E Tests Package.

This package contains end-to-end tests for the Demo Web Shop storefront
using Playwright's async API and the page objects in ``demoshop.pages``.

Test Modules:
    - test_registration: Account creation and form validation
    - test_login: Login, logout and session persistence
    - test_cart: Adding, updating and removing cart items, totals, checkout
    - test_product_discovery: Categories and product detail pages
    - test_search: Keyword search, sorting, paging and view modes

Configuration:
    - conftest.py: Pytest fixtures
    - demoshop.config: E2E_* settings (see ``demoshop config``)

Running Tests:
    # Run all E2E tests
    PASSWORD=secret pytest -m e2e

    # Run specific test file
    pytest -m e2e tests/e2e/test_search.py

    # Run with a visible browser in slow motion
    E2E_BROWSER_HEADLESS=false E2E_BROWSER_SLOW_MO=500 pytest -m e2e

    # Record a trace per test
    E2E_RECORD_TRACE=true pytest -m e2e

Environment Variables:
    E2E_BASE_URL: Shop under test (default: https://demowebshop.tricentis.com)
    E2E_TEST_USER_PASSWORD / PASSWORD: Password for generated accounts
    E2E_CREDENTIALS_FILE: Stored account record (default: tests/testData.json)
    E2E_BROWSER_NAME: chromium, firefox or webkit (default: chromium)
"""
