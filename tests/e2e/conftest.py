"""
Pytest fixtures for Playwright E2E tests.

This module provides fixtures for the browser session, per-test contexts
and pages, page objects, and the shop accounts the flows log in with.

Every async fixture runs on the session event loop so the session-scoped
Playwright objects can be shared by all tests.
"""

import logging
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from playwright.async_api import (
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
    async_playwright,
    expect,
)

from demoshop.accounts import register_account
from demoshop.config import Settings, get_settings
from demoshop.credentials import CredentialStore, Credentials, generate_unique_email
from demoshop.pages import (
    CartPage,
    CategoryPage,
    LoginPage,
    ProductDetailsPage,
    RegistrationPage,
    SearchPage,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Suite settings, with artifact directories created."""
    settings = get_settings()
    settings.ensure_directories()
    expect.set_options(timeout=settings.expect_timeout)
    logger.info("Running against %s with %s", settings.base_url, settings.browser.name)
    return settings


@pytest.fixture(scope="session")
def base_url(settings: Settings) -> str:
    return settings.base_url


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
    pytestconfig, playwright: Playwright, settings: Settings
) -> AsyncGenerator[Browser, None]:
    """
    Launch the configured browser once for the session.

    pytest-playwright's ``--browser``, ``--headed``, ``--browser-channel``
    and ``--slowmo`` options override the ``E2E_BROWSER_*`` settings.
    """
    browser_settings = settings.browser.with_overrides(
        name=next(iter(pytestconfig.getoption("--browser") or []), None),
        headed=pytestconfig.getoption("--headed"),
        channel=pytestconfig.getoption("--browser-channel"),
        slow_mo=pytestconfig.getoption("--slowmo"),
    )
    browser_type: BrowserType = getattr(playwright, browser_settings.name)
    browser = await browser_type.launch(**browser_settings.to_launch_options())
    yield browser
    await browser.close()


async def _new_context(browser: Browser, settings: Settings) -> BrowserContext:
    context = await browser.new_context(
        **settings.browser.to_context_options(settings.base_url)
    )
    context.set_default_timeout(settings.timeout)
    context.set_default_navigation_timeout(settings.navigation_timeout)
    return context


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    request, browser: Browser, settings: Settings
) -> AsyncGenerator[BrowserContext, None]:
    """
    Create a new browser context for each test.

    This provides isolation between tests with separate cookies, so each
    test starts logged out with its own empty guest cart.
    """
    context = await _new_context(browser, settings)
    if settings.record_trace:
        await context.tracing.start(screenshots=True, snapshots=True)

    yield context

    if settings.record_trace:
        await context.tracing.stop(path=settings.trace_path(request.node.nodeid))
    await context.close()


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, context: BrowserContext, settings: Settings) -> AsyncGenerator[Page, None]:
    """Create a new page for each test, screenshotting it if the test fails."""
    page = await context.new_page()

    yield page

    report = getattr(request.node, "rep_call", None)
    if settings.screenshot_on_failure and report is not None and report.failed:
        path = settings.screenshot_path(request.node.nodeid)
        await page.screenshot(path=str(path), full_page=True)
        logger.info("Saved failure screenshot to %s", path)
    await page.close()


@pytest.hookimpl(tryfirst=True, hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Hook to store test result for the page fixture's screenshot."""
    outcome = yield
    rep = outcome.get_result()
    setattr(item, f"rep_{rep.when}", rep)


# =============================================================================
# Page Object Fixtures
# =============================================================================

def _page_kwargs(settings: Settings) -> dict:
    return {
        "base_url": settings.base_url,
        "soft_timeout": settings.soft_timeout,
        "expect_timeout": settings.expect_timeout,
    }


@pytest.fixture
def login_page(page: Page, settings: Settings) -> LoginPage:
    """Create a LoginPage instance."""
    return LoginPage(page, **_page_kwargs(settings))


@pytest.fixture
def registration_page(page: Page, settings: Settings) -> RegistrationPage:
    """Create a RegistrationPage instance."""
    return RegistrationPage(page, **_page_kwargs(settings))


@pytest.fixture
def cart_page(page: Page, settings: Settings) -> CartPage:
    """Create a CartPage instance."""
    return CartPage(page, **_page_kwargs(settings))


@pytest.fixture
def category_page(page: Page, settings: Settings) -> CategoryPage:
    """Create a CategoryPage instance."""
    return CategoryPage(page, **_page_kwargs(settings))


@pytest.fixture
def product_page(page: Page, settings: Settings) -> ProductDetailsPage:
    """Create a ProductDetailsPage instance."""
    return ProductDetailsPage(page, **_page_kwargs(settings))


@pytest.fixture
def search_page(page: Page, settings: Settings) -> SearchPage:
    """Create a SearchPage instance."""
    return SearchPage(page, **_page_kwargs(settings))


# =============================================================================
# Account Fixtures
# =============================================================================

@pytest.fixture(scope="session")
def account_password(settings: Settings) -> str:
    """Shared password for generated accounts; errors if it is not configured."""
    return settings.require_password()


@pytest.fixture(scope="session")
def credential_store(settings: Settings) -> CredentialStore:
    return CredentialStore(settings.credentials_file)


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def registered_user(
    browser: Browser,
    settings: Settings,
    credential_store: CredentialStore,
    account_password: str,
) -> Credentials:
    """
    An existing account, registered at most once per run.

    Reuses the stored credential record when there is one. Otherwise
    registers an account in a throwaway context and stores it, so later
    runs and the login flows share it.
    """
    credentials = credential_store.load()
    if credentials is not None:
        return credentials

    context = await _new_context(browser, settings)
    try:
        page = await context.new_page()
        credentials = await register_account(
            page, account_password, base_url=settings.base_url
        )
    finally:
        await context.close()

    credential_store.save(credentials)
    return credentials


@pytest_asyncio.fixture(loop_scope="session")
async def fresh_user(page: Page, settings: Settings, account_password: str) -> Credentials:
    """A new account registered in this test's page, which stays logged in."""
    return await register_account(page, account_password, base_url=settings.base_url)


# =============================================================================
# Test Data Generators
# =============================================================================

@pytest.fixture
def unique_email() -> str:
    """Generate a unique email address for tests."""
    return generate_unique_email()
