"""
Base Page Object class with common functionality for all pages.
"""

import logging
import re
from decimal import Decimal
from typing import Optional

from playwright.async_api import Locator, Page, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from ..config import DEFAULT_BASE_URL
from ..parsing import clean_text, parse_decimal

logger = logging.getLogger(__name__)

DEFAULT_SOFT_TIMEOUT = 2000
DEFAULT_EXPECT_TIMEOUT = 5000


class BasePage:
    """Base class for all Page Objects with common functionality."""

    def __init__(
        self,
        page: Page,
        base_url: str = DEFAULT_BASE_URL,
        soft_timeout: int = DEFAULT_SOFT_TIMEOUT,
        expect_timeout: int = DEFAULT_EXPECT_TIMEOUT,
    ):
        self.page = page
        self.base_url = base_url.rstrip("/")
        self.soft_timeout = soft_timeout
        self.expect_timeout = expect_timeout

    # Common selectors
    @property
    def success_notification(self) -> Locator:
        """Green notification bar shown after add-to-cart and similar."""
        return self.page.locator(".bar-notification.success")

    @property
    def error_notification(self) -> Locator:
        """Red notification bar."""
        return self.page.locator(".bar-notification.error")

    # Common navigation methods
    async def navigate(self, path: str = "") -> None:
        """Navigate to a path relative to the shop's base URL."""
        url = f"{self.base_url}/{path.lstrip('/')}" if path else self.base_url
        logger.debug("Navigating to %s", url)
        await self.page.goto(url)

    async def get_page_title(self) -> str:
        return await self.page.title()

    async def get_current_url(self) -> str:
        return self.page.url

    async def refresh_page(self) -> None:
        """Reload the current document."""
        await self.page.reload()

    async def settle(self, state: str = "domcontentloaded") -> None:
        """Wait for the document to reach ``state`` after a gesture."""
        await self.page.wait_for_load_state(state)

    # Common interaction methods
    async def click_and_settle(
        self, locator: Locator, state: str = "domcontentloaded"
    ) -> None:
        """Click an element and wait for the resulting document to load."""
        await locator.click()
        await self.settle(state)

    async def fill_input(
        self, locator: Locator, value: str, clear_first: bool = False
    ) -> None:
        """Fill an input field."""
        if clear_first:
            await locator.clear()
        await locator.fill(value)

    # Queries
    async def read_text(self, locator: Locator) -> str:
        """Text content of ``locator``, stripped; ``""`` when it has none."""
        return clean_text(await locator.text_content())

    async def read_decimal(self, locator: Locator) -> Decimal:
        """Text content of ``locator`` parsed as a decimal, 0 when unparsable."""
        return parse_decimal(await locator.text_content())

    async def probe(
        self, locator: Locator, timeout: Optional[int] = None
    ) -> Optional[Locator]:
        """
        Look for an optional element.

        Returns the first match once it is visible, or None if it does not
        become visible within ``timeout`` milliseconds. Only a timeout means
        "absent"; any other automation error propagates to the caller.
        """
        target = locator.first
        budget = self.soft_timeout if timeout is None else timeout
        try:
            await target.wait_for(state="visible", timeout=budget)
        except PlaywrightTimeoutError:
            logger.debug("Optional element absent after %sms", budget)
            return None
        return target

    # Common assertion helpers
    async def assert_url_matches(self, pattern: str) -> None:
        """Assert that the current URL matches a regular expression."""
        await expect(self.page).to_have_url(re.compile(pattern))
