"""
Search Page Object for the header search box and the results grid.
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Literal

from playwright.async_api import Locator, expect

from ..parsing import find_order_violation, name_sort_key, parse_decimal
from .base_page import BasePage

logger = logging.getLogger(__name__)

PageSize = Literal[4, 8, 12]


class SortOption(str, Enum):
    """Labels of the results "Sort by" dropdown."""

    POSITION = "Position"
    NAME_ASC = "Name: A to Z"
    NAME_DESC = "Name: Z to A"
    PRICE_ASC = "Price: Low to High"
    PRICE_DESC = "Price: High to Low"
    CREATED_ON = "Created on"


class ViewMode(str, Enum):
    """Labels of the results "View as" dropdown."""

    GRID = "Grid"
    LIST = "List"


class SearchPage(BasePage):
    """Page Object for product search and result filtering."""

    # Selectors
    @property
    def search_input(self) -> Locator:
        return self.page.locator("#small-searchterms")

    @property
    def search_button(self) -> Locator:
        return self.page.locator(".search-box-button")

    @property
    def view_mode_select(self) -> Locator:
        return self.page.locator("#products-viewmode")

    @property
    def sort_by_select(self) -> Locator:
        return self.page.locator("#products-orderby")

    @property
    def page_size_select(self) -> Locator:
        return self.page.locator("#products-pagesize")

    @property
    def product_grid(self) -> Locator:
        return self.page.locator(".product-grid")

    @property
    def product_items(self) -> Locator:
        return self.page.locator(".product-item")

    @property
    def product_titles(self) -> Locator:
        return self.page.locator(".product-title a")

    @property
    def product_prices(self) -> Locator:
        return self.page.locator(".price.actual-price")

    @property
    def no_results_message(self) -> Locator:
        return self.page.locator(".no-result")

    # Actions
    async def navigate_to_home_page(self) -> None:
        await self.navigate("/")

    async def search_for_product(self, search_term: str) -> None:
        logger.debug("Searching for %r", search_term)
        await self.search_input.click()
        await self.fill_input(self.search_input, search_term, clear_first=True)
        await self.click_and_settle(self.search_button)

    async def sort_by_option(self, option: SortOption | str) -> None:
        label = SortOption(option).value
        await self.sort_by_select.select_option(label=label)
        await self.settle("networkidle")

    async def change_view_mode(self, mode: ViewMode | str) -> None:
        await self.view_mode_select.select_option(label=ViewMode(mode).value)
        await self.settle("networkidle")

    async def set_page_size(self, size: PageSize) -> None:
        await self.page_size_select.select_option(label=str(size))
        await self.settle("networkidle")

    async def click_product(self, title: str) -> None:
        await self.get_product_by_title(title).locator(".product-title a").click()

    # Queries
    def get_product_by_title(self, title: str) -> Locator:
        return self.product_items.filter(has_text=title)

    async def get_product_count(self) -> int:
        return await self.product_items.count()

    async def _wait_for_results(self) -> bool:
        """Settle and wait for the grid; False when the search found nothing."""
        await self.settle()
        if await self.product_items.count() == 0:
            return False
        await self.product_items.first.wait_for(state="visible")
        return True

    async def get_product_titles(self) -> list[str]:
        if not await self._wait_for_results():
            return []
        return await self.product_titles.all_text_contents()

    async def get_product_prices(self) -> list[Decimal]:
        if not await self._wait_for_results():
            return []
        return [parse_decimal(text) for text in await self.product_prices.all_text_contents()]

    # Assertions
    async def verify_on_search_results_page(self) -> None:
        await self.assert_url_matches(r".*/search")

    async def verify_search_results_displayed(self) -> None:
        await expect(self.product_items.first).to_be_visible()

    async def verify_no_results_displayed(self) -> None:
        count = await self.get_product_count()
        assert count == 0, f"Expected no search results, found {count}"
        await expect(self.no_results_message).to_be_visible()

    async def verify_products_contain_keyword(self, keyword: str) -> None:
        titles = await self.get_product_titles()
        assert titles, f"Expected search results to check for {keyword!r}"
        lower_keyword = keyword.lower()
        for title in titles:
            assert lower_keyword in title.lower(), (
                f"Result {title.strip()!r} does not contain {keyword!r}"
            )

    @staticmethod
    def _verify_order(values: list, descending: bool, what: str, key=None) -> None:
        assert values, f"Expected search results to verify sorting by {what}"
        index = find_order_violation(values, descending=descending, key=key)
        direction = "descending" if descending else "ascending"
        assert index is None, (
            f"Results not sorted by {what} {direction}: "
            f"{values[index]!r} before {values[index + 1]!r} in {values!r}"
        )

    async def verify_products_sorted_by_price_ascending(self) -> None:
        self._verify_order(await self.get_product_prices(), False, "price")

    async def verify_products_sorted_by_price_descending(self) -> None:
        self._verify_order(await self.get_product_prices(), True, "price")

    async def verify_products_sorted_by_name_ascending(self) -> None:
        self._verify_order(
            await self.get_product_titles(), False, "name", key=name_sort_key
        )

    async def verify_products_sorted_by_name_descending(self) -> None:
        self._verify_order(
            await self.get_product_titles(), True, "name", key=name_sort_key
        )

    async def verify_page_size_limit(self, expected_size: int) -> None:
        count = await self.get_product_count()
        assert count <= expected_size, (
            f"Expected at most {expected_size} results per page, found {count}"
        )

    async def verify_price_in_range(self, min_price: Decimal | int,
                                    max_price: Decimal | int) -> None:
        low, high = Decimal(min_price), Decimal(max_price)
        prices = await self.get_product_prices()
        assert prices, f"Expected search results to check against [{low}, {high}]"
        for price in prices:
            assert low <= price <= high, f"Price {price} outside [{low}, {high}]"
