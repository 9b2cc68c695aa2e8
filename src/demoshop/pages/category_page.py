"""
Category Page Object for catalog browsing via the top menu.
"""

from playwright.async_api import Locator, expect

from .base_page import BasePage


class CategoryPage(BasePage):
    """Page Object for category, sub-category and homepage product grids."""

    # Selectors
    @property
    def top_menu_items(self) -> Locator:
        return self.page.locator(".top-menu a")

    @property
    def sub_category_links(self) -> Locator:
        return self.page.locator(".sub-category-item a")

    @property
    def page_title(self) -> Locator:
        return self.page.locator(".page-title h1")

    @property
    def product_items(self) -> Locator:
        return self.page.locator(".product-item")

    @property
    def product_titles(self) -> Locator:
        return self.page.locator(".product-title a")

    @property
    def featured_products(self) -> Locator:
        return self.page.locator(".product-grid .product-item")

    @property
    def homepage_products(self) -> Locator:
        return self.page.locator(".home-page-product-grid .product-item")

    # Actions
    async def navigate_to_category(self, category_name: str) -> None:
        """Open the home page and follow a top menu entry."""
        await self.navigate("/")
        await self.click_top_menu_category(category_name)

    async def click_top_menu_category(self, category_name: str) -> None:
        link = self.top_menu_items.filter(has_text=category_name).first
        await self.click_and_settle(link)

    async def navigate_to_sub_category(self, sub_category_name: str) -> None:
        link = self.sub_category_links.filter(has_text=sub_category_name).first
        await self.click_and_settle(link)

    async def click_product_by_title(self, product_title: str) -> None:
        await self.product_titles.filter(has_text=product_title).first.click()

    async def click_product_by_index(self, index: int) -> None:
        await self.product_titles.nth(index).click()

    async def click_featured_product(self, index: int) -> None:
        await self.featured_products.nth(index).locator(".product-title a").click()

    async def click_homepage_product(self, index: int) -> None:
        await self.homepage_products.nth(index).locator(".product-title a").click()

    # Queries
    async def get_product_count(self) -> int:
        return await self.product_items.count()

    async def get_product_titles(self) -> list[str]:
        await self.settle()
        await self.product_items.first.wait_for(state="visible")
        return await self.product_titles.all_text_contents()

    async def get_featured_products_count(self) -> int:
        return await self.featured_products.count()

    async def get_homepage_products_count(self) -> int:
        return await self.homepage_products.count()

    async def get_sub_category_names(self) -> list[str]:
        return [name.strip() for name in await self.sub_category_links.all_text_contents()]

    # Assertions
    async def verify_category_page_loaded(self, category_name: str) -> None:
        await expect(self.page_title).to_contain_text(category_name)

    async def verify_products_displayed(self) -> None:
        """If the grid has items, the first one must be visible."""
        if await self.product_items.count() > 0:
            await expect(self.product_items.first).to_be_visible()

    async def verify_sub_categories_displayed(self) -> None:
        await expect(self.sub_category_links.first).to_be_visible()
