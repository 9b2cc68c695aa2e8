"""
Product Details Page Object: price, stock, recommendations and add-to-cart.
"""

import logging
from decimal import Decimal

from playwright.async_api import Locator, expect

from ..parsing import clean_text, parse_decimal
from .base_page import BasePage

logger = logging.getLogger(__name__)


class ProductDetailsPage(BasePage):
    """Page Object for a single product's detail page."""

    # Selectors - Product essentials
    @property
    def product_name(self) -> Locator:
        return self.page.locator(".product-name h1")

    @property
    def product_image(self) -> Locator:
        return self.page.locator(".gallery .picture img, .picture img").first

    @property
    def short_description(self) -> Locator:
        return self.page.locator(".short-description")

    @property
    def full_description(self) -> Locator:
        return self.page.locator(".full-description")

    @property
    def product_price(self) -> Locator:
        return self.page.locator(".product-price span[itemprop='price']").first

    @property
    def old_price(self) -> Locator:
        return self.page.locator(".product-essential .old-product-price span")

    @property
    def stock_status(self) -> Locator:
        return self.page.locator(".stock .value")

    @property
    def add_to_cart_button(self) -> Locator:
        return self.page.locator(
            ".add-to-cart-button, input[value='Add to cart']"
        ).first

    @property
    def quantity_input(self) -> Locator:
        return self.page.locator(".qty-input, input.qty").first

    @property
    def email_friend_button(self) -> Locator:
        return self.page.locator(".email-a-friend-button")

    @property
    def add_to_compare_button(self) -> Locator:
        return self.page.locator(".add-to-compare-list-button")

    # Selectors - Reviews and tags
    @property
    def product_reviews_link(self) -> Locator:
        return self.page.locator(".product-review-links a").first

    @property
    def add_review_link(self) -> Locator:
        return self.page.locator(".product-review-links a").nth(1)

    @property
    def product_rating(self) -> Locator:
        return self.page.locator(".product-review-box .rating")

    @property
    def product_tags(self) -> Locator:
        return self.page.locator(".product-tags-box")

    @property
    def product_tag_items(self) -> Locator:
        return self.product_tags.locator(".product-tags-list li.tag")

    # Selectors - Recommendations
    @property
    def also_purchased_section(self) -> Locator:
        return self.page.locator(".also-purchased-products-grid")

    @property
    def also_purchased_products(self) -> Locator:
        return self.page.locator(".also-purchased-products-grid .product-item")

    @property
    def related_products_section(self) -> Locator:
        return self.page.locator(".related-products-grid")

    @property
    def related_products(self) -> Locator:
        return self.page.locator(".related-products-grid .product-item")

    @property
    def free_shipping(self) -> Locator:
        return self.page.locator(".free-shipping")

    # Actions
    async def navigate_to_product(self, product_path: str) -> None:
        """Open a product by its SEO path, e.g. ``/computing-and-internet``."""
        await self.navigate(product_path)

    async def click_add_to_cart(self) -> None:
        await self.add_to_cart_button.click()

    async def click_email_friend(self) -> None:
        await self.email_friend_button.click()

    async def click_add_to_compare(self) -> None:
        await self.add_to_compare_button.click()

    async def click_reviews(self) -> None:
        await self.product_reviews_link.click()

    async def set_quantity(self, quantity: int) -> None:
        await self.quantity_input.fill(str(quantity))

    async def add_to_cart(self, quantity: int = 1) -> None:
        """Add the product, typing a quantity first when it is above one."""
        if quantity > 1:
            await self.set_quantity(quantity)
        logger.debug("Adding %d item(s) to cart from %s", quantity, self.page.url)
        await self.click_add_to_cart()
        await self.settle()

    async def click_also_purchased_product(self, index: int) -> None:
        await self.also_purchased_products.nth(index).locator(".product-title a").click()

    async def click_related_product(self, index: int) -> None:
        await self.related_products.nth(index).locator(".product-title a").click()

    async def close_success_notification(self) -> None:
        close_button = self.success_notification.locator(".close")
        if await close_button.is_visible():
            await close_button.click()

    # Queries
    async def get_product_price(self) -> Decimal:
        return parse_decimal(await self.product_price.text_content())

    async def get_product_name(self) -> str:
        return clean_text(await self.product_name.text_content())

    async def has_old_price(self) -> bool:
        """Whether a struck-through previous price is shown."""
        if await self.old_price.count() == 0:
            return False
        return await self.probe(self.old_price) is not None

    async def has_free_shipping(self) -> bool:
        return await self.probe(self.free_shipping) is not None

    async def has_product_tags(self) -> bool:
        return await self.product_tag_items.count() > 0

    async def get_also_purchased_products_count(self) -> int:
        return await self.also_purchased_products.count()

    async def get_related_products_count(self) -> int:
        return await self.related_products.count()

    async def get_success_notification_text(self) -> str:
        return await self.success_notification.text_content() or ""

    # Assertions
    async def verify_on_product_details_page(self) -> None:
        await expect(self.product_name).to_be_visible()
        await expect(self.product_price).to_be_visible()

    async def verify_product_name(self, expected_name: str) -> None:
        await expect(self.product_name).to_contain_text(expected_name)

    async def verify_product_has_image(self) -> None:
        await expect(self.product_image).to_be_visible()

    async def verify_product_has_description(self) -> None:
        if await self.probe(self.short_description) is None:
            assert await self.probe(self.full_description) is not None, (
                "Expected a short or full product description to be visible"
            )

    async def verify_product_price(self) -> None:
        await expect(self.product_price).to_be_visible()
        price_text = await self.product_price.text_content()
        assert clean_text(price_text), "Product price is empty"
        price = parse_decimal(price_text)
        assert price > 0, f"Expected a positive price, got {price_text!r}"

    async def verify_stock_status(self) -> None:
        await expect(self.stock_status).to_be_visible()

    async def verify_product_reviews_displayed(self) -> None:
        await expect(self.product_reviews_link).to_be_visible()

    async def verify_also_purchased_section(self) -> None:
        await expect(self.also_purchased_section).to_be_visible()

    async def verify_related_products_section(self) -> None:
        await expect(self.related_products_section).to_be_visible()

    async def verify_product_tags(self) -> None:
        """When the product has tags, the tag box and first tag are visible."""
        if await self.has_product_tags():
            await expect(self.product_tags).to_be_visible()
            await expect(self.product_tag_items.first).to_be_visible()

    async def verify_free_shipping(self) -> None:
        await expect(self.free_shipping).to_be_visible()
        await expect(self.free_shipping).to_contain_text("Free shipping")

    async def verify_add_to_cart_success(self) -> None:
        await expect(self.success_notification).to_be_visible(
            timeout=self.expect_timeout
        )

    async def verify_add_to_cart_error(self) -> None:
        await expect(self.error_notification).to_be_visible(
            timeout=self.expect_timeout
        )
