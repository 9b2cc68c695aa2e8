"""
Cart Page Object: shopping cart table, totals, coupons and the flyout cart.
"""

import logging
from decimal import Decimal

from playwright.async_api import Locator, expect

from ..parsing import parse_decimal, parse_int, strip_brackets
from .base_page import BasePage

logger = logging.getLogger(__name__)


class CartPage(BasePage):
    """Page Object for the shopping cart and the header cart widgets."""

    path = "/cart"

    # Selectors - Header
    @property
    def cart_link(self) -> Locator:
        return self.page.locator(".header-links a.ico-cart").first

    @property
    def cart_qty(self) -> Locator:
        """Header counter rendered as ``(N)``."""
        return self.page.locator(".cart-qty")

    @property
    def wishlist_link(self) -> Locator:
        return self.page.locator(".header-links a.ico-wishlist")

    @property
    def wishlist_qty(self) -> Locator:
        return self.page.locator(".wishlist-qty")

    # Selectors - Cart table
    @property
    def cart_table(self) -> Locator:
        return self.page.locator("table.cart")

    @property
    def cart_item_rows(self) -> Locator:
        return self.page.locator(".cart-item-row")

    @property
    def remove_checkbox(self) -> Locator:
        return self.page.locator("input[name='removefromcart']")

    @property
    def product_name(self) -> Locator:
        return self.page.locator("a.product-name")

    @property
    def product_picture(self) -> Locator:
        return self.page.locator(".product-picture img")

    @property
    def product_attributes(self) -> Locator:
        return self.page.locator(".attributes")

    @property
    def unit_price(self) -> Locator:
        return self.page.locator(".product-unit-price")

    @property
    def quantity_input(self) -> Locator:
        return self.page.locator("input[name^='itemquantity']")

    @property
    def product_subtotal(self) -> Locator:
        return self.page.locator(".product-subtotal")

    @property
    def edit_item_link(self) -> Locator:
        return self.page.locator(".edit-item a")

    # Selectors - Buttons
    @property
    def update_cart_button(self) -> Locator:
        return self.page.locator("input[name='updatecart']")

    @property
    def continue_shopping_button(self) -> Locator:
        return self.page.locator("input[name='continueshopping']")

    @property
    def checkout_button(self) -> Locator:
        return self.page.locator("button[name='checkout']")

    # Selectors - Coupons and gift cards
    @property
    def discount_coupon_input(self) -> Locator:
        return self.page.locator("input[name='discountcouponcode']")

    @property
    def apply_discount_button(self) -> Locator:
        return self.page.locator("input[name='applydiscountcouponcode']")

    @property
    def coupon_error_message(self) -> Locator:
        return self.page.locator(".coupon-box .message")

    @property
    def gift_card_input(self) -> Locator:
        return self.page.locator("input[name='giftcardcouponcode']")

    @property
    def apply_gift_card_button(self) -> Locator:
        return self.page.locator("input[name='applygiftcardcouponcode']")

    @property
    def gift_card_error_message(self) -> Locator:
        return self.page.locator(".giftcard-box .message")

    # Selectors - Totals
    @property
    def cart_total_table(self) -> Locator:
        return self.page.locator("table.cart-total")

    @property
    def sub_total(self) -> Locator:
        return self.page.locator(
            ".cart-total tbody tr:has-text('Sub-Total') .product-price"
        )

    @property
    def shipping(self) -> Locator:
        return self.page.locator(
            ".cart-total tbody tr:has-text('Shipping') td.cart-total-right"
        )

    @property
    def tax(self) -> Locator:
        return self.page.locator(".cart-total tbody tr:has-text('Tax') .product-price")

    @property
    def order_total(self) -> Locator:
        return self.page.locator(".cart-total tbody tr").last.locator(
            "td.cart-total-right"
        )

    @property
    def terms_of_service_checkbox(self) -> Locator:
        return self.page.locator("#termsofservice")

    @property
    def terms_of_service_warning(self) -> Locator:
        """Dialog shown when checkout is attempted without accepting the terms."""
        return self.page.locator("#terms-of-service-warning-box")

    @property
    def empty_cart_message(self) -> Locator:
        return self.page.locator(".order-summary-content")

    @property
    def success_message(self) -> Locator:
        return self.success_notification

    @property
    def error_message(self) -> Locator:
        return self.page.locator(".message-error")

    # Selectors - Flyout cart
    @property
    def flyout_cart(self) -> Locator:
        return self.page.locator("#flyout-cart")

    @property
    def flyout_cart_panel(self) -> Locator:
        """The flyout once the header hover has opened it."""
        return self.page.locator("#flyout-cart.active")

    @property
    def flyout_cart_items(self) -> Locator:
        return self.page.locator("#flyout-cart .item")

    @property
    def flyout_cart_total(self) -> Locator:
        return self.page.locator("#flyout-cart .totals strong")

    @property
    def go_to_cart_button(self) -> Locator:
        return self.page.locator("#flyout-cart input.cart-button")

    # Actions
    async def navigate_to_cart(self) -> None:
        """Open the cart through the header link."""
        await self.click_and_settle(self.cart_link)

    async def update_product_quantity(self, quantity: int, index: int = 0) -> None:
        """Type a new quantity into a row without submitting it."""
        await self.fill_input(self.quantity_input.nth(index), str(quantity),
                              clear_first=True)

    async def click_update_cart(self) -> None:
        await self.click_and_settle(self.update_cart_button)

    async def set_quantity_and_update(self, quantity: int, index: int = 0) -> None:
        """Change a row's quantity and submit the cart form."""
        await self.update_product_quantity(quantity, index)
        await self.click_update_cart()

    async def remove_product(self, index: int = 0) -> None:
        """Tick a row's remove box and submit the cart form."""
        logger.debug("Removing cart row %d", index)
        await self.remove_checkbox.nth(index).check()
        await self.click_and_settle(self.update_cart_button)

    async def empty_cart(self) -> int:
        """
        Remove every row from the cart currently shown.

        Returns:
            Number of rows removed.
        """
        removed = 0
        while await self.cart_item_rows.count() > 0:
            await self.remove_product(0)
            removed += 1
        return removed

    async def apply_discount_coupon(self, coupon_code: str) -> None:
        await self.discount_coupon_input.fill(coupon_code)
        await self.click_and_settle(self.apply_discount_button)

    async def apply_gift_card(self, gift_card_code: str) -> None:
        await self.gift_card_input.fill(gift_card_code)
        await self.click_and_settle(self.apply_gift_card_button)

    async def accept_terms_of_service(self) -> None:
        await self.terms_of_service_checkbox.check()

    async def proceed_to_checkout(self) -> None:
        await self.click_and_settle(self.checkout_button)

    async def click_continue_shopping(self) -> None:
        await self.click_and_settle(self.continue_shopping_button)

    async def hover_over_cart_link(self) -> None:
        await self.cart_link.hover()

    async def edit_cart_item(self, index: int = 0) -> None:
        await self.click_and_settle(self.edit_item_link.nth(index))

    # Queries
    async def get_cart_item_count(self) -> str:
        """Header counter without brackets, ``"0"`` when it renders nothing."""
        return strip_brackets(await self.cart_qty.text_content()) or "0"

    async def get_cart_item_total(self) -> int:
        """Header counter as an integer."""
        return parse_int(await self.get_cart_item_count())

    async def is_cart_empty(self) -> bool:
        return await self.cart_item_rows.count() == 0

    async def get_product_names(self) -> list[str]:
        await self.settle()
        return await self.product_name.all_text_contents()

    async def get_product_unit_price(self, index: int = 0) -> str:
        return await self.unit_price.nth(index).text_content() or ""

    async def get_product_subtotal(self, index: int = 0) -> str:
        return await self.product_subtotal.nth(index).text_content() or ""

    async def get_unit_price_value(self, index: int = 0) -> Decimal:
        return parse_decimal(await self.get_product_unit_price(index))

    async def get_line_subtotal_value(self, index: int = 0) -> Decimal:
        return parse_decimal(await self.get_product_subtotal(index))

    async def get_product_quantity(self, index: int = 0) -> str:
        return await self.quantity_input.nth(index).input_value()

    async def get_sub_total(self) -> str:
        return await self.sub_total.text_content() or ""

    async def get_sub_total_value(self) -> Decimal:
        return parse_decimal(await self.get_sub_total())

    async def get_tax(self) -> str:
        return await self.tax.text_content() or ""

    async def get_shipping(self) -> str:
        return await self.read_text(self.shipping)

    async def get_order_total(self) -> str:
        return await self.read_text(self.order_total)

    async def get_success_message_text(self) -> str:
        return await self.success_message.text_content() or ""

    async def get_error_message_text(self) -> str:
        return await self.error_message.text_content() or ""

    async def get_flyout_cart_item_count(self) -> int:
        return await self.flyout_cart_items.count()

    async def get_flyout_cart_total(self) -> str:
        return await self.flyout_cart_total.text_content() or ""

    async def has_product_attributes(self, index: int = 0) -> bool:
        return await self.cart_item_rows.nth(index).locator(".attributes").count() > 0

    async def get_product_attributes(self, index: int = 0) -> str:
        if await self.has_product_attributes(index):
            return await self.cart_item_rows.nth(index).locator(
                ".attributes"
            ).text_content() or ""
        return ""

    @staticmethod
    def calculate_expected_total(unit_price: Decimal, quantity: int) -> Decimal:
        return unit_price * quantity

    # Assertions
    async def verify_product_in_cart(self, product_name: str) -> None:
        await expect(self.product_name.filter(has_text=product_name)).to_be_visible()

    async def verify_cart_updated(self, expected_quantity: str, index: int = 0) -> None:
        quantity = await self.get_product_quantity(index)
        assert quantity == expected_quantity, (
            f"Expected quantity {expected_quantity!r} in row {index}, got {quantity!r}"
        )

    async def verify_sub_total(self, expected_total: str) -> None:
        sub_total = await self.get_sub_total()
        assert sub_total == expected_total, (
            f"Expected sub-total {expected_total!r}, got {sub_total!r}"
        )

    async def verify_success_message(self) -> None:
        await expect(self.success_message).to_be_visible(timeout=self.expect_timeout)

    async def verify_error_message(self) -> None:
        await expect(self.error_message).to_be_visible()

    async def verify_flyout_cart_visible(self) -> None:
        panel = await self.probe(self.flyout_cart_panel, timeout=self.expect_timeout)
        assert panel is not None, (
            f"Flyout cart did not open within {self.expect_timeout}ms"
        )

    async def verify_cart_item_details(
        self, product_name: str, price: str, quantity: str
    ) -> None:
        """Assert the first row shows ``product_name`` at ``price`` x ``quantity``."""
        await self.verify_product_in_cart(product_name)
        unit_price = await self.get_product_unit_price(0)
        product_quantity = await self.get_product_quantity(0)

        assert price in unit_price, f"Expected unit price containing {price!r}, got {unit_price!r}"
        assert product_quantity == quantity, (
            f"Expected quantity {quantity!r}, got {product_quantity!r}"
        )
