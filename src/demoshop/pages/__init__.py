"""
Page Object Model classes for the Demo Web Shop.

These classes provide reusable selectors and methods for interacting
with different pages of the shop. Every locator is a property, so it is
re-evaluated against the live DOM on each access.
"""

from .base_page import BasePage
from .cart_page import CartPage
from .category_page import CategoryPage
from .login_page import LoginPage
from .product_details_page import ProductDetailsPage
from .registration_page import RegistrationData, RegistrationPage
from .search_page import SearchPage, SortOption, ViewMode

__all__ = [
    "BasePage",
    "CartPage",
    "CategoryPage",
    "LoginPage",
    "ProductDetailsPage",
    "RegistrationData",
    "RegistrationPage",
    "SearchPage",
    "SortOption",
    "ViewMode",
]
