"""
Login Page Object for authentication and session tests.
"""

import logging

from playwright.async_api import Locator, expect

from ..credentials import Credentials
from .base_page import BasePage

logger = logging.getLogger(__name__)

LOGGED_IN_PROBE_TIMEOUT = 3000


class LoginPage(BasePage):
    """Page Object for the login page and the header account links."""

    # Selectors
    @property
    def login_link(self) -> Locator:
        return self.page.locator("a.ico-login")

    @property
    def page_heading(self) -> Locator:
        return self.page.locator("h1")

    @property
    def email_input(self) -> Locator:
        return self.page.locator("#Email")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#Password")

    @property
    def login_button(self) -> Locator:
        return self.page.locator(".login-button")

    @property
    def remember_me_checkbox(self) -> Locator:
        return self.page.locator("#RememberMe")

    @property
    def logout_link(self) -> Locator:
        """Header logout link, rendered only for authenticated visitors."""
        return self.page.locator("a.ico-logout")

    @property
    def account_link(self) -> Locator:
        """Header link showing the signed-in email."""
        return self.page.locator("a.account").first

    @property
    def validation_error(self) -> Locator:
        return self.page.locator(".field-validation-error")

    @property
    def validation_summary(self) -> Locator:
        return self.page.locator(".validation-summary-errors")

    # Actions
    async def navigate_to_login_page(self) -> None:
        await self.navigate("/")
        await self.click_and_settle(self.login_link)

    async def fill_email(self, email: str) -> None:
        await self.email_input.fill(email)

    async def fill_password(self, password: str) -> None:
        await self.password_input.fill(password)

    async def check_remember_me(self) -> None:
        await self.remember_me_checkbox.check()

    async def click_login_button(self) -> None:
        await self.click_and_settle(self.login_button)

    async def login(self, email: str, password: str, remember_me: bool = False) -> None:
        """
        Submit the login form.

        Args:
            email: Account email.
            password: Account password.
            remember_me: Whether to tick "Remember me?".
        """
        logger.debug("Logging in as %s", email)
        await self.fill_email(email)
        await self.fill_password(password)
        if remember_me:
            await self.check_remember_me()
        await self.click_login_button()

    async def login_with_credentials(
        self, credentials: Credentials, remember_me: bool = False
    ) -> None:
        await self.login(credentials.email, credentials.password, remember_me)

    async def logout(self) -> None:
        await self.click_and_settle(self.logout_link, "networkidle")

    # Queries
    async def is_logged_in(self) -> bool:
        """Whether the header shows the logout link within a short budget."""
        return await self.probe(self.logout_link, LOGGED_IN_PROBE_TIMEOUT) is not None

    # Assertions
    async def verify_on_login_page(self) -> None:
        await self.assert_url_matches(r".*/login")
        await expect(self.page_heading).to_contain_text("Welcome, Please Sign In!")

    async def verify_logged_in(self) -> None:
        await expect(self.logout_link).to_be_visible()
        await expect(self.account_link).to_be_visible()

    async def verify_logged_out(self) -> None:
        await expect(self.login_link).to_be_visible()
        await expect(self.logout_link).not_to_be_visible()

    async def verify_user_email(self, email: str) -> None:
        await expect(self.account_link).to_contain_text(email)

    async def verify_login_error(self, error_text: str) -> None:
        error = self.validation_summary.locator("li, span").first
        await expect(error).to_contain_text(error_text)
