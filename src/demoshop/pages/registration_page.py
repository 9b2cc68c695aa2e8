"""
Registration Page Object for account creation tests.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Optional

from playwright.async_api import Locator, expect

from .base_page import BasePage

logger = logging.getLogger(__name__)

Gender = Literal["male", "female"]


@dataclass
class RegistrationData:
    """Form values for the registration page. Unset fields are left blank."""

    gender: Optional[Gender] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    confirm_password: Optional[str] = None

    @classmethod
    def complete(
        cls,
        email: str,
        password: str,
        first_name: str = "Test",
        last_name: str = "User",
        gender: Gender = "male",
    ) -> "RegistrationData":
        """All fields filled, with the confirmation matching the password."""
        return cls(
            gender=gender,
            first_name=first_name,
            last_name=last_name,
            email=email,
            password=password,
            confirm_password=password,
        )


class RegistrationPage(BasePage):
    """Page Object for the register form and its result page."""

    # Selectors
    @property
    def register_link(self) -> Locator:
        return self.page.locator("a.ico-register")

    @property
    def page_heading(self) -> Locator:
        return self.page.locator("h1")

    @property
    def gender_male_radio(self) -> Locator:
        return self.page.locator("#gender-male")

    @property
    def gender_female_radio(self) -> Locator:
        return self.page.locator("#gender-female")

    @property
    def first_name_input(self) -> Locator:
        return self.page.locator("#FirstName")

    @property
    def last_name_input(self) -> Locator:
        return self.page.locator("#LastName")

    @property
    def email_input(self) -> Locator:
        return self.page.locator("#Email")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#Password")

    @property
    def confirm_password_input(self) -> Locator:
        return self.page.locator("#ConfirmPassword")

    @property
    def register_button(self) -> Locator:
        return self.page.locator("#register-button")

    @property
    def success_message(self) -> Locator:
        return self.page.locator(".result")

    @property
    def continue_button(self) -> Locator:
        return self.page.locator(".button-1.register-continue-button")

    @property
    def validation_error(self) -> Locator:
        return self.page.locator(".field-validation-error")

    @property
    def error_message(self) -> Locator:
        return self.page.locator(".message-error")

    def field_error(self, field: str) -> Locator:
        """Validation message bound to one form field, e.g. ``"Email"``."""
        return self.page.locator(
            f"span.field-validation-error[data-valmsg-for='{field}']"
        )

    @property
    def first_name_error(self) -> Locator:
        return self.field_error("FirstName")

    @property
    def last_name_error(self) -> Locator:
        return self.field_error("LastName")

    @property
    def email_error(self) -> Locator:
        return self.field_error("Email")

    @property
    def password_error(self) -> Locator:
        return self.field_error("Password")

    # Actions
    async def navigate_to_registration_page(self) -> None:
        await self.navigate("/")
        await self.click_and_settle(self.register_link)

    async def select_gender(self, gender: Gender) -> None:
        if gender == "male":
            await self.gender_male_radio.check()
        else:
            await self.gender_female_radio.check()

    async def fill_first_name(self, first_name: str) -> None:
        await self.first_name_input.fill(first_name)

    async def fill_last_name(self, last_name: str) -> None:
        await self.last_name_input.fill(last_name)

    async def fill_email(self, email: str) -> None:
        await self.email_input.fill(email)

    async def fill_password(self, password: str) -> None:
        await self.password_input.fill(password)

    async def fill_confirm_password(self, password: str) -> None:
        await self.confirm_password_input.fill(password)

    async def click_register_button(self) -> None:
        await self.click_and_settle(self.register_button)

    async def fill_registration_form(self, data: RegistrationData) -> None:
        """Fill every field that ``data`` provides, skipping the rest."""
        if data.gender:
            await self.select_gender(data.gender)
        if data.first_name:
            await self.fill_first_name(data.first_name)
        if data.last_name:
            await self.fill_last_name(data.last_name)
        if data.email:
            await self.fill_email(data.email)
        if data.password:
            await self.fill_password(data.password)
        if data.confirm_password:
            await self.fill_confirm_password(data.confirm_password)

    async def register_user(self, data: RegistrationData) -> None:
        logger.debug("Registering %s", data.email)
        await self.fill_registration_form(data)
        await self.click_register_button()

    # Assertions
    async def verify_on_registration_page(self) -> None:
        await self.assert_url_matches(r".*/register")
        await expect(self.page_heading).to_contain_text("Register")

    async def verify_successful_registration(self) -> None:
        await self.assert_url_matches(r".*/registerresult")
        await expect(self.success_message).to_contain_text("Your registration completed")
        await expect(self.continue_button).to_be_visible()

    async def verify_validation_error(self, error_text: str) -> None:
        await expect(self.validation_error).to_contain_text(error_text)
        await self.assert_url_matches(r".*/register")

    async def verify_error_message(self, error_text: str) -> None:
        await expect(self.error_message).to_contain_text(error_text)

    async def verify_required_field_errors(self) -> None:
        await expect(self.first_name_error).to_contain_text("First name is required")
        await expect(self.last_name_error).to_contain_text("Last name is required")
        await expect(self.email_error).to_contain_text("Email is required")
        await expect(self.password_error).to_contain_text("Password is required")
        await self.assert_url_matches(r".*/register")

    async def verify_password_validation_error(self) -> None:
        password_error = self.validation_error.filter(has_text="password")
        await expect(password_error).to_be_visible()
        await self.assert_url_matches(r".*/register")
