"""
E2E tests for account registration.

Tests cover:
- Home page title
- Successful registration (stores the account for later runs)
- Form validation: mismatched passwords, invalid email, empty fields,
  short password
- Duplicate email
"""

import re

import pytest
import pytest_asyncio
from playwright.async_api import Page, expect

from demoshop.credentials import CredentialStore, Credentials
from demoshop.pages import RegistrationData, RegistrationPage

pytestmark = [pytest.mark.e2e, pytest.mark.asyncio(loop_scope="session")]


# =============================================================================
# Test Constants
# =============================================================================

WRONG_CONFIRM_PASSWORD = "IncorrectPass456!"
INVALID_EMAIL = "notavalidemail"
SHORT_PASSWORD = "123"


@pytest_asyncio.fixture(loop_scope="session")
async def on_registration_page(registration_page: RegistrationPage) -> RegistrationPage:
    await registration_page.navigate_to_registration_page()
    await registration_page.verify_on_registration_page()
    return registration_page


class TestHomePage:
    """Smoke test for the storefront."""

    async def test_home_page_has_title(self, page: Page, registration_page: RegistrationPage):
        """Test that the home page loads with the shop's title."""
        await registration_page.navigate("/")
        await expect(page).to_have_title(re.compile("Demo Web Shop"))


class TestRegistration:
    """Tests for creating accounts."""

    async def test_successful_registration(
        self,
        on_registration_page: RegistrationPage,
        unique_email: str,
        account_password: str,
        credential_store: CredentialStore,
    ):
        """Test registering a new user and storing the account."""
        await on_registration_page.register_user(
            RegistrationData(
                gender="male",
                first_name="John",
                last_name="Doe",
                email=unique_email,
                password=account_password,
                confirm_password=account_password,
            )
        )

        await on_registration_page.verify_successful_registration()
        credential_store.save(Credentials(email=unique_email, password=account_password))

    async def test_registration_as_female(
        self,
        on_registration_page: RegistrationPage,
        unique_email: str,
        account_password: str,
    ):
        """Test registering with every field filled and the female gender."""
        await on_registration_page.register_user(
            RegistrationData.complete(
                unique_email,
                account_password,
                first_name="Sarah",
                last_name="Anderson",
                gender="female",
            )
        )

        await on_registration_page.verify_successful_registration()

    async def test_duplicate_email_rejected(
        self,
        on_registration_page: RegistrationPage,
        unique_email: str,
        account_password: str,
    ):
        """Test that an email can only be registered once."""
        await on_registration_page.register_user(
            RegistrationData.complete(unique_email, account_password)
        )
        await on_registration_page.verify_successful_registration()

        await on_registration_page.navigate("/register")
        await on_registration_page.verify_on_registration_page()
        await on_registration_page.register_user(
            RegistrationData.complete(
                unique_email,
                account_password,
                first_name="Another",
                last_name="Person",
                gender="female",
            )
        )

        await on_registration_page.verify_error_message("The specified email already exists")


class TestRegistrationValidation:
    """Tests for registration form validation."""

    async def test_mismatched_passwords(
        self,
        on_registration_page: RegistrationPage,
        unique_email: str,
        account_password: str,
    ):
        """Test that the confirmation must match the password."""
        await on_registration_page.register_user(
            RegistrationData(
                gender="female",
                first_name="Jane",
                last_name="Smith",
                email=unique_email,
                password=account_password,
                confirm_password=WRONG_CONFIRM_PASSWORD,
            )
        )

        await on_registration_page.verify_validation_error(
            "The password and confirmation password do not match"
        )

    async def test_invalid_email_format(
        self,
        on_registration_page: RegistrationPage,
        account_password: str,
    ):
        """Test that a malformed email is rejected."""
        await on_registration_page.register_user(
            RegistrationData.complete(
                INVALID_EMAIL, account_password, first_name="Bob", last_name="Johnson"
            )
        )

        await on_registration_page.verify_validation_error("Wrong email")

    async def test_empty_required_fields(self, on_registration_page: RegistrationPage):
        """Test that submitting an empty form flags every required field."""
        await on_registration_page.click_register_button()

        await on_registration_page.verify_required_field_errors()

    async def test_short_password(
        self,
        on_registration_page: RegistrationPage,
        unique_email: str,
    ):
        """Test that a password below the minimum length is rejected."""
        await on_registration_page.register_user(
            RegistrationData.complete(
                unique_email, SHORT_PASSWORD, first_name="Mike", last_name="Wilson"
            )
        )

        await on_registration_page.verify_password_validation_error()
