"""
Account bootstrap: register a throwaway shop account through the UI.
"""

import logging
from typing import Optional

from playwright.async_api import Page

from .config import DEFAULT_BASE_URL
from .credentials import Credentials, generate_unique_email
from .pages.registration_page import Gender, RegistrationData, RegistrationPage

logger = logging.getLogger(__name__)


async def register_account(
    page: Page,
    password: str,
    base_url: str = DEFAULT_BASE_URL,
    first_name: str = "Test",
    last_name: str = "User",
    gender: Gender = "male",
    email: Optional[str] = None,
) -> Credentials:
    """
    Register a new account and return its credentials.

    The page is left on the registration result page with the new
    account signed in.

    Args:
        page: Page to drive; its context keeps the new session cookie.
        password: Password for the account.
        base_url: Shop under test.
        first_name: First name for the form.
        last_name: Last name for the form.
        gender: Gender radio to tick.
        email: Email to register; a unique one is generated when omitted.

    Returns:
        Credentials of the registered account.
    """
    email = email or generate_unique_email()
    registration_page = RegistrationPage(page, base_url)

    await registration_page.navigate_to_registration_page()
    await registration_page.register_user(
        RegistrationData.complete(
            email=email,
            password=password,
            first_name=first_name,
            last_name=last_name,
            gender=gender,
        )
    )
    await registration_page.verify_successful_registration()

    logger.info("Registered account %s", email)
    return Credentials(email=email, password=password)
