"""
================================================================================
Login Page Object
================================================================================

Login screen of the application under test (OrangeHRM-style form).

Built by composition: receives the shared PageActions instead of
inheriting from a base page.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from webui_suites.ui_testing.framework.locators import By
from webui_suites.ui_testing.framework.page_actions import PageActions


class LoginPage:
    """Login page object."""

    USERNAME_INPUT = By.name("username")
    PASSWORD_INPUT = By.name("password")
    LOGIN_BUTTON = By.css("button[type='submit']")
    # Branding logo used to verify the page is showing
    BRAND_LOGO = By.css("img[alt='company-branding']")

    def __init__(self, actions: PageActions):
        self.actions = actions

    def enter_username(self, username: str) -> "LoginPage":
        self.actions.type(self.USERNAME_INPUT, username)
        return self

    def enter_password(self, password: str) -> "LoginPage":
        self.actions.type(self.PASSWORD_INPUT, password)
        return self

    def click_login(self) -> None:
        self.actions.click(self.LOGIN_BUTTON)

    @allure.step("Login (username={username})")
    def login(self, username: str, password: str) -> None:
        """Fill both credentials and submit the form."""
        logger.info(f"Logging in as {username}")
        self.enter_username(username)
        self.enter_password(password)
        self.click_login()

    def is_login_page_displayed(self) -> bool:
        """True if the branding logo becomes visible."""
        return self.actions.is_displayed(self.BRAND_LOGO)


__all__ = [
    "LoginPage",
]
