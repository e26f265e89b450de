"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Swag Labs login screen: username/password inputs, login button and the
application header that becomes visible once signed in.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page, expect

from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.framework.settings import APP_TITLE


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = APP_TITLE

    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    HEADER = ".app_logo"

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        demo_pause_ms: Optional[int] = None,
    ):
        super().__init__(page, base_url=base_url, demo_pause_ms=demo_pause_ms)
        self.username_input = page.locator(self.USERNAME_INPUT)
        self.password_input = page.locator(self.PASSWORD_INPUT)
        self.login_button = page.locator(self.LOGIN_BUTTON)
        self.header = page.locator(self.HEADER)

    @allure.step("Open login page")
    async def goto(self, url: Optional[str] = None) -> "LoginPage":
        """Navigate to `url`, or to the login page of the configured base URL."""
        await self.navigate_to(url or self.url)
        return self

    @allure.step("Sign in as {username}")
    async def sign_in(self, username: str, password: str) -> None:
        """Fill both inputs and submit. Does not wait for the next page."""
        logger.debug(f"Signing in as {username} (password: {'*' * len(password)})")
        await self.username_input.fill(username)
        await self.password_input.fill(password)
        await self.login_button.click()

    def get_header(self) -> Locator:
        return self.header

    async def assert_login_page_loaded(self) -> None:
        """Title matches and the form is visible."""
        await self.expect_title()
        await expect(self.username_input).to_be_visible()
        await expect(self.password_input).to_be_visible()
        await expect(self.login_button).to_be_visible()


__all__ = [
    "LoginPage",
]
