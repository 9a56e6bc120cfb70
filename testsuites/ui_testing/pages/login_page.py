"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Sauce Demo login form: username, password, login button and the dismissible
error banner.

================================================================================
"""

from __future__ import annotations

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/"
    PAGE_TITLE = "Swag Labs"

    def __init__(self, page, base_url=None, log=None):
        super().__init__(page, base_url=base_url, log=log)
        self.username_input = page.get_by_placeholder("Username")
        self.password_input = page.get_by_placeholder("Password")
        self.login_button = page.get_by_role("button", name="Login")
        self.error_message = page.locator('[data-test="error"]')
        self.error_button = page.locator('[data-test="error"] button')

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """Fill both fields and submit."""
        await self.username_input.fill(username)
        await self.password_input.fill(password)
        await self.login_button.click()
        self.log.info("Login submitted", {"username": username})

    async def fill_username(self, username: str) -> None:
        await self.username_input.fill(username)

    async def fill_password(self, password: str) -> None:
        await self.password_input.fill(password)

    async def click_login(self) -> None:
        await self.login_button.click()

    async def get_error_message(self) -> str:
        return await self.error_message.text_content() or ""

    async def is_error_visible(self) -> bool:
        return await self.error_message.is_visible()

    @allure.step("Close login error")
    async def close_error(self) -> None:
        """Dismiss the error banner with its X button."""
        await self.error_button.click()

    async def get_username_value(self) -> str:
        return await self.username_input.input_value()

    async def is_login_button_enabled(self) -> bool:
        return await self.login_button.is_enabled()
