"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation with retries for transient network failures
    - Wait strategies built on qa_tools wait helpers
    - Screenshot utilities attached to Allure

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Awaitable, Callable, Optional

import allure
from playwright.async_api import Page

from qa_tools.common import (
    Logger,
    create_logger,
    get_config,
    get_retry_policy,
    get_wait_policy,
    retry_logger,
    wait_for_condition,
    with_retries,
)
from qa_tools.report_tools import attach_png


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"


class BasePage:
    """
    Base class for all page objects.

    Usage:
        class CartPage(BasePage):
            URL_PATH = "/cart.html"

            async def checkout(self):
                await self.page.get_by_role("button", name="Checkout").click()
    """

    # Override in subclasses
    URL_PATH: str = "/"
    PAGE_TITLE: str = ""

    def __init__(
        self,
        page: Page,
        base_url: Optional[str] = None,
        log: Optional[Logger] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application. Defaults to ``ui.base_url``
            log: Logger; a child with the page name is derived from it
        """
        self.page = page
        self.base_url = (base_url or get_config("ui.base_url", "https://www.saucedemo.com")).rstrip("/")
        self.log = (log or create_logger()).child({"page": type(self).__name__})

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH}"

    async def navigate(self, wait_for: str = "domcontentloaded") -> None:
        """
        Navigate to this page, retrying transient navigation failures.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'
        """
        await self.navigate_to(self.URL_PATH, wait_for=wait_for)

    async def navigate_to(self, path: str, wait_for: str = "domcontentloaded") -> None:
        """
        Navigate to specific path.

        Args:
            path: URL path to navigate to
            wait_for: Wait condition
        """
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await with_retries(
                lambda attempt: self.page.goto(full_url, wait_until=wait_for),
                get_retry_policy("navigation"),
                on_retry=retry_logger(self.log, f"navigation to {path}"),
            )
            self.log.debug("Navigated", {"url": full_url})

    async def wait_for_page_load(
        self,
        state: str = "load",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait_for_url(
        self,
        url_pattern: str,
        timeout: int = 10000,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: URL pattern (supports wildcards)
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)

    async def wait_until(
        self,
        predicate: Callable[[], Awaitable[bool]],
        description: str,
        scenario: str = "default",
    ) -> None:
        """
        Poll an async predicate using a named wait scenario.

        Raises:
            WaitTimeoutError: If the predicate never holds
        """
        with allure.step(f"Wait until {description}"):
            await wait_for_condition(predicate, get_wait_policy(scenario), description=description)

    async def is_current(self) -> bool:
        """Whether the browser currently shows this page."""
        return (self.page.url or "").split("?")[0].endswith(self.URL_PATH)

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        data = await self.page.screenshot(path=str(filepath), full_page=full_page)
        if attach_to_allure:
            attach_png(data, name=name)

        self.log.debug("Screenshot saved", {"path": str(filepath)})
        return filepath


# Backward-compatible alias (many Page Objects prefer PageBase naming)
PageBase = BasePage

__all__ = [
    "BasePage",
    "PageBase",
]
