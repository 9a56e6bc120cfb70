"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- Browser and page lifecycle management
- Page Object fixtures for all Sauce Demo pages
- Evidence capture on failure
- Console error tracking per test
- Logged-in session fixture

UI tests only run with ``--run-ui`` (or RUN_UI_TESTS=1); see testsuites/conftest.py.

================================================================================
"""

from typing import AsyncGenerator

import allure
import pytest
from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from qa_tools.common import Logger, get_config, is_truthy
from qa_tools.report_tools import capture_evidence
from testsuites.ui_testing.data import sauce_demo
from testsuites.ui_testing.framework.console_errors import ConsoleErrorCollector
from testsuites.ui_testing.pages import CartPage, CheckoutPage, InventoryPage, LoginPage


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest.fixture
async def browser() -> AsyncGenerator[Browser, None]:
    """
    Browser fixture.

    Browser type and headless mode come from ``ui.browser`` / ``ui.headless``.
    """
    headless = get_config("ui.headless", True)
    if isinstance(headless, str):
        headless = is_truthy(headless)

    async with async_playwright() as playwright:
        browser_type = getattr(playwright, get_config("ui.browser", "chromium"))
        browser = await browser_type.launch(headless=headless)
        yield browser
        await browser.close()


@pytest.fixture
async def context(browser: Browser) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    viewport = get_config("ui.viewport", {"width": 1280, "height": 800})
    context = await browser.new_context(viewport=viewport, ignore_https_errors=True)
    context.set_default_timeout(float(get_config("ui.default_timeout", 10.0)) * 1000)
    yield context
    await context.close()


@pytest.fixture
async def page(request, context: BrowserContext, qa_logger: Logger) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Attaches screenshot and page source to Allure when the test body failed.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        with allure.step("Capture failure evidence"):
            await capture_evidence(page, qa_logger.child({"test": request.node.name}))
    await page.close()


@pytest.fixture
def console_errors(page: Page) -> ConsoleErrorCollector:
    """Console errors collected for the current test."""
    return ConsoleErrorCollector().attach(page)


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def test_logger(request, qa_logger: Logger) -> Logger:
    """Logger scoped to the current test."""
    return qa_logger.child({"test": request.node.name})


@pytest.fixture
def login_page(page: Page, test_logger: Logger) -> LoginPage:
    return LoginPage(page, log=test_logger)


@pytest.fixture
def inventory_page(page: Page, test_logger: Logger) -> InventoryPage:
    return InventoryPage(page, log=test_logger)


@pytest.fixture
def cart_page(page: Page, test_logger: Logger) -> CartPage:
    return CartPage(page, log=test_logger)


@pytest.fixture
def checkout_page(page: Page, test_logger: Logger) -> CheckoutPage:
    return CheckoutPage(page, log=test_logger)


# ================================================================================
# Authentication Fixtures
# ================================================================================

@pytest.fixture
async def logged_in(
    console_errors: ConsoleErrorCollector,
    login_page: LoginPage,
    inventory_page: InventoryPage,
) -> InventoryPage:
    """
    Provides the inventory page of an authenticated standard user.

    Console errors are collected from the login flow onwards.
    """
    user = sauce_demo.USERS["standard"]
    await login_page.open()
    await login_page.login(user.username, user.password)
    await inventory_page.wait_for_url("**/inventory.html")
    return inventory_page


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Store each phase's report on the item so fixtures can react to failures.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
