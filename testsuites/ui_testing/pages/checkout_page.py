"""
================================================================================
Checkout Page Object (Async / Playwright)
================================================================================

Covers the three checkout screens: information form (step one), overview
(step two) and the order-complete screen.

================================================================================
"""

from __future__ import annotations

import re

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class CheckoutPage(PageBase):
    """Checkout flow page object (async)."""

    URL_PATH = "/checkout-step-one.html"
    PAGE_TITLE = "Checkout: Your Information"

    def __init__(self, page, base_url=None, log=None):
        super().__init__(page, base_url=base_url, log=log)
        self.page_title = page.locator(".title")
        self.first_name_input = page.get_by_placeholder("First Name")
        self.last_name_input = page.get_by_placeholder("Last Name")
        self.postal_code_input = page.get_by_placeholder(re.compile(r"zip.*postal", re.IGNORECASE))
        self.continue_button = page.get_by_role("button", name=re.compile("continue", re.IGNORECASE))
        self.cancel_button = page.get_by_role("button", name=re.compile("cancel", re.IGNORECASE))
        self.finish_button = page.get_by_role("button", name=re.compile("finish", re.IGNORECASE))
        self.back_home_button = page.get_by_role(
            "button", name=re.compile(r"back.*home|back.*products", re.IGNORECASE)
        )
        self.error_message = page.locator('[data-test="error"]')
        # Overview (step two)
        self.summary_items = page.locator(".cart_item")
        self.item_total = page.locator(".summary_subtotal_label")
        self.tax = page.locator(".summary_tax_label")
        self.total = page.locator(".summary_total_label")

    @allure.step("Fill checkout information")
    async def fill_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        await self.first_name_input.fill(first_name)
        await self.last_name_input.fill(last_name)
        await self.postal_code_input.fill(postal_code)

    @allure.step("Continue to overview")
    async def continue_(self) -> None:
        await self.continue_button.click()

    @allure.step("Cancel checkout")
    async def cancel(self) -> None:
        await self.cancel_button.click()

    @allure.step("Finish order")
    async def finish(self) -> None:
        await self.finish_button.click()
        self.log.info("Order submitted")

    @allure.step("Back home")
    async def back_home(self) -> None:
        await self.back_home_button.click()

    async def get_error_message(self) -> str:
        return await self.error_message.text_content() or ""

    async def is_error_visible(self) -> bool:
        return await self.error_message.is_visible()

    async def get_summary_item_count(self) -> int:
        return await self.summary_items.count()

    async def get_item_total(self) -> str:
        return await self.item_total.text_content() or ""

    async def get_tax(self) -> str:
        return await self.tax.text_content() or ""

    async def get_total(self) -> str:
        return await self.total.text_content() or ""

    async def _title_contains(self, anchor, text: str) -> bool:
        try:
            await anchor.wait_for(timeout=5000)
        except Exception:
            return False
        return text in (await self.page_title.text_content() or "")

    async def is_on_step_two(self) -> bool:
        return await self._title_contains(self.finish_button, "Checkout: Overview")

    async def is_on_complete(self) -> bool:
        return await self._title_contains(self.back_home_button, "Checkout: Complete!")
