"""
================================================================================
Cart Page Object (Async / Playwright)
================================================================================
"""

from __future__ import annotations

import re
from typing import List

import allure

from testsuites.ui_testing.framework.page_base import PageBase


class CartPage(PageBase):
    """Shopping cart page object (async)."""

    URL_PATH = "/cart.html"
    PAGE_TITLE = "Your Cart"

    def __init__(self, page, base_url=None, log=None):
        super().__init__(page, base_url=base_url, log=log)
        self.page_title = page.locator(".title")
        self.cart_items = page.locator(".cart_item")
        self.checkout_button = page.get_by_role("button", name=re.compile("checkout", re.IGNORECASE))
        self.continue_shopping_button = page.get_by_role(
            "button", name=re.compile("continue shopping", re.IGNORECASE)
        )

    @allure.step("Open cart page")
    async def open(self) -> "CartPage":
        await self.navigate()
        return self

    async def get_cart_item_names(self) -> List[str]:
        names = await self.page.locator(".inventory_item_name").all_text_contents()
        return [name for name in names if name]

    async def get_cart_item_prices(self) -> List[str]:
        prices = await self.page.locator(".inventory_item_price").all_text_contents()
        return [price for price in prices if price]

    async def get_item_count(self) -> int:
        return await self.cart_items.count()

    @allure.step("Remove '{product_name}' from cart page")
    async def remove_item(self, product_name: str) -> None:
        item = self.page.locator(".cart_item", has_text=product_name)
        await item.get_by_role("button", name=re.compile("remove", re.IGNORECASE)).click()

    @allure.step("Checkout")
    async def click_checkout(self) -> None:
        await self.checkout_button.click()

    @allure.step("Continue shopping")
    async def continue_shopping(self) -> None:
        await self.continue_shopping_button.click()
