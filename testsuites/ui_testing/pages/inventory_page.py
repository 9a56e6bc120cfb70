"""
================================================================================
Inventory Page Object (Async / Playwright)
================================================================================

Product listing: product cards, add/remove buttons, sorting, cart badge and
the side menu.

Highlights:
  - Cart badge reads tolerate the badge being absent (0 items)
  - ``wait_for_cart_count`` polls the badge with ``wait_for_condition``

================================================================================
"""

from __future__ import annotations

import re
from typing import List

import allure
from playwright.async_api import Locator

from testsuites.ui_testing.framework.page_base import PageBase

ADD_TO_CART = re.compile("add to cart", re.IGNORECASE)
REMOVE = re.compile("remove", re.IGNORECASE)


class InventoryPage(PageBase):
    """Inventory (products) page object (async)."""

    URL_PATH = "/inventory.html"
    PAGE_TITLE = "Products"

    def __init__(self, page, base_url=None, log=None):
        super().__init__(page, base_url=base_url, log=log)
        self.page_title = page.locator(".title")
        self.menu_button = page.get_by_role("button", name="Open Menu")
        self.cart_button = page.locator(".shopping_cart_link")
        self.cart_badge = page.locator(".shopping_cart_badge")
        self.sort_dropdown = page.locator(".product_sort_container")
        self.inventory_items = page.locator(".inventory_item")

    @allure.step("Open inventory page")
    async def open(self) -> "InventoryPage":
        await self.navigate()
        return self

    def get_product_card(self, product_name: str) -> Locator:
        return self.page.locator(".inventory_item", has_text=product_name)

    async def get_product_cards(self) -> List[Locator]:
        await self.inventory_items.first.wait_for()
        count = await self.inventory_items.count()
        return [self.inventory_items.nth(i) for i in range(count)]

    @allure.step("Add '{product_name}' to cart")
    async def add_to_cart(self, product_name: str) -> None:
        await self.get_product_card(product_name).get_by_role("button", name=ADD_TO_CART).click()
        self.log.info("Added to cart", {"product": product_name})

    @allure.step("Remove '{product_name}' from cart")
    async def remove_from_cart(self, product_name: str) -> None:
        await self.get_product_card(product_name).get_by_role("button", name=REMOVE).click()
        self.log.info("Removed from cart", {"product": product_name})

    async def click_product_name(self, product_name: str) -> None:
        await self.get_product_card(product_name).locator(".inventory_item_name").click()

    async def get_product_price(self, product_name: str) -> str:
        price = self.get_product_card(product_name).locator(".inventory_item_price")
        return await price.text_content() or ""

    async def has_add_to_cart_button(self, product_name: str) -> bool:
        return await self.get_product_card(product_name).get_by_role("button", name=ADD_TO_CART).is_visible()

    async def has_remove_button(self, product_name: str) -> bool:
        return await self.get_product_card(product_name).get_by_role("button", name=REMOVE).is_visible()

    @allure.step("Sort products by {option}")
    async def sort_by(self, option: str) -> None:
        await self.sort_dropdown.select_option(option)

    async def get_cart_item_count(self) -> int:
        """Number shown on the cart badge; no badge means 0 items."""
        if await self.cart_badge.count() == 0:
            return 0
        text = await self.cart_badge.text_content()
        return int(text) if text and text.strip().isdigit() else 0

    async def wait_for_cart_count(self, expected: int) -> None:
        """
        Wait until the cart badge shows ``expected`` items.

        Raises:
            WaitTimeoutError: If the badge does not settle in time
        """
        async def badge_matches() -> bool:
            return await self.get_cart_item_count() == expected

        await self.wait_until(badge_matches, f"cart badge shows {expected}", scenario="cart_update")

    @allure.step("Go to cart")
    async def go_to_cart(self) -> None:
        await self.cart_button.click()

    async def open_menu(self) -> None:
        await self.menu_button.click()

    @allure.step("Logout")
    async def logout(self) -> None:
        await self.open_menu()
        await self.page.get_by_role("link", name=re.compile("logout", re.IGNORECASE)).click()

    async def get_all_product_names(self) -> List[str]:
        names = await self.page.locator(".inventory_item_name").all_text_contents()
        return [name for name in names if name]

    async def get_all_product_prices(self) -> List[str]:
        prices = await self.page.locator(".inventory_item_price").all_text_contents()
        return [price for price in prices if price]

    async def is_loaded(self) -> bool:
        """Whether the Products title is shown."""
        try:
            await self.page_title.wait_for(timeout=5000)
        except Exception:
            return False
        return (await self.page_title.text_content() or "").strip() == self.PAGE_TITLE
