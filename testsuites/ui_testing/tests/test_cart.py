"""
================================================================================
Shopping Cart UI Tests (Async / Playwright)
================================================================================
"""

import re

import allure
import pytest
from playwright.async_api import expect

from qa_tools.report_tools import step_with_evidence
from testsuites.ui_testing.data.sauce_demo import (
    EXPECTED_PRODUCT_COUNT,
    PRODUCTS,
    SORT_OPTIONS,
    parse_price,
    random_product,
    random_products,
)


@allure.epic("UI Testing")
@allure.feature("Shopping Cart")
class TestCart:
    """Cart UI test suite (async)."""

    @pytest.fixture(autouse=True)
    async def _login(self, console_errors, logged_in):
        yield
        console_errors.assert_no_errors()

    @allure.story("Add to cart")
    @allure.title("Adding a product updates badge and button")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_add_product_to_cart(self, page, inventory_page, test_logger):
        product = PRODUCTS["backpack"]

        await step_with_evidence(
            "Add product to cart", page,
            lambda: inventory_page.add_to_cart(product.name), test_logger,
        )

        await inventory_page.wait_for_cart_count(1)
        assert await inventory_page.has_remove_button(product.name)

    @allure.story("Remove from cart")
    @allure.title("Removing a product on the inventory page clears the badge")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke
    @pytest.mark.asyncio
    async def test_remove_product_from_inventory(self, inventory_page):
        product = PRODUCTS["bike_light"]

        await inventory_page.add_to_cart(product.name)
        await inventory_page.wait_for_cart_count(1)

        await inventory_page.remove_from_cart(product.name)

        await inventory_page.wait_for_cart_count(0)
        assert await inventory_page.has_add_to_cart_button(product.name)

    @allure.story("Cart page")
    @allure.title("Cart page lists every added product with its price")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_cart_lists_added_products(self, inventory_page, cart_page):
        products = random_products(3)
        for product in products:
            await inventory_page.add_to_cart(product.name)
        await inventory_page.wait_for_cart_count(len(products))

        await inventory_page.go_to_cart()

        await expect(cart_page.cart_items).to_have_count(len(products))
        assert sorted(await cart_page.get_cart_item_names()) == sorted(p.name for p in products)
        assert sorted(await cart_page.get_cart_item_prices()) == sorted(p.price for p in products)

    @allure.story("Cart page")
    @allure.title("Removing an item on the cart page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_remove_item_on_cart_page(self, inventory_page, cart_page):
        await inventory_page.add_to_cart(PRODUCTS["onesie"].name)
        await inventory_page.add_to_cart(PRODUCTS["fleece_jacket"].name)
        await inventory_page.go_to_cart()

        await cart_page.remove_item(PRODUCTS["onesie"].name)

        await expect(cart_page.cart_items).to_have_count(1)
        assert await cart_page.get_cart_item_names() == [PRODUCTS["fleece_jacket"].name]

    @allure.story("Cart page")
    @allure.title("Continue shopping returns to the inventory")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P2
    @pytest.mark.asyncio
    async def test_continue_shopping(self, inventory_page, cart_page):
        await inventory_page.go_to_cart()
        await cart_page.continue_shopping()

        assert await inventory_page.is_loaded()

    @allure.story("Product listing")
    @allure.title("Inventory shows the full catalog with prices")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.asyncio
    async def test_inventory_lists_catalog(self, inventory_page):
        cards = await inventory_page.get_product_cards()

        assert len(cards) == EXPECTED_PRODUCT_COUNT
        assert sorted(await inventory_page.get_all_product_names()) == sorted(p.name for p in PRODUCTS.values())
        for product in PRODUCTS.values():
            assert await inventory_page.get_product_price(product.name) == product.price

    @allure.story("Product listing")
    @allure.title("Products can be sorted")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.parametrize("option", SORT_OPTIONS, ids=lambda option: option.value)
    @pytest.mark.asyncio
    async def test_sort_products(self, page, inventory_page, test_logger, option):
        await step_with_evidence(
            f"Sort by {option.label}", page,
            lambda: inventory_page.sort_by(option.value), test_logger,
        )

        names = await inventory_page.get_all_product_names()
        prices = [parse_price(p) for p in await inventory_page.get_all_product_prices()]
        expected = {
            "az": (names, sorted(names)),
            "za": (names, sorted(names, reverse=True)),
            "lohi": (prices, sorted(prices)),
            "hilo": (prices, sorted(prices, reverse=True)),
        }
        actual, ordered = expected[option.value]
        assert actual == ordered

    @allure.story("Add to cart")
    @allure.title("Cart persists across pages")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression
    @pytest.mark.asyncio
    async def test_cart_persists_across_pages(self, page, inventory_page, test_logger):
        product = random_product()

        async def add_product():
            await inventory_page.add_to_cart(product.name)
            await inventory_page.wait_for_cart_count(1)

        await step_with_evidence("Add product on inventory page", page, add_product, test_logger)
        await step_with_evidence(
            "Open product details", page,
            lambda: inventory_page.click_product_name(product.name), test_logger,
        )

        await expect(page).to_have_url(re.compile(r"inventory-item\.html"))
        assert await inventory_page.get_cart_item_count() == 1
