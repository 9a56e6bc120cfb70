"""
================================================================================
Sauce Demo Test Data
================================================================================

Static data used by the login, cart and checkout suites: users, products,
checkout forms, sort options, expected error messages and page URLs.

================================================================================
"""

import random
from dataclasses import dataclass
from typing import Dict, List

from qa_tools.common import pick


@dataclass(frozen=True)
class User:
    username: str
    password: str


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: str
    description: str


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


@dataclass(frozen=True)
class SortOption:
    value: str
    label: str


PASSWORD = "secret_sauce"

USERS: Dict[str, User] = {
    "standard": User("standard_user", PASSWORD),
    "locked_out": User("locked_out_user", PASSWORD),
    "problem": User("problem_user", PASSWORD),
    "performance_glitch": User("performance_glitch_user", PASSWORD),
    "invalid_password": User("standard_user", "wrong_password"),
    "invalid_username": User("unknown_user", PASSWORD),
}

# Product data based on Sauce Demo inventory
PRODUCTS: Dict[str, Product] = {
    "backpack": Product(
        id="sauce-labs-backpack",
        name="Sauce Labs Backpack",
        price="$29.99",
        description="carry.allTheThings() with the sleek, streamlined Sly Pack that melds "
                    "uncompromising style with unequaled laptop and tablet protection.",
    ),
    "bike_light": Product(
        id="sauce-labs-bike-light",
        name="Sauce Labs Bike Light",
        price="$9.99",
        description="A red light isn't the desired state in testing but it sure helps when riding "
                    "your bike at night. Water-resistant with 3 lighting modes, 1 AAA battery included.",
    ),
    "bolt_t_shirt": Product(
        id="sauce-labs-bolt-t-shirt",
        name="Sauce Labs Bolt T-Shirt",
        price="$15.99",
        description="Get your testing superhero on with the Sauce Labs bolt T-shirt. From American "
                    "Apparel, 100% ringspun combed cotton, heather gray with red bolt.",
    ),
    "fleece_jacket": Product(
        id="sauce-labs-fleece-jacket",
        name="Sauce Labs Fleece Jacket",
        price="$49.99",
        description="It's not every day that you come across a midweight quarter-zip fleece jacket "
                    "capable of handling everything from a relaxing day outdoors to a busy day at the office.",
    ),
    "onesie": Product(
        id="sauce-labs-onesie",
        name="Sauce Labs Onesie",
        price="$7.99",
        description="Rib snap infant onesie for the junior automation engineer in development. "
                    "Reinforced 3-snap bottom closure, two-needle hemmed sleeves and bottom won't unravel.",
    ),
    "red_t_shirt": Product(
        id="test.allthethings()-t-shirt-(red)",
        name="Test.allTheThings() T-Shirt (Red)",
        price="$15.99",
        description="This classic Sauce Labs t-shirt is perfect to wear when cozying up to your keyboard "
                    "to automate a few tests. Super-soft and comfy ringspun combed cotton blend slim fit "
                    "you'll love what you're wearing.",
    ),
}

VALID_CHECKOUT_INFO: List[CheckoutInfo] = [
    CheckoutInfo("John", "Doe", "12345"),
    CheckoutInfo("Jane", "Smith", "54321"),
    CheckoutInfo("Michael", "Johnson", "98765"),
]

# Invalid checkout information for negative testing
INVALID_CHECKOUT_INFO: Dict[str, CheckoutInfo] = {
    "empty_first_name": CheckoutInfo("", "Doe", "12345"),
    "empty_last_name": CheckoutInfo("John", "", "12345"),
    "empty_postal_code": CheckoutInfo("John", "Doe", ""),
    "all_empty": CheckoutInfo("", "", ""),
}

SORT_OPTIONS: List[SortOption] = [
    SortOption("az", "Name (A to Z)"),
    SortOption("za", "Name (Z to A)"),
    SortOption("lohi", "Price (low to high)"),
    SortOption("hilo", "Price (high to low)"),
]

EXPECTED_PRODUCT_COUNT = 6

ERROR_MESSAGES: Dict[str, str] = {
    "invalid_credentials": "Epic sadface: Username and password do not match any user in this service",
    "locked_user": "Epic sadface: Sorry, this user has been locked out.",
    "missing_username": "Epic sadface: Username is required",
    "missing_password": "Epic sadface: Password is required",
    "missing_first_name": "Error: First Name is required",
    "missing_last_name": "Error: Last Name is required",
    "missing_postal_code": "Error: Postal Code is required",
}

URLS: Dict[str, str] = {
    "login": "/",
    "inventory": "/inventory.html",
    "cart": "/cart.html",
    "checkout": "/checkout-step-one.html",
    "checkout_two": "/checkout-step-two.html",
    "complete": "/checkout-complete.html",
}


def parse_price(price: str) -> float:
    """Convert a displayed price such as ``$29.99`` or ``Item total: $29.99`` to a float."""
    return float(price.rsplit("$", 1)[-1].strip())


def random_checkout_info() -> CheckoutInfo:
    return pick(VALID_CHECKOUT_INFO)


def random_product() -> Product:
    return pick(list(PRODUCTS.values()))


def random_products(count: int) -> List[Product]:
    """Return up to ``count`` distinct products in random order."""
    products = list(PRODUCTS.values())
    return random.sample(products, min(count, len(products)))
