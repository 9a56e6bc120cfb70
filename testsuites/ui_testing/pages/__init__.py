"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the Sauce Demo application.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .cart_page import CartPage
from .checkout_page import CheckoutPage
from .inventory_page import InventoryPage
from .login_page import LoginPage

__all__ = [
    "LoginPage",
    "InventoryPage",
    "CartPage",
    "CheckoutPage",
]
