"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the Sauce Demo suites.

Components:
    - page_base: Base page object for common operations
    - console_errors: Per-test collection of browser console errors

Author: Automation Team
License: MIT
================================================================================
"""

from .console_errors import ConsoleError, ConsoleErrorCollector
from .page_base import BasePage, PageBase

__all__ = [
    "BasePage",
    "PageBase",
    "ConsoleError",
    "ConsoleErrorCollector",
]
