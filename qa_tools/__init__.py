"""
================================================================================
QA Tools
================================================================================

Reusable building blocks for the Sauce Demo end-to-end suites.

Modules:
    - common: retry/wait helpers, structured logger, configuration
    - report_tools: Allure attachment and evidence-capture helpers

Example:
    from qa_tools.common import create_logger, with_retries, wait_for_condition

    log = create_logger({"svc": "qa-automation"})
    result = await with_retries(fetch_cart, on_retry=retry_logger(log, "fetch cart"))
    await wait_for_condition(lambda: badge_visible, timeout=5.0)

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
