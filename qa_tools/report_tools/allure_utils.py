"""
================================================================================
Allure Report Utilities
================================================================================

This module provides utilities for enriching Allure test reports with
attachments and evidence captured when a UI step fails.

Features:
- Custom attachment helpers
- Steps (single or sequenced) that capture screenshot / page source / console logs on failure
- Timed steps

================================================================================
"""

import json
import time
from typing import Any, Awaitable, Callable, Optional, Sequence, Tuple, TypeVar, Union

import allure

from qa_tools.common.logger import Logger

T = TypeVar("T")


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_json(data: Any, name: str = "Data"):
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (will be JSON serialized)
        name: Attachment name
    """
    json_str = json.dumps(data, indent=2, default=str)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_html(html: str, name: str = "HTML"):
    """
    Attach HTML content to Allure report.
    """
    allure.attach(
        html,
        name=name,
        attachment_type=allure.attachment_type.HTML
    )


def attach_png(data: bytes, name: str = "screenshot"):
    """
    Attach a PNG image to Allure report.
    """
    allure.attach(
        data,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Evidence Capture
# ================================================================================

async def capture_evidence(page, log: Logger) -> None:
    """
    Attach screenshot, page source and console logs of ``page``.

    Failures while capturing are logged and never raised, so the original
    test failure stays the reported one.

    Args:
        page: Playwright Page
        log: Logger for capture problems
    """
    try:
        attach_png(await page.screenshot(full_page=True), name="screenshot")
        attach_html(await page.content(), name="page-source")

        try:
            logs = await page.evaluate("() => window.consoleLogs || []")
        except Exception:
            logs = []
        if logs:
            attach_json(logs, name="console-logs")
    except Exception as e:
        log.warn("Failed to capture evidence", {"error": str(e)})


async def step_with_evidence(
    name: str,
    page,
    body: Callable[[], Awaitable[T]],
    log: Logger,
) -> T:
    """
    Execute a test step with evidence capture.

    Automatically takes a screenshot on failure and attaches page source.

    Args:
        name: Step name shown in the report
        page: Playwright Page used for evidence
        body: Async step body
        log: Logger for step lifecycle messages

    Returns:
        The body's result

    Example:
        await step_with_evidence("Add product to cart", page,
                                 lambda: inventory.add_to_cart(name), log)
    """
    with allure.step(name):
        log.debug(f"Step started: {name}")
        try:
            result = await body()
        except Exception as error:
            log.error(f"Step failed: {name}", {"error": str(error)})
            await capture_evidence(page, log)
            raise
        log.info(f"Step completed: {name}")
        return result


async def execute_steps(
    page,
    steps: Sequence[Tuple[str, Callable[[], Awaitable[Any]]]],
    log: Logger,
) -> None:
    """
    Run ``(name, action)`` pairs in order, each as a ``step_with_evidence``.

    The first failing step stops the sequence and its error propagates.
    """
    for name, action in steps:
        await step_with_evidence(name, page, action, log)


async def timed_step(name: str, body: Callable[[], Awaitable[T]]) -> T:
    """
    Time a test step and attach its duration.
    """
    start = time.monotonic()
    with allure.step(name):
        result = await body()
        duration_ms = int((time.monotonic() - start) * 1000)
        attach_text(f"Step completed in {duration_ms}ms", name="timing")
        return result


async def step_with_attachment(
    name: str,
    body: Callable[[], Awaitable[T]],
    attachment_name: str,
    attachment_body: Union[str, bytes],
    attachment_type=allure.attachment_type.TEXT,
) -> T:
    """
    Execute a test step and attach custom content once it succeeds.
    """
    with allure.step(name):
        result = await body()
        allure.attach(attachment_body, name=attachment_name, attachment_type=attachment_type)
        return result


def log_to_report(message: str, details: Optional[Any] = None) -> None:
    """
    Log information to the test report as a step.

    Args:
        message: Step title
        details: Optional details; dicts/lists are attached as JSON
    """
    with allure.step(message):
        if details is None:
            return
        if isinstance(details, (dict, list)):
            attach_json(details, name="details")
        else:
            attach_text(str(details), name="details")
