"""
Allure reporting helpers: attachments and evidence-capturing steps.
"""

from .allure_utils import (
    attach_html,
    attach_json,
    attach_png,
    attach_text,
    capture_evidence,
    execute_steps,
    log_to_report,
    step_with_attachment,
    step_with_evidence,
    timed_step,
)

__all__ = [
    "attach_html",
    "attach_json",
    "attach_png",
    "attach_text",
    "capture_evidence",
    "execute_steps",
    "log_to_report",
    "step_with_attachment",
    "step_with_evidence",
    "timed_step",
]
