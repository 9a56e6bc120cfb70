"""
================================================================================
QA Tools Common Utilities
================================================================================

This module provides the resilience layer (retries and condition waits), the
structured logger and configuration management shared by all suites.

Exports:
    - with_retries / RetryPolicy: bounded retries with exponential backoff
    - wait_for_condition / WaitPolicy: polling with a deadline
    - Logger / create_logger / LoggerSettings: leveled, contextual logging
    - get_config / init_logger / load_logger_settings: configuration and bootstrap

Usage:
    from qa_tools.common import create_logger, init_logger, load_logger_settings

    init_logger()
    log = create_logger({"svc": "qa-automation"}, settings=load_logger_settings())

================================================================================
"""

from .global_config import (
    get_config,
    init_logger,
    is_truthy,
    load_logger_settings,
    reload_config,
    set_config,
)
from .logger import LEVEL_RANK, Logger, LoggerSettings, LogLevel, create_logger
from .utils import now_iso, pick, random_string, safe_json_dumps, safe_json_serialize
from .wait_helpers import (
    RetryPolicy,
    TimedResult,
    WaitCancelledError,
    WaitPolicy,
    WaitTimeoutError,
    get_retry_policy,
    get_wait_policy,
    retry_logger,
    sleep,
    wait_for_condition,
    with_retries,
    with_timing,
)

# Export public API
__all__ = [
    "get_config",
    "set_config",
    "reload_config",
    "init_logger",
    "is_truthy",
    "load_logger_settings",
    "LEVEL_RANK",
    "LogLevel",
    "Logger",
    "LoggerSettings",
    "create_logger",
    "now_iso",
    "pick",
    "random_string",
    "safe_json_dumps",
    "safe_json_serialize",
    "RetryPolicy",
    "WaitPolicy",
    "TimedResult",
    "WaitTimeoutError",
    "WaitCancelledError",
    "get_retry_policy",
    "get_wait_policy",
    "retry_logger",
    "sleep",
    "wait_for_condition",
    "with_retries",
    "with_timing",
]
