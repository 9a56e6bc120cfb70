# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# This module provides the retry and wait strategies used by the UI suites.
# It is independent of any browser automation: operations and predicates are
# plain callables (sync or async).
#
# Key Features:
#   - Bounded retries with exponential backoff (optional jitter)
#   - Polling-based condition waiting with a deadline
#   - Optional cancellation of a pending wait
#   - Named policy presets for common UI scenarios
#
# Usage:
#   result = await with_retries(lambda attempt: page.goto(url), max_attempts=3)
#   await wait_for_condition(lambda: badge.is_visible(), timeout=5.0)
#
# ================================================================================

import asyncio
import dataclasses
import inspect
import random
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, TypeVar, Union

T = TypeVar("T")

MaybeAwaitable = Union[T, Awaitable[T]]
OnRetry = Callable[[Exception, int], MaybeAwaitable[None]]

# Monotonic clock used for deadlines
_clock = time.monotonic


@dataclass(frozen=True)
class RetryPolicy:
    """
    Configuration for retried operations.

    Attributes:
        max_attempts: Total attempts, including the first one (retries + 1)
        initial_delay: Delay before the second attempt, in seconds
        backoff_factor: Multiplier applied to the delay after each failure
        max_delay: Upper bound for any single delay, in seconds
        on_retry: Called with (error, attempt) before each delay
        jitter: Randomise each sleep by +/- 25%
    """
    max_attempts: int = 3
    initial_delay: float = 0.5
    backoff_factor: float = 2.0
    max_delay: float = 5.0
    on_retry: Optional[OnRetry] = None
    jitter: bool = False

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.backoff_factor < 1:
            raise ValueError(f"backoff_factor must be >= 1, got {self.backoff_factor}")
        if self.initial_delay < 0 or self.max_delay < 0:
            raise ValueError("delays must be >= 0")


@dataclass(frozen=True)
class WaitPolicy:
    """
    Configuration for condition waits.

    Attributes:
        timeout: Total time budget in seconds
        poll_interval: Pause between predicate evaluations, in seconds
        description: Included in the timeout error message
    """
    timeout: float = 10.0
    poll_interval: float = 0.2
    description: Optional[str] = None

    def __post_init__(self):
        if self.timeout < 0 or self.poll_interval < 0:
            raise ValueError("timeout and poll_interval must be >= 0")


# Pre-configured policies for common UI scenarios
RETRY_SCENARIOS: Dict[str, RetryPolicy] = {
    "default": RetryPolicy(),
    # Quick UI actions (clicks, fills)
    "fast": RetryPolicy(max_attempts=3, initial_delay=0.2, max_delay=1.0),
    # Page navigation over the network
    "navigation": RetryPolicy(max_attempts=3, initial_delay=1.0, max_delay=5.0),
}

WAIT_SCENARIOS: Dict[str, WaitPolicy] = {
    "default": WaitPolicy(),
    "fast": WaitPolicy(timeout=3.0, poll_interval=0.1),
    "page_load": WaitPolicy(timeout=15.0, poll_interval=0.25),
    # Cart badge updates after add/remove
    "cart_update": WaitPolicy(timeout=5.0, poll_interval=0.1),
}


class WaitTimeoutError(TimeoutError):
    """Raised when a wait operation times out."""

    def __init__(self, timeout: float, description: Optional[str] = None, elapsed: Optional[float] = None):
        self.timeout = timeout
        self.description = description
        self.elapsed = elapsed
        detail = f": {description}" if description else ""
        super().__init__(f"wait_for_condition timeout{detail} after {timeout:g}s")


class WaitCancelledError(Exception):
    """Raised when a pending wait is cancelled through its cancel event."""

    def __init__(self, description: Optional[str] = None, elapsed: Optional[float] = None):
        self.description = description
        self.elapsed = elapsed
        detail = f": {description}" if description else ""
        super().__init__(f"wait_for_condition cancelled{detail}")


@dataclass
class TimedResult:
    """Result of ``with_timing``: the value and the elapsed seconds."""
    result: Any
    elapsed: float

    @property
    def ms(self) -> int:
        return int(round(self.elapsed * 1000))


def get_retry_policy(scenario: str) -> RetryPolicy:
    """
    Get retry policy for a specific scenario.

    Args:
        scenario: Scenario name (e.g., "navigation", "fast")

    Returns:
        RetryPolicy for the scenario, or default if not found
    """
    return RETRY_SCENARIOS.get(scenario, RETRY_SCENARIOS["default"])


def get_wait_policy(scenario: str) -> WaitPolicy:
    """
    Get wait policy for a specific scenario.

    Returns:
        WaitPolicy for the scenario, or default if not found
    """
    return WAIT_SCENARIOS.get(scenario, WAIT_SCENARIOS["default"])


async def sleep(seconds: float) -> None:
    """Suspend the current task. Single delay primitive for this module."""
    await asyncio.sleep(seconds)


async def _resolve(value: MaybeAwaitable[T]) -> T:
    # Support both sync and async callables
    if inspect.isawaitable(value):
        return await value
    return value


def calculate_next_delay(current_delay: float, policy: RetryPolicy) -> float:
    """
    Calculate the delay that follows ``current_delay``.

    Args:
        current_delay: Delay used for the last pause, in seconds
        policy: Retry policy

    Returns:
        Next delay in seconds, capped at ``policy.max_delay``
    """
    return min(current_delay * policy.backoff_factor, policy.max_delay)


def _apply_jitter(delay: float, policy: RetryPolicy) -> float:
    if not policy.jitter:
        return delay
    # Add +/- 25% jitter
    return delay * (0.75 + random.random() * 0.5)


def _build(policy_cls, policy, overrides):
    if policy is None:
        return policy_cls(**overrides)
    if overrides:
        return dataclasses.replace(policy, **overrides)
    return policy


async def with_retries(
    operation: Callable[[int], MaybeAwaitable[T]],
    policy: Optional[RetryPolicy] = None,
    **overrides: Any,
) -> T:
    """
    Run ``operation`` until it succeeds or the attempts are exhausted.

    Args:
        operation: Called with the 1-based attempt number; sync or async
        policy: Retry policy. Defaults to ``RetryPolicy()``
        **overrides: Field overrides applied on top of ``policy``

    Returns:
        The first successful result

    Raises:
        Exception: The error of the last attempt, unchanged, once
            ``max_attempts`` attempts failed. An error raised by
            ``on_retry`` aborts the loop and propagates as is.

    Example:
        async def open_cart(attempt):
            await page.goto(f"{base_url}/cart.html")

        await with_retries(open_cart, max_attempts=3, initial_delay=0.5)
    """
    policy = _build(RetryPolicy, policy, overrides)

    attempt = 0
    delay = policy.initial_delay

    while True:
        attempt += 1
        try:
            return await _resolve(operation(attempt))
        except Exception as exc:
            if attempt >= policy.max_attempts:
                raise
            if policy.on_retry is not None:
                await _resolve(policy.on_retry(exc, attempt))
            await sleep(_apply_jitter(min(delay, policy.max_delay), policy))
            delay = calculate_next_delay(delay, policy)


async def _pause(seconds: float, cancel_event: Optional[asyncio.Event]) -> None:
    if cancel_event is None:
        await sleep(seconds)
        return
    # Wake up early when the wait gets cancelled
    try:
        await asyncio.wait_for(cancel_event.wait(), timeout=seconds)
    except asyncio.TimeoutError:
        pass


async def wait_for_condition(
    predicate: Callable[[], MaybeAwaitable[bool]],
    policy: Optional[WaitPolicy] = None,
    *,
    cancel_event: Optional[asyncio.Event] = None,
    **overrides: Any,
) -> bool:
    """
    Poll ``predicate`` until it returns True or the deadline passes.

    Each iteration checks the deadline first, then evaluates the predicate
    once, then pauses ``poll_interval``. A deadline that has already passed
    fails without evaluating the predicate.

    Args:
        predicate: Returns a bool; sync or async
        policy: Wait policy. Defaults to ``WaitPolicy()``
        cancel_event: When set, the wait fails with WaitCancelledError
        **overrides: Field overrides applied on top of ``policy``

    Returns:
        True once the predicate holds

    Raises:
        WaitTimeoutError: If the timeout elapses first
        WaitCancelledError: If ``cancel_event`` is set first

    Example:
        await wait_for_condition(
            lambda: inventory.get_cart_item_count(),
            timeout=5.0,
            description="cart badge shows items",
        )
    """
    policy = _build(WaitPolicy, policy, overrides)
    start = _clock()

    while True:
        elapsed = _clock() - start

        if cancel_event is not None and cancel_event.is_set():
            raise WaitCancelledError(policy.description, elapsed)

        if elapsed >= policy.timeout:
            raise WaitTimeoutError(policy.timeout, policy.description, elapsed)

        if await _resolve(predicate()):
            return True

        await _pause(policy.poll_interval, cancel_event)


async def with_timing(fn: Callable[[], MaybeAwaitable[T]]) -> TimedResult:
    """
    Run ``fn`` and measure how long it took.

    Returns:
        TimedResult with the value and elapsed seconds
    """
    start = _clock()
    result = await _resolve(fn())
    return TimedResult(result=result, elapsed=_clock() - start)


def retry_logger(log: Any, description: str = "operation") -> OnRetry:
    """
    Build an ``on_retry`` callback that logs each failed attempt.

    Args:
        log: Any object exposing ``warn(msg, extra)`` (e.g. qa_tools Logger)
        description: Human-readable operation name

    Example:
        await with_retries(op, on_retry=retry_logger(log, "open inventory"))
    """
    def on_retry(error: Exception, attempt: int) -> None:
        log.warn(
            f"Retrying {description} after failed attempt {attempt}",
            {"attempt": attempt, "error": f"{type(error).__name__}: {error}"},
        )
    return on_retry


__all__ = [
    "RetryPolicy",
    "WaitPolicy",
    "RETRY_SCENARIOS",
    "WAIT_SCENARIOS",
    "WaitTimeoutError",
    "WaitCancelledError",
    "TimedResult",
    "get_retry_policy",
    "get_wait_policy",
    "sleep",
    "calculate_next_delay",
    "with_retries",
    "wait_for_condition",
    "with_timing",
    "retry_logger",
]
