"""
Browser console error tracking.

Each test owns its own ``ConsoleErrorCollector``; nothing is shared between
tests running in parallel.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Sequence

# Messages that are expected in development builds of the app
IGNORED_PATTERNS: Sequence[str] = (
    "Warning:",
    "React state update on an unmounted component",
)


@dataclass
class ConsoleError:
    message: str
    type: str
    timestamp: datetime = field(default_factory=datetime.now)


class ConsoleErrorCollector:
    """Collects console errors and uncaught page errors of a Playwright page."""

    def __init__(self, ignored_patterns: Sequence[str] = IGNORED_PATTERNS):
        self.errors: List[ConsoleError] = []
        self.ignored_patterns = tuple(ignored_patterns)

    def attach(self, page) -> "ConsoleErrorCollector":
        """Register listeners on ``page``. Call it before the test interacts with the page."""
        page.on("console", self._on_console)
        page.on("pageerror", self._on_page_error)
        return self

    def _on_console(self, msg) -> None:
        if msg.type == "error":
            self.errors.append(ConsoleError(message=msg.text, type=msg.type))

    def _on_page_error(self, error) -> None:
        self.errors.append(ConsoleError(message=str(error), type="pageerror"))

    @property
    def critical_errors(self) -> List[ConsoleError]:
        return [
            e for e in self.errors
            if not any(pattern in e.message for pattern in self.ignored_patterns)
        ]

    def assert_no_errors(self) -> None:
        """
        Assert that no console errors occurred.

        Raises:
            AssertionError: Listing every critical error
        """
        critical = self.critical_errors
        if critical:
            details = "\n".join(f"[{e.type}] {e.message}" for e in critical)
            raise AssertionError(f"Console errors detected:\n{details}")

    def clear(self) -> None:
        self.errors.clear()
