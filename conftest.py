"""
Repository-level pytest configuration.

Why this exists:
  - Provide safe defaults for local runs (no secrets embedded)
  - Register the --run-ui option that enables the browser suites
  - Keep behavior explicit and discoverable

The Sauce Demo credentials are public demo values.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run the Playwright UI suites (needs installed browsers and network access)",
    )


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Set demo-safe environment defaults if not already provided by the user/CI.
    """
    defaults = {
        "UI_BASE_URL": "https://www.saucedemo.com",
        "ENVIRONMENT": "dev",
    }

    for k, v in defaults.items():
        os.environ.setdefault(k, v)

    yield
