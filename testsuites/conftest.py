"""
================================================================================
Suite Pytest Configuration
================================================================================

This module registers project-wide markers, gates the browser suites and
provides the session logger that every suite receives by injection.

================================================================================
"""

import os

import pytest

from qa_tools.common import Logger, create_logger, init_logger, is_truthy, load_logger_settings


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "unit: Tests that need neither browser nor network"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests (run with --run-ui or RUN_UI_TESTS=1)"
    )


def _ui_enabled(config) -> bool:
    return config.getoption("--run-ui", default=False) or is_truthy(os.environ.get("RUN_UI_TESTS"))


def pytest_collection_modifyitems(config, items):
    """
    Add directory-based markers and skip UI tests unless enabled.
    """
    skip_ui = pytest.mark.skip(reason="UI suites need --run-ui (or RUN_UI_TESTS=1)")
    run_ui = _ui_enabled(config)

    for item in items:
        parts = item.path.parts
        if "ui_testing" in parts:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)
        elif "unit" in parts:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Sauce Demo E2E Suite",
        "=" * 60,
        "",
    ]


@pytest.fixture(scope="session")
def qa_logger() -> Logger:
    """
    Session logger built once from configuration and environment.

    Suites derive per-test children from it instead of importing a global.
    """
    init_logger()
    return create_logger({"svc": "qa-automation"}, settings=load_logger_settings())
