"""
================================================================================
Suite Pytest Configuration
================================================================================

Registers common markers, tags tests by directory and gates the
browser-driven UI tests behind --run-ui / RUN_UI_TESTS=1.

================================================================================
"""

import os

import pytest


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
        "markers", "e2e: End-to-end tests simulating user flows"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser-driven UI tests (need --run-ui)"
    )
    config.addinivalue_line(
        "markers", "unit: Framework unit tests (no browser)"
    )
    config.addinivalue_line(
        "markers", "auth: Tests related to authentication"
    )


def _ui_enabled(config) -> bool:
    return bool(config.getoption("--run-ui")) or os.getenv("RUN_UI_TESTS") == "1"


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds directory markers and skips UI tests unless explicitly enabled.
    """
    skip_ui = pytest.mark.skip(reason="UI tests need --run-ui or RUN_UI_TESTS=1")
    run_ui = _ui_enabled(config)

    for item in items:
        path = str(item.fspath)

        # Auto-add 'unit' marker to tests in unit directory
        if f"{os.sep}unit{os.sep}" in path:
            item.add_marker(pytest.mark.unit)

        # Auto-add 'ui' marker to tests in ui_testing directory
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
            if not run_ui:
                item.add_marker(skip_ui)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Web UI Automation Harness",
        f"UI tests: {'enabled' if _ui_enabled(config) else 'skipped (use --run-ui)'}",
        "=" * 60,
        "",
    ]
