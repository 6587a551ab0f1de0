"""
Repository-level pytest configuration.

Why this exists:
  - Register the harness command-line options (they must live in the root conftest)
  - Initialize Loguru once per test process
  - Keep behavior explicit and discoverable
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from webui_tools.common import init_logger

pytest_plugins = ["pytester"]


def pytest_addoption(parser):
    """Register UI harness options."""
    group = parser.getgroup("webui", "Web UI harness")
    group.addoption(
        "--env",
        action="store",
        default=None,
        help="Target environment (dev, qa, prod). Overrides ENV and config.yaml.",
    )
    group.addoption(
        "--browser",
        action="store",
        default=None,
        help="Browser override: chrome, firefox, edge, safari.",
    )
    group.addoption(
        "--headed",
        action="store_true",
        default=False,
        help="Run the browser windowed (overrides `headless`).",
    )
    group.addoption(
        "--run-ui",
        action="store_true",
        default=False,
        help="Run browser-driven UI tests (skipped otherwise).",
    )


def pytest_configure(config):
    """Initialize logging before collection."""
    init_logger(level=os.getenv("LOG_LEVEL"), log_file=os.getenv("LOG_FILE"))


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
