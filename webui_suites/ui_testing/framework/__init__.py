"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based session lifecycle and synchronization layer.

Components:
    - config_loader: Layered, immutable environment configuration
    - browser_factory: Browser session construction per browser kind
    - session_registry: One session per test worker
    - wait_engine: Bounded polling wait for element conditions
    - page_actions: Click / type / read / visibility helpers for page objects
    - locators: Immutable element locators

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_factory import BrowserKind, BrowserSession, PageElement, SessionFactory
from .config_loader import (
    Configuration,
    ConfigLoader,
    Environment,
    get_configuration,
    init_configuration,
    reset_configuration,
)
from .exceptions import (
    ConfigError,
    DriverError,
    HarnessError,
    WaitError,
    WaitTimeoutError,
)
from .locators import By, Locator
from .page_actions import PageActions
from .session_registry import SessionRegistry, current_worker_id
from .wait_engine import Condition, WaitEngine

__all__ = [
    "BrowserKind",
    "BrowserSession",
    "PageElement",
    "SessionFactory",
    "Configuration",
    "ConfigLoader",
    "Environment",
    "get_configuration",
    "init_configuration",
    "reset_configuration",
    "ConfigError",
    "DriverError",
    "HarnessError",
    "WaitError",
    "WaitTimeoutError",
    "By",
    "Locator",
    "PageActions",
    "SessionRegistry",
    "current_worker_id",
    "Condition",
    "WaitEngine",
]
