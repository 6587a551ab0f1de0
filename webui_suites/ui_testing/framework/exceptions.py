"""
================================================================================
Harness Exceptions
================================================================================

Error taxonomy for the UI harness.

    HarnessError
    ├── ConfigError      - fatal at startup
    ├── DriverError      - fatal to the current test
    └── WaitError        - propagates, except inside PageActions.is_displayed

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any


class HarnessError(Exception):
    """Base exception for all harness failures."""
    pass


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigError(HarnessError):
    """Raised when configuration cannot be resolved or read."""
    pass


class UnknownEnvironmentError(ConfigError):
    """Environment name is not one of the supported environments."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown environment: {name!r}")


class SourceUnavailableError(ConfigError):
    """A required configuration file does not exist."""

    def __init__(self, path: Any):
        self.path = path
        super().__init__(f"Configuration file not found: {path}")


class ConfigParseError(ConfigError):
    """A configuration file exists but is not a flat key-value mapping."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to parse configuration {path}: {reason}")


class MissingKeyError(ConfigError):
    """Requested configuration key is absent."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing configuration key: {key}")


class TypeMismatchError(ConfigError):
    """Configuration value cannot be parsed as the requested type."""

    def __init__(self, key: str, value: str, expected: str):
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(
            f"Configuration key {key!r} has value {value!r}, expected {expected}"
        )


# =============================================================================
# Driver Errors
# =============================================================================

class DriverError(HarnessError):
    """Raised when a browser session cannot be provided."""
    pass


class UnsupportedBrowserError(DriverError):
    """Configured browser is not in the supported set."""

    def __init__(self, browser: str):
        self.browser = browser
        super().__init__(f"Browser not supported: {browser!r}")


class LaunchFailedError(DriverError):
    """The automation engine failed to start a browser session."""

    def __init__(self, browser: str, reason: str):
        self.browser = browser
        self.reason = reason
        super().__init__(f"Failed to launch {browser}: {reason}")


class DoubleBindError(DriverError):
    """Worker already owns a live session."""

    def __init__(self, worker_id: str):
        self.worker_id = worker_id
        super().__init__(
            f"Worker {worker_id!r} already has an active session; release it first"
        )


class NoActiveSessionError(DriverError):
    """No session is bound to the calling worker."""

    def __init__(self, worker_id: str):
        self.worker_id = worker_id
        super().__init__(f"No active browser session for worker {worker_id!r}")


class ElementLookupError(DriverError):
    """The engine rejected an element lookup (e.g. malformed selector)."""

    def __init__(self, locator: Any, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Lookup of {locator} failed: {reason}")


# =============================================================================
# Wait Errors
# =============================================================================

class WaitError(HarnessError):
    """Raised when a synchronization wait does not succeed."""
    pass


class WaitTimeoutError(WaitError):
    """Condition never became true within the timeout."""

    def __init__(self, locator: Any, condition: Any, elapsed: float):
        self.locator = locator
        self.condition = condition
        self.elapsed = elapsed
        condition_name = getattr(condition, "value", condition)
        super().__init__(
            f"Timed out after {elapsed:.2f}s waiting for {locator} "
            f"to be {condition_name}"
        )


__all__ = [
    "HarnessError",
    "ConfigError",
    "UnknownEnvironmentError",
    "SourceUnavailableError",
    "ConfigParseError",
    "MissingKeyError",
    "TypeMismatchError",
    "DriverError",
    "UnsupportedBrowserError",
    "LaunchFailedError",
    "DoubleBindError",
    "NoActiveSessionError",
    "ElementLookupError",
    "WaitError",
    "WaitTimeoutError",
]
