# ================================================================================
# Wait Engine
# ================================================================================
#
# Bounded polling wait used by every element interaction before it touches
# the DOM.
#
# Key Features:
#   - Visible / Clickable element conditions
#   - Timeout read fresh from `explicitWait` on every call
#   - Fixed short polling interval (`pollInterval`, default 0.25s)
#   - Never sleeps past the deadline
#
# Usage:
#   engine = WaitEngine()
#   element = engine.wait_until(session, By.name("username"), Condition.VISIBLE)
#
# ================================================================================

import time
from enum import Enum
from typing import Any, Callable, Optional

from loguru import logger

from .config_loader import Configuration, get_configuration
from .exceptions import TypeMismatchError, WaitTimeoutError
from .locators import Locator


DEFAULT_POLL_INTERVAL = 0.25


class Condition(str, Enum):
    """Element states a wait can target."""

    VISIBLE = "visible"
    CLICKABLE = "clickable"

    def is_met(self, element: Any) -> bool:
        """Evaluate the condition against an element handle."""
        if not element.is_visible():
            return False
        if self is Condition.CLICKABLE:
            return element.is_enabled()
        return True


class WaitEngine:
    """
    Polls a session until an element condition holds or time runs out.

    The engine keeps no session state: each call receives the session it
    should poll, so one engine serves every worker.
    """

    def __init__(
        self,
        config_provider: Callable[[], Configuration] = get_configuration,
        poll_interval: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Initialize wait engine.

        Args:
            config_provider: Returns the configuration to read timeouts from
            poll_interval: Fixed interval in seconds; overrides `pollInterval`
            clock: Monotonic time source
            sleep: Sleep function
        """
        self._config_provider = config_provider
        self._poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep

    def timeout_seconds(self) -> int:
        """Current `explicitWait` value (must be a positive integer)."""
        config = self._config_provider()
        timeout = config.get_int("explicitWait")
        if timeout <= 0:
            raise TypeMismatchError(
                "explicitWait", config.get_string("explicitWait"), "positive integer"
            )
        return timeout

    def poll_interval(self) -> float:
        if self._poll_interval is not None:
            return self._poll_interval

        raw = self._config_provider().get("pollInterval")
        if raw is None or raw == "":
            return DEFAULT_POLL_INTERVAL
        try:
            interval = float(raw)
        except ValueError:
            raise TypeMismatchError("pollInterval", raw, "number of seconds") from None
        if interval <= 0:
            raise TypeMismatchError("pollInterval", raw, "positive number of seconds")
        return interval

    def wait_until(
        self,
        session: Any,
        locator: Locator,
        condition: Condition,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Wait for the element matching `locator` to satisfy `condition`.

        Args:
            session: Browser session to poll
            locator: Element locator
            condition: Target condition
            timeout: Seconds to wait; defaults to `explicitWait`

        Returns:
            The element handle that satisfied the condition

        Raises:
            WaitTimeoutError: Condition not met in time (including when the
                              element never appeared at all)
        """
        if timeout is None:
            timeout = self.timeout_seconds()
        interval = self.poll_interval()

        start = self._clock()
        deadline = start + timeout
        attempt = 0

        while True:
            attempt += 1
            element = session.find_element(locator)
            if element is not None and condition.is_met(element):
                logger.trace(
                    f"{locator} is {condition.value} after {attempt} attempt(s) "
                    f"({self._clock() - start:.2f}s)"
                )
                return element

            now = self._clock()
            if now >= deadline:
                elapsed = now - start
                logger.debug(
                    f"Timeout after {elapsed:.2f}s waiting for {locator} "
                    f"to be {condition.value} ({attempt} attempts)"
                )
                raise WaitTimeoutError(locator, condition, elapsed)

            self._sleep(min(interval, deadline - now))


__all__ = [
    "DEFAULT_POLL_INTERVAL",
    "Condition",
    "WaitEngine",
]
