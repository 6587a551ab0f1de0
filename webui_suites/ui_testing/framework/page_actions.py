"""
================================================================================
Page Actions
================================================================================

Element interactions shared by all page objects.

Every call resolves the calling worker's session from the SessionRegistry
and passes through the WaitEngine before touching the DOM (navigation is
the only exception).

Usage:
    actions = PageActions(registry, WaitEngine())
    actions.navigate("https://app.example.com/login")
    actions.type(By.name("username"), "admin")
    actions.click(By.css("button[type='submit']"))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import allure
from loguru import logger

from .exceptions import NoActiveSessionError, WaitTimeoutError
from .locators import Locator
from .session_registry import SessionRegistry, current_worker_id
from .wait_engine import Condition, WaitEngine


def _masked(locator: Locator, text: str) -> str:
    """Hide values typed into password-like fields."""
    if "password" in str(locator).lower():
        return "*" * len(text)
    return text


class PageActions:
    """
    Stateless interaction helpers built on SessionRegistry + WaitEngine.

    Injected into page objects instead of being inherited from.
    """

    def __init__(
        self,
        registry: SessionRegistry,
        wait_engine: WaitEngine,
        worker_id_provider: Callable[[], str] = current_worker_id,
    ):
        """
        Initialize page actions.

        Args:
            registry: Registry holding the worker's session
            wait_engine: Wait engine used before every DOM access
            worker_id_provider: Returns the calling worker's id
        """
        self.registry = registry
        self.wait_engine = wait_engine
        self._worker_id_provider = worker_id_provider

    def session(self) -> Any:
        """
        Session bound to the calling worker.

        Raises:
            NoActiveSessionError: No session is bound
        """
        worker_id = self._worker_id_provider()
        session = self.registry.current(worker_id)
        if session is None:
            raise NoActiveSessionError(worker_id)
        return session

    # =========================================================================
    # Waits
    # =========================================================================

    def wait_for_visible(self, locator: Locator, timeout: Optional[float] = None) -> Any:
        return self.wait_engine.wait_until(
            self.session(), locator, Condition.VISIBLE, timeout
        )

    def wait_for_clickable(self, locator: Locator, timeout: Optional[float] = None) -> Any:
        return self.wait_engine.wait_until(
            self.session(), locator, Condition.CLICKABLE, timeout
        )

    # =========================================================================
    # Interactions
    # =========================================================================

    def click(self, locator: Locator) -> None:
        """Wait until clickable, then click."""
        with allure.step(f"Click: {locator}"):
            logger.info(f"Clicking element: {locator}")
            self.wait_for_clickable(locator).click()

    def type(self, locator: Locator, text: str) -> None:
        """Wait until visible, clear existing content, then enter `text`."""
        shown = _masked(locator, text)
        with allure.step(f"Type into {locator}: {shown}"):
            logger.info(f"Typing into element: {locator} with text: {shown}")
            element = self.wait_for_visible(locator)
            element.clear()
            element.send_text(text)

    def read_text(self, locator: Locator) -> str:
        """Rendered text of a visible element."""
        text = self.wait_for_visible(locator).get_text()
        logger.debug(f"Read text from {locator}: {text!r}")
        return text

    def is_displayed(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        """
        Whether the element becomes visible within the timeout.

        A timeout (including an element that never appeared) yields False
        instead of an exception.
        """
        try:
            self.wait_for_visible(locator, timeout)
            return True
        except WaitTimeoutError as e:
            logger.debug(f"Element not displayed: {locator} ({e})")
            return False

    def navigate(self, url: str) -> None:
        """Load `url`. Callers wait for their own post-navigation conditions."""
        with allure.step(f"Navigate to {url}"):
            logger.info(f"Navigating to URL: {url}")
            self.session().navigate(url)

    # =========================================================================
    # Debug Utilities
    # =========================================================================

    def current_url(self) -> str:
        return self.session().current_url

    def screenshot(self, full_page: bool = True) -> bytes:
        return self.session().screenshot(full_page=full_page)


__all__ = [
    "PageActions",
]
