"""
================================================================================
Browser Factory
================================================================================

Browser session construction for UI automation.

Features:
    - Closed set of browser kinds (chrome, firefox, edge, safari)
    - Table-driven dispatch to Playwright launchers
    - Headless / windowed launch presets
    - Launch failures reported as LaunchFailedError (never retried here)

Browser mapping:
    chrome  -> Chromium, channel "chrome"
    edge    -> Chromium, channel "msedge"
    firefox -> Firefox
    safari  -> WebKit

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from loguru import logger
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Error as PlaywrightError,
    Locator as PlaywrightLocator,
    Page,
    Playwright,
    sync_playwright,
)

from .config_loader import Configuration
from .exceptions import ElementLookupError, LaunchFailedError, UnsupportedBrowserError
from .locators import Locator


class BrowserKind(str, Enum):
    """Supported browsers."""

    CHROME = "chrome"
    FIREFOX = "firefox"
    EDGE = "edge"
    SAFARI = "safari"

    @classmethod
    def parse(cls, name: str) -> "BrowserKind":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise UnsupportedBrowserError(name) from None

    @property
    def chromium_based(self) -> bool:
        return self in (BrowserKind.CHROME, BrowserKind.EDGE)


# =============================================================================
# Session Handles
# =============================================================================

class PageElement:
    """
    Handle to the first DOM node matched by a locator.

    State probes (is_visible / is_enabled) never raise: an element that is
    detached or mid-navigation simply reports False.
    """

    def __init__(self, handle: PlaywrightLocator, locator: Locator):
        self._handle = handle
        self.locator = locator

    def is_visible(self) -> bool:
        try:
            return self._handle.is_visible()
        except PlaywrightError:
            return False

    def is_enabled(self) -> bool:
        try:
            return self._handle.is_enabled()
        except PlaywrightError:
            return False

    def click(self) -> None:
        self._handle.click()

    def clear(self) -> None:
        self._handle.clear()

    def send_text(self, text: str) -> None:
        self._handle.press_sequentially(text)

    def get_text(self) -> str:
        return self._handle.inner_text()

    def get_value(self) -> str:
        """Current value of an input field."""
        return self._handle.input_value()

    def __repr__(self) -> str:
        return f"PageElement({self.locator})"


# Engine errors raised when a lookup races a navigation or DOM re-render
TRANSIENT_LOOKUP_ERRORS = (
    "Execution context was destroyed",
    "detached",
    "navigat",
)


def _is_transient_lookup_error(error: PlaywrightError) -> bool:
    message = str(error)
    return any(marker in message for marker in TRANSIENT_LOOKUP_ERRORS)


class BrowserSession:
    """
    One live browser instance: Playwright driver, browser, context and page.

    Not thread-safe. Owned by exactly one worker through SessionRegistry.
    """

    def __init__(
        self,
        kind: BrowserKind,
        playwright: Playwright,
        browser: Browser,
        context: BrowserContext,
        page: Page,
    ):
        self.kind = kind
        self._playwright = playwright
        self._browser = browser
        self._context = context
        self.page = page
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def current_url(self) -> str:
        return self.page.url

    def navigate(self, url: str) -> None:
        self.page.goto(url)

    def find_element(self, locator: Locator) -> Optional[PageElement]:
        """
        Return the first match for `locator`, or None when nothing matches.

        Raises:
            ElementLookupError: The engine rejected the lookup (malformed selector)
        """
        handle = self.page.locator(locator.selector)
        try:
            if handle.count() == 0:
                return None
        except PlaywrightError as e:
            if not _is_transient_lookup_error(e):
                raise ElementLookupError(locator, str(e)) from e
            logger.trace(f"Lookup of {locator} failed transiently: {e}")
            return None
        return PageElement(handle.first, locator)

    def screenshot(self, full_page: bool = True) -> bytes:
        return self.page.screenshot(full_page=full_page)

    def close(self) -> None:
        """Close context and browser, then stop the Playwright driver."""
        if self._closed:
            return
        self._closed = True
        try:
            try:
                self._context.close()
            finally:
                self._browser.close()
        finally:
            self._playwright.stop()
        logger.debug(f"Browser session closed: {self.kind.value}")

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"BrowserSession({self.kind.value}, {state})"


# =============================================================================
# Launchers
# =============================================================================

# Arguments applied to every Chromium-family launch
CHROMIUM_ARGS: List[str] = [
    "--ignore-certificate-errors",
]

HEADLESS_VIEWPORT: Dict[str, int] = {"width": 1920, "height": 1080}


def _chromium_args(headless: bool) -> List[str]:
    args = list(CHROMIUM_ARGS)
    if not headless:
        args.append("--start-maximized")
    return args


def _launch_chrome(playwright: Playwright, headless: bool) -> Browser:
    return playwright.chromium.launch(
        channel="chrome", headless=headless, args=_chromium_args(headless)
    )


def _launch_edge(playwright: Playwright, headless: bool) -> Browser:
    return playwright.chromium.launch(
        channel="msedge", headless=headless, args=_chromium_args(headless)
    )


def _launch_firefox(playwright: Playwright, headless: bool) -> Browser:
    return playwright.firefox.launch(headless=headless)


def _launch_safari(playwright: Playwright, headless: bool) -> Browser:
    return playwright.webkit.launch(headless=headless)


Launcher = Callable[[Playwright, bool], Browser]

BROWSER_LAUNCHERS: Dict[BrowserKind, Launcher] = {
    BrowserKind.CHROME: _launch_chrome,
    BrowserKind.FIREFOX: _launch_firefox,
    BrowserKind.EDGE: _launch_edge,
    BrowserKind.SAFARI: _launch_safari,
}


def context_options(kind: BrowserKind, headless: bool) -> Dict[str, Any]:
    """Context options for the given browser and mode."""
    options: Dict[str, Any] = {"ignore_https_errors": True}
    if not headless and kind.chromium_based:
        # Let --start-maximized decide the window size
        options["no_viewport"] = True
    else:
        options["viewport"] = dict(HEADLESS_VIEWPORT)
    return options


class SessionFactory:
    """
    Creates browser sessions from configuration.

    Usage:
        factory = SessionFactory()
        session = factory.create(get_configuration())
        session.navigate("https://example.com")
        session.close()
    """

    def __init__(
        self,
        playwright_factory: Callable[[], Any] = sync_playwright,
        launchers: Optional[Dict[BrowserKind, Launcher]] = None,
    ):
        """
        Initialize session factory.

        Args:
            playwright_factory: Returns an object whose start() yields a
                                Playwright driver (sync_playwright by default)
            launchers: Override for the browser launch table
        """
        self._playwright_factory = playwright_factory
        self._launchers = launchers or BROWSER_LAUNCHERS

    def create(self, config: Configuration) -> BrowserSession:
        """
        Launch a new browser session.

        Raises:
            UnsupportedBrowserError: `browser` is not a supported kind
            LaunchFailedError: The engine could not start the browser
        """
        kind = BrowserKind.parse(config.get_string("browser"))
        headless = config.get_bool("headless")
        launcher = self._launchers.get(kind)
        if launcher is None:
            raise UnsupportedBrowserError(kind.value)

        # Page-level default timeout follows the explicit wait
        default_timeout_ms: Optional[int] = None
        if "explicitWait" in config:
            default_timeout_ms = config.get_int("explicitWait") * 1000

        logger.info(f"Launching browser: {kind.value} (headless={headless})")

        try:
            playwright = self._playwright_factory().start()
        except PlaywrightError as e:
            raise LaunchFailedError(kind.value, str(e)) from e

        try:
            browser = launcher(playwright, headless)
            context = browser.new_context(**context_options(kind, headless))
            if default_timeout_ms is not None:
                context.set_default_timeout(default_timeout_ms)
            page = context.new_page()
        except PlaywrightError as e:
            logger.error(f"Browser launch failed: {kind.value}: {e}")
            try:
                playwright.stop()
            except PlaywrightError as stop_error:
                logger.warning(f"Failed to stop Playwright after launch failure: {stop_error}")
            raise LaunchFailedError(kind.value, str(e)) from e

        logger.debug(f"Browser started: {kind.value} (headless={headless})")
        return BrowserSession(kind, playwright, browser, context, page)


__all__ = [
    "BrowserKind",
    "PageElement",
    "BrowserSession",
    "BROWSER_LAUNCHERS",
    "context_options",
    "SessionFactory",
]
