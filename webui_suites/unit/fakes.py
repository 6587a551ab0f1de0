"""
Fake automation-engine objects for unit tests.
"""

import time
from typing import Dict, Optional


class FakeElement:
    """In-memory element; optionally becomes visible after a delay."""

    def __init__(
        self,
        text: str = "",
        visible: bool = True,
        enabled: bool = True,
        visible_after: Optional[float] = None,
    ):
        self.text = text
        self.visible = visible
        self.enabled = enabled
        self.visible_after = visible_after
        self.clicks = 0
        self.calls = []
        self._created = time.monotonic()

    def is_visible(self) -> bool:
        if not self.visible:
            return False
        if self.visible_after is None:
            return True
        return time.monotonic() - self._created >= self.visible_after

    def is_enabled(self) -> bool:
        return self.enabled

    def click(self) -> None:
        self.calls.append("click")
        self.clicks += 1

    def clear(self) -> None:
        self.calls.append("clear")
        self.text = ""

    def send_text(self, text: str) -> None:
        self.calls.append("send_text")
        self.text += text

    def get_text(self) -> str:
        return self.text


class FakeSession:
    """In-memory session keyed by locator."""

    def __init__(self, elements: Optional[Dict] = None, fail_on_close: bool = False):
        self.elements = dict(elements or {})
        self.fail_on_close = fail_on_close
        self.visited = []
        self.closed = False
        self.close_calls = 0
        self.lookups = 0

    @property
    def current_url(self) -> str:
        return self.visited[-1] if self.visited else "about:blank"

    def navigate(self, url: str) -> None:
        self.visited.append(url)

    def find_element(self, locator):
        self.lookups += 1
        return self.elements.get(locator)

    def screenshot(self, full_page: bool = True) -> bytes:
        return b"\x89PNG"

    def close(self) -> None:
        self.close_calls += 1
        if self.fail_on_close:
            raise RuntimeError("browser already gone")
        self.closed = True


class FakeClock:
    """Manual clock; sleep() advances time instantly."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


