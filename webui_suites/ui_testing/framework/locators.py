"""
================================================================================
Locators
================================================================================

Immutable element locators (strategy + value), declared as constants on
page objects and rendered to Playwright selector strings.

Usage:
    USERNAME_INPUT = By.name("username")
    LOGIN_BUTTON = By.css("button[type='submit']")

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable, Dict


def _attribute_selector(attribute: str) -> Callable[[str], str]:
    # Double-quoted CSS string, quotes and backslashes escaped
    return lambda value: f"[{attribute}={json.dumps(value, ensure_ascii=False)}]"


# Strategy -> Playwright selector renderer
_SELECTOR_RENDERERS: Dict[str, Callable[[str], str]] = {
    "css": lambda value: f"css={value}",
    "xpath": lambda value: f"xpath={value}",
    "id": _attribute_selector("id"),
    "name": _attribute_selector("name"),
    "text": lambda value: f"text={value}",
}


@dataclass(frozen=True)
class Locator:
    """
    Description of how to find one DOM element.

    Attributes:
        strategy: One of css, xpath, id, name, text
        value: Selector string for the strategy
    """
    strategy: str
    value: str

    def __post_init__(self) -> None:
        if self.strategy not in _SELECTOR_RENDERERS:
            raise ValueError(
                f"Unknown locator strategy {self.strategy!r}; "
                f"expected one of {sorted(_SELECTOR_RENDERERS)}"
            )
        if not self.value:
            raise ValueError("Locator value must not be empty")

    @property
    def selector(self) -> str:
        """Playwright selector string."""
        return _SELECTOR_RENDERERS[self.strategy](self.value)

    def to_dict(self) -> Dict[str, str]:
        return {"strategy": self.strategy, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> "Locator":
        return cls(strategy=data["strategy"], value=data["value"])

    def __str__(self) -> str:
        return f"By.{self.strategy}: {self.value}"


class By:
    """Factory shortcuts for Locator."""

    @staticmethod
    def css(value: str) -> Locator:
        return Locator("css", value)

    @staticmethod
    def xpath(value: str) -> Locator:
        return Locator("xpath", value)

    @staticmethod
    def id(value: str) -> Locator:
        return Locator("id", value)

    @staticmethod
    def name(value: str) -> Locator:
        return Locator("name", value)

    @staticmethod
    def text(value: str) -> Locator:
        return Locator("text", value)


__all__ = [
    "Locator",
    "By",
]
