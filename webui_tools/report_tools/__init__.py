"""Allure reporting helpers."""

from .allure_utils import attach_png, attach_text, write_environment_properties

__all__ = [
    "attach_png",
    "attach_text",
    "write_environment_properties",
]
