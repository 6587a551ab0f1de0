"""
================================================================================
Allure Report Utilities
================================================================================

Helpers for enriching Allure reports with UI test context.

Features:
- Text / PNG attachment helpers
- Environment widget (environment.properties) from the run configuration

================================================================================
"""

from pathlib import Path
from typing import Any, Mapping

import allure
from loguru import logger


# ================================================================================
# Attachment Helpers
# ================================================================================

def attach_text(text: str, name: str = "Text"):
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_png(png: bytes, name: str = "Screenshot"):
    """
    Attach a PNG screenshot to Allure report.

    Args:
        png: Raw PNG bytes
        name: Attachment name
    """
    allure.attach(
        png,
        name=name,
        attachment_type=allure.attachment_type.PNG
    )


# ================================================================================
# Environment Widget
# ================================================================================

# Keys never written to the report
SENSITIVE_KEYS = ("password", "secret", "token")


def write_environment_properties(
    results_dir: Path,
    values: Mapping[str, Any],
) -> Path:
    """
    Write Allure's environment.properties file.

    Sensitive keys are masked.

    Args:
        results_dir: Allure results directory (--alluredir)
        values: Key/value pairs to show in the Environment widget

    Returns:
        Path to the written file
    """
    results_dir = Path(results_dir)
    results_dir.mkdir(parents=True, exist_ok=True)
    path = results_dir / "environment.properties"

    lines = []
    for key in sorted(values):
        value = values[key]
        if any(marker in key.lower() for marker in SENSITIVE_KEYS):
            value = "***MASKED***"
        lines.append(f"{key}={value}")

    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.debug(f"Allure environment written: {path}")
    return path


__all__ = [
    "attach_text",
    "attach_png",
    "write_environment_properties",
]
