"""
================================================================================
Web UI Tools
================================================================================

Supporting utilities for the UI test harness.

Modules:
    - common: Loguru logging setup
    - report_tools: Allure attachments and environment widget

Example:
    from webui_tools.common import init_logger
    from webui_tools.report_tools import attach_png

    init_logger()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
]
