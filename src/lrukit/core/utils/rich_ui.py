"""
Rich UI helpers for lrukit logging.
Provides a Rich console and logging handler, enabled through LRUKIT_RICH_UI.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

# Shared console for Rich log output
console = Console(stderr=True)


def is_rich_enabled() -> bool:
    """Check if Rich UI should be enabled based on environment"""
    return os.environ.get("LRUKIT_RICH_UI", "false").lower() in ("true", "1", "yes")


class RichLoggingFilter(logging.Filter):
    """Filter to suppress DEBUG records when Rich UI is active"""

    def filter(self, record):
        return record.levelno > logging.DEBUG


def get_rich_handler() -> logging.Handler:
    """Get Rich logging handler"""
    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.addFilter(RichLoggingFilter())
    return handler
