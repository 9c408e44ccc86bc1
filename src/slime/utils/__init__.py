"""
Utility functions for the slime bot.

Only contains essential logging utilities.
"""

from .logging import TRACE, setup_logging

__all__ = [
    "TRACE",
    "setup_logging",
]
