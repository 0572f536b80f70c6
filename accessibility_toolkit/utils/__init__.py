"""
Utility modules for the accessibility toolkit.

Contains logging, result serialization, and constants.
"""

from .log import setup_logger, get_logger
from .serialize import to_dict, format_number
from .constants import (
    WCAG_AAA_RATIO,
    WCAG_AA_RATIO,
    WCAG_AA_LARGE_RATIO,
    MIN_TARGET_SIZE,
    RECOMMENDED_SIZE,
    MIN_SPACING,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "to_dict",
    "format_number",
    "WCAG_AAA_RATIO",
    "WCAG_AA_RATIO",
    "WCAG_AA_LARGE_RATIO",
    "MIN_TARGET_SIZE",
    "RECOMMENDED_SIZE",
    "MIN_SPACING",
]
