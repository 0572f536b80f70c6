"""
Contrast checker module for WCAG color contrast analysis.

Computes relative luminance and contrast ratios between two hex colors,
classifies them against the WCAG thresholds, and suggests an accessible
gray when a pair falls short.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..utils.constants import (
    DEFAULT_TARGET_RATIO,
    SUGGESTION_ITERATIONS,
    SUGGESTION_TOLERANCE,
    WCAG_AA_LARGE_RATIO,
    WCAG_AA_RATIO,
    WCAG_AAA_RATIO,
)
from ..utils.log import get_logger


# Leading hex digits of a channel, anything after them is ignored
HEX_CHANNEL_PATTERN = re.compile(r'\s*([+-]?)([0-9a-fA-F]+)')

# Ordered rating rules, the first threshold reached wins
RATING_RULES: List[Tuple[float, str]] = [
    (WCAG_AAA_RATIO, "AAA (Excellent) ✓"),
    (WCAG_AA_RATIO, "AA (Good) ✓"),
    (WCAG_AA_LARGE_RATIO, "AA Large Text Only"),
]
FAIL_RATING = "Fail ✗"


@dataclass
class RGBColor:
    """An sRGB color. Channels are NaN when parsed from a malformed hex string."""
    r: float
    g: float
    b: float


@dataclass
class ContrastResult:
    """Result of a contrast check between two colors."""
    ratio: float
    pass_aa: bool
    pass_aa_large: bool
    pass_aaa: bool
    pass_aaa_large: bool
    rating_text: str


@dataclass
class ContrastReport:
    """Contrast result for a color pair, with a suggestion when AA fails."""
    text_color: str
    background_color: str
    result: ContrastResult
    suggested_color: Optional[str] = None


def _parse_channel(chunk: str) -> float:
    """Parse a two-digit hex channel, returning NaN when it has no hex digits."""
    match = HEX_CHANNEL_PATTERN.match(chunk)
    if not match:
        return math.nan
    value = int(match.group(2), 16)
    return -value if match.group(1) == '-' else value


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Convert a 6-digit hex color to RGB.

    No validation is done: a malformed string yields NaN channels,
    which propagate through luminance and contrast calculations.

    Args:
        hex_color: Color such as "#1a2b3c" or "1a2b3c"

    Returns:
        RGBColor with channels in [0, 255] for well-formed input
    """
    sanitized = hex_color.replace('#', '', 1)
    return RGBColor(
        r=_parse_channel(sanitized[0:2]),
        g=_parse_channel(sanitized[2:4]),
        b=_parse_channel(sanitized[4:6]),
    )


def _channel_hex(value: float) -> str:
    return format(int(value), 'x').rjust(2, '0')


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels to a lowercase hex color."""
    return f"#{_channel_hex(r)}{_channel_hex(g)}{_channel_hex(b)}"


def get_channel_luminance(channel: float) -> float:
    """Linearize a single 0-255 channel using the WCAG 2.0 formula."""
    c = channel / 255
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def get_luminance(color: RGBColor) -> float:
    """
    Calculate the relative luminance of an RGB color.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B over linearized channels.
    """
    r = get_channel_luminance(color.r)
    g = get_channel_luminance(color.g)
    b = get_channel_luminance(color.b)
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def get_contrast_ratio(lum1: float, lum2: float) -> float:
    """
    Calculate the contrast ratio between two luminance values.

    Args:
        lum1: First relative luminance
        lum2: Second relative luminance

    Returns:
        Contrast ratio (1.0 to 21.0), NaN if either luminance is NaN
    """
    if math.isnan(lum1) or math.isnan(lum2):
        return math.nan

    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def evaluate_contrast(ratio: float) -> ContrastResult:
    """
    Evaluate a contrast ratio against the WCAG thresholds.

    AAA large text reuses the 4.5 threshold.

    Args:
        ratio: Contrast ratio

    Returns:
        ContrastResult with pass flags and a rating text
    """
    rating_text = FAIL_RATING
    for threshold, text in RATING_RULES:
        if ratio >= threshold:
            rating_text = text
            break

    return ContrastResult(
        ratio=ratio,
        pass_aa=ratio >= WCAG_AA_RATIO,
        pass_aa_large=ratio >= WCAG_AA_LARGE_RATIO,
        pass_aaa=ratio >= WCAG_AAA_RATIO,
        pass_aaa_large=ratio >= WCAG_AA_RATIO,
        rating_text=rating_text,
    )


def format_ratio(ratio: float) -> str:
    """Format a contrast ratio for display, e.g. "4.54:1"."""
    return f"{ratio:.2f}:1"


class ContrastChecker:
    """
    Checks color pairs against WCAG contrast requirements.

    Stateless apart from its logger; one instance can serve any
    number of calls from any thread.
    """

    def __init__(self):
        """Initialize the contrast checker."""
        self.logger = get_logger("contrast")

    def analyze(self, text_color: str, bg_color: str) -> ContrastResult:
        """
        Calculate a full contrast analysis from two hex colors.

        Args:
            text_color: Foreground color in hex
            bg_color: Background color in hex

        Returns:
            ContrastResult for the pair
        """
        text_lum = get_luminance(hex_to_rgb(text_color))
        bg_lum = get_luminance(hex_to_rgb(bg_color))

        result = evaluate_contrast(get_contrast_ratio(text_lum, bg_lum))
        self.logger.debug(
            f"Contrast {text_color} on {bg_color}: "
            f"{format_ratio(result.ratio)} ({result.rating_text})"
        )
        return result

    def suggest(
        self,
        text_color: str,
        bg_color: str,
        target_ratio: float = DEFAULT_TARGET_RATIO
    ) -> str:
        """
        Suggest an accessible gray for text on the given background.

        Binary searches a step away from the background, toward white on
        dark backgrounds and toward black on light ones, so contrast grows
        with the step in both directions. The input hue is discarded.
        Returns the first candidate within 0.1 of the target, otherwise the
        closest candidate that exceeded it, otherwise the input text
        color.

        Args:
            text_color: Current foreground color in hex
            bg_color: Background color in hex
            target_ratio: Contrast ratio to aim for

        Returns:
            Hex color string
        """
        bg_lum = get_luminance(hex_to_rgb(bg_color))
        should_be_lighter = bg_lum < 0.5

        low = 0
        high = 255
        best_color = text_color

        for _ in range(SUGGESTION_ITERATIONS):
            if low > high:
                break

            mid = (low + high) // 2
            level = mid if should_be_lighter else 255 - mid
            candidate = rgb_to_hex(level, level, level)

            ratio = get_contrast_ratio(
                get_luminance(RGBColor(level, level, level)), bg_lum
            )

            if abs(ratio - target_ratio) < SUGGESTION_TOLERANCE:
                best_color = candidate
                break

            if ratio < target_ratio:
                low = mid + 1
            else:
                high = mid - 1
                best_color = candidate

        self.logger.debug(
            f"Suggested {best_color} for {text_color} on {bg_color} "
            f"(target {target_ratio}:1)"
        )
        return best_color

    def check(self, text_color: str, bg_color: str) -> ContrastReport:
        """
        Check a color pair and suggest a replacement when AA fails.

        Args:
            text_color: Foreground color in hex
            bg_color: Background color in hex

        Returns:
            ContrastReport for the pair
        """
        result = self.analyze(text_color, bg_color)
        suggested = None
        if not result.pass_aa:
            suggested = self.suggest(text_color, bg_color, WCAG_AA_RATIO)

        return ContrastReport(
            text_color=text_color,
            background_color=bg_color,
            result=result,
            suggested_color=suggested,
        )


def analyze_contrast(text_color: str, bg_color: str) -> ContrastResult:
    """Calculate full contrast analysis from two hex colors."""
    return ContrastChecker().analyze(text_color, bg_color)


def suggest_accessible_color(
    text_color: str,
    bg_color: str,
    target_ratio: float = DEFAULT_TARGET_RATIO
) -> str:
    """Suggest an accessible gray alternative for text on a background."""
    return ContrastChecker().suggest(text_color, bg_color, target_ratio)
