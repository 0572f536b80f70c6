"""
Readability analyzer module for typography settings.

Scores font size, line height, letter spacing and font weight against
WCAG and typography best practices, and aggregates them into an overall
readability rating.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from ..utils.constants import BASE_FONT_SIZE_PX, DYSLEXIA_BONUS
from ..utils.log import get_logger
from ..utils.serialize import format_number


class CheckStatus(Enum):
    """Outcome of a single check."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


class ReadabilityRating(Enum):
    """Overall readability rating."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class ScoreBand(NamedTuple):
    """One row of a scoring table."""
    matches: Callable[[float], bool]
    score: int
    status: CheckStatus
    message: str


class AdviceRule(NamedTuple):
    """A recommendation or strength triggered by the current settings."""
    applies: Callable[["TypographySettings"], bool]
    message: str


@dataclass
class TypographySettings:
    """Typography parameters being evaluated."""
    font_size: float
    line_height: float
    letter_spacing: float
    font_weight: float
    dyslexia_mode: bool = False


@dataclass
class DimensionScore:
    """Score of one typography dimension."""
    score: int
    status: CheckStatus
    message: str


@dataclass
class ReadabilityScore:
    """Result of readability analysis."""
    overall: int
    rating: ReadabilityRating
    rating_color: str
    font_size: DimensionScore
    line_height: DimensionScore
    letter_spacing: DimensionScore
    font_weight: DimensionScore
    recommendations: List[str] = field(default_factory=list)
    strengths: List[str] = field(default_factory=list)


# Font size is a percentage of the 16px browser default.
# Messages are formatted with {value}, the display form of the input.
FONT_SIZE_BANDS = [
    ScoreBand(lambda v: 100 <= v <= 150, 100, CheckStatus.PASS,
              "Perfect size ({value}px) - Meets WCAG standards"),
    ScoreBand(lambda v: 90 <= v < 100, 75, CheckStatus.WARNING,
              "Slightly small ({value}px) - Consider increasing"),
    ScoreBand(lambda v: 150 < v <= 175, 85, CheckStatus.PASS,
              "Large size ({value}px) - Good for low vision users"),
    ScoreBand(lambda v: v > 175, 70, CheckStatus.WARNING,
              "Very large ({value}px) - May reduce content visibility"),
    ScoreBand(lambda v: True, 40, CheckStatus.FAIL,
              "Too small ({value}px) - Fails WCAG minimum"),
]

LINE_HEIGHT_BANDS = [
    ScoreBand(lambda v: 1.5 <= v <= 1.8, 100, CheckStatus.PASS,
              "Optimal spacing ({value}) - WCAG recommended"),
    ScoreBand(lambda v: 1.4 <= v < 1.5, 80, CheckStatus.WARNING,
              "Slightly tight ({value}) - Consider increasing"),
    ScoreBand(lambda v: 1.8 < v <= 2.2, 85, CheckStatus.PASS,
              "Generous spacing ({value}) - Very comfortable"),
    ScoreBand(lambda v: v < 1.4, 50, CheckStatus.FAIL,
              "Too tight ({value}) - Reduces readability"),
    ScoreBand(lambda v: True, 60, CheckStatus.WARNING,
              "Too loose ({value}) - May disrupt reading flow"),
]

LETTER_SPACING_BANDS = [
    ScoreBand(lambda v: 0 <= v <= 1.5, 100, CheckStatus.PASS,
              "Good spacing ({value}px) - Enhances readability"),
    ScoreBand(lambda v: 1.5 < v <= 3, 85, CheckStatus.PASS,
              "Wide spacing ({value}px) - Helpful for dyslexia"),
    ScoreBand(lambda v: -1 <= v < 0, 75, CheckStatus.WARNING,
              "Slightly tight ({value}px) - May reduce clarity"),
    ScoreBand(lambda v: v > 3, 60, CheckStatus.WARNING,
              "Too wide ({value}px) - May slow reading speed"),
    ScoreBand(lambda v: True, 40, CheckStatus.FAIL,
              "Too tight ({value}px) - Difficult to read"),
]

# Weights between the named steps (e.g. 250) fall through to "Very bold"
FONT_WEIGHT_BANDS = [
    ScoreBand(lambda v: 400 <= v <= 500, 100, CheckStatus.PASS,
              "Optimal weight ({value}) - Clear and readable"),
    ScoreBand(lambda v: v == 300 or v == 600, 90, CheckStatus.PASS,
              "Good weight ({value}) - Acceptable for most uses"),
    ScoreBand(lambda v: v == 700, 80, CheckStatus.PASS,
              "Bold ({value}) - Good for emphasis, tiring for body text"),
    ScoreBand(lambda v: v <= 200, 50, CheckStatus.FAIL,
              "Too light ({value}) - Poor contrast, hard to read"),
    ScoreBand(lambda v: True, 70, CheckStatus.WARNING,
              "Very bold ({value}) - May cause eye strain in body text"),
]

RECOMMENDATION_RULES = [
    AdviceRule(lambda s: s.font_size < 100,
               "Increase font size to at least 100% (16px) for better accessibility"),
    AdviceRule(lambda s: s.font_size > 175,
               "Consider reducing font size to improve content density"),
    AdviceRule(lambda s: s.line_height < 1.5,
               "Increase line height to at least 1.5 for WCAG compliance"),
    AdviceRule(lambda s: s.line_height > 2.2,
               "Reduce line height to maintain reading flow"),
    AdviceRule(lambda s: s.letter_spacing < 0,
               "Avoid negative letter spacing as it reduces readability"),
    AdviceRule(lambda s: s.letter_spacing > 3,
               "Excessive letter spacing may slow reading speed"),
    AdviceRule(lambda s: s.font_weight <= 200,
               "Use at least 300 weight for body text to ensure clarity"),
    AdviceRule(lambda s: s.font_weight >= 700 and s.font_size < 120,
               "Bold text works better with larger font sizes"),
    AdviceRule(lambda s: not s.dyslexia_mode and s.letter_spacing < 1,
               "Consider enabling dyslexia mode or increasing letter spacing"),
]

OPTIMIZED_MESSAGE = "Your settings are well-optimized for readability!"

STRENGTH_RULES = [
    AdviceRule(lambda s: 100 <= s.font_size <= 150,
               "Font size meets WCAG minimum requirements"),
    AdviceRule(lambda s: s.font_size >= 120,
               "Large font size benefits users with low vision"),
    AdviceRule(lambda s: 1.5 <= s.line_height <= 1.8,
               "Line height follows WCAG best practices"),
    AdviceRule(lambda s: s.letter_spacing > 0.5,
               "Letter spacing aids readability for dyslexic users"),
    AdviceRule(lambda s: 400 <= s.font_weight <= 500,
               "Font weight is optimal for extended reading"),
    AdviceRule(lambda s: s.dyslexia_mode,
               "Dyslexia-friendly font reduces character confusion"),
]

# Minimum overall score, rating and display color, checked top-down
RATING_BANDS = [
    (90, ReadabilityRating.EXCELLENT, 'green'),
    (75, ReadabilityRating.GOOD, 'blue'),
    (60, ReadabilityRating.FAIR, 'orange'),
]

DIMENSION_WEIGHTS = {
    'font_size': 0.3,
    'line_height': 0.3,
    'letter_spacing': 0.2,
    'font_weight': 0.2,
}


def score_dimension(
    bands: List[ScoreBand],
    value: float,
    display: Optional[str] = None
) -> DimensionScore:
    """
    Score a value against an ordered band table.

    The last band of every table matches unconditionally, so every
    value, including NaN, lands in exactly one band.

    Args:
        bands: Ordered band table
        value: Value to score
        display: Text substituted into the message, defaults to the value

    Returns:
        DimensionScore for the first matching band
    """
    band = next(b for b in bands if b.matches(value))
    if display is None:
        display = format_number(value)
    return DimensionScore(
        score=band.score,
        status=band.status,
        message=band.message.format(value=display),
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ReadabilityAnalyzer:
    """
    Analyzes typography settings for readability.

    Each dimension is scored independently from its band table, then
    combined into a weighted overall score.
    """

    def __init__(self):
        """Initialize the readability analyzer."""
        self.logger = get_logger("readability")

    def analyze(self, settings: TypographySettings) -> ReadabilityScore:
        """
        Calculate the overall readability score and analysis.

        Args:
            settings: Typography parameters

        Returns:
            ReadabilityScore with per-dimension scores and advice
        """
        px = f"{BASE_FONT_SIZE_PX * settings.font_size / 100:.1f}"
        font_size = score_dimension(FONT_SIZE_BANDS, settings.font_size, px)
        line_height = score_dimension(
            LINE_HEIGHT_BANDS, settings.line_height, f"{settings.line_height:.1f}"
        )
        letter_spacing = score_dimension(LETTER_SPACING_BANDS, settings.letter_spacing)
        font_weight = score_dimension(FONT_WEIGHT_BANDS, settings.font_weight)

        weighted = (
            font_size.score * DIMENSION_WEIGHTS['font_size']
            + line_height.score * DIMENSION_WEIGHTS['line_height']
            + letter_spacing.score * DIMENSION_WEIGHTS['letter_spacing']
            + font_weight.score * DIMENSION_WEIGHTS['font_weight']
        )
        if settings.dyslexia_mode:
            weighted *= DYSLEXIA_BONUS

        overall = min(_round_half_up(weighted), 100)
        rating, rating_color = self._rate(overall)

        result = ReadabilityScore(
            overall=overall,
            rating=rating,
            rating_color=rating_color,
            font_size=font_size,
            line_height=line_height,
            letter_spacing=letter_spacing,
            font_weight=font_weight,
            recommendations=self._generate_recommendations(settings),
            strengths=[r.message for r in STRENGTH_RULES if r.applies(settings)],
        )

        self.logger.debug(
            f"Readability {overall}/100 ({rating.value}), "
            f"{len(result.recommendations)} recommendation(s)"
        )
        return result

    def _rate(self, overall: int):
        """Map an overall score to its rating and display color."""
        for minimum, rating, color in RATING_BANDS:
            if overall >= minimum:
                return rating, color
        return ReadabilityRating.POOR, 'red'

    def _generate_recommendations(self, settings: TypographySettings) -> List[str]:
        """Collect every triggered recommendation, or the optimized message."""
        recommendations = [
            rule.message for rule in RECOMMENDATION_RULES if rule.applies(settings)
        ]
        if not recommendations:
            recommendations.append(OPTIMIZED_MESSAGE)
        return recommendations


def analyze_readability(
    font_size: float,
    line_height: float,
    letter_spacing: float,
    font_weight: float,
    dyslexia_mode: bool = False
) -> ReadabilityScore:
    """Calculate the readability score for a set of typography settings."""
    settings = TypographySettings(
        font_size=font_size,
        line_height=line_height,
        letter_spacing=letter_spacing,
        font_weight=font_weight,
        dyslexia_mode=dyslexia_mode,
    )
    return ReadabilityAnalyzer().analyze(settings)
