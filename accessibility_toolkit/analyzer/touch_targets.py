"""
Touch target analyzer module for mobile accessibility.

Validates touch target sizes and the spacing between neighbouring
targets against WCAG 2.5.5 and platform guidelines.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Union

from ..utils.constants import (
    MIN_SPACING,
    MIN_TARGET_SIZE,
    RECOMMENDED_SIZE,
    SPACING_REPORT_DISTANCE,
)
from ..utils.log import get_logger
from ..utils.serialize import format_number


class TargetStatus(Enum):
    """Outcome of a size or spacing check."""
    PASS = "pass"
    WARNING = "warning"
    FAIL = "fail"


@dataclass
class TargetGeometry:
    """Position and size of an interactive element, in CSS pixels."""
    id: str
    element: str
    width: float
    height: float
    x: float
    y: float


@dataclass
class TouchTarget:
    """A classified touch target."""
    id: str
    element: str
    width: float
    height: float
    x: float
    y: float
    area: float
    status: TargetStatus
    message: str


@dataclass
class SpacingIssue:
    """Spacing between a pair of nearby targets."""
    target1: str
    target2: str
    distance: float
    status: TargetStatus
    message: str


@dataclass
class TargetSummary:
    """Count of targets per size status."""
    total: int = 0
    passed: int = 0
    warning: int = 0
    fail: int = 0


@dataclass
class TouchTargetAnalysis:
    """Result of touch target analysis."""
    targets: List[TouchTarget] = field(default_factory=list)
    spacing_issues: List[SpacingIssue] = field(default_factory=list)
    score: int = 100
    summary: TargetSummary = field(default_factory=TargetSummary)
    recommendations: List[str] = field(default_factory=list)


TargetInput = Union[TargetGeometry, Mapping[str, Any]]

GEOMETRY_FIELDS = ('id', 'element', 'width', 'height', 'x', 'y')

TARGET_PENALTIES = {
    TargetStatus.FAIL: 10,
    TargetStatus.WARNING: 5,
}

SPACING_PENALTIES = {
    TargetStatus.FAIL: 5,
    TargetStatus.WARNING: 2,
}

EXCELLENT_MESSAGE = 'Excellent! All touch targets meet accessibility guidelines.'


def _size(target: Union[TargetGeometry, TouchTarget]) -> str:
    return f"{format_number(target.width)}×{format_number(target.height)}px"


def to_geometry(target: TargetInput) -> TargetGeometry:
    """
    Normalize a target given as a mapping or TargetGeometry.

    Args:
        target: Mapping with id, element, width, height, x and y

    Returns:
        TargetGeometry

    Raises:
        KeyError: If a mapping lacks one of the keys
    """
    if isinstance(target, TargetGeometry):
        return target
    return TargetGeometry(
        id=str(target['id']),
        element=str(target['element']),
        width=target['width'],
        height=target['height'],
        x=target['x'],
        y=target['y'],
    )


def targets_from_json(data: Any) -> List[TargetGeometry]:
    """
    Validate decoded JSON target data.

    Args:
        data: List of objects with id, element, width, height, x and y

    Returns:
        List of TargetGeometry

    Raises:
        ValueError: If the data is not a list of complete numeric targets
    """
    if not isinstance(data, list):
        raise ValueError("Touch targets must be a list")

    targets = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Target {index} must be an object")
        missing = [k for k in GEOMETRY_FIELDS if k not in item]
        if missing:
            raise ValueError(f"Target {index} is missing {', '.join(missing)}")
        for key in GEOMETRY_FIELDS[2:]:
            value = item[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Target {index} has non-numeric {key}")
        targets.append(to_geometry(item))

    return targets


def calculate_distance(
    target1: Union[TargetGeometry, TouchTarget],
    target2: Union[TargetGeometry, TouchTarget]
) -> float:
    """
    Calculate the edge-to-edge distance between two targets.

    Returns:
        0.0 when the targets touch or overlap, NaN when a coordinate or
        size is NaN, otherwise the Euclidean norm of the horizontal and
        vertical gaps
    """
    # max() and min() would swallow a NaN as an ordinary bound
    if any(
        math.isnan(value)
        for target in (target1, target2)
        for value in (target.x, target.y, target.width, target.height)
    ):
        return math.nan

    horizontal = max(
        0,
        max(target1.x, target2.x)
        - min(target1.x + target1.width, target2.x + target2.width)
    )
    vertical = max(
        0,
        max(target1.y, target2.y)
        - min(target1.y + target1.height, target2.y + target2.height)
    )

    if horizontal == 0 and vertical == 0:
        return 0.0

    return math.sqrt(horizontal ** 2 + vertical ** 2)


class TouchTargetAnalyzer:
    """
    Analyzes touch target sizes and spacing.

    Spacing is checked for every unordered pair, so cost grows
    quadratically with the number of targets.
    """

    def __init__(self):
        """Initialize the touch target analyzer."""
        self.logger = get_logger("touch_targets")

    def analyze(self, targets: Iterable[TargetInput]) -> TouchTargetAnalysis:
        """
        Run the complete touch target analysis.

        Args:
            targets: Target geometries

        Returns:
            TouchTargetAnalysis with classified targets, spacing and score
        """
        classified = [self.classify(to_geometry(t)) for t in targets]
        spacing = self.analyze_spacing(classified)

        result = TouchTargetAnalysis(
            targets=classified,
            spacing_issues=spacing,
            score=self._calculate_score(classified, spacing),
            summary=TargetSummary(
                total=len(classified),
                passed=sum(1 for t in classified if t.status == TargetStatus.PASS),
                warning=sum(1 for t in classified if t.status == TargetStatus.WARNING),
                fail=sum(1 for t in classified if t.status == TargetStatus.FAIL),
            ),
            recommendations=self._generate_recommendations(classified, spacing),
        )

        self.logger.debug(
            f"Touch targets {result.score}/100: {result.summary.total} target(s), "
            f"{len(spacing)} close pair(s)"
        )
        return result

    def classify(self, target: TargetGeometry) -> TouchTarget:
        """Classify a single target by its smaller dimension."""
        if math.isnan(target.width) or math.isnan(target.height):
            min_dimension = math.nan
        else:
            min_dimension = min(target.width, target.height)

        if min_dimension < MIN_TARGET_SIZE:
            status = TargetStatus.FAIL
            message = (
                f"Too small: {_size(target)}. "
                f"Minimum is {MIN_TARGET_SIZE}×{MIN_TARGET_SIZE}px"
            )
        elif min_dimension < RECOMMENDED_SIZE:
            status = TargetStatus.WARNING
            message = (
                f"Below recommended: {_size(target)}. "
                f"Recommended is {RECOMMENDED_SIZE}×{RECOMMENDED_SIZE}px"
            )
        else:
            status = TargetStatus.PASS
            message = f"Good size: {_size(target)}"

        return TouchTarget(
            id=target.id,
            element=target.element,
            width=target.width,
            height=target.height,
            x=target.x,
            y=target.y,
            area=target.width * target.height,
            status=status,
            message=message,
        )

    def analyze_spacing(self, targets: List[TouchTarget]) -> List[SpacingIssue]:
        """Check spacing for every pair closer than the reporting distance."""
        issues = []

        for i, first in enumerate(targets):
            for second in targets[i + 1:]:
                distance = calculate_distance(first, second)
                # NaN distances are never reported
                if not distance < SPACING_REPORT_DISTANCE:
                    continue

                if distance < MIN_SPACING:
                    status = TargetStatus.FAIL
                    message = f"Too close: {distance:.1f}px apart. Minimum is {MIN_SPACING}px"
                elif distance < MIN_SPACING * 2:
                    status = TargetStatus.WARNING
                    message = f"Spacing could be improved: {distance:.1f}px apart"
                else:
                    status = TargetStatus.PASS
                    message = f"Good spacing: {distance:.1f}px apart"

                issues.append(SpacingIssue(
                    target1=first.element,
                    target2=second.element,
                    distance=distance,
                    status=status,
                    message=message,
                ))

        return issues

    def _calculate_score(
        self,
        targets: List[TouchTarget],
        spacing: List[SpacingIssue]
    ) -> int:
        """Calculate the touch target score, clamped to 0-100."""
        score = 100
        score -= sum(TARGET_PENALTIES.get(t.status, 0) for t in targets)
        score -= sum(SPACING_PENALTIES.get(s.status, 0) for s in spacing)
        return max(0, min(100, score))

    def _generate_recommendations(
        self,
        targets: List[TouchTarget],
        spacing: List[SpacingIssue]
    ) -> List[str]:
        """Summarize size and spacing problems, one message per category."""
        recommendations = []

        failed = sum(1 for t in targets if t.status == TargetStatus.FAIL)
        warned = sum(1 for t in targets if t.status == TargetStatus.WARNING)
        failed_spacing = sum(1 for s in spacing if s.status == TargetStatus.FAIL)
        warned_spacing = sum(1 for s in spacing if s.status == TargetStatus.WARNING)

        if failed:
            recommendations.append(
                f"{failed} target(s) are too small. "
                f"Increase to at least {MIN_TARGET_SIZE}×{MIN_TARGET_SIZE}px"
            )
        if warned:
            recommendations.append(
                f"{warned} target(s) could be larger. "
                f"Aim for {RECOMMENDED_SIZE}×{RECOMMENDED_SIZE}px for better usability"
            )
        if failed_spacing:
            recommendations.append(
                f"{failed_spacing} target pair(s) are too close. "
                f"Add at least {MIN_SPACING}px spacing"
            )
        if warned_spacing:
            recommendations.append(
                f"{warned_spacing} target pair(s) could use more spacing "
                f"for easier interaction"
            )
        if any(t.width != t.height for t in targets):
            recommendations.append(
                "Consider using square targets - they're easier to tap accurately"
            )

        if not recommendations:
            recommendations.append(EXCELLENT_MESSAGE)

        return recommendations


def analyze_touch_targets(targets: Iterable[TargetInput]) -> TouchTargetAnalysis:
    """Run the complete touch target analysis."""
    return TouchTargetAnalyzer().analyze(targets)


def summarize(analysis: TouchTargetAnalysis) -> Dict[str, int]:
    """Summary counts keyed the way API clients expect them."""
    summary = analysis.summary
    return {
        'total': summary.total,
        'pass': summary.passed,
        'warning': summary.warning,
        'fail': summary.fail,
    }
