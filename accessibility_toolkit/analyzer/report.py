"""
Markdown report generation for analysis results.

Each analyzer result renders to a standalone markdown document with its
score, grouped issues and recommendations.
"""

from typing import Dict, List

from .contrast import ContrastReport, format_ratio
from .readability import ReadabilityScore
from .screen_reader import IssueLevel, ScreenReaderAnalysis
from .semantic import SemanticAnalysis, Severity
from .touch_targets import TargetStatus, TouchTargetAnalysis
from ..utils.constants import SCORE_EXCELLENT, SCORE_FAIR, SCORE_GOOD
from ..utils.serialize import format_number


LEVEL_MARKERS = {
    'error': '❌',
    'warning': '⚠️',
    'info': 'ℹ️',
}

STATUS_MARKERS = {
    'pass': '✅',
    'warning': '⚠️',
    'fail': '❌',
}

ELEMENT_MARKERS = {
    'good': '✅',
    'warning': '⚠️',
    'info': 'ℹ️',
}


def score_band(score: float) -> str:
    """
    Classify a 0-100 score into a display band.

    Args:
        score: Analysis score

    Returns:
        "excellent", "good", "fair" or "poor"
    """
    if score >= SCORE_EXCELLENT:
        return "excellent"
    if score >= SCORE_GOOD:
        return "good"
    if score >= SCORE_FAIR:
        return "fair"
    return "poor"


def _check(passed: bool) -> str:
    return '✅' if passed else '❌'


def _recommendations(recommendations: List[str]) -> List[str]:
    if not recommendations:
        return []
    lines = ["## Recommendations", ""]
    for recommendation in recommendations:
        lines.append(f"- 💡 {recommendation}")
    lines.append("")
    return lines


def contrast_report(report: ContrastReport) -> str:
    """Generate a markdown contrast report."""
    result = report.result
    lines = [
        "# Contrast Report",
        "",
        f"**Text color:** `{report.text_color}`",
        f"**Background color:** `{report.background_color}`",
        f"**Ratio:** {format_ratio(result.ratio)}",
        f"**Rating:** {result.rating_text}",
        "",
        "## WCAG Levels",
        f"- {_check(result.pass_aa)} AA normal text",
        f"- {_check(result.pass_aa_large)} AA large text",
        f"- {_check(result.pass_aaa)} AAA normal text",
        f"- {_check(result.pass_aaa_large)} AAA large text",
        "",
    ]

    if report.suggested_color:
        lines.extend([
            "## Suggestion",
            "",
            f"- 💡 Use `{report.suggested_color}` for text on this background",
            "",
        ])

    return '\n'.join(lines)


def readability_report(score: ReadabilityScore) -> str:
    """Generate a markdown readability report."""
    lines = [
        "# Readability Report",
        "",
        f"**Score:** {score.overall}/100",
        f"**Rating:** {score.rating.value}",
        "",
        "## Typography",
    ]

    dimensions = [
        ("Font size", score.font_size),
        ("Line height", score.line_height),
        ("Letter spacing", score.letter_spacing),
        ("Font weight", score.font_weight),
    ]
    for label, dimension in dimensions:
        marker = STATUS_MARKERS[dimension.status.value]
        lines.append(f"- {marker} **{label}** ({dimension.score}/100): {dimension.message}")
    lines.append("")

    if score.strengths:
        lines.extend(["## Strengths", ""])
        for strength in score.strengths:
            lines.append(f"- ✅ {strength}")
        lines.append("")

    lines.extend(_recommendations(score.recommendations))
    return '\n'.join(lines)


def semantic_report(analysis: SemanticAnalysis) -> str:
    """Generate a markdown semantic HTML report."""
    lines = [
        "# Semantic HTML Report",
        "",
        f"**Score:** {analysis.semantic_score}/100",
        f"**Div to semantic ratio:** {format_number(analysis.div_to_semantic_ratio)}",
        "",
        "## Elements",
    ]

    for element in analysis.elements:
        marker = ELEMENT_MARKERS[element.status.value]
        lines.append(f"- {marker} `<{element.tag}>` x{element.count}: {element.message}")
    lines.append("")

    if analysis.div_soup_issues:
        lines.extend(["## Issues", ""])
        for severity in Severity:
            issues = [i for i in analysis.div_soup_issues if i.severity == severity]
            if not issues:
                continue
            lines.append(f"### {severity.value.capitalize()}s")
            lines.append("")
            for issue in issues:
                lines.append(f"- {LEVEL_MARKERS[severity.value]} **{issue.element}**: {issue.issue}")
                lines.append(f"  - 💡 {issue.suggestion}")
            lines.append("")

    if analysis.suggestions:
        lines.extend(["## Suggestions", ""])
        for suggestion in analysis.suggestions:
            lines.append(
                f"- Replace `{suggestion.from_tag}` with `{suggestion.to_tag}`: "
                f"{suggestion.reason}"
            )
            lines.append(f"  - `{suggestion.example}`")
        lines.append("")

    lines.extend(_recommendations(analysis.recommendations))
    return '\n'.join(lines)


def screen_reader_report(analysis: ScreenReaderAnalysis) -> str:
    """Generate a markdown screen reader report."""
    lines = [
        "# Screen Reader Report",
        "",
        f"**Score:** {analysis.score}/100",
        "",
        "## Summary",
        f"- **Headings:** {len(analysis.headings)}",
        f"- **Landmarks:** {len(analysis.landmarks)}",
        f"- **Images:** {len(analysis.images)}",
        f"- **ARIA issues:** {len(analysis.aria_issues)}",
        "",
    ]

    if analysis.aria_issues:
        lines.extend(["## Issues", ""])
        for level in IssueLevel:
            issues = [i for i in analysis.aria_issues if i.level == level]
            if not issues:
                continue
            lines.append(f"### {level.value.capitalize()}s")
            lines.append("")
            for issue in issues:
                lines.append(f"- {LEVEL_MARKERS[level.value]} **{issue.element}**: {issue.issue}")
                lines.append(f"  - 💡 {issue.suggestion}")
            lines.append("")

    lines.extend([
        "## Transcript",
        "",
        "```",
        analysis.screen_reader_text.rstrip('\n'),
        "```",
        "",
    ])

    lines.extend(_recommendations(analysis.recommendations))
    return '\n'.join(lines)


def simulation_report(color: str, simulations: Dict[str, str]) -> str:
    """Generate a markdown table of a color under each vision type."""
    lines = [
        "# Color Blindness Simulation",
        "",
        f"**Color:** `{color}`",
        "",
        "| Vision type | Simulated color |",
        "|-------------|-----------------|",
    ]
    for vision_type, simulated in simulations.items():
        lines.append(f"| {vision_type} | `{simulated}` |")
    lines.append("")
    return '\n'.join(lines)


def touch_target_report(analysis: TouchTargetAnalysis) -> str:
    """Generate a markdown touch target report."""
    summary = analysis.summary
    lines = [
        "# Touch Target Report",
        "",
        f"**Score:** {analysis.score}/100",
        "",
        "## Summary",
        f"- **Targets:** {summary.total}",
        f"- **Passed:** {summary.passed}",
        f"- **Warnings:** {summary.warning}",
        f"- **Failed:** {summary.fail}",
        "",
    ]

    if analysis.targets:
        lines.extend(["## Targets", ""])
        for target in analysis.targets:
            marker = STATUS_MARKERS[target.status.value]
            lines.append(f"- {marker} **{target.element}** (`{target.id}`): {target.message}")
        lines.append("")

    close_pairs = [s for s in analysis.spacing_issues if s.status != TargetStatus.PASS]
    if close_pairs:
        lines.extend(["## Spacing", ""])
        for pair in close_pairs:
            marker = STATUS_MARKERS[pair.status.value]
            lines.append(f"- {marker} **{pair.target1}** / **{pair.target2}**: {pair.message}")
        lines.append("")

    lines.extend(_recommendations(analysis.recommendations))
    return '\n'.join(lines)


__all__ = [
    "score_band",
    "contrast_report",
    "readability_report",
    "semantic_report",
    "screen_reader_report",
    "simulation_report",
    "touch_target_report",
]
