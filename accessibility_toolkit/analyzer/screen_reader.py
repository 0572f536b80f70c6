"""
Screen reader analyzer module.

Walks raw HTML the way assistive technology would: heading outline,
landmark regions, image alternatives, and ARIA usage. Produces a
plain-text transcript of what a screen reader would announce.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .tag_scanner import get_attribute, has_attribute, inner_text
from ..utils.log import get_logger


class IssueLevel(Enum):
    """Severity level of ARIA issues."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class HeadingNode:
    """A heading in document order."""
    level: int
    text: str
    id: Optional[str] = None


@dataclass
class LandmarkNode:
    """A landmark region."""
    landmark_type: str
    role: Optional[str] = None
    label: Optional[str] = None


@dataclass
class ImageNode:
    """An image and its text alternative."""
    src: str
    alt: str
    has_alt: bool
    is_decorative: bool


@dataclass
class AriaIssue:
    """Represents an ARIA problem found."""
    level: IssueLevel
    element: str
    issue: str
    suggestion: str


@dataclass
class ScreenReaderAnalysis:
    """Result of screen reader analysis."""
    headings: List[HeadingNode] = field(default_factory=list)
    landmarks: List[LandmarkNode] = field(default_factory=list)
    images: List[ImageNode] = field(default_factory=list)
    aria_issues: List[AriaIssue] = field(default_factory=list)
    screen_reader_text: str = ""
    score: int = 100
    recommendations: List[str] = field(default_factory=list)


HEADING_PATTERN = re.compile(r'<h([1-6])([^>]*)>(.*?)</h\1>', re.IGNORECASE)
TITLE_PATTERN = re.compile(r'<title[^>]*>(.*?)</title>', re.IGNORECASE)
IMG_PATTERN = re.compile(r'<img([^>]*)>', re.IGNORECASE)
ROLE_PATTERN = re.compile(r'role=["\']([^"\']+)["\']', re.IGNORECASE)

ARIA_LABEL_TAG_PATTERN = re.compile(
    r'<(\w+)([^>]*aria-label=["\'][^"\']+["\'][^>]*)>', re.IGNORECASE
)
BUTTON_PATTERN = re.compile(r'<button\b([^>]*)>(.*?)</button>', re.IGNORECASE)
LINK_PATTERN = re.compile(r'<a\b([^>]*)>(.*?)</a>', re.IGNORECASE)
INPUT_PATTERN = re.compile(
    r'<input([^>]*type=["\'](?!hidden)[^"\']+["\'][^>]*)>', re.IGNORECASE
)

# HTML5 elements and the landmark each one exposes, in reporting order
SEMANTIC_LANDMARKS = [
    ('header', 'banner'),
    ('nav', 'navigation'),
    ('main', 'main'),
    ('aside', 'complementary'),
    ('footer', 'contentinfo'),
    ('section', 'region'),
    ('article', 'article'),
    ('form', 'form'),
]

# Explicit roles reported as landmarks, in addition to the element-derived ones
LANDMARK_ROLES = {
    'banner', 'navigation', 'main', 'complementary',
    'contentinfo', 'region', 'search',
}

INTERACTIVE_TAGS = {'a', 'button', 'input', 'select', 'textarea'}

# Elements where aria-label names the region
LABELLED_REGION_TAGS = {'nav', 'section', 'form'}

ISSUE_PENALTIES = {
    IssueLevel.ERROR: 10,
    IssueLevel.WARNING: 5,
}

EXCELLENT_MESSAGE = 'Excellent! Your HTML is well-structured for screen readers.'


def _has_accessible_name_attribute(attributes: str) -> bool:
    return (
        has_attribute(attributes, 'aria-label')
        or has_attribute(attributes, 'aria-labelledby')
    )


def _count_level_skips(headings: List[HeadingNode]) -> int:
    return sum(
        1 for prev, cur in zip(headings, headings[1:])
        if cur.level - prev.level > 1
    )


class ScreenReaderAnalyzer:
    """
    Analyzes HTML for screen reader accessibility.

    Pattern-based, so it tolerates fragments and malformed markup.
    """

    def __init__(self):
        """Initialize the screen reader analyzer."""
        self.logger = get_logger("screen_reader")

    def analyze(self, html: str) -> ScreenReaderAnalysis:
        """
        Run the complete screen reader analysis.

        Args:
            html: HTML content to analyze

        Returns:
            ScreenReaderAnalysis with structure, issues, transcript and score
        """
        result = ScreenReaderAnalysis(
            headings=self.extract_headings(html),
            landmarks=self.extract_landmarks(html),
            images=self.extract_images(html),
            aria_issues=self.validate_aria(html),
        )
        result.screen_reader_text = self.generate_transcript(html)
        result.score = self._calculate_score(result)
        result.recommendations = self._generate_recommendations(result)

        self.logger.debug(
            f"Screen reader score {result.score}/100: "
            f"{len(result.headings)} heading(s), {len(result.landmarks)} landmark(s), "
            f"{len(result.images)} image(s), {len(result.aria_issues)} ARIA issue(s)"
        )
        return result

    def extract_headings(self, html: str) -> List[HeadingNode]:
        """Extract the heading hierarchy in document order."""
        headings = []
        for match in HEADING_PATTERN.finditer(html):
            headings.append(HeadingNode(
                level=int(match.group(1)),
                text=inner_text(match.group(3)),
                id=get_attribute(match.group(2), 'id'),
            ))
        return headings

    def extract_landmarks(self, html: str) -> List[LandmarkNode]:
        """
        Extract landmark regions.

        Element-derived landmarks come first, then explicit role
        attributes. The two are not deduplicated, so
        <header role="banner"> yields two entries.
        """
        landmarks = []

        for tag, landmark_type in SEMANTIC_LANDMARKS:
            pattern = re.compile(rf'<{tag}\b([^>]*)>', re.IGNORECASE)
            for match in pattern.finditer(html):
                landmarks.append(LandmarkNode(
                    landmark_type=landmark_type,
                    label=get_attribute(match.group(1), 'aria-label'),
                ))

        for match in ROLE_PATTERN.finditer(html):
            role = match.group(1)
            if role in LANDMARK_ROLES:
                landmarks.append(LandmarkNode(landmark_type=role, role=role))

        return landmarks

    def extract_images(self, html: str) -> List[ImageNode]:
        """Extract images with their alt text."""
        images = []
        for match in IMG_PATTERN.finditer(html):
            attributes = match.group(1)
            alt = get_attribute(attributes, 'alt', allow_empty=True)
            images.append(ImageNode(
                src=get_attribute(attributes, 'src') or '',
                alt=alt or '',
                has_alt=alt is not None,
                is_decorative=not alt or 'role="presentation"' in attributes,
            ))
        return images

    def validate_aria(self, html: str) -> List[AriaIssue]:
        """Validate ARIA attributes and detect missing accessible names."""
        issues = []

        for match in ARIA_LABEL_TAG_PATTERN.finditer(html):
            tag = match.group(1).lower()
            attributes = match.group(2)
            has_role = has_attribute(attributes, 'role')

            if (not has_role and tag not in INTERACTIVE_TAGS
                    and tag not in LABELLED_REGION_TAGS):
                issues.append(AriaIssue(
                    level=IssueLevel.WARNING,
                    element=f"<{match.group(1)}>",
                    issue='aria-label on non-interactive element without role',
                    suggestion='Consider using a semantic element or adding an appropriate ARIA role',
                ))

        for match in BUTTON_PATTERN.finditer(html):
            if not inner_text(match.group(2)) and not _has_accessible_name_attribute(match.group(1)):
                issues.append(AriaIssue(
                    level=IssueLevel.ERROR,
                    element='<button>',
                    issue='Button has no accessible name',
                    suggestion='Add text content, aria-label, or aria-labelledby',
                ))

        for match in LINK_PATTERN.finditer(html):
            if not inner_text(match.group(2)) and not _has_accessible_name_attribute(match.group(1)):
                issues.append(AriaIssue(
                    level=IssueLevel.ERROR,
                    element='<a>',
                    issue='Link has no accessible name',
                    suggestion='Add text content, aria-label, or aria-labelledby',
                ))

        for match in INPUT_PATTERN.finditer(html):
            attributes = match.group(1)
            if (get_attribute(attributes, 'id') is None
                    and not _has_accessible_name_attribute(attributes)):
                issues.append(AriaIssue(
                    level=IssueLevel.ERROR,
                    element='<input>',
                    issue='Input has no associated label',
                    suggestion='Add an id and associate with a <label>, or use aria-label',
                ))

        # Document-wide check, not per element
        if 'role="button"' in html and '<button' in html:
            issues.append(AriaIssue(
                level=IssueLevel.INFO,
                element='<button role="button">',
                issue='Redundant ARIA role',
                suggestion='Remove role="button" from <button> elements (already implied)',
            ))

        return issues

    def generate_transcript(self, html: str) -> str:
        """
        Generate the text a screen reader would announce.

        Sections appear in a fixed order (title, landmarks, headings,
        images), each followed by a blank line. Empty sections are omitted.
        """
        lines = []

        title = TITLE_PATTERN.search(html)
        if title:
            lines.append(f'Page title: "{inner_text(title.group(1))}"')
            lines.append('')

        landmarks = self.extract_landmarks(html)
        if landmarks:
            lines.append('Landmarks:')
            for idx, landmark in enumerate(landmarks, 1):
                label = f' "{landmark.label}"' if landmark.label else ''
                lines.append(f"  {idx}. {landmark.landmark_type}{label}")
            lines.append('')

        headings = self.extract_headings(html)
        if headings:
            lines.append('Heading Structure:')
            for heading in headings:
                indent = '  ' * (heading.level - 1)
                lines.append(f'{indent}H{heading.level}: "{heading.text}"')
            lines.append('')

        meaningful = [img for img in self.extract_images(html) if not img.is_decorative]
        if meaningful:
            lines.append('Images:')
            for idx, img in enumerate(meaningful, 1):
                lines.append(f"  {idx}. {img.alt or '[No alt text]'}")
            lines.append('')

        return ''.join(f"{line}\n" for line in lines)

    def _calculate_score(self, analysis: ScreenReaderAnalysis) -> int:
        """Calculate the screen reader score, clamped to 0-100."""
        score = 100

        if not analysis.headings:
            score -= 20
        else:
            if not any(h.level == 1 for h in analysis.headings):
                score -= 10
            score -= 5 * _count_level_skips(analysis.headings)

        if not analysis.landmarks:
            score -= 20
        elif not any(lm.landmark_type == 'main' for lm in analysis.landmarks):
            score -= 10

        missing_alt = [
            img for img in analysis.images
            if not img.has_alt and not img.is_decorative
        ]
        score -= 5 * len(missing_alt)

        for issue in analysis.aria_issues:
            score -= ISSUE_PENALTIES.get(issue.level, 0)

        return max(0, min(100, score))

    def _generate_recommendations(self, analysis: ScreenReaderAnalysis) -> List[str]:
        """Generate recommendations mirroring the score deductions."""
        if analysis.score == 100:
            return [EXCELLENT_MESSAGE]

        recommendations = []

        if not analysis.headings:
            recommendations.append('Add heading elements (h1-h6) to structure your content')
        else:
            if not any(h.level == 1 for h in analysis.headings):
                recommendations.append(
                    'Add an h1 element - every page should have exactly one'
                )
            if _count_level_skips(analysis.headings):
                recommendations.append('Avoid skipping heading levels (e.g., h2 to h4)')

        if not analysis.landmarks:
            recommendations.append(
                'Add landmark regions (header, nav, main, footer) for better navigation'
            )
        elif not any(lm.landmark_type == 'main' for lm in analysis.landmarks):
            recommendations.append('Add a <main> element to identify the main content')

        missing_alt = [
            img for img in analysis.images
            if not img.has_alt and not img.is_decorative
        ]
        if missing_alt:
            recommendations.append(
                f"{len(missing_alt)} image(s) missing alt text - add descriptive alternatives"
            )

        errors = [i for i in analysis.aria_issues if i.level == IssueLevel.ERROR]
        if errors:
            recommendations.append(
                f"Fix {len(errors)} critical ARIA issue(s) - check the issues panel"
            )

        if not recommendations:
            recommendations.append('Great job! Just a few minor improvements needed.')

        return recommendations


def analyze_for_screen_reader(html: str) -> ScreenReaderAnalysis:
    """Run the complete screen reader analysis."""
    return ScreenReaderAnalyzer().analyze(html)
