"""
Semantic HTML analyzer module.

Inventories HTML5 semantic elements, detects "div soup", and suggests
semantic replacements for generic containers.
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Optional

from .tag_scanner import count_elements
from ..utils.log import get_logger


class ElementStatus(Enum):
    """Status of an element inventory row."""
    GOOD = "good"
    WARNING = "warning"
    INFO = "info"


class Severity(Enum):
    """Severity level of div soup issues."""
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class DivSoupType(Enum):
    """Category of a div soup issue."""
    EXCESSIVE_DIVS = "excessive-divs"
    DIV_BUTTON = "div-button"
    DIV_LINK = "div-link"
    MISSING_SEMANTIC = "missing-semantic"


@dataclass
class SemanticElement:
    """A semantic element found in, or missing from, the document."""
    tag: str
    count: int
    status: ElementStatus
    message: str


@dataclass
class DivSoupIssue:
    """Represents a div soup pattern found."""
    issue_type: DivSoupType
    severity: Severity
    element: str
    issue: str
    suggestion: str
    count: Optional[int] = None


@dataclass
class SemanticSuggestion:
    """A before/after migration hint."""
    from_tag: str
    to_tag: str
    reason: str
    example: str


@dataclass
class SemanticAnalysis:
    """Result of semantic HTML analysis."""
    elements: List[SemanticElement] = field(default_factory=list)
    div_soup_issues: List[DivSoupIssue] = field(default_factory=list)
    suggestions: List[SemanticSuggestion] = field(default_factory=list)
    semantic_score: int = 100
    div_to_semantic_ratio: float = 0.0
    recommendations: List[str] = field(default_factory=list)


class SuggestionRule(NamedTuple):
    """Suggest `to_tag` when `replacement` is absent and `telltale` matches."""
    replacement: Optional[str]
    telltale: re.Pattern
    from_tag: str
    to_tag: str
    reason: str
    example: str


# HTML5 elements reported in the inventory, with what each one defines
SEMANTIC_TAGS: Dict[str, str] = {
    'header': 'Defines page/section header',
    'nav': 'Defines navigation section',
    'main': 'Defines main content',
    'article': 'Defines independent content',
    'section': 'Defines thematic grouping',
    'aside': 'Defines complementary content',
    'footer': 'Defines page/section footer',
    'figure': 'Defines self-contained content',
    'figcaption': 'Defines figure caption',
    'time': 'Defines date/time',
    'mark': 'Defines highlighted text',
}

# Structural tags counted against divs
LANDMARK_TAGS = ('header', 'nav', 'main', 'article', 'section', 'aside', 'footer')

CLICKABLE_DIV_PATTERN = re.compile(
    r'<div[^>]*(onclick|@click|ng-click)[^>]*>', re.IGNORECASE
)
DEEP_NESTING_PATTERN = re.compile(
    r'<div[^>]*>\s*<div[^>]*>\s*<div[^>]*>\s*<div[^>]*>', re.IGNORECASE
)

# Matched against the lowercased document, at most one suggestion per rule
SUGGESTION_RULES = [
    SuggestionRule(
        '<header', re.compile(r'class="header"|id="header"'),
        '<div class="header">', '<header>',
        'Define page header for better structure',
        '<header>\n  <h1>Site Title</h1>\n  <nav>...</nav>\n</header>',
    ),
    SuggestionRule(
        '<nav', re.compile(r'class="nav"|class="menu"'),
        '<div class="nav">', '<nav>',
        'Identify navigation sections',
        '<nav aria-label="Main navigation">\n  <ul>\n'
        '    <li><a href="/">Home</a></li>\n  </ul>\n</nav>',
    ),
    SuggestionRule(
        '<main', re.compile(r'class="content"|id="content"'),
        '<div class="content">', '<main>',
        'Identify the primary content of the page',
        '<main>\n  <h1>Page Title</h1>\n  <p>Main content...</p>\n</main>',
    ),
    SuggestionRule(
        '<footer', re.compile(r'class="footer"|id="footer"'),
        '<div class="footer">', '<footer>',
        'Define page footer',
        '<footer>\n  <p>&copy; 2024 Company</p>\n</footer>',
    ),
    SuggestionRule(
        '<article', re.compile(r'class="post"|class="article"'),
        '<div class="post">', '<article>',
        'Wrap independent, self-contained content',
        '<article>\n  <h2>Article Title</h2>\n  <p>Content...</p>\n</article>',
    ),
    SuggestionRule(
        '<section', re.compile(r'class="section"'),
        '<div class="section">', '<section>',
        'Group thematically related content',
        '<section>\n  <h2>Section Heading</h2>\n  <p>Related content...</p>\n</section>',
    ),
    SuggestionRule(
        '<aside', re.compile(r'class="sidebar"|class="aside"'),
        '<div class="sidebar">', '<aside>',
        'Mark complementary content',
        '<aside>\n  <h3>Related Links</h3>\n  <ul>...</ul>\n</aside>',
    ),
    # A page can use <button> and still contain clickable divs
    SuggestionRule(
        None, re.compile(r'<div[^>]*(onclick=|role="button")'),
        '<div onclick="...">', '<button>',
        'Use button for interactive elements',
        '<button type="button" onclick="handleClick()">\n  Click Me\n</button>',
    ),
]

SEVERITY_PENALTIES = {
    Severity.ERROR: 15,
    Severity.WARNING: 10,
    Severity.INFO: 5,
}

EXCELLENT_MESSAGE = 'Excellent! Your HTML structure is highly semantic.'


def _landmark_count(counts: Dict[str, int]) -> int:
    return sum(counts.get(tag, 0) for tag in LANDMARK_TAGS)


class SemanticAnalyzer:
    """
    Analyzes HTML for semantic structure.

    Works on raw HTML text through the shared tag scanner, so partial
    or malformed documents are analyzed as far as they can be.
    """

    def __init__(self):
        """Initialize the semantic analyzer."""
        self.logger = get_logger("semantic")

    def analyze(self, html: str) -> SemanticAnalysis:
        """
        Run the complete semantic HTML analysis.

        Args:
            html: HTML content to analyze

        Returns:
            SemanticAnalysis with inventory, issues, suggestions and score
        """
        result = SemanticAnalysis(
            elements=self.analyze_elements(html),
            div_soup_issues=self.detect_div_soup(html),
            suggestions=self.generate_suggestions(html),
            semantic_score=self.calculate_score(html),
            div_to_semantic_ratio=self.calculate_div_ratio(html),
        )
        result.recommendations = self._generate_recommendations(result)

        self.logger.debug(
            f"Semantic score {result.semantic_score}/100, "
            f"{len(result.div_soup_issues)} div soup issue(s), "
            f"{len(result.suggestions)} suggestion(s)"
        )
        return result

    def analyze_elements(self, html: str) -> List[SemanticElement]:
        """Inventory semantic elements and flag important missing ones."""
        counts = count_elements(html)
        elements = []

        for tag, description in SEMANTIC_TAGS.items():
            count = counts.get(tag, 0)
            if count > 0:
                elements.append(SemanticElement(
                    tag=tag,
                    count=count,
                    status=ElementStatus.GOOD,
                    message=f"{count} {tag} element(s) - {description}",
                ))

        if not counts.get('main'):
            elements.append(SemanticElement(
                tag='main',
                count=0,
                status=ElementStatus.WARNING,
                message='No <main> element found - should identify primary content',
            ))

        if not counts.get('header') and not counts.get('nav'):
            elements.append(SemanticElement(
                tag='header/nav',
                count=0,
                status=ElementStatus.WARNING,
                message='No <header> or <nav> elements found - consider adding for navigation',
            ))

        return elements

    def detect_div_soup(self, html: str) -> List[DivSoupIssue]:
        """Detect excessive or improper div usage."""
        issues = []
        counts = count_elements(html)

        div_count = counts.get('div', 0)
        total_tags = sum(counts.values())
        semantic_count = _landmark_count(counts)

        if div_count > 20 and div_count / total_tags > 0.4:
            share = div_count / total_tags * 100
            issues.append(DivSoupIssue(
                issue_type=DivSoupType.EXCESSIVE_DIVS,
                severity=Severity.WARNING,
                element='<div>',
                issue=f"Excessive div usage: {div_count} divs ({share:.1f}% of all tags)",
                suggestion='Replace generic divs with semantic elements where appropriate',
                count=div_count,
            ))

        clickable = len(CLICKABLE_DIV_PATTERN.findall(html))
        if clickable > 0:
            issues.append(DivSoupIssue(
                issue_type=DivSoupType.DIV_BUTTON,
                severity=Severity.ERROR,
                element='<div onclick="...">',
                issue=f"{clickable} clickable div(s) found",
                suggestion='Use <button> or <a> for interactive elements',
                count=clickable,
            ))

        if semantic_count == 0 and div_count > 5:
            issues.append(DivSoupIssue(
                issue_type=DivSoupType.MISSING_SEMANTIC,
                severity=Severity.WARNING,
                element='Document structure',
                issue='No semantic HTML5 elements found, only generic divs',
                suggestion='Use header, nav, main, section, article, aside, footer',
            ))

        nesting = len(DEEP_NESTING_PATTERN.findall(html))
        if nesting > 3:
            issues.append(DivSoupIssue(
                issue_type=DivSoupType.EXCESSIVE_DIVS,
                severity=Severity.INFO,
                element='Nested divs',
                issue='Deep div nesting detected (4+ levels)',
                suggestion='Simplify structure or use semantic elements to reduce nesting',
                count=nesting,
            ))

        return issues

    def generate_suggestions(self, html: str) -> List[SemanticSuggestion]:
        """Generate semantic replacement suggestions, one per matching rule."""
        lower_html = html.lower()
        suggestions = []

        for rule in SUGGESTION_RULES:
            if rule.replacement is not None and rule.replacement in lower_html:
                continue
            if not rule.telltale.search(lower_html):
                continue
            suggestions.append(SemanticSuggestion(
                from_tag=rule.from_tag,
                to_tag=rule.to_tag,
                reason=rule.reason,
                example=rule.example,
            ))

        return suggestions

    def calculate_score(self, html: str) -> int:
        """Calculate the semantic score, clamped to 0-100."""
        score = 100
        counts = count_elements(html)

        div_count = counts.get('div', 0)
        semantic_count = _landmark_count(counts)

        if not counts.get('main'):
            score -= 15
        if not counts.get('header') and not counts.get('nav'):
            score -= 10

        for issue in self.detect_div_soup(html):
            score -= SEVERITY_PENALTIES[issue.severity]

        if semantic_count > 0:
            score += min(20, semantic_count * 3)

        if div_count > 0 and semantic_count > 0 and div_count / semantic_count > 5:
            score -= 10

        return max(0, min(100, score))

    def calculate_div_ratio(self, html: str) -> float:
        """
        Calculate the div-to-semantic element ratio.

        Returns:
            Ratio, infinity when there are divs but no semantic
            elements, 0.0 when there are neither
        """
        counts = count_elements(html)
        div_count = counts.get('div', 0)
        semantic_count = _landmark_count(counts)

        if semantic_count == 0:
            return math.inf if div_count > 0 else 0.0
        return div_count / semantic_count

    def _generate_recommendations(self, analysis: SemanticAnalysis) -> List[str]:
        """Generate prioritized recommendations."""
        if analysis.semantic_score == 100:
            return [EXCELLENT_MESSAGE]

        recommendations = []

        if any(i.severity == Severity.ERROR for i in analysis.div_soup_issues):
            recommendations.append(
                'Replace clickable divs with proper button or link elements'
            )

        if math.isinf(analysis.div_to_semantic_ratio):
            recommendations.append(
                'Add semantic HTML5 elements - currently only using generic divs'
            )
        elif analysis.div_to_semantic_ratio > 5:
            recommendations.append(
                'High div-to-semantic ratio - replace more divs with semantic elements'
            )

        suggested = {s.to_tag for s in analysis.suggestions}
        if '<main>' in suggested:
            recommendations.append('Add a <main> element to identify the primary content')
        if '<nav>' in suggested:
            recommendations.append('Use <nav> elements for navigation sections')

        if not recommendations:
            recommendations.append(
                'Good semantic structure! Consider the suggestions for further improvements'
            )

        return recommendations


def analyze_semantic_html(html: str) -> SemanticAnalysis:
    """Run the complete semantic HTML analysis."""
    return SemanticAnalyzer().analyze(html)


def calculate_div_to_semantic_ratio(html: str) -> float:
    """Calculate the div-to-semantic element ratio."""
    return SemanticAnalyzer().calculate_div_ratio(html)
