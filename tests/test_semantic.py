"""Tests for the semantic HTML analyzer."""

import math

from accessibility_toolkit.analyzer.semantic import (
    DivSoupType,
    ElementStatus,
    SemanticAnalyzer,
    Severity,
    analyze_semantic_html,
    calculate_div_to_semantic_ratio,
)


class TestDivSoupDocument:
    def test_score(self, div_soup_html):
        assert analyze_semantic_html(div_soup_html).semantic_score == 50

    def test_clickable_div_is_an_error(self, div_soup_html):
        issues = analyze_semantic_html(div_soup_html).div_soup_issues
        errors = [i for i in issues if i.severity == Severity.ERROR]
        assert len(errors) == 1
        assert errors[0].issue_type == DivSoupType.DIV_BUTTON
        assert errors[0].count == 1
        assert errors[0].issue == "1 clickable div(s) found"

    def test_missing_semantic_warning(self, div_soup_html):
        issues = analyze_semantic_html(div_soup_html).div_soup_issues
        assert [i.issue_type for i in issues] == [
            DivSoupType.DIV_BUTTON,
            DivSoupType.MISSING_SEMANTIC,
        ]

    def test_ratio_is_infinite(self, div_soup_html):
        assert math.isinf(analyze_semantic_html(div_soup_html).div_to_semantic_ratio)

    def test_suggestions(self, div_soup_html):
        suggestions = analyze_semantic_html(div_soup_html).suggestions
        assert [s.to_tag for s in suggestions] == [
            "<header>", "<nav>", "<main>", "<footer>", "<article>", "<aside>", "<button>",
        ]

    def test_missing_elements_are_flagged(self, div_soup_html):
        elements = analyze_semantic_html(div_soup_html).elements
        assert [(e.tag, e.status) for e in elements] == [
            ("main", ElementStatus.WARNING),
            ("header/nav", ElementStatus.WARNING),
        ]

    def test_recommendations(self, div_soup_html):
        assert analyze_semantic_html(div_soup_html).recommendations == [
            "Replace clickable divs with proper button or link elements",
            "Add semantic HTML5 elements - currently only using generic divs",
            "Add a <main> element to identify the primary content",
            "Use <nav> elements for navigation sections",
        ]


class TestSemanticDocument:
    def test_perfect_score(self, semantic_html):
        analysis = analyze_semantic_html(semantic_html)
        assert analysis.semantic_score == 100
        assert analysis.div_soup_issues == []
        assert analysis.suggestions == []
        assert analysis.recommendations == [
            "Excellent! Your HTML structure is highly semantic."
        ]

    def test_scores_higher_than_div_soup(self, semantic_html, div_soup_html):
        good = analyze_semantic_html(semantic_html)
        bad = analyze_semantic_html(div_soup_html)
        assert good.semantic_score > bad.semantic_score
        assert len(good.div_soup_issues) < len(bad.div_soup_issues)

    def test_inventory(self, semantic_html):
        elements = analyze_semantic_html(semantic_html).elements
        assert [e.tag for e in elements] == ["header", "nav", "main", "article", "aside", "footer"]
        assert all(e.status == ElementStatus.GOOD for e in elements)
        assert elements[0].message == "1 header element(s) - Defines page/section header"

    def test_ratio(self, semantic_html):
        assert analyze_semantic_html(semantic_html).div_to_semantic_ratio == 1 / 6


class TestDivRatio:
    def test_only_divs(self):
        assert calculate_div_to_semantic_ratio("<div></div>") == math.inf

    def test_no_divs_no_semantic(self):
        assert calculate_div_to_semantic_ratio("<p>text</p>") == 0

    def test_mixed(self):
        assert calculate_div_to_semantic_ratio("<main><div></div><div></div></main>") == 2


class TestDetection:
    def test_excessive_divs(self):
        html = "<div></div>" * 25 + "<main></main><p></p>"
        issues = SemanticAnalyzer().detect_div_soup(html)
        excessive = [i for i in issues if i.issue_type == DivSoupType.EXCESSIVE_DIVS]
        assert len(excessive) == 1
        assert excessive[0].count == 25
        assert "25 divs (92.6% of all tags)" in excessive[0].issue

    def test_deep_nesting(self):
        html = "<div><div><div><div></div></div></div></div>" * 4
        issues = SemanticAnalyzer().detect_div_soup(html)
        nested = [i for i in issues if i.severity == Severity.INFO]
        assert len(nested) == 1
        assert nested[0].count == 4

    def test_framework_click_handlers(self):
        html = '<div @click="go">A</div><div ng-click="go()">B</div>'
        issues = SemanticAnalyzer().detect_div_soup(html)
        assert issues[0].count == 2

    def test_suggestion_skipped_when_tag_present(self):
        html = '<header></header><div class="header"></div>'
        suggestions = SemanticAnalyzer().generate_suggestions(html)
        assert "<header>" not in [s.to_tag for s in suggestions]

    def test_role_button_div_suggests_button(self):
        html = '<button>Ok</button><div role="button">Go</div>'
        suggestions = SemanticAnalyzer().generate_suggestions(html)
        assert [s.to_tag for s in suggestions] == ["<button>"]

    def test_score_is_clamped(self):
        html = '<div onclick="x()"></div>' * 30
        assert SemanticAnalyzer().calculate_score(html) >= 0

    def test_empty_document(self):
        analysis = analyze_semantic_html("")
        assert analysis.semantic_score == 75
        assert analysis.div_to_semantic_ratio == 0
