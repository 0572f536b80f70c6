"""Tests for the screen reader preview analyzer."""

import pytest

from accessibility_toolkit.analyzer.screen_reader import (
    IssueLevel,
    ScreenReaderAnalyzer,
    analyze_for_screen_reader,
)


EXPECTED_TRANSCRIPT = (
    'Page title: "Welcome to My Website"\n'
    '\n'
    'Landmarks:\n'
    '  1. banner\n'
    '  2. navigation "Main navigation"\n'
    '  3. main\n'
    '  4. contentinfo\n'
    '  5. region\n'
    '  6. region\n'
    '\n'
    'Heading Structure:\n'
    'H1: "Welcome to Our Site"\n'
    '  H2: "Featured Content"\n'
    '  H2: "About Us"\n'
    '    H3: "Our Mission"\n'
    '\n'
    'Images:\n'
    '  1. A beautiful landscape\n'
    '\n'
)


class TestAccessiblePage:
    def test_perfect_score(self, accessible_page_html):
        analysis = analyze_for_screen_reader(accessible_page_html)
        assert analysis.score == 100
        assert analysis.aria_issues == []
        assert analysis.recommendations == [
            "Excellent! Your HTML is well-structured for screen readers."
        ]

    def test_headings(self, accessible_page_html):
        headings = analyze_for_screen_reader(accessible_page_html).headings
        assert [(h.level, h.text) for h in headings] == [
            (1, "Welcome to Our Site"),
            (2, "Featured Content"),
            (2, "About Us"),
            (3, "Our Mission"),
        ]

    def test_landmarks(self, accessible_page_html):
        landmarks = analyze_for_screen_reader(accessible_page_html).landmarks
        assert [lm.landmark_type for lm in landmarks] == [
            "banner", "navigation", "main", "contentinfo", "region", "region",
        ]
        assert landmarks[1].label == "Main navigation"

    def test_images(self, accessible_page_html):
        images = analyze_for_screen_reader(accessible_page_html).images
        assert len(images) == 1
        assert images[0].src == "example.jpg"
        assert images[0].alt == "A beautiful landscape"
        assert images[0].has_alt
        assert not images[0].is_decorative

    def test_transcript(self, accessible_page_html):
        analysis = analyze_for_screen_reader(accessible_page_html)
        assert analysis.screen_reader_text == EXPECTED_TRANSCRIPT


class TestExtraction:
    def test_heading_id_and_entities(self):
        headings = ScreenReaderAnalyzer().extract_headings(
            '<h2 id="terms">Terms &amp; <em>Conditions</em></h2>'
        )
        assert headings[0].id == "terms"
        assert headings[0].text == "Terms & Conditions"

    def test_role_landmarks_are_not_deduplicated(self):
        landmarks = ScreenReaderAnalyzer().extract_landmarks('<header role="banner"></header>')
        assert [lm.landmark_type for lm in landmarks] == ["banner", "banner"]
        assert landmarks[1].role == "banner"

    def test_unknown_roles_are_ignored(self):
        assert ScreenReaderAnalyzer().extract_landmarks('<div role="tooltip"></div>') == []

    def test_head_is_not_header(self):
        assert ScreenReaderAnalyzer().extract_landmarks("<head><title>x</title></head>") == []

    def test_image_alt_variants(self):
        images = ScreenReaderAnalyzer().extract_images(
            '<img src="a.png" alt="">'
            '<img src="b.png" alt="Chart" role="presentation">'
            '<img src="c.png">'
        )
        assert [(i.has_alt, i.is_decorative) for i in images] == [
            (True, True),
            (True, True),
            (False, True),
        ]

    def test_decorative_images_are_left_out_of_transcript(self):
        text = ScreenReaderAnalyzer().generate_transcript('<img src="a.png" alt="">')
        assert text == ""


class TestAriaValidation:
    def _issues(self, html):
        return ScreenReaderAnalyzer().validate_aria(html)

    def test_label_on_generic_element(self):
        issues = self._issues('<span aria-label="Status">ok</span>')
        assert len(issues) == 1
        assert issues[0].level == IssueLevel.WARNING
        assert issues[0].element == "<span>"

    def test_label_allowed_on_roles_and_regions(self):
        assert self._issues('<div role="dialog" aria-label="Settings"></div>') == []
        assert self._issues('<nav aria-label="Main"></nav>') == []
        assert self._issues('<button aria-label="Close"></button>') == []

    def test_button_without_name(self):
        issues = self._issues('<button><svg></svg></button>')
        assert [i.issue for i in issues] == ["Button has no accessible name"]
        assert issues[0].level == IssueLevel.ERROR

    def test_link_without_name(self):
        issues = self._issues('<a href="/"></a>')
        assert [i.issue for i in issues] == ["Link has no accessible name"]

    def test_link_named_by_labelledby(self):
        assert self._issues('<a href="/" aria-labelledby="t"></a>') == []

    def test_input_without_label(self):
        assert [i.issue for i in self._issues('<input type="text">')] == [
            "Input has no associated label"
        ]
        assert self._issues('<input type="text" id="q">') == []
        assert self._issues('<input type="hidden" name="token">') == []

    def test_redundant_button_role(self):
        issues = self._issues('<button>Ok</button><div role="button">Go</div>')
        assert [i.level for i in issues] == [IssueLevel.INFO]

    def test_unparseable_button_content_has_no_name(self):
        issues = self._issues("<button><![foo]></button>")
        assert [i.issue for i in issues] == ["Button has no accessible name"]


class TestScoring:
    def test_empty_document(self):
        analysis = analyze_for_screen_reader("")
        assert analysis.score == 60
        assert analysis.screen_reader_text == ""
        assert analysis.recommendations == [
            "Add heading elements (h1-h6) to structure your content",
            "Add landmark regions (header, nav, main, footer) for better navigation",
        ]

    def test_skipped_heading_level(self):
        analysis = analyze_for_screen_reader("<main><h1>A</h1><h3>B</h3></main>")
        assert analysis.score == 95
        assert analysis.recommendations == ["Avoid skipping heading levels (e.g., h2 to h4)"]

    def test_missing_h1(self):
        analysis = analyze_for_screen_reader("<main><h2>A</h2></main>")
        assert analysis.score == 90
        assert analysis.recommendations == [
            "Add an h1 element - every page should have exactly one"
        ]

    def test_missing_main(self):
        analysis = analyze_for_screen_reader("<nav><h1>A</h1></nav>")
        assert analysis.score == 90
        assert analysis.recommendations == ["Add a <main> element to identify the main content"]

    def test_aria_errors(self):
        analysis = analyze_for_screen_reader("<main><h1>T</h1><button></button></main>")
        assert analysis.score == 90
        assert analysis.recommendations == [
            "Fix 1 critical ARIA issue(s) - check the issues panel"
        ]

    def test_warnings_only(self):
        analysis = analyze_for_screen_reader('<main><h1>T</h1><span aria-label="x">y</span></main>')
        assert analysis.score == 95
        assert analysis.recommendations == ["Great job! Just a few minor improvements needed."]

    def test_score_is_clamped(self):
        analysis = analyze_for_screen_reader("<button></button>" * 20)
        assert analysis.score == 0


class TestMalformedMarkup:
    @pytest.mark.parametrize("html", [
        "<button><![foo]></button>",
        "<title><![ bogus</title>",
        '<a href="/"><![ x</a>',
        "<h1><![CDATA[ open</h1>",
        "<title>&bogus; <![</title><main><h1>Hi</h1></main>",
    ])
    def test_analysis_does_not_raise(self, html):
        analysis = analyze_for_screen_reader(html)
        assert 0 <= analysis.score <= 100
        assert isinstance(analysis.screen_reader_text, str)
        assert all(isinstance(h.text, str) for h in analysis.headings)
