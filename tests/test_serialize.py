"""Tests for result serialization helpers."""

import json
import math

from accessibility_toolkit.analyzer.contrast import analyze_contrast
from accessibility_toolkit.analyzer.semantic import analyze_semantic_html
from accessibility_toolkit.utils.serialize import format_number, to_dict


class TestFormatNumber:
    def test_integral_floats_drop_fraction(self):
        assert format_number(1.0) == "1"
        assert format_number(400) == "400"

    def test_fractions_are_kept(self):
        assert format_number(1.5) == "1.5"
        assert format_number(-0.25) == "-0.25"

    def test_non_finite(self):
        assert format_number(math.nan) == "NaN"
        assert format_number(math.inf) == "Infinity"
        assert format_number(-math.inf) == "-Infinity"


class TestToDict:
    def test_enums_become_values(self, div_soup_html):
        data = to_dict(analyze_semantic_html(div_soup_html))
        assert data["div_soup_issues"][0]["severity"] == "error"
        assert data["div_soup_issues"][0]["issue_type"] == "div-button"

    def test_infinite_ratio_is_json_safe(self, div_soup_html):
        data = to_dict(analyze_semantic_html(div_soup_html))
        assert data["div_to_semantic_ratio"] == "Infinity"
        json.dumps(data, allow_nan=False)

    def test_nan_ratio_is_json_safe(self):
        data = to_dict(analyze_contrast("#zzzzzz", "#ffffff"))
        assert data["ratio"] == "NaN"
        assert data["pass_aa"] is False

    def test_plain_values_pass_through(self):
        assert to_dict({"a": [1, 2.5, "x", None]}) == {"a": [1, 2.5, "x", None]}
