"""Tests for the command-line interface."""

import io
import json

import pytest

from accessibility_toolkit.main import main


def _run_json(capsys, *argv):
    assert main(["--format", "json", *argv]) == 0
    return json.loads(capsys.readouterr().out)


class TestContrastCommand:
    def test_json_output(self, capsys):
        data = _run_json(capsys, "contrast", "#000000", "#ffffff")
        assert data["result"]["pass_aaa"] is True
        assert data["result"]["rating_text"] == "AAA (Excellent) ✓"
        assert data["suggested_color"] is None

    def test_text_output(self, capsys):
        assert main(["contrast", "#000000", "#ffffff"]) == 0
        assert "21.00:1" in capsys.readouterr().out

    def test_target_ratio_forces_suggestion(self, capsys):
        data = _run_json(capsys, "contrast", "#000000", "#ffffff", "--target-ratio", "7")
        assert data["suggested_color"] is not None

    def test_malformed_color_is_reported_not_rejected(self, capsys):
        data = _run_json(capsys, "contrast", "#zzzzzz", "#ffffff")
        assert data["result"]["ratio"] == "NaN"


class TestReadabilityCommand:
    def test_json_output(self, capsys):
        data = _run_json(
            capsys, "readability",
            "--font-size", "100", "--line-height", "1.5",
            "--letter-spacing", "1", "--font-weight", "400", "--dyslexia",
        )
        assert data["overall"] == 100
        assert data["rating"] == "Excellent"
        assert data["font_size"]["status"] == "pass"

    def test_missing_option_exits(self):
        with pytest.raises(SystemExit):
            main(["readability", "--font-size", "100"])


class TestHtmlCommands:
    def test_semantic_from_file(self, capsys, tmp_path, div_soup_html):
        page = tmp_path / "page.html"
        page.write_text(div_soup_html, encoding="utf-8")
        data = _run_json(capsys, "semantic", str(page))
        assert data["semantic_score"] == 50
        assert data["div_to_semantic_ratio"] == "Infinity"

    def test_screen_reader_from_stdin(self, capsys, monkeypatch, accessible_page_html):
        monkeypatch.setattr("sys.stdin", io.StringIO(accessible_page_html))
        data = _run_json(capsys, "screen-reader", "-")
        assert data["score"] == 100
        assert len(data["headings"]) == 4

    def test_markdown_output(self, capsys, tmp_path, semantic_html):
        page = tmp_path / "page.html"
        page.write_text(semantic_html, encoding="utf-8")
        assert main(["--format", "markdown", "semantic", str(page)]) == 0
        assert "# Semantic HTML Report" in capsys.readouterr().out

    def test_missing_file(self, capsys, tmp_path):
        assert main(["semantic", str(tmp_path / "missing.html")]) == 1
        assert "Error:" in capsys.readouterr().out


class TestTouchTargetsCommand:
    def test_json_output(self, capsys, tmp_path):
        path = tmp_path / "targets.json"
        path.write_text(json.dumps([
            {"id": "a", "element": "button", "width": 44, "height": 44, "x": 0, "y": 0},
            {"id": "b", "element": "a", "width": 43, "height": 50, "x": 100, "y": 0},
        ]), encoding="utf-8")
        data = _run_json(capsys, "touch-targets", str(path))
        assert data["summary"] == {"total": 2, "pass": 0, "warning": 1, "fail": 1}
        assert [t["status"] for t in data["targets"]] == ["warning", "fail"]

    def test_invalid_targets(self, capsys, tmp_path):
        path = tmp_path / "targets.json"
        path.write_text('{"id": "a"}', encoding="utf-8")
        assert main(["touch-targets", str(path)]) == 1
        assert "Invalid input" in capsys.readouterr().out

    def test_invalid_json(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("not json"))
        assert main(["touch-targets", "-"]) == 1
        assert "Invalid input" in capsys.readouterr().out


class TestSimulateCommand:
    def test_single_type(self, capsys):
        data = _run_json(capsys, "simulate", "#ff0000", "--type", "protanopia")
        assert data["simulations"] == {"protanopia": "#918e00"}
        assert data["filters"] == {"protanopia": "url(#protanopia)"}

    def test_all_types(self, capsys):
        data = _run_json(capsys, "simulate", "#ff0000")
        assert len(data["simulations"]) == 9

    def test_text_output(self, capsys):
        assert main(["simulate", "#ff0000"]) == 0
        assert "Deuteranopia" in capsys.readouterr().out

    def test_unknown_type_exits(self):
        with pytest.raises(SystemExit):
            main(["simulate", "#ff0000", "--type", "infrared"])


class TestQuietOption:
    def test_text_output_has_header_by_default(self, capsys):
        assert main(["contrast", "#000000", "#ffffff"]) == 0
        out = capsys.readouterr().out
        assert "Checking contrast of #000000 on #ffffff" in out
        assert "AA normal text" in out

    def test_quiet_keeps_results_only(self, capsys):
        assert main(["--quiet", "contrast", "#000000", "#ffffff"]) == 0
        out = capsys.readouterr().out
        assert "21.00:1" in out
        assert "Checking contrast" not in out
        assert "AA normal text" not in out

    def test_quiet_still_reports_failures(self, capsys):
        assert main(["--quiet", "contrast", "#aaaaaa", "#ffffff"]) == 0
        out = capsys.readouterr().out
        assert "AA normal text" in out
        assert "Suggested text color" in out

    def test_quiet_skips_strengths_and_recommendations(self, capsys):
        argv = [
            "readability", "--font-size", "100", "--line-height", "1.5",
            "--letter-spacing", "0", "--font-weight", "400",
        ]
        assert main(argv) == 0
        out = capsys.readouterr().out
        assert "Strengths:" in out
        assert "Recommendations:" in out

        assert main(["--quiet", *argv]) == 0
        out = capsys.readouterr().out
        assert "Readability" in out
        assert "Strengths:" not in out
        assert "Recommendations:" not in out
