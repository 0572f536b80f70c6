"""
Flask web application for the accessibility toolkit.

Exposes each analyzer as a JSON endpoint.
"""

from typing import Any, Dict

from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException

from .. import __version__
from ..analyzer.color_blindness import ColorBlindnessSimulator, VISION_TYPES, css_filter
from ..analyzer.contrast import ContrastChecker
from ..analyzer.readability import ReadabilityAnalyzer, TypographySettings
from ..analyzer.screen_reader import ScreenReaderAnalyzer
from ..analyzer.semantic import SemanticAnalyzer
from ..analyzer.touch_targets import TouchTargetAnalyzer, summarize, targets_from_json
from ..utils.constants import DEFAULT_TARGET_RATIO
from ..utils.log import get_logger
from ..utils.serialize import to_dict


VISION_TYPES_BY_NAME = {t.value: info for t, info in VISION_TYPES.items()}


class RequestError(Exception):
    """A request that is missing data or is not JSON."""


def _json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        raise RequestError('No JSON data provided')
    return data


def _require(data: Dict[str, Any], key: str) -> Any:
    if data.get(key) is None:
        raise RequestError(f'{key} is required')
    return data[key]


def _string(data: Dict[str, Any], key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f'{key} must be a string')
    return value


def _number(data: Dict[str, Any], key: str) -> float:
    value = _require(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f'{key} must be a number')
    return float(value)


def create_app():
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.json.ensure_ascii = False
    # Keep the analyzers' key order in responses
    app.json.sort_keys = False

    logger = get_logger("web")

    contrast_checker = ContrastChecker()
    simulator = ColorBlindnessSimulator()
    readability_analyzer = ReadabilityAnalyzer()
    semantic_analyzer = SemanticAnalyzer()
    screen_reader_analyzer = ScreenReaderAnalyzer()
    touch_target_analyzer = TouchTargetAnalyzer()

    @app.errorhandler(RequestError)
    def bad_request(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(ValueError)
    def invalid_value(e):
        return jsonify({'error': f'Invalid parameter value: {str(e)}'}), 400

    @app.errorhandler(Exception)
    def analysis_failed(e):
        # Routing errors such as 404 and 405 keep their own response
        if isinstance(e, HTTPException):
            return e
        logger.exception(f"Analysis failed on {request.path}")
        return jsonify({'error': f'Analysis failed: {str(e)}'}), 500

    @app.route('/api/health')
    def health():
        """Report service status."""
        return jsonify({'status': 'ok', 'version': __version__})

    @app.route('/api/contrast', methods=['POST'])
    def contrast():
        """Check the contrast of a text and background color."""
        data = _json_body()
        report = contrast_checker.check(
            _string(data, 'textColor'),
            _string(data, 'bgColor'),
        )
        return jsonify(to_dict(report))

    @app.route('/api/contrast/suggest', methods=['POST'])
    def suggest_color():
        """Suggest an accessible gray for text on a background."""
        data = _json_body()
        text_color = _string(data, 'textColor')
        bg_color = _string(data, 'bgColor')
        target_ratio = DEFAULT_TARGET_RATIO
        if data.get('targetRatio') is not None:
            target_ratio = _number(data, 'targetRatio')

        suggested = contrast_checker.suggest(text_color, bg_color, target_ratio)
        return jsonify({
            'textColor': text_color,
            'bgColor': bg_color,
            'targetRatio': to_dict(target_ratio),
            'suggestedColor': suggested,
            'result': to_dict(contrast_checker.analyze(suggested, bg_color)),
        })

    @app.route('/api/readability', methods=['POST'])
    def readability():
        """Score typography settings."""
        data = _json_body()
        settings = TypographySettings(
            font_size=_number(data, 'fontSize'),
            line_height=_number(data, 'lineHeight'),
            letter_spacing=_number(data, 'letterSpacing'),
            font_weight=_number(data, 'fontWeight'),
            dyslexia_mode=bool(data.get('dyslexiaMode', False)),
        )
        return jsonify(to_dict(readability_analyzer.analyze(settings)))

    @app.route('/api/semantic', methods=['POST'])
    def semantic():
        """Analyze semantic HTML usage."""
        data = _json_body()
        return jsonify(to_dict(semantic_analyzer.analyze(_string(data, 'html'))))

    @app.route('/api/screen-reader', methods=['POST'])
    def screen_reader():
        """Preview how a screen reader announces a document."""
        data = _json_body()
        return jsonify(to_dict(screen_reader_analyzer.analyze(_string(data, 'html'))))

    @app.route('/api/touch-targets', methods=['POST'])
    def touch_targets():
        """Validate touch target sizes and spacing."""
        data = _json_body()
        targets = targets_from_json(_require(data, 'targets'))
        analysis = touch_target_analyzer.analyze(targets)
        result = to_dict(analysis)
        result['summary'] = summarize(analysis)
        return jsonify(result)

    @app.route('/api/color-blindness', methods=['POST'])
    def color_blindness():
        """Simulate colors under color vision deficiencies."""
        data = _json_body()

        # A color pair is re-checked for contrast under every vision type
        if data.get('textColor') is not None and data.get('bgColor') is not None:
            results = simulator.contrast_under_vision(
                _string(data, 'textColor'),
                _string(data, 'bgColor'),
            )
            return jsonify({'results': to_dict(results)})

        color = _string(data, 'color')
        if data.get('type') is not None:
            vision_type = _string(data, 'type')
            simulations = {vision_type: simulator.simulate(color, vision_type)}
        else:
            simulations = simulator.simulate_all(color)

        return jsonify({
            'color': color,
            'simulations': simulations,
            'filters': {v: css_filter(v) for v in simulations},
            'labels': {v: VISION_TYPES_BY_NAME[v]['label'] for v in simulations},
        })

    return app


def run_app(host: str = '127.0.0.1', port: int = 5000, debug: bool = False):
    """Run the Flask web application."""
    app = create_app()
    app.run(host=host, port=port, debug=debug)


if __name__ == '__main__':
    run_app()
