#!/usr/bin/env python3
"""
Accessibility Toolkit - command-line accessibility checks.

Runs the toolkit's analyzers on colors, typography settings, HTML
documents and touch target geometry, and prints the results as text,
JSON or markdown.

Usage:
    python main.py contrast "#777777" "#ffffff"
    python main.py --format json semantic page.html

Features:
    - WCAG contrast ratios with accessible color suggestions
    - Color blindness simulation
    - Typography readability scoring
    - Semantic HTML and div soup detection
    - Screen reader transcript preview
    - Touch target size and spacing validation
"""

import argparse
import json
import logging
import sys
import os

# Add parent directory to path for imports when running as script
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from accessibility_toolkit import __version__
from accessibility_toolkit.analyzer.color_blindness import (
    ColorBlindnessSimulator,
    VisionType,
    VISION_TYPES,
    css_filter,
)
from accessibility_toolkit.analyzer.contrast import ContrastChecker, format_ratio
from accessibility_toolkit.analyzer.readability import ReadabilityAnalyzer, TypographySettings
from accessibility_toolkit.analyzer.report import (
    contrast_report,
    readability_report,
    score_band,
    screen_reader_report,
    semantic_report,
    simulation_report,
    touch_target_report,
)
from accessibility_toolkit.analyzer.screen_reader import ScreenReaderAnalyzer
from accessibility_toolkit.analyzer.semantic import SemanticAnalyzer
from accessibility_toolkit.analyzer.touch_targets import (
    TouchTargetAnalyzer,
    summarize,
    targets_from_json,
)
from accessibility_toolkit.utils.log import (
    setup_logger,
    print_status,
    print_success,
    print_error,
    print_warning,
    print_info
)
from accessibility_toolkit.utils.serialize import format_number, to_dict


SCORE_STYLES = {
    'excellent': 'bold green',
    'good': 'bold blue',
    'fair': 'bold yellow',
    'poor': 'bold red',
}


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Args:
        argv: Argument list, defaults to sys.argv

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        prog='accessibility-toolkit',
        description='Check colors, typography and markup for accessibility',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    %(prog)s contrast "#777777" "#ffffff"
    %(prog)s readability --font-size 100 --line-height 1.5 --letter-spacing 0 --font-weight 400
    %(prog)s --format markdown semantic page.html
    %(prog)s --format json touch-targets targets.json
    cat page.html | %(prog)s screen-reader -
        """
    )

    parser.add_argument(
        '--format', '-f',
        choices=['text', 'json', 'markdown'],
        default='text',
        help='Output format (default: text)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only print results: no header, passed checks, strengths or recommendations'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Contrast
    contrast = subparsers.add_parser(
        'contrast',
        help='Check the contrast ratio of a text and background color'
    )
    contrast.add_argument('text_color', help='Text color in hex (e.g. "#333333")')
    contrast.add_argument('bg_color', help='Background color in hex (e.g. "#ffffff")')
    contrast.add_argument(
        '--target-ratio',
        type=float,
        default=None,
        help='Always suggest a gray reaching this ratio (default: suggest only when AA fails)'
    )

    # Readability
    readability = subparsers.add_parser(
        'readability',
        help='Score typography settings for readability'
    )
    readability.add_argument(
        '--font-size',
        type=float,
        required=True,
        help='Font size as a percentage of 16px (e.g. 100)'
    )
    readability.add_argument(
        '--line-height',
        type=float,
        required=True,
        help='Unitless line height (e.g. 1.5)'
    )
    readability.add_argument(
        '--letter-spacing',
        type=float,
        required=True,
        help='Letter spacing in px (e.g. 0)'
    )
    readability.add_argument(
        '--font-weight',
        type=float,
        required=True,
        help='Font weight (e.g. 400)'
    )
    readability.add_argument(
        '--dyslexia',
        action='store_true',
        help='A dyslexia-friendly font is in use'
    )

    # HTML analyses
    semantic = subparsers.add_parser(
        'semantic',
        help='Analyze semantic HTML usage and div soup'
    )
    semantic.add_argument('file', help='HTML file, or - for stdin')

    screen_reader = subparsers.add_parser(
        'screen-reader',
        help='Preview how a screen reader announces a page'
    )
    screen_reader.add_argument('file', help='HTML file, or - for stdin')

    # Touch targets
    touch = subparsers.add_parser(
        'touch-targets',
        help='Validate touch target sizes and spacing'
    )
    touch.add_argument(
        'file',
        help='JSON file with a list of {id, element, width, height, x, y}, or - for stdin'
    )

    # Color blindness
    simulate = subparsers.add_parser(
        'simulate',
        help='Simulate a color under color vision deficiencies'
    )
    simulate.add_argument('color', help='Color in hex')
    simulate.add_argument(
        '--type', '-t',
        dest='vision_type',
        choices=[v.value for v in VisionType],
        default=None,
        help='Vision type to simulate (default: all)'
    )

    return parser.parse_args(argv)


def read_input(path: str) -> str:
    """
    Read an input document.

    Args:
        path: File path, or "-" for stdin

    Returns:
        Document contents
    """
    if path == '-':
        return sys.stdin.read()

    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def print_score(label: str, score: int) -> None:
    """Print a score colored by its band."""
    print_status(f"{label}: {score}/100", SCORE_STYLES[score_band(score)])


def print_recommendations(recommendations, quiet: bool = False) -> None:
    """Print recommendations as an indented list."""
    if recommendations and not quiet:
        print("")
        print("  Recommendations:")
        for recommendation in recommendations:
            print(f"    - {recommendation}")


def print_contrast(report, quiet: bool = False) -> None:
    """Print a contrast report."""
    result = report.result
    print(f"  Text:        {report.text_color}")
    print(f"  Background:  {report.background_color}")
    print(f"  Ratio:       {format_ratio(result.ratio)}")
    print(f"  Rating:      {result.rating_text}")
    print("")
    for label, passed in [
        ("AA normal text", result.pass_aa),
        ("AA large text", result.pass_aa_large),
        ("AAA normal text", result.pass_aaa),
        ("AAA large text", result.pass_aaa_large),
    ]:
        if passed:
            if not quiet:
                print_success(label)
        else:
            print_error(label)

    if report.suggested_color:
        print_info(f"Suggested text color: {report.suggested_color}")


def print_readability(score, quiet: bool = False) -> None:
    """Print a readability score."""
    print_score(f"Readability ({score.rating.value})", score.overall)
    print(f"  Font size:       {score.font_size.message}")
    print(f"  Line height:     {score.line_height.message}")
    print(f"  Letter spacing:  {score.letter_spacing.message}")
    print(f"  Font weight:     {score.font_weight.message}")

    if score.strengths and not quiet:
        print("")
        print("  Strengths:")
        for strength in score.strengths:
            print(f"    + {strength}")

    print_recommendations(score.recommendations, quiet)


def print_semantic(analysis, quiet: bool = False) -> None:
    """Print a semantic HTML analysis."""
    print_score("Semantic score", analysis.semantic_score)
    print(f"  Div to semantic ratio: {format_number(analysis.div_to_semantic_ratio)}")
    print(f"  Elements found:        {len(analysis.elements)}")
    print(f"  Suggestions:           {len(analysis.suggestions)}")

    for issue in analysis.div_soup_issues:
        message = f"{issue.element}: {issue.issue}"
        if issue.severity.value == 'error':
            print_error(message)
        elif issue.severity.value == 'warning':
            print_warning(message)
        elif not quiet:
            print_info(message)

    print_recommendations(analysis.recommendations, quiet)


def print_screen_reader(analysis, quiet: bool = False) -> None:
    """Print a screen reader analysis."""
    print_score("Screen reader score", analysis.score)
    print(f"  Headings:   {len(analysis.headings)}")
    print(f"  Landmarks:  {len(analysis.landmarks)}")
    print(f"  Images:     {len(analysis.images)}")

    for issue in analysis.aria_issues:
        message = f"{issue.element}: {issue.issue}"
        if issue.level.value == 'error':
            print_error(message)
        elif issue.level.value == 'warning':
            print_warning(message)
        elif not quiet:
            print_info(message)

    if not quiet:
        print("")
        print(analysis.screen_reader_text.rstrip('\n'))
    print_recommendations(analysis.recommendations, quiet)


def print_touch_targets(analysis, quiet: bool = False) -> None:
    """Print a touch target analysis."""
    summary = analysis.summary
    print_score("Touch target score", analysis.score)
    print(f"  Targets:   {summary.total}")
    print(f"  Passed:    {summary.passed}")
    print(f"  Warnings:  {summary.warning}")
    print(f"  Failed:    {summary.fail}")

    for target in analysis.targets:
        message = f"{target.element}: {target.message}"
        if target.status.value == 'fail':
            print_error(message)
        elif target.status.value == 'warning':
            print_warning(message)

    for pair in analysis.spacing_issues:
        message = f"{pair.target1} / {pair.target2}: {pair.message}"
        if pair.status.value == 'fail':
            print_error(message)
        elif pair.status.value == 'warning':
            print_warning(message)

    print_recommendations(analysis.recommendations, quiet)


def print_simulation(color: str, simulations) -> None:
    """Print simulated colors."""
    print(f"  Color: {color}")
    for vision_type, simulated in simulations.items():
        label = VISION_TYPES[VisionType(vision_type)]['label']
        print(f"  {label:<16} {simulated}")


def describe(args: argparse.Namespace) -> str:
    """Describe the requested analysis for the text output header."""
    if args.command == 'contrast':
        return f"Checking contrast of {args.text_color} on {args.bg_color}"
    if args.command == 'readability':
        return "Scoring typography readability"
    if args.command == 'simulate':
        return f"Simulating {args.color} under color vision deficiencies"

    source = 'stdin' if args.file == '-' else args.file
    return f"Running {args.command} analysis on {source}"


def execute(args: argparse.Namespace):
    """
    Run the requested analysis.

    Args:
        args: Parsed arguments

    Returns:
        Tuple of (JSON-safe data, markdown report, text printer taking
        the quiet flag)
    """
    if args.command == 'contrast':
        checker = ContrastChecker()
        report = checker.check(args.text_color, args.bg_color)
        if args.target_ratio is not None:
            report.suggested_color = checker.suggest(
                args.text_color, args.bg_color, args.target_ratio
            )
        return (
            to_dict(report),
            contrast_report(report),
            lambda quiet: print_contrast(report, quiet),
        )

    if args.command == 'readability':
        settings = TypographySettings(
            font_size=args.font_size,
            line_height=args.line_height,
            letter_spacing=args.letter_spacing,
            font_weight=args.font_weight,
            dyslexia_mode=args.dyslexia,
        )
        score = ReadabilityAnalyzer().analyze(settings)
        return (
            to_dict(score),
            readability_report(score),
            lambda quiet: print_readability(score, quiet),
        )

    if args.command == 'semantic':
        analysis = SemanticAnalyzer().analyze(read_input(args.file))
        return (
            to_dict(analysis),
            semantic_report(analysis),
            lambda quiet: print_semantic(analysis, quiet),
        )

    if args.command == 'screen-reader':
        analysis = ScreenReaderAnalyzer().analyze(read_input(args.file))
        return (
            to_dict(analysis),
            screen_reader_report(analysis),
            lambda quiet: print_screen_reader(analysis, quiet),
        )

    if args.command == 'touch-targets':
        targets = targets_from_json(json.loads(read_input(args.file)))
        analysis = TouchTargetAnalyzer().analyze(targets)
        data = to_dict(analysis)
        data['summary'] = summarize(analysis)
        return (
            data,
            touch_target_report(analysis),
            lambda quiet: print_touch_targets(analysis, quiet),
        )

    if args.command == 'simulate':
        simulator = ColorBlindnessSimulator()
        if args.vision_type:
            simulations = {args.vision_type: simulator.simulate(args.color, args.vision_type)}
        else:
            simulations = simulator.simulate_all(args.color)
        data = {
            'color': args.color,
            'simulations': simulations,
            'filters': {v: css_filter(v) for v in simulations},
        }
        return (
            data,
            simulation_report(args.color, simulations),
            lambda quiet: print_simulation(args.color, simulations),
        )

    raise ValueError(f"Unknown command: {args.command}")


def main(argv=None) -> int:
    """
    Main entry point for the accessibility toolkit.

    Args:
        argv: Argument list, defaults to sys.argv

    Returns:
        Exit code (0 for success, 1 for error)
    """
    # Parse arguments
    args = parse_arguments(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else (logging.WARNING if args.quiet else logging.INFO)
    setup_logger(level=log_level)

    try:
        data, markdown, print_text = execute(args)

        if args.format == 'json':
            print(json.dumps(data, indent=2, ensure_ascii=False))
        elif args.format == 'markdown':
            print(markdown)
        else:
            if not args.quiet:
                print_info(describe(args))
            print_text(args.quiet)

        return 0

    except KeyboardInterrupt:
        print_error("\nInterrupted by user")
        return 1
    except ValueError as e:
        print_error(f"Invalid input: {e}")
        return 1
    except Exception as e:
        print_error(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


def run() -> None:
    """Entry point wrapper for running as module."""
    sys.exit(main())


if __name__ == '__main__':
    run()
