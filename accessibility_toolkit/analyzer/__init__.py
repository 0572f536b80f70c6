"""
Analyzer module for accessibility checks.

Contains components for contrast checking, color blindness simulation,
readability scoring, semantic HTML analysis, screen reader previews,
and touch target validation.
"""

from .contrast import (
    ContrastChecker,
    ContrastResult,
    ContrastReport,
    RGBColor,
    analyze_contrast,
    suggest_accessible_color,
)
from .color_blindness import ColorBlindnessSimulator, VisionType, VISION_TYPES
from .readability import ReadabilityAnalyzer, ReadabilityScore, analyze_readability
from .semantic import SemanticAnalyzer, SemanticAnalysis, analyze_semantic_html
from .screen_reader import (
    ScreenReaderAnalyzer,
    ScreenReaderAnalysis,
    analyze_for_screen_reader,
)
from .touch_targets import (
    TouchTargetAnalyzer,
    TouchTargetAnalysis,
    TargetGeometry,
    analyze_touch_targets,
)
from .report import score_band

__all__ = [
    # Contrast
    "ContrastChecker",
    "ContrastResult",
    "ContrastReport",
    "RGBColor",
    "analyze_contrast",
    "suggest_accessible_color",
    # Color blindness
    "ColorBlindnessSimulator",
    "VisionType",
    "VISION_TYPES",
    # Readability
    "ReadabilityAnalyzer",
    "ReadabilityScore",
    "analyze_readability",
    # Semantic HTML
    "SemanticAnalyzer",
    "SemanticAnalysis",
    "analyze_semantic_html",
    # Screen reader
    "ScreenReaderAnalyzer",
    "ScreenReaderAnalysis",
    "analyze_for_screen_reader",
    # Touch targets
    "TouchTargetAnalyzer",
    "TouchTargetAnalysis",
    "TargetGeometry",
    "analyze_touch_targets",
    # Reports
    "score_band",
]
