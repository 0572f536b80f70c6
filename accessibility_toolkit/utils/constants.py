"""
Shared constants for the accessibility toolkit.

Contains the fixed thresholds used across the analyzer modules.
"""

# WCAG 2.x contrast thresholds
WCAG_AAA_RATIO = 7.0
WCAG_AA_RATIO = 4.5
WCAG_AA_LARGE_RATIO = 3.0

# Accessible color suggestion search
DEFAULT_TARGET_RATIO = 4.5
SUGGESTION_ITERATIONS = 20
SUGGESTION_TOLERANCE = 0.1

# Browser default font size, used to convert percentages to pixels
BASE_FONT_SIZE_PX = 16

# Multiplier applied to the readability score in dyslexia mode
DYSLEXIA_BONUS = 1.05

# WCAG Success Criterion 2.5.5 - Target Size (Level AAA)
# 44x44 CSS pixels (iOS) or 48x48dp (Android Material Design)
MIN_TARGET_SIZE = 44
RECOMMENDED_SIZE = 48
MIN_SPACING = 8

# Target pairs further apart than this are not reported
SPACING_REPORT_DISTANCE = 50

# Score band cut-offs shared by the reports and the CLI
SCORE_EXCELLENT = 90
SCORE_GOOD = 70
SCORE_FAIR = 50
