"""
Accessibility Toolkit - analysis engine for web accessibility checks.

This package provides functionality to check color contrast, simulate color
blindness, score typography readability, analyze HTML semantics, preview how
a screen reader walks a page, and validate touch target geometry.
"""

__version__ = "1.0.0"
__author__ = "Accessibility Toolkit Team"
