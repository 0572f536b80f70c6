"""
Web module for the accessibility toolkit.

Provides a Flask-based JSON API over the toolkit's analyzers.
"""

from .app import create_app

__all__ = ["create_app"]
