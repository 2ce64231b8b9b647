"""
Web front-end for the keypad calculator.

Provides a keypad page and a JSON API backed by one calculator session.
"""

from .server import app

__all__ = ["app"]
