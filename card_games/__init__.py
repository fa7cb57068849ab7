"""
Card Games - a turn-based multi-variant card game engine

This package contains the shared card model, the Crazy Eights, War and
Go Fish variants, the user registry and a console front-end.
"""

__version__ = "0.1.0"
__author__ = "Card Games Development Team"
