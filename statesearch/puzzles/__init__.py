"""
Puzzles Package - Concrete states for the search framework.
"""

from .disc_flipper import DiscFlipper, DEFAULT_START, DEFAULT_GOAL

__all__ = [
    "DiscFlipper",
    "DEFAULT_START",
    "DEFAULT_GOAL",
]
