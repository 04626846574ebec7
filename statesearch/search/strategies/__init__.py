"""
Strategies Package - Concrete search strategy implementations.

Import this module to register all built-in searchers.
"""

from .depth_first import DepthFirstSearch
from .backtrack import Backtrack

__all__ = [
    "DepthFirstSearch",
    "Backtrack",
]
