"""
statesearch - Generic state-space search with a disc flipper puzzle.
"""

__version__ = "0.1.0"
