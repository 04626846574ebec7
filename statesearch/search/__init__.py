"""
Search Package - State-space search framework.

This package provides the abstract state contract, the search tree node
and pluggable search strategies. A new puzzle plugs in by subclassing
AbstractState.

Public API:
    - AbstractState: Abstract base for puzzle states
    - Node: Search tree node with parent link
    - Searcher: Abstract base for search strategies
    - DepthFirstSearch: Stack-based search, optional cycle check
    - Backtrack: Recursive search, optional depth limit and memory
    - SearchResult: Result of Searcher.solve()
    - SearchMetrics: Performance statistics
    - create_searcher(): Factory function
    - get_searcher_names(): List available searchers
    - get_searcher_info(): Get searcher metadata

Usage:
    from statesearch.search import Node, create_searcher
    from statesearch.puzzles import DiscFlipper

    start = Node.root(DiscFlipper("PPPPPPPPPPPPK"))
    searcher = create_searcher("depth_first", start, cycle_check=True)
    searcher.print_solution(searcher.search())
"""

# Core data structures
from .state import AbstractState
from .node import Node
from .solution import SearchResult, SearchMetrics

# Searcher framework
from .base import Searcher
from .factory import (
    create_searcher,
    get_searcher_names,
    get_searcher_info,
    get_default_searcher_name,
    register_searcher,
)

# Import strategies to register them
from . import strategies
from .strategies import DepthFirstSearch, Backtrack

__all__ = [
    # Data structures
    "AbstractState",
    "Node",
    "SearchResult",
    "SearchMetrics",
    # Searcher framework
    "Searcher",
    "DepthFirstSearch",
    "Backtrack",
    "create_searcher",
    "get_searcher_names",
    "get_searcher_info",
    "get_default_searcher_name",
    "register_searcher",
]
