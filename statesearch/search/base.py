"""
Base Searcher Module - Abstract base class for search strategies.
"""

import sys
import time
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from .node import Node
from .solution import SearchMetrics, SearchResult


class Searcher(ABC):
    """
    Abstract base class for all search strategies.

    Every searcher starts from a single start node. Subclasses implement
    search() and define name and description class attributes; they
    update self.metrics while searching.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for CLI listing
        metrics: Statistics of the most recent search
    """
    name: str = "base"
    description: str = "Base searcher"

    def __init__(self, start: Node):
        """
        Initialize searcher.

        Args:
            start: Node the search starts from
        """
        self._start = start
        self.metrics = SearchMetrics(strategy_name=self.name)

    @property
    def start(self) -> Node:
        """Start node of the search."""
        return self._start

    @abstractmethod
    def search(self) -> Optional[Node]:
        """
        Search for a goal node reachable from the start node.

        The solution is returned as a goal node; following its parent
        links yields the path in reverse order.

        Returns:
            Goal node, or None if no solution was found
        """
        pass

    def solve(self) -> SearchResult:
        """
        Run search() and collect the path and timing.

        Returns:
            SearchResult with goal, root-to-goal path and metrics
        """
        start_time = time.perf_counter()
        goal = self.search()
        self.metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000

        return SearchResult(
            goal=goal,
            path=self.solution_path(goal),
            metrics=self.metrics,
        )

    def _reset_metrics(self) -> None:
        """Start a fresh metrics record for a new search run."""
        self.metrics = SearchMetrics(strategy_name=self.name)

    @staticmethod
    def solution_path(goal: Optional[Node]) -> List[Node]:
        """
        Reconstruct the solution from a goal node.

        Walks the parent links up to the start node, pushing each node on a
        stack, then pops the stack to get start-to-goal order.

        Args:
            goal: Goal node or None

        Returns:
            Nodes from the start node to the goal (empty for None)
        """
        stack: List[Node] = []
        current = goal
        while current is not None:
            stack.append(current)
            current = current.parent

        path = []
        while stack:
            path.append(stack.pop())
        return path

    def print_solution(self, goal: Optional[Node], stream: Optional[TextIO] = None) -> None:
        """
        Print the solution represented by a goal node.

        Writes "No solution" for None, otherwise one line per node from the
        start node to the goal.

        Args:
            goal: Goal node or None
            stream: Output stream (default stdout)
        """
        out = stream if stream is not None else sys.stdout

        if goal is None:
            print("No solution", file=out)
            return

        for node in self.solution_path(goal):
            print(node, file=out)
