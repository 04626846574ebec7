"""
Depth-First Search Strategy - Iterative stack-based graph search.

Open nodes are kept on a stack, so the deepest open node is always on top
and never has to be searched for. With cycle checking enabled, expanded
nodes are moved to the closed list and a child is only opened when no
equal node is open or closed.
"""

import logging
from typing import List, Optional, Set

from ..base import Searcher
from ..node import Node
from ..factory import register_searcher

logger = logging.getLogger(__name__)


@register_searcher
class DepthFirstSearch(Searcher):
    """
    Depth-first search with optional cycle detection.

    Algorithm:
        1. Push the start node onto the open stack
        2. Pop node C and expand it
        3. For each child D in operator order:
           - return D if it is a goal
           - push D unless an equal node is open or closed (cycle check)
        4. Move C to the closed list (cycle check only)
        5. Repeat until the open stack is empty

    Children of one expansion are pushed in operator order, so the child
    produced by the highest operator index is explored first.

    Parameters:
        cycle_check: Skip duplicate states (default True). Without it the
            search is faster but only terminates on acyclic state graphs.

    Attributes:
        open: Stack of discovered, unexpanded nodes (top = last element)
        closed: Expanded nodes in expansion order (cycle check only)
    """
    name = "depth_first"
    description = "Depth-first search - stack based, optional cycle check"

    def __init__(self, start: Node, cycle_check: bool = True):
        """
        Initialize depth-first search.

        Args:
            start: Start node
            cycle_check: Enable open/closed duplicate detection
        """
        super().__init__(start)
        self.cycle_check = cycle_check
        self.open: List[Node] = []
        self.closed: List[Node] = []
        self._open_members: Set[Node] = set()
        self._closed_members: Set[Node] = set()

    def search(self) -> Optional[Node]:
        """
        Run the search from the start node.

        Returns:
            Goal node, or None once the open stack is exhausted
        """
        self._reset_metrics()
        self.open = [self.start]
        self.closed = []
        self._open_members = {self.start}
        self._closed_members = set()

        if self.start.is_goal():
            logger.debug(f"[DepthFirst] Start node is a goal: {self.start.state}")
            return self.start

        if self.cycle_check:
            goal = self._search_checked()
        else:
            goal = self._search_fast()

        logger.info(
            f"[DepthFirst] {'Solution found' if goal else 'No solution'}: "
            f"{self.metrics.nodes_expanded} expanded, "
            f"{self.metrics.nodes_generated} generated, "
            f"{self.metrics.pruned_branches} duplicates skipped"
        )
        return goal

    def _search_checked(self) -> Optional[Node]:
        """Search with open/closed duplicate detection."""
        while self.open:
            current = self._pop()
            children = current.expand()
            self.metrics.nodes_expanded += 1
            self.metrics.nodes_generated += len(children)

            for child in children:
                if child.is_goal():
                    return child
                if child in self._closed_members or child in self._open_members:
                    self.metrics.pruned_branches += 1
                    continue
                self._push(child)

            self.closed.append(current)
            self._closed_members.add(current)

        return None

    def _search_fast(self) -> Optional[Node]:
        """Search without duplicate detection; acyclic graphs only."""
        while self.open:
            current = self.open.pop()
            children = current.expand()
            self.metrics.nodes_expanded += 1
            self.metrics.nodes_generated += len(children)

            for child in children:
                if child.is_goal():
                    return child
                self.open.append(child)

        return None

    def _push(self, node: Node) -> None:
        self.open.append(node)
        self._open_members.add(node)

    def _pop(self) -> Node:
        node = self.open.pop()
        self._open_members.discard(node)
        return node
