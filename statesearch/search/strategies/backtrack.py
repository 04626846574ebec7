"""
Backtracking Strategy - Recursive first-solution search.

Tries operators in ascending index order and recurses into every child
that could be built. When all operators of a node are exhausted without
reaching a goal the call fails and the caller moves on to its next
operator.
"""

import logging
from typing import Optional

from ..base import Searcher
from ..node import Node
from ..factory import register_searcher

logger = logging.getLogger(__name__)


@register_searcher
class Backtrack(Searcher):
    """
    Recursive backtracking with optional depth limit and memory.

    Algorithm, for a node N:
        1. Fail if a depth limit is set and N.depth >= limit
        2. Fail if memory is on and an ancestor of N has an equal state
        3. Return N if it is a goal
        4. For each operator index: build a child, apply the operator and
           recurse on success; return the first goal found
        5. Fail when every operator has been tried

    The memory check only suppresses exact repeats along the current path,
    which is enough to stop infinite recursion on cyclic state graphs.

    Recursion depth equals search depth and is bounded by Python's
    recursion limit. Searching a cyclic state graph needs memory or a
    depth limit; otherwise RecursionError is raised.

    Parameters:
        depth_limit: Maximum depth (0 = unlimited)
        memory: Enable the ancestor revisit check
    """
    name = "backtrack"
    description = "Backtracking - recursive, optional depth limit and memory"

    def __init__(self, start: Node, depth_limit: int = 0, memory: bool = False):
        """
        Initialize backtracking search.

        Args:
            start: Start node
            depth_limit: Nodes at this depth or deeper are cut off (0 = no limit)
            memory: Fail on nodes whose state repeats an ancestor's
        """
        super().__init__(start)
        self.depth_limit = max(0, depth_limit)
        self.memory = memory

    def search(self) -> Optional[Node]:
        """
        Run the search from the start node.

        Returns:
            Goal node, or None if every branch failed
        """
        self._reset_metrics()
        goal = self._backtrack(self.start)

        logger.info(
            f"[Backtrack] {'Solution found' if goal else 'No solution'}: "
            f"{self.metrics.nodes_expanded} expanded, "
            f"{self.metrics.pruned_branches} branches cut "
            f"(depth_limit={self.depth_limit}, memory={self.memory})"
        )
        return goal

    def _backtrack(self, node: Node) -> Optional[Node]:
        if self.depth_limit > 0 and node.depth >= self.depth_limit:
            self.metrics.pruned_branches += 1
            return None

        if self.memory and self._repeats_ancestor(node):
            self.metrics.pruned_branches += 1
            return None

        if node.is_goal():
            return node

        self.metrics.nodes_expanded += 1
        for i in range(node.operator_count()):
            child = Node.child_of(node)
            if not child.apply_operator(i):
                continue

            self.metrics.nodes_generated += 1
            goal = self._backtrack(child)
            if goal is not None:
                return goal

        return None

    @staticmethod
    def _repeats_ancestor(node: Node) -> bool:
        """Check if any ancestor of node holds an equal state."""
        ancestor = node.parent
        while ancestor is not None:
            if ancestor == node:
                return True
            ancestor = ancestor.parent
        return False
