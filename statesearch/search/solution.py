"""
Solution Module - Result of a search run and its performance metrics.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .node import Node
from .state import AbstractState


@dataclass
class SearchMetrics:
    """
    Performance metrics for a search run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        nodes_expanded: Number of nodes whose operators were tried
        nodes_generated: Number of successful children created
        pruned_branches: Children or calls cut off (duplicates, depth limit, memory)
        strategy_name: Name of strategy that ran the search
    """
    computation_time_ms: float = 0.0
    nodes_expanded: int = 0
    nodes_generated: int = 0
    pruned_branches: int = 0
    strategy_name: str = ""


@dataclass
class SearchResult:
    """
    Result of a search run.

    Attributes:
        goal: Goal node found, or None when no solution exists
        path: Nodes from the start node to the goal (empty without a goal)
        metrics: Performance statistics
    """
    goal: Optional[Node] = None
    path: List[Node] = field(default_factory=list)
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def found(self) -> bool:
        """Check if a goal node was found."""
        return self.goal is not None

    @property
    def step_count(self) -> int:
        """Number of operator applications on the solution path."""
        return max(0, len(self.path) - 1)

    @property
    def final_state(self) -> Optional[AbstractState]:
        """State of the goal node, if any."""
        return self.goal.state if self.goal is not None else None
