"""
Test script for the search framework

Uses small hand-made state graphs to test:
1. State contract enforcement
2. Node expansion and path reconstruction
3. Depth-first search (cycle-checked and fast)
4. Backtracking (depth limit and memory)
5. Searcher registry

Usage:
    python test_search.py
"""

import io
import sys
from pathlib import Path
from typing import Dict, List

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from statesearch.search import (
    AbstractState,
    Node,
    Searcher,
    DepthFirstSearch,
    Backtrack,
    create_searcher,
    get_searcher_names,
    get_searcher_info,
    get_default_searcher_name,
)


class GraphState(AbstractState):
    """Position on an explicit directed graph; operator i follows edge i."""

    def __init__(self, graph: Dict[str, List[str]], position: str, goal: str):
        self.graph = graph
        self.position = position
        self.goal = goal

    def is_valid_state(self) -> bool:
        return self.position in self.graph

    def is_goal_state(self) -> bool:
        return self.position == self.goal

    def operator_count(self) -> int:
        return max(len(edges) for edges in self.graph.values())

    def apply_operator(self, index: int) -> bool:
        edges = self.graph[self.position]
        if not 0 <= index < len(edges):
            return False
        self.position = edges[index]
        return True

    def clone(self) -> "GraphState":
        return GraphState(self.graph, self.position, self.goal)

    def __eq__(self, other):
        return isinstance(other, GraphState) and self.position == other.position

    def __hash__(self):
        return hash(self.position)

    def __str__(self):
        return self.position


# Two routes to G; the stack explores the last child (C) first
DIAMOND = {"A": ["B", "C"], "B": ["G"], "C": ["G"], "G": []}
# A <-> B cycle with an exit to C
CYCLE = {"A": ["B"], "B": ["A", "C"], "C": []}
CHAIN = {"A": ["B"], "B": ["C"], "C": ["D"], "D": []}


def root(graph: Dict[str, List[str]], goal: str, start: str = "A") -> Node:
    return Node.root(GraphState(graph, start, goal))


def positions(nodes: List[Node]) -> List[str]:
    return [node.state.position for node in nodes]


def test_state_contract():
    """Test that equality, hashing and clone are mandatory."""
    print("\n" + "="*60)
    print("TEST: State Contract")
    print("="*60)

    class NoEquality(AbstractState):
        def is_valid_state(self):
            return True

        def is_goal_state(self):
            return False

        def operator_count(self):
            return 0

        def apply_operator(self, index):
            return False

        def clone(self):
            return NoEquality()

    with pytest.raises(TypeError):
        NoEquality()

    state = GraphState(DIAMOND, "A", "G")
    before = state.clone()
    assert state.apply_operator(5) is False
    assert state == before
    print("  Failed operator leaves state unchanged")

    print("  [PASS] State contract tests")


def test_node_expand():
    """Test child construction, expansion order and idempotence."""
    print("\n" + "="*60)
    print("TEST: Node Expansion")
    print("="*60)

    start = root(DIAMOND, "G")
    assert start.depth == 0
    assert start.parent is None

    children = start.expand()
    print(f"  Children of A: {positions(children)}")
    assert positions(children) == ["B", "C"]
    assert all(child.depth == 1 for child in children)
    assert all(child.parent is start for child in children)
    assert len(children) <= start.operator_count()
    assert all(child.state is not start.state for child in children)
    assert start.state.position == "A"

    # B has one edge, so operator 1 fails and yields nothing
    grandchildren = children[0].expand()
    assert positions(grandchildren) == ["G"]
    assert grandchildren[0].depth == 2

    again = start.expand()
    assert again == children
    assert positions(again) == positions(children)

    child = Node.child_of(start)
    assert child.depth == 1
    assert child == start  # Incomplete child still holds the parent's state
    assert child.state is not start.state

    print("  [PASS] Node expansion tests")


def test_node_path_and_printing():
    """Test parent-chain reconstruction and solution printing."""
    print("\n" + "="*60)
    print("TEST: Solution Reconstruction")
    print("="*60)

    start = root(CHAIN, "D")
    node = start
    for _ in range(3):
        node = node.expand()[0]

    steps = 0
    walker = node
    while walker.parent is not None:
        walker = walker.parent
        steps += 1
    assert steps == node.depth == 3
    assert walker is start

    path = Searcher.solution_path(node)
    assert positions(path) == ["A", "B", "C", "D"]
    assert path == node.path()
    assert Searcher.solution_path(None) == []

    searcher = DepthFirstSearch(start)
    out = io.StringIO()
    searcher.print_solution(node, stream=out)
    lines = out.getvalue().splitlines()
    print(f"  Printed: {lines}")
    assert lines == ["-> A", "-> B", "-> C", "-> D"]

    out = io.StringIO()
    searcher.print_solution(None, stream=out)
    assert out.getvalue().strip() == "No solution"

    print("  [PASS] Solution reconstruction tests")


def test_depth_first_order():
    """Test that the most recently pushed child is explored first."""
    print("\n" + "="*60)
    print("TEST: Depth-First Order")
    print("="*60)

    for cycle_check in (True, False):
        searcher = DepthFirstSearch(root(DIAMOND, "G"), cycle_check=cycle_check)
        goal = searcher.search()
        print(f"  cycle_check={cycle_check}: {positions(goal.path())}")
        assert positions(goal.path()) == ["A", "C", "G"]

    print("  [PASS] Depth-first order tests")


def test_depth_first_cycle_check():
    """Test termination and duplicate suppression on a cyclic graph."""
    print("\n" + "="*60)
    print("TEST: Depth-First Cycle Check")
    print("="*60)

    searcher = DepthFirstSearch(root(CYCLE, "Z"), cycle_check=True)
    assert searcher.search() is None
    print(f"  Closed: {positions(searcher.closed)}")
    assert len(set(searcher.closed)) == len(searcher.closed)
    assert sorted(positions(searcher.closed)) == ["A", "B", "C"]
    assert searcher.metrics.nodes_expanded == 3
    assert searcher.metrics.pruned_branches == 1
    assert searcher.open == []

    # Re-running gives the same answer
    found = DepthFirstSearch(root(CYCLE, "C"))
    first = found.search()
    second = found.search()
    assert positions(first.path()) == positions(second.path()) == ["A", "B", "C"]

    print("  [PASS] Depth-first cycle check tests")


def test_depth_first_start_is_goal():
    """Test that a goal start node is returned directly."""
    start = root(DIAMOND, "A")
    assert DepthFirstSearch(start).search() is start


def test_backtrack_leftmost_first():
    """Test that backtracking returns the first solution in operator order."""
    print("\n" + "="*60)
    print("TEST: Backtracking")
    print("="*60)

    goal = Backtrack(root(DIAMOND, "G")).search()
    print(f"  Plain: {positions(goal.path())}")
    assert positions(goal.path()) == ["A", "B", "G"]

    start = root(DIAMOND, "A")
    assert Backtrack(start).search() is start

    assert Backtrack(root(DIAMOND, "Z")).search() is None

    print("  [PASS] Backtracking tests")


def test_backtrack_depth_limit():
    """Test that nodes at or beyond the limit are never returned."""
    assert Backtrack(root(CHAIN, "D"), depth_limit=3).search() is None

    goal = Backtrack(root(CHAIN, "D"), depth_limit=4).search()
    assert goal is not None
    assert goal.depth == 3 < 4

    # Depth limit alone stops the A <-> B cycle
    searcher = Backtrack(root(CYCLE, "C"), depth_limit=3)
    goal = searcher.search()
    assert positions(goal.path()) == ["A", "B", "C"]
    assert searcher.metrics.pruned_branches > 0


def test_backtrack_memory():
    """Test that the ancestor check stops infinite recursion."""
    searcher = Backtrack(root(CYCLE, "C"), memory=True)
    goal = searcher.search()
    assert positions(goal.path()) == ["A", "B", "C"]
    assert searcher.metrics.pruned_branches == 1

    assert Backtrack(root(CYCLE, "Z"), memory=True).search() is None


def test_solve_result():
    """Test SearchResult and metrics produced by solve()."""
    result = DepthFirstSearch(root(CHAIN, "D")).solve()
    assert result.found
    assert result.step_count == 3
    assert positions(result.path) == ["A", "B", "C", "D"]
    assert result.final_state.position == "D"
    assert result.metrics.strategy_name == "depth_first"
    assert result.metrics.computation_time_ms >= 0.0

    result = Backtrack(root(CHAIN, "Z")).solve()
    assert not result.found
    assert result.path == []
    assert result.final_state is None
    assert result.step_count == 0


def test_registry():
    """Test searcher registry and factory."""
    print("\n" + "="*60)
    print("TEST: Searcher Registry")
    print("="*60)

    names = get_searcher_names()
    print(f"  Registered: {names}")
    assert "depth_first" in names
    assert "backtrack" in names
    assert get_default_searcher_name() == "depth_first"
    assert {info["name"] for info in get_searcher_info()} >= {"depth_first", "backtrack"}

    searcher = create_searcher("backtrack", root(CHAIN, "D"), depth_limit=2, memory=True)
    assert isinstance(searcher, Backtrack)
    assert searcher.depth_limit == 2
    assert searcher.memory is True

    searcher = create_searcher("depth_first", root(CHAIN, "D"), cycle_check=False)
    assert isinstance(searcher, DepthFirstSearch)
    assert searcher.cycle_check is False

    with pytest.raises(ValueError, match="Unknown searcher"):
        create_searcher("a_star", root(CHAIN, "D"))

    print("  [PASS] Searcher registry tests")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SEARCH FRAMEWORK TESTS")
    print("#"*60)

    tests = [
        ("State Contract", test_state_contract),
        ("Node Expansion", test_node_expand),
        ("Solution Reconstruction", test_node_path_and_printing),
        ("Depth-First Order", test_depth_first_order),
        ("Depth-First Cycle Check", test_depth_first_cycle_check),
        ("Depth-First Start Goal", test_depth_first_start_is_goal),
        ("Backtracking", test_backtrack_leftmost_first),
        ("Backtracking Depth Limit", test_backtrack_depth_limit),
        ("Backtracking Memory", test_backtrack_memory),
        ("Solve Result", test_solve_result),
        ("Registry", test_registry),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    for name, passed in results:
        print(f"  {name}: [{'PASS' if passed else 'FAIL'}]")

    print()
    if all(passed for _, passed in results):
        print("All tests PASSED!")
        return 0
    print("Some tests FAILED!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
