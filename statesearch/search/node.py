"""
Node Module - Search tree node wrapping a state with depth and parent link.
"""

from typing import List, Optional

from .state import AbstractState


class Node:
    """
    Node of the implicit search tree.

    Owns its state exclusively; children always receive a clone of the
    parent's state, so no two nodes alias the same state object. The
    parent link is a plain back-reference; following it from any node
    reaches the root, whose parent is None.

    Attributes:
        state: Wrapped state (owned by this node)
        depth: Distance from the root (root = 0)
        parent: Parent node, or None for the root
    """

    __slots__ = ("_state", "_depth", "_parent")

    def __init__(self, state: AbstractState,
                 parent: Optional["Node"] = None, depth: int = 0):
        """
        Initialize a node.

        Callers normally use root() or child_of() instead.

        Args:
            state: State owned by this node
            parent: Parent node (None for the root)
            depth: Depth in the search tree
        """
        self._state = state
        self._parent = parent
        self._depth = depth

    @classmethod
    def root(cls, state: AbstractState) -> "Node":
        """
        Create a start node.

        The caller is responsible for passing the initial state.

        Args:
            state: Initial state

        Returns:
            Node at depth 0 with no parent
        """
        return cls(state)

    @classmethod
    def child_of(cls, parent: "Node") -> "Node":
        """
        Create an incomplete child node from a parent.

        The child holds a clone of the parent's state. It only becomes a
        real member of the search tree once apply_operator() succeeded on it.

        Args:
            parent: Node to derive from

        Returns:
            Node at parent.depth + 1 linked to parent
        """
        return cls(parent._state.clone(), parent=parent, depth=parent._depth + 1)

    @property
    def state(self) -> AbstractState:
        """Wrapped state."""
        return self._state

    @property
    def depth(self) -> int:
        """Depth in the search tree."""
        return self._depth

    @property
    def parent(self) -> Optional["Node"]:
        """Parent node, None at the root."""
        return self._parent

    def is_goal(self) -> bool:
        """Check if the wrapped state is a goal state."""
        return self._state.is_goal_state()

    def operator_count(self) -> int:
        """Number of operators of the wrapped state."""
        return self._state.operator_count()

    def apply_operator(self, index: int) -> bool:
        """Apply operator `index` to the wrapped state."""
        return self._state.apply_operator(index)

    def expand(self) -> List["Node"]:
        """
        Apply every applicable operator and collect the resulting children.

        For each operator index in ascending order a fresh child is built
        and the operator is tried on it; successful children are returned
        in index order. One clone is made per operator, whether or not it
        applies.

        Returns:
            List of child nodes (at most operator_count() entries)
        """
        children = []
        for i in range(self.operator_count()):
            child = Node.child_of(self)
            if child.apply_operator(i):
                children.append(child)
        return children

    def path(self) -> List["Node"]:
        """
        Get the nodes from the root down to this node.

        Returns:
            Root-first list ending with this node
        """
        nodes = []
        current: Optional[Node] = self
        while current is not None:
            nodes.append(current)
            current = current._parent
        nodes.reverse()
        return nodes

    def __eq__(self, other):
        """Nodes are equal when their states are equal."""
        if not isinstance(other, Node):
            return False
        return self._state == other._state

    def __hash__(self):
        """Hash of the wrapped state."""
        return hash(self._state)

    def __str__(self):
        return "-> " + str(self._state)

    def __repr__(self):
        return f"Node(depth={self._depth}, state={self._state!r})"
