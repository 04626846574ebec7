"""
State Module - Abstract contract every searchable puzzle state implements.
"""

from abc import ABC, abstractmethod


class AbstractState(ABC):
    """
    Abstract base class for a single configuration of a problem domain.

    A state exposes a validity check, a goal test and a fixed number of
    indexed operators. Operators mutate the state in place; the search
    framework always applies them to a fresh clone, so a state never has
    to undo its own work beyond the failure case described below.

    Subclasses must implement every abstract member. Equality and hashing
    are part of the contract: cycle-checked depth-first search and
    backtracking with memory compare states through them, and there is no
    fallback that would silently treat every state as distinct.
    """

    @abstractmethod
    def is_valid_state(self) -> bool:
        """
        Check whether the domain invariant holds.

        Returns:
            True if the internal configuration is a legal state
        """
        pass

    @abstractmethod
    def is_goal_state(self) -> bool:
        """
        Check whether this state is an accepted solution.

        Returns:
            True if the goal predicate holds
        """
        pass

    @abstractmethod
    def operator_count(self) -> int:
        """
        Get the number of indexed operators.

        Returns:
            Operators are addressed as 0..operator_count()-1
        """
        pass

    @abstractmethod
    def apply_operator(self, index: int) -> bool:
        """
        Try to apply operator `index` to this state in place.

        Must leave the state either unchanged and return False, or changed,
        valid and return True. No partial mutation may remain after a False
        return. Unknown indices return False.

        Args:
            index: Operator index

        Returns:
            True if the operator was applicable and the result is valid
        """
        pass

    @abstractmethod
    def clone(self) -> "AbstractState":
        """
        Create an independent copy.

        The copy must not share any mutable substructure with the original.

        Returns:
            New state equal to this one
        """
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        pass

    @abstractmethod
    def __hash__(self) -> int:
        pass
