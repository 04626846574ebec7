"""
Disc Flipper Puzzle - Thirteen two-sided discs arranged in a circle.

Each disc shows either its red side (P) or its blue side (K). Operator i
flips disc i and the next three discs clockwise, wrapping around the end
of the circle. The puzzle is solved when every disc shows red except the
first one.
"""

import logging

from ..search.state import AbstractState

logger = logging.getLogger(__name__)

RED = "P"
BLUE = "K"

DISC_COUNT = 13
FLIP_WIDTH = 4

DEFAULT_START = RED * (DISC_COUNT - 1) + BLUE
DEFAULT_GOAL = BLUE + RED * (DISC_COUNT - 1)


class DiscFlipper(AbstractState):
    """
    Disc flipper state.

    The discs are stored as an immutable string, so a clone never shares
    mutable data with the original.

    Attributes:
        discs: Current disc sides, one character per disc
        goal: Disc pattern accepted as solution
    """

    def __init__(self, discs: str = DEFAULT_START, goal: str = DEFAULT_GOAL):
        """
        Initialize state.

        Args:
            discs: Initial disc sides (P or K per disc)
            goal: Goal pattern

        Raises:
            ValueError: If either string contains characters other than P and K
        """
        for label, value in (("discs", discs), ("goal", goal)):
            invalid = set(value) - {RED, BLUE}
            if invalid:
                raise ValueError(
                    f"Invalid {label} '{value}': only '{RED}' and '{BLUE}' allowed"
                )
        self.discs = discs
        self.goal = goal

    def is_valid_state(self) -> bool:
        # The flip never leaves the state space; only the size can be wrong.
        return len(self.discs) == DISC_COUNT

    def is_goal_state(self) -> bool:
        return self.discs == self.goal

    def operator_count(self) -> int:
        return DISC_COUNT

    def apply_operator(self, index: int) -> bool:
        """
        Flip the disc at `index` and the next three discs.

        Args:
            index: Start position of the flip (0-based)

        Returns:
            True if the flip was applied
        """
        if not self._pre_flip(index):
            return False

        saved = self.discs
        logger.debug(f"[DiscFlipper] Before:   {self.discs}")
        logger.debug(f"[DiscFlipper] Position: {index + 1}")

        discs = list(self.discs)
        for offset in range(FLIP_WIDTH):
            pos = (index + offset) % len(discs)
            discs[pos] = BLUE if discs[pos] == RED else RED
        self.discs = "".join(discs)

        logger.debug(f"[DiscFlipper] After:    {self.discs}")

        if self.is_valid_state():
            return True

        self.discs = saved
        return False

    def _pre_flip(self, index: int) -> bool:
        """Precondition: the start position is inside the circle."""
        return 0 <= index < len(self.discs)

    def clone(self) -> "DiscFlipper":
        return DiscFlipper(self.discs, self.goal)

    def __eq__(self, other):
        if not isinstance(other, DiscFlipper):
            return False
        return self.discs == other.discs

    def __hash__(self):
        return hash(self.discs)

    def __str__(self):
        return self.discs

    def __repr__(self):
        return f"DiscFlipper('{self.discs}')"
