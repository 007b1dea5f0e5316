"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np

from .config import GameConfig
from .game_state import Player, Snapshot


class GameStatus(Enum):
    """Where a game stands for a given snapshot."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class Evaluation:
    """Result of evaluating one snapshot."""
    winner: Optional[Player] = None
    winning_line: Tuple[int, ...] = ()
    is_draw: bool = False

    @property
    def outcome(self) -> GameStatus:
        if self.winner is not None:
            return GameStatus.WON
        if self.is_draw:
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.outcome != GameStatus.IN_PROGRESS


# Numeric encoding used for the line scan
_CELL_CODES = {None: 0, Player.X: 1, Player.O: -1}


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    The checker holds no game state, so one instance can be shared.
    """

    # All possible winning lines, scanned in this order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def __init__(self):
        self._lines = np.array(self.WINNING_LINES, dtype=np.intp)

    def evaluate(self, snapshot: Snapshot) -> Evaluation:
        """
        Evaluate a snapshot.

        The first complete line in WINNING_LINES order decides the winner.

        Args:
            snapshot: Board of 9 cells.

        Returns:
            Evaluation with the winner and line, or the draw flag.

        Raises:
            ValueError: If the snapshot is not a valid board.
        """
        board = self._encode(snapshot)

        # A line is complete when all three codes are equal and non-zero
        line_sums = board[self._lines].sum(axis=1)
        complete = np.flatnonzero(np.abs(line_sums) == GameConfig.BOARD_SIZE)

        if complete.size > 0:
            line = self.WINNING_LINES[int(complete[0])]
            return Evaluation(winner=snapshot[line[0]], winning_line=line)

        if np.all(board != 0):
            return Evaluation(is_draw=True)

        return Evaluation()

    def check_winner(self, snapshot: Snapshot) -> Optional[Player]:
        """Get the winning player, or None if no winner yet."""
        return self.evaluate(snapshot).winner

    def check_draw(self, snapshot: Snapshot) -> bool:
        """A draw is a full board with no winner."""
        return self.evaluate(snapshot).is_draw

    def get_winning_line(self, snapshot: Snapshot) -> Tuple[int, ...]:
        """Get the winning line as cell indices, or () if there is none."""
        return self.evaluate(snapshot).winning_line

    def _encode(self, snapshot: Snapshot) -> np.ndarray:
        """Convert a snapshot to an int array (X=1, O=-1, empty=0)."""
        if len(snapshot) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"Snapshot must have {GameConfig.CELL_COUNT} cells, "
                f"got {len(snapshot)}"
            )
        try:
            codes = [_CELL_CODES[cell] for cell in snapshot]
        except KeyError as e:
            raise ValueError(f"Invalid cell value: {e.args[0]!r}") from e
        return np.array(codes, dtype=np.int8)
