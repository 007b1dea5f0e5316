"""
Move validator for TicTacToe.
Validates that moves and history jumps follow the rules.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameHistory
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class InvalidJumpError(IndexError):
    """Raised when jumping to a move that is not in the history."""


def _is_index(value) -> bool:
    # bool is an int subclass but never a valid index here
    return isinstance(value, int) and not isinstance(value, bool)


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Cell index must be 0-8
    2. Game must not be over at the current snapshot
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, state: GameHistory, cell_index: int) -> ValidationResult:
        """
        Validate a move against the current snapshot.

        Args:
            state: Current game history.
            cell_index: Cell to place a mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if cell index is in valid range
        if not _is_index(cell_index) or not 0 <= cell_index < GameConfig.CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid cell {cell_index!r}. "
                    f"Must be 0-{GameConfig.CELL_COUNT - 1}."
                )
            )

        snapshot = state.current_snapshot

        # Check if game is over
        if self.win_checker.evaluate(snapshot).is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        if snapshot[cell_index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell {cell_index} is already occupied "
                    f"by {snapshot[cell_index].value}"
                )
            )

        return ValidationResult(is_valid=True)

    def validate_jump(self, state: GameHistory, target_move: int) -> ValidationResult:
        """
        Validate a jump to a move in the history.

        Args:
            state: Current game history.
            target_move: Move number to show (0 = game start).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not _is_index(target_move) or not 0 <= target_move <= state.latest_move:
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Invalid move #{target_move!r}. "
                    f"Must be 0-{state.latest_move}."
                )
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, state: GameHistory) -> List[int]:
        """
        Get all cells the next player may play.

        Args:
            state: Current game history.

        Returns:
            List of cell indices, empty once the game is over.
        """
        snapshot = state.current_snapshot

        if self.win_checker.evaluate(snapshot).is_game_over:
            return []

        return [index for index, cell in enumerate(snapshot) if cell is None]
