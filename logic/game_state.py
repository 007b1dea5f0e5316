"""
Game state for TicTacToe.
Holds the board snapshots, the move records, the current move pointer,
and the history display order.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @classmethod
    def for_move(cls, move_number: int) -> "Player":
        """
        Get the player whose turn it is at a given move number.

        The first player moves when the move number is even.
        """
        first = cls(GameConfig.FIRST_PLAYER)
        return first if move_number % 2 == 0 else first.opposite()


# One board state: 9 cells in row-major order, None means empty
Snapshot = Tuple[Optional[Player], ...]

EMPTY_BOARD: Snapshot = (None,) * GameConfig.CELL_COUNT


@dataclass(frozen=True)
class MoveRecord:
    """
    Where a move was played.
    """
    row: int    # Row (1-3)
    col: int    # Column (1-3)

    @classmethod
    def from_index(cls, cell_index: int) -> "MoveRecord":
        """Build the 1-indexed coordinates of a cell index (0-8)."""
        row, col = divmod(cell_index, GameConfig.BOARD_SIZE)
        return cls(row=row + 1, col=col + 1)

    @property
    def cell_index(self) -> int:
        return (self.row - 1) * GameConfig.BOARD_SIZE + (self.col - 1)


@dataclass(frozen=True)
class GameHistory:
    """
    The complete state of one game.

    Tracks:
    - Every board snapshot, starting with the empty board
    - The move record that produced each snapshot (None for the empty board)
    - Which snapshot is currently shown
    - Whether the move list is shown in ascending order

    Instances are never modified. Every operation in logic.history
    returns a new GameHistory.
    """

    history: Tuple[Snapshot, ...] = (EMPTY_BOARD,)
    move_records: Tuple[Optional[MoveRecord], ...] = (None,)
    current_move: int = 0
    is_ascending: bool = GameConfig.DEFAULT_ASCENDING

    def __post_init__(self):
        if not self.history:
            raise ValueError("History must contain at least the empty board")
        if len(self.move_records) != len(self.history):
            raise ValueError(
                f"Got {len(self.move_records)} move records "
                f"for {len(self.history)} snapshots"
            )
        if not 0 <= self.current_move < len(self.history):
            raise ValueError(
                f"Current move {self.current_move} is outside "
                f"0-{len(self.history) - 1}"
            )

    @property
    def current_snapshot(self) -> Snapshot:
        """The board shown at the current move."""
        return self.history[self.current_move]

    @property
    def next_player(self) -> Player:
        """The player who moves next from the current snapshot."""
        return Player.for_move(self.current_move)

    @property
    def latest_move(self) -> int:
        """Index of the last snapshot in the history."""
        return len(self.history) - 1

    def __len__(self) -> int:
        return len(self.history)


def new_game(is_ascending: bool = GameConfig.DEFAULT_ASCENDING) -> GameHistory:
    """Create the state of a fresh game (one empty board)."""
    return GameHistory(is_ascending=is_ascending)


def count_marks(snapshot: Snapshot, player: Player) -> int:
    """Count how many cells a player holds."""
    return sum(1 for cell in snapshot if cell == player)


def format_board(snapshot: Snapshot, winning_line: Tuple[int, ...] = ()) -> str:
    """
    Render a snapshot as text.

    Empty cells show their index so they can be typed in the console.
    Cells on the winning line are wrapped in asterisks.

    Args:
        snapshot: The board to render.
        winning_line: Cell indices to highlight.

    Returns:
        Multi-line string with one board row per line.
    """
    size = GameConfig.BOARD_SIZE
    rows = []
    for row in range(size):
        cells = []
        for col in range(size):
            index = row * size + col
            value = snapshot[index]
            text = value.value if value is not None else str(index)
            if index in winning_line:
                text = f"*{text}*"
            cells.append(text.center(3))
        rows.append("|".join(cells))
    separator = "\n" + "+".join(["---"] * size) + "\n"
    return separator.join(rows)
