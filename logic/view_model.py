"""
View model for TicTacToe.
Everything a rendering front end needs to draw one game, and nothing more.
"""

from typing import Optional, Tuple
from dataclasses import dataclass

from .config import GameConfig
from .game_state import Player
from .win_checker import GameStatus


@dataclass(frozen=True)
class CellView:
    """One board cell as it should be drawn."""
    index: int                  # Cell index (0-8)
    row: int                    # Row (0-2)
    col: int                    # Column (0-2)
    value: Optional[Player]     # Mark in the cell, None if empty
    is_winning: bool = False    # Part of the winning line (highlight it)
    is_playable: bool = False   # Clicking it would place a mark

    @property
    def text(self) -> str:
        return self.value.value if self.value is not None else ""


@dataclass(frozen=True)
class HistoryEntry:
    """
    One entry of the move list.

    The current entry is shown as plain text; every other entry
    is a control that jumps to its move.
    """
    move: int           # Move number this entry jumps to
    label: str
    is_current: bool = False

    @property
    def ordinal(self) -> int:
        """Position number shown in the list (game start is 1)."""
        return self.move + 1


@dataclass(frozen=True)
class GameView:
    """A full render of one game state."""
    cells: Tuple[CellView, ...]
    status: str
    outcome: GameStatus
    history: Tuple[HistoryEntry, ...]
    current_move: int
    is_ascending: bool
    order_label: str

    @property
    def winning_line(self) -> Tuple[int, ...]:
        return tuple(cell.index for cell in self.cells if cell.is_winning)

    def rows(self) -> Tuple[Tuple[CellView, ...], ...]:
        """Cells grouped by board row."""
        size = GameConfig.BOARD_SIZE
        return tuple(
            tuple(self.cells[row * size:(row + 1) * size])
            for row in range(size)
        )
