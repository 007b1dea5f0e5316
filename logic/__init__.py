"""
Logic module for TicTacToe.
Handles game state, rules, move history, and the view shown to the player.
"""

from .config import GameConfig
from .game_state import GameHistory, MoveRecord, Player, new_game
from .win_checker import Evaluation, GameStatus, WinChecker
from .move_validator import InvalidJumpError, MoveValidator, ValidationResult
from .history import (
    derive_history_labels,
    derive_status_label,
    jump_to,
    play_move,
    toggle_order,
)
from .view_model import CellView, GameView, HistoryEntry
from .controller import GameController, build_view

__version__ = "1.0.0"
