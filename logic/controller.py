"""
Game controller for TicTacToe.

Owns the history of one game and turns user intents from a front end
(cell clicked, history entry clicked, order toggle clicked, reset) into
a new GameView for the front end to draw.
"""

import logging

from .config import GameConfig
from .game_state import GameHistory, new_game
from .history import (
    derive_history_labels,
    format_status,
    jump_to,
    order_toggle_label,
    play_move,
    toggle_order,
)
from .move_validator import MoveValidator
from .view_model import CellView, GameView
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


def build_view(state: GameHistory, win_checker: WinChecker) -> GameView:
    """
    Build everything a front end needs to draw `state`.

    Args:
        state: Game history to render.
        win_checker: Evaluates the current snapshot once; the winning
            line, playable cells and status all come from that result.

    Returns:
        GameView for the current snapshot.
    """
    snapshot = state.current_snapshot
    evaluation = win_checker.evaluate(snapshot)

    cells = []
    for row in range(GameConfig.BOARD_SIZE):
        for col in range(GameConfig.BOARD_SIZE):
            index = row * GameConfig.BOARD_SIZE + col
            cells.append(CellView(
                index=index,
                row=row,
                col=col,
                value=snapshot[index],
                is_winning=index in evaluation.winning_line,
                is_playable=snapshot[index] is None and not evaluation.is_game_over,
            ))

    return GameView(
        cells=tuple(cells),
        status=format_status(evaluation, state.current_move),
        outcome=evaluation.outcome,
        history=derive_history_labels(state),
        current_move=state.current_move,
        is_ascending=state.is_ascending,
        order_label=order_toggle_label(state),
    )


class GameController:
    """
    The single owner of one game.

    Front ends call one intent method per user action and draw the
    GameView it returns. Calls must come from one thread (the UI event
    loop); each one finishes before the next starts.
    """

    def __init__(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING):
        """
        Initialize the controller with a fresh game.

        Args:
            is_ascending: Show the move list oldest first.
        """
        self.win_checker = WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self._state = new_game(is_ascending=is_ascending)

    @property
    def state(self) -> GameHistory:
        """The current game history."""
        return self._state

    @property
    def view(self) -> GameView:
        """A render of the current game history."""
        return build_view(self._state, self.win_checker)

    def cell_clicked(self, index: int) -> GameView:
        """Play the next mark at `index`; ignored if the move is not allowed."""
        self._state = play_move(self._state, index)
        return self.view

    def history_entry_clicked(self, move_index: int) -> GameView:
        """
        Show the board as it was after `move_index` moves.

        Raises:
            InvalidJumpError: If `move_index` is not in the history.
        """
        self._state = jump_to(self._state, move_index)
        return self.view

    def order_toggle_clicked(self) -> GameView:
        """Flip the order of the move list."""
        self._state = toggle_order(self._state)
        return self.view

    def reset(self) -> GameView:
        """Start a new game. The move list order is kept."""
        logger.debug("Resetting game")
        self._state = new_game(is_ascending=self._state.is_ascending)
        return self.view
