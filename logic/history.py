"""
Move history for TicTacToe.

Every operation takes a GameHistory and returns a GameHistory:
playing a move, jumping to an earlier move, and flipping the order
of the move list. Label helpers turn a history into the text shown
to the player.
"""

import logging
from typing import Tuple
from dataclasses import replace

from .config import GameConfig
from .game_state import GameHistory, MoveRecord, Player, Snapshot
from .move_validator import InvalidJumpError, MoveValidator
from .view_model import HistoryEntry
from .win_checker import Evaluation, GameStatus, WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()
_validator = MoveValidator(_win_checker)


def play_move(state: GameHistory, cell_index: int) -> GameHistory:
    """
    Play the next player's mark at a cell of the current snapshot.

    Snapshots after the current move are discarded before the new one
    is appended, so playing from an earlier move starts a new branch.

    Args:
        state: Current game history.
        cell_index: Cell to play (0-8).

    Returns:
        The new history, or `state` itself if the move is not allowed
        (bad index, occupied cell, or game already decided).
    """
    result = _validator.validate_move(state, cell_index)
    if not result.is_valid:
        logger.debug("Ignoring move at cell %r: %s", cell_index, result.error_message)
        return state

    player = state.next_player
    board = list(state.current_snapshot)
    board[cell_index] = player
    snapshot: Snapshot = tuple(board)

    keep = state.current_move + 1
    discarded = state.latest_move - state.current_move
    if discarded:
        logger.debug("Discarding %d later move(s) after move #%d", discarded, state.current_move)

    history = state.history[:keep] + (snapshot,)
    move_records = state.move_records[:keep] + (MoveRecord.from_index(cell_index),)

    new_state = replace(
        state,
        history=history,
        move_records=move_records,
        current_move=len(history) - 1,
    )
    logger.debug("Move #%d: %s at cell %d", new_state.current_move, player.value, cell_index)

    evaluation = _win_checker.evaluate(snapshot)
    if evaluation.outcome == GameStatus.WON:
        logger.info("%s wins on line %s", evaluation.winner.value, evaluation.winning_line)
    elif evaluation.outcome == GameStatus.DRAWN:
        logger.info("Game drawn after move #%d", new_state.current_move)

    return new_state


def jump_to(state: GameHistory, target_move: int) -> GameHistory:
    """
    Show the snapshot at `target_move`. The history itself is kept.

    Raises:
        InvalidJumpError: If `target_move` is not in the history.
    """
    result = _validator.validate_jump(state, target_move)
    if not result.is_valid:
        raise InvalidJumpError(result.error_message)

    logger.debug("Jumping from move #%d to move #%d", state.current_move, target_move)
    return replace(state, current_move=target_move)


def toggle_order(state: GameHistory) -> GameHistory:
    """Flip the display order of the move list."""
    return replace(state, is_ascending=not state.is_ascending)


def derive_status_label(snapshot: Snapshot, current_move: int) -> str:
    """
    Get the status text for a snapshot.

    Args:
        snapshot: Board to describe.
        current_move: Move number of the snapshot; its parity decides
            who plays next.

    Returns:
        "Winner X", "Draw", or "Next player: O" style text.
    """
    return format_status(_win_checker.evaluate(snapshot), current_move)


def format_status(evaluation: Evaluation, current_move: int) -> str:
    """Get the status text for an already evaluated snapshot."""
    if evaluation.winner is not None:
        return GameConfig.STATUS_WINNER.format(mark=evaluation.winner.value)
    if evaluation.is_draw:
        return GameConfig.STATUS_DRAW
    return GameConfig.STATUS_NEXT.format(mark=Player.for_move(current_move).value)


def describe_move(state: GameHistory, move: int) -> str:
    """Get the move list text for one move number."""
    if move == state.current_move:
        return GameConfig.HISTORY_CURRENT.format(move=move)
    if move == 0:
        return GameConfig.HISTORY_START

    label = GameConfig.HISTORY_MOVE.format(move=move)
    record = state.move_records[move]
    if record is not None:
        label += GameConfig.HISTORY_COORDS.format(row=record.row, col=record.col)
    return label


def derive_history_labels(state: GameHistory) -> Tuple[HistoryEntry, ...]:
    """
    Build the move list in display order.

    Entries are built from game start onwards and the finished list is
    reversed when the order is descending, so each entry keeps its own
    move number whichever way it is shown.

    Args:
        state: Current game history.

    Returns:
        Tuple of HistoryEntry, most recent first unless `is_ascending`.
    """
    entries = [
        HistoryEntry(
            move=move,
            label=describe_move(state, move),
            is_current=(move == state.current_move),
        )
        for move in range(len(state.history))
    ]

    if not state.is_ascending:
        entries.reverse()

    return tuple(entries)


def order_toggle_label(state: GameHistory) -> str:
    """Text for the button that flips the move list order."""
    if state.is_ascending:
        return GameConfig.ORDER_TO_DESCENDING
    return GameConfig.ORDER_TO_ASCENDING
