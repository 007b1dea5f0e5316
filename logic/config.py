"""
Game configuration for TicTacToe.
All the settings for the board, players, and the text shown to the user.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; the labels can be changed freely.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Total number of cells (index = row * BOARD_SIZE + col)
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== PLAYER SETTINGS ====================
    # X always moves on even move numbers, O on odd ones
    FIRST_PLAYER = "X"

    # ==================== HISTORY SETTINGS ====================
    # False = most recent move listed first
    DEFAULT_ASCENDING = False

    # ==================== LABELS ====================
    STATUS_WINNER = "Winner {mark}"
    STATUS_DRAW = "Draw"
    STATUS_NEXT = "Next player: {mark}"

    HISTORY_CURRENT = "You are at move #{move}"
    HISTORY_START = "Go to game start"
    HISTORY_MOVE = "Go to move #{move}"
    HISTORY_COORDS = ": [{row},{col}]"

    # Toggle button text describes what clicking it will do
    ORDER_TO_ASCENDING = "Switch to Ascending"
    ORDER_TO_DESCENDING = "Switch to Descending"

    # ==================== LOGGING ====================
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False):
    """Set up logging for a front end (WARNING, or DEBUG when verbose)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=GameConfig.LOG_FORMAT
    )
