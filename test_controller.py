"""
Tests for the TicTacToe game controller and the views it builds.
"""

import pytest

from logic.controller import GameController, build_view
from logic.game_state import Player
from logic.move_validator import InvalidJumpError, MoveValidator
from logic.win_checker import GameStatus, WinChecker


def click_all(controller, *cells):
    view = controller.view
    for cell in cells:
        view = controller.cell_clicked(cell)
    return view


def test_initial_view():
    view = GameController().view
    assert view.status == "Next player: X"
    assert view.outcome == GameStatus.IN_PROGRESS
    assert len(view.cells) == 9
    assert all(cell.value is None for cell in view.cells)
    assert all(cell.is_playable for cell in view.cells)
    assert not any(cell.is_winning for cell in view.cells)
    assert [entry.label for entry in view.history] == ["You are at move #0"]
    assert view.history[0].is_current
    assert view.order_label == "Switch to Ascending"


def test_cells_in_row_major_order():
    view = GameController().view
    for cell in view.cells:
        assert cell.index == cell.row * 3 + cell.col
    assert [[cell.index for cell in row] for row in view.rows()] == [
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
    ]


def test_cell_click_plays_move():
    controller = GameController()
    view = controller.cell_clicked(0)
    assert view.cells[0].value == Player.X
    assert view.cells[0].text == "X"
    assert not view.cells[0].is_playable
    assert view.status == "Next player: O"
    assert view.current_move == 1


def test_occupied_cell_click_ignored():
    controller = GameController()
    controller.cell_clicked(4)
    before = controller.state
    controller.cell_clicked(4)
    assert controller.state is before


def test_winning_view():
    controller = GameController()
    view = click_all(controller, 0, 3, 1, 4, 2)
    assert view.status == "Winner X"
    assert view.outcome == GameStatus.WON
    assert view.winning_line == (0, 1, 2)
    assert [cell.index for cell in view.cells if cell.is_winning] == [0, 1, 2]
    assert not any(cell.is_playable for cell in view.cells)


def test_draw_view():
    controller = GameController()
    view = click_all(controller, 0, 1, 2, 4, 3, 5, 7, 6, 8)
    assert view.status == "Draw"
    assert view.outcome == GameStatus.DRAWN
    assert view.winning_line == ()


def test_history_click_jumps():
    controller = GameController()
    click_all(controller, 0, 4, 8)
    view = controller.history_entry_clicked(1)
    assert view.current_move == 1
    assert view.cells[0].value == Player.X
    assert view.cells[4].value is None
    assert view.status == "Next player: O"
    assert len(view.history) == 4


def test_history_click_out_of_range():
    controller = GameController()
    controller.cell_clicked(0)
    before = controller.state
    with pytest.raises(InvalidJumpError):
        controller.history_entry_clicked(5)
    assert controller.state is before


def test_branch_from_history():
    controller = GameController()
    click_all(controller, 0, 1, 2)
    controller.history_entry_clicked(1)
    view = controller.cell_clicked(4)
    assert len(controller.state.history) == 3
    assert [entry.move for entry in view.history] == [2, 1, 0]
    assert view.history[0].label == "You are at move #2"


def test_order_toggle():
    controller = GameController()
    click_all(controller, 0, 4)
    descending = controller.view
    ascending = controller.order_toggle_clicked()
    assert ascending.is_ascending
    assert ascending.order_label == "Switch to Descending"
    assert ascending.history == tuple(reversed(descending.history))
    assert controller.order_toggle_clicked().history == descending.history


def test_start_ascending():
    controller = GameController(is_ascending=True)
    controller.cell_clicked(0)
    assert [entry.move for entry in controller.view.history] == [0, 1]


def test_reset_keeps_order():
    controller = GameController()
    click_all(controller, 0, 4)
    controller.order_toggle_clicked()
    view = controller.reset()
    assert len(controller.state.history) == 1
    assert view.is_ascending
    assert view.status == "Next player: X"


def test_validator_messages():
    controller = GameController()
    validator = MoveValidator()
    click_all(controller, 0, 3, 1, 4, 2)
    result = validator.validate_move(controller.state, 8)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert validator.get_valid_moves(controller.state) == []

    controller.history_entry_clicked(1)
    result = validator.validate_move(controller.state, 0)
    assert not result.is_valid
    assert "occupied" in result.error_message
    assert validator.validate_move(controller.state, 8).is_valid
    assert validator.validate_jump(controller.state, 5).is_valid
    assert not validator.validate_jump(controller.state, 6).is_valid


class CountingWinChecker(WinChecker):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def evaluate(self, snapshot):
        self.calls += 1
        return super().evaluate(snapshot)


def test_view_evaluates_board_once():
    controller = GameController()
    click_all(controller, 0, 3, 1, 4, 2)
    checker = CountingWinChecker()
    view = build_view(controller.state, checker)
    assert checker.calls == 1
    assert view.status == "Winner X"
    assert not any(cell.is_playable for cell in view.cells)


def test_view_playable_cells_match_validator():
    controller = GameController()
    click_all(controller, 0, 4, 8)
    view = build_view(controller.state, CountingWinChecker())
    playable = [cell.index for cell in view.cells if cell.is_playable]
    assert playable == MoveValidator().get_valid_moves(controller.state)
