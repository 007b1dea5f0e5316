"""
Test script for TicTacToe modules.
Run this to verify all components work before playing.
"""

import sys


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from logic.config import GameConfig
    config = GameConfig()
    print(f"  Board size: {config.BOARD_SIZE}x{config.BOARD_SIZE}")
    print(f"  First player: {config.FIRST_PLAYER}")
    assert config.CELL_COUNT == 9
    print("  ✓ Game config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic.game_state import Player, new_game
    from logic.history import play_move, jump_to, derive_status_label
    from logic.move_validator import MoveValidator
    from logic.win_checker import WinChecker

    # Test game state
    state = new_game()
    print(f"  Initial player: {state.next_player.value}")
    assert state.next_player == Player.X

    # Test make move
    state = play_move(state, 4)
    print("  Made move at cell 4")

    # Test validator
    validator = MoveValidator()
    result = validator.validate_move(state, 4)
    print(f"  Validate cell 4: valid={result.is_valid}")
    assert not result.is_valid

    # Test win checker
    checker = WinChecker()
    winner = checker.check_winner(state.current_snapshot)
    print(f"  Winner check: {winner}")
    assert winner is None

    # Test jump
    state = jump_to(state, 0)
    status = derive_status_label(state.current_snapshot, state.current_move)
    print(f"  After jump to start: {status}")
    assert status == "Next player: X"

    print("  ✓ Game logic OK")


def test_controller():
    """Test the game controller."""
    print("\n=== Testing Game Controller ===")
    from logic.controller import GameController

    controller = GameController()
    for cell in (0, 3, 1, 4, 2):
        view = controller.cell_clicked(cell)
    print(f"  Status: {view.status}")
    print(f"  Winning line: {view.winning_line}")
    assert view.status == "Winner X"

    view = controller.order_toggle_clicked()
    print(f"  Moves: {[entry.label for entry in view.history]}")
    print("  ✓ Game controller OK")


def test_console():
    """Test the console front end renders a board."""
    print("\n=== Testing Console ===")
    from main import ConsoleGame

    game = ConsoleGame()
    text = game.render(game.controller.view)
    print(text)
    assert "Next player: X" in text
    print("  ✓ Console OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "Game Controller": test_controller,
        "Console": test_console,
    }

    results = {}
    for name, test in tests.items():
        try:
            test()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            import traceback
            traceback.print_exc()
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
