"""
Main script for TicTacToe.

Launches the Tkinter UI by default, or a console game with --no-ui.

Console commands:
    0-8     Play a mark in that cell
    j N     Jump to move N
    t       Toggle the move list order
    r       Reset the game
    h       Show help
    q       Quit

Run this script to play TicTacToe!
"""

import logging

from logic.config import GameConfig, configure_logging
from logic.controller import GameController
from logic.game_state import format_board
from logic.move_validator import InvalidJumpError
from logic.view_model import GameView

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  0-8   play a mark in that cell
  j N   jump to move N
  t     toggle move list order
  r     reset the game
  h     show this help
  q     quit"""


class ConsoleGame:
    """
    Console front end for TicTacToe.

    Reads one command per line and prints the board, status and move
    list after every change.
    """

    def __init__(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING):
        self.controller = GameController(is_ascending=is_ascending)
        self.is_running = False

    def render(self, view: GameView) -> str:
        """Render a GameView as text."""
        snapshot = tuple(cell.value for cell in view.cells)
        lines = [
            "",
            format_board(snapshot, view.winning_line),
            "",
            view.status,
            "",
            f"Moves ({view.order_label.lower()} with 't'):",
        ]
        for entry in view.history:
            marker = "->" if entry.is_current else "  "
            lines.append(f"{marker} {entry.ordinal}. {entry.label}")
        return "\n".join(lines)

    def handle_command(self, command: str) -> bool:
        """
        Process one command line.

        Args:
            command: Raw text typed by the player.

        Returns:
            False when the player asked to quit, True otherwise.
        """
        parts = command.strip().lower().split()
        if not parts:
            return True

        name = parts[0]

        if name == "q":
            return False
        if name == "h":
            print(HELP_TEXT)
            return True

        if name == "j" and len(parts) == 2:
            try:
                view = self.controller.history_entry_clicked(int(parts[1]))
            except ValueError:
                print(f"Not a move number: {parts[1]}")
                return True
            except InvalidJumpError as e:
                print(f"Cannot jump: {e}")
                return True
        elif name == "t" and len(parts) == 1:
            view = self.controller.order_toggle_clicked()
        elif name == "r" and len(parts) == 1:
            view = self.controller.reset()
        elif len(parts) == 1:
            try:
                index = int(name)
            except ValueError:
                print(f"Unknown command: {command.strip()!r} (type 'h' for help)")
                return True
            before = self.controller.state
            view = self.controller.cell_clicked(index)
            if self.controller.state is before:
                result = self.controller.validator.validate_move(before, index)
                print(f"Move ignored: {result.error_message}")
                return True
        else:
            print(f"Unknown command: {command.strip()!r} (type 'h' for help)")
            return True

        print(self.render(view))
        return True

    def run(self):
        """Run the console loop until the player quits."""
        self.is_running = True
        print(HELP_TEXT)
        print(self.render(self.controller.view))

        while self.is_running:
            try:
                command = input("\n> ")
            except EOFError:
                break
            self.is_running = self.handle_command(command)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="List moves oldest first"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logging"
    )

    args = parser.parse_args()

    configure_logging(args.verbose)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(is_ascending=args.ascending)
        ui.run()
        return

    # Console mode (--no-ui)
    print("\n" + "="*60)
    print("   TicTacToe - Console")
    print("="*60)

    game = ConsoleGame(is_ascending=args.ascending)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
