"""
TicTacToe UI
A graphical interface for two-player TicTacToe using Tkinter.

Shows:
- The 3x3 board (winning line highlighted)
- Game status and next player
- Move list with jump buttons and an order toggle
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List

from logic.config import GameConfig, configure_logging
from logic.controller import GameController
from logic.view_model import GameView

logger = logging.getLogger(__name__)

# Colors
BG_COLOR = '#1a1a2e'
CELL_COLOR = '#16213e'
WIN_COLOR = '#065f46'
X_COLOR = '#f87171'
O_COLOR = '#10b981'


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The UI only draws GameViews and forwards clicks to the controller.
    """

    def __init__(self, is_ascending: bool = GameConfig.DEFAULT_ASCENDING):
        """Initialize the UI."""
        self.controller = GameController(is_ascending=is_ascending)
        self.board_cells: List[List[tk.Button]] = []

        # Create UI
        self._create_ui()
        self._render(self.controller.view)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("TicTacToe")
        self.root.configure(bg=BG_COLOR)
        self.root.minsize(560, 360)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG_COLOR)
        style.configure('TLabel', background=BG_COLOR, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('Current.TLabel', font=('Segoe UI', 11, 'bold'), foreground='#00ff88')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        self.board_frame = ttk.Frame(left_frame)
        self.board_frame.pack(pady=10)

        size = GameConfig.BOARD_SIZE
        for row in range(size):
            row_cells = []
            for col in range(size):
                index = row * size + col
                cell = tk.Button(
                    self.board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=3,
                    height=1,
                    bg=CELL_COLOR,
                    fg='white',
                    relief='ridge',
                    borderwidth=2,
                    command=lambda i=index: self._on_cell_click(i)
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Control buttons
        control_frame = ttk.Frame(left_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Right panel - move list
        right_frame = ttk.Frame(main_frame, width=260)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="📜 Moves", style='Title.TLabel').pack(pady=(0, 5))

        self.order_btn = tk.Button(
            right_frame,
            text="",
            font=('Segoe UI', 10, 'bold'),
            bg='#2d3748',
            fg='white',
            command=self._toggle_order
        )
        self.order_btn.pack(pady=5)

        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Forward a cell click to the controller."""
        self._render(self.controller.cell_clicked(index))

    def _on_history_click(self, move: int):
        """Forward a move list click to the controller."""
        self._render(self.controller.history_entry_clicked(move))

    def _toggle_order(self):
        """Flip the move list order."""
        self._render(self.controller.order_toggle_clicked())

    def _render(self, view: GameView):
        """Draw a GameView."""
        self.status_label.configure(text=view.status)
        self._update_board_display(view)
        self._update_history_display(view)
        self.order_btn.configure(text=view.order_label)

    def _update_board_display(self, view: GameView):
        """Update the board grid display."""
        for cell_view in view.cells:
            cell = self.board_cells[cell_view.row][cell_view.col]

            if cell_view.is_winning:
                bg_color = WIN_COLOR
            else:
                bg_color = CELL_COLOR

            if cell_view.text == "X":
                fg_color = X_COLOR
            else:
                fg_color = O_COLOR

            cell.configure(
                text=cell_view.text,
                bg=bg_color,
                fg=fg_color,
                disabledforeground=fg_color,
                state='normal' if cell_view.is_playable else 'disabled'
            )

    def _update_history_display(self, view: GameView):
        """Rebuild the move list."""
        for child in self.history_frame.winfo_children():
            child.destroy()

        for entry in view.history:
            text = f"{entry.ordinal}. {entry.label}"

            if entry.is_current:
                # The current move is not clickable
                ttk.Label(self.history_frame, text=text, style='Current.TLabel').pack(
                    anchor=tk.W, pady=2
                )
            else:
                tk.Button(
                    self.history_frame,
                    text=text,
                    font=('Segoe UI', 10),
                    bg=CELL_COLOR,
                    fg='white',
                    anchor=tk.W,
                    command=lambda m=entry.move: self._on_history_click(m)
                ).pack(fill=tk.X, pady=2)

    def _reset_game(self):
        """Reset the game."""
        logger.info("Resetting game")
        self._render(self.controller.reset())

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
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

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(is_ascending=args.ascending)
    ui.run()


if __name__ == "__main__":
    main()
