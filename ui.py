"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer using Tkinter.

Shows:
- The 3x3 board (click a cell to play X)
- Strategy selection (Random, Winning, Minimax)
- Game status and a reset button
- A "Game Over" dialog offering to play again
"""

import random
import tkinter as tk
from tkinter import ttk, messagebox
from typing import Optional

from logic.config import GameConfig
from logic.game_controller import GameController
from logic.game_state import Outcome, Player
from logic.ai_player import Strategy


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    All game rules live in the GameController; this class only forwards
    clicks and redraws from GameController.get_state().
    """

    STRATEGY_BUTTONS = [
        ("Random", Strategy.RANDOM),
        ("Winning", Strategy.HEURISTIC),
        ("Minimax", Strategy.MINIMAX),
    ]

    def __init__(self, strategy: str = GameConfig.DEFAULT_STRATEGY, seed: Optional[int] = None):
        """Initialize the UI."""
        rng = random.Random(seed)
        self.controller = GameController(
            strategy=strategy,
            rng=rng,
            on_outcome=self._on_outcome,
        )

        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BACKGROUND_COLOR)
        self.root.resizable(False, False)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BACKGROUND_COLOR)
        style.configure('TLabel', background=GameConfig.BACKGROUND_COLOR,
                        foreground=GameConfig.TEXT_COLOR, font=('Segoe UI', 12))
        style.configure('Title.TLabel', font=GameConfig.TITLE_FONT)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text="Tic Tac Toe", style='Title.TLabel').pack(pady=(0, 15))

        # Strategy buttons
        strategy_frame = ttk.Frame(main_frame)
        strategy_frame.pack(pady=(0, 15))

        self.strategy_buttons = {}
        for text, strategy in self.STRATEGY_BUTTONS:
            btn = tk.Button(
                strategy_frame,
                text=text,
                font=GameConfig.BUTTON_FONT,
                width=9,
                relief='flat',
                command=lambda s=strategy: self._set_strategy(s)
            )
            btn.pack(side=tk.LEFT, padx=8)
            self.strategy_buttons[strategy] = btn

        # Board
        board_frame = tk.Frame(main_frame, bg=GameConfig.TEXT_COLOR, borderwidth=3)
        board_frame.pack()

        self.board_cells = []
        for index in range(GameConfig.NUM_CELLS):
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell = tk.Button(
                board_frame,
                text="",
                font=GameConfig.CELL_FONT,
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                relief='flat',
                command=lambda i=index: self._on_cell_clicked(i)
            )
            cell.grid(row=row, column=col, padx=1, pady=1)
            self.board_cells.append(cell)

        self.status_label = ttk.Label(main_frame, text="")
        self.status_label.pack(pady=10)

        tk.Button(
            main_frame,
            text="Reset Game",
            font=GameConfig.BUTTON_FONT,
            bg=GameConfig.ACTIVE_STRATEGY_COLOR,
            fg='white',
            width=14,
            command=self._new_game
        ).pack(pady=(5, 0))

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_clicked(self, index: int):
        """Forward a click to the controller and redraw."""
        self.controller.play_human_move(index)
        self._refresh()

    def _set_strategy(self, strategy: Strategy):
        """Set the AI strategy for its next moves."""
        self.controller.set_strategy(strategy)
        self._refresh()

    def _new_game(self):
        self.controller.new_game()
        self._refresh()

    def _on_outcome(self, outcome: Outcome):
        """Show the result once the board has been redrawn."""
        self.root.after(0, lambda: self._show_game_over(outcome))

    def _show_game_over(self, outcome: Outcome):
        messagebox.showinfo("Game Over", outcome.describe(), parent=self.root)
        # Play again
        self._new_game()

    def _refresh(self):
        """Redraw board, strategy buttons and status from the game state."""
        state = self.controller.get_state()
        winning_line = state.winning_line or ()

        for index, cell in enumerate(self.board_cells):
            mark = state.board[index]
            if mark is None:
                cell.configure(text="", state='normal', bg=GameConfig.CELL_COLOR)
                continue
            color = GameConfig.X_COLOR if mark == Player.X else GameConfig.O_COLOR
            bg = GameConfig.WIN_HIGHLIGHT_COLOR if index in winning_line else GameConfig.CELL_COLOR
            cell.configure(text=mark.value, fg=color, disabledforeground=color,
                           bg=bg, state='disabled')

        for strategy, btn in self.strategy_buttons.items():
            if strategy == state.strategy:
                btn.configure(bg=GameConfig.ACTIVE_STRATEGY_COLOR, fg='white')
            else:
                btn.configure(bg=GameConfig.STRATEGY_BUTTON_COLOR, fg='black')

        if state.outcome.is_decided:
            self.status_label.configure(text=state.outcome.describe())
        else:
            self.status_label.configure(text=f"Turn: {state.current_player.value}")

    def _quit(self):
        """Quit the application."""
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point, same options as main.py."""
    import main as entry_point
    entry_point.main()


if __name__ == "__main__":
    main()
