"""
Main entry point for TicTacToe.

Plays a game of TicTacToe against the computer, either in the Tkinter
window (default) or in the console (--no-ui).

Run this script to play TicTacToe!
"""

import random
from typing import Optional

from logic.config import GameConfig
from logic.game_controller import GameController
from logic.game_state import Outcome
from logic.ai_player import Strategy


class TicTacToeConsole:
    """
    Console version of the game.

    Game flow:
    1. Human (X) types a cell index (0-8)
    2. The computer (O) answers with the selected strategy
    3. Repeat until someone wins or it's a draw
    4. Play again or quit
    """

    HELP_TEXT = (
        "Commands: 0-8 = play that cell, "
        "s <random|winning|minimax> = change strategy, "
        "r = reset, q = quit"
    )

    def __init__(self, strategy: str = GameConfig.DEFAULT_STRATEGY, seed: Optional[int] = None):
        self.controller = GameController(
            strategy=strategy,
            rng=random.Random(seed),
            on_outcome=self._on_outcome,
        )
        self.is_running = False
        self.last_outcome: Optional[Outcome] = None

    def start(self):
        """Start the game."""
        print("\n" + "="*60)
        print("   Tic Tac Toe")
        print(f"   You play: {self.controller.human_player.value}   Computer plays: {self.controller.ai_player.value}")
        print(f"   Strategy: {self.controller.strategy.value}")
        print("="*60)
        print(self.HELP_TEXT)

        self.is_running = True
        self._game_loop()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running:
            self.controller.game_state.print_board()
            line = input("\nYour move: ").strip().lower()
            self.handle_command(line)

            if self.last_outcome is not None:
                self._show_game_result()

    def handle_command(self, line: str):
        """
        Run one line of user input.

        Args:
            line: A cell index or a command.
        """
        if line in ("q", "quit"):
            print("\nGame quit by user.")
            self.is_running = False
        elif line in ("r", "reset"):
            self._reset_game()
        elif line.startswith("s "):
            try:
                self.controller.set_strategy(line[2:])
                print(f"Strategy set to: {self.controller.strategy.value}")
            except ValueError as e:
                print(e)
        elif line.isdecimal():
            if not self.controller.play_human_move(int(line)):
                print("You can't play there, pick an empty cell (0-8).")
        else:
            print(self.HELP_TEXT)

    def _on_outcome(self, outcome: Outcome):
        self.last_outcome = outcome

    def _show_game_result(self):
        """Show the final game result and offer another round."""
        print("\n" + "="*60)
        print("   GAME OVER!")
        print("="*60)

        self.controller.game_state.print_board()

        if self.last_outcome.winner is not None:
            if self.last_outcome.winner == self.controller.human_player:
                print("\nCongratulations! You won!")
            else:
                print("\nComputer wins! Better luck next time!")
        else:
            print("\nIt's a draw! Good game!")

        print("\n" + "="*60)

        self.last_outcome = None
        answer = input("Play again? [Y/n] ").strip().lower()
        if answer in ("", "y", "yes"):
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round."""
        self.controller.new_game()
        self.last_outcome = None
        print("\nNew game! You go first.")


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=GameConfig.DEFAULT_STRATEGY,
        help="AI strategy at start (default: %(default)s)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the AI's random moves"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print AI and move diagnostics"
    )

    args = parser.parse_args()

    if args.debug:
        GameConfig.DEBUG_MODE = True

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(strategy=args.strategy, seed=args.seed)
        ui.run()
        return

    game = TicTacToeConsole(strategy=args.strategy, seed=args.seed)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
