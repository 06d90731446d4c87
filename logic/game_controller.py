"""
Game controller for TicTacToe.
Runs the turns: applies the human's move, checks the result, and lets the
AI reply straight away when it is its turn.
"""

import random
from dataclasses import dataclass
from typing import Callable, Optional, Tuple, Union

from .ai_player import AIPlayer, Strategy
from .config import GameConfig
from .game_state import Cell, GameState, Outcome, Player
from .move_validator import MoveValidator
from .win_checker import WinChecker


class InvariantViolation(RuntimeError):
    """The game reached a state the rules should make impossible."""


@dataclass(frozen=True)
class GameSnapshot:
    """What the UI needs to draw the game."""
    board: Tuple[Cell, ...]
    current_player: Player
    outcome: Outcome
    strategy: Strategy
    winning_line: Optional[Tuple[int, int, int]] = None


class GameController:
    """
    Main controller for a game of TicTacToe against the computer.

    Game flow:
    1. Human (X) picks a cell
    2. The move is validated and applied, then the board is checked
    3. If the game goes on, the AI (O) picks a cell with the current strategy
    4. The AI move goes through the same checks
    5. Repeat until someone wins or it's a draw, then on_outcome is called

    Illegal moves are ignored: the board, turn and outcome stay as they were.
    """

    def __init__(
        self,
        strategy: Union[str, Strategy] = GameConfig.DEFAULT_STRATEGY,
        rng: Optional[random.Random] = None,
        on_outcome: Optional[Callable[[Outcome], None]] = None
    ):
        """
        Initialize the controller.

        Args:
            strategy: Initial AI strategy.
            rng: Random generator for the AI, pass a seeded one for
                reproducible games.
            on_outcome: Called once with the outcome when a game ends.
        """
        # The human always plays X and moves first; minimax only plays O
        self.human_player = Player.X
        self.ai_player = Player.O

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(self.ai_player, strategy=strategy, rng=rng)
        self.on_outcome = on_outcome

        self.game_state = GameState()

    @property
    def strategy(self) -> Strategy:
        return self.ai.strategy

    def new_game(self):
        """Start over: empty board, X to move."""
        self.game_state = GameState()
        if GameConfig.DEBUG_MODE:
            print("New game started.")

    def set_strategy(self, strategy: Union[str, Strategy]):
        """
        Change the AI strategy. Takes effect on the AI's next turn.

        Raises:
            ValueError: For an unknown strategy name.
        """
        self.ai.set_strategy(strategy)
        if GameConfig.DEBUG_MODE:
            print(f"Strategy set to: {self.ai.strategy.value}")

    def get_state(self) -> GameSnapshot:
        board = tuple(self.game_state.board)
        return GameSnapshot(
            board=board,
            current_player=self.game_state.current_player,
            outcome=self.game_state.outcome,
            strategy=self.ai.strategy,
            winning_line=self.win_checker.get_winning_line(board),
        )

    def apply_move(self, index: int, player: Player) -> bool:
        """
        Apply one move and update the outcome.

        Args:
            index: Cell index (0-8).
            player: Who is moving, must be the current player.

        Returns:
            True if the move was applied, False if it was ignored.
        """
        result = self.validator.validate_move(self.game_state, index, player)
        if not result.is_valid:
            if GameConfig.DEBUG_MODE:
                print(f"Ignoring move: {result.error_message}")
            return False

        move = self.game_state.make_move(index)
        if GameConfig.DEBUG_MODE:
            print(f">>> {move.player.value} plays cell {move.index}")
        self.win_checker.update_game_state(self.game_state)

        if self.game_state.is_game_over:
            if GameConfig.DEBUG_MODE:
                print(f"Game over: {self.game_state.outcome.describe()}")
            if self.on_outcome is not None:
                self.on_outcome(self.game_state.outcome)
        else:
            self.game_state.switch_turn()

        return True

    def play_human_move(self, index: int) -> bool:
        """
        Play the human's move, then the AI's reply if the game goes on.

        Args:
            index: Cell the human clicked (0-8).

        Returns:
            True if the human move was accepted.

        Raises:
            InvariantViolation: If the AI has no legal move in a game
                that is still in progress.
        """
        if not self.apply_move(index, self.human_player):
            return False

        if (not self.game_state.is_game_over
                and self.game_state.current_player == self.ai_player):
            self._ai_move()

        return True

    def _ai_move(self):
        """Let the AI play with the strategy selected right now."""
        move = self.ai.get_best_move(list(self.game_state.board))

        if move is None:
            raise InvariantViolation(
                "AI found no move but the game is still in progress"
            )

        if GameConfig.DEBUG_MODE:
            print(f">>> AI is thinking ({self.ai.strategy.value})...")

        if not self.apply_move(move, self.ai_player):
            raise InvariantViolation(f"AI chose an illegal move: {move}")
