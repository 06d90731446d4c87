"""
AI player for TicTacToe.
Three strategies to choose a move: random, winning (take a win or block
one), and the Minimax algorithm.
"""

import random
from enum import Enum
from typing import Optional, Union

from .config import GameConfig
from .game_state import Board, Player, empty_cells
from .win_checker import WinChecker


class Strategy(Enum):
    """How the computer picks its moves."""
    RANDOM = "random"
    HEURISTIC = "winning"
    MINIMAX = "minimax"

    @classmethod
    def from_name(cls, name: Union[str, "Strategy"]) -> "Strategy":
        """
        Look up a strategy by value ("winning") or name ("heuristic").

        Raises:
            ValueError: If no strategy matches.
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for strategy in cls:
            if key in (strategy.value, strategy.name.lower()):
                return strategy
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown strategy {name!r}. Choose one of: {choices}")


class RandomStrategy:
    """Picks any empty cell (easy)."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, player: Player) -> Optional[int]:
        cells = empty_cells(board)
        if not cells:
            return None
        if len(cells) == 1:
            return cells[0]
        return self.rng.choice(cells)


class HeuristicStrategy:
    """
    Takes an immediate win, otherwise blocks the opponent's immediate win,
    otherwise plays randomly.

    Both scans go from cell 0 to 8, so the lowest winning (or blocking)
    cell is always chosen. Only the fallback is random.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.win_checker = WinChecker()
        self.fallback = RandomStrategy(rng)

    def select_move(self, board: Board, player: Player) -> Optional[int]:
        move = self.find_winning_move(board, player)
        if move is None:
            move = self.find_winning_move(board, player.opposite())
        if move is None:
            move = self.fallback.select_move(board, player)
        return move

    def find_winning_move(self, board: Board, player: Player) -> Optional[int]:
        """First empty cell where `player` would complete a line."""
        for index in empty_cells(board):
            trial = list(board)
            trial[index] = player
            if self.win_checker.check_winner(trial) == player:
                return index
        return None


class MinimaxStrategy:
    """
    Plays perfectly using an exhaustive Minimax search.

    The search always maximizes for O and minimizes for X, so this strategy
    only plays O. Scores are +10 (O wins), -10 (X wins) and 0 (draw) with
    no depth adjustment: among equally scored moves the lowest cell wins.

    There is no pruning or caching, which is only affordable because the
    board never has more than 9 cells.
    """

    MAXIMIZER = Player.O
    MINIMIZER = Player.X

    def __init__(self):
        self.win_checker = WinChecker()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def select_move(self, board: Board, player: Player = Player.O) -> Optional[int]:
        """
        Get the best move for O.

        Args:
            board: Current board (not modified).
            player: Ignored, the search always plays O.

        Returns:
            Cell index of the best move, or None if the board is full.
        """
        self.positions_evaluated = 0
        work = list(board)

        best_score = None
        best_move = None

        for index in empty_cells(work):
            work[index] = self.MAXIMIZER
            score = self._minimax(work, self.MINIMIZER)
            work[index] = None

            # Strictly greater: ties keep the first (lowest) cell
            if best_score is None or score > best_score:
                best_score = score
                best_move = index

        if GameConfig.DEBUG_MODE and best_move is not None:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(self, board: Board, player: Player) -> int:
        """
        Score of the position with `player` to move.

        Args:
            board: Position to evaluate, restored before returning.
            player: Whose turn it is.

        Returns:
            The minimax score of the position.
        """
        self.positions_evaluated += 1

        winner = self.win_checker.check_winner(board)
        if winner == self.MAXIMIZER:
            return GameConfig.WIN_SCORE
        elif winner == self.MINIMIZER:
            return GameConfig.LOSS_SCORE

        cells = empty_cells(board)
        if not cells:
            return GameConfig.DRAW_SCORE

        scores = []
        for index in cells:
            board[index] = player
            scores.append(self._minimax(board, player.opposite()))
            board[index] = None

        if player == self.MAXIMIZER:
            return max(scores)
        return min(scores)


class AIPlayer:
    """
    The computer opponent.

    Holds one instance of every strategy and uses whichever is currently
    selected. Random and winning strategies share one random generator,
    so seeding it makes a whole game reproducible.
    """

    def __init__(
        self,
        player: Player = Player.O,
        strategy: Union[str, Strategy] = GameConfig.DEFAULT_STRATEGY,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            strategy: Initial strategy.
            rng: Random generator for the random and winning strategies.
        """
        self.player = player
        self.strategy = Strategy.from_name(strategy)
        self.rng = rng if rng is not None else random.Random()

        self.strategies = {
            Strategy.RANDOM: RandomStrategy(self.rng),
            Strategy.HEURISTIC: HeuristicStrategy(self.rng),
            Strategy.MINIMAX: MinimaxStrategy(),
        }

    def set_strategy(self, strategy: Union[str, Strategy]):
        self.strategy = Strategy.from_name(strategy)

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Choose a move with the current strategy.

        Returns:
            Cell index, or None if no moves available.
        """
        return self.strategies[self.strategy].select_move(board, self.player)
