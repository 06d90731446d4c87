"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from .game_state import Board, GameState, Outcome, Player


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES = [
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    ]

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify a board.

        Args:
            board: The 9 cells of the board.

        Returns:
            Win for the player owning a full line, Draw if the board is
            full without one, otherwise InProgress.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.win(winner)
        if self.is_full(board):
            return Outcome.draw()
        return Outcome.in_progress()

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner

        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> Optional[Player]:
        """The Player owning all 3 cells of the line, None otherwise."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_full(self, board: Board) -> bool:
        return all(cell is not None for cell in board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Update the game state with the outcome of its board.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        game_state.outcome = self.evaluate(game_state.board)
        return game_state

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as 3 cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
