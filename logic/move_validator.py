"""
Move validator for TicTacToe.
Validates that moves follow the rules.
"""

from typing import Optional
from dataclasses import dataclass
from .game_state import GameState, Player


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Can only place on a cell of the board (0-8)
    3. Can only place on empty cells
    4. Players take turns
    """

    def validate_move(
        self,
        game_state: GameState,
        index: int,
        player: Optional[Player] = None
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark on (0-8).
            player: Who is moving. Defaults to the current player.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if (not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < len(game_state.board)):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-8."
            )

        if game_state.board[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].value}"
            )

        if player is not None and player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It's not {player.value}'s turn!"
            )

        return ValidationResult(is_valid=True)
