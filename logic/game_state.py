"""
Game state management for TicTacToe.
Tracks the board, current player, outcome, and the moves of the current game.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass, field

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# A cell is either empty (None) or holds a player's mark
Cell = Optional[Player]
Board = List[Cell]


class GameStatus(Enum):
    """Where the game stands."""
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    Always derived from the board by the WinChecker, never stored
    on its own.
    """
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def win(cls, player: Player) -> "Outcome":
        return cls(GameStatus.WIN, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_decided(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def describe(self) -> str:
        """Human-readable text, as shown in the game over dialog."""
        if self.status == GameStatus.WIN:
            return f"Player {self.winner.value} wins!"
        if self.status == GameStatus.DRAW:
            return "It's a draw!"
        return "Game in progress"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    index: int              # Cell index (0-8)
    move_number: int        # Which move this is in the game (0-8)


def empty_board() -> Board:
    """A fresh board with all 9 cells empty."""
    return [None] * GameConfig.NUM_CELLS


def empty_cells(board: Board) -> List[int]:
    """Indices of the empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 9 cells of the board (row by row)
    - Current player
    - Move history for this game
    - Game outcome (in progress, won, draw)
    """

    board: Board = field(default_factory=empty_board)

    # X always moves first
    current_player: Player = Player.X

    moves: List[Move] = field(default_factory=list)

    # Kept up to date by WinChecker.update_game_state()
    outcome: Outcome = field(default_factory=Outcome.in_progress)

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_decided

    def make_move(self, index: int) -> Move:
        """
        Place the current player's mark at the given cell.

        The move must already be checked by MoveValidator. Does not
        evaluate the outcome and does not switch turns; the
        GameController does both once it knows whether the game is over.

        Args:
            index: Cell index (0-8).

        Returns:
            The recorded Move.
        """
        move = Move(
            player=self.current_player,
            index=index,
            move_number=len(self.moves),
        )
        self.board[index] = move.player
        self.moves.append(move)
        return move

    def switch_turn(self):
        """Hand the turn to the other player."""
        self.current_player = self.current_player.opposite()

    def format_board(self) -> str:
        """Render the board as text, empty cells show their index."""
        rows = []
        for start in range(0, GameConfig.NUM_CELLS, GameConfig.BOARD_SIZE):
            cells = []
            for index in range(start, start + GameConfig.BOARD_SIZE):
                cell = self.board[index]
                cells.append(cell.value if cell is not None else str(index))
            rows.append(" " + " | ".join(cells))
        return "\n---+---+---\n".join(rows)

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.format_board())

        if self.is_game_over:
            print(f"\n{self.outcome.describe()}")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
