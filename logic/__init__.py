"""
Logic module for TicTacToe.
Handles game state, rules, AI strategies, and turn-taking.
"""

from .config import GameConfig
from .game_state import GameState, GameStatus, Move, Outcome, Player
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import (
    AIPlayer,
    HeuristicStrategy,
    MinimaxStrategy,
    RandomStrategy,
    Strategy,
)
from .game_controller import GameController, GameSnapshot, InvariantViolation

__version__ = "1.0.0"
