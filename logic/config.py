"""
Game configuration for TicTacToe.
All the settings for players, AI scoring, and the desktop UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tweak the game!
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells indexed 0-8 row by row
    BOARD_SIZE = 3
    NUM_CELLS = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # ==================== AI SETTINGS ====================
    # Strategy used by a new game controller ("random", "winning", "minimax")
    DEFAULT_STRATEGY = "random"

    # Minimax terminal scores (from O's point of view)
    # Not depth adjusted: a quick win and a slow win score the same
    WIN_SCORE = 10
    LOSS_SCORE = -10
    DRAW_SCORE = 0

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    BACKGROUND_COLOR = "#F5FCFF"
    CELL_COLOR = "#FFFFFF"
    WIN_HIGHLIGHT_COLOR = "#FDE68A"
    TEXT_COLOR = "#333333"
    X_COLOR = "#1D4ED8"
    O_COLOR = "#DC2626"
    STRATEGY_BUTTON_COLOR = "#DDDDDD"
    ACTIVE_STRATEGY_COLOR = "#333333"
    TITLE_FONT = ("Segoe UI", 32, "bold")
    CELL_FONT = ("Segoe UI", 32, "bold")
    BUTTON_FONT = ("Segoe UI", 11, "bold")

    # ==================== DEBUG SETTINGS ====================
    # Print rejected moves and AI search statistics to the console
    DEBUG_MODE = False
