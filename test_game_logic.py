"""
Tests for the board, the win checker, and the move validator.
"""

import pytest

from logic.game_state import GameState, GameStatus, Outcome, Player, empty_board
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

X, O, _ = Player.X, Player.O, None


def reachable_boards():
    """Every board reachable from the empty board by legal play."""
    checker = WinChecker()
    seen = set()
    stack = [(tuple(empty_board()), Player.X)]
    while stack:
        board, player = stack.pop()
        if board in seen:
            continue
        seen.add(board)
        if checker.evaluate(list(board)).is_decided:
            continue
        for index, cell in enumerate(board):
            if cell is None:
                child = list(board)
                child[index] = player
                stack.append((tuple(child), player.opposite()))
    return seen


class TestWinChecker:

    def setup_method(self):
        self.checker = WinChecker()

    def test_row_win(self):
        assert self.checker.evaluate([X, X, X, _, _, _, _, _, _]) == Outcome.win(X)

    def test_full_board_without_line_is_draw(self):
        assert self.checker.evaluate([X, O, X, O, X, O, O, X, O]) == Outcome.draw()

    def test_open_board_in_progress(self):
        outcome = self.checker.evaluate([X, _, _, _, O, _, _, _, _])
        assert outcome == Outcome.in_progress()
        assert not outcome.is_decided

    @pytest.mark.parametrize("line", WinChecker.WINNING_LINES)
    def test_every_line_wins_for_o(self, line):
        board = empty_board()
        for index in line:
            board[index] = O
        assert self.checker.evaluate(board) == Outcome.win(O)
        assert self.checker.get_winning_line(board) == line

    def test_win_on_full_board_beats_draw(self):
        # 2, 4, 6 is an X diagonal
        board = [X, O, X, O, X, O, X, X, O]
        assert self.checker.evaluate(board) == Outcome.win(X)
        assert self.checker.is_full(board)

    def test_empty_cells_never_win(self):
        assert self.checker.check_winner(empty_board()) is None
        assert self.checker.get_winning_line(empty_board()) is None

    def test_at_most_one_winner_on_reachable_boards(self):
        boards = reachable_boards()
        assert len(boards) == 5478
        for board in boards:
            winners = {
                board[line[0]]
                for line in WinChecker.WINNING_LINES
                if board[line[0]] is not None
                and board[line[0]] == board[line[1]] == board[line[2]]
            }
            assert len(winners) <= 1

    def test_update_game_state(self):
        game = GameState(board=[O, O, O, X, X, _, X, _, _])
        self.checker.update_game_state(game)
        assert game.outcome.status == GameStatus.WIN
        assert game.outcome.winner == O
        assert game.is_game_over


class TestGameState:

    def test_new_game(self):
        game = GameState()
        assert game.board == [None] * 9
        assert game.current_player == X
        assert game.outcome == Outcome.in_progress()
        assert game.moves == []

    def test_make_move_records_move(self):
        game = GameState()
        move = game.make_move(4)
        assert move.index == 4
        assert move.player == X
        assert move.move_number == 0
        assert game.board[4] == X
        assert game.moves == [move]

    def test_format_board(self):
        game = GameState(board=[X, _, _, _, O, _, _, _, _])
        assert game.format_board().splitlines() == [
            " X | 1 | 2",
            "---+---+---",
            " 3 | O | 5",
            "---+---+---",
            " 6 | 7 | 8",
        ]

    def test_outcome_text(self):
        assert Outcome.win(X).describe() == "Player X wins!"
        assert Outcome.draw().describe() == "It's a draw!"


class TestMoveValidator:

    def setup_method(self):
        self.validator = MoveValidator()

    def test_valid_move(self):
        result = self.validator.validate_move(GameState(), 0, X)
        assert result.is_valid
        assert result.error_message is None

    @pytest.mark.parametrize("index", [-1, 9, 42])
    def test_out_of_range(self, index):
        result = self.validator.validate_move(GameState(), index)
        assert not result.is_valid
        assert "Must be 0-8" in result.error_message

    def test_occupied(self):
        game = GameState(board=[X, _, _, _, _, _, _, _, _], current_player=O)
        result = self.validator.validate_move(game, 0, O)
        assert not result.is_valid
        assert "occupied" in result.error_message

    def test_wrong_turn(self):
        result = self.validator.validate_move(GameState(), 0, O)
        assert not result.is_valid

    def test_game_over(self):
        game = GameState(outcome=Outcome.win(X))
        assert not self.validator.validate_move(game, 8).is_valid

    @pytest.mark.parametrize("index", [True, False, 1.0, "4", None])
    def test_non_integer_cell(self, index):
        result = self.validator.validate_move(GameState(), index, X)
        assert not result.is_valid
        assert "Must be 0-8" in result.error_message
