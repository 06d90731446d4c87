"""
Smoke test for the TicTacToe modules.
Run this to verify all components work before playing:

    python test_modules.py

The same checks run under pytest.
"""

import sys
import traceback


def test_game_config():
    """Test game configuration."""
    print("\n=== Testing Game Config ===")
    from logic.config import GameConfig

    print(f"  Board size: {GameConfig.BOARD_SIZE}x{GameConfig.BOARD_SIZE}")
    print(f"  Cells: {GameConfig.NUM_CELLS}")
    print(f"  Default strategy: {GameConfig.DEFAULT_STRATEGY}")
    assert GameConfig.NUM_CELLS == 9
    print("  ✓ Game config OK")


def test_game_logic():
    """Test game logic components."""
    print("\n=== Testing Game Logic ===")
    from logic.game_state import GameState, Player
    from logic.move_validator import MoveValidator
    from logic.win_checker import WinChecker

    game = GameState()
    print(f"  Initial player: {game.current_player.value}")
    assert game.current_player == Player.X

    assert game.make_move(4)
    game.switch_turn()
    print("  Made move at 4")

    validator = MoveValidator()
    result = validator.validate_move(game, 4)
    print(f"  Validate 4 again: valid={result.is_valid} ({result.error_message})")
    assert not result.is_valid

    checker = WinChecker()
    outcome = checker.evaluate(game.board)
    print(f"  Outcome: {outcome.describe()}")
    assert not outcome.is_decided
    print("  ✓ Game logic OK")


def test_ai_strategies():
    """Test every AI strategy once."""
    print("\n=== Testing AI Strategies ===")
    import random
    from logic.ai_player import AIPlayer, Strategy
    from logic.game_state import Player

    X, O, _ = Player.X, Player.O, None
    board = [X, X, _, _, O, _, _, _, _]

    ai = AIPlayer(rng=random.Random(0))
    for strategy in Strategy:
        ai.set_strategy(strategy)
        move = ai.get_best_move(board)
        print(f"  {strategy.value}: {move}")
        assert board[move] is None
        if strategy != Strategy.RANDOM:
            assert move == 2
    print("  ✓ AI strategies OK")


def test_game_controller():
    """Play one full game against minimax."""
    print("\n=== Testing Game Controller ===")
    from logic.game_controller import GameController
    from logic.game_state import Player

    results = []
    controller = GameController(strategy="minimax", on_outcome=results.append)

    while not controller.get_state().outcome.is_decided:
        board = controller.get_state().board
        controller.play_human_move(board.index(None))

    controller.game_state.print_board()
    assert len(results) == 1
    assert results[0].winner != Player.X
    print("  ✓ Game controller OK")


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    checks = {
        "Game Config": test_game_config,
        "Game Logic": test_game_logic,
        "AI Strategies": test_ai_strategies,
        "Game Controller": test_game_controller,
    }

    results = {}
    for name, check in checks.items():
        try:
            check()
            results[name] = True
        except Exception as e:
            print(f"  ✗ {name} FAILED: {e}")
            traceback.print_exc()
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\n🎉 All tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
