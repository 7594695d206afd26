"""
Tests for the turn controller and the console game.
"""

import contextlib
import io
import random
import sys
from pathlib import Path
from unittest import mock

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.game_state import Board, Cell, Coordinate, PreconditionViolation
from logic.win_checker import Outcome
from logic.ai_player import GeniusAI, RandomAI, SmartAI, Strategy
from logic.threat_detector import find_winning_cell
from logic.game_controller import (
    GameController, apply_human_move, apply_opponent_move, evaluate
)
from frontend.move_parser import MoveParser
import main


def make_controller(first_player="human", seed=0, ai_class=GeniusAI):
    return GameController(ai=ai_class(Cell.O, random.Random(seed)), first_player=first_player)


# ==================== CORE FUNCTIONS ====================

def test_apply_human_move_function():
    board = Board()

    result = apply_human_move(board, Coordinate(0, 0))
    assert result.is_valid
    assert board.get(0, 0) is Cell.X

    result = apply_human_move(board, Coordinate(0, 0))
    assert not result.is_valid
    assert board.count(Cell.X) == 1

    result = apply_human_move(board, Coordinate(3, 1))
    assert not result.is_valid
    assert "Invalid position" in result.error_message


def test_apply_opponent_move_function():
    board = Board()
    move = apply_opponent_move(board, GeniusAI(Cell.O))
    assert move == Coordinate(1, 1)
    assert board[move] is Cell.O
    assert evaluate(board) is Outcome.IN_PROGRESS

    full = Board.from_rows(["xox", "xoo", "oxx"])
    try:
        apply_opponent_move(full, SmartAI(Cell.O))
    except PreconditionViolation:
        pass
    else:
        raise AssertionError("moved on a full board")


# ==================== CONTROLLER ====================

def test_controller_alternates_turns():
    controller = make_controller()
    assert controller.is_human_turn
    assert controller.outcome is Outcome.IN_PROGRESS

    assert controller.apply_human_move(Coordinate(0, 0)).is_valid
    assert controller.current_player is Cell.O

    result = controller.apply_human_move(Coordinate(2, 2))
    assert not result.is_valid
    assert result.error_message == "It's not your turn!"

    assert controller.apply_opponent_move() == Coordinate(1, 1)
    assert controller.is_human_turn

    assert [(m.player, m.coordinate, m.move_number) for m in controller.moves] == [
        (Cell.X, Coordinate(0, 0), 0),
        (Cell.O, Coordinate(1, 1), 1),
    ]


def test_controller_rejects_taken_cell_without_changing_anything():
    controller = make_controller()
    controller.apply_human_move(Coordinate(1, 1))
    controller.apply_opponent_move()

    before = str(controller.board)
    result = controller.apply_human_move(Coordinate(1, 1))
    assert not result.is_valid
    assert "not empty" in result.error_message
    assert str(controller.board) == before
    assert controller.is_human_turn
    assert len(controller.moves) == 2


def test_controller_computer_cannot_move_out_of_turn():
    controller = make_controller(first_player="human")
    try:
        controller.apply_opponent_move()
    except PreconditionViolation:
        pass
    else:
        raise AssertionError("computer moved on the human's turn")


def test_controller_stops_after_win():
    controller = make_controller(first_player="computer", ai_class=SmartAI)
    # Smart: center, then corners (0,0), (0,2); human plays the bottom row edges
    controller.apply_opponent_move()                     # O (1,1)
    controller.apply_human_move(Coordinate(2, 1))
    controller.apply_opponent_move()                     # O (0,0)
    controller.apply_human_move(Coordinate(1, 0))
    controller.apply_opponent_move()                     # O (0,2)
    controller.apply_human_move(Coordinate(1, 2))
    assert controller.apply_opponent_move() == Coordinate(2, 0)   # anti-diagonal

    assert controller.outcome is Outcome.O_WON
    assert controller.winner is Cell.O
    assert controller.get_winning_line() == (Coordinate(0, 2), Coordinate(1, 1), Coordinate(2, 0))

    result = controller.apply_human_move(Coordinate(2, 2))
    assert not result.is_valid
    assert result.error_message == "Game is already over!"

    try:
        controller.apply_opponent_move()
    except PreconditionViolation:
        pass
    else:
        raise AssertionError("computer moved after the game ended")


def test_controller_reset():
    controller = make_controller()
    controller.apply_human_move(Coordinate(0, 0))
    controller.reset()
    assert controller.board == Board()
    assert controller.moves == []
    assert controller.outcome is Outcome.IN_PROGRESS
    assert controller.is_human_turn


def test_coin_flip_picks_both_players():
    firsts = {make_controller(first_player="random", seed=seed).current_player for seed in range(30)}
    assert firsts == {Cell.X, Cell.O}


def test_controller_rejects_bad_settings():
    try:
        GameController(ai=GeniusAI(Cell.X))
    except ValueError:
        pass
    else:
        raise AssertionError("AI must play the computer's mark")

    try:
        GameController(first_player="nobody")
    except ValueError:
        pass
    else:
        raise AssertionError("unknown first player accepted")


def test_set_strategy_keeps_random_source():
    controller = make_controller()
    rng = controller.ai.rng
    controller.set_strategy(Strategy.RANDOM)
    assert isinstance(controller.ai, RandomAI)
    assert controller.ai.rng is rng
    assert controller.ai.player is Cell.O


def test_play_scripted_game_to_a_draw():
    parser = MoveParser()
    # "Z9" is unreadable, the second "A0" is taken; both are asked again
    inputs = iter(["Z9", "A0", "B0", "A0", "A2", "C1", "B2"])
    shown = []

    controller = make_controller()
    with contextlib.redirect_stdout(io.StringIO()) as out:
        outcome = controller.play(lambda c: parser.parse(next(inputs)), shown.append)

    assert outcome is Outcome.DRAW
    assert controller.board.is_full()
    assert str(controller.board) == "xxo\noox\nxxo"
    assert len(shown) == 9
    assert "Invalid column value" in out.getvalue()
    assert "not empty" in out.getvalue()


def test_genius_against_random_games_finish():
    for seed in range(40):
        controller = GameController(
            ai=GeniusAI(Cell.O, random.Random(seed)),
            first_player="random"
        )
        opponent = RandomAI(Cell.X, random.Random(1000 + seed))
        outcome = controller.play(lambda c: opponent.choose_move(c.board))

        assert outcome.is_over
        assert outcome is evaluate(controller.board)
        assert len(controller.moves) <= 9

        players = [m.player for m in controller.moves]
        assert all(a is not b for a, b in zip(players, players[1:]))
        if outcome.winner is not None:
            assert controller.moves[-1].player is outcome.winner


def test_genius_never_misses_a_win_in_play():
    for seed in range(40):
        controller = GameController(ai=GeniusAI(Cell.O, random.Random(seed)), first_player="human")
        opponent = RandomAI(Cell.X, random.Random(seed))
        while not controller.is_game_over:
            if controller.is_human_turn:
                controller.apply_human_move(opponent.choose_move(controller.board))
            else:
                win = find_winning_cell(controller.board, Cell.O)
                controller.apply_opponent_move()
                if win is not None:
                    assert controller.outcome is Outcome.O_WON, f"missed {win} (seed {seed})"


# ==================== CONSOLE GAME ====================

def test_console_game_draw():
    inputs = iter(["a 0", "b,0", "A2", "C 1", "b2"])
    game = main.TicTacToeGame(
        strategy=Strategy.GENIUS,
        first_player="human",
        seed=0,
        input_func=lambda prompt: next(inputs)
    )

    with contextlib.redirect_stdout(io.StringIO()) as out:
        outcome = game.start()

    assert outcome is Outcome.DRAW
    text = out.getvalue()
    assert "You tied!" in text
    assert "    A   B   C" in text
    assert ">>> Computer (o) took C0" in text


def test_console_game_loss():
    # Human wanders along the edges while Smart builds the anti-diagonal
    inputs = iter(["B2", "A1", "C1"])
    game = main.TicTacToeGame(
        strategy=Strategy.SMART,
        first_player="computer",
        seed=0,
        input_func=lambda prompt: next(inputs)
    )

    with contextlib.redirect_stdout(io.StringIO()) as out:
        outcome = game.start()

    assert outcome is Outcome.O_WON
    assert "You lose!" in out.getvalue()


def test_argument_parser_defaults():
    args = main.build_parser().parse_args([])
    assert args.strategy == "genius"
    assert args.first == "random"
    assert args.seed is None
    assert not args.ui

    args = main.build_parser().parse_args(["--strategy", "smart", "--first", "computer", "--seed", "3"])
    assert Strategy.parse(args.strategy) is Strategy.SMART
    assert args.seed == 3


def test_main_handles_end_of_input():
    with mock.patch("builtins.input", side_effect=EOFError):
        with contextlib.redirect_stdout(io.StringIO()) as out:
            code = main.main(["--first", "human", "--seed", "1"])

    assert code == 0
    assert "Game interrupted by user." in out.getvalue()
    assert "Goodbye!" in out.getvalue()


if __name__ == "__main__":
    from test_modules import run_tests
    sys.exit(run_tests(sys.modules[__name__]))
