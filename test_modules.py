"""
Tests for the board helpers, move validator and command line.
Run this to verify all components work before playing.
"""

import pytest

import main
from tictactoe_ai import select_move, GameSession, Difficulty
from tictactoe_ai.board import (
    Mark, new_board, parse_board, format_board, get_empty_cells, next_mark,
)
from tictactoe_ai.move_validator import MoveValidator


# ==================== BOARD ====================

def test_parse_and_format_board():
    board = parse_board("xo.-_ X/O.")
    assert board[:3] == [Mark.X, Mark.O, None]
    assert format_board(board) == "XO....XO."
    assert get_empty_cells(board) == [2, 3, 4, 5, 8]


def test_parse_board_rejects_bad_input():
    with pytest.raises(ValueError):
        parse_board("XO")
    with pytest.raises(ValueError):
        parse_board("XOZ......")


def test_next_mark():
    assert next_mark(new_board()) == Mark.X
    assert next_mark(parse_board("X........")) == Mark.O
    assert next_mark(parse_board("XO.......")) == Mark.X
    assert Mark.X.opposite() == Mark.O


# ==================== MOVE VALIDATOR ====================

def test_validate_board():
    validator = MoveValidator()
    assert validator.validate_board(new_board()).is_valid
    assert validator.validate_board(parse_board("XXO/O../...")).is_valid

    result = validator.validate_board([None] * 8)
    assert not result.is_valid and "9 cells" in result.error_message

    assert not validator.validate_board([None] * 8 + ["X"]).is_valid
    assert not validator.validate_board(parse_board("XX.......")).is_valid
    assert not validator.validate_board(parse_board("O........")).is_valid


def test_validate_computer_turn():
    validator = MoveValidator()
    assert validator.validate_computer_turn(parse_board("X........")).is_valid
    assert not validator.validate_computer_turn(new_board()).is_valid
    assert not validator.validate_computer_turn(parse_board("XXX/OO./...")).is_valid


def test_validate_move():
    validator = MoveValidator()
    board = parse_board("X...O....")
    assert validator.validate_move(board, 1).is_valid

    result = validator.validate_move(board, 4)
    assert not result.is_valid and "occupied" in result.error_message
    assert not validator.validate_move(board, 9).is_valid
    assert validator.get_valid_moves(board) == [1, 2, 3, 5, 6, 7, 8]
    assert validator.get_valid_moves(parse_board("XXX/OO./...")) == []


# ==================== COMMAND LINE ====================

def test_suggest_move(capsys):
    assert main.suggest_move("XX./.O./...", "unbeatable") == 2
    assert "XX..O.... -> 2" in capsys.readouterr().out


def test_suggest_move_rejects_bad_boards(capsys):
    assert main.suggest_move("XX", "unbeatable") is None
    assert main.suggest_move("XXX/OO./...", "unbeatable") is None
    assert main.suggest_move(".........", "unbeatable") is None
    assert capsys.readouterr().out.count("ERROR") == 3


def test_main_board_mode(capsys):
    assert main.main(["--board", "OO.XX....", "--difficulty", "unbeatable"]) == 1
    assert main.main(["--board", "OO.XX.X..", "--difficulty", "unbeatable"]) == 0
    assert "-> 2" in capsys.readouterr().out


def test_console_game(monkeypatch, capsys):
    game = main.ConsoleGame(difficulty="unbeatable", delay_ms=0)
    commands = iter(["4", "4", "d easy", "0", "r", "q"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))

    game.start()

    out = capsys.readouterr().out
    assert "already occupied" in out
    assert "Difficulty set to: easy" in out
    assert "Scores reset!" in out
    assert game.session.difficulty == Difficulty.EASY
    assert not game.is_running


def test_package_exports():
    assert select_move(parse_board("XX./.O./..."), "unbeatable") == 2
    assert GameSession().difficulty == Difficulty.UNBEATABLE
