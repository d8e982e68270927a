"""
Tests for the minimax AI player.
Includes a cross-check against plain (unpruned) minimax and full games
proving the unbeatable AI never loses.
"""

from tictactoe_ai.ai_player import AIPlayer, best_move
from tictactoe_ai.board import (
    Mark, new_board, parse_board, get_empty_cells, next_mark,
)
from tictactoe_ai.win_checker import evaluate, OutcomeKind


def reference_best_move(board, mark):
    """Plain minimax with the same scoring and tie-break, no pruning."""
    opponent = mark.opposite()
    cache = {}

    def value(depth, maximizing):
        key = (tuple(board), depth)
        if key in cache:
            return cache[key]

        outcome = evaluate(board)
        if outcome.kind == OutcomeKind.WIN:
            result = 10 - depth if outcome.winner == mark else depth - 10
        elif outcome.kind == OutcomeKind.DRAW:
            result = 0
        else:
            scores = []
            for cell in get_empty_cells(board):
                board[cell] = mark if maximizing else opponent
                scores.append(value(depth + 1, not maximizing))
                board[cell] = None
            result = max(scores) if maximizing else min(scores)

        cache[key] = result
        return result

    best, best_score = None, float('-inf')
    for cell in get_empty_cells(board):
        board[cell] = mark
        score = value(0, False)
        board[cell] = None
        if score > best_score:
            best, best_score = cell, score
    return best


def reachable_positions(to_move):
    """All reachable non-terminal boards where `to_move` plays next."""
    seen = set()
    found = []

    def walk(board):
        key = tuple(board)
        if key in seen:
            return
        seen.add(key)
        if evaluate(board).is_terminal:
            return
        mark = next_mark(board)
        if mark == to_move:
            found.append(list(board))
        for cell in get_empty_cells(board):
            board[cell] = mark
            walk(board)
            board[cell] = None

    walk(new_board())
    return found


def test_takes_winning_move():
    # O at 0,1 and X at 3,4: cell 2 wins
    board = parse_board("OO./XX./...")
    assert AIPlayer(Mark.O).get_best_move(board) == 2


def test_blocks_losing_move():
    board = parse_board("XX./.O./...")
    assert AIPlayer(Mark.O).get_best_move(board) == 2


def test_prefers_faster_win():
    # X threatens 5, but winning at once scores higher than blocking
    board = parse_board("OO./XX./X..")
    ai = AIPlayer(Mark.O)
    assert ai.get_best_move(board) == 2


def test_single_empty_cell():
    board = parse_board("XOX/XOO/.XO")
    assert AIPlayer(Mark.O).get_best_move(board) == 6


def test_full_board_returns_none():
    assert AIPlayer(Mark.O).get_best_move(parse_board("XOX/XOO/OXX")) is None


def test_ties_keep_lowest_index():
    # On an empty board every move draws, so the first cell is chosen.
    # Against a corner opening only the centre holds the draw.
    assert best_move(new_board(), Mark.O) == 0
    assert best_move(parse_board("X../.../..."), Mark.O) == 4


def test_board_restored_after_search():
    board = parse_board("X../.O./..X")
    before = list(board)
    AIPlayer(Mark.O).get_best_move(board)
    assert board == before


def test_counts_positions_evaluated():
    ai = AIPlayer(Mark.O)
    ai.get_best_move(parse_board("X../.../..."))
    first = ai.positions_evaluated
    assert first > 0

    # Counter restarts on each search
    ai.get_best_move(parse_board("XX./.O./..."))
    assert 0 < ai.positions_evaluated < first


def test_pruning_matches_plain_minimax():
    ai = AIPlayer(Mark.O)
    positions = reachable_positions(Mark.O)
    assert len(positions) > 100

    for board in positions:
        expected = reference_best_move(board, Mark.O)
        assert ai.get_best_move(board) == expected, board


def test_pruning_matches_plain_minimax_for_x():
    ai = AIPlayer(Mark.X)
    # Sample: every other position keeps the run short
    for board in reachable_positions(Mark.X)[::2]:
        if all(cell is None for cell in board):
            continue
        assert ai.get_best_move(board) == reference_best_move(board, Mark.X), board


def test_never_loses_against_any_opponent():
    """Try every sequence of X moves; O must never lose."""
    ai = AIPlayer(Mark.O)
    results = {Mark.X: 0, Mark.O: 0, None: 0}

    def play_x(board):
        for cell in get_empty_cells(board):
            board[cell] = Mark.X
            outcome = evaluate(board)
            if outcome.is_terminal:
                results[outcome.winner] += 1
            else:
                reply = ai.get_best_move(board)
                board[reply] = Mark.O
                outcome = evaluate(board)
                if outcome.is_terminal:
                    results[outcome.winner] += 1
                else:
                    play_x(board)
                board[reply] = None
            board[cell] = None

    play_x(new_board())

    assert results[Mark.X] == 0
    assert results[Mark.O] > 0
    assert results[None] > 0


def test_wins_when_position_is_winning():
    # X left (2, 4, 6) open: O wins at 6, which also blocks X
    board = parse_board("X.O/XO./..X")
    move = AIPlayer(Mark.O).get_best_move(board)
    board[move] = Mark.O
    assert evaluate(board).winner == Mark.O
