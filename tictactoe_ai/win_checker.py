"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Mark


# All possible winning lines, checked in this order.
# When a (malformed) board completes several lines, the first one wins.
WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
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
)


class OutcomeKind(Enum):
    """Whether the game goes on, was won, or is drawn."""
    NONE = "none"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a board.

    winner and line are only set when kind is WIN.
    """
    kind: OutcomeKind
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.kind != OutcomeKind.NONE

    @property
    def is_draw(self) -> bool:
        return self.kind == OutcomeKind.DRAW


ONGOING = Outcome(OutcomeKind.NONE)
DRAW = Outcome(OutcomeKind.DRAW)


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """
    Get the first complete line in scan order.

    Args:
        board: The game board.

    Returns:
        The winning line as an index triple, or None.
    """
    for line in WIN_PATTERNS:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def check_winner(board: Board) -> Optional[Mark]:
    """Return the winning Mark, or None if no line is complete."""
    line = get_winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_board_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def evaluate(board: Board) -> Outcome:
    """
    Evaluate a board without modifying it.

    Args:
        board: The game board.

    Returns:
        WIN with the winner and line, DRAW if the board is full,
        otherwise the ongoing (NONE) outcome.
    """
    line = get_winning_line(board)
    if line is not None:
        return Outcome(OutcomeKind.WIN, winner=board[line[0]], line=line)

    if is_board_full(board):
        return DRAW

    return ONGOING


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 of the same mark in a row
    (horizontally, vertically, or diagonally)
    """

    WIN_PATTERNS = WIN_PATTERNS

    def evaluate(self, board: Board) -> Outcome:
        return evaluate(board)

    def check_winner(self, board: Board) -> Optional[Mark]:
        return check_winner(board)

    def check_draw(self, board: Board) -> bool:
        """True if the board is full and nobody has a line."""
        return evaluate(board).is_draw

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        return get_winning_line(board)


# Quick test
if __name__ == "__main__":
    from .board import parse_board

    print("Testing WinChecker...")

    checker = WinChecker()

    # Test 1: Horizontal win
    outcome = checker.evaluate(parse_board("XXX/OO./..."))
    print(f"Test 1 (horizontal): {outcome}")
    assert outcome.winner == Mark.X and outcome.line == (0, 1, 2)

    # Test 2: Vertical win
    outcome = checker.evaluate(parse_board("OX./OX./O.."))
    print(f"Test 2 (vertical): {outcome}")
    assert outcome.winner == Mark.O and outcome.line == (0, 3, 6)

    # Test 3: No winner
    outcome = checker.evaluate(parse_board("XO./.O./..."))
    print(f"Test 3 (no winner): {outcome}")
    assert not outcome.is_terminal

    # Test 4: Draw (full board, no winner)
    is_draw = checker.check_draw(parse_board("XOX/XOO/OXX"))
    print(f"Test 4 (draw): is_draw = {is_draw}")
    assert is_draw

    print("\nWinChecker test done!")
