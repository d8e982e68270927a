"""
Difficulty levels for the TicTacToe AI.
Maps a difficulty to the strategy used to pick the computer's move.
"""

import random
from enum import Enum
from typing import Optional, Union

from .ai_player import AIPlayer
from .board import Board, Mark, get_empty_cells
from .config import GameConfig


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"              # Random moves
    MEDIUM = "medium"          # Mostly optimal, sometimes random
    UNBEATABLE = "unbeatable"  # Full minimax

    @classmethod
    def parse(cls, value: Union["Difficulty", str, None]) -> "Difficulty":
        """
        Turn a name like "Medium" into a Difficulty.

        Unknown values fall back to UNBEATABLE, which never plays
        an illegal or weaker move.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            for level in cls:
                if level.value == name:
                    return level
        print(f"Warning: Unknown difficulty {value!r}, using {cls.UNBEATABLE.value}")
        return cls.UNBEATABLE


def random_move(board: Board, rng=None) -> Optional[int]:
    """Get a random empty cell (easy difficulty)."""
    rng = rng or random
    empty_cells = get_empty_cells(board)
    return rng.choice(empty_cells) if empty_cells else None


def medium_move(board: Board, rng=None, mark: Mark = Mark.O) -> Optional[int]:
    """Get a somewhat strategic move (medium difficulty)."""
    rng = rng or random

    # One draw per move: mostly optimal, otherwise random
    if rng.random() < GameConfig.MEDIUM_OPTIMAL_PROBABILITY:
        return AIPlayer(mark).get_best_move(board)
    return random_move(board, rng)


def select_move(
    board: Board,
    difficulty: Union[Difficulty, str],
    rng=None,
    mark: Mark = Mark.O
) -> Optional[int]:
    """
    Pick the computer's move for the given difficulty.

    Args:
        board: Current board (9 cells), with `mark` to move.
            Not modified.
        difficulty: A Difficulty or its name.
        rng: Random source with random() and choice(),
            defaults to the random module.
        mark: The mark the computer plays.

    Returns:
        Index of an empty cell, or None if the board is full.
    """
    level = Difficulty.parse(difficulty)

    # Work on a copy so callers never see a half-explored board
    board = list(board)

    if level == Difficulty.EASY:
        return random_move(board, rng)
    elif level == Difficulty.MEDIUM:
        return medium_move(board, rng, mark)
    else:
        return AIPlayer(mark).get_best_move(board)
