"""
AI Tic-Tac-Toe
==============
A human (X) plays against a computer (O) of selectable strength.
The computer's move comes from minimax with alpha-beta pruning,
optionally blended with random moves for the easier levels.

Difficulty: easy (random) -> medium (mostly optimal) -> unbeatable
"""

__version__ = "1.0.0"

from .board import Mark, new_board, parse_board, format_board, get_empty_cells
from .config import GameConfig
from .win_checker import WinChecker, Outcome, OutcomeKind, WIN_PATTERNS, evaluate
from .ai_player import AIPlayer, best_move
from .difficulty import Difficulty, select_move, random_move, medium_move
from .move_validator import MoveValidator, ValidationResult
from .game_state import GameSession, GamePhase, ScoreTally
