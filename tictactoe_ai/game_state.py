"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the result, and the session scores.
"""

from enum import Enum
from typing import Optional, List, Tuple, Union
from dataclasses import dataclass, field

from .board import Board, Mark, new_board, print_board
from .config import GameConfig
from .difficulty import Difficulty, select_move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import evaluate, Outcome, ONGOING


class GamePhase(Enum):
    """Turn sequencing states."""
    HUMAN_TURN = "human_turn"
    COMPUTER_THINKING = "computer_thinking"
    GAME_OVER = "game_over"


@dataclass
class ScoreTally:
    """Games won by each side, and draws, for this session."""
    player_wins: int = 0
    computer_wins: int = 0
    draws: int = 0

    def record(self, outcome: Outcome, human_mark: Mark = Mark.X):
        """Count one finished game."""
        if outcome.is_draw:
            self.draws += 1
        elif outcome.winner == human_mark:
            self.player_wins += 1
        elif outcome.winner is not None:
            self.computer_wins += 1

    def reset(self):
        self.player_wins = 0
        self.computer_wins = 0
        self.draws = 0


@dataclass
class GameSession:
    """
    One human vs computer session.

    Game flow:
    1. HUMAN_TURN: human places X (play_human_move)
    2. COMPUTER_THINKING: the front end waits, then calls play_computer_move
    3. Back to HUMAN_TURN, or GAME_OVER once someone wins or the board fills

    Scores survive new games and only clear with reset_scores.
    """

    difficulty: Difficulty = Difficulty.parse(GameConfig.DEFAULT_DIFFICULTY)
    rng: object = None
    verbose: bool = False

    board: Board = field(default_factory=new_board)
    phase: GamePhase = GamePhase.HUMAN_TURN
    outcome: Outcome = ONGOING
    scores: ScoreTally = field(default_factory=ScoreTally)

    # Move history as (mark, cell)
    moves: List[Tuple[Mark, int]] = field(default_factory=list)

    def __post_init__(self):
        self.difficulty = Difficulty.parse(self.difficulty)
        self.human_mark = GameConfig.HUMAN_MARK
        self.computer_mark = GameConfig.COMPUTER_MARK
        self.validator = MoveValidator()

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_thinking(self) -> bool:
        return self.phase == GamePhase.COMPUTER_THINKING

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.outcome.line

    def new_game(self):
        """Clear the board for a new round. Scores are kept."""
        self.board = new_board()
        self.phase = GamePhase.HUMAN_TURN
        self.outcome = ONGOING
        self.moves = []

    def reset_scores(self):
        """Zero the tally and start a new game."""
        self.scores.reset()
        self.new_game()

    def set_difficulty(self, difficulty: Union[Difficulty, str]):
        """Switch AI strength. Starts a new game."""
        self.difficulty = Difficulty.parse(difficulty)
        if self.verbose:
            print(f"Difficulty set to: {self.difficulty.value}")
        self.new_game()

    def play_human_move(self, cell: int) -> ValidationResult:
        """
        Place the human's mark.

        Args:
            cell: Cell index (0-8).

        Returns:
            ValidationResult. On failure nothing changes.
        """
        if self.phase != GamePhase.HUMAN_TURN:
            message = ("Game is already over!" if self.is_game_over
                       else "Wait for the computer to move!")
            return ValidationResult(is_valid=False, error_message=message)

        result = self.validator.validate_move(self.board, cell)
        if not result.is_valid:
            return result

        self._place(self.human_mark, cell)
        return result

    def play_computer_move(self) -> Optional[int]:
        """
        Let the computer pick and play its move.

        Returns:
            The cell played, or None if it isn't the computer's turn.
        """
        if self.phase != GamePhase.COMPUTER_THINKING:
            return None

        move = select_move(self.board, self.difficulty, self.rng, self.computer_mark)
        if move is None:
            return None

        self._place(self.computer_mark, move)
        return move

    def _place(self, mark: Mark, cell: int):
        """Put a mark down, then update phase, outcome and scores."""
        self.board[cell] = mark
        self.moves.append((mark, cell))

        if self.verbose:
            who = "Human" if mark == self.human_mark else "Computer"
            print(f">>> {who} placed {mark.value} at {cell}")

        self.outcome = evaluate(self.board)

        if self.outcome.is_terminal:
            self.phase = GamePhase.GAME_OVER
            self.scores.record(self.outcome, self.human_mark)
            if self.verbose:
                print(f">>> {self.result_message()}")
        elif mark == self.human_mark:
            self.phase = GamePhase.COMPUTER_THINKING
        else:
            self.phase = GamePhase.HUMAN_TURN

    def result_message(self) -> str:
        """Text for the end of the game, empty while it is running."""
        if not self.outcome.is_terminal:
            return ""
        if self.outcome.is_draw:
            return "It's a Draw!"
        if self.outcome.winner == self.human_mark:
            return "You Win!"
        return "AI Wins!"

    def print_board(self):
        """Print the board and game info to console."""
        print_board(self.board)

        if self.is_game_over:
            print(self.result_message())
        elif self.is_thinking:
            print("AI is thinking...")
        else:
            print(f"Your turn ({self.human_mark.value})")

        print(f"Score - You: {self.scores.player_wins}  "
              f"Draws: {self.scores.draws}  "
              f"AI: {self.scores.computer_wins}  "
              f"[{self.difficulty.value}]")


# Quick test
if __name__ == "__main__":
    print("Testing GameSession...")

    session = GameSession(verbose=True)

    # Human plays the corners, computer answers each time
    for cell in (0, 8, 2, 6, 1, 3, 5, 7):
        if session.is_game_over:
            break
        if not session.play_human_move(cell).is_valid:
            continue
        session.play_computer_move()
        session.print_board()

    assert session.outcome.winner != Mark.X, "Unbeatable AI lost!"
    print("\nGame state test done!")
