"""
Move validator for TicTacToe.
Validates boards and moves before they reach the AI.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board, Mark, BOARD_CELLS, count_marks, get_empty_cells
from .win_checker import evaluate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe boards and moves.

    Rules:
    1. Board has exactly 9 cells, each empty, X or O
    2. X moves first, so X has the same number of marks as O or one more
    3. Can only place on empty cells
    4. Game must not be over
    """

    def validate_board(self, board: Board) -> ValidationResult:
        """
        Validate the shape and contents of a board.

        Args:
            board: Board to check.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if len(board) != BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board must have {BOARD_CELLS} cells, got {len(board)}"
            )

        for index, cell in enumerate(board):
            if cell is not None and not isinstance(cell, Mark):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Invalid cell {cell!r} at index {index}"
                )

        difference = count_marks(board, Mark.X) - count_marks(board, Mark.O)
        if difference not in (0, 1):
            return ValidationResult(
                is_valid=False,
                error_message=f"Impossible mark counts (X - O = {difference})"
            )

        return ValidationResult(is_valid=True)

    def validate_computer_turn(self, board: Board) -> ValidationResult:
        """
        Check that the computer can be asked for a move on this board.

        The board must be valid, not finished, and have O to move.
        """
        result = self.validate_board(board)
        if not result.is_valid:
            return result

        if evaluate(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if count_marks(board, Mark.X) == count_marks(board, Mark.O):
            return ValidationResult(
                is_valid=False,
                error_message="It's X's turn, not the computer's!"
            )

        return ValidationResult(is_valid=True)

    def validate_move(self, board: Board, cell: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            cell: Cell to place the mark (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if game is over
        if evaluate(board).is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is in valid range
        if not isinstance(cell, int) or not 0 <= cell < BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {cell}. Must be 0-8."
            )

        # Check if cell is empty
        if board[cell] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {board[cell].value}"
            )

        # All checks passed!
        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves for the player to move.

        Returns:
            List of cell indices, empty if the game is over.
        """
        if evaluate(board).is_terminal:
            return []
        return get_empty_cells(board)


# Quick test
if __name__ == "__main__":
    from .board import new_board

    print("Testing MoveValidator...")

    board = new_board()
    validator = MoveValidator()

    # Test valid move
    result = validator.validate_move(board, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    # Make the move
    board[4] = Mark.X

    # Test invalid move (same cell)
    result = validator.validate_move(board, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    # Test out of range
    result = validator.validate_move(board, 12)
    print(f"Move 12: valid={result.is_valid}, error={result.error_message}")

    # Get valid moves
    valid = validator.get_valid_moves(board)
    print(f"Valid moves: {valid}")

    print("\nMoveValidator test done!")
