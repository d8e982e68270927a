"""
Board model for the TicTacToe game.
A board is a flat list of 9 cells, row-major, each None (empty) or a Mark.
"""

from enum import Enum
from typing import Optional, List


class Mark(Enum):
    """The two marks that can be placed on the board."""
    X = "X"     # Human, always moves first
    O = "O"     # Computer

    def opposite(self) -> "Mark":
        """Get the other mark."""
        return Mark.O if self == Mark.X else Mark.X


Board = List[Optional[Mark]]

BOARD_CELLS = 9

# Characters accepted as an empty cell when parsing a board string
EMPTY_CHARS = ".- _"


def new_board() -> Board:
    """Create an empty 3x3 board."""
    return [None] * BOARD_CELLS


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        List of cell indices (0-8), in ascending order.
    """
    return [index for index, cell in enumerate(board) if cell is None]


def count_marks(board: Board, mark: Mark) -> int:
    """Count how many cells hold the given mark."""
    return sum(1 for cell in board if cell == mark)


def next_mark(board: Board) -> Mark:
    """Whose turn it is, assuming X moved first."""
    if count_marks(board, Mark.X) > count_marks(board, Mark.O):
        return Mark.O
    return Mark.X


def parse_board(text: str) -> Board:
    """
    Build a board from a 9 character string like "XX.O.O...".

    Args:
        text: Cells in row-major order. X and O (any case) are marks,
            '.', '-', '_' or space are empty. Slashes or newlines between
            rows are ignored.

    Returns:
        The parsed board.

    Raises:
        ValueError: If the text is not exactly 9 cells or has an
            unknown character.
    """
    cells = [char for char in text if char not in "/\n"]
    if len(cells) != BOARD_CELLS:
        raise ValueError(f"Board must have {BOARD_CELLS} cells, got {len(cells)}")

    board = new_board()
    for index, char in enumerate(cells):
        if char in EMPTY_CHARS:
            continue
        try:
            board[index] = Mark(char.upper())
        except ValueError:
            raise ValueError(f"Invalid cell {char!r} at index {index}") from None
    return board


def format_board(board: Board) -> str:
    """Inverse of parse_board: 9 characters, '.' for empty."""
    return "".join(cell.value if cell else "." for cell in board)


def print_board(board: Board, show_indices: bool = True):
    """Print the board to console. Empty cells show their index."""
    print()
    for row in range(3):
        row_str = " "
        for col in range(3):
            index = row * 3 + col
            cell = board[index]
            if cell is not None:
                row_str += cell.value
            elif show_indices:
                row_str += str(index)
            else:
                row_str += " "
            if col < 2:
                row_str += " | "
        print(row_str)
        if row < 2:
            print("---+---+---")
    print()


# Quick test
if __name__ == "__main__":
    print("Testing board helpers...")

    board = parse_board("XX./.O./...")
    print_board(board)

    print(f"Empty cells: {get_empty_cells(board)}")
    print(f"Next to move: {next_mark(board).value}")
    assert format_board(board) == "XX..O...."
    assert next_mark(board) == Mark.O

    print("\nBoard test done!")
