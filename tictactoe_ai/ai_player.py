"""
AI player for TicTacToe.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import Optional

from .board import Board, Mark, get_empty_cells
from .config import GameConfig
from .win_checker import evaluate, OutcomeKind


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The AI will always play optimally - it will win if possible,
    block the opponent if needed, and never lose (at worst, draw).
    Ties between equally good moves go to the lowest cell index.
    """

    def __init__(self, mark: Mark = Mark.O, verbose: bool = False):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            verbose: Print search statistics after each move.
        """
        self.mark = mark
        self.opponent = mark.opposite()
        self.verbose = verbose
        self.win_score = GameConfig.WIN_SCORE

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> Optional[int]:
        """
        Get the best move for the current position.

        The board is modified while searching but always restored
        before returning.

        Args:
            board: Current board, with the AI to move.

        Returns:
            Cell index of the best move, or None if no moves available.
        """
        self.positions_evaluated = 0

        valid_moves = get_empty_cells(board)

        if not valid_moves:
            return None

        # Special case: if only one move, just take it
        if len(valid_moves) == 1:
            return valid_moves[0]

        best_score = float('-inf')
        best_move = valid_moves[0]

        for cell in valid_moves:
            # Try this move
            board[cell] = self.mark
            try:
                score = self._minimax(board, depth=0, is_maximizing=False)
            finally:
                board[cell] = None

            # Strictly greater keeps the first (lowest index) of equal moves
            if score > best_score:
                best_score = score
                best_move = cell

        if self.verbose:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: Board,
        depth: int,
        is_maximizing: bool,
        alpha: float = float('-inf'),
        beta: float = float('inf')
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            board: Board to evaluate (restored before returning).
            depth: Plies played below the move being scored.
            is_maximizing: True if it's the AI's turn.
            alpha: Alpha value for pruning.
            beta: Beta value for pruning.

        Returns:
            The score of the position from the AI's point of view.
        """
        self.positions_evaluated += 1

        # Check terminal states
        outcome = evaluate(board)

        if outcome.kind == OutcomeKind.WIN:
            if outcome.winner == self.mark:
                return self.win_score - depth  # Win (prefer faster wins)
            return depth - self.win_score  # Loss (prefer slower losses)
        elif outcome.kind == OutcomeKind.DRAW:
            return 0

        if is_maximizing:
            max_score = float('-inf')
            for cell in get_empty_cells(board):
                board[cell] = self.mark
                try:
                    score = self._minimax(board, depth + 1, False, alpha, beta)
                finally:
                    board[cell] = None
                max_score = max(max_score, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    break  # Prune
            return max_score
        else:
            min_score = float('inf')
            for cell in get_empty_cells(board):
                board[cell] = self.opponent
                try:
                    score = self._minimax(board, depth + 1, True, alpha, beta)
                finally:
                    board[cell] = None
                min_score = min(min_score, score)
                beta = min(beta, score)
                if beta <= alpha:
                    break  # Prune
            return min_score


def best_move(board: Board, mark: Mark = Mark.O) -> Optional[int]:
    """Optimal move for `mark` on `board`, or None if the board is full."""
    return AIPlayer(mark).get_best_move(board)


# Quick test
if __name__ == "__main__":
    from .board import parse_board, print_board

    print("Testing AIPlayer...")

    ai = AIPlayer(Mark.O, verbose=True)

    # Test 1: AI should block a winning move
    board = parse_board("XX./.O./...")
    print_board(board)
    print("AI is O. X is about to win with cell 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    board = parse_board("OO./XX./...")
    print_board(board)
    print("AI is O. Can win with cell 2!")

    move = ai.get_best_move(board)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
