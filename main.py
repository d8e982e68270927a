"""
Main script for AI Tic-Tac-Toe.

Modes:
- UI (default): Tkinter window
- Console (--no-ui): play in the terminal
- Suggest (--board): print the computer's move for one position

Run this script to play TicTacToe against the computer!
"""

import sys
import time
from typing import Optional

from tictactoe_ai.board import parse_board, format_board
from tictactoe_ai.config import GameConfig
from tictactoe_ai.difficulty import Difficulty, select_move
from tictactoe_ai.game_state import GameSession
from tictactoe_ai.move_validator import MoveValidator


class ConsoleGame:
    """
    Console front end for a GameSession.

    Game flow:
    1. Human (X) types a cell number 0-8
    2. Computer (O) "thinks" for a moment, then answers
    3. Repeat until someone wins or it's a draw
    4. Scores are kept until the player resets them

    Commands: 0-8 play, n new game, r reset scores,
    d <level> change difficulty, q quit.
    """

    def __init__(self, difficulty: str = GameConfig.DEFAULT_DIFFICULTY,
                 delay_ms: int = GameConfig.THINKING_DELAY_MS):
        self.session = GameSession(difficulty=difficulty, verbose=True)
        self.delay_ms = delay_ms
        self.is_running = False

        print("\n" + "="*60)
        print("   AI Tic-Tac-Toe")
        print(f"   You play: {self.session.human_mark.value}")
        print(f"   AI plays: {self.session.computer_mark.value}")
        print(f"   Difficulty: {self.session.difficulty.value}")
        print("="*60 + "\n")

    def start(self):
        """Start the game."""
        print("Enter a cell 0-8. Commands: n = new game, r = reset scores,")
        print("d <easy|medium|unbeatable> = difficulty, q = quit\n")

        self.is_running = True
        self.session.print_board()

        while self.is_running:
            try:
                line = input("> ").strip().lower()
            except EOFError:
                break
            self._handle_command(line)

    def _handle_command(self, line: str):
        """Dispatch one line of input."""
        if not line:
            return

        if line == "q":
            print("\nGame quit by user.")
            self.is_running = False
        elif line == "n":
            self.session.new_game()
            print("New game!")
            self.session.print_board()
        elif line == "r":
            self.session.reset_scores()
            print("Scores reset!")
            self.session.print_board()
        elif line.startswith("d"):
            self.session.set_difficulty(line[1:].strip())
            self.session.print_board()
        elif line.isdigit():
            self._human_move(int(line))
        else:
            print(f"Unknown command: {line}")

    def _human_move(self, cell: int):
        """Play the human's move, then the computer's answer."""
        result = self.session.play_human_move(cell)
        if not result.is_valid:
            print(f"WARNING: {result.error_message}")
            return

        self.session.print_board()

        if self.session.is_thinking:
            self._computer_move()

    def _computer_move(self):
        """Wait for the thinking delay, then let the AI play."""
        time.sleep(self.delay_ms / 1000)
        self.session.play_computer_move()
        self.session.print_board()

        if self.session.is_game_over:
            print("Type n for a new game, q to quit.")


def suggest_move(board_text: str, difficulty: str) -> Optional[int]:
    """
    Print the computer's move for a single position.

    Returns:
        The chosen cell, or None if the board was rejected.
    """
    try:
        board = parse_board(board_text)
    except ValueError as e:
        print(f"ERROR: {e}")
        return None

    result = MoveValidator().validate_computer_turn(board)
    if not result.is_valid:
        print(f"ERROR: {result.error_message}")
        return None

    move = select_move(board, difficulty)
    print(f"{format_board(board)} -> {move}")
    return move


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="AI Tic-Tac-Toe")
    parser.add_argument(
        "--difficulty",
        choices=[level.value for level in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI strength (default: %(default)s)"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=GameConfig.THINKING_DELAY_MS,
        help="Milliseconds the AI 'thinks' before moving"
    )
    parser.add_argument(
        "--board",
        help="Print the AI's move for this board (9 chars of X, O, .) and exit"
    )
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )

    args = parser.parse_args(argv)

    # One-shot suggestion
    if args.board is not None:
        move = suggest_move(args.board, args.difficulty)
        return 0 if move is not None else 1

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        ui = TicTacToeUI(difficulty=args.difficulty, delay_ms=args.delay)
        ui.run()
        return 0

    # Console mode (--no-ui)
    game = ConsoleGame(difficulty=args.difficulty, delay_ms=args.delay)

    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
