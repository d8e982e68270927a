"""
AI Tic-Tac-Toe UI
A graphical interface for the game using Tkinter.

Shows:
- Score for the human, the AI, and draws
- Difficulty level selection
- The 3x3 board, with the winning line highlighted
- Game status ("AI is thinking...", result)
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from tictactoe_ai.config import GameConfig
from tictactoe_ai.difficulty import Difficulty
from tictactoe_ai.game_state import GameSession


class TicTacToeUI:
    """
    Main UI class for AI Tic-Tac-Toe.

    The human clicks a cell; the computer's reply is scheduled with
    root.after so the human's mark is drawn before the AI searches.
    """

    def __init__(self, difficulty: str = GameConfig.DEFAULT_DIFFICULTY,
                 delay_ms: int = GameConfig.THINKING_DELAY_MS):
        """Initialize the UI."""
        self.config = GameConfig()
        self.session = GameSession(difficulty=difficulty, verbose=True)
        self.delay_ms = delay_ms

        # Pending root.after id for the computer's move
        self.pending_move: Optional[str] = None

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG_COLOR)
        self.root.resizable(False, False)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BG_COLOR)
        style.configure('TLabel', background=cfg.BG_COLOR, foreground='white', font=cfg.LABEL_FONT)
        style.configure('Title.TLabel', font=cfg.TITLE_FONT, foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 14, 'bold'), foreground='#ffd700')
        style.configure('Score.TLabel', font=('Segoe UI', 18, 'bold'))

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        ttk.Label(main_frame, text=cfg.WINDOW_TITLE, style='Title.TLabel').pack(pady=(0, 15))

        # Score section
        score_frame = ttk.Frame(main_frame)
        score_frame.pack(pady=5)

        self.score_labels = {}
        for key, caption in (("player", "You (X)"), ("draws", "Draws"), ("ai", "AI (O)")):
            column = ttk.Frame(score_frame)
            column.pack(side=tk.LEFT, padx=20)
            value = ttk.Label(column, text="0", style='Score.TLabel')
            value.pack()
            ttk.Label(column, text=caption).pack()
            self.score_labels[key] = value

        # Difficulty section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(main_frame, text="Difficulty Level").pack()

        diff_frame = ttk.Frame(main_frame)
        diff_frame.pack(pady=10)

        self.diff_buttons = {}
        for level in Difficulty:
            btn = tk.Button(
                diff_frame,
                text=level.value.capitalize(),
                font=('Segoe UI', 10, 'bold'),
                width=10,
                activebackground=cfg.DIFFICULTY_COLORS[level.value],
                command=lambda lv=level: self._set_difficulty(lv)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[level] = btn

        # Board section
        self.board_frame = ttk.Frame(main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Button(
                self.board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=3,
                height=1,
                bg=cfg.CELL_COLOR,
                activebackground=cfg.CELL_COLOR,
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            cell.grid(row=row, column=col, padx=3, pady=3)
            self.board_cells.append(cell)

        # Game status
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=10)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Scores",
            font=('Segoe UI', 11),
            bg='#2d3748',
            fg='white',
            width=12,
            command=self._reset_scores
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_cell_click(self, index: int):
        """Handle a click on a board cell."""
        result = self.session.play_human_move(index)
        if not result.is_valid:
            return

        self._refresh()

        if self.session.is_thinking:
            # Let the human's move render before the AI searches
            self.pending_move = self.root.after(self.delay_ms, self._computer_move)

    def _computer_move(self):
        """Play the AI's move (runs on the UI thread)."""
        self.pending_move = None
        self.session.play_computer_move()
        self._refresh()

    def _cancel_pending_move(self):
        if self.pending_move is not None:
            self.root.after_cancel(self.pending_move)
            self.pending_move = None

    def _set_difficulty(self, level: Difficulty):
        """Set the AI difficulty level. Starts a new game."""
        self._cancel_pending_move()
        self.session.set_difficulty(level)
        self._refresh()

    def _new_game(self):
        """Reset the board, keeping scores."""
        self._cancel_pending_move()
        self.session.new_game()
        self._refresh()

    def _reset_scores(self):
        self._cancel_pending_move()
        self.session.reset_scores()
        self._refresh()

    def _refresh(self):
        """Redraw board, scores, difficulty buttons and status."""
        cfg = self.config
        session = self.session
        winning_line = session.winning_line or ()
        locked = session.is_game_over or session.is_thinking

        for index, cell in enumerate(self.board_cells):
            mark = session.board[index]
            if mark is None:
                text, fg = "", 'white'
            elif mark == session.human_mark:
                text, fg = mark.value, cfg.HUMAN_COLOR
            else:
                text, fg = mark.value, cfg.COMPUTER_COLOR

            bg = cfg.WIN_CELL_COLOR if index in winning_line else cfg.CELL_COLOR
            cell.configure(
                text=text,
                fg=fg,
                bg=bg,
                disabledforeground=fg,
                state='disabled' if locked else 'normal'
            )

        self.score_labels["player"].configure(text=str(session.scores.player_wins))
        self.score_labels["draws"].configure(text=str(session.scores.draws))
        self.score_labels["ai"].configure(text=str(session.scores.computer_wins))

        for level, btn in self.diff_buttons.items():
            if level == session.difficulty:
                btn.configure(bg=cfg.DIFFICULTY_COLORS[level.value], fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

        if session.is_game_over:
            status = session.result_message()
        elif session.is_thinking:
            status = "AI is thinking..."
        else:
            status = f"Your turn ({session.human_mark.value})"
        self.status_label.configure(text=status)

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_pending_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="AI Tic-Tac-Toe UI")
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

    args = parser.parse_args()

    ui = TicTacToeUI(difficulty=args.difficulty, delay_ms=args.delay)
    ui.run()


if __name__ == "__main__":
    main()
