"""
Game configuration for TicTacToe.
All the settings for players, AI strength, and the UI.
"""

from .board import Mark


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the game!
    """

    # ==================== PLAYERS ====================
    HUMAN_MARK = Mark.X      # Human always moves first
    COMPUTER_MARK = Mark.O

    # ==================== AI SETTINGS ====================
    # Score for a win found at the root. Depth is subtracted so
    # faster wins (and slower losses) score better.
    WIN_SCORE = 10

    # Chance that MEDIUM plays the optimal move instead of a random one
    MEDIUM_OPTIMAL_PROBABILITY = 0.7

    # Difficulty used when none (or an unknown one) is given
    DEFAULT_DIFFICULTY = "unbeatable"

    # Pause before the computer plays, so the human move is shown first
    THINKING_DELAY_MS = 500

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "AI Tic-Tac-Toe"
    BG_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WIN_CELL_COLOR = "#f59e0b"
    HUMAN_COLOR = "#60a5fa"
    COMPUTER_COLOR = "#f472b6"
    TITLE_FONT = ("Segoe UI", 20, "bold")
    CELL_FONT = ("Segoe UI", 32, "bold")
    LABEL_FONT = ("Segoe UI", 11)

    # Button colour per difficulty
    DIFFICULTY_COLORS = {
        "easy": "#4ade80",
        "medium": "#fbbf24",
        "unbeatable": "#f87171",
    }
