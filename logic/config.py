"""
Game configuration for TicTacToe.
Defaults for the players, the computer's strategy and turn order.
"""

from .game_state import Cell


class GameConfig:
    """
    Configuration class for game settings.
    Command line options in main.py override these values.
    """

    # ==================== PLAYERS ====================
    HUMAN_PLAYER = Cell.X
    COMPUTER_PLAYER = Cell.O

    # ==================== COMPUTER ====================
    # One of "random", "smart", "genius"
    DEFAULT_STRATEGY = "genius"

    # Seed for the computer's random choices (None = different every game)
    RANDOM_SEED = None

    # Pause before the computer moves in the window UI, so it feels like thinking
    COMPUTER_MOVE_DELAY_MS = 400

    # ==================== TURN ORDER ====================
    # "human", "computer", or "random" for a coin flip each game
    FIRST_PLAYER = "random"
    FIRST_PLAYER_CHOICES = ("human", "computer", "random")

    # ==================== DEBUG SETTINGS ====================
    VERBOSE = True
