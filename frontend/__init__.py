"""
Frontend module for TicTacToe.
Handles drawing the board and reading the player's moves.
"""

from .config import FrontendConfig
from .board_renderer import BoardRenderer
from .move_parser import MoveParser
