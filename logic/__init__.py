"""
Logic module for TicTacToe.
Handles the board, win detection, and the computer opponent.
"""

__version__ = "1.0.0"

from .game_state import Board, Cell, Coordinate, Move, InvalidMove, PreconditionViolation
from .win_checker import WinChecker, Outcome, evaluate
from .threat_detector import ThreatDetector, find_winning_cell
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer, RandomAI, SmartAI, GeniusAI, Strategy, create_ai_player
from .game_controller import GameController, apply_human_move, apply_opponent_move
from .config import GameConfig
