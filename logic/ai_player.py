"""
Computer opponents for TicTacToe.

Three interchangeable strategies share one interface:
- RandomAI: any empty cell, picked at random
- SmartAI: center, then corners, then random
- GeniusAI: center, then win, then block, then SmartAI
"""

import random
from enum import Enum
from typing import Dict, Optional, Type
from .game_state import Board, Cell, Coordinate, CENTER, CORNERS, BOARD_SIZE, PreconditionViolation
from .threat_detector import ThreatDetector


class Strategy(Enum):
    """Available computer strategies."""
    RANDOM = "random"
    SMART = "smart"
    GENIUS = "genius"

    @classmethod
    def parse(cls, name: str) -> "Strategy":
        """Look up a strategy by name, ignoring case."""
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(s.value for s in cls)
            raise ValueError(f"Unknown strategy {name!r}. Choose one of: {choices}") from None


class AIPlayer:
    """
    Base class for a computer opponent.

    Subclasses implement `_pick` and may assume the board has at least
    one empty cell. They never modify the board: the game controller
    applies the returned move.
    """

    strategy: Strategy

    def __init__(self, player: Cell = Cell.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source, for reproducible games
        """
        if player is Cell.EMPTY:
            raise ValueError("The AI must play X or O")
        self.player = player
        self.rng = rng or random.Random()

    def choose_move(self, board: Board) -> Coordinate:
        """
        Pick the cell to claim next.

        Args:
            board: Current board, with at least one empty cell.

        Returns:
            (row, col) of an empty cell.

        Raises:
            PreconditionViolation: If the board is already full.
        """
        if board.is_full():
            raise PreconditionViolation(
                f"{type(self).__name__} asked to move on a full board"
            )
        return self._pick(board)

    def _pick(self, board: Board) -> Coordinate:
        raise NotImplementedError

    def get_move_suggestion(self, board: Board) -> str:
        """
        Get a human-readable move suggestion.
        """
        if board.is_full():
            return "No moves available!"

        move = self.choose_move(board)
        return f"Place '{self.player.symbol}' at {move.label}"


class RandomAI(AIPlayer):
    """Claims a uniformly random empty cell."""

    strategy = Strategy.RANDOM

    def _pick(self, board: Board) -> Coordinate:
        # Terminates because choose_move guarantees an empty cell exists
        while True:
            row = self.rng.randrange(BOARD_SIZE)
            col = self.rng.randrange(BOARD_SIZE)
            if board.is_empty(row, col):
                return Coordinate(row, col)


class SmartAI(AIPlayer):
    """Prefers the center, then the corners, then plays randomly."""

    strategy = Strategy.SMART

    def __init__(self, player: Cell = Cell.O, rng: Optional[random.Random] = None):
        super().__init__(player, rng)
        self.fallback = RandomAI(player, self.rng)

    def _pick(self, board: Board) -> Coordinate:
        if board[CENTER] is Cell.EMPTY:
            return CENTER

        for corner in CORNERS:
            if board[corner] is Cell.EMPTY:
                return corner

        return self.fallback.choose_move(board)


class GeniusAI(AIPlayer):
    """
    Attacks and defends.

    Decision order per turn:
    1. Take the center if it is free
    2. Complete our own line if we can win now
    3. Block the opponent's line if they could win next turn
    4. Otherwise play like SmartAI

    Winning is checked before blocking; swapping them makes the AI weaker.
    """

    strategy = Strategy.GENIUS

    def __init__(self, player: Cell = Cell.O, rng: Optional[random.Random] = None):
        super().__init__(player, rng)
        self.threat_detector = ThreatDetector()
        self.fallback = SmartAI(player, self.rng)

    def _pick(self, board: Board) -> Coordinate:
        if board[CENTER] is Cell.EMPTY:
            return CENTER

        win = self.threat_detector.find_winning_cell(board, self.player)
        if win is not None:
            return win

        block = self.threat_detector.find_winning_cell(board, self.player.opposite())
        if block is not None:
            return block

        return self.fallback.choose_move(board)


STRATEGY_CLASSES: Dict[Strategy, Type[AIPlayer]] = {
    Strategy.RANDOM: RandomAI,
    Strategy.SMART: SmartAI,
    Strategy.GENIUS: GeniusAI,
}


def create_ai_player(
    strategy: Strategy = Strategy.GENIUS,
    player: Cell = Cell.O,
    rng: Optional[random.Random] = None
) -> AIPlayer:
    """Build the AI player for a strategy."""
    if isinstance(strategy, str):
        strategy = Strategy.parse(strategy)
    return STRATEGY_CLASSES[strategy](player, rng)


# Quick test
if __name__ == "__main__":
    print("Testing AI players...")

    board = Board.from_rows(["xx ", " o ", "   "])
    print(board)
    print("\nO to move. X is about to win with C0!")

    for strategy in Strategy:
        ai = create_ai_player(strategy, Cell.O, random.Random(0))
        print(f"  {strategy.value:>6}: {ai.get_move_suggestion(board)}")

    print("\nAI player test done!")
