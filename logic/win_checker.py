"""
Win checker for TicTacToe.
Decides whether a board is won, drawn or still in progress.
"""

from enum import Enum
from typing import List, Optional, Tuple
from .game_state import Board, Cell, Coordinate


class Outcome(Enum):
    """The result of evaluating a board."""
    IN_PROGRESS = "in_progress"
    X_WON = "x_won"
    O_WON = "o_won"
    DRAW = "draw"

    @classmethod
    def won_by(cls, player: Cell) -> "Outcome":
        if player is Cell.X:
            return cls.X_WON
        if player is Cell.O:
            return cls.O_WON
        raise ValueError("Only X or O can win")

    @property
    def winner(self) -> Optional[Cell]:
        """The winning player, or None for a draw / unfinished game."""
        if self is Outcome.X_WON:
            return Cell.X
        if self is Outcome.O_WON:
            return Cell.O
        return None

    @property
    def is_over(self) -> bool:
        return self is not Outcome.IN_PROGRESS


Line = Tuple[Coordinate, Coordinate, Coordinate]

# All 8 winning lines, in scan order: rows, columns, then the two diagonals
WINNING_LINES: List[Line] = [
    # Rows
    (Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)),
    (Coordinate(1, 0), Coordinate(1, 1), Coordinate(1, 2)),
    (Coordinate(2, 0), Coordinate(2, 1), Coordinate(2, 2)),
    # Columns
    (Coordinate(0, 0), Coordinate(1, 0), Coordinate(2, 0)),
    (Coordinate(0, 1), Coordinate(1, 1), Coordinate(2, 1)),
    (Coordinate(0, 2), Coordinate(1, 2), Coordinate(2, 2)),
    # Diagonals
    (Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2)),
    (Coordinate(0, 2), Coordinate(1, 1), Coordinate(2, 0)),
]

PLAYERS = (Cell.X, Cell.O)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells of the same player in a row
    (horizontally, vertically, or diagonally).
    Both players are checked the same way, X first.
    """

    def evaluate(self, board: Board) -> Outcome:
        """
        Classify the board.

        Args:
            board: The board to inspect. It is not modified.

        Returns:
            X_WON / O_WON if that player owns a full line, otherwise
            IN_PROGRESS while any cell is empty, otherwise DRAW.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.won_by(winner)

        if board.get_empty_cells():
            return Outcome.IN_PROGRESS

        return Outcome.DRAW

    def check_winner(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Returns:
            The winning player, or None if no line is complete.
        """
        for player in PLAYERS:
            if self.owns_line(board, player):
                return player
        return None

    def owns_line(self, board: Board, player: Cell) -> bool:
        """True if the player holds all three cells of at least one line."""
        return any(self._line_owner(board, line) is player for line in WINNING_LINES)

    def check_draw(self, board: Board) -> bool:
        """
        A draw is a full board with no completed line.
        """
        return self.evaluate(board) is Outcome.DRAW

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the completed line, if there is one.

        Returns:
            The winning line as three coordinates, or None.
        """
        winner = self.check_winner(board)
        if winner is None:
            return None
        for line in WINNING_LINES:
            if self._line_owner(board, line) is winner:
                return line
        return None

    def _line_owner(self, board: Board, line: Line) -> Optional[Cell]:
        """
        The player owning all three cells of the line, or None.
        """
        first = board[line[0]]
        if first is Cell.EMPTY:
            return None
        if all(board[pos] is first for pos in line[1:]):
            return first
        return None


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Classify a board as in progress, won by X or O, or drawn."""
    return _checker.evaluate(board)
