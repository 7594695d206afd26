"""
Move validator for TicTacToe.
Checks that a human move targets an empty cell on the board.
"""

from typing import List, Optional
from dataclasses import dataclass
from .game_state import Board, Cell, Coordinate


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. The position must be on the board (row and column 0-2)
    2. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if row/col are in valid range
        if not Coordinate(row, col).is_valid():
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 0-2."
            )

        # Check if cell is empty
        current = board.get(row, col)
        if current is not Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"That cell is not empty ({Coordinate(row, col).label} is '{current.symbol}'). Please try a different cell."
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[Coordinate]:
        """
        Get all positions a player may move to.
        """
        return board.get_empty_cells()
