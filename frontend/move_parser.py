"""
Move parser for TicTacToe.
Turns what the player types (e.g. "A 1") into a board coordinate.
"""

import re
from typing import Optional
from logic.game_state import Coordinate, InvalidMove
from .config import FrontendConfig


# Column letter, optional separator, row number
MOVE_PATTERN = re.compile(r"^\s*([A-Za-z])\s*[,;:\s]?\s*(-?\d+)\s*$")


class MoveParser:
    """
    Parses console input into a Coordinate.

    Input is a column letter followed by a row digit, with an optional
    space or comma between them: "A 1", "a1", "B,2".
    Only the format and range are checked here; whether the cell is
    empty is decided by the game logic.
    """

    def __init__(self, config: Optional[FrontendConfig] = None):
        self.config = config or FrontendConfig()

    def parse(self, text: str) -> Coordinate:
        """
        Parse a move.

        Raises:
            InvalidMove: With a message telling the player what to fix.
        """
        match = MOVE_PATTERN.match(text or "")
        if match is None:
            raise InvalidMove(f"Could not read {(text or '').strip()!r}. {self.config.MOVE_HINT}")

        col_text, row_text = match.groups()
        errors = []

        col = self.config.COLUMN_LABELS.find(col_text.upper())
        if col < 0:
            choices = ", ".join(self.config.COLUMN_LABELS)
            errors.append(f"Invalid column value entered. Your choices are: [{choices}]")

        row = int(row_text)
        if not 0 <= row < self.config.BOARD_SIZE:
            choices = ", ".join(self.config.ROW_LABELS)
            errors.append(f"Invalid row value entered. Your choices are: [{choices}]")

        if errors:
            raise InvalidMove(" ".join(errors))

        return Coordinate(row, col)
