"""
Threat detector for TicTacToe.
Finds the cell that would complete a line for a player on their next move.
Used both to attack (can I win now?) and to defend (can they win next?).
"""

from typing import Optional
from .game_state import Board, Cell, Coordinate
from .win_checker import WINNING_LINES, Line


class ThreatDetector:
    """
    Looks one move ahead for a single player.

    A line is winnable in one move when it holds exactly two cells of
    the player and exactly one empty cell. Lines are scanned rows first,
    then columns, then the main and anti diagonals; the first match wins.
    """

    def find_winning_cell(self, board: Board, player: Cell) -> Optional[Coordinate]:
        """
        Find the empty cell that completes a line for `player`.

        Args:
            board: Board to inspect. It is not modified.
            player: X or O. Does not need to be the player to move.

        Returns:
            The coordinate to claim, or None if no one-move win exists.
        """
        if player is Cell.EMPTY:
            raise ValueError("find_winning_cell needs a player, not an empty cell")

        for line in WINNING_LINES:
            cell = self._open_cell(board, line, player)
            if cell is not None:
                return cell
        return None

    def _open_cell(self, board: Board, line: Line, player: Cell) -> Optional[Coordinate]:
        """The empty cell of a line the player can finish, else None."""
        owned = 0
        empty = []
        for pos in line:
            state = board[pos]
            if state is player:
                owned += 1
            elif state is Cell.EMPTY:
                empty.append(pos)

        if owned == 2 and len(empty) == 1:
            return empty[0]
        return None


_detector = ThreatDetector()


def find_winning_cell(board: Board, player: Cell) -> Optional[Coordinate]:
    """The cell that wins immediately for `player`, or None."""
    return _detector.find_winning_cell(board, player)
