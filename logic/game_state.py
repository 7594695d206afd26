"""
Board model for the TicTacToe game.
Defines the cell states, coordinates and the 3x3 board itself.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple, Sequence
from dataclasses import dataclass, field


BOARD_SIZE = 3

# Columns are shown to the player as letters, rows as digits
COLUMN_LABELS = "ABC"


class InvalidMove(ValueError):
    """A target cell is out of range or already taken."""


class PreconditionViolation(AssertionError):
    """
    The caller broke a contract of the game logic, e.g. asked the
    computer to move on a full board. This is a bug, not a user error.
    """


class Cell(Enum):
    """State of a single board cell."""
    EMPTY = " "
    X = "x"
    O = "o"

    def opposite(self) -> "Cell":
        """Get the other player's mark."""
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        raise ValueError("An empty cell has no opposite player")

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "Cell":
        """Parse 'x', 'o', ' ' or '.' (case-insensitive) into a Cell."""
        symbol = symbol.lower()
        if symbol in (" ", ".", "_", "-"):
            return cls.EMPTY
        for cell in (cls.X, cls.O):
            if cell.value == symbol:
                return cell
        raise ValueError(f"Unknown cell symbol: {symbol!r}")


class Coordinate(NamedTuple):
    """A (row, col) position on the board."""
    row: int
    col: int

    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def label(self) -> str:
        """Console name of the cell, column letter then row digit (e.g. 'B1')."""
        return f"{COLUMN_LABELS[self.col]}{self.row}"


CENTER = Coordinate(1, 1)

# Corners in the order they are preferred
CORNERS = (
    Coordinate(0, 0),
    Coordinate(0, 2),
    Coordinate(2, 0),
    Coordinate(2, 2),
)


@dataclass
class Move:
    """
    A move made during the current game.
    """
    player: Cell            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is in the game (0-8)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


@dataclass
class Board:
    """
    The 3x3 TicTacToe board.

    Every position always holds exactly one Cell. The board never
    changes size; a move turns one EMPTY cell into X or O.
    """

    grid: List[List[Cell]] = field(
        default_factory=lambda: [[Cell.EMPTY for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    )

    def __post_init__(self):
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from three strings, one per row.

        Example:
            Board.from_rows(["xx ", " o ", "   "])
        """
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Expected {BOARD_SIZE} rows, got {len(rows)}")
        grid = []
        for text in rows:
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Row {text!r} must have {BOARD_SIZE} cells")
            grid.append([Cell.from_symbol(ch) for ch in text])
        return cls(grid=grid)

    def get(self, row: int, col: int) -> Cell:
        """Get the state of a cell."""
        if not Coordinate(row, col).is_valid():
            raise InvalidMove(f"Invalid position ({row}, {col}). Must be 0-2.")
        return self.grid[row][col]

    def __getitem__(self, coordinate: Coordinate) -> Cell:
        row, col = coordinate
        return self.get(row, col)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is Cell.EMPTY

    def place(self, row: int, col: int, player: Cell) -> None:
        """
        Claim an empty cell for a player.

        Raises:
            InvalidMove: If the position is off the board or already taken.
        """
        if player is Cell.EMPTY:
            raise ValueError("Cannot place an empty mark")

        current = self.get(row, col)
        if current is not Cell.EMPTY:
            raise InvalidMove(
                f"Cell {Coordinate(row, col).label} is already taken by '{current.symbol}'"
            )

        self.grid[row][col] = player

    def get_empty_cells(self) -> List[Coordinate]:
        """
        Get all empty cells on the board, in row-major order.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.grid[row][col] is Cell.EMPTY:
                    empty.append(Coordinate(row, col))
        return empty

    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.grid for cell in row)

    def count(self, player: Cell) -> int:
        """Number of cells holding the given state."""
        return sum(1 for row in self.grid for cell in row if cell is player)

    def rows(self) -> Iterator[List[Cell]]:
        """Iterate over copies of the rows (read-only view for renderers)."""
        for row in self.grid:
            yield list(row)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(grid=[[cell for cell in row] for row in self.grid])

    def __str__(self) -> str:
        return "\n".join("".join(cell.symbol for cell in row) for row in self.grid)

