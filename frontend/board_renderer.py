"""
Board renderer for TicTacToe.
Draws the board as console text or as an OpenCV image.
Reads the board only; never changes it.
"""

import cv2
import numpy as np
from typing import Optional, Sequence
from logic.game_state import Board, Cell, Coordinate
from .config import FrontendConfig


class BoardRenderer:
    """
    Turns a Board into something a person can look at.

    Text layout (columns are letters, rows are digits):

            A   B   C
          +---+---+---+
        0 | x |   | o |
          +---+---+---+
    """

    def __init__(self, config: Optional[FrontendConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Frontend configuration. Uses defaults if not provided.
        """
        self.config = config or FrontendConfig()

    def render_text(self, board: Board) -> str:
        """
        Get a text representation of the board.

        Args:
            board: The board to draw.

        Returns:
            Multi-line string with row and column labels.
        """
        margin = self.config.LABEL_MARGIN
        header = margin + "  " + "   ".join(self.config.COLUMN_LABELS) + "  "

        lines = [header, margin + self.config.ROW_SEPARATOR]
        for label, row in zip(self.config.ROW_LABELS, board.rows()):
            row_str = f"{label} "
            for cell in row:
                row_str += f"| {cell.symbol} "
            lines.append(row_str + "|")
            lines.append(margin + self.config.ROW_SEPARATOR)

        return "\n".join(lines)

    def render_image(
        self,
        board: Board,
        winning_line: Optional[Sequence[Coordinate]] = None
    ) -> np.ndarray:
        """
        Draw the board as an image with X and O marks.

        Args:
            board: The board to draw.
            winning_line: Three coordinates to strike through, if any.

        Returns:
            BGR image (uint8) of size BOARD_IMAGE_SIZE x BOARD_IMAGE_SIZE.
        """
        size = self.config.BOARD_IMAGE_SIZE
        cell_size = self.config.CELL_IMAGE_SIZE

        # Create background
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        # Draw grid lines
        for i in range(1, self.config.BOARD_SIZE):
            x = i * cell_size
            cv2.line(image, (x, 0), (x, size), self.config.GRID_COLOR, self.config.GRID_THICKNESS)
            y = i * cell_size
            cv2.line(image, (0, y), (size, y), self.config.GRID_COLOR, self.config.GRID_THICKNESS)

        # Draw border
        cv2.rectangle(image, (0, 0), (size - 1, size - 1), self.config.GRID_COLOR, self.config.GRID_THICKNESS)

        # Draw marks
        margin = cell_size // 5
        marker_size = cell_size // 2 - margin
        for row, cells in enumerate(board.rows()):
            for col, cell in enumerate(cells):
                cx, cy = self.cell_center(row, col)

                if cell is Cell.X:
                    color = self.config.X_COLOR
                    cv2.line(image,
                             (cx - marker_size, cy - marker_size),
                             (cx + marker_size, cy + marker_size),
                             color, self.config.MARK_THICKNESS)
                    cv2.line(image,
                             (cx + marker_size, cy - marker_size),
                             (cx - marker_size, cy + marker_size),
                             color, self.config.MARK_THICKNESS)
                elif cell is Cell.O:
                    cv2.circle(image, (cx, cy), marker_size, self.config.O_COLOR, self.config.MARK_THICKNESS)

        # Add row/col labels
        font = cv2.FONT_HERSHEY_SIMPLEX
        for i in range(self.config.BOARD_SIZE):
            # Column labels (top)
            cv2.putText(image, self.config.COLUMN_LABELS[i], (i * cell_size + 8, 25),
                        font, 0.7, self.config.LABEL_COLOR, 2)
            # Row labels (bottom left of each row)
            cv2.putText(image, self.config.ROW_LABELS[i], (8, (i + 1) * cell_size - 10),
                        font, 0.7, self.config.LABEL_COLOR, 2)

        # Strike through the winning line
        if winning_line:
            start = self.cell_center(*winning_line[0])
            end = self.cell_center(*winning_line[-1])
            cv2.line(image, start, end, self.config.WIN_LINE_COLOR, self.config.WIN_LINE_THICKNESS)

        return image

    def cell_center(self, row: int, col: int):
        """Pixel center (x, y) of a cell in the rendered image."""
        cell_size = self.config.CELL_IMAGE_SIZE
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def point_to_cell(self, x: int, y: int) -> Optional[Coordinate]:
        """
        Convert a point in the rendered image to a grid cell.

        Args:
            x: X pixel coordinate.
            y: Y pixel coordinate.

        Returns:
            (row, col) of the cell, or None if the point is off the board.
        """
        size = self.config.BOARD_IMAGE_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_IMAGE_SIZE
        last = self.config.BOARD_SIZE - 1

        # Clamp to valid range
        row = max(0, min(last, y // cell_size))
        col = max(0, min(last, x // cell_size))

        return Coordinate(row, col)


# Quick test
if __name__ == "__main__":
    print("Testing board renderer...")

    renderer = BoardRenderer()
    board = Board.from_rows(["xo ", " x ", "o x"])

    print(renderer.render_text(board))

    image = renderer.render_image(board, winning_line=[Coordinate(0, 0), Coordinate(1, 1), Coordinate(2, 2)])
    cv2.imshow("Board", image)
    cv2.waitKey(0)
    cv2.destroyAllWindows()

    print("Board renderer test done!")
