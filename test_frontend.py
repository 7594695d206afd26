"""
Tests for the frontend: text rendering, image rendering and move parsing.
"""

import sys
from pathlib import Path

import numpy as np

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from logic.game_state import Board, Coordinate, InvalidMove
from logic.win_checker import WinChecker
from frontend import BoardRenderer, FrontendConfig, MoveParser


# ==================== TEXT RENDERING ====================

def test_render_text_layout():
    board = Board.from_rows(["x o", "   ", " x "])
    text = BoardRenderer().render_text(board)

    assert text.split("\n") == [
        "    A   B   C  ",
        "  +---+---+---+",
        "0 | x |   | o |",
        "  +---+---+---+",
        "1 |   |   |   |",
        "  +---+---+---+",
        "2 |   | x |   |",
        "  +---+---+---+",
    ]


def test_render_text_does_not_modify_board():
    board = Board.from_rows(["x  ", " o ", "   "])
    before = str(board)
    BoardRenderer().render_text(board)
    assert str(board) == before


# ==================== IMAGE RENDERING ====================

def pixel(image: np.ndarray, point) -> tuple:
    x, y = point
    return tuple(int(v) for v in image[y, x])


def test_render_image_shape_and_background():
    config = FrontendConfig()
    renderer = BoardRenderer(config)
    image = renderer.render_image(Board())

    assert image.shape == (config.BOARD_IMAGE_SIZE, config.BOARD_IMAGE_SIZE, 3)
    assert image.dtype == np.uint8

    # Empty cells are plain background at their center
    for row in range(3):
        for col in range(3):
            assert pixel(image, renderer.cell_center(row, col)) == config.BACKGROUND_COLOR

    # Grid line between the first and second column
    assert pixel(image, (config.CELL_IMAGE_SIZE, 75)) == config.GRID_COLOR


def test_render_image_marks():
    config = FrontendConfig()
    renderer = BoardRenderer(config)
    board = Board.from_rows(["x  ", " o ", "   "])
    image = renderer.render_image(board)

    # X strokes cross at the cell center
    assert pixel(image, renderer.cell_center(0, 0)) == config.X_COLOR

    # O is a ring: the center stays empty, the ring is drawn
    cx, cy = renderer.cell_center(1, 1)
    marker_size = config.CELL_IMAGE_SIZE // 2 - config.CELL_IMAGE_SIZE // 5
    assert pixel(image, (cx, cy)) == config.BACKGROUND_COLOR
    assert pixel(image, (cx + marker_size, cy)) == config.O_COLOR

    # Only X and O colors appear where marks were drawn
    assert np.any(np.all(image == config.X_COLOR, axis=-1))
    assert np.any(np.all(image == config.O_COLOR, axis=-1))


def test_render_image_winning_line():
    config = FrontendConfig()
    renderer = BoardRenderer(config)
    board = Board.from_rows(["xxx", " o ", "o  "])
    line = WinChecker().get_winning_line(board)
    image = renderer.render_image(board, winning_line=line)

    # The strike-through covers the middle of the line
    assert pixel(image, renderer.cell_center(0, 1)) == config.WIN_LINE_COLOR

    plain = renderer.render_image(board)
    assert pixel(plain, renderer.cell_center(0, 1)) == config.X_COLOR


def test_point_to_cell():
    renderer = BoardRenderer()
    size = renderer.config.BOARD_IMAGE_SIZE
    cell = renderer.config.CELL_IMAGE_SIZE

    assert renderer.point_to_cell(0, 0) == Coordinate(0, 0)
    assert renderer.point_to_cell(cell + 1, 0) == Coordinate(0, 1)
    assert renderer.point_to_cell(size - 1, size - 1) == Coordinate(2, 2)
    assert renderer.point_to_cell(10, 2 * cell + 5) == Coordinate(2, 0)
    assert renderer.point_to_cell(size, 10) is None
    assert renderer.point_to_cell(-1, 10) is None


# ==================== MOVE PARSING ====================

def test_parse_accepted_formats():
    parser = MoveParser()
    assert parser.parse("A 1") == Coordinate(1, 0)
    assert parser.parse("a1") == Coordinate(1, 0)
    assert parser.parse("B,2") == Coordinate(2, 1)
    assert parser.parse("  c 0  ") == Coordinate(0, 2)


def test_parse_rejects_bad_input():
    parser = MoveParser()
    cases = {
        "D 1": "Invalid column value",
        "A 3": "Invalid row value",
        "A -1": "Invalid row value",
        "": "Could not read",
        "11": "Could not read",
        "hello": "Could not read",
    }
    for text, message in cases.items():
        try:
            parser.parse(text)
        except InvalidMove as e:
            assert message in str(e), f"{text!r}: {e}"
        else:
            raise AssertionError(f"{text!r} should not parse")


def test_parse_reports_both_errors():
    try:
        MoveParser().parse("Q 7")
    except InvalidMove as e:
        assert "Invalid column value" in str(e)
        assert "Invalid row value" in str(e)
    else:
        raise AssertionError("'Q 7' should not parse")


if __name__ == "__main__":
    from test_modules import run_tests
    sys.exit(run_tests(sys.modules[__name__]))
