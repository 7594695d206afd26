"""
Frontend configuration for TicTacToe.
All the settings for drawing the board and talking to the player.
"""

from logic.game_state import BOARD_SIZE, COLUMN_LABELS


class FrontendConfig:
    """
    Configuration class for display and input settings.
    Change these values to restyle the game!
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = BOARD_SIZE
    COLUMN_LABELS = COLUMN_LABELS
    ROW_LABELS = "012"

    # ==================== TEXT RENDERING ====================
    ROW_SEPARATOR = "+---+---+---+"
    LABEL_MARGIN = "  "

    # ==================== IMAGE RENDERING ====================
    # Output size for the rendered board image (pixels, square)
    BOARD_IMAGE_SIZE = 450
    CELL_IMAGE_SIZE = BOARD_IMAGE_SIZE // BOARD_SIZE  # 150 pixels per cell

    GRID_THICKNESS = 3
    MARK_THICKNESS = 8
    WIN_LINE_THICKNESS = 12

    # Colors are BGR (OpenCV order)
    BACKGROUND_COLOR = (255, 255, 255)
    GRID_COLOR = (0, 0, 0)
    X_COLOR = (255, 0, 0)        # Blue
    O_COLOR = (0, 0, 255)        # Red
    WIN_LINE_COLOR = (0, 200, 0)  # Green
    LABEL_COLOR = (100, 100, 100)

    # ==================== CONSOLE INPUT ====================
    MOVE_PROMPT = "Your turn. Where would you like to move next?"
    MOVE_HINT = "Type your move as two characters separated by a space (ex: A 1)"

    # ==================== WINDOW UI ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_GEOMETRY = "860x560"
    UI_BACKGROUND = '#1a1a2e'
    UI_ACCENT = '#00d4ff'
    UI_STATUS = '#ffd700'
    UI_MOVE = '#00ff88'
