"""
TicTacToe UI
A graphical interface for playing against the computer using Tkinter.

Shows:
- The board, drawn with OpenCV and shown through Pillow
- Game status and the computer's last move
- Strategy selection (Random / Smart / Genius)
"""

import random
import tkinter as tk
from tkinter import ttk
from typing import Optional

import cv2
from PIL import Image, ImageTk

# Logic imports
from logic.config import GameConfig
from logic.game_controller import GameController
from logic.ai_player import Strategy, create_ai_player

# Frontend imports
from frontend.config import FrontendConfig
from frontend.board_renderer import BoardRenderer


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    Click a cell to move. The computer answers after a short pause.
    """

    STRATEGY_BUTTONS = [
        ("Random", Strategy.RANDOM, "#4ade80"),
        ("Smart", Strategy.SMART, "#fbbf24"),
        ("Genius", Strategy.GENIUS, "#f87171"),
    ]

    def __init__(
        self,
        strategy: Strategy = Strategy.GENIUS,
        first_player: Optional[str] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
        frontend_config: Optional[FrontendConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or GameConfig()
        self.frontend_config = frontend_config or FrontendConfig()
        self.renderer = BoardRenderer(self.frontend_config)
        self.strategy = strategy

        rng = random.Random(seed if seed is not None else self.config.RANDOM_SEED)
        self.controller = GameController(
            ai=create_ai_player(strategy, self.config.COMPUTER_PLAYER, rng),
            config=self.config,
            first_player=first_player,
            verbose=self.config.VERBOSE
        )

        # Pending root.after() job for the computer's move
        self.pending_computer_move: Optional[str] = None

        # Create UI
        self._create_ui()
        self._new_game()

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.frontend_config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.UI_BACKGROUND)
        self.root.geometry(cfg.WINDOW_GEOMETRY)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.UI_BACKGROUND)
        style.configure('TLabel', background=cfg.UI_BACKGROUND, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground=cfg.UI_ACCENT)
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground=cfg.UI_STATUS)
        style.configure('Move.TLabel', font=('Segoe UI', 11), foreground=cfg.UI_MOVE)

        # Left panel - Board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 10))

        ttk.Label(left_frame, text="🎮 Game Board", style='Title.TLabel').pack(pady=(0, 5))

        size = cfg.BOARD_IMAGE_SIZE
        self.board_canvas = tk.Canvas(left_frame, width=size, height=size, bg='#0f0f1a',
                                      highlightthickness=2, highlightbackground=cfg.UI_ACCENT)
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel
        right_frame = ttk.Frame(main_frame, width=340)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        # Legend
        human = self.controller.human_player.symbol.upper()
        computer = self.controller.computer_player.symbol.upper()
        ttk.Label(right_frame, text=f"{human} = You   {computer} = Computer").pack(pady=5)

        # Game status section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="📊 Game Status", style='Title.TLabel').pack()

        self.status_label = ttk.Label(right_frame, text="Initializing...", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.turn_label = ttk.Label(right_frame, text="Turn: -")
        self.turn_label.pack()

        self.computer_move_label = ttk.Label(right_frame, text="-", style='Move.TLabel')
        self.computer_move_label.pack(pady=5)

        # Strategy section
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(right_frame, text="⚙️ Strategy", style='Title.TLabel').pack()

        strategy_frame = ttk.Frame(right_frame)
        strategy_frame.pack(pady=10)

        self.strategy_buttons = {}
        for text, strategy, color in self.STRATEGY_BUTTONS:
            selected = strategy is self.strategy
            btn = tk.Button(
                strategy_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=8,
                bg=color if selected else '#2d3748',
                fg='black' if selected else 'white',
                activebackground=color,
                command=lambda s=strategy: self._set_strategy(s)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.strategy_buttons[strategy] = btn

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=15)

        tk.Button(
            right_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=24,
            command=self._new_game
        ).pack(pady=5)

        tk.Button(
            right_frame,
            text="✕ Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _set_strategy(self, strategy: Strategy):
        """Set the computer's strategy. Takes effect from its next move."""
        self.strategy = strategy
        self.controller.set_strategy(strategy)

        for text, button_strategy, color in self.STRATEGY_BUTTONS:
            btn = self.strategy_buttons[button_strategy]
            if button_strategy is strategy:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _new_game(self):
        """Reset the board and start a new game."""
        self._cancel_computer_move()
        self.controller.reset()
        self.computer_move_label.configure(text="-")
        self._refresh()
        self._schedule_computer_move()

    def _on_board_click(self, event):
        """Handle a click on the board canvas."""
        if self.controller.is_game_over or not self.controller.is_human_turn:
            return

        cell = self.renderer.point_to_cell(event.x, event.y)
        if cell is None:
            return

        result = self.controller.apply_human_move(cell)
        if not result.is_valid:
            self.status_label.configure(text=result.error_message[:40])
            return

        self._refresh()
        self._schedule_computer_move()

    def _schedule_computer_move(self):
        if self.controller.is_game_over or self.controller.is_human_turn:
            return
        self.pending_computer_move = self.root.after(
            self.config.COMPUTER_MOVE_DELAY_MS, self._computer_move
        )

    def _cancel_computer_move(self):
        if self.pending_computer_move is not None:
            self.root.after_cancel(self.pending_computer_move)
            self.pending_computer_move = None

    def _computer_move(self):
        """Let the computer move (runs on the UI thread)."""
        self.pending_computer_move = None
        if self.controller.is_game_over or self.controller.is_human_turn:
            return

        move = self.controller.apply_opponent_move()
        self.computer_move_label.configure(text=f"→ Computer took {move.label}")
        self._refresh()

    def _refresh(self):
        """Redraw the board and the status labels."""
        self._update_board_canvas()
        self._update_game_info()

    def _update_board_canvas(self):
        """Draw the current board onto the canvas."""
        image = self.renderer.render_image(
            self.controller.board,
            winning_line=self.controller.get_winning_line()
        )

        # Convert BGR to RGB
        image_rgb = cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        photo = ImageTk.PhotoImage(Image.fromarray(image_rgb))

        # Update canvas
        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_game_info(self):
        """Update game status labels."""
        controller = self.controller

        if controller.is_game_over:
            if controller.winner is None:
                self.status_label.configure(text="🤝 It's a DRAW!")
            elif controller.winner is controller.human_player:
                self.status_label.configure(text="🏆 You WIN!")
            else:
                self.status_label.configure(text="🤖 Computer WINS!")
            self.turn_label.configure(text="Game Over")
        else:
            self.status_label.configure(text="Game in progress")
            if controller.is_human_turn:
                current = f"You ({controller.human_player.symbol.upper()})"
            else:
                current = f"Computer ({controller.computer_player.symbol.upper()}) thinking..."
            self.turn_label.configure(text=f"Turn: {current}")

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._cancel_computer_move()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=GameConfig.DEFAULT_STRATEGY,
        help="How the computer plays"
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")

    args = parser.parse_args()

    ui = TicTacToeUI(strategy=Strategy.parse(args.strategy), seed=args.seed)
    ui.run()


if __name__ == "__main__":
    main()
