"""
Main script for TicTacToe.

This script ties together:
- Logic (board, win checking, computer strategies, turn control)
- Frontend (text rendering, move parsing)

Run this script to play TicTacToe against the computer in the terminal,
or pass --ui to open the game window.
"""

import random
from typing import Optional

# Logic imports
from logic.config import GameConfig
from logic.game_controller import GameController
from logic.game_state import Board, Coordinate
from logic.ai_player import Strategy, create_ai_player

# Frontend imports
from frontend.config import FrontendConfig
from frontend.board_renderer import BoardRenderer
from frontend.move_parser import MoveParser


class TicTacToeGame:
    """
    Console game: you (x) against the computer (o).

    Game flow:
    1. A coin flip decides who goes first
    2. The board is drawn before every turn
    3. You type a move like "A 1"; invalid input is asked again
    4. The computer answers using its strategy
    5. Repeat until someone wins or it's a draw
    """

    def __init__(
        self,
        strategy: Strategy = Strategy.GENIUS,
        first_player: Optional[str] = None,
        seed: Optional[int] = None,
        config: Optional[GameConfig] = None,
        frontend_config: Optional[FrontendConfig] = None,
        input_func=None
    ):
        """
        Initialize the game.

        Args:
            strategy: The computer's strategy.
            first_player: "human", "computer" or "random" (coin flip).
            seed: Seed for the computer's random choices.
            config: Game configuration.
            frontend_config: Display and input configuration.
            input_func: Reads a line from the player.
        """
        self.config = config or GameConfig()
        self.frontend_config = frontend_config or FrontendConfig()
        self.renderer = BoardRenderer(self.frontend_config)
        self.parser = MoveParser(self.frontend_config)
        self.input_func = input_func or input

        rng = random.Random(seed if seed is not None else self.config.RANDOM_SEED)
        ai = create_ai_player(strategy, self.config.COMPUTER_PLAYER, rng)

        self.controller = GameController(
            ai=ai,
            config=self.config,
            first_player=first_player,
            verbose=self.config.VERBOSE
        )

    def start(self):
        """Play one game and show the result."""
        print("\n" + "=" * 60)
        print("   TicTacToe")
        print(f"   You play: {self.controller.human_player.symbol}")
        print(f"   Computer plays: {self.controller.computer_player.symbol} ({self.controller.ai.strategy.value})")
        print("=" * 60 + "\n")

        who = "You go" if self.controller.is_human_turn else "The computer goes"
        print(f"{who} first.")

        self.controller.play(self._read_human_move, self._show_board)
        self._show_game_result()
        return self.controller.outcome

    def _show_board(self, board: Board):
        print()
        print(self.renderer.render_text(board))
        print()

    def _read_human_move(self, controller: GameController) -> Coordinate:
        """Ask the player for a move. Raises InvalidMove on bad input."""
        print(self.frontend_config.MOVE_PROMPT)
        print(self.frontend_config.MOVE_HINT)
        return self.parser.parse(self.input_func("> "))

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 60)
        print("   GAME OVER! Here's what the final board looked like:")
        print("=" * 60)

        self._show_board(self.controller.board)

        winner = self.controller.winner
        if winner is None:
            print("O.o Whoa, that was close! O.o You tied! O.o")
        elif winner is self.controller.human_player:
            print("^.^ Congratulations! ^.^ You win! ^.^")
        else:
            print("~.~ Sorry! ~.~ You lose! ~.~")

        print("\n" + "=" * 60)


def build_parser():
    import argparse

    config = GameConfig()
    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in Strategy],
        default=config.DEFAULT_STRATEGY,
        help="How the computer plays (default: %(default)s)"
    )
    parser.add_argument(
        "--first",
        choices=config.FIRST_PLAYER_CHOICES,
        default=config.FIRST_PLAYER,
        help="Who moves first (default: coin flip)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random choices"
    )
    parser.add_argument(
        "--ui",
        action="store_true",
        help="Open the game window instead of playing in the terminal"
    )
    return parser


def main(argv=None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    strategy = Strategy.parse(args.strategy)

    if args.ui:
        from ui import TicTacToeUI
        print("\n" + "=" * 60)
        print("   TicTacToe UI")
        print("=" * 60 + "\n")
        ui = TicTacToeUI(strategy=strategy, first_player=args.first, seed=args.seed)
        ui.run()
        return 0

    game = TicTacToeGame(strategy=strategy, first_player=args.first, seed=args.seed)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")
    return 0


if __name__ == "__main__":
    main()
