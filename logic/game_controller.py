"""
Turn controller for TicTacToe.

Owns the board for one game, alternates between the human and the
computer, and re-evaluates the board after every move.
"""

import random
from typing import Callable, List, Optional
from .config import GameConfig
from .game_state import Board, Cell, Coordinate, InvalidMove, Move, PreconditionViolation
from .move_validator import MoveValidator, ValidationResult
from .win_checker import Outcome, WinChecker
from .ai_player import AIPlayer, Strategy, create_ai_player


_validator = MoveValidator()
_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Classify the board (in progress, won, or drawn)."""
    return _checker.evaluate(board)


def apply_human_move(
    board: Board,
    coordinate: Coordinate,
    player: Cell = Cell.X
) -> ValidationResult:
    """
    Apply a human move if it is legal.

    Returns:
        A valid result after the cell was claimed, or an invalid result
        with an error message. The board is unchanged on failure.
    """
    row, col = coordinate
    result = _validator.validate_move(board, row, col)
    if result.is_valid:
        board.place(row, col, player)
    return result


def apply_opponent_move(board: Board, strategy: AIPlayer) -> Coordinate:
    """
    Let the strategy pick a cell and claim it for the strategy's player.

    Raises:
        PreconditionViolation: If the board is full.
    """
    move = strategy.choose_move(board)
    board.place(move.row, move.col, strategy.player)
    return move


class GameController:
    """
    Runs a single game between a human and the computer.

    Game flow:
    1. Decide who goes first (coin flip by default)
    2. The player to move claims an empty cell
    3. The board is evaluated; the game stops on a win or a draw
    4. The turn passes to the other player
    """

    def __init__(
        self,
        ai: Optional[AIPlayer] = None,
        config: Optional[GameConfig] = None,
        first_player: Optional[str] = None,
        verbose: bool = False
    ):
        """
        Initialize the controller and start a new game.

        Args:
            ai: The computer opponent. Built from config if not provided.
            config: Game configuration.
            first_player: "human", "computer" or "random". Overrides config.
            verbose: Print every move to the console.
        """
        self.config = config or GameConfig()
        self.human_player = self.config.HUMAN_PLAYER
        self.computer_player = self.config.COMPUTER_PLAYER

        if ai is None:
            ai = create_ai_player(
                self.config.DEFAULT_STRATEGY,
                self.computer_player,
                random.Random(self.config.RANDOM_SEED)
            )
        if ai.player is not self.computer_player:
            raise ValueError(
                f"AI plays '{ai.player.symbol}' but the computer is '{self.computer_player.symbol}'"
            )
        self.ai = ai

        self.first_player = first_player or self.config.FIRST_PLAYER
        if self.first_player not in self.config.FIRST_PLAYER_CHOICES:
            raise ValueError(f"Unknown first player: {self.first_player!r}")

        self.verbose = verbose
        self.reset()

    def reset(self):
        """Start a new game on an empty board."""
        self.board = Board()
        self.moves: List[Move] = []
        self.outcome = Outcome.IN_PROGRESS
        self.current_player = self._choose_first_player()

    def _choose_first_player(self) -> Cell:
        if self.first_player == "human":
            return self.human_player
        if self.first_player == "computer":
            return self.computer_player
        # Coin flip
        return self.ai.rng.choice([self.human_player, self.computer_player])

    @property
    def is_human_turn(self) -> bool:
        return self.current_player is self.human_player

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_over

    @property
    def winner(self) -> Optional[Cell]:
        return self.outcome.winner

    def set_strategy(self, strategy: Strategy):
        """Swap the computer's strategy, keeping its random source."""
        self.ai = create_ai_player(strategy, self.computer_player, self.ai.rng)
        if self.verbose:
            print(f"Strategy set to: {self.ai.strategy.value}")

    def evaluate(self) -> Outcome:
        """Re-evaluate the board and remember the result."""
        self.outcome = _checker.evaluate(self.board)
        return self.outcome

    def get_winning_line(self):
        return _checker.get_winning_line(self.board)

    def apply_human_move(self, coordinate: Coordinate) -> ValidationResult:
        """
        Apply the human's move.

        Returns:
            ValidationResult. On failure nothing changes and the caller
            should ask the human again.
        """
        if self.is_game_over:
            return ValidationResult(is_valid=False, error_message="Game is already over!")

        if not self.is_human_turn:
            return ValidationResult(is_valid=False, error_message="It's not your turn!")

        coordinate = Coordinate(*coordinate)
        result = apply_human_move(self.board, coordinate, self.human_player)
        if result.is_valid:
            self._finish_turn(coordinate)
        return result

    def apply_opponent_move(self) -> Coordinate:
        """
        Let the computer move.

        Raises:
            PreconditionViolation: If the game is over or it is the human's turn.
        """
        if self.is_game_over:
            raise PreconditionViolation("The computer cannot move after the game is over")
        if self.is_human_turn:
            raise PreconditionViolation("The computer cannot move on the human's turn")

        move = apply_opponent_move(self.board, self.ai)
        self._finish_turn(move)
        return move

    def _finish_turn(self, coordinate: Coordinate):
        """Record the move, evaluate the board and pass the turn."""
        self.moves.append(Move(
            player=self.current_player,
            row=coordinate.row,
            col=coordinate.col,
            move_number=len(self.moves)
        ))

        if self.verbose:
            who = "You" if self.is_human_turn else "Computer"
            print(f">>> {who} ({self.current_player.symbol}) took {coordinate.label}")

        self.evaluate()
        self.current_player = self.current_player.opposite()

    def play(
        self,
        get_human_move: Callable[["GameController"], Coordinate],
        show_board: Optional[Callable[[Board], None]] = None
    ) -> Outcome:
        """
        Play the game to the end.

        Args:
            get_human_move: Asked for the human's move. May raise
                InvalidMove for unreadable input; the human is asked again.
            show_board: Called with the board before every turn.

        Returns:
            The final outcome.
        """
        while not self.is_game_over:
            if show_board is not None:
                show_board(self.board)

            if self.is_human_turn:
                self._play_human_turn(get_human_move)
            else:
                self.apply_opponent_move()

        return self.outcome

    def _play_human_turn(self, get_human_move: Callable[["GameController"], Coordinate]):
        while True:
            try:
                coordinate = get_human_move(self)
            except InvalidMove as e:
                print(f"! {e}")
                continue

            result = self.apply_human_move(coordinate)
            if result.is_valid:
                return
            print(f"! {result.error_message}")
