"""
Main entry point for TV TicTacToe.

Launches the remote-control UI by default, or a console game with --no-ui.
Two players share one device; X always starts.
"""

import sys
from typing import Callable, Optional, TextIO

from game.game_engine import GameEngine
from game.game_state import CELL_COUNT, GameState, Player
from game.move_validator import RejectReason
from remote.config import UIConfig


class ConsoleGame:
    """
    Text-mode TicTacToe.

    Commands:
    - 1-9: place a mark on that cell (cells are numbered left to right,
      top to bottom)
    - r: reset the game
    - q: quit
    """

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        config: Optional[UIConfig] = None,
        input_func: Optional[Callable[[str], str]] = None,
        output: Optional[TextIO] = None
    ):
        """
        Initialize the console game.

        Args:
            engine: Engine to play on. A new one is created if not provided.
            config: UI configuration (for the message texts).
            input_func: Where commands come from.
            output: Where to print to (stdout by default).
        """
        self.config = config or UIConfig()
        self.engine = engine or GameEngine(debug=self.config.DEBUG_MODE)
        self.input_func = input_func or input
        self.output = output or sys.stdout
        self.is_running = False

        self.engine.subscribe(self._on_state_changed)

    def _print(self, text: str = ""):
        print(text, file=self.output)

    def _show(self, state: GameState):
        self._print()
        self._print(state.format_board())
        self._print()

        config = self.config
        if state.winner == Player.X:
            self._print(config.PLAYER_X_WINS)
        elif state.winner == Player.O:
            self._print(config.PLAYER_O_WINS)
        elif state.is_game_over:
            self._print(config.DRAW_MESSAGE)
        elif state.current_player == Player.X:
            self._print(config.PLAYER_X_TURN)
        else:
            self._print(config.PLAYER_O_TURN)

        if state.is_game_over:
            self._print("Press r to play again or q to quit.")

    def _on_state_changed(self, state: GameState):
        self._show(state)

    def handle_command(self, command: str) -> bool:
        """
        Handle one line of input.

        Returns:
            False when the player wants to quit.
        """
        command = command.strip().lower()

        if command in ("q", "quit", "exit"):
            return False
        if command in ("r", "reset"):
            self.engine.reset()
            return True

        try:
            cell = int(command)
        except ValueError:
            self._print(f"Unknown command: {command!r}. Enter 1-{CELL_COUNT}, r or q.")
            return True

        if not 1 <= cell <= CELL_COUNT:
            self._print(f"Can't play there: cell {cell} is off the board. Enter 1-{CELL_COUNT}.")
            return True

        if not self.engine.play_at(cell - 1):
            state = self.engine.get_state()
            result = self.engine.validator.validate_move(state, cell - 1)
            if result.reason == RejectReason.CELL_OCCUPIED:
                occupant = state.board[cell - 1].value
                self._print(f"Can't play there: cell {cell} is already taken by {occupant}.")
            else:
                self._print(f"Can't play there: {result.error_message}")

        return True

    def start(self):
        """Run the input loop until the player quits."""
        self._print(f"\n{self.config.GAME_TITLE}")
        self._print(f"Enter 1-{CELL_COUNT} to play, r to reset, q to quit.")
        self._show(self.engine.get_state())

        self.is_running = True
        while self.is_running:
            self.is_running = self.handle_command(self.input_func("> "))


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TV TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print diagnostic messages"
    )

    args = parser.parse_args(argv)

    config = UIConfig()
    config.DEBUG_MODE = args.debug

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeTVUI
        ui = TicTacToeTVUI(config=config)
        ui.run()
        return

    # Console mode (--no-ui)
    game = ConsoleGame(config=config)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
