"""
Game engine for TV TicTacToe.
Sole owner of the game state; applies moves and notifies subscribers.
"""

import threading
from dataclasses import replace
from typing import Callable, List

from .game_state import GameResult, GameState
from .move_validator import MoveValidator
from .win_checker import WinChecker


Subscriber = Callable[[GameState], None]


class GameEngine:
    """
    Observable TicTacToe state machine.

    States: in progress, won, drawn. Won and drawn are terminal until
    reset(). Every successful play_at() and every reset() publishes the new
    snapshot to the subscribers, in registration order, once the state is
    fully updated.
    """

    def __init__(self, debug: bool = False):
        """
        Initialize the engine.

        Args:
            debug: If True, print why moves get rejected.
        """
        self.debug = debug
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self._state = GameState()
        self._subscribers: List[Subscriber] = []

        # Snapshots from calls made inside a notification wait here
        self._pending: List[GameState] = []
        self._notifying = False

        # Re-entrant so subscribers can read or play from inside a notification
        self._lock = threading.RLock()

    def get_state(self) -> GameState:
        """Get the current snapshot."""
        with self._lock:
            return self._state

    def play_at(self, position: int) -> bool:
        """
        Place the current player's mark at the given cell.

        Args:
            position: Cell index (0-8). Anything else is rejected.

        Returns:
            True if the move was made; False if the game is over, the
            position is off the board or the cell is taken.
        """
        with self._lock:
            state = self._state

            validation = self.validator.validate_move(state, position)
            if not validation.is_valid:
                if self.debug:
                    print(f"Move rejected: {validation.error_message}")
                return False

            player = state.current_player
            board = list(state.board)
            board[position] = player.mark

            result = self.win_checker.evaluate(board)
            next_player = player if result is not None else player.opposite()

            self._state = replace(
                state,
                board=tuple(board),
                current_player=next_player,
                result=result
            )

            if self.debug:
                print(f"{player.value} played cell {position}")
                if result is not None:
                    print(f"Game over: {self._describe(result)}")

            self._notify(self._state)
            return True

    def reset(self):
        """Start a new game: empty board, X to move, no result."""
        with self._lock:
            self._state = GameState()

            if self.debug:
                print("Game reset")

            self._notify(self._state)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback for state changes.

        Registering the same callback twice keeps a single registration.

        Returns:
            A function that unsubscribes the callback.
        """
        with self._lock:
            if callback not in self._subscribers:
                self._subscribers.append(callback)

        def unsubscribe():
            self.unsubscribe(callback)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> bool:
        """
        Remove a callback.

        Returns:
            True if it was registered.
        """
        with self._lock:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                return False
            return True

    def _notify(self, state: GameState):
        """
        Deliver a snapshot to every subscriber.

        A change made by a subscriber is queued until the current snapshot
        has reached everyone, so each subscriber sees the states in order
        and ends on the latest one.
        """
        self._pending.append(state)
        if self._notifying:
            return

        self._notifying = True
        try:
            while self._pending:
                snapshot = self._pending.pop(0)
                # Copy so subscribers can (un)subscribe while being notified
                for callback in list(self._subscribers):
                    callback(snapshot)
        finally:
            self._notifying = False
            self._pending.clear()

    @staticmethod
    def _describe(result: GameResult) -> str:
        if result == GameResult.DRAW:
            return "draw"
        return f"{result.winner.value} wins"
