"""
Board presenter for TV TicTacToe.
Turns engine snapshots into what the screen shows, and remote input
into engine calls.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from game.game_engine import GameEngine
from game.game_state import GameResult, GameState, Mark, Player, CELL_COUNT
from game.win_checker import WinChecker
from .config import UIConfig
from .focus import Button, Direction, FocusNavigator, FocusTarget


@dataclass(frozen=True)
class BoardView:
    """Everything the screen needs to draw one frame."""
    cell_texts: Tuple[str, ...]
    cell_colors: Tuple[str, ...]
    turn_text: str
    focused: FocusTarget
    winning_line: Optional[Tuple[int, int, int]] = None
    result_message: Optional[str] = None


ViewListener = Callable[[BoardView], None]
ResultListener = Callable[[GameResult, str], None]
AboutListener = Callable[[], None]


class BoardPresenter:
    """
    Sits between the engine and the TV screen.

    The presenter listens to the engine, keeps the turn text and the focus,
    and tells its listeners when to redraw, when the game has ended and
    when to open the About dialog.
    """

    def __init__(self, engine: GameEngine, config: Optional[UIConfig] = None):
        self.engine = engine
        self.config = config or UIConfig()
        self.navigator = FocusNavigator(self.config)
        self.win_checker = WinChecker()

        self._view_listeners: List[ViewListener] = []
        self._result_listeners: List[ResultListener] = []
        self._about_listeners: List[AboutListener] = []

        state = engine.get_state()
        self._last_result = state.result
        self.turn_text = self.turn_text_for(state.current_player)

        self._unsubscribe = engine.subscribe(self._on_state_changed)

    # ==================== LISTENERS ====================

    def on_view(self, listener: ViewListener):
        self._view_listeners.append(listener)

    def on_result(self, listener: ResultListener):
        self._result_listeners.append(listener)

    def on_about(self, listener: AboutListener):
        self._about_listeners.append(listener)

    def close(self):
        """Stop listening to the engine."""
        self._unsubscribe()

    # ==================== TEXT AND COLORS ====================

    def turn_text_for(self, player: Player) -> str:
        if player == Player.X:
            return self.config.PLAYER_X_TURN
        return self.config.PLAYER_O_TURN

    def result_message_for(self, result: GameResult) -> str:
        if result == GameResult.X_WINS:
            return self.config.PLAYER_X_WINS
        if result == GameResult.O_WINS:
            return self.config.PLAYER_O_WINS
        return self.config.DRAW_MESSAGE

    def color_for(self, mark: Mark) -> str:
        if mark == Mark.X:
            return self.config.X_COLOR
        if mark == Mark.O:
            return self.config.O_COLOR
        return self.config.TEXT_COLOR

    def build_view(self, state: Optional[GameState] = None) -> BoardView:
        """Build the view for a snapshot (the current one by default)."""
        if state is None:
            state = self.engine.get_state()

        result_message = None
        if state.result is not None:
            result_message = self.result_message_for(state.result)

        return BoardView(
            cell_texts=tuple(mark.value for mark in state.board),
            cell_colors=tuple(self.color_for(mark) for mark in state.board),
            turn_text=self.turn_text,
            focused=self.navigator.focused,
            winning_line=self.win_checker.get_winning_line(state.board),
            result_message=result_message
        )

    # ==================== INPUT ====================

    def move_focus(self, direction: Direction) -> FocusTarget:
        target = self.navigator.move(direction)
        self._publish_view()
        return target

    def select(self) -> bool:
        """
        Press OK on whatever has focus.

        Returns:
            True if the press did something (a move, a reset, a dialog).
        """
        focused = self.navigator.focused

        if focused == Button.RESET:
            self.reset()
            return True
        if focused == Button.ABOUT:
            for listener in list(self._about_listeners):
                listener()
            return True

        return self.engine.play_at(focused)

    def select_cell(self, index: int) -> bool:
        """
        Handle a click on a cell.

        A cell that doesn't have focus only takes the focus; clicking the
        focused cell plays there.

        Returns:
            True if a move was made.
        """
        if not 0 <= index < CELL_COUNT:
            return False

        if self.navigator.focused != index:
            self.navigator.focus(index)
            self._publish_view()
            return False

        return self.engine.play_at(index)

    def reset(self):
        """Reset the game and put focus back on the center cell."""
        self.navigator.reset_focus()
        self.engine.reset()

    def play_again(self):
        self.reset()

    def handle_key(self, keysym: str) -> bool:
        """
        Handle a remote key press.

        Returns:
            True if the key was consumed. Back keys are left to the caller.
        """
        config = self.config
        directions = (
            (config.KEYS_UP, Direction.UP),
            (config.KEYS_DOWN, Direction.DOWN),
            (config.KEYS_LEFT, Direction.LEFT),
            (config.KEYS_RIGHT, Direction.RIGHT),
        )
        for keys, direction in directions:
            if keysym in keys:
                self.move_focus(direction)
                return True

        if keysym in config.KEYS_SELECT:
            self.select()
            return True
        if keysym in config.KEYS_RESET:
            self.reset()
            return True

        if config.DEBUG_MODE:
            print(f"Unhandled key: {keysym}")
        return False

    # ==================== ENGINE EVENTS ====================

    def _on_state_changed(self, state: GameState):
        # While the game is over the dialog carries the final text
        if state.result is None:
            self.turn_text = self.turn_text_for(state.current_player)

        self._publish_view(state)

        finished = state.result is not None and self._last_result is None
        self._last_result = state.result

        if finished:
            message = self.result_message_for(state.result)
            for listener in list(self._result_listeners):
                listener(state.result, message)

    def _publish_view(self, state: Optional[GameState] = None):
        view = self.build_view(state)
        for listener in list(self._view_listeners):
            listener(view)
