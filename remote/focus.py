"""
Remote-control focus navigation for TV TicTacToe.
Moves focus around the 3x3 grid and the button row with the D-pad.
"""

from enum import Enum
from typing import Optional, Union

from game.game_state import BOARD_SIZE, CELL_COUNT, to_index, to_row_col
from .config import UIConfig


class Direction(Enum):
    """D-pad directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Button(Enum):
    """Buttons below the board."""
    RESET = "reset"
    ABOUT = "about"


# A focus target is either a cell index (0-8) or a button
FocusTarget = Union[int, Button]

# Where "up" from a button lands
BUTTON_UP_TARGETS = {
    Button.RESET: 6,
    Button.ABOUT: 8,
}


class FocusNavigator:
    """
    Keeps track of which cell or button has focus.

    Layout:
        0 1 2
        3 4 5
        6 7 8
        [RESET] [ABOUT]

    Moving off an edge leaves focus where it is.
    """

    def __init__(self, config: Optional[UIConfig] = None):
        self.config = config or UIConfig()
        self.focused: FocusTarget = self.config.DEFAULT_FOCUS_CELL

    def reset_focus(self) -> FocusTarget:
        """Put focus back on the default cell."""
        self.focused = self.config.DEFAULT_FOCUS_CELL
        return self.focused

    def focus(self, target: FocusTarget) -> FocusTarget:
        """Give focus to a specific cell or button."""
        if not isinstance(target, Button) and not 0 <= target < CELL_COUNT:
            raise ValueError(f"Cannot focus cell {target}")
        self.focused = target
        return self.focused

    @property
    def focused_cell(self) -> Optional[int]:
        """The focused cell index, or None when a button has focus."""
        if isinstance(self.focused, Button):
            return None
        return self.focused

    def move(self, direction: Direction) -> FocusTarget:
        """
        Move focus one step.

        Returns:
            The newly focused target.
        """
        if isinstance(self.focused, Button):
            self.focused = self._move_from_button(self.focused, direction)
        else:
            self.focused = self._move_from_cell(self.focused, direction)
        return self.focused

    def _move_from_cell(self, index: int, direction: Direction) -> FocusTarget:
        row, col = to_row_col(index)
        last = BOARD_SIZE - 1

        if direction == Direction.UP and row > 0:
            return to_index(row - 1, col)
        if direction == Direction.DOWN:
            if row < last:
                return to_index(row + 1, col)
            return Button.ABOUT if col == last else Button.RESET
        if direction == Direction.LEFT and col > 0:
            return to_index(row, col - 1)
        if direction == Direction.RIGHT and col < last:
            return to_index(row, col + 1)

        return index

    def _move_from_button(self, button: Button, direction: Direction) -> FocusTarget:
        if direction == Direction.UP:
            return BUTTON_UP_TARGETS[button]
        if direction == Direction.RIGHT and button == Button.RESET:
            return Button.ABOUT
        if direction == Direction.LEFT and button == Button.ABOUT:
            return Button.RESET

        return button
