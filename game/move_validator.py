"""
Move validator for TV TicTacToe.
Tells callers why a move would be rejected.
"""

from enum import Enum
from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, Mark, CELL_COUNT


class RejectReason(Enum):
    """Why a move was rejected."""
    GAME_OVER = "game_over"
    OUT_OF_RANGE = "out_of_range"
    CELL_OCCUPIED = "cell_occupied"


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    reason: Optional[RejectReason] = None
    error_message: Optional[str] = None


def is_position(position) -> bool:
    """True for a plain int inside the board (bools don't count)."""
    return (
        isinstance(position, int)
        and not isinstance(position, bool)
        and 0 <= position < CELL_COUNT
    )


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules, checked in this order:
    1. Game must not be over
    2. Position must be a cell index 0-8
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, position) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            position: Cell index to place the mark (0-8).

        Returns:
            ValidationResult with is_valid, reason and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.GAME_OVER,
                error_message="Game is already over!"
            )

        if not is_position(position):
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.OUT_OF_RANGE,
                error_message=f"Invalid position {position!r}. Must be 0-{CELL_COUNT - 1}."
            )

        occupant = game_state.board[position]
        if occupant != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                reason=RejectReason.CELL_OCCUPIED,
                error_message=f"Cell {position} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game_state.is_game_over:
            return []

        return game_state.get_empty_cells()
