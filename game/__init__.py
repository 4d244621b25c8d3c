"""
Game module for TV TicTacToe.
Handles game state, rules, and the observable engine.
"""

from .game_state import (
    GameState,
    GameResult,
    Mark,
    Player,
    BOARD_SIZE,
    CELL_COUNT,
    CENTER_CELL,
)
from .move_validator import MoveValidator, RejectReason, ValidationResult
from .win_checker import WinChecker
from .game_engine import GameEngine

__version__ = "1.0.0"
