"""
Remote-control presentation for TV TicTacToe.
Focus navigation, display text and input handling on top of the engine.
"""

from .config import UIConfig
from .focus import Button, Direction, FocusNavigator
from .presenter import BoardPresenter, BoardView
