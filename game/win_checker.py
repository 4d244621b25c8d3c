"""
Win checker for TV TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Sequence, Tuple
from .game_state import GameResult, Mark, Player


Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 cells with the same mark in a row
    (horizontally, vertically, or diagonally).
    Lines are always checked in the order below, so the first
    matching line is the one reported.
    """

    # All possible winning lines (as cell indices)
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Sequence[Mark]) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9 board cells.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for line in self.WINNING_LINES:
            mark = self._check_line(board, line)
            if mark is not None:
                return Player.from_mark(mark)

        return None

    def _check_line(self, board: Sequence[Mark], line: Line) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark filling the whole line, None otherwise.
        """
        a, b, c = line
        if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_board_full(self, board: Sequence[Mark]) -> bool:
        return all(mark != Mark.EMPTY for mark in board)

    def check_draw(self, board: Sequence[Mark]) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND nobody has won.
        """
        if self.check_winner(board) is not None:
            return False

        return self.is_board_full(board)

    def evaluate(self, board: Sequence[Mark]) -> Optional[GameResult]:
        """
        Work out the result for a board.

        Returns:
            X_WINS / O_WINS if a line is complete, DRAW if the board is
            full otherwise, None while the game can go on.
        """
        winner = self.check_winner(board)

        if winner is not None:
            return GameResult.for_player(winner)
        if self.is_board_full(board):
            return GameResult.DRAW

        return None

    def get_winning_line(self, board: Sequence[Mark]) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Returns:
            The first complete line as 3 cell indices, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line) is not None:
                return line
        return None
