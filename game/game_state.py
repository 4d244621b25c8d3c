"""
Game state for TV TicTacToe.
Defines the marks, players, results and the immutable board snapshot.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


# Fixed 3x3 board, stored as 9 cells in row-major order
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Default focus cell on the TV screen (row 1, col 1)
CENTER_CELL = 4


class Mark(Enum):
    """What a single cell holds."""
    EMPTY = ""
    X = "X"
    O = "O"


class Player(Enum):
    """The two players in the game."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def mark(self) -> Mark:
        """The mark this player puts on the board."""
        return Mark(self.value)

    @classmethod
    def from_mark(cls, mark: Mark) -> Optional["Player"]:
        """The player owning a mark, or None for EMPTY."""
        if mark == Mark.EMPTY:
            return None
        return cls(mark.value)


class GameResult(Enum):
    """How a finished game ended."""
    X_WINS = "X_WINS"
    O_WINS = "O_WINS"
    DRAW = "DRAW"

    @classmethod
    def for_player(cls, player: Player) -> "GameResult":
        """The WINS outcome for the given player."""
        return cls.X_WINS if player == Player.X else cls.O_WINS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for a draw."""
        if self == GameResult.X_WINS:
            return Player.X
        if self == GameResult.O_WINS:
            return Player.O
        return None


Board = Tuple[Mark, ...]


def empty_board() -> Board:
    """A board with all 9 cells EMPTY."""
    return (Mark.EMPTY,) * CELL_COUNT


def to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    return row * BOARD_SIZE + col


def to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    return divmod(index, BOARD_SIZE)


@dataclass(frozen=True)
class GameState:
    """
    Snapshot of the TicTacToe game.

    Tracks:
    - The 9 board cells (row-major)
    - Whose turn it is
    - The result, once the game has ended

    Snapshots are frozen. The engine replaces its snapshot on every change
    and hands the same object to subscribers, so nobody outside the engine
    can change the board behind its back.
    """

    board: Board = field(default_factory=empty_board)

    # X always starts
    current_player: Player = Player.X

    # None while the game is in progress
    result: Optional[GameResult] = None

    def __post_init__(self):
        board = tuple(self.board)
        if len(board) != CELL_COUNT:
            raise ValueError(f"Board must have {CELL_COUNT} cells, got {len(board)}")
        # Lists passed in by callers are frozen into a tuple
        object.__setattr__(self, "board", board)

    @property
    def is_game_over(self) -> bool:
        return self.result is not None

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None if nobody has won (yet)."""
        if self.result is None:
            return None
        return self.result.winner

    def cell(self, row: int, col: int) -> Mark:
        """Get the mark at (row, col)."""
        return self.board[to_index(row, col)]

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of cell indices, in ascending order.
        """
        return [i for i, mark in enumerate(self.board) if mark == Mark.EMPTY]

    def format_board(self) -> str:
        """Text drawing of the board, with cell numbers 1-9 on empty cells."""
        lines = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                index = to_index(row, col)
                mark = self.board[index]
                cells.append(mark.value if mark != Mark.EMPTY else str(index + 1))
            lines.append(" " + " | ".join(cells))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)

    def print_board(self):
        """Print the board and game info to console."""
        print()
        print(self.format_board())

        if self.is_game_over:
            if self.winner:
                print(f"\n{self.winner.value} WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
