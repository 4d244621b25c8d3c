"""
UI configuration for TV TicTacToe.
Window, theme, text and remote-control key settings.
"""


class UIConfig:
    """
    Configuration class for the TV screen.
    Change these values to re-theme or re-map the remote!
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_WIDTH = 960
    WINDOW_HEIGHT = 720

    # ==================== THEME (ocean) ====================
    BACKGROUND_COLOR = "#0b1d33"
    CELL_BACKGROUND = "#12304f"
    FOCUS_COLOR = "#ffd166"
    WIN_HIGHLIGHT_COLOR = "#1f6f5c"

    X_COLOR = "#2a9df4"       # ocean primary
    O_COLOR = "#00c2a8"       # ocean secondary
    TEXT_COLOR = "#e6f1ff"    # ocean text, also used for empty cells

    FONT_FAMILY = "Segoe UI"
    CELL_FONT_SIZE = 36
    TITLE_FONT_SIZE = 24
    TEXT_FONT_SIZE = 16

    # ==================== TEXT ====================
    GAME_TITLE = "Tic Tac Toe"
    PLAYER_X_TURN = "Player X's turn"
    PLAYER_O_TURN = "Player O's turn"
    PLAYER_X_WINS = "Player X wins!"
    PLAYER_O_WINS = "Player O wins!"
    DRAW_MESSAGE = "It's a draw!"
    PLAY_AGAIN = "Play again"
    RESET_LABEL = "Reset"
    ABOUT_LABEL = "About"
    OK_LABEL = "OK"
    ABOUT_TEXT = (
        "Tic Tac Toe for the big screen.\n\n"
        "Use the arrow keys to move between cells and press OK to place "
        "your mark. X always starts."
    )

    # ==================== FOCUS ====================
    # Center cell (1,1) gets focus at start and after every reset
    DEFAULT_FOCUS_CELL = 4

    # ==================== REMOTE KEYS (Tk keysyms) ====================
    KEYS_UP = ("Up",)
    KEYS_DOWN = ("Down",)
    KEYS_LEFT = ("Left",)
    KEYS_RIGHT = ("Right",)
    # D-pad center usually arrives as Return on TV keyboards
    KEYS_SELECT = ("Return", "KP_Enter", "space")
    KEYS_RESET = ("r", "R")
    KEYS_BACK = ("Escape", "BackSpace")

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
