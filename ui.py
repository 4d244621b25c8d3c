"""
TV TicTacToe UI
A remote-control friendly interface for TicTacToe using Tkinter.

Shows:
- Title and whose turn it is
- The 3x3 board, with the focused cell highlighted
- Reset and About buttons
- A dialog when the game ends, with "Play again"
"""

import tkinter as tk
from tkinter import ttk
from typing import Optional

from game.game_engine import GameEngine
from game.game_state import BOARD_SIZE, GameResult, to_index
from remote.config import UIConfig
from remote.focus import Button
from remote.presenter import BoardPresenter, BoardView


class TicTacToeTVUI:
    """
    Main UI class for TV TicTacToe.
    """

    def __init__(self, engine: Optional[GameEngine] = None, config: Optional[UIConfig] = None):
        """Initialize the UI."""
        self.config = config or UIConfig()
        self.engine = engine or GameEngine(debug=self.config.DEBUG_MODE)
        self.presenter = BoardPresenter(self.engine, self.config)

        self.dialog: Optional[tk.Toplevel] = None

        # Create UI
        self._create_ui()

        self.presenter.on_view(self._render)
        self.presenter.on_result(self._show_result_dialog)
        self.presenter.on_about(self._show_about_dialog)

        # Initial render
        self._render(self.presenter.build_view())

    def _create_ui(self):
        """Create the Tkinter UI."""
        config = self.config

        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.BACKGROUND_COLOR)
        self.root.geometry(f"{config.WINDOW_WIDTH}x{config.WINDOW_HEIGHT}")

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=config.BACKGROUND_COLOR)
        style.configure(
            'Title.TLabel',
            background=config.BACKGROUND_COLOR,
            foreground=config.X_COLOR,
            font=(config.FONT_FAMILY, config.TITLE_FONT_SIZE, 'bold')
        )
        style.configure(
            'Turn.TLabel',
            background=config.BACKGROUND_COLOR,
            foreground=config.TEXT_COLOR,
            font=(config.FONT_FAMILY, config.TEXT_FONT_SIZE)
        )

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Top
        ttk.Label(main_frame, text=config.GAME_TITLE, style='Title.TLabel').pack(pady=(0, 5))
        self.turn_label = ttk.Label(main_frame, text="", style='Turn.TLabel')
        self.turn_label.pack(pady=(0, 15))

        # Board
        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.cells = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                index = to_index(row, col)
                cell = tk.Label(
                    board_frame,
                    text="",
                    font=(config.FONT_FAMILY, config.CELL_FONT_SIZE, 'bold'),
                    width=3,
                    height=1,
                    bg=config.CELL_BACKGROUND,
                    fg=config.TEXT_COLOR,
                    relief='ridge',
                    borderwidth=2,
                    highlightthickness=4
                )
                cell.grid(row=row, column=col, padx=4, pady=4)
                cell.bind("<Button-1>", lambda _event, i=index: self.presenter.select_cell(i))
                self.cells.append(cell)

        # Bottom
        button_frame = ttk.Frame(main_frame)
        button_frame.pack(pady=20)

        self.buttons = {}
        for button, text, command in (
            (Button.RESET, config.RESET_LABEL, self.presenter.reset),
            (Button.ABOUT, config.ABOUT_LABEL, self._show_about_dialog),
        ):
            btn = tk.Button(
                button_frame,
                text=text,
                font=(config.FONT_FAMILY, config.TEXT_FONT_SIZE, 'bold'),
                width=10,
                bg=config.CELL_BACKGROUND,
                fg=config.TEXT_COLOR,
                highlightthickness=4,
                command=command
            )
            btn.pack(side=tk.LEFT, padx=10)
            self.buttons[button] = btn

        # Remote keys
        self.root.bind("<Key>", self._on_key)
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _render(self, view: BoardView):
        """Draw the board, the turn text and the focus."""
        config = self.config
        winning = view.winning_line or ()

        for index, cell in enumerate(self.cells):
            focused = view.focused == index
            cell.configure(
                text=view.cell_texts[index],
                fg=view.cell_colors[index],
                bg=config.WIN_HIGHLIGHT_COLOR if index in winning else config.CELL_BACKGROUND,
                highlightbackground=config.FOCUS_COLOR if focused else config.BACKGROUND_COLOR,
                highlightcolor=config.FOCUS_COLOR if focused else config.BACKGROUND_COLOR
            )

        for button, btn in self.buttons.items():
            color = config.FOCUS_COLOR if view.focused == button else config.BACKGROUND_COLOR
            btn.configure(highlightbackground=color, highlightcolor=color)

        self.turn_label.configure(text=view.turn_text)

    def _on_key(self, event):
        """Route remote keys; dialogs handle their own keys."""
        if self.dialog is not None:
            return

        if event.keysym in self.config.KEYS_BACK:
            self._quit()
            return

        self.presenter.handle_key(event.keysym)

    def _open_dialog(self, message: str, button_text: str, on_confirm):
        """Show a modal dialog with a single focused button."""
        config = self.config
        self._close_dialog()

        dialog = tk.Toplevel(self.root)
        dialog.title(config.GAME_TITLE)
        dialog.configure(bg=config.BACKGROUND_COLOR)
        dialog.transient(self.root)

        tk.Label(
            dialog,
            text=message,
            font=(config.FONT_FAMILY, config.TEXT_FONT_SIZE),
            bg=config.BACKGROUND_COLOR,
            fg=config.TEXT_COLOR,
            wraplength=420,
            justify=tk.LEFT
        ).pack(padx=30, pady=20)

        def confirm(_event=None):
            self._close_dialog()
            on_confirm()

        ok = tk.Button(
            dialog,
            text=button_text,
            font=(config.FONT_FAMILY, config.TEXT_FONT_SIZE, 'bold'),
            bg=config.FOCUS_COLOR,
            command=confirm
        )
        ok.pack(pady=(0, 20))

        for key in config.KEYS_SELECT:
            dialog.bind(f"<{key}>", confirm)
        for key in config.KEYS_BACK:
            dialog.bind(f"<{key}>", lambda _event: self._close_dialog())
        dialog.protocol("WM_DELETE_WINDOW", self._close_dialog)

        # On TV the dialog button must take focus straight away
        ok.focus_set()
        dialog.grab_set()
        self.dialog = dialog

    def _close_dialog(self):
        if self.dialog is not None:
            self.dialog.grab_release()
            self.dialog.destroy()
            self.dialog = None
            self.root.focus_set()

    def _show_result_dialog(self, result: GameResult, message: str):
        """Show the end-of-game dialog."""
        self._open_dialog(message, self.config.PLAY_AGAIN, self.presenter.play_again)

    def _show_about_dialog(self):
        """Show the About dialog."""
        self._open_dialog(self.config.ABOUT_TEXT, self.config.OK_LABEL, lambda: None)

    def _quit(self):
        """Close the window."""
        self.presenter.close()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.focus_set()
        self.root.mainloop()


def main():
    """Run the UI."""
    ui = TicTacToeTVUI()
    ui.run()


if __name__ == "__main__":
    main()
