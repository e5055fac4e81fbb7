from __future__ import annotations

import logging
import tkinter as tk

from tkinter import ttk

from ..core.exceptions import InvalidConfiguration
from ..core.password_generator import generate
from ..core.settings import COPY_FEEDBACK_MS, configure_logging
from ..core.strength import evaluate
from .frames import GeneratorFrame
from .widgets import ClipboardUnavailable, copy_to_clipboard, show_toast

logger = logging.getLogger(__name__)


class GlassPassApp(tk.Tk):
    """
    Top-level Tkinter application for the password generator.

    This GUI is a thin layer over the core generator and strength
    evaluator: it reads the controls into a GenerationConfig on every
    request and never keeps generation state of its own.
    """

    WINDOW_WIDTH = 460
    WINDOW_HEIGHT = 380

    def __init__(self) -> None:
        super().__init__()

        self.title('GlassPass')
        self.geometry(f'{self.WINDOW_WIDTH}x{self.WINDOW_HEIGHT}')
        self.minsize(self.WINDOW_WIDTH, self.WINDOW_HEIGHT)

        style = ttk.Style(self)
        style.configure('Toast.TLabel', background='#D32F2F', foreground='white')

        container = ttk.Frame(self)
        container.pack(fill='both', expand=True)

        self.frame = GeneratorFrame(parent=container, controller=self)
        self.frame.pack(fill='both', expand=True)

        self.bind_all('<Control-Return>', self._on_generate_shortcut)
        self.frame.output.bind('<Control-c>', self._on_copy_shortcut)

        self.generate_password()

    def show_error(self, message: str) -> None:
        """Show a transient error toast."""
        logger.warning('%s', message)
        show_toast(self, message)

    def generate_password(self) -> None:
        """
        Generate a password from the current controls and display it.

        On an invalid configuration the previous password is left in place.
        """
        config = self.frame.read_config()

        try:
            password = generate(config)
        except InvalidConfiguration as exc:
            self.show_error(str(exc))
            return

        self.frame.password_var.set(password)

        report = evaluate(password)
        self.frame.strength_var.set(f'Strength: {report.strength} ({report.score})')

    def copy_password(self) -> None:
        """Copy the displayed password, falling back to selecting it."""
        password = self.frame.password_var.get()

        if not password:
            self.show_error('No password to copy')
            return

        try:
            copied = copy_to_clipboard(self, password, self.frame.output)
        except ClipboardUnavailable:
            self.show_error('Could not copy to clipboard')
            return

        if not copied:
            self.show_error('Press Ctrl+C to copy the selected password')
            return

        button = self.frame.copy_button
        button.configure(text='Copied!')
        self.after(COPY_FEEDBACK_MS, lambda: button.configure(text='Copy'))

    def _on_generate_shortcut(self, _event: tk.Event) -> str:
        self.generate_password()
        return 'break'

    def _on_copy_shortcut(self, _event: tk.Event) -> str:
        self.copy_password()
        return 'break'


def main() -> None:
    """Entry point for launching the Tkinter GUI."""
    configure_logging()
    app = GlassPassApp()
    app.mainloop()


if __name__ == '__main__':
    main()
