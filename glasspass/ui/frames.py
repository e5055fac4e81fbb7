from __future__ import annotations

import tkinter as tk

from tkinter import ttk
from typing import TYPE_CHECKING

from ..core.config import GenerationConfig
from ..core.settings import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH

if TYPE_CHECKING:
    from .app import GlassPassApp


class GeneratorFrame(ttk.Frame):
    """Main screen: length slider, class checkboxes, output and actions."""

    def __init__(self, parent: tk.Widget, controller: GlassPassApp) -> None:
        super().__init__(parent)
        self.controller = controller

        ttk.Label(self, text='GlassPass', font=('TkDefaultFont', 16)).pack(pady=10)

        self.password_var = tk.StringVar()
        self.output = ttk.Entry(
            self,
            textvariable=self.password_var,
            state='readonly',
            font=('TkFixedFont', 12),
        )
        self.output.pack(fill='x', padx=20, pady=5)
        self.output.bind('<FocusIn>', self._select_output)
        self.output.bind('<Button-1>', self._select_output)

        self.strength_var = tk.StringVar()
        ttk.Label(self, textvariable=self.strength_var).pack(anchor='w', padx=20)

        self.length_var = tk.IntVar(value=DEFAULT_LENGTH)
        length_row = ttk.Frame(self)
        length_row.pack(fill='x', padx=20, pady=10)
        ttk.Label(length_row, text='Length:').pack(side='left')
        self.length_label = ttk.Label(length_row, text=str(DEFAULT_LENGTH), width=3)
        self.length_label.pack(side='right')
        self.length_scale = ttk.Scale(
            length_row,
            from_=MIN_LENGTH,
            to=MAX_LENGTH,
            orient='horizontal',
            value=DEFAULT_LENGTH,
            command=self._on_length_change,
        )
        self.length_scale.pack(side='left', fill='x', expand=True, padx=10)

        self.class_vars = {
            'lowercase': tk.BooleanVar(value=True),
            'uppercase': tk.BooleanVar(value=True),
            'numbers': tk.BooleanVar(value=True),
            'symbols': tk.BooleanVar(value=True),
        }
        labels = {
            'lowercase': 'Lowercase (a-z)',
            'uppercase': 'Uppercase (A-Z)',
            'numbers': 'Numbers (0-9)',
            'symbols': 'Symbols (!@#...)',
        }
        for name, var in self.class_vars.items():
            ttk.Checkbutton(
                self,
                text=labels[name],
                variable=var,
                command=lambda n=name: self._on_class_toggle(n),
            ).pack(anchor='w', padx=20)

        btn_frame = ttk.Frame(self)
        btn_frame.pack(pady=15)
        ttk.Button(
            btn_frame,
            text='Generate',
            command=self.controller.generate_password,
        ).pack(side='left', padx=5)
        self.copy_button = ttk.Button(
            btn_frame,
            text='Copy',
            command=self.controller.copy_password,
        )
        self.copy_button.pack(side='left', padx=5)

    def read_config(self) -> GenerationConfig:
        """Snapshot the current controls as a GenerationConfig."""
        return GenerationConfig(
            length=self.length_var.get(),
            include_lowercase=self.class_vars['lowercase'].get(),
            include_uppercase=self.class_vars['uppercase'].get(),
            include_numbers=self.class_vars['numbers'].get(),
            include_symbols=self.class_vars['symbols'].get(),
        )

    def _select_output(self, _event: tk.Event | None = None) -> None:
        self.output.selection_range(0, 'end')

    def _on_length_change(self, value: str) -> None:
        length = int(float(value))
        if length == self.length_var.get():
            return

        self.length_var.set(length)
        self.length_label.configure(text=str(length))

        if self.password_var.get():
            self.controller.generate_password()

    def _on_class_toggle(self, name: str) -> None:
        """Refuse to clear the last enabled class, otherwise regenerate."""
        if not any(var.get() for var in self.class_vars.values()):
            self.class_vars[name].set(True)
            self.controller.show_error('Keep at least one option selected')
            return

        if self.password_var.get():
            self.controller.generate_password()
