from __future__ import annotations

import logging
import tkinter as tk

from tkinter import ttk

from ..core.exceptions import GlassPassError
from ..core.settings import TOAST_MS

logger = logging.getLogger(__name__)


class ClipboardUnavailable(GlassPassError):
    """Raised when neither the clipboard nor the fallback could copy text."""


def copy_to_clipboard(root: tk.Misc, text: str, entry: tk.Widget) -> bool:
    """
    Place text on the system clipboard.

    The Tk clipboard is tried first. If it fails, the text in entry is
    selected instead so the user can copy it by hand.

    Returns:
        True if the text reached the clipboard, False if it was only
        selected.

    Raises:
        ClipboardUnavailable: If the text could not even be selected.
    """
    try:
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update_idletasks()
        return True
    except tk.TclError as exc:
        logger.warning('Clipboard unavailable, using selection fallback: %s', exc)

    try:
        entry.focus_set()
        entry.selection_range(0, 'end')  # type: ignore[attr-defined]
    except tk.TclError as exc:
        msg = f'Could not copy to clipboard: {exc}'
        raise ClipboardUnavailable(msg) from exc

    return False


def show_toast(parent: tk.Misc, message: str, duration_ms: int = TOAST_MS) -> tk.Toplevel:
    """
    Show a transient error message near the top-right of parent.

    Args:
        parent: Window the toast is positioned against.
        message: Text to display.
        duration_ms: How long the toast stays on screen.

    Returns:
        The toast window, already scheduled for destruction.
    """
    toast = tk.Toplevel(parent)
    toast.overrideredirect(True)
    toast.attributes('-topmost', True)

    ttk.Label(
        toast,
        text=message,
        style='Toast.TLabel',
        padding=(20, 12),
    ).pack()

    parent.update_idletasks()
    x = parent.winfo_rootx() + parent.winfo_width() - toast.winfo_reqwidth() - 20
    y = parent.winfo_rooty() + 20
    toast.geometry(f'+{x}+{y}')

    def dismiss() -> None:
        if toast.winfo_exists():
            toast.destroy()

    toast.after(duration_ms, dismiss)
    return toast
