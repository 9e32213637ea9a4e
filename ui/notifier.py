# -*- coding: utf-8 -*-

from tkinter import messagebox

from services.notification_service import DIALOG_TITLE


class TkDialogNotifier:
    """In-process OK / Cancel dialog, used where osascript is not around."""

    def __init__(self, parent, title: str = DIALOG_TITLE):
        self.parent = parent
        self.title = title

    def confirm(self, message: str) -> bool:
        top = self.parent.winfo_toplevel()
        top.deiconify()
        top.lift()
        return bool(messagebox.askokcancel(self.title, message, parent=top))
