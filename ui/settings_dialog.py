# -*- coding: utf-8 -*-

import logging
import sys
import tkinter as tk
from tkinter import messagebox, ttk

from domain.models import SettingsInputError
from services.settings_service import SettingsService

logger = logging.getLogger(__name__)

FIELDS = (
    ("work", "Work time"),
    ("short_break", "Short break"),
    ("long_break", "Long break"),
    ("cycles", "Cycles"),
)

# Cmd+Option+D on macOS, Ctrl+Alt+D elsewhere
DEBUG_HOTKEYS = (
    ("<Command-Option-d>", "<Command-Option-D>")
    if sys.platform == "darwin"
    else ("<Control-Alt-d>", "<Control-Alt-D>")
)


class SettingsDialog(tk.Toplevel):
    """
    Modal settings form. Stays open until the input is valid or it is closed.

    The debug hotkey only flips the pending flag shown in the form,
    it reaches the settings file through Save like every other field.
    """

    def __init__(self, master, settings_service: SettingsService):
        super().__init__(master)
        self.settings_service = settings_service

        self.title("Settings")
        self.resizable(False, False)
        self.transient(master)

        config = settings_service.current()
        self.vars = {
            "work": tk.StringVar(value=str(config.work)),
            "short_break": tk.StringVar(value=str(config.short_break)),
            "long_break": tk.StringVar(value=str(config.long_break)),
            "cycles": tk.StringVar(value=str(config.cycles)),
        }
        self.debug_var = tk.BooleanVar(value=config.debug)
        self.debug_info_var = tk.StringVar()

        self._build_ui()
        self._refresh_debug_labels()

        for seq in DEBUG_HOTKEYS:
            self.bind(seq, self._toggle_debug)
        self.bind("<Return>", lambda e: self._save())
        self.bind("<Escape>", lambda e: self.destroy())
        self.protocol("WM_DELETE_WINDOW", self.destroy)

        self.grab_set()
        self.entries["work"].focus_set()

    def _build_ui(self):
        outer = ttk.Frame(self, padding=10)
        outer.pack(fill="both", expand=True)
        outer.columnconfigure(1, weight=1)

        ttk.Label(outer, text="Settings", font=("Avenir Next", 24, "bold")).grid(
            row=0, column=0, columnspan=2, sticky="w", pady=(0, 10)
        )

        self.entries = {}
        self.labels = {}
        for row, (key, label) in enumerate(FIELDS, start=1):
            lbl = ttk.Label(outer)
            lbl.grid(row=row, column=0, sticky="w", pady=2)
            entry = ttk.Entry(outer, textvariable=self.vars[key], width=12)
            entry.grid(row=row, column=1, sticky="e", pady=2)
            self.labels[key] = lbl
            self.entries[key] = entry

        ttk.Label(outer, textvariable=self.debug_info_var, foreground="red").grid(
            row=len(FIELDS) + 1, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        btns = ttk.Frame(outer)
        btns.grid(row=len(FIELDS) + 2, column=0, columnspan=2, sticky="e", pady=(10, 0))
        ttk.Button(btns, text="Close", command=self.destroy).grid(row=0, column=0, padx=(0, 6))
        ttk.Button(btns, text="Save", command=self._save).grid(row=0, column=1)

    def _refresh_debug_labels(self):
        unit = "sec" if self.debug_var.get() else "min"
        for key, label in FIELDS:
            text = f"{label}:" if key == "cycles" else f"{label} ({unit}):"
            self.labels[key].config(text=text)
        self.debug_info_var.set("Debug mode: durations are seconds" if self.debug_var.get() else "")

    def _toggle_debug(self, event=None):
        self.debug_var.set(not self.debug_var.get())
        self._refresh_debug_labels()
        on = self.debug_var.get()
        logger.info("Debug mode toggled %s (pending save)", "on" if on else "off")
        show = messagebox.showwarning if on else messagebox.showinfo
        show(
            "Debug Mode",
            f"Debug mode is now {'ON' if on else 'OFF'}\nPress Save to keep it.",
            parent=self,
        )

    def _save(self):
        try:
            self.settings_service.submit(
                self.vars["work"].get(),
                self.vars["short_break"].get(),
                self.vars["long_break"].get(),
                self.vars["cycles"].get(),
                self.debug_var.get(),
            )
        except SettingsInputError as e:
            messagebox.showerror(e.title, e.message, parent=self)
            return
        self.destroy()
