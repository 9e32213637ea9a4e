# -*- coding: utf-8 -*-

import tkinter as tk

from services.settings_service import SettingsService
from services.timer_service import TimerService
from ui.assets import PhaseImages
from ui.pomodoro_widget import PomodoroWidget
from ui.settings_dialog import SettingsDialog


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        timer_service: TimerService,
        settings_service: SettingsService,
        images: PhaseImages,
    ):
        self.root = root
        self.timer_service = timer_service
        self.settings_service = settings_service
        self.images = images

        self.root.title("Tomato")
        self.root.geometry("380x420")
        self.root.resizable(False, False)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self._settings_dialog = None

        self._build_ui()

    def _build_ui(self):
        self.pomodoro = PomodoroWidget(
            self.root,
            timer_service=self.timer_service,
            images=self.images,
            on_open_settings=self.open_settings,
        )
        self.pomodoro.pack(fill="both", expand=True)

    def open_settings(self):
        if self._settings_dialog is not None and self._settings_dialog.winfo_exists():
            self._settings_dialog.lift()
            return
        self._settings_dialog = SettingsDialog(self.root, self.settings_service)

    def close(self):
        # never leave the alarm looping after the window is gone
        self.timer_service.shutdown()
        self.root.destroy()

    def run(self):
        self.root.mainloop()
