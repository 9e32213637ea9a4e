# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from core.timer_engine import EngineSnapshot
from domain.models import PHASE_LABELS, WORK
from services.timer_service import TimerService
from ui.assets import ICON_SIZE, PhaseImages

WORK_COLOR = "#cd6155"
BREAK_COLOR = "#52be80"


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


class PomodoroWidget(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
        images: PhaseImages,
        on_open_settings: Optional[Callable[[], None]] = None,
    ):
        super().__init__(master, padding=10)

        self.timer_service = timer_service
        self.images = images
        self.on_open_settings = on_open_settings

        self._build_ui()

        # wire callbacks from service -> widget UI
        self.timer_service.set_on_tick(self._on_tick)
        self.timer_service.set_on_phase_change(self._on_phase_change)
        self.timer_service.set_on_state_change(self._on_state_change)

        # initial render
        self._render(self.timer_service.get_snapshot())
        self._update_buttons()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        self.time_var = tk.StringVar(value="25:00")
        self.phase_var = tk.StringVar(value=PHASE_LABELS[WORK])
        self.info_var = tk.StringVar(value="Click Start to begin")

        header = ttk.Frame(self)
        header.grid(row=0, column=0, sticky="ew")
        header.columnconfigure(0, weight=1)

        ttk.Label(header, text="Tomato", font=("Avenir Next", 24, "bold")).grid(
            row=0, column=0, sticky="w"
        )
        self.settings_btn = ttk.Button(
            header, text="⚙", width=3, command=self._open_settings
        )
        self.settings_btn.grid(row=0, column=1, sticky="e")

        # icon with the remaining time drawn on top of it
        self.icon_label = tk.Label(
            self,
            textvariable=self.time_var,
            compound="center",
            font=("Avenir Next", 20),
        )
        self.icon_label.grid(row=1, column=0, pady=(10, 4))

        self.phase_label = ttk.Label(
            self, textvariable=self.phase_var, font=("Avenir Next", 11, "bold")
        )
        self.phase_label.grid(row=2, column=0)

        self.info_label = ttk.Label(self, textvariable=self.info_var)
        self.info_label.grid(row=3, column=0, pady=(0, 10))

        btns = ttk.Frame(self)
        btns.grid(row=4, column=0)

        self.start_btn = ttk.Button(btns, text="Start", command=self._toggle)
        self.reset_btn = ttk.Button(btns, text="Reset", command=self._reset)

        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.reset_btn.grid(row=0, column=1)

    def _update_buttons(self):
        snap = self.timer_service.get_snapshot()
        self.start_btn.config(text="Pause" if snap.is_running else "Start")

        if snap.is_idle:
            self.reset_btn.state(["disabled"])
        else:
            self.reset_btn.state(["!disabled"])

    def _toggle(self):
        self.timer_service.toggle()

    def _reset(self):
        self.timer_service.reset()

    def _open_settings(self):
        if self.on_open_settings:
            self.on_open_settings()

    # ---- Service callbacks ----
    def _on_tick(self, snap: EngineSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))

    def _on_phase_change(self, snap: EngineSnapshot):
        self._render(snap)
        self.info_var.set(snap.message)
        self._update_buttons()
        # draw before the blocking dialog shows up
        self.update_idletasks()

    def _on_state_change(self, snap: EngineSnapshot):
        self._render(snap)
        self._update_buttons()

    def _render(self, snap: EngineSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))
        self.phase_var.set(PHASE_LABELS[snap.phase])

        image = self.images.for_phase(snap.phase)
        if image is not None:
            self.icon_label.config(
                image=image,
                width=ICON_SIZE[0],
                height=ICON_SIZE[1],
                bg=self.winfo_toplevel().cget("bg"),
            )
        else:
            # no image on disk: fall back to a coloured block
            self.icon_label.config(
                image="",
                width=12,
                height=5,
                bg=WORK_COLOR if snap.is_work_time else BREAK_COLOR,
            )

        if snap.is_idle:
            self.info_var.set("Click Start to begin")
        elif snap.is_running:
            self.info_var.set("Running...")
        else:
            self.info_var.set("Paused")
