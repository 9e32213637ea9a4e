# -*- coding: utf-8 -*-

from typing import Callable, Optional


class TkTicker:
    """
    One-second tick source on top of Tk's after().
    The callback may stop() / start() the ticker itself without
    ending up with two pending jobs.
    """

    def __init__(self, widget, interval_ms: int = 1000):
        self.widget = widget
        self.interval_ms = interval_ms
        self._callback: Optional[Callable[[], None]] = None
        self._job = None
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._active = True
        if self._job is None:
            self._job = self.widget.after(self.interval_ms, self._tick_once)

    def stop(self) -> None:
        self._active = False
        if self._job is not None:
            try:
                self.widget.after_cancel(self._job)
            except Exception:
                pass
            self._job = None

    def _tick_once(self):
        self._job = None
        if not self._active or self._callback is None:
            return
        self._callback()
        # schedule next tick
        if self._active and self._job is None:
            self._job = self.widget.after(self.interval_ms, self._tick_once)
