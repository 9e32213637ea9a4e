# -*- coding: utf-8 -*-

import logging
from typing import Callable, Optional

from core.timer_engine import EngineSnapshot, TimerEngine
from domain.models import TimerConfig
from services.notification_service import ringing

logger = logging.getLogger(__name__)


class TimerService:
    """
    Orchestrates:
    - TimerEngine state
    - the tick source (start / stop around notifications)
    - phase change notification + looping alarm
    - Callbacks for UI

    ticker:   start(callback), stop(), is_active
    notifier: confirm(message) -> bool, blocking
    alarm:    start(), stop()
    """

    def __init__(self, engine: TimerEngine, ticker, notifier, alarm):
        self.engine = engine
        self.ticker = ticker
        self.notifier = notifier
        self.alarm = alarm

        self._on_tick: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_phase_change: Optional[Callable[[EngineSnapshot], None]] = None
        self._on_state_change: Optional[Callable[[EngineSnapshot], None]] = None

    # ----- Callbacks -----
    def set_on_tick(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_tick = fn

    def set_on_phase_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_phase_change = fn

    def set_on_state_change(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_state_change = fn

    def _emit_tick(self) -> None:
        if self._on_tick:
            self._on_tick(self.engine.snapshot())

    def _emit_phase_change(self) -> None:
        if self._on_phase_change:
            self._on_phase_change(self.engine.snapshot())

    def _emit_state_change(self) -> None:
        if self._on_state_change:
            self._on_state_change(self.engine.snapshot())

    # ----- Public API -----
    def get_snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot()

    @property
    def config(self) -> TimerConfig:
        return self.engine.config

    def start(self) -> None:
        self.alarm.stop()
        if not self.engine.is_running:
            self.engine.start()
            self.ticker.start(self.tick)
            logger.debug("Timer started: %s", self.engine.snapshot())
        self._emit_state_change()

    def pause(self) -> None:
        self.ticker.stop()
        self.engine.pause()
        self._emit_state_change()

    def toggle(self) -> None:
        if self.engine.is_running:
            self.pause()
        else:
            self.start()

    def reset(self) -> None:
        self.alarm.stop()
        self.ticker.stop()
        self.engine.reset()
        self._emit_state_change()
        self._emit_tick()

    def apply_config(self, config: TimerConfig) -> None:
        self.alarm.stop()
        self.ticker.stop()
        self.engine.configure(config)
        logger.info("Timer reconfigured: %s", config)
        self._emit_state_change()
        self._emit_tick()

    def shutdown(self) -> None:
        self.ticker.stop()
        self.engine.pause()
        self.alarm.stop()

    def tick(self) -> None:
        """
        Called once per second by the ticker.
        On a phase change the ticker is stopped before the (blocking)
        notification, and only restarted if the user accepted it.
        """
        if not self.engine.is_running:
            return

        phase_changed = self.engine.tick()
        self._emit_tick()

        if not phase_changed:
            return

        self.ticker.stop()
        snap = self.engine.snapshot()
        logger.info("Phase changed to %s (%ss)", snap.phase, snap.remaining_sec)
        self._emit_phase_change()

        if self._notify(snap.message):
            self.engine.start()
            self.ticker.start(self.tick)
        self._emit_state_change()

    def _notify(self, message: str) -> bool:
        try:
            with ringing(self.alarm):
                return bool(self.notifier.confirm(message))
        except Exception:
            logger.exception("Notification error")
            return False
