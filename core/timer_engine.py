# -*- coding: utf-8 -*-

from dataclasses import dataclass

from domain.models import (
    DEFAULT_CONFIG,
    LONG_BREAK,
    PHASE_MESSAGES,
    SHORT_BREAK,
    WORK,
    TimerConfig,
)


@dataclass(frozen=True)
class EngineSnapshot:
    phase: str  # "work" | "short_break" | "long_break"
    remaining_sec: int
    work_sessions: int
    is_running: bool
    is_idle: bool

    @property
    def is_work_time(self) -> bool:
        return self.phase == WORK

    @property
    def message(self) -> str:
        return PHASE_MESSAGES[self.phase]


class TimerEngine:
    """
    Pure countdown + phase engine (no Tkinter).
    Something external calls tick() once per second while running.

    work -> short_break, or long_break every `cycles` completed work phases
    short_break / long_break -> work
    """

    def __init__(self, config: TimerConfig = DEFAULT_CONFIG):
        self.config = config

        self.phase = WORK
        self.remaining_sec = config.work_seconds()
        self.work_sessions = 0
        self.is_running = False
        self.is_idle = True  # not started since last reset

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            phase=self.phase,
            remaining_sec=self.remaining_sec,
            work_sessions=self.work_sessions,
            is_running=self.is_running,
            is_idle=self.is_idle,
        )

    def duration_for(self, phase: str) -> int:
        if phase == WORK:
            return self.config.work_seconds()
        if phase == SHORT_BREAK:
            return self.config.short_break_seconds()
        if phase == LONG_BREAK:
            return self.config.long_break_seconds()
        raise ValueError(f"Unknown phase: {phase!r}")

    def configure(self, config: TimerConfig) -> None:
        # TimerConfig is frozen, keeping the reference is a copy by value
        self.config = config
        self.reset()

    def start(self) -> None:
        # resumes from wherever we are, never resets
        self.is_running = True
        self.is_idle = False

    def pause(self) -> None:
        self.is_running = False

    def reset(self) -> None:
        self.phase = WORK
        self.remaining_sec = self.config.work_seconds()
        self.work_sessions = 0
        self.is_running = False
        self.is_idle = True

    def tick(self) -> bool:
        """
        Returns True if the phase changed on this tick.
        A phase change always leaves the engine stopped.
        """
        if not self.is_running:
            return False

        if self.remaining_sec > 0:
            self.remaining_sec -= 1

        if self.remaining_sec > 0:
            return False

        self._advance_phase()
        self.is_running = False
        return True

    def _advance_phase(self) -> None:
        if self.phase == WORK:
            if self.work_sessions + 1 >= self.config.cycles:
                self.phase = LONG_BREAK
                self.work_sessions = 0
            else:
                self.phase = SHORT_BREAK
                self.work_sessions += 1
        else:
            self.phase = WORK
        self.remaining_sec = self.duration_for(self.phase)
