# -*- coding: utf-8 -*-

from dataclasses import dataclass, replace

WORK = "work"
SHORT_BREAK = "short_break"
LONG_BREAK = "long_break"

PHASES = (WORK, SHORT_BREAK, LONG_BREAK)

# message shown when a phase is entered
PHASE_MESSAGES = {
    WORK: "Work time",
    SHORT_BREAK: "Break time",
    LONG_BREAK: "Long break time",
}

PHASE_LABELS = {
    WORK: "Work",
    SHORT_BREAK: "Short break",
    LONG_BREAK: "Long break",
}

MIN_MINUTES, MAX_MINUTES = 1, 59
MIN_CYCLES, MAX_CYCLES = 1, 9


def validate_values(work: int, short_break: int, long_break: int, cycles: int) -> bool:
    return (
        MIN_MINUTES <= work <= MAX_MINUTES
        and MIN_MINUTES <= short_break <= MAX_MINUTES
        and MIN_MINUTES <= long_break <= MAX_MINUTES
        and MIN_CYCLES <= cycles <= MAX_CYCLES
    )


@dataclass(frozen=True)
class TimerConfig:
    """
    Four bounded integers plus the debug flag.
    In debug mode the durations are seconds instead of minutes.
    """

    work: int
    short_break: int
    long_break: int
    cycles: int
    debug: bool = False

    def is_valid(self) -> bool:
        return validate_values(self.work, self.short_break, self.long_break, self.cycles)

    def _to_seconds(self, value: int) -> int:
        return value if self.debug else value * 60

    def work_seconds(self) -> int:
        return self._to_seconds(self.work)

    def short_break_seconds(self) -> int:
        return self._to_seconds(self.short_break)

    def long_break_seconds(self) -> int:
        return self._to_seconds(self.long_break)

    def with_debug(self, debug: bool) -> "TimerConfig":
        return replace(self, debug=bool(debug))


DEFAULT_CONFIG = TimerConfig(work=25, short_break=5, long_break=15, cycles=4, debug=False)


class TomatoError(Exception):
    pass


class ConfigParseError(TomatoError):
    """Settings file missing, truncated, or a field did not parse."""


class ConfigValidationError(TomatoError):
    """Settings parsed fine but are out of bounds."""


class AssetLoadError(TomatoError):
    pass


class NotificationError(TomatoError):
    pass


class SettingsInputError(TomatoError):
    """Rejected settings form input; shown to the user as-is."""

    def __init__(self, title: str, message: str):
        super().__init__(message)
        self.title = title
        self.message = message
