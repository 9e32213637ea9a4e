# -*- coding: utf-8 -*-

import logging
import os
import sys
import tempfile
from typing import List, Optional, Sequence

from domain.models import (
    DEFAULT_CONFIG,
    ConfigParseError,
    ConfigValidationError,
    TimerConfig,
    validate_values,
)

logger = logging.getLogger(__name__)

APP_DIR_NAME = "Tomato"
CONFIG_FILE_NAME = "Settings.cfg"

# work, short break, long break, cycles, debug
FIELD_COUNT = 5


def default_config_dir() -> str:
    home = os.path.expanduser("~")
    if sys.platform == "darwin":
        return os.path.join(home, "Library", "Application Support", APP_DIR_NAME)
    if sys.platform.startswith("win"):
        base = os.environ.get("APPDATA") or os.path.join(home, "AppData", "Roaming")
        return os.path.join(base, APP_DIR_NAME)
    base = os.environ.get("XDG_CONFIG_HOME") or os.path.join(home, ".config")
    return os.path.join(base, APP_DIR_NAME)


def default_config_path() -> str:
    return os.path.join(default_config_dir(), CONFIG_FILE_NAME)


def _parse_int(raw: str, field: str) -> int:
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigParseError(f"{field}: not an integer: {raw!r}") from None


def _parse_bool(raw: str, field: str) -> bool:
    v = raw.strip().lower()
    if v == "true":
        return True
    if v == "false":
        return False
    raise ConfigParseError(f"{field}: expected true/false, got {raw!r}")


def parse_lines(lines: Sequence[str]) -> TimerConfig:
    """
    Positional record, one value per line. Lines past the fifth are ignored.
    Raises ConfigParseError / ConfigValidationError.
    """
    if len(lines) < FIELD_COUNT:
        raise ConfigParseError(
            f"expected {FIELD_COUNT} lines, found {len(lines)}"
        )

    config = TimerConfig(
        work=_parse_int(lines[0], "work"),
        short_break=_parse_int(lines[1], "short_break"),
        long_break=_parse_int(lines[2], "long_break"),
        cycles=_parse_int(lines[3], "cycles"),
        debug=_parse_bool(lines[4], "debug"),
    )
    if not config.is_valid():
        raise ConfigValidationError(f"values out of range: {config}")
    return config


def format_config(config: TimerConfig) -> str:
    return "\n".join(
        [
            str(config.work),
            str(config.short_break),
            str(config.long_break),
            str(config.cycles),
            "true" if config.debug else "false",
        ]
    ) + "\n"


class SettingsStore:
    """
    Reads / writes the per-user settings file.
    Anything unreadable or out of range is replaced wholesale by the defaults.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path or default_config_path()

    @staticmethod
    def validate(work: int, short_break: int, long_break: int, cycles: int) -> bool:
        return validate_values(work, short_break, long_break, cycles)

    def load(self) -> TimerConfig:
        try:
            return parse_lines(self._read_lines())
        except (ConfigParseError, ConfigValidationError) as e:
            logger.warning("Settings at %s rejected (%s), using defaults", self.path, e)

        self._write(DEFAULT_CONFIG)
        return DEFAULT_CONFIG

    def save(self, config: TimerConfig) -> bool:
        """
        Returns False when the file could not be written (already logged).
        Raises ConfigValidationError for out-of-range values.
        """
        if not config.is_valid():
            raise ConfigValidationError(f"values out of range: {config}")
        return self._write(config)

    def _read_lines(self) -> List[str]:
        if not os.path.exists(self.path):
            raise ConfigParseError("settings file not found")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigParseError(f"cannot read settings: {e}") from e

    def _write(self, config: TimerConfig) -> bool:
        directory = os.path.dirname(self.path) or "."
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            # write next to the target then swap, so readers never see half a file
            fd, tmp_path = tempfile.mkstemp(
                prefix=".settings-", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(format_config(config))
            os.replace(tmp_path, self.path)
            tmp_path = None
            logger.debug("Settings written to %s", self.path)
            return True
        except OSError:
            logger.exception("Error saving settings to %s", self.path)
            return False
        finally:
            if tmp_path is not None and os.path.exists(tmp_path):
                try:
                    os.remove(tmp_path)
                except OSError:
                    logger.warning("Could not remove temp file %s", tmp_path)
