# -*- coding: utf-8 -*-

import logging
import shutil
import subprocess
from contextlib import contextmanager
from typing import Iterator

from domain.models import NotificationError

logger = logging.getLogger(__name__)

DIALOG_TITLE = "Tomato"

# osascript error number when the user presses Cancel
_USER_CANCELED = "-128"


@contextmanager
def ringing(alarm) -> Iterator[None]:
    """
    Keeps the alarm looping for the duration of the block.
    The alarm is stopped on every exit path, exceptions included.
    """
    try:
        alarm.start()
        yield
    finally:
        alarm.stop()


def _applescript_quote(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


class OsascriptNotifier:
    """
    Native macOS dialog with OK / Cancel.
    Blocks until the user answers, there is no timeout.
    """

    def __init__(self, title: str = DIALOG_TITLE, executable: str = "osascript"):
        self.title = title
        self.executable = executable

    @staticmethod
    def available(executable: str = "osascript") -> bool:
        return shutil.which(executable) is not None

    def build_script(self, message: str) -> str:
        return (
            f'display dialog "{_applescript_quote(message)}" '
            f'with title "{_applescript_quote(self.title)}" '
            'buttons {"OK", "Cancel"} default button "OK"'
        )

    def confirm(self, message: str) -> bool:
        try:
            proc = subprocess.run(
                [self.executable, "-e", self.build_script(message)],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise NotificationError(f"cannot run {self.executable}: {e}") from e

        if proc.returncode == 0:
            return "OK" in (proc.stdout or "")

        if _USER_CANCELED in (proc.stderr or ""):
            return False

        raise NotificationError(
            f"{self.executable} exited with {proc.returncode}: {proc.stderr.strip()}"
        )
