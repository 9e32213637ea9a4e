#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import argparse
import logging
import os
import tkinter as tk

from core.timer_engine import TimerEngine
from services.alarm import AlarmPlayer
from services.notification_service import OsascriptNotifier
from services.settings_service import SettingsService
from services.timer_service import TimerService
from storage.settings_store import SettingsStore
from ui.assets import ALARM_SOUND, PhaseImages, default_assets_dir
from ui.main_window import MainWindow
from ui.notifier import TkDialogNotifier
from ui.ticker import TkTicker

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="tomato", description="Pomodoro timer")
    p.add_argument("--config", help="settings file (default: per-user app dir)")
    p.add_argument("--assets", help="directory with images and the alarm sound")
    p.add_argument(
        "--tk-dialogs",
        action="store_true",
        help="use Tk dialogs even where the native macOS dialog is available",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = SettingsStore(path=args.config)
    config = store.load()
    logger.info("Loaded settings from %s: %s", store.path, config)

    assets_dir = args.assets or default_assets_dir()

    root = tk.Tk()

    if not args.tk_dialogs and OsascriptNotifier.available():
        notifier = OsascriptNotifier()
    else:
        notifier = TkDialogNotifier(root)

    timer_service = TimerService(
        engine=TimerEngine(config),
        ticker=TkTicker(root),
        notifier=notifier,
        alarm=AlarmPlayer(os.path.join(assets_dir, ALARM_SOUND)),
    )
    settings_service = SettingsService(store, timer_service)

    app = MainWindow(root, timer_service, settings_service, PhaseImages(assets_dir))
    app.run()


if __name__ == "__main__":
    main()
