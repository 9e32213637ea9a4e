# -*- coding: utf-8 -*-

import logging

from domain.models import SettingsInputError, TimerConfig
from services.timer_service import TimerService
from storage.settings_store import SettingsStore

logger = logging.getLogger(__name__)

INPUT_ERROR = ("Input Error", "Please enter valid numbers")
RANGE_ERROR = (
    "Invalid Settings",
    "Values must be between 1-59 for times and 1-9 for cycles",
)


class SettingsService:
    def __init__(self, store: SettingsStore, timer_service: TimerService):
        self.store = store
        self.timer_service = timer_service

    def current(self) -> TimerConfig:
        return self.timer_service.config

    def parse_form(
        self,
        work: str,
        short_break: str,
        long_break: str,
        cycles: str,
        debug: bool,
    ) -> TimerConfig:
        try:
            values = [int(str(v).strip()) for v in (work, short_break, long_break, cycles)]
        except ValueError:
            raise SettingsInputError(*INPUT_ERROR) from None

        if not self.store.validate(*values):
            raise SettingsInputError(*RANGE_ERROR)

        return TimerConfig(*values, debug=bool(debug))

    def update(self, config: TimerConfig) -> bool:
        """
        Persist + apply. The new settings apply to this session even when
        the file could not be written; returns whether it was written.
        """
        saved = self.store.save(config)
        if not saved:
            logger.warning("Settings not persisted, applying for this session only")
        self.timer_service.apply_config(config)
        return saved

    def submit(
        self,
        work: str,
        short_break: str,
        long_break: str,
        cycles: str,
        debug: bool,
    ) -> TimerConfig:
        config = self.parse_form(work, short_break, long_break, cycles, debug)
        self.update(config)
        return config
