# -*- coding: utf-8 -*-

import pytest

from core.timer_engine import TimerEngine
from domain.models import TimerConfig
from services.timer_service import TimerService

from fakes import FakeAlarm, FakeNotifier, FakeTicker


@pytest.fixture
def seconds_config():
    return TimerConfig(work=1, short_break=1, long_break=1, cycles=2, debug=True)


@pytest.fixture
def make_service():
    def _make(config, answers=True):
        alarm = FakeAlarm()
        ticker = FakeTicker()
        notifier = FakeNotifier(answers=answers, alarm=alarm)
        notifier.ticker = ticker
        service = TimerService(TimerEngine(config), ticker, notifier, alarm)
        return service, ticker, notifier, alarm

    return _make
