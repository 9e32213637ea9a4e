# -*- coding: utf-8 -*-

import pytest

from domain.models import DEFAULT_CONFIG, SettingsInputError, TimerConfig
from services.settings_service import SettingsService
from storage.settings_store import SettingsStore


@pytest.fixture
def setup(tmp_path, make_service):
    store = SettingsStore(str(tmp_path / "Settings.cfg"))
    service, ticker, _, _ = make_service(store.load())
    return SettingsService(store, service), store, service, ticker


def test_current_reflects_timer(setup):
    settings, _, _, _ = setup
    assert settings.current() == DEFAULT_CONFIG


def test_submit_saves_and_applies(setup):
    settings, store, timer, ticker = setup
    timer.start()
    ticker.fire(3)

    config = settings.submit("30", "10", "20", "3", False)

    assert config == TimerConfig(30, 10, 20, 3, False)
    assert store.load() == config
    snap = timer.get_snapshot()
    assert snap.remaining_sec == 30 * 60
    assert snap.is_idle


def test_non_numeric_input(setup):
    settings, store, timer, _ = setup
    with pytest.raises(SettingsInputError) as exc:
        settings.submit("thirty", "10", "20", "3", False)
    assert exc.value.title == "Input Error"
    assert exc.value.message == "Please enter valid numbers"
    assert timer.config == DEFAULT_CONFIG


def test_out_of_range_input(setup):
    settings, store, timer, _ = setup
    with pytest.raises(SettingsInputError) as exc:
        settings.submit("30", "10", "20", "12", False)
    assert exc.value.title == "Invalid Settings"
    assert "1-59" in exc.value.message
    assert store.load() == DEFAULT_CONFIG


def test_debug_flag_goes_through_save(setup):
    settings, store, timer, _ = setup
    settings.submit("5", "2", "3", "2", True)
    assert store.load().debug is True
    assert timer.get_snapshot().remaining_sec == 5


def test_update_applies_even_if_save_fails(tmp_path, make_service):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")
    store = SettingsStore(str(blocker / "Settings.cfg"))
    timer, _, _, _ = make_service(DEFAULT_CONFIG)
    settings = SettingsService(store, timer)

    assert settings.update(TimerConfig(10, 2, 3, 2)) is False
    assert timer.config == TimerConfig(10, 2, 3, 2)
