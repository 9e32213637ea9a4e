# -*- coding: utf-8 -*-

from domain.models import LONG_BREAK, SHORT_BREAK, WORK, TimerConfig


def test_start_starts_ticker(make_service, seconds_config):
    service, ticker, _, _ = make_service(seconds_config)
    service.start()
    assert ticker.is_active
    assert service.get_snapshot().is_running


def test_start_twice_does_not_double_start_ticker(make_service):
    service, ticker, _, _ = make_service(TimerConfig(25, 5, 15, 4))
    service.start()
    service.start()
    assert ticker.starts == 1


def test_accepted_notification_restarts(make_service, seconds_config):
    service, ticker, notifier, alarm = make_service(seconds_config, answers=True)
    service.start()
    ticker.fire()

    snap = service.get_snapshot()
    assert notifier.messages == ["Break time"]
    assert snap.phase == SHORT_BREAK
    assert snap.remaining_sec == 1
    assert snap.is_running
    assert ticker.is_active
    assert not alarm.playing


def test_dismissed_notification_pauses(make_service, seconds_config):
    service, ticker, notifier, alarm = make_service(seconds_config, answers=False)
    service.start()
    ticker.fire()

    snap = service.get_snapshot()
    assert snap.phase == SHORT_BREAK
    assert not snap.is_running
    assert not ticker.is_active
    assert not alarm.playing

    # nothing counts down while paused
    ticker.fire(3)
    assert service.get_snapshot().remaining_sec == 1


def test_ticker_stopped_and_alarm_ringing_during_dialog(make_service, seconds_config):
    service, ticker, notifier, alarm = make_service(seconds_config)
    service.start()
    ticker.fire()
    assert notifier.ticker_was_active == [False]
    assert notifier.alarm_was_playing == [True]
    assert alarm.started == 1


def test_notification_error_stops_alarm_and_pauses(make_service, seconds_config):
    service, ticker, notifier, alarm = make_service(
        seconds_config, answers=RuntimeError("dialog blew up")
    )
    service.start()
    ticker.fire()

    assert not alarm.playing
    assert not ticker.is_active
    assert not service.get_snapshot().is_running
    assert service.get_snapshot().phase == SHORT_BREAK


def test_full_cycle_scenario(make_service, seconds_config):
    service, ticker, notifier, _ = make_service(seconds_config)
    service.start()
    ticker.fire(3)

    snap = service.get_snapshot()
    assert notifier.messages == ["Break time", "Work time", "Long break time"]
    assert snap.phase == LONG_BREAK
    assert snap.work_sessions == 0


def test_pause_twice_is_idempotent(make_service):
    service, ticker, _, _ = make_service(TimerConfig(25, 5, 15, 4))
    service.start()
    ticker.fire(5)
    service.pause()
    before = service.get_snapshot()
    service.pause()
    after = service.get_snapshot()
    assert before == after
    assert after.remaining_sec == 25 * 60 - 5
    assert after.phase == WORK


def test_toggle(make_service):
    service, ticker, _, _ = make_service(TimerConfig(25, 5, 15, 4))
    service.toggle()
    assert service.get_snapshot().is_running
    service.toggle()
    assert not service.get_snapshot().is_running
    assert not ticker.is_active


def test_reset_stops_everything(make_service, seconds_config):
    service, ticker, _, alarm = make_service(seconds_config)
    service.start()
    ticker.fire()
    alarm.playing = True
    service.reset()

    snap = service.get_snapshot()
    assert snap.phase == WORK
    assert snap.work_sessions == 0
    assert snap.is_idle
    assert not ticker.is_active
    assert not alarm.playing


def test_apply_config_resets(make_service):
    service, ticker, _, _ = make_service(TimerConfig(25, 5, 15, 4))
    service.start()
    ticker.fire(10)
    service.apply_config(TimerConfig(10, 2, 3, 2))

    snap = service.get_snapshot()
    assert snap.remaining_sec == 600
    assert snap.is_idle
    assert not ticker.is_active
    assert service.config == TimerConfig(10, 2, 3, 2)


def test_callbacks_fire(make_service, seconds_config):
    service, ticker, _, _ = make_service(seconds_config)
    ticks, phases, states = [], [], []
    service.set_on_tick(ticks.append)
    service.set_on_phase_change(phases.append)
    service.set_on_state_change(states.append)

    service.start()
    ticker.fire()

    assert len(ticks) == 1
    assert [s.phase for s in phases] == [SHORT_BREAK]
    assert states[-1].is_running


def test_shutdown_silences_alarm_and_ticker(make_service):
    service, ticker, _, alarm = make_service(TimerConfig(25, 5, 15, 4))
    service.start()
    alarm.playing = True
    service.shutdown()
    assert not ticker.is_active
    assert not alarm.playing
    assert not service.get_snapshot().is_running
