import pytest

from swipe_snake.ticker import Ticker


def test_fires_once_per_interval():
    t = Ticker(500)
    t.start(0)
    assert not t.poll(499)
    assert t.poll(500)
    assert not t.poll(501)
    assert t.poll(1000)


def test_cadence_does_not_drift_with_late_polls():
    t = Ticker(500)
    t.start(0)
    assert t.poll(516)
    # next deadline is still 1000, not 1016
    assert t.poll(1000)


def test_backlog_is_dropped():
    t = Ticker(500)
    t.start(0)
    assert t.poll(2600)
    assert not t.poll(2601)
    assert not t.poll(3099)
    assert t.poll(3100)


def test_stopped_ticker_never_fires():
    t = Ticker(500)
    assert not t.active
    assert not t.poll(10_000)
    t.start(0)
    t.stop()
    assert not t.active
    assert not t.poll(10_000)


def test_restart_measures_from_new_start():
    t = Ticker(500)
    t.start(0)
    t.stop()
    t.start(800)
    assert not t.poll(1000)
    assert t.poll(1300)


def test_interval_must_be_positive():
    with pytest.raises(ValueError):
        Ticker(0)
