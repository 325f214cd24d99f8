import pytest

from gridsnake.scheduler import TickScheduler


@pytest.fixture
def ticks():
    return []


@pytest.fixture
def scheduler(ticks):
    return TickScheduler(lambda: ticks.append(1))


def test_idle_scheduler_never_fires(scheduler, ticks):
    assert not scheduler.update(1000)
    assert ticks == []


def test_fires_once_period_has_elapsed(scheduler, ticks):
    scheduler.start(120)
    assert not scheduler.update(60)
    assert scheduler.update(60)
    assert len(ticks) == 1


def test_long_frame_fires_a_single_tick(scheduler, ticks):
    scheduler.start(100)
    scheduler.update(1000)
    assert not scheduler.update(1)
    assert len(ticks) == 1


def test_long_frame_restarts_the_period(scheduler, ticks):
    scheduler.start(100)
    scheduler.update(1000)
    scheduler.update(99)
    assert len(ticks) == 1
    scheduler.update(1)
    assert len(ticks) == 2


def test_cancel_stops_pending_ticks(scheduler, ticks):
    scheduler.start(100)
    scheduler.update(90)
    scheduler.cancel()
    scheduler.cancel()
    assert not scheduler.active
    scheduler.update(500)
    assert ticks == []


def test_reschedule_switches_period_immediately(scheduler, ticks):
    scheduler.start(180)
    scheduler.update(100)
    scheduler.reschedule(70)
    assert scheduler.period == 70
    assert scheduler.elapsed == 0
    scheduler.update(70)
    assert len(ticks) == 1


def test_callback_cancelling_itself_stops_the_schedule():
    fired = []

    def once():
        fired.append(1)
        sched.cancel()

    sched = TickScheduler(once)
    sched.start(10)
    for _ in range(5):
        sched.update(10)
    assert fired == [1]


def test_rejects_non_positive_period(scheduler):
    with pytest.raises(ValueError):
        scheduler.start(0)
