# tests/test_scheduler.py

import asyncio

import pytest

from core.scheduler import LoopScheduler, ManualScheduler


def test_manual_scheduler_fires_in_deadline_order():
    scheduler = ManualScheduler()
    fired = []

    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(1.0, lambda: fired.append("early"))
    scheduler.call_later(1.0, lambda: fired.append("early-second"))

    scheduler.advance(1.5)
    assert fired == ["early", "early-second"]
    assert scheduler.now == 1.5

    scheduler.advance(1.0)
    assert fired == ["early", "early-second", "late"]


def test_manual_scheduler_cancel():
    scheduler = ManualScheduler()
    fired = []

    timer = scheduler.call_later(1.0, lambda: fired.append("x"))
    timer.cancel()

    assert scheduler.pending == 0
    scheduler.run_until_idle()
    assert fired == []


def test_manual_scheduler_chained_timers():
    scheduler = ManualScheduler()
    fired = []

    def first():
        fired.append(scheduler.now)
        scheduler.call_later(0.5, lambda: fired.append(scheduler.now))

    scheduler.call_later(0.5, first)
    scheduler.advance(1.0)

    assert fired == [0.5, 1.0]


def test_run_until_idle_detects_runaway_loop():
    scheduler = ManualScheduler()

    def reschedule():
        scheduler.call_later(1.0, reschedule)

    scheduler.call_later(1.0, reschedule)

    with pytest.raises(RuntimeError):
        scheduler.run_until_idle(max_steps=10)


def test_loop_scheduler_uses_running_loop():
    fired = []

    async def run():
        LoopScheduler().call_later(0.01, lambda: fired.append("done"))
        await asyncio.sleep(0.05)

    asyncio.run(run())
    assert fired == ["done"]


def test_loop_scheduler_requires_running_loop():
    with pytest.raises(RuntimeError):
        LoopScheduler().call_later(0.01, lambda: None)
