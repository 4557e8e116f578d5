import asyncio

from friterie.services.password_reset import ResetTokenStore
from friterie.services.rate_limit import RateLimiter
from friterie.services.session_store import SessionStore
from friterie.services.sweeper import PeriodicSweeper


def test_run_due_sweeps_every_due_store(clock) -> None:
    sessions = SessionStore(clock=clock)
    tokens = ResetTokenStore(clock=clock)
    sweeper = PeriodicSweeper([sessions, tokens], clock=clock)
    sessions.create("admin")
    tokens.generate("admin")

    clock.advance(days=2)
    sessions.create("admin")

    assert sweeper.run_due() == 2
    assert len(sessions) == 1
    assert len(tokens) == 0


def test_run_due_skips_stores_not_yet_due(clock) -> None:
    sessions = SessionStore(clock=clock)
    limiter = RateLimiter(clock=clock)
    sweeper = PeriodicSweeper([sessions, limiter], clock=clock)
    limiter.check("ip")
    clock.advance(minutes=6)
    sessions.create("admin")

    assert sweeper.run_due() == 0
    assert len(limiter) == 1

    clock.advance(minutes=10)
    assert sweeper.run_due() == 1
    assert len(limiter) == 0


def test_start_and_stop_background_task(clock) -> None:
    async def scenario() -> bool:
        sweeper = PeriodicSweeper([SessionStore(clock=clock)], clock=clock, tick_seconds=0.01)
        sweeper.start()
        await asyncio.sleep(0.05)
        running = sweeper._task is not None and not sweeper._task.done()
        await sweeper.stop()
        return running and sweeper._task is None

    assert asyncio.run(scenario()) is True
