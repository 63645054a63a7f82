import asyncio

import pytest

from prepcoach.core.timeouts import CallTimeout, race


async def _slow(value, seconds):
    await asyncio.sleep(seconds)
    return value


async def _boom():
    raise RuntimeError("boom")


def test_fast_call_wins() -> None:
    assert asyncio.run(race(_slow("ok", 0), 1.0, "fast call")) == "ok"


def test_call_errors_propagate() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        asyncio.run(race(_boom(), 1.0, "failing call"))


def test_timer_wins_and_call_is_cancelled() -> None:
    async def scenario():
        finished = []

        async def tracked():
            await asyncio.sleep(1.0)
            finished.append(True)
            return "late"

        with pytest.raises(CallTimeout) as excinfo:
            await race(tracked(), 0.01, "slow call")
        await asyncio.sleep(0.05)
        return finished, excinfo.value

    finished, error = asyncio.run(scenario())

    assert finished == []
    assert error.label == "slow call"
    assert error.seconds == 0.01
    assert "slow call timed out" in str(error)
