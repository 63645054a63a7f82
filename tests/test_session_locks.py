import asyncio

from prepcoach.api.dependencies import SessionLocks


def test_entry_is_dropped_after_release() -> None:
    locks = SessionLocks()

    async def _go():
        async with locks.hold("s1"):
            assert len(locks) == 1
        async with locks.hold("unknown-id"):
            pass

    asyncio.run(_go())

    assert len(locks) == 0


def test_same_session_runs_one_at_a_time() -> None:
    locks = SessionLocks()
    events: list[str] = []

    async def _work(name: str):
        async with locks.hold("s1"):
            events.append(f"{name} in")
            await asyncio.sleep(0.01)
            events.append(f"{name} out")

    async def _go():
        await asyncio.gather(_work("a"), _work("b"))
        return len(locks)

    remaining = asyncio.run(_go())

    assert events == ["a in", "a out", "b in", "b out"]
    assert remaining == 0


def test_entry_survives_while_a_waiter_is_queued() -> None:
    locks = SessionLocks()

    async def _go():
        entered = asyncio.Event()
        release = asyncio.Event()

        async def _first():
            async with locks.hold("s1"):
                entered.set()
                await release.wait()

        async def _second():
            async with locks.hold("s1"):
                pass

        first = asyncio.create_task(_first())
        await entered.wait()
        second = asyncio.create_task(_second())
        await asyncio.sleep(0)
        queued = len(locks)
        release.set()
        await asyncio.gather(first, second)
        return queued, len(locks)

    queued, remaining = asyncio.run(_go())

    assert queued == 1
    assert remaining == 0
