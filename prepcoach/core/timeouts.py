"""
Select-on-first-completion helper for provider calls.

A provider call is raced against a timer. Whichever finishes first wins;
if the timer wins, the call task is cancelled and anything it later
produces is dropped.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CallTimeout(Exception):
    """The raced call did not finish before its deadline."""

    def __init__(self, label: str, seconds: float):
        super().__init__(f"{label} timed out after {seconds:g} seconds")
        self.label = label
        self.seconds = seconds


async def race(call: Awaitable[T], seconds: float, label: str) -> T:
    """
    Await ``call`` for at most ``seconds``.

    Args:
        call: Coroutine or awaitable to run
        seconds: Deadline in seconds
        label: Name used in the timeout message

    Returns:
        The call's result, if it finished first

    Raises:
        CallTimeout: If the deadline passed first
        Exception: Whatever the call itself raised
    """
    task = asyncio.ensure_future(call)
    done, _ = await asyncio.wait({task}, timeout=seconds)

    if task in done:
        return task.result()

    task.cancel()
    task.add_done_callback(_discard_result)
    logger.warning(f"{label} timed out after {seconds:g}s, abandoning call")
    raise CallTimeout(label, seconds)


def _discard_result(task: asyncio.Future) -> None:
    # Retrieve the loser's outcome so asyncio does not report it as unhandled
    if not task.cancelled():
        task.exception()
