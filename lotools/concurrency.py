"""Concurrency helpers: serialised callbacks, background calls and polling waits."""

from __future__ import annotations

import threading
import time
from typing import Any, Callable, ContextManager, TypeVar

from lotools.channel import Channel
from lotools.errors import try_call

T = TypeVar("T")


class Synchronize:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, lock: ContextManager[Any] | None = None) -> None:
        self.lock = lock if lock is not None else threading.Lock()

    def do(self, callback: Callable[[], Any]) -> None:
        """Run ``callback`` while holding the lock; exceptions it raises are swallowed."""
        with self.lock:
            try_call(callback)


def synchronize(*locks: ContextManager[Any]) -> Synchronize:
    """Return a ``Synchronize`` using the given lock, or a new one if none is given."""
    if len(locks) > 1:
        raise ValueError("unexpected arguments")
    return Synchronize(locks[0] if locks else None)


def async_(f: Callable[[], T]) -> Channel[T]:
    """Run ``f`` in a thread; its result is sent to the returned channel."""
    channel: Channel[T] = Channel(1)
    threading.Thread(target=lambda: channel.send(f()), daemon=True).start()
    return channel


def async0(f: Callable[[], Any]) -> Channel[None]:
    """Run ``f`` in a thread; ``None`` is sent to the returned channel when it finishes."""

    def run() -> None:
        f()
        channel.send(None)

    channel: Channel[None] = Channel(1)
    threading.Thread(target=run, daemon=True).start()
    return channel


def _wait(done: threading.Event | None, seconds: float) -> bool:
    seconds = max(0.0, seconds)
    if done is None:
        time.sleep(seconds)
        return False
    return done.wait(seconds)


def wait_for_with_context(
    done: threading.Event | None,
    condition: Callable[[threading.Event | None, int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> tuple[int, float, bool]:
    """Check ``condition(done, iteration)`` every ``heartbeat_delay`` seconds.

    Stops when the condition holds, after ``timeout`` seconds, or once ``done``
    is set. Returns ``(iterations, elapsed seconds, condition found)``.
    """
    start = time.monotonic()
    if done is not None and done.is_set():
        return 0, time.monotonic() - start, False

    deadline = start + timeout
    next_tick = start + heartbeat_delay
    iterations = 0

    while True:
        now = time.monotonic()
        if next_tick >= deadline:
            _wait(done, deadline - now)
            return iterations, time.monotonic() - start, False
        if _wait(done, next_tick - now):
            return iterations, time.monotonic() - start, False
        iterations += 1
        if condition(done, iterations - 1):
            return iterations, time.monotonic() - start, True
        next_tick = max(next_tick + heartbeat_delay, time.monotonic())


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> tuple[int, float, bool]:
    """Check ``condition(iteration)`` every ``heartbeat_delay`` seconds until it holds or ``timeout`` passes."""
    return wait_for_with_context(
        None, lambda _done, i: condition(i), timeout, heartbeat_delay
    )