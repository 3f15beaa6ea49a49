"""Go-style channels built on threads, with helpers to split, merge and batch them."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Iterator, Sequence, TypeVar

from lotools.find import max_by, min_by

T = TypeVar("T")

DispatchingStrategy = Callable[[Any, int, Sequence["Channel[Any]"]], int]

_SPIN_DELAY = 10e-6
_POLL_INTERVAL = 0.001


class ChannelClosed(Exception):
    """Raised when sending on, closing, or receiving from a closed and drained channel."""


class _Stopped(Exception):
    """Internal signal that a bounded read should stop without the channel being closed."""


class Channel(Generic[T]):
    """A thread-safe FIFO channel with an optional buffer capacity.

    A capacity of 0 makes the channel unbuffered: a send waits until the
    item has been received.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("channel capacity must not be negative")
        self._capacity = capacity
        self._queue: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._sent = 0
        self._received = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        with self._cond:
            return min(len(self._queue), self._capacity)

    def is_full(self) -> bool:
        """Return whether the buffer is full; an unbuffered channel is never full."""
        with self._cond:
            return self._capacity > 0 and len(self._queue) >= self._capacity

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, waiting while the buffer is full."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("send on closed channel")
            limit = max(self._capacity, 1)
            while len(self._queue) >= limit and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosed("send on closed channel")
            self._queue.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            if self._capacity == 0:
                while self._received < ticket and not self._closed:
                    self._cond.wait()

    def receive(self, timeout: float | None = None) -> T:
        """Take the next item.

        Raises ``ChannelClosed`` once the channel is closed and drained, and
        ``TimeoutError`` when ``timeout`` seconds pass without an item.
        """
        with self._cond:
            end = None if timeout is None else time.monotonic() + timeout
            while not self._queue:
                if self._closed:
                    raise ChannelClosed("receive from closed channel")
                if end is None:
                    self._cond.wait()
                else:
                    remaining = end - time.monotonic()
                    if remaining <= 0:
                        raise TimeoutError("no item received in time")
                    self._cond.wait(remaining)
            item = self._queue.popleft()
            self._received += 1
            self._cond.notify_all()
            return item

    def close(self) -> None:
        """Close the channel; buffered items stay readable."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return


@dataclass
class BufferResult(Generic[T]):
    """Items read by a buffering call, how long it took, and whether the channel is still open."""

    items: list[T] = field(default_factory=list)
    length: int = 0
    read_time: float = 0.0
    ok: bool = True


def _start(target: Callable[[], None]) -> threading.Thread:
    thread = threading.Thread(target=target, daemon=True)
    thread.start()
    return thread


def _close_all(channels: Iterable[Channel[Any]]) -> None:
    for channel in channels:
        channel.close()


def channel_dispatcher(
    stream: Channel[T], count: int, channel_buffer_cap: int, strategy: DispatchingStrategy
) -> list[Channel[T]]:
    """Distribute messages from ``stream`` into ``count`` child channels chosen by ``strategy``.

    Closing ``stream`` closes every child.
    """
    children: list[Channel[T]] = [Channel(channel_buffer_cap) for _ in range(count)]

    def run() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            _close_all(children)

    _start(run)
    return children


def dispatching_strategy_round_robin(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick channels in rotation, skipping full ones."""
    while True:
        i = index % len(channels)
        if not channels[i].is_full():
            return i
        index += 1
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_random(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if not channels[i].is_full():
            return i
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_weighted_random(weights: Sequence[int]) -> DispatchingStrategy:
    """Return a strategy picking a non-full channel at random, in proportion to ``weights``."""
    seq = [i for i, weight in enumerate(weights) for _ in range(weight)]

    def strategy(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
        while True:
            i = random.choice(seq)
            if not channels[i].is_full():
                return i
            time.sleep(_SPIN_DELAY)

    return strategy


def dispatching_strategy_first(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if not channel.is_full():
                return i
        time.sleep(_SPIN_DELAY)


def dispatching_strategy_least(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the emptiest channel."""
    return min_by(
        list(range(len(channels))),
        lambda item, current: len(channels[item]) < len(channels[current]),
    )


def dispatching_strategy_most(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(
        list(range(len(channels))),
        lambda item, current: len(channels[item]) > len(channels[current])
        and not channels[item].is_full(),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel[T]:
    """Return a channel that yields the items of ``collection`` and then closes."""
    channel: Channel[T] = Channel(buffer_size)
    items = list(collection)

    def run() -> None:
        try:
            for item in items:
                channel.send(item)
        finally:
            channel.close()

    _start(run)
    return channel


def channel_to_slice(channel: Channel[T]) -> list[T]:
    """Read ``channel`` until it closes and return the items."""
    return list(channel)


def generator(buffer_size: int, producer: Callable[[Callable[[T], None]], None]) -> Channel[T]:
    """Run ``producer(emit)`` in a thread; emitted values go to the returned channel."""
    channel: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            producer(channel.send)
        finally:
            channel.close()

    _start(run)
    return channel


def _collect(size: int, receive_one: Callable[[], T]) -> BufferResult[T]:
    items: list[T] = []
    start = time.monotonic()
    for _ in range(size):
        try:
            item = receive_one()
        except ChannelClosed:
            return BufferResult(items, len(items), time.monotonic() - start, False)
        except _Stopped:
            return BufferResult(items, len(items), time.monotonic() - start, True)
        items.append(item)
    return BufferResult(items, len(items), time.monotonic() - start, True)


def buffer(channel: Channel[T], size: int) -> BufferResult[T]:
    """Read up to ``size`` items; ``ok`` is false if the channel closed first."""
    return _collect(size, channel.receive)


def buffer_with_context(
    done: threading.Event, channel: Channel[T], size: int
) -> BufferResult[T]:
    """Read up to ``size`` items, stopping early once ``done`` is set."""

    def receive_one() -> T:
        while True:
            if done.is_set():
                raise _Stopped
            try:
                return channel.receive(timeout=_POLL_INTERVAL)
            except TimeoutError:
                continue

    return _collect(size, receive_one)


def buffer_with_timeout(channel: Channel[T], size: int, timeout: float) -> BufferResult[T]:
    """Read up to ``size`` items, stopping early after ``timeout`` seconds."""
    deadline = time.monotonic() + timeout

    def receive_one() -> T:
        try:
            return channel.receive(timeout=max(0.0, deadline - time.monotonic()))
        except TimeoutError:
            raise _Stopped from None

    return _collect(size, receive_one)


def fan_in(channel_buffer_cap: int, *upstreams: Channel[T]) -> Channel[T]:
    """Merge ``upstreams`` into one channel that closes once all of them have closed."""
    out: Channel[T] = Channel(channel_buffer_cap)

    def forward(upstream: Channel[T]) -> Callable[[], None]:
        def run() -> None:
            for item in upstream:
                out.send(item)

        return run

    workers = [_start(forward(upstream)) for upstream in upstreams]

    def closer() -> None:
        for worker in workers:
            worker.join()
        out.close()

    _start(closer)
    return out


def fan_out(count: int, channels_buffer_cap: int, upstream: Channel[T]) -> list[Channel[T]]:
    """Broadcast every upstream message to ``count`` channels, which close with ``upstream``."""
    downstreams: list[Channel[T]] = [Channel(channels_buffer_cap) for _ in range(count)]

    def run() -> None:
        try:
            for msg in upstream:
                for downstream in downstreams:
                    downstream.send(msg)
        finally:
            _close_all(downstreams)

    _start(run)
    return downstreams