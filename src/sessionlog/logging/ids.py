"""
Session ID service.

One daemon thread owns a ShortIdGenerator and hands freshly generated tokens
to callers through a single-slot queue. Generation is serialised by the
thread, so the generator needs no locking, while any number of callers can
wait on ``next_id`` concurrently.
"""

from __future__ import annotations

import asyncio
import queue
import random
import threading
import time

from sessionlog.exceptions import IdGenerationError, IdServiceTimeout

DEFAULT_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_-"

# 2016-01-01T00:00:00Z in milliseconds.
_EPOCH_MS = 1451606400000
# The time part is fixed width and covers 2**42 ms (about 139 years).
_TIME_SPAN = 2**42


class ShortIdGenerator:
    """Compact, per-process unique IDs.

    A token is the fixed-width encoding of the milliseconds since 2016
    followed by the encoding of a counter that increases within the same
    millisecond, both written with an alphabet shuffled once from ``seed``.
    Not thread safe.
    """

    def __init__(self, seed: int, alphabet: str = DEFAULT_ALPHABET):
        if len(set(alphabet)) != len(alphabet):
            raise IdGenerationError(reason="alphabet contains duplicate characters")
        if len(alphabet) < 16:
            raise IdGenerationError(reason=f"alphabet needs at least 16 characters, got {len(alphabet)}")

        symbols = list(alphabet)
        random.Random(seed).shuffle(symbols)
        self._symbols = "".join(symbols)
        self._base = len(symbols)
        self._time_width = 1
        while self._base**self._time_width < _TIME_SPAN:
            self._time_width += 1
        self._last_ms = -1
        self._counter = 0

    def _encode(self, value: int, width: int = 0) -> str:
        digits = []
        while True:
            value, rem = divmod(value, self._base)
            digits.append(self._symbols[rem])
            if value == 0:
                break
        if len(digits) < width:
            digits.extend(self._symbols[0] * (width - len(digits)))
        return "".join(reversed(digits))

    def generate(self) -> str:
        now_ms = max(time.time_ns() // 1_000_000 - _EPOCH_MS, 0)
        if now_ms > self._last_ms:
            self._last_ms = now_ms
            self._counter = 0
        else:
            # Same millisecond, or the clock went backwards: stay on the last one.
            self._counter += 1
        return self._encode(self._last_ms, self._time_width) + self._encode(self._counter)


class IdService:
    """Background ID producer.

    The producer thread starts as soon as the service is constructed, so
    ``next_id`` never waits on a service that was not started.
    """

    def __init__(self, generator: ShortIdGenerator | None = None):
        self._generator = generator or ShortIdGenerator(seed=time.time_ns())
        self._channel: queue.Queue[str] = queue.Queue(maxsize=1)
        self._thread = threading.Thread(target=self._produce, name="sessionlog-ids", daemon=True)
        self._thread.start()

    def _produce(self) -> None:
        while True:
            self._channel.put(self._generator.generate())

    def next_id(self, timeout: float | None = None) -> str:
        """Block until the next ID is available and return it.

        Without a timeout this waits indefinitely; with one, IdServiceTimeout
        is raised if no ID arrives in time.
        """
        try:
            return self._channel.get(timeout=timeout)
        except queue.Empty:
            raise IdServiceTimeout(timeout=timeout) from None

    async def next_id_async(self, timeout: float | None = None) -> str:
        """Awaitable ``next_id`` that does not block the event loop."""
        return await asyncio.to_thread(self.next_id, timeout)

    @property
    def running(self) -> bool:
        return self._thread.is_alive()


_service: IdService | None = None
_service_lock = threading.Lock()


def get_id_service() -> IdService:
    """Process-wide IdService, created and started on first access."""
    global _service
    if _service is None:
        with _service_lock:
            if _service is None:
                _service = IdService()
    return _service
