"""
Event multiplexer.

A single background thread alternates between waiting for keyboard input (for
at most the remaining tick budget) and emitting a Tick when the budget is
spent. Both kinds of event go onto one unbounded queue that exactly one
consumer reads. Nothing else is shared with the consumer.
"""

from __future__ import annotations

import logging
import math
import queue
import threading
import time
from typing import Callable, Optional

from ..events import ErrorEvent, Event, InputEvent, TickEvent
from .key_source import KeySource

logger = logging.getLogger(__name__)


class EventMultiplexer:
    """Merge keyboard input and a fixed-rate ticker into one ordered channel."""

    def __init__(
        self,
        key_source: KeySource,
        tick_rate: float = 0.2,
        channel: Optional["queue.Queue[Event]"] = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if not math.isfinite(tick_rate) or tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive and finite, got {tick_rate}")
        self.events: "queue.Queue[Event]" = channel if channel is not None else queue.Queue()
        self._key_source = key_source
        self._tick_rate = tick_rate
        self._clock = clock
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def tick_rate(self) -> float:
        return self._tick_rate

    @property
    def is_alive(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        """Start the background loop. Calling start twice is a no-op."""
        with self._lock:
            if self._thread is not None:
                return
            self._stop.clear()
            self._thread = threading.Thread(
                target=self._run, name="peritus-events", daemon=True
            )
            self._thread.start()
        logger.debug("Event multiplexer started (tick_rate=%.3fs)", self._tick_rate)

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Ask the background loop to exit and wait for it.

        Args:
            timeout: Seconds to wait for the thread; defaults to two tick
                periods, and at least one second
        """
        self._stop.set()
        with self._lock:
            thread = self._thread
            self._thread = None
        if thread is None or thread is threading.current_thread():
            return
        thread.join(max(self._tick_rate * 2, 1.0) if timeout is None else timeout)
        if thread.is_alive():
            logger.warning("Event multiplexer did not stop within the timeout")
        else:
            logger.debug("Event multiplexer stopped")

    def get(self, timeout: Optional[float] = None) -> Event:
        """Block until the next event is available."""
        return self.events.get(timeout=timeout)

    def _run(self) -> None:
        last_tick = self._clock()
        try:
            while not self._stop.is_set():
                remaining = self._tick_rate - (self._clock() - last_tick)
                for key in self._key_source.poll(max(remaining, 0.0)):
                    self.events.put(InputEvent(key))

                if self._clock() - last_tick >= self._tick_rate:
                    self.events.put(TickEvent())
                    last_tick = self._clock()
        except Exception as e:
            logger.exception("Key source failed; event multiplexer exiting")
            self.events.put(ErrorEvent(e))
