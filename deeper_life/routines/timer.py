"""Countdown timer for timed routine items."""

import logging
import threading
from typing import Callable, Optional

TickCallback = Callable[[int], None]
CompleteCallback = Callable[[], None]


class CountdownTimer:
    """
    Counts down from ``duration`` seconds.

    ``on_tick`` receives the remaining seconds after every tick and
    ``on_complete`` fires once when the count reaches zero. ``start`` runs
    the countdown on a daemon thread; ``stop`` cancels it.
    """

    def __init__(
        self,
        duration: int,
        on_tick: Optional[TickCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        interval: float = 1.0,
        logger: Optional[logging.Logger] = None
    ):
        if duration < 0:
            raise ValueError("Timer duration cannot be negative")
        self.duration = duration
        self.interval = interval
        self.on_tick = on_tick
        self.on_complete = on_complete
        self.logger = logger or logging.getLogger(__name__)

        self._remaining = duration
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._completed = False

    @property
    def remaining(self) -> int:
        with self._lock:
            return self._remaining

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> int:
        """Advance one step; returns the remaining seconds."""
        with self._lock:
            if self._completed or self._stopped.is_set():
                return self._remaining
            self._remaining = max(self._remaining - 1, 0)
            remaining = self._remaining
            finished = remaining <= 0
            if finished:
                self._completed = True

        if self.on_tick:
            self.on_tick(remaining)
        if finished:
            self._stopped.set()
            if self.on_complete:
                self.on_complete()
        return remaining

    def _run(self) -> None:
        while not self._stopped.wait(self.interval):
            self.tick()

    def start(self) -> "CountdownTimer":
        if self.running:
            return self
        if self._remaining <= 0:
            # Zero-length timer completes immediately
            self._completed = True
            self._stopped.set()
            if self.on_complete:
                self.on_complete()
            return self

        self._thread = threading.Thread(target=self._run, name="countdown-timer", daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        """Cancel the countdown without firing ``on_complete``."""
        self._stopped.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=self.interval * 2)
        self.logger.debug("Timer stopped with %ss remaining", self.remaining)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the timer finishes or is stopped; True if it completed."""
        if self._thread is not None:
            self._thread.join(timeout)
        return self._completed


def format_timer(seconds: int) -> str:
    """Render seconds as mm:ss."""
    minutes, secs = divmod(max(int(seconds), 0), 60)
    return f"{minutes:02d}:{secs:02d}"
