from typing import Optional


class Ticker:
    """
    Fixed-interval tick scheduler polled from the frame loop.

    The caller owns the handle: start() arms it, stop() disarms it, and a
    stopped ticker never fires. Deadlines are measured from the previous
    deadline, so frame jitter does not drift the cadence. When the loop
    falls more than one interval behind, the backlog is dropped.
    """

    def __init__(self, interval_ms: int):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = interval_ms
        self._next_due: Optional[int] = None

    @property
    def active(self) -> bool:
        return self._next_due is not None

    def start(self, now_ms: int) -> None:
        self._next_due = now_ms + self.interval_ms

    def stop(self) -> None:
        self._next_due = None

    def poll(self, now_ms: int) -> bool:
        """True at most once per call, when the current interval has elapsed."""
        if self._next_due is None or now_ms < self._next_due:
            return False
        self._next_due += self.interval_ms
        if self._next_due <= now_ms:
            self._next_due = now_ms + self.interval_ms
        return True
