import logging
import time
from contextlib import contextmanager

logger = logging.getLogger("boggle")


class TurnTimer:
    """Wall-clock time spent in each turn of a round."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def turn(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = round((time.perf_counter() - t0) * 1000, 1)
            # a repeated turn name accumulates
            self.timings[name] = round(self.timings.get(name, 0.0) + elapsed_ms, 1)
            logger.debug("turn=%s elapsed=%.1fms", name, elapsed_ms)

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}
