import time
from contextlib import contextmanager
from typing import Dict, Iterator, List


class StepTimer:
    """Collects named timing measurements in seconds.

    Use with the time_step() context manager to record durations; it also
    wraps ``await`` expressions since the clock is read around the block.
    """

    def __init__(self) -> None:
        self._durations: Dict[str, float] = {}

    @contextmanager
    def time_step(self, name: str, echo: bool = True) -> Iterator[None]:
        start = time.perf_counter()
        try:
            yield
        finally:
            duration = time.perf_counter() - start
            self._durations[name] = self._durations.get(name, 0.0) + duration
            if echo:
                print(f"[TIME] {name}: {duration:.3f}s")

    @property
    def total(self) -> float:
        return sum(self._durations.values())

    def to_lines(self) -> List[str]:
        lines = [f"{key}: {seconds:.3f}s" for key, seconds in self._durations.items()]
        if self._durations:
            lines.append(f"total: {self.total:.3f}s")
        return lines
