# renderer/progress.py
import threading
from typing import Callable, Optional


class ProgressCounter:
    """
    Thread-safe count of completed work units, purely advisory.

    `callback`, when given, is called with (completed, total) after every
    increment. Totals are set by the renderer at the start of each run.
    """
    def __init__(self, callback: Optional[Callable[[int, int], None]] = None):
        self._lock = threading.Lock()
        self._completed = 0
        self._total = 0
        self.callback = callback

    def reset(self, total: int):
        with self._lock:
            self._completed = 0
            self._total = total

    def increment(self, amount: int = 1):
        with self._lock:
            self._completed += amount
            completed, total = self._completed, self._total
        if self.callback is not None:
            self.callback(completed, total)

    @property
    def completed(self) -> int:
        return self._completed

    @property
    def total(self) -> int:
        return self._total

    @property
    def fraction(self) -> float:
        if self._total == 0:
            return 0.0
        return self._completed / self._total
