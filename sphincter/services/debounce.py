# =======================================================================================
# sphincter/services/debounce.py - Unlock Debounce
# =======================================================================================
import threading
import time
from typing import Callable, Optional


class DebounceGate:
    """Suppresses repeated automatic unlocks inside a cool-down window."""

    def __init__(self, window: float = 5.0, clock: Callable[[], float] = time.monotonic):
        self.window = window
        self._clock = clock
        self._lock = threading.Lock()
        self._last_admitted: Optional[float] = None

    @property
    def last_admitted(self) -> Optional[float]:
        return self._last_admitted

    def admit(self) -> bool:
        """Return True and record the time, unless the last admit was under `window` ago."""
        with self._lock:
            now = self._clock()
            if self._last_admitted is not None and now - self._last_admitted < self.window:
                return False
            self._last_admitted = now
            return True
