from __future__ import annotations

import time
from typing import Callable

from .config import REQUEST_DELAY_SECONDS


class RateLimiter:
    """
    Blocking politeness delay taken after every item of a batch.

    ``interval <= 0`` disables waiting. ``sleep`` is injectable so tests can
    record pauses instead of spending real time.
    """

    def __init__(
        self,
        interval: float = REQUEST_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be >= 0")
        self.interval = interval
        self._sleep = sleep
        self.pauses = 0

    def pause(self) -> None:
        self.pauses += 1
        if self.interval > 0:
            self._sleep(self.interval)
