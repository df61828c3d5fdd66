"""Shared live feed that advances the simulator on the dashboard's timer."""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Dict, Optional

import pandas as pd

from . import config
from .history import as_utc
from .simulator import VitalsSimulator, VitalsSnapshot

logger = logging.getLogger(__name__)


class LiveFeed:
    """Own one :class:`VitalsSimulator` and tick it at most once per interval.

    Every open dashboard tab polls the feed from its own interval timer, so
    :meth:`poll` only advances the simulation once 90% of the update interval
    has elapsed since the previous tick. The 10% slack absorbs browser timer
    jitter, which would otherwise make a tab arriving a few milliseconds early
    skip a whole tick.
    """

    def __init__(
        self,
        simulator: Optional[VitalsSimulator] = None,
        *,
        interval_ms: int = config.UPDATE_INTERVAL_MS,
        prime: bool = True,
        now: Optional[datetime] = None,
    ):
        if interval_ms < 1:
            raise ValueError(f"Update interval must be positive, got {interval_ms} ms")
        self.simulator = simulator or VitalsSimulator(seed=config.SEED)
        self.interval = timedelta(milliseconds=interval_ms)
        self._lock = threading.Lock()
        if prime:
            self.simulator.prime(
                self.simulator.histories["heart_rate"].capacity,
                now=now,
                spacing=self.interval,
            )

    def poll(self, now: Optional[datetime] = None) -> VitalsSnapshot:
        """Advance the simulation if a tick is due and return the current values."""
        now = as_utc(now)
        with self._lock:
            last = self.simulator.last_tick
            if last is None or now - last >= self.interval * 0.9:
                return self.simulator.tick(now)
            return self.simulator.snapshot()

    def history_frames(self) -> Dict[str, pd.DataFrame]:
        """Return a DataFrame copy of every metric's history, taken under the lock."""
        with self._lock:
            return {
                metric: history.to_frame()
                for metric, history in self.simulator.histories.items()
            }
