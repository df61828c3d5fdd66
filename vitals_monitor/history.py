"""Fixed-capacity rolling sample buffers feeding the charts."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Iterator, Optional

import pandas as pd

from . import config

FRAME_COLUMNS = ["timestamp", "value"]


def as_utc(dt: Optional[datetime] = None) -> datetime:
    """Return ``dt`` as an aware UTC datetime, defaulting to the current time.

    Naive values are read as local wall-clock time.
    """
    if dt is None:
        return datetime.now(timezone.utc)
    return dt.astimezone(timezone.utc)


@dataclass(frozen=True)
class VitalDataPoint:
    """A single timestamped reading of one vital sign."""

    timestamp: datetime
    value: float


class VitalHistory:
    """Oldest-first FIFO of :class:`VitalDataPoint` capped at ``capacity``.

    Appending to a full buffer evicts the oldest sample first, so the length
    never exceeds the capacity.
    """

    def __init__(self, name: str, capacity: int = config.HISTORY_CAPACITY):
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.name = name
        self.capacity = capacity
        self._points: deque[VitalDataPoint] = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[VitalDataPoint]:
        return iter(self._points)

    def __repr__(self) -> str:
        return f"VitalHistory({self.name!r}, {len(self)}/{self.capacity})"

    def append(self, point: VitalDataPoint) -> VitalDataPoint:
        point = replace(point, timestamp=as_utc(point.timestamp), value=float(point.value))
        self._points.append(point)
        return point

    def record(self, timestamp: datetime, value: float) -> VitalDataPoint:
        """Append a new sample and return it."""
        return self.append(VitalDataPoint(timestamp=timestamp, value=value))

    def latest(self) -> Optional[VitalDataPoint]:
        return self._points[-1] if self._points else None

    def values(self) -> list[float]:
        return [p.value for p in self._points]

    def timestamps(self) -> list[datetime]:
        return [p.timestamp for p in self._points]

    def clear(self) -> None:
        self._points.clear()

    def to_frame(self) -> pd.DataFrame:
        """Return the buffer as a DataFrame with ``timestamp`` and ``value`` columns."""
        if not self._points:
            return pd.DataFrame(columns=FRAME_COLUMNS)
        df = pd.DataFrame(
            [(p.timestamp, p.value) for p in self._points],
            columns=FRAME_COLUMNS,
        )
        df["timestamp"] = pd.to_datetime(df["timestamp"], utc=True)
        return df
