"""Randomized vital-sign generator driving the live dashboard.

Each call to :meth:`VitalsSimulator.tick` samples a new value for every vital
sign and records it in that metric's rolling history. Most ticks draw from the
normal band; with probability ``abnormal_probability`` a metric instead takes
an excursion into one of its abnormal bands.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, Optional

import numpy as np

from . import config
from .history import VitalHistory, as_utc

logger = logging.getLogger(__name__)

HEART_RATE = "heart_rate"
SPO2 = "spo2"
BP_SYSTOLIC = "bp_systolic"
BP_DIASTOLIC = "bp_diastolic"
TEMPERATURE = "temperature"

METRICS = (HEART_RATE, SPO2, BP_SYSTOLIC, BP_DIASTOLIC, TEMPERATURE)


@dataclass(frozen=True)
class ValueRange:
    """Closed interval ``[low, high]``."""

    low: float
    high: float

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"Range low {self.low} exceeds high {self.high}")

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high

    def sample(self, rng: np.random.Generator) -> float:
        value = float(rng.uniform(self.low, self.high))
        # uniform() may round up to ``high``; clamp keeps the interval closed
        return min(max(value, self.low), self.high)


@dataclass(frozen=True)
class VitalProfile:
    """Normal band, abnormal bands and starting value for one vital sign."""

    normal: ValueRange
    low: Optional[ValueRange]
    high: Optional[ValueRange]
    initial: float

    @property
    def bands(self) -> list[ValueRange]:
        return [band for band in (self.low, self.normal, self.high) if band is not None]

    def contains(self, value: float) -> bool:
        """True when ``value`` falls in any band this profile can produce."""
        return any(band.contains(value) for band in self.bands)

    def abnormal_bands(self) -> list[ValueRange]:
        return [band for band in (self.low, self.high) if band is not None]


PROFILES: Dict[str, VitalProfile] = {
    HEART_RATE: VitalProfile(
        normal=ValueRange(60, 100),
        low=ValueRange(40, 59),
        high=ValueRange(101, 140),
        initial=75,
    ),
    SPO2: VitalProfile(
        normal=ValueRange(95, 100),
        low=ValueRange(90, 94),
        high=None,
        initial=98,
    ),
    BP_SYSTOLIC: VitalProfile(
        normal=ValueRange(90, 120),
        low=ValueRange(80, 89),
        high=ValueRange(121, 140),
        initial=120,
    ),
    BP_DIASTOLIC: VitalProfile(
        normal=ValueRange(60, 80),
        low=ValueRange(50, 59),
        high=ValueRange(81, 90),
        initial=80,
    ),
    TEMPERATURE: VitalProfile(
        normal=ValueRange(97.8, 99.1),
        low=ValueRange(96.0, 97.7),
        high=ValueRange(99.2, 100.4),
        initial=98.6,
    ),
}


@dataclass(frozen=True)
class VitalsSnapshot:
    """Current scalar value of every vital sign."""

    heart_rate: float
    spo2: float
    bp_systolic: float
    bp_diastolic: float
    temperature: float
    timestamp: Optional[datetime] = None

    def as_dict(self) -> Dict[str, float]:
        return {metric: getattr(self, metric) for metric in METRICS}


class VitalsSimulator:
    """Tick-driven generator of simulated vitals with bounded history."""

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        *,
        seed: Optional[int] = None,
        abnormal_probability: float = config.ABNORMAL_PROBABILITY,
        history_capacity: int = config.HISTORY_CAPACITY,
    ):
        if not 0.0 <= abnormal_probability <= 1.0:
            raise ValueError(
                f"abnormal_probability must be between 0 and 1, got {abnormal_probability}"
            )
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.abnormal_probability = abnormal_probability
        self.values: Dict[str, float] = {m: float(PROFILES[m].initial) for m in METRICS}
        self.histories: Dict[str, VitalHistory] = {
            m: VitalHistory(m, capacity=history_capacity) for m in METRICS
        }
        self.last_tick: Optional[datetime] = None

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def _excursion(self) -> bool:
        return bool(self.rng.random() < self.abnormal_probability)

    def _pick_abnormal(self, profile: VitalProfile) -> ValueRange:
        bands = profile.abnormal_bands()
        if len(bands) == 1:
            return bands[0]
        return bands[0] if self.rng.random() < 0.5 else bands[1]

    def _sample(self, metric: str, abnormal: bool) -> float:
        profile = PROFILES[metric]
        band = self._pick_abnormal(profile) if abnormal else profile.normal
        return band.sample(self.rng)

    def tick(self, now: Optional[datetime] = None) -> VitalsSnapshot:
        """Generate one new value per vital sign and append it to the histories."""
        now = as_utc(now)

        self.values[HEART_RATE] = self._sample(HEART_RATE, self._excursion())
        self.values[SPO2] = self._sample(SPO2, self._excursion())
        # Systolic and diastolic share one excursion decision
        bp_abnormal = self._excursion()
        self.values[BP_SYSTOLIC] = self._sample(BP_SYSTOLIC, bp_abnormal)
        self.values[BP_DIASTOLIC] = self._sample(BP_DIASTOLIC, bp_abnormal)
        self.values[TEMPERATURE] = self._sample(TEMPERATURE, self._excursion())

        for metric in METRICS:
            self.histories[metric].record(now, self.values[metric])
        self.last_tick = now

        logger.debug(
            "Tick %s HR=%.1f SpO2=%.1f BP=%.1f/%.1f Temp=%.1f",
            now.isoformat(),
            self.values[HEART_RATE],
            self.values[SPO2],
            self.values[BP_SYSTOLIC],
            self.values[BP_DIASTOLIC],
            self.values[TEMPERATURE],
        )
        return self.snapshot()

    def prime(
        self,
        count: int = config.HISTORY_CAPACITY,
        *,
        now: Optional[datetime] = None,
        spacing: timedelta = timedelta(milliseconds=config.UPDATE_INTERVAL_MS),
    ) -> VitalsSnapshot:
        """Fill the histories with ``count`` back-dated ticks ending at ``now``."""
        now = as_utc(now)
        for i in range(count):
            self.tick(now - spacing * (count - 1 - i))
        logger.info("Primed vitals history with %d samples", count)
        return self.snapshot()

    def snapshot(self) -> VitalsSnapshot:
        return VitalsSnapshot(timestamp=self.last_tick, **self.values)
