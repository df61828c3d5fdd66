"""Status classification, readout formatting and window statistics."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Optional

import pandas as pd

from .history import VitalHistory
from .simulator import (
    BP_DIASTOLIC,
    BP_SYSTOLIC,
    HEART_RATE,
    PROFILES,
    SPO2,
    TEMPERATURE,
    VitalsSnapshot,
)

NORMAL = "normal"
ABNORMAL = "abnormal"


@dataclass(frozen=True)
class Readout:
    """Static description of one numeric readout on the vitals panel."""

    key: str
    name: str
    unit: str
    icon: str


READOUTS = (
    Readout("heart_rate", "Heart Rate", "BPM", "♥"),
    Readout("spo2", "SpO₂", "%", "🫁"),
    Readout("blood_pressure", "Blood Pressure", "mmHg", "〜"),
    Readout("temperature", "Temperature", "°F", "🌡"),
)


def is_normal(metric: str, value: float) -> bool:
    """Return True when ``value`` lies inside the metric's normal band."""
    return PROFILES[metric].normal.contains(value)


def blood_pressure_is_normal(systolic: float, diastolic: float) -> bool:
    return is_normal(BP_SYSTOLIC, systolic) and is_normal(BP_DIASTOLIC, diastolic)


def readout_statuses(snapshot: VitalsSnapshot) -> Dict[str, str]:
    """Map each readout key to ``"normal"`` or ``"abnormal"``."""

    def _status(flag: bool) -> str:
        return NORMAL if flag else ABNORMAL

    return {
        "heart_rate": _status(is_normal(HEART_RATE, snapshot.heart_rate)),
        "spo2": _status(is_normal(SPO2, snapshot.spo2)),
        "blood_pressure": _status(
            blood_pressure_is_normal(snapshot.bp_systolic, snapshot.bp_diastolic)
        ),
        "temperature": _status(is_normal(TEMPERATURE, snapshot.temperature)),
    }


def format_whole(value: float) -> str:
    # Whole-number readouts truncate toward zero rather than round
    return str(int(value))


def format_temperature(value: float) -> str:
    return f"{value:.1f}"


def format_blood_pressure(systolic: float, diastolic: float) -> str:
    return f"{int(systolic)}/{int(diastolic)}"


def readout_values(snapshot: VitalsSnapshot) -> Dict[str, str]:
    """Return the text shown in each readout for ``snapshot``."""
    return {
        "heart_rate": format_whole(snapshot.heart_rate),
        "spo2": format_whole(snapshot.spo2),
        "blood_pressure": format_blood_pressure(snapshot.bp_systolic, snapshot.bp_diastolic),
        "temperature": format_temperature(snapshot.temperature),
    }


def summarize_history(history: VitalHistory) -> Dict[str, Optional[float]]:
    """Generate min/mean/max for the samples currently in ``history``."""
    return summarize_frame(history.to_frame())


def summarize_frame(df: pd.DataFrame) -> Dict[str, Optional[float]]:
    if df.empty or "value" not in df:
        return {"count": 0, "min": None, "mean": None, "max": None}

    values = df["value"].astype(float)
    return {
        "count": int(len(values)),
        "min": float(values.min()),
        "mean": float(values.mean()),
        "max": float(values.max()),
    }


def format_summary(summary: Dict[str, Optional[float]], decimals: int = 0) -> str:
    """Render a window summary as ``min / avg / max`` text with fallback."""
    if not summary.get("count"):
        return "min -- · avg -- · max --"

    def _fmt(value: Optional[float]) -> str:
        if value is None or math.isnan(value):
            return "--"
        return f"{value:.{decimals}f}"

    return f"min {_fmt(summary['min'])} · avg {_fmt(summary['mean'])} · max {_fmt(summary['max'])}"
