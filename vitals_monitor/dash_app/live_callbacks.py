"""Callbacks that refresh readouts and charts on every interval tick."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from dash import Input, Output

from vitals_monitor import metrics
from vitals_monitor.feed import LiveFeed
from vitals_monitor.simulator import (
    BP_DIASTOLIC,
    BP_SYSTOLIC,
    HEART_RATE,
    SPO2,
    TEMPERATURE,
)

from .layouts import CHARTS
from .theme import COLORS, STATUS_COLORS
from .utils import bar_figure, dual_line_figure, line_figure

TEMPERATURE_BAR_BASELINE = 95.0

READOUT_KEYS = [r.key for r in metrics.READOUTS]
CHART_KEYS = [key for key, _ in CHARTS]


def live_outputs() -> list[Output]:
    """Outputs in the order :func:`render_live_view` returns them."""
    outputs = []
    for key in READOUT_KEYS:
        outputs.append(Output(f"readout-{key}-value", "children"))
        outputs.append(Output(f"readout-{key}-value", "style"))
        outputs.append(Output(f"readout-{key}-icon", "style"))
    for key in CHART_KEYS:
        outputs.append(Output(f"chart-{key}", "figure"))
        outputs.append(Output(f"chart-{key}-summary", "children"))
    return outputs


def render_live_view(feed: LiveFeed, now: Optional[datetime] = None) -> tuple:
    snapshot = feed.poll(now)
    frames = feed.history_frames()

    values = metrics.readout_values(snapshot)
    statuses = metrics.readout_statuses(snapshot)

    result: list = []
    for key in READOUT_KEYS:
        style = {"color": STATUS_COLORS[statuses[key]]}
        result.extend([values[key], style, style])

    figures = {
        "heart_rate": line_figure(frames[HEART_RATE], "Heart rate", COLORS[HEART_RATE]),
        "spo2": line_figure(frames[SPO2], "SpO₂", COLORS[SPO2]),
        "blood_pressure": dual_line_figure(
            frames[BP_SYSTOLIC],
            frames[BP_DIASTOLIC],
            names=("Systolic", "Diastolic"),
            colors=(COLORS[BP_SYSTOLIC], COLORS[BP_DIASTOLIC]),
        ),
        "temperature": bar_figure(
            frames[TEMPERATURE],
            "Temperature",
            COLORS[TEMPERATURE],
            baseline=TEMPERATURE_BAR_BASELINE,
        ),
    }
    systolic = metrics.summarize_frame(frames[BP_SYSTOLIC])
    diastolic = metrics.summarize_frame(frames[BP_DIASTOLIC])
    summaries = {
        "heart_rate": metrics.format_summary(metrics.summarize_frame(frames[HEART_RATE])),
        "spo2": metrics.format_summary(metrics.summarize_frame(frames[SPO2])),
        "blood_pressure": (
            f"Systolic {metrics.format_summary(systolic)}"
            f"  |  Diastolic {metrics.format_summary(diastolic)}"
        ),
        "temperature": metrics.format_summary(
            metrics.summarize_frame(frames[TEMPERATURE]), decimals=1
        ),
    }
    for key in CHART_KEYS:
        result.extend([figures[key], summaries[key]])

    return tuple(result)


def register_live_callbacks(app, feed: LiveFeed):
    @app.callback(live_outputs(), [Input("vitals-interval", "n_intervals")])
    def update_live(_):
        return render_live_view(feed)
