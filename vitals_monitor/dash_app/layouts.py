"""Top-level layout assembly for the dashboard."""
from __future__ import annotations

from dash import dcc, html

from vitals_monitor import config
from vitals_monitor.metrics import READOUTS

from .utils import chart_card, readout_card

CHARTS = (
    ("heart_rate", "Heart Rate (BPM)"),
    ("spo2", "SpO₂ (%)"),
    ("blood_pressure", "Blood Pressure (mmHg)"),
    ("temperature", "Temperature (°F)"),
)


def build_charts_panel() -> html.Div:
    return html.Div(
        [chart_card(key, title) for key, title in CHARTS],
        className="panel charts-panel",
    )


def build_readouts_panel() -> html.Div:
    return html.Div(
        [readout_card(r.key, r.name, r.unit, r.icon) for r in READOUTS],
        className="panel readouts-panel",
    )


def build_root_layout(interval_ms: int = config.UPDATE_INTERVAL_MS) -> html.Div:
    return html.Div(
        [
            dcc.Interval(id="vitals-interval", interval=interval_ms, n_intervals=0),
            html.Div(
                [
                    html.H1("Patient vitals", className="page-title"),
                    html.Div(
                        "Simulated readings, refreshed every "
                        f"{interval_ms / 1000:g} seconds.",
                        className="page-subtitle",
                    ),
                ],
                className="page-header",
            ),
            html.Div(
                [build_charts_panel(), build_readouts_panel()],
                className="vitals-row",
            ),
        ],
        className="app-container",
    )
