"""Colour tokens read by the figure builders and readout callbacks.

Page chrome (backgrounds, panel borders) lives in ``assets/style.css``.
"""
from __future__ import annotations

from pathlib import Path

APP_TITLE = "Vitals Monitor"
APP_ASSETS_PATH = Path(__file__).parent / "assets"

THEME = {
    "card": "#0f172a",
    "text": "#e5e7eb",
    "muted": "#9ca3af",
}

STATUS_COLORS = {
    "normal": "#22c55e",  # green
    "abnormal": "#ef4444",  # red
}

COLORS = {
    "heart_rate": "#ef4444",  # red
    "spo2": "#3b82f6",  # blue
    "bp_systolic": "#f97316",  # orange
    "bp_diastolic": "#facc15",  # yellow
    "temperature": "#a855f7",  # purple
}
