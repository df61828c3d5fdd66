"""Simulated patient vitals with a live Dash dashboard."""

__version__ = "0.1.0"

__all__ = [
    "config",
    "feed",
    "history",
    "metrics",
    "simulator",
]
