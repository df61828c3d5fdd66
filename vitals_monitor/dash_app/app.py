"""Dash UI for the simulated vitals overlay.

The page mirrors a bedside monitor: rolling charts on the left and large
numeric readouts on the right, both refreshed from a single
:class:`~vitals_monitor.feed.LiveFeed` every update interval.
"""
from __future__ import annotations

import logging
from typing import Optional

from dash import Dash

from vitals_monitor import config
from vitals_monitor.feed import LiveFeed

from .layouts import build_root_layout
from .live_callbacks import register_live_callbacks
from .theme import APP_ASSETS_PATH, APP_TITLE

logger = logging.getLogger(__name__)


def create_app(feed: Optional[LiveFeed] = None) -> Dash:
    """Build the Dash app wired to ``feed`` (a fresh primed feed by default)."""
    feed = feed or LiveFeed()

    app = Dash(__name__, assets_folder=str(APP_ASSETS_PATH))
    app.title = APP_TITLE
    app.layout = build_root_layout(int(feed.interval.total_seconds() * 1000))
    register_live_callbacks(app, feed)
    return app


def main() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app()
    logger.info("Serving vitals dashboard on http://%s:%d", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
