"""Tests for the dashboard layout and live view rendering."""

from datetime import timedelta

import pandas as pd
import plotly.graph_objects as go
import pytest
from dash import Dash

from vitals_monitor import metrics
from vitals_monitor.dash_app.app import create_app
from vitals_monitor.dash_app.layouts import build_root_layout
from vitals_monitor.dash_app.live_callbacks import live_outputs, render_live_view
from vitals_monitor.dash_app.theme import STATUS_COLORS
from vitals_monitor.dash_app.utils import line_figure
from vitals_monitor.feed import LiveFeed
from vitals_monitor.simulator import VitalsSimulator


def collect_ids(component):
    ids = set()
    component_id = getattr(component, "id", None)
    if component_id:
        ids.add(component_id)
    children = getattr(component, "children", None)
    if isinstance(children, (list, tuple)):
        for child in children:
            ids |= collect_ids(child)
    elif children is not None and not isinstance(children, str):
        ids |= collect_ids(children)
    return ids


@pytest.fixture
def feed(now):
    return LiveFeed(VitalsSimulator(seed=8), interval_ms=2000, now=now)


class TestLayout:
    def test_layout_contains_interval_readouts_and_charts(self):
        ids = collect_ids(build_root_layout(2000))
        assert "vitals-interval" in ids
        for key in ("heart_rate", "spo2", "blood_pressure", "temperature"):
            assert f"readout-{key}-value" in ids
            assert f"readout-{key}-icon" in ids
            assert f"chart-{key}" in ids
            assert f"chart-{key}-summary" in ids

    def test_every_output_targets_layout_component(self):
        ids = collect_ids(build_root_layout(2000))
        for output in live_outputs():
            assert output.component_id in ids

    def test_create_app(self, feed):
        app = create_app(feed)
        assert isinstance(app, Dash)
        assert app.title == "Vitals Monitor"


class TestRenderLiveView:
    def test_output_count_matches(self, feed, now):
        result = render_live_view(feed, now + timedelta(seconds=2))
        assert len(result) == len(live_outputs())

    def test_readouts_reflect_snapshot(self, feed, now):
        result = render_live_view(feed, now + timedelta(seconds=2))
        snapshot = feed.simulator.snapshot()
        expected_values = metrics.readout_values(snapshot)
        expected_status = metrics.readout_statuses(snapshot)

        for i, readout in enumerate(metrics.READOUTS):
            text, value_style, icon_style = result[3 * i : 3 * i + 3]
            assert text == expected_values[readout.key]
            assert value_style["color"] == STATUS_COLORS[expected_status[readout.key]]
            assert icon_style == value_style

    def test_figures_follow_history(self, feed, now):
        result = render_live_view(feed, now + timedelta(seconds=2))
        charts = result[12:]
        hr_fig, _, spo2_fig, _, bp_fig, bp_summary, temp_fig, temp_summary = charts

        assert isinstance(hr_fig, go.Figure)
        assert len(hr_fig.data) == 1
        assert len(hr_fig.data[0].y) == 20
        assert len(spo2_fig.data[0].x) == 20
        assert [trace.name for trace in bp_fig.data] == ["Systolic", "Diastolic"]
        assert temp_fig.data[0].type == "bar"
        assert bp_summary.startswith("Systolic min")
        assert temp_summary.startswith("min ")

    def test_empty_history_renders_placeholder(self):
        empty = pd.DataFrame(columns=["timestamp", "value"])
        fig = line_figure(empty, "Heart rate", "#ef4444")
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "Loading vitals..."
