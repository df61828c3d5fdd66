"""Reusable UI helpers for the dashboard."""
from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go
from dash import dcc, html

from .theme import THEME

GRAPH_CONFIG = {"displaylogo": False, "displayModeBar": False, "responsive": True}
CHART_HEIGHT = 140


def readout_card(key: str, name: str, unit: str, icon: str) -> html.Div:
    """Readout row with icon, label, large value placeholder and unit."""

    return html.Div(
        [
            html.Div(icon, id=f"readout-{key}-icon", className="readout-icon"),
            html.Div(
                [
                    html.Div(name, className="metric-label"),
                    html.Div("--", id=f"readout-{key}-value", className="readout-value"),
                ],
                className="readout-body",
            ),
            html.Div(unit, className="readout-unit"),
        ],
        className="readout-card",
    )


def chart_card(key: str, title: str) -> html.Div:
    """Titled chart with a one-line window summary underneath."""

    return html.Div(
        [
            html.Div(title, className="metric-label"),
            dcc.Graph(
                id=f"chart-{key}",
                figure=empty_figure("Loading vitals..."),
                config=GRAPH_CONFIG,
                style={"height": f"{CHART_HEIGHT}px"},
            ),
            html.Div(id=f"chart-{key}-summary", className="metric-help"),
        ],
        className="chart-card",
    )


def _base_layout(fig: go.Figure) -> go.Figure:
    fig.update_layout(
        template="plotly_dark",
        paper_bgcolor=THEME["card"],
        plot_bgcolor=THEME["card"],
        font=dict(color=THEME["text"]),
        margin=dict(l=8, r=8, t=8, b=8),
        height=CHART_HEIGHT,
        showlegend=False,
        uirevision="vitals",
        xaxis=dict(visible=False, type="date"),
        yaxis=dict(visible=False),
    )
    return fig


def empty_figure(title: str) -> go.Figure:
    """Create a dark-themed empty figure with a centered message."""

    fig = go.Figure()
    _base_layout(fig)
    fig.update_layout(
        annotations=[
            dict(
                text=title,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=THEME["muted"], size=16),
            )
        ]
    )
    return fig


def _line_trace(df: pd.DataFrame, name: str, color: str) -> go.Scatter:
    return go.Scatter(
        x=df["timestamp"],
        y=df["value"],
        name=name,
        mode="lines",
        line=dict(color=color, width=3, shape="spline"),
        hovertemplate="%{y:.1f}<extra>" + name + "</extra>",
    )


def line_figure(df: pd.DataFrame, name: str, color: str) -> go.Figure:
    """Single smoothed line over the rolling history."""

    if df.empty:
        return empty_figure("Loading vitals...")
    fig = go.Figure(_line_trace(df, name, color))
    return _base_layout(fig)


def dual_line_figure(
    upper: pd.DataFrame,
    lower: pd.DataFrame,
    names: tuple[str, str],
    colors: tuple[str, str],
) -> go.Figure:
    """Two lines sharing one time axis, used for systolic/diastolic pressure."""

    if upper.empty and lower.empty:
        return empty_figure("Loading vitals...")
    fig = go.Figure()
    if not upper.empty:
        fig.add_trace(_line_trace(upper, names[0], colors[0]))
    if not lower.empty:
        fig.add_trace(_line_trace(lower, names[1], colors[1]))
    return _base_layout(fig)


def bar_figure(df: pd.DataFrame, name: str, color: str, baseline: float = 0.0) -> go.Figure:
    """Bars measured from ``baseline`` so small variations stay visible."""

    if df.empty:
        return empty_figure("Loading vitals...")
    fig = go.Figure(
        go.Bar(
            x=df["timestamp"],
            y=df["value"] - baseline,
            base=baseline,
            name=name,
            marker=dict(color=color),
            customdata=df["value"],
            hovertemplate="%{customdata:.1f}<extra>" + name + "</extra>",
        )
    )
    return _base_layout(fig)
