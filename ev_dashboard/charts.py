"""
Plotly chart builders for the dashboard.

Every builder takes the full record frame plus a selection and returns a new
Figure; nothing is cached between calls, so the same inputs always produce
the same chart.
"""

from __future__ import annotations

import logging

import pandas as pd
import plotly.colors
import plotly.graph_objects as go

from ev_dashboard import config
from ev_dashboard.data import (
    filter_by_parameter,
    filter_by_region,
    filter_by_year,
    first_value,
)

logger = logging.getLogger(__name__)

SCATTER_COLUMNS = ["year", "supply", "demand"]


# ------------------------------------------------------------
# Tooltip helpers
# ------------------------------------------------------------
def format_value(value) -> str:
    """Shortest text that reads back as ``value``, without a trailing ``.0``."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def hover_template(*lines) -> str:
    """Join tooltip lines for a Plotly ``hovertemplate``.

    A line is either a ``(label, placeholder)`` pair rendered as
    ``label: placeholder`` or a plain string used as is.
    """
    parts = []
    for line in lines:
        if isinstance(line, tuple):
            label, placeholder = line
            parts.append(f"{label}: {placeholder}")
        else:
            parts.append(line)
    return "<br>".join(parts) + "<extra></extra>"


def _base_layout(fig: go.Figure, width: int, height: int, margin: dict) -> go.Figure:
    fig.update_layout(
        width=width,
        height=height,
        margin=margin,
        template="plotly_white",
        hoverlabel=config.TOOLTIP_STYLE,
    )
    return fig


def _empty_figure(title: str, width: int = config.WIDTH, height: int = config.HEIGHT) -> go.Figure:
    fig = go.Figure()
    fig.add_annotation(
        text=config.EMPTY_MESSAGE,
        x=0.5, y=0.5, xref="paper", yref="paper",
        showarrow=False,
        font=dict(size=14, color="#666666"),
    )
    fig.update_xaxes(visible=False)
    fig.update_yaxes(visible=False)
    fig.update_layout(title=title)
    return _base_layout(fig, width, height, config.MARGIN)


# ------------------------------------------------------------
# Scatter: EV stock (supply) vs EV sales (demand) per year
# ------------------------------------------------------------
def scatter_points(records: pd.DataFrame, region: str | None = None) -> pd.DataFrame:
    filtered = filter_by_region(records, region)
    rows = [
        {
            "year": year,
            "supply": first_value(group, config.EV_STOCK),
            "demand": first_value(group, config.EV_SALES),
        }
        for year, group in filtered.groupby("year", sort=False)
    ]
    return pd.DataFrame(rows, columns=SCATTER_COLUMNS)


def build_scatter_chart(records: pd.DataFrame, region: str | None = None) -> go.Figure:
    points = scatter_points(records, region)
    title = f"EV Stock vs Sales: {region or config.ALL_REGIONS}"
    logger.debug(f"Scatter for region={region!r}: {len(points)} years")

    if points.empty:
        return _empty_figure(title)

    years = pd.to_numeric(points["year"], errors="coerce")
    fig = go.Figure()
    for column, name, color in (
        ("supply", "Supply", config.SUPPLY_COLOR),
        ("demand", "Demand", config.DEMAND_COLOR),
    ):
        fig.add_trace(
            go.Scatter(
                x=years,
                y=points[column],
                mode="markers",
                name=name,
                marker=dict(color=color, size=config.POINT_RADIUS * 2),
                customdata=[[y, format_value(v)] for y, v in zip(points["year"], points[column])],
                hovertemplate=hover_template(("Year", "%{customdata[0]}"), (name, "%{customdata[1]}")),
            )
        )

    y_max = float(points[["supply", "demand"]].max().max())
    fig.update_xaxes(
        title="Year",
        range=[float(years.min()), float(years.max())] if years.notna().any() else None,
        tickformat="d",
    )
    fig.update_yaxes(title="Vehicles", range=[0, y_max] if y_max > 0 else None, rangemode="tozero")
    fig.update_layout(title=title)
    return _base_layout(fig, config.WIDTH, config.HEIGHT, config.MARGIN)


# ------------------------------------------------------------
# Stacked bars: sales share and stock share per region
# ------------------------------------------------------------
def stacked_shares(records: pd.DataFrame, year, keys=config.STACK_KEYS) -> pd.DataFrame:
    filtered = filter_by_year(records, year)
    rows = []
    for region, group in filtered.groupby("region", sort=False):
        row = {"region": region}
        for key in keys:
            row[key] = first_value(group, key)
        row["tooltip"] = "<br>".join(
            f"{parameter}: {format_value(value)}%"
            for parameter, value in zip(group["parameter"], group["value"])
        )
        rows.append(row)
    return pd.DataFrame(rows, columns=["region", *keys, "tooltip"])


def build_stacked_bar_chart(records: pd.DataFrame, year, keys=config.STACK_KEYS) -> go.Figure:
    shares = stacked_shares(records, year, keys)
    width = config.WIDTH + config.MARGIN["l"] + config.MARGIN["r"]
    height = config.HEIGHT + config.MARGIN["t"] + config.MARGIN["b"]
    # Plot area is BAR_WIDTH x BAR_HEIGHT; the rest holds the legend and rotated labels
    margin = dict(
        t=config.MARGIN["t"],
        l=config.MARGIN["l"],
        r=width - config.MARGIN["l"] - config.BAR_WIDTH,
        b=height - config.MARGIN["t"] - config.BAR_HEIGHT,
    )
    title = f"EV Market Share by Region: {year}"
    logger.debug(f"Stacked bars for year={year!r}: {len(shares)} regions")

    if shares.empty:
        return _empty_figure(title, width, height)

    palette = plotly.colors.qualitative.D3
    fig = go.Figure()
    for i, key in enumerate(keys):
        fig.add_trace(
            go.Bar(
                x=shares["region"],
                y=shares[key],
                name=key,
                marker_color=palette[i % len(palette)],
                customdata=shares[["tooltip"]].values,
                hovertemplate=hover_template(("Region", "%{x}"), "%{customdata[0]}"),
            )
        )

    totals = shares[list(keys)].sum(axis=1)
    y_max = float(totals.max())
    fig.update_xaxes(tickangle=-45, categoryorder="array", categoryarray=list(shares["region"]))
    fig.update_yaxes(title="Share (%)", range=[0, y_max] if y_max > 0 else None, rangemode="tozero")
    fig.update_layout(
        title=title,
        barmode="stack",
        bargap=config.BAR_PADDING,
        transition=dict(duration=config.TRANSITION_MS, easing="cubic-in-out"),
    )
    return _base_layout(fig, width, height, margin)


# ------------------------------------------------------------
# Treemap: electricity demand per region
# ------------------------------------------------------------
def treemap_leaves(records: pd.DataFrame, year, parameter: str = config.ELECTRICITY_DEMAND) -> pd.DataFrame:
    leaves = filter_by_year(filter_by_parameter(records, parameter), year)
    return leaves.sort_values("value", ascending=False, kind="stable").reset_index(drop=True)


def build_treemap(records: pd.DataFrame, year, parameter: str = config.ELECTRICITY_DEMAND) -> go.Figure:
    leaves = treemap_leaves(records, year, parameter)
    title = f"{parameter} by Region: {year}"
    logger.debug(f"Treemap for year={year!r}, parameter={parameter!r}: {len(leaves)} leaves")

    if leaves.empty:
        return _empty_figure(title)

    root_label = f"{parameter} ({year})"
    # Leaf ids are positional so repeated region names stay separate rectangles
    ids = ["root"] + [f"leaf-{i}" for i in range(len(leaves))]
    labels = [root_label] + list(leaves["region"])
    parents = [""] + ["root"] * len(leaves)
    values = [0.0] + list(leaves["value"])
    leaf_template = hover_template(("Region", "%{label}"), ("Value", "%{customdata[0]}"))

    fig = go.Figure(
        go.Treemap(
            ids=ids,
            labels=labels,
            parents=parents,
            values=values,
            branchvalues="remainder",
            sort=False,
            customdata=[[format_value(v)] for v in values],
            hovertemplate=["%{label}<extra></extra>"] + [leaf_template] * len(leaves),
            marker=dict(
                colors=["white"] + [config.TREEMAP_FILL] * len(leaves),
                line=dict(color=config.TREEMAP_STROKE, width=1),
            ),
            tiling=dict(pad=config.TREEMAP_PADDING),
            pathbar=dict(visible=False),
            textinfo="label",
            textposition="top left",
            textfont=dict(size=config.TREEMAP_FONT_SIZE, color="black"),
        )
    )
    fig.update_layout(title=title)
    return _base_layout(fig, config.WIDTH, config.HEIGHT, dict(t=30, r=0, b=0, l=0))
