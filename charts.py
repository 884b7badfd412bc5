from __future__ import annotations

import plotly.graph_objects as go

from constants import HOURS_PER_DAY, THEME_COLORS
from model import series_to_frame, to_display_unit
from state import DashboardState
from utils.format import axis_title, format_hour, format_temperature


def build_temperature_figure(state: DashboardState, *, height: int = 400) -> go.Figure:
    colors = THEME_COLORS[state.theme.value]
    fig = go.Figure()

    if state.series:
        df = series_to_frame(state.series, state.unit)
        hover = "%{y}°" + state.unit.symbol
        for column, name, color_key in (
            ("local_temperature", "Local Temperature", "local"),
            ("battery_temperature", "Battery Temperature", "battery"),
        ):
            fig.add_trace(
                go.Scatter(
                    x=df["hour"],
                    y=df[column],
                    mode="lines",
                    name=name,
                    line=dict(color=colors[color_key], width=2, shape=state.chart_style.line_shape),
                    hovertemplate=hover,
                )
            )

    # Dashed guide at the last estimate, in the current display unit
    if state.ambient_temperature is not None:
        fig.add_hline(
            y=to_display_unit(state.ambient_temperature, state.unit),
            line_dash="dash",
            line_color=colors["ambient"],
            line_width=2,
            annotation_text=f"Ambient: {format_temperature(state.ambient_temperature, state.unit)}",
            annotation_position="right",
            annotation_font_color=colors["text"],
        )

    fig.update_layout(
        template="plotly_dark" if state.is_dark else "simple_white",
        height=height,
        paper_bgcolor=colors["background"],
        plot_bgcolor=colors["background"],
        font=dict(color=colors["text"]),
        margin=dict(l=20, r=30, t=40, b=40),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        hovermode="x unified",
        xaxis_title="Hour of Day",
        yaxis_title=axis_title(state.unit),
    )
    hours = list(range(HOURS_PER_DAY))
    fig.update_xaxes(
        tickmode="array",
        tickvals=hours,
        ticktext=[format_hour(h) for h in hours],
        range=[-0.5, HOURS_PER_DAY - 0.5],
        showgrid=state.show_gridlines,
        gridcolor=colors["grid"],
        griddash="dash",
    )
    fig.update_yaxes(showgrid=state.show_gridlines, gridcolor=colors["grid"], griddash="dash")
    return fig
