from __future__ import annotations

import streamlit as st

from model import TemperatureUnit, series_to_csv, series_to_frame
from state import (
    Action,
    ChartStyle,
    ComputeAmbient,
    DashboardState,
    RefreshSeries,
    SelectHour,
    SetChartStyle,
    SetGridlines,
    SetUnit,
    ToggleTheme,
    reduce,
)
from utils.format import format_hour, format_temperature

STATE_KEY = "dashboard"
RNG_KEY = "rng"


def current_state() -> DashboardState:
    return st.session_state[STATE_KEY]


def dispatch(action: Action) -> None:
    st.session_state[STATE_KEY] = reduce(current_state(), action, st.session_state[RNG_KEY])


def render_header_buttons() -> None:
    state = current_state()
    col_theme, col_settings, col_refresh = st.columns(3)
    with col_theme:
        st.button(
            "☀️" if state.is_dark else "🌙",
            help="Toggle dark mode",
            on_click=dispatch,
            args=(ToggleTheme(),),
            use_container_width=True,
        )
    with col_settings:
        with st.popover("⚙️", help="Dashboard settings", use_container_width=True):
            render_settings_panel()
    with col_refresh:
        st.button(
            "🔄",
            help="Refresh data",
            on_click=dispatch,
            args=(RefreshSeries(),),
            use_container_width=True,
            key="refresh_header",
        )


def render_settings_panel() -> None:
    state = current_state()
    st.markdown("**Dashboard Settings**")
    st.caption("Customize your temperature analysis view")

    units = list(TemperatureUnit)
    unit = st.selectbox(
        "Temperature Unit",
        options=units,
        index=units.index(state.unit),
        format_func=lambda u: u.value.title(),
    )
    if unit != state.unit:
        dispatch(SetUnit(unit))

    gridlines = st.toggle("Show Gridlines", value=state.show_gridlines)
    if gridlines != state.show_gridlines:
        dispatch(SetGridlines(gridlines))

    styles = list(ChartStyle)
    style = st.selectbox(
        "Chart Style",
        options=styles,
        index=styles.index(state.chart_style),
        format_func=lambda s: s.value.title(),
    )
    if style != state.chart_style:
        dispatch(SetChartStyle(style))


def render_hour_controls() -> None:
    state = current_state()
    hour = st.slider(
        "Select Hour",
        min_value=0,
        max_value=23,
        value=state.selected_hour,
        step=1,
        format="%d:00",
    )
    if hour != state.selected_hour:
        dispatch(SelectHour(hour))

    col_calc, col_refresh = st.columns(2)
    with col_calc:
        st.button(
            "🌡️ Calculate Ambient Temperature",
            type="primary",
            on_click=dispatch,
            args=(ComputeAmbient(),),
            use_container_width=True,
        )
    with col_refresh:
        st.button(
            "📱 Refresh Data",
            on_click=dispatch,
            args=(RefreshSeries(),),
            use_container_width=True,
            key="refresh_controls",
        )


def render_ambient_callout() -> None:
    state = current_state()
    if state.ambient_temperature is None:
        return
    with st.container(border=True):
        st.markdown(f"**Estimated Room Temperature at {format_hour(state.ambient_hour)}**")
        st.markdown(f"## {format_temperature(state.ambient_temperature, state.unit)}")


def render_series_table() -> None:
    state = current_state()
    with st.expander("Series data"):
        # CSV carries display-unit values; the session keeps Celsius
        csv_text = series_to_csv(state.series, state.unit)
        st.download_button(
            "Download series CSV",
            data=csv_text,
            file_name=f"temperature_series_{state.unit.value}.csv",
            mime="text/csv",
        )
        df_disp = series_to_frame(state.series, state.unit)
        df_disp["hour"] = df_disp["hour"].map(format_hour)
        st.dataframe(
            df_disp,
            use_container_width=True,
            hide_index=True,
            column_config={
                "hour": st.column_config.TextColumn("hour"),
                "local_temperature": st.column_config.NumberColumn(
                    f"local (°{state.unit.symbol})", format="%.1f"
                ),
                "battery_temperature": st.column_config.NumberColumn(
                    f"battery (°{state.unit.symbol})", format="%.1f"
                ),
            },
        )
