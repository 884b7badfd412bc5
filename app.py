from __future__ import annotations

import random

import streamlit as st

from charts import build_temperature_figure
from config import Settings
from constants import THEME_COLORS
from controls import (
    RNG_KEY,
    STATE_KEY,
    current_state,
    render_ambient_callout,
    render_header_buttons,
    render_hour_controls,
    render_series_table,
)
from state import initial_state
from utils.logging import setup_logging


def _init_session(settings: Settings) -> None:
    if RNG_KEY not in st.session_state:
        st.session_state[RNG_KEY] = random.Random(settings.seed)
    if STATE_KEY not in st.session_state:
        with st.spinner("Generating data..."):
            st.session_state[STATE_KEY] = initial_state(settings, st.session_state[RNG_KEY])


def _apply_theme() -> None:
    state = current_state()
    colors = THEME_COLORS[state.theme.value]
    st.markdown(
        f"""
        <style>
        .stApp {{ background-color: {colors["background"]}; color: {colors["text"]}; }}
        .stApp h1, .stApp h2, .stApp p, .stApp label {{ color: {colors["text"]}; }}
        </style>
        """,
        unsafe_allow_html=True,
    )


def main() -> None:
    st.set_page_config(page_title="Temperature Analysis Dashboard", page_icon="🌡️", layout="wide")
    settings = Settings()
    logger = setup_logging(settings.log_level)
    logger.debug("Loaded settings: %s", settings.model_dump())

    _init_session(settings)

    col_title, col_buttons = st.columns([4, 1], vertical_alignment="center")
    with col_title:
        st.title("Temperature Analysis Dashboard")
    with col_buttons:
        render_header_buttons()

    # Header callbacks and settings may have changed the state above
    _apply_theme()
    state = current_state()

    with st.container(border=True):
        if state.series:
            fig = build_temperature_figure(state, height=settings.chart_height)
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("No data yet. Press refresh to generate a series.")

    with st.container(border=True):
        render_hour_controls()
        render_ambient_callout()

    render_series_table()


if __name__ == "__main__":
    main()
