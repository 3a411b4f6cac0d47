"""Sidebar generation controls and per-session series storage."""
import logging
from collections import namedtuple
from datetime import date, timedelta

import streamlit as st

from meteo.errors import WeatherError
from meteo.generator import generate

logger = logging.getLogger(__name__)

SERIES_KEY = "weather_series"
ERROR_KEY = "weather_error"

GenerationRequest = namedtuple("GenerationRequest", ["city", "start", "end"])


def default_range(config, today=None):
    """Default date range: the configured number of days back from today."""
    today = today or date.today()
    return today - timedelta(days=config.default_days), today


def sidebar_controls(config):
    """Render city and date range pickers; return the request and whether Update was pressed."""
    st.sidebar.header("Parameters")
    city = st.sidebar.selectbox(
        "City", list(config.cities),
        index=list(config.cities).index(config.default_city),
        key="city_select",
    )
    start_default, end_default = default_range(config)
    date_range = st.sidebar.date_input(
        "Date range", value=(start_default, end_default),
        format="DD/MM/YYYY", key="date_range",
    )
    if isinstance(date_range, (tuple, list)) and len(date_range) == 2:
        start, end = date_range
    else:
        start, end = start_default, end_default
    pressed = st.sidebar.button("Update", type="primary", use_container_width=True)
    return GenerationRequest(city, start, end), pressed


def refresh(request, state=None, rng=None):
    """Replace the stored series with a freshly generated one.

    On failure the stored series is cleared so pages show the error instead of
    stale data.
    """
    state = st.session_state if state is None else state
    try:
        series = generate(request.city, request.start, request.end, rng=rng)
    except WeatherError as exc:
        logger.warning("Generation failed for %s: %s", request.city, exc)
        state[SERIES_KEY] = None
        state[ERROR_KEY] = str(exc)
        return None
    logger.info("Generated %d days for %s", len(series), request.city)
    state[SERIES_KEY] = series
    state[ERROR_KEY] = None
    return series


def load_series(config, state=None):
    """Series for the current session, generated on first run and on each Update press."""
    state = st.session_state if state is None else state
    request, pressed = sidebar_controls(config)
    if pressed or SERIES_KEY not in state:
        refresh(request, state)
    return state.get(SERIES_KEY), state.get(ERROR_KEY)
