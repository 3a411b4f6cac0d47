"""Charts: temperature trend, precipitation/humidity, wind/pressure, seasons."""
import streamlit as st

from meteo.config import load_config
from meteo.data_loader import load_series
from meteo.plotting import (
    precipitation_humidity_chart, season_distribution_chart,
    temperature_chart, wind_pressure_chart,
)
from meteo.ui_components import page_header, require_series, series_caption

page_header("Charts")

series, error = load_series(load_config())
require_series(series, error)
series_caption(series)

# ── Temperature ──────────────────────────────────────────────────────────────
st.plotly_chart(temperature_chart(series), use_container_width=True)

# ── Precipitation & wind ─────────────────────────────────────────────────────
col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(precipitation_humidity_chart(series), use_container_width=True)
with col2:
    st.plotly_chart(wind_pressure_chart(series), use_container_width=True)

# ── Seasons ──────────────────────────────────────────────────────────────────
st.plotly_chart(season_distribution_chart(series), use_container_width=True)
