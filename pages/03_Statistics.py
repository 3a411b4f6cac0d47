"""Statistics: descriptive summaries, per-season tables and records."""
import streamlit as st

from meteo.aggregation import rain_day_summary, season_summary
from meteo.config import load_config
from meteo.data_loader import load_series
from meteo.reports import (
    RAIN_TABLE_LABELS, SEASON_TABLE_LABELS, labelled,
    precipitation_extremes_report, summary_report, temperature_extremes_report,
)
from meteo.ui_components import page_header, report_block, require_series, series_caption

page_header("Statistics")

series, error = load_series(load_config())
require_series(series, error)
series_caption(series)

col1, col2 = st.columns(2)

# ── Descriptive statistics ───────────────────────────────────────────────────
with col1:
    st.header("Descriptive Statistics")
    report_block("Temperature (°C)", summary_report(series, "temperature"))
    report_block("Precipitation (mm)", summary_report(series, "precipitation"))

# ── Per-season tables ────────────────────────────────────────────────────────
with col2:
    st.header("By Season")
    st.subheader("Temperature by Season")
    st.dataframe(labelled(season_summary(series), SEASON_TABLE_LABELS),
                 use_container_width=True, hide_index=True)
    st.subheader("Rain Days by Season")
    st.dataframe(labelled(rain_day_summary(series), RAIN_TABLE_LABELS),
                 use_container_width=True, hide_index=True)

# ── Records ──────────────────────────────────────────────────────────────────
st.header("Records and Extremes")
col3, col4 = st.columns(2)
with col3:
    report_block("Extreme Temperatures", temperature_extremes_report(series))
with col4:
    report_block("Record Precipitation", precipitation_extremes_report(series))
