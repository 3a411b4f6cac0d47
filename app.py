"""Weather Fluctuations Dashboard — Main Entry Point."""
import streamlit as st

st.set_page_config(
    page_title="Weather Fluctuations",
    page_icon="🌤️",
    layout="wide",
    initial_sidebar_state="expanded",
)

from meteo.config import configure_logging, load_config
from meteo.data_loader import load_series
from meteo.ui_components import metric_cards, page_header, require_series, series_caption

configure_logging()
config = load_config()

page_header(
    "Weather Fluctuations Dashboard",
    "Explore a simulated daily weather record for a city over any period",
)

st.markdown("""
The data on every page is **simulated**: each day gets a temperature that follows a
seasonal sine curve plus random noise, along with independently drawn humidity,
precipitation, wind speed and pressure. Nothing is fetched from a weather service.

### How to use it

1. **Pick a city** in the sidebar
2. **Choose a date range** to analyse
3. Press **Update** to draw a new series, then browse the pages:
   - **Charts** -- temperature trend, precipitation and humidity, wind and pressure, seasonal spread
   - **Data** -- every generated day in a sortable table
   - **Statistics** -- summaries, per-season tables and records
""")

# ── Quick overview ───────────────────────────────────────────────────────────
series, error = load_series(config)
require_series(series, error)

st.subheader("Quick Overview")
series_caption(series)
metric_cards(series)
