"""Shared UI components: headers, metric cards, report blocks, empty states."""
import streamlit as st

from meteo.aggregation import headline_metrics


def page_header(title, subtitle=None):
    """Render a page title with an optional caption."""
    st.title(title)
    if subtitle:
        st.caption(subtitle)
    st.divider()


def series_caption(series):
    """One-line description of the series currently on display."""
    st.caption(
        f"{series.city}: {series.start_date.strftime('%d/%m/%Y')} to "
        f"{series.end_date.strftime('%d/%m/%Y')} ({len(series)} days)"
    )


def require_series(series, error):
    """Stop the page with an explicit message when no series is available."""
    if error:
        st.error(f"**Could not generate data:** {error}")
        st.stop()
    if series is None or len(series) == 0:
        st.info("No data yet. Pick a city and a date range, then press **Update**.")
        st.stop()


def metric_cards(series):
    """Render the four headline metrics as a 2x2 grid."""
    metrics = headline_metrics(series)
    col1, col2 = st.columns(2)
    col1.metric("Mean Temperature", f"{metrics['mean_temperature']}°C")
    col2.metric("Total Precipitation", f"{metrics['total_precipitation']} mm")
    col3, col4 = st.columns(2)
    col3.metric("Max Wind Speed", f"{metrics['max_wind_speed']} km/h")
    col4.metric("Mean Humidity", f"{metrics['mean_humidity']}%")


def report_block(title, text):
    """Render a preformatted text report under a subheader."""
    st.subheader(title)
    st.code(text, language=None)
