"""Data: the full generated series as a sortable, paginated table."""
import streamlit as st

from meteo.config import load_config
from meteo.constants import FEATURE_LABELS
from meteo.data_loader import load_series
from meteo.reports import display_table, page_count, page_slice
from meteo.ui_components import page_header, require_series, series_caption

config = load_config()
page_header("Detailed Weather Data")

series, error = load_series(config)
require_series(series, error)
series_caption(series)

table = display_table(series)

sort_col = st.selectbox(
    "Sort by", ["date", *FEATURE_LABELS],
    format_func=lambda c: FEATURE_LABELS.get(c, "Date"),
    key="data_sort",
)
descending = st.toggle("Descending", key="data_desc")

n_pages = page_count(len(table), config.page_length)
page = st.number_input("Page", min_value=1, max_value=n_pages, value=1, step=1, key="data_page")
st.dataframe(
    page_slice(table, sort_col, descending, page, config.page_length),
    use_container_width=True, hide_index=True,
    column_config={
        col: st.column_config.NumberColumn(label, format="%.1f")
        for col, label in FEATURE_LABELS.items()
    },
)
st.caption(f"Page {page} of {n_pages} -- {len(table)} rows")
