"""Text reports and display tables built from aggregation outputs."""
import math

from meteo.aggregation import descriptive_stats, precipitation_extremes, temperature_extremes
from meteo.constants import DATE_FORMAT, FEATURE_COLS, RAINY_DAY_THRESHOLD

SUMMARY_LABELS = {
    "min": "Min.",
    "q1": "1st Qu.",
    "median": "Median",
    "mean": "Mean",
    "q3": "3rd Qu.",
    "max": "Max.",
}


def format_date(day):
    """Format a date as DD/MM/YYYY."""
    return day.strftime(DATE_FORMAT)


def temperature_extremes_report(series):
    """Warmest and coldest day with their dates."""
    ext = temperature_extremes(series)
    return (
        f"Maximum temperature: {ext.max_value:.1f} °C\n"
        f"   Date: {format_date(ext.max_date)}\n\n"
        f"Minimum temperature: {ext.min_value:.1f} °C\n"
        f"   Date: {format_date(ext.min_date)}"
    )


def precipitation_extremes_report(series):
    """Wettest day with its date, plus the rainy-day count."""
    ext = precipitation_extremes(series)
    return (
        f"Maximum precipitation: {ext.max_value:.1f} mm\n"
        f"   Date: {format_date(ext.max_date)}\n\n"
        f"Rainy days: {ext.rainy_day_count}\n"
        f"   (> {RAINY_DAY_THRESHOLD} mm of precipitation)"
    )


def summary_report(series, variable):
    """Six-number summary laid out as a header row over a value row."""
    stats = descriptive_stats(series, variable)
    values = [f"{stats[key]:.2f}" for key in SUMMARY_LABELS]
    widths = [max(len(label), len(value)) for label, value in zip(SUMMARY_LABELS.values(), values)]
    header = " ".join(label.rjust(w) for label, w in zip(SUMMARY_LABELS.values(), widths))
    row = " ".join(value.rjust(w) for value, w in zip(values, widths))
    return f"{header}\n{row}"


def display_table(series):
    """All observations with DD/MM/YYYY dates and one-decimal measurements."""
    df = series.to_frame()
    df["date"] = df["date"].dt.strftime(DATE_FORMAT)
    df["season"] = df["season"].astype(str)
    df[FEATURE_COLS] = df[FEATURE_COLS].round(1)
    return df


SEASON_TABLE_LABELS = {
    "mean": "Mean Temp. (°C)",
    "min": "Min Temp. (°C)",
    "max": "Max Temp. (°C)",
    "std": "Std Dev",
}

RAIN_TABLE_LABELS = {
    "rain_days": "Rain Days (> 1 mm)",
    "total": "Total Precip. (mm)",
    "max": "Max Precip. (mm)",
}


def labelled(summary, labels):
    """Rename summary columns for display and expose the season as a column."""
    out = summary.rename(columns=labels).reset_index()
    out["season"] = out["season"].astype(str)
    return out.rename(columns={"season": "Season"})


def page_count(n_rows, page_length):
    """Number of table pages; an empty table still has one."""
    return max(1, math.ceil(n_rows / page_length))


def page_slice(table, sort_col, descending, page, page_length):
    """Sort a display table and return the rows of one 1-based page.

    ``date`` sorts chronologically rather than on the DD/MM/YYYY text; other
    columns sort stably so equal values keep date order.
    """
    if sort_col == "date":
        ordered = table.iloc[::-1] if descending else table
    else:
        ordered = table.sort_values(sort_col, ascending=not descending, kind="stable")
    page = min(max(page, 1), page_count(len(ordered), page_length))
    start = (page - 1) * page_length
    return ordered.iloc[start:start + page_length]
