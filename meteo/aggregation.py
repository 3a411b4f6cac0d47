"""Summary statistics over a generated weather series."""
from collections import namedtuple

import pandas as pd

from meteo.constants import FEATURE_COLS, RAINY_DAY_THRESHOLD, SEASON_RAIN_DAY_THRESHOLD
from meteo.errors import EmptySeriesError

TemperatureExtremes = namedtuple("TemperatureExtremes", ["min_value", "min_date", "max_value", "max_date"])
PrecipitationExtremes = namedtuple("PrecipitationExtremes", ["max_value", "max_date", "rainy_day_count"])


def _frame(series):
    if len(series) == 0:
        raise EmptySeriesError(f"Weather series for {series.city!r} has no observations")
    return series.to_frame()


def _column(df, name):
    values = df[name]
    if values.isna().all():
        raise EmptySeriesError(f"No {name} values recorded")
    return values


def mean_temperature(series):
    """Mean daily temperature, ignoring missing days."""
    return float(_column(_frame(series), "temperature").mean())


def total_precipitation(series):
    """Total precipitation over the series, ignoring missing days."""
    return float(_column(_frame(series), "precipitation").sum())


def max_wind_speed(series):
    """Highest daily wind speed."""
    return float(_column(_frame(series), "wind_speed").max())


def mean_humidity(series):
    """Mean daily humidity, ignoring missing days."""
    return float(_column(_frame(series), "humidity").mean())


def headline_metrics(series):
    """The four dashboard headline figures, rounded for display."""
    return {
        "mean_temperature": round(mean_temperature(series), 1),
        "total_precipitation": round(total_precipitation(series), 1),
        "max_wind_speed": round(max_wind_speed(series), 1),
        "mean_humidity": round(mean_humidity(series), 1),
    }


def _date_at(df, label):
    return df.loc[label, "date"].date()


def temperature_extremes(series):
    """Coldest and warmest day; ties go to the earliest date."""
    df = _frame(series)
    temps = _column(df, "temperature")
    lo, hi = temps.idxmin(), temps.idxmax()
    return TemperatureExtremes(
        min_value=float(temps[lo]),
        min_date=_date_at(df, lo),
        max_value=float(temps[hi]),
        max_date=_date_at(df, hi),
    )


def precipitation_extremes(series):
    """Wettest day (earliest on ties) and the count of days above 0.1 mm."""
    df = _frame(series)
    precip = _column(df, "precipitation")
    hi = precip.idxmax()
    return PrecipitationExtremes(
        max_value=float(precip[hi]),
        max_date=_date_at(df, hi),
        rainy_day_count=int((precip > RAINY_DAY_THRESHOLD).sum()),
    )


def descriptive_stats(series, variable="temperature"):
    """Min, quartiles, median, mean and max of one measurement.

    Quartiles use linear interpolation between order statistics.
    """
    if variable not in FEATURE_COLS:
        raise ValueError(f"Unknown variable {variable!r}; expected one of {FEATURE_COLS}")
    values = _column(_frame(series), variable).dropna()
    return {
        "min": float(values.min()),
        "q1": float(values.quantile(0.25)),
        "median": float(values.median()),
        "mean": float(values.mean()),
        "q3": float(values.quantile(0.75)),
        "max": float(values.max()),
    }


def season_summary(series):
    """Temperature mean, min, max and sample std per season present in the series."""
    df = _frame(series)
    _column(df, "temperature")
    grouped = df.groupby("season", observed=True)["temperature"]
    summary = grouped.agg(["mean", "min", "max", "std"])
    return summary.round(1)


def rain_day_summary(series):
    """Days above 1 mm, total and max precipitation per season present."""
    df = _frame(series)
    _column(df, "precipitation")
    df["rain_day"] = df["precipitation"] > SEASON_RAIN_DAY_THRESHOLD
    grouped = df.groupby("season", observed=True)
    summary = pd.DataFrame({
        "rain_days": grouped["rain_day"].sum().astype(int),
        "total": grouped["precipitation"].sum().round(1),
        "max": grouped["precipitation"].max().round(1),
    })
    return summary
