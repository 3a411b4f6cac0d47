"""Synthetic daily weather generation and aggregation for the dashboard."""
from meteo.errors import (
    ConfigError, EmptySeriesError, InvalidRangeError, UnmappedSeasonError, WeatherError,
)
from meteo.generator import DailyObservation, WeatherSeries, generate

__all__ = [
    "ConfigError", "EmptySeriesError", "InvalidRangeError", "UnmappedSeasonError",
    "WeatherError", "DailyObservation", "WeatherSeries", "generate",
]
