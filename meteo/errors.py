"""Error types raised by the weather series pipeline."""


class WeatherError(Exception):
    """Base class for every error the dashboard core raises."""


class InvalidRangeError(WeatherError, ValueError):
    """Start date falls after end date, or a date could not be parsed."""


class EmptySeriesError(WeatherError, ValueError):
    """An aggregation was asked to summarize a series with no observations."""


class UnmappedSeasonError(WeatherError, KeyError):
    """A month number has no season assigned."""


class ConfigError(WeatherError):
    """Dashboard configuration is inconsistent."""
