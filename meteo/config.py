"""Dashboard configuration and logging setup."""
import logging
import os
from dataclasses import dataclass
from typing import Tuple

from meteo.constants import DEFAULT_CITIES
from meteo.errors import ConfigError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class DashboardConfig:
    """Settings the presentation layer hands to the generation trigger."""

    cities: Tuple[str, ...] = tuple(DEFAULT_CITIES)
    default_city: str = "Paris"
    default_days: int = 365
    page_length: int = 15

    def __post_init__(self):
        if not self.cities:
            raise ConfigError("At least one city must be configured")
        if self.default_city not in self.cities:
            raise ConfigError(f"Default city {self.default_city!r} is not in {list(self.cities)}")
        if self.default_days < 0:
            raise ConfigError("default_days must be non-negative")
        if self.page_length < 1:
            raise ConfigError("page_length must be at least 1")


def load_config(environ=None):
    """Build a DashboardConfig, honouring METEO_CITIES and METEO_DEFAULT_CITY."""
    environ = os.environ if environ is None else environ
    cities = tuple(DEFAULT_CITIES)
    raw = environ.get("METEO_CITIES")
    if raw is not None:
        cities = tuple(c.strip() for c in raw.split(",") if c.strip())
    default_city = environ.get("METEO_DEFAULT_CITY") or (cities[0] if cities else "")
    return DashboardConfig(cities=cities, default_city=default_city)


def configure_logging(level=None):
    """Configure root logging once; level falls back to METEO_LOG_LEVEL then INFO."""
    level = level or os.environ.get("METEO_LOG_LEVEL", "INFO")
    logging.basicConfig(level=level.upper() if isinstance(level, str) else level, format=LOG_FORMAT)
