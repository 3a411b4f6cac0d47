"""Synthetic daily weather series: seasonal sine temperature plus independent noise."""
import logging
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Iterator, Optional, Tuple

import numpy as np
import pandas as pd

from meteo.constants import SEASON_ORDER, SEASONS
from meteo.errors import InvalidRangeError, UnmappedSeasonError

logger = logging.getLogger(__name__)

COLUMNS = [
    "date", "city", "temperature", "humidity", "precipitation",
    "wind_speed", "pressure", "season",
]

MEAN_TEMPERATURE = 15.0
TEMPERATURE_AMPLITUDE = 10.0
SPRING_EQUINOX_DAY = 80
YEAR_LENGTH = 365
TEMPERATURE_NOISE_SD = 5.0
HUMIDITY_MEAN, HUMIDITY_SD = 60.0, 15.0
PRECIPITATION_RATE = 0.5
WIND_MEAN, WIND_SD = 15.0, 8.0
PRESSURE_MEAN, PRESSURE_SD = 1013.0, 10.0


@dataclass(frozen=True)
class DailyObservation:
    date: date
    city: str
    temperature: float
    humidity: float
    precipitation: float
    wind_speed: float
    pressure: float
    season: str


@dataclass(frozen=True)
class WeatherSeries:
    """Ordered daily observations for one city over a closed date range."""

    city: str
    start_date: Optional[date]
    end_date: Optional[date]
    observations: Tuple[DailyObservation, ...] = ()

    def __len__(self):
        return len(self.observations)

    def __iter__(self) -> Iterator[DailyObservation]:
        return iter(self.observations)

    @classmethod
    def from_observations(cls, observations, city=None):
        """Build a series from existing records covering consecutive days."""
        observations = tuple(observations)
        if not observations:
            return cls(city=city or "", start_date=None, end_date=None)
        city = city or observations[0].city
        if any(obs.city != city for obs in observations):
            raise ValueError(f"All observations must belong to {city!r}")
        for prev, cur in zip(observations, observations[1:]):
            if cur.date - prev.date != timedelta(days=1):
                raise InvalidRangeError(f"Days must be consecutive: {prev.date} then {cur.date}")
        return cls(
            city=city,
            start_date=observations[0].date,
            end_date=observations[-1].date,
            observations=observations,
        )

    def to_frame(self):
        """Return the series as a DataFrame, one row per day."""
        df = pd.DataFrame([asdict(obs) for obs in self.observations], columns=COLUMNS)
        df["date"] = pd.to_datetime(df["date"])
        for col in COLUMNS[2:7]:
            df[col] = df[col].astype(float)
        df["season"] = pd.Categorical(df["season"], categories=SEASON_ORDER, ordered=True)
        return df


def season_for_month(month):
    """Map a month number (1-12) to its meteorological season."""
    try:
        return SEASONS[month]
    except KeyError:
        raise UnmappedSeasonError(f"No season mapped for month {month!r}") from None


def season_for(day):
    """Season of a date, from its month alone."""
    return season_for_month(day.month)


def base_temperature(day_of_year):
    """Noise-free seasonal temperature: peaks 25°C ~91 days after day 80, bottoms at 5°C."""
    doy = np.asarray(day_of_year, dtype=float)
    base = MEAN_TEMPERATURE + TEMPERATURE_AMPLITUDE * np.sin(
        2 * np.pi * (doy - SPRING_EQUINOX_DAY) / YEAR_LENGTH
    )
    return float(base) if base.ndim == 0 else base


def _as_timestamp(value, name):
    try:
        ts = pd.Timestamp(value)
    except (TypeError, ValueError) as exc:
        raise InvalidRangeError(f"{name} is not a valid date: {value!r}") from exc
    if pd.isna(ts):
        raise InvalidRangeError(f"{name} is missing")
    return ts.normalize()


def generate(city: str, start_date, end_date, rng: Optional[np.random.Generator] = None) -> WeatherSeries:
    """Generate one synthetic observation per day in [start_date, end_date].

    Each variable is drawn as an independent vector over the whole range, in the
    order temperature noise, humidity, precipitation, wind speed, pressure. Pass a
    seeded ``numpy.random.Generator`` as ``rng`` for reproducible output; the
    default is a fresh unseeded generator.
    """
    start = _as_timestamp(start_date, "start_date")
    end = _as_timestamp(end_date, "end_date")
    if start > end:
        logger.warning("Rejected range for %s: %s is after %s", city, start.date(), end.date())
        raise InvalidRangeError(f"start_date {start.date()} is after end_date {end.date()}")

    if rng is None:
        rng = np.random.default_rng()

    dates = pd.date_range(start, end, freq="D")
    n_days = len(dates)

    temperature = base_temperature(dates.dayofyear.to_numpy()) + rng.normal(0, TEMPERATURE_NOISE_SD, n_days)
    humidity = np.clip(HUMIDITY_MEAN + rng.normal(0, HUMIDITY_SD, n_days), 0, 100)
    precipitation = np.maximum(rng.exponential(1 / PRECIPITATION_RATE, n_days), 0)
    wind_speed = np.maximum(rng.normal(WIND_MEAN, WIND_SD, n_days), 0)
    pressure = PRESSURE_MEAN + rng.normal(0, PRESSURE_SD, n_days)

    columns = [np.round(v, 1) for v in (temperature, humidity, precipitation, wind_speed, pressure)]
    observations = tuple(
        DailyObservation(
            date=ts.date(),
            city=city,
            temperature=float(t),
            humidity=float(h),
            precipitation=float(p),
            wind_speed=float(w),
            pressure=float(pr),
            season=season_for_month(ts.month),
        )
        for ts, t, h, p, w, pr in zip(dates, *columns)
    )
    logger.debug("Generated %d days for %s (%s to %s)", n_days, city, start.date(), end.date())
    return WeatherSeries(city=city, start_date=start.date(), end_date=end.date(), observations=observations)
