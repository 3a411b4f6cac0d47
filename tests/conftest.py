from __future__ import annotations

from datetime import date, timedelta

import numpy as np
import pytest

from meteo.generator import DailyObservation, WeatherSeries, season_for


def make_observation(day: date, **values) -> DailyObservation:
    fields = dict(temperature=10.0, humidity=50.0, precipitation=0.0, wind_speed=10.0, pressure=1013.0)
    fields.update(values)
    return DailyObservation(date=day, city="Paris", season=season_for(day), **fields)


def make_series(start: date, rows: list[dict]) -> WeatherSeries:
    """Consecutive days starting at ``start``, one dict of overrides per day."""
    return WeatherSeries.from_observations(
        make_observation(start + timedelta(days=i), **row) for i, row in enumerate(rows)
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def empty_series() -> WeatherSeries:
    return WeatherSeries(city="Paris", start_date=None, end_date=None)
