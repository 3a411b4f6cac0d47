from __future__ import annotations

from datetime import date

import numpy as np

from meteo.config import DashboardConfig
from meteo.data_loader import (
    ERROR_KEY, SERIES_KEY, GenerationRequest, default_range, refresh,
)


def test_default_range_looks_back_from_today() -> None:
    start, end = default_range(DashboardConfig(), today=date(2024, 6, 30))

    assert end == date(2024, 6, 30)
    assert start == date(2023, 7, 1)


def test_refresh_stores_new_series() -> None:
    state: dict = {}
    request = GenerationRequest("Paris", date(2024, 1, 1), date(2024, 1, 10))

    series = refresh(request, state, rng=np.random.default_rng(0))

    assert len(series) == 10
    assert state[SERIES_KEY] is series
    assert state[ERROR_KEY] is None


def test_refresh_replaces_previous_series() -> None:
    state: dict = {}
    first = refresh(GenerationRequest("Paris", date(2024, 1, 1), date(2024, 1, 10)), state)
    second = refresh(GenerationRequest("Nice", date(2024, 2, 1), date(2024, 2, 3)), state)

    assert state[SERIES_KEY] is second
    assert second is not first
    assert second.city == "Nice"


def test_failed_refresh_clears_stale_series(caplog) -> None:
    state: dict = {}
    refresh(GenerationRequest("Paris", date(2024, 1, 1), date(2024, 1, 10)), state)

    result = refresh(GenerationRequest("Paris", date(2024, 2, 1), date(2024, 1, 1)), state)

    assert result is None
    assert state[SERIES_KEY] is None
    assert "after" in state[ERROR_KEY]
    assert "Generation failed" in caplog.text
