from __future__ import annotations

from datetime import date

import numpy as np

from meteo import plotting
from meteo.generator import generate

from conftest import make_series


def _year():
    return generate("Paris", "2024-01-01", "2024-12-31", rng=np.random.default_rng(11))


def test_temperature_chart_has_trend() -> None:
    fig = plotting.temperature_chart(_year())

    assert [t.name for t in fig.data] == ["Temperature", "Trend"]
    assert len(fig.data[1].y) == 366
    assert fig.layout.title.text == "Temperature in Paris"
    assert fig.layout.template.layout.paper_bgcolor is not None


def test_trend_follows_the_seasons() -> None:
    fig = plotting.temperature_chart(_year())
    trend = np.asarray(fig.data[1].y)

    # smoothed summer sits above smoothed winter
    assert trend[180] > trend[10]


def test_temperature_chart_skips_trend_for_short_series() -> None:
    series = make_series(date(2024, 1, 1), [{"temperature": 1.0}, {"temperature": 2.0}])

    fig = plotting.temperature_chart(series)

    assert [t.name for t in fig.data] == ["Temperature"]


def test_dual_axis_charts() -> None:
    series = _year()

    precip = plotting.precipitation_humidity_chart(series)
    wind = plotting.wind_pressure_chart(series)

    assert [t.type for t in precip.data] == ["bar", "scatter"]
    assert [t.yaxis for t in precip.data] == ["y", "y2"]
    assert precip.layout.yaxis2.title.text == "Humidity (%)"
    assert [t.name for t in wind.data] == ["Wind Speed", "Pressure"]
    assert [t.yaxis for t in wind.data] == ["y", "y2"]
    assert wind.layout.yaxis2.title.text == "Pressure (hPa)"


def test_season_chart_orders_present_seasons() -> None:
    series = generate("Lyon", "2024-04-15", "2024-07-15", rng=np.random.default_rng(2))

    fig = plotting.season_distribution_chart(series)

    assert [t.name for t in fig.data] == ["Spring", "Summer"]
    assert all(t.boxpoints == "all" for t in fig.data)
    assert fig.layout.showlegend is False
