from __future__ import annotations

from datetime import date

from meteo import reports
from meteo.aggregation import rain_day_summary, season_summary

from conftest import make_series


def _series():
    return make_series(date(2024, 1, 1), [
        {"temperature": 3.0, "precipitation": 0.0, "humidity": 71.25},
        {"temperature": 11.5, "precipitation": 6.4},
        {"temperature": -2.5, "precipitation": 0.3},
    ])


def test_format_date() -> None:
    assert reports.format_date(date(2024, 3, 7)) == "07/03/2024"


def test_temperature_extremes_report() -> None:
    text = reports.temperature_extremes_report(_series())

    assert "Maximum temperature: 11.5 °C" in text
    assert "Date: 02/01/2024" in text
    assert "Minimum temperature: -2.5 °C" in text
    assert "Date: 03/01/2024" in text
    assert text.index("Maximum") < text.index("Minimum")


def test_precipitation_extremes_report() -> None:
    text = reports.precipitation_extremes_report(_series())

    assert "Maximum precipitation: 6.4 mm" in text
    assert "Date: 02/01/2024" in text
    assert "Rainy days: 2" in text
    assert "> 0.1 mm" in text


def test_summary_report_layout() -> None:
    header, row = reports.summary_report(_series(), "temperature").splitlines()

    assert header.split() == ["Min.", "1st", "Qu.", "Median", "Mean", "3rd", "Qu.", "Max."]
    assert row.split() == ["-2.50", "0.25", "3.00", "4.00", "7.25", "11.50"]
    assert len(header) == len(row)


def test_display_table_formats_dates() -> None:
    table = reports.display_table(_series())

    assert list(table["date"]) == ["01/01/2024", "02/01/2024", "03/01/2024"]
    assert list(table["season"]) == ["Winter"] * 3
    assert table.loc[0, "humidity"] == 71.2


def test_labelled_tables() -> None:
    series = _series()

    temp = reports.labelled(season_summary(series), reports.SEASON_TABLE_LABELS)
    rain = reports.labelled(rain_day_summary(series), reports.RAIN_TABLE_LABELS)

    assert list(temp.columns) == ["Season", "Mean Temp. (°C)", "Min Temp. (°C)", "Max Temp. (°C)", "Std Dev"]
    assert list(rain.columns) == ["Season", "Rain Days (> 1 mm)", "Total Precip. (mm)", "Max Precip. (mm)"]
    assert list(temp["Season"]) == ["Winter"]
    assert rain.loc[0, "Rain Days (> 1 mm)"] == 1


def _table():
    return reports.display_table(make_series(date(2024, 1, 1), [
        {"temperature": 5.0}, {"temperature": 9.0}, {"temperature": 5.0},
        {"temperature": 1.0}, {"temperature": 7.0},
    ]))


def test_page_count() -> None:
    assert reports.page_count(0, 15) == 1
    assert reports.page_count(15, 15) == 1
    assert reports.page_count(16, 15) == 2


def test_page_slice_by_date() -> None:
    table = _table()

    first = reports.page_slice(table, "date", False, 1, 2)
    last = reports.page_slice(table, "date", True, 3, 2)

    assert list(first["date"]) == ["01/01/2024", "02/01/2024"]
    assert list(last["date"]) == ["01/01/2024"]


def test_page_slice_by_value_keeps_date_order_on_ties() -> None:
    table = _table()

    rows = reports.page_slice(table, "temperature", False, 1, 3)

    assert list(rows["temperature"]) == [1.0, 5.0, 5.0]
    assert list(rows["date"]) == ["04/01/2024", "01/01/2024", "03/01/2024"]


def test_page_slice_clamps_page_number() -> None:
    table = _table()

    assert list(reports.page_slice(table, "date", False, 9, 2)["date"]) == ["05/01/2024"]
    assert list(reports.page_slice(table, "date", False, 0, 2)["date"]) == ["01/01/2024", "02/01/2024"]
