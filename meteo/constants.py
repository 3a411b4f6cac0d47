"""Shared constants: seasons, feature labels, colors, rain thresholds."""

DEFAULT_CITIES = ["Paris", "Lyon", "Marseille", "Toulouse", "Nice", "Bordeaux"]

FEATURE_COLS = ["temperature", "humidity", "precipitation", "wind_speed", "pressure"]

FEATURE_LABELS = {
    "temperature": "Temperature (°C)",
    "humidity": "Humidity (%)",
    "precipitation": "Precipitation (mm)",
    "wind_speed": "Wind Speed (km/h)",
    "pressure": "Pressure (hPa)",
}

SEASONS = {
    12: "Winter", 1: "Winter", 2: "Winter",
    3: "Spring", 4: "Spring", 5: "Spring",
    6: "Summer", 7: "Summer", 8: "Summer",
    9: "Autumn", 10: "Autumn", 11: "Autumn",
}

SEASON_ORDER = ["Winter", "Spring", "Summer", "Autumn"]

# ColorBrewer Set2
SEASON_COLORS = {
    "Winter": "#66C2A5",
    "Spring": "#FC8D62",
    "Summer": "#8DA0CB",
    "Autumn": "#E78AC3",
}

SERIES_COLORS = {
    "temperature": "#3498db",
    "trend": "#e74c3c",
    "precipitation": "#3498db",
    "humidity": "#e74c3c",
    "wind_speed": "#2ecc71",
    "pressure": "#9b59b6",
}

# Two distinct rain-day definitions are reported side by side; they are not interchangeable.
RAINY_DAY_THRESHOLD = 0.1
SEASON_RAIN_DAY_THRESHOLD = 1.0

DATE_FORMAT = "%d/%m/%Y"
