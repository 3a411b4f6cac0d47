"""Plotly charts for the dashboard."""
import plotly.express as px
import plotly.graph_objects as go
from plotly.subplots import make_subplots
from statsmodels.nonparametric.smoothers_lowess import lowess

from meteo.constants import FEATURE_LABELS, SEASON_COLORS, SEASON_ORDER, SERIES_COLORS

# Same span as loess' default
LOWESS_FRAC = 0.75
MIN_TREND_POINTS = 3


def apply_common_layout(fig, title=None, height=400):
    """Apply common layout settings to a Plotly figure."""
    fig.update_layout(
        template="plotly_white",
        height=height,
        title=title,
        title_x=0.5,
        margin=dict(t=60, b=40, l=60, r=40),
    )
    return fig


def _plot_frame(series):
    df = series.to_frame()
    df["season"] = df["season"].astype(str)
    return df


def temperature_trend(df, frac=LOWESS_FRAC):
    """LOWESS-smoothed temperature aligned with ``df`` rows; None if too short."""
    clean = df.dropna(subset=["temperature"])
    if len(clean) < MIN_TREND_POINTS:
        return None
    x = clean["date"].map(lambda d: d.toordinal()).to_numpy(dtype=float)
    return clean["date"], lowess(clean["temperature"].to_numpy(), x, frac=frac, return_sorted=False)


def temperature_chart(series, height=400):
    """Daily temperature with a smoothed trend line."""
    df = _plot_frame(series)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["temperature"], mode="lines", name="Temperature",
        line=dict(color=SERIES_COLORS["temperature"], width=1.5),
    ))
    trend = temperature_trend(df)
    if trend is not None:
        dates, smoothed = trend
        fig.add_trace(go.Scatter(
            x=dates, y=smoothed, mode="lines", name="Trend",
            line=dict(color=SERIES_COLORS["trend"], width=2),
        ))
    fig.update_layout(xaxis_title="Date", yaxis_title=FEATURE_LABELS["temperature"])
    return apply_common_layout(fig, f"Temperature in {series.city}", height)


def precipitation_humidity_chart(series, height=350):
    """Precipitation bars with humidity on a secondary axis."""
    df = _plot_frame(series)
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Bar(
        x=df["date"], y=df["precipitation"], name="Precipitation",
        marker_color=SERIES_COLORS["precipitation"], opacity=0.7,
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["humidity"], mode="lines", name="Humidity",
        line=dict(color=SERIES_COLORS["humidity"], width=2),
    ), secondary_y=True)
    fig.update_xaxes(title_text="Date")
    fig.update_yaxes(title_text=FEATURE_LABELS["precipitation"], secondary_y=False)
    fig.update_yaxes(title_text=FEATURE_LABELS["humidity"], secondary_y=True)
    return apply_common_layout(fig, "Precipitation and Humidity", height)


def wind_pressure_chart(series, height=350):
    """Wind speed and pressure as two lines on separate axes."""
    df = _plot_frame(series)
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["wind_speed"], mode="lines", name="Wind Speed",
        line=dict(color=SERIES_COLORS["wind_speed"], width=2),
    ), secondary_y=False)
    fig.add_trace(go.Scatter(
        x=df["date"], y=df["pressure"], mode="lines", name="Pressure",
        line=dict(color=SERIES_COLORS["pressure"], width=2),
    ), secondary_y=True)
    fig.update_xaxes(title_text="Date")
    fig.update_yaxes(title_text=FEATURE_LABELS["wind_speed"], secondary_y=False)
    fig.update_yaxes(title_text=FEATURE_LABELS["pressure"], secondary_y=True)
    return apply_common_layout(fig, "Wind and Atmospheric Pressure", height)


def season_distribution_chart(series, height=400):
    """Per-season temperature box plot with every day shown as a jittered point."""
    df = _plot_frame(series)
    present = [s for s in SEASON_ORDER if s in set(df["season"])]
    fig = px.box(
        df, x="season", y="temperature", color="season", points="all",
        category_orders={"season": present},
        color_discrete_map=SEASON_COLORS,
        labels={"season": "Season", **FEATURE_LABELS},
    )
    fig.update_traces(jitter=0.4, pointpos=0, marker=dict(opacity=0.5))
    fig.update_layout(showlegend=False)
    return apply_common_layout(fig, "Temperature Distribution by Season", height)
