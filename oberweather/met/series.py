import logging

import pandas as pd

from ..data.records import SummaryStatistics, WeatherSeries
from ..utils.rounding import round_half_up, round_int
from .vpd import vpd_bands, vpd_kpa

LOGGER = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "date",
    "temp_min",
    "temp_max",
    "temp_avg",
    "humidity",
    "vpd",
    "par",
    "solar_rad",
    "pressure",
    "wind",
]


class EmptySeriesError(ValueError):
    """Raised when statistics are requested for a series with no records."""


def series_frame(series: WeatherSeries) -> pd.DataFrame:
    df = pd.DataFrame([r.model_dump() for r in series], columns=FRAME_COLUMNS)
    df["vpd_band"] = vpd_bands(df["vpd"].values) if len(df) else pd.Series(dtype=str)
    return df


def summarize(series: WeatherSeries) -> SummaryStatistics:
    if not series:
        raise EmptySeriesError("cannot summarize an empty weather series")
    df = series_frame(series)
    return SummaryStatistics(
        avg_temp=round_half_up(df["temp_avg"].mean(), 1),
        avg_humidity=round_half_up(df["humidity"].mean(), 1),
        avg_vpd=round_half_up(df["vpd"].mean(), 3),
        avg_par=round_int(df["par"].mean()),
    )


def recompute_vpd(series: WeatherSeries) -> WeatherSeries:
    """Re-derive every record's VPD from its stored temp_avg and humidity.

    All other fields are carried over untouched; re-run ``summarize`` afterwards.
    """
    LOGGER.debug("Recomputing VPD for %d records", len(series))
    return tuple(
        r.model_copy(update={"vpd": round_half_up(vpd_kpa(r.temp_avg, r.humidity), 3)})
        for r in series
    )


def period_label(series: WeatherSeries) -> str:
    if not series:
        return ""
    first, last = series[0].date, series[-1].date
    if first.year == last.year:
        return f"{first:%d %b} - {last:%d %b %Y}"
    return f"{first:%d %b %Y} - {last:%d %b %Y}"
