import logging
from typing import List

from ..config import WEATHER_DATE_FORMAT
from ..data.records import WeatherRecord, WeatherSeries

LOGGER = logging.getLogger(__name__)

HEADERS = [
    "Date",
    "Temp_Min_C",
    "Temp_Max_C",
    "Temp_Avg_C",
    "Humidity_%",
    "VPD_kPa",
    "PAR_umol_m2_s",
    "Solar_Rad_W_m2",
    "Pressure_hPa",
    "Wind_km_h",
]
DELIMITERS = (",", "\t")


def format_record(record: WeatherRecord, date_format: str = WEATHER_DATE_FORMAT) -> List[str]:
    # No field can contain "," or a tab, so nothing is quoted
    return [
        record.date.strftime(date_format),
        f"{record.temp_min:.1f}",
        f"{record.temp_max:.1f}",
        f"{record.temp_avg:.1f}",
        f"{record.humidity:.1f}",
        f"{record.vpd:.3f}",
        str(record.par),
        str(record.solar_rad),
        f"{record.pressure:.1f}",
        f"{record.wind:.1f}",
    ]


def serialize(series: WeatherSeries, delimiter: str = ",") -> str:
    """Header line plus one line per record, joined with single newlines (no trailing newline)."""
    if delimiter not in DELIMITERS:
        raise ValueError(f"unsupported delimiter {delimiter!r}; expected ',' or a tab")
    LOGGER.debug("Serializing %d records with delimiter %r", len(series), delimiter)
    lines = [delimiter.join(HEADERS)]
    lines += [delimiter.join(format_record(r)) for r in series]
    return "\n".join(lines)


def to_csv(series: WeatherSeries) -> str:
    return serialize(series, ",")


def to_tsv(series: WeatherSeries) -> str:
    return serialize(series, "\t")

