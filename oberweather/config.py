from dotenv import load_dotenv
from datetime import date
import logging
import os

load_dotenv()

LOGGER = logging.getLogger(__name__)

DEFAULT_SERIES_DAYS = 30
MAX_SERIES_DAYS = 366


def _series_days_from_env() -> int:
    raw = os.getenv("WEATHER_SERIES_DAYS", str(DEFAULT_SERIES_DAYS))
    try:
        days = int(raw)
        if 1 <= days <= MAX_SERIES_DAYS:
            return days
    except ValueError:
        pass
    LOGGER.warning(
        "WEATHER_SERIES_DAYS=%r outside 1..%d; using %d", raw, MAX_SERIES_DAYS, DEFAULT_SERIES_DAYS
    )
    return DEFAULT_SERIES_DAYS


WEATHER_START_DATE = date.fromisoformat(os.getenv("WEATHER_START_DATE", "2025-05-17"))
WEATHER_SERIES_DAYS = _series_days_from_env()
_seed = os.getenv("WEATHER_SEED", "").strip()
WEATHER_SEED = int(_seed) if _seed else None
WEATHER_DATE_FORMAT = os.getenv("WEATHER_DATE_FORMAT", "%d/%m/%Y")
WEATHER_EXPORT_FILENAME = os.getenv("WEATHER_EXPORT_FILENAME", "oberursel_weather_30days.csv")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOCATION_NAME = "Oberursel, Germany"
LOCATION_POSTAL_CODE = "61440"
LOCATION_SOURCE = "DWD Frankfurt Airport Station & Regional Models"
