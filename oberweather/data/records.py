import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field


class WeatherRecord(BaseModel):
    """One synthesized day. Values are stored already rounded to their display precision."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    temp_min: float = Field(..., description="degC, 1 dp")
    temp_max: float = Field(..., description="degC, 1 dp")
    temp_avg: float = Field(..., description="degC, 1 dp")
    humidity: float = Field(..., description="%, 1 dp, within [40, 95] when generated")
    vpd: float = Field(..., description="kPa, 3 dp")
    par: int = Field(..., description="umol/m2/s")
    solar_rad: int = Field(..., description="W/m2")
    pressure: float = Field(..., description="hPa, 1 dp")
    wind: float = Field(..., description="km/h, 1 dp")


class SummaryStatistics(BaseModel):
    model_config = ConfigDict(frozen=True)

    avg_temp: float
    avg_humidity: float
    avg_vpd: float
    avg_par: int


# Chronological; index i is start date + i days.
WeatherSeries = Tuple[WeatherRecord, ...]

UNITS = {
    "temp_min": "°C",
    "temp_max": "°C",
    "temp_avg": "°C",
    "humidity": "%",
    "vpd": "kPa",
    "par": "µmol/m²/s",
    "solar_rad": "W/m²",
    "pressure": "hPa",
    "wind": "km/h",
}
