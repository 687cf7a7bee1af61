import logging
from datetime import date, timedelta
from typing import Optional

import numpy as np

from ..config import WEATHER_SEED, WEATHER_SERIES_DAYS, WEATHER_START_DATE
from ..met.par import estimate_par
from ..met.vpd import vpd_kpa
from ..utils.rounding import round_half_up, round_int
from .records import WeatherRecord, WeatherSeries

LOGGER = logging.getLogger(__name__)

# Uniform draws per record, in order: temp noise, temp range, humidity noise,
# cloudiness, pressure, wind.
DRAWS_PER_DAY = 6


def default_rng(seed: Optional[int] = None) -> np.random.Generator:
    return np.random.default_rng(WEATHER_SEED if seed is None else seed)


def approx_day_of_year(day: date) -> int:
    # Coarse month*30 + day with a zero-based month; pins the seasonal phase
    return (day.month - 1) * 30 + day.day


def seasonal_phase(day_of_year: int) -> float:
    return np.sin((day_of_year - 80) * 2 * np.pi / 365)


def generate_day(
    day_index: int, start_date: date, rng: Optional[np.random.Generator] = None
) -> WeatherRecord:
    """Synthesize one plausible late-spring day near Frankfurt.

    Seasonal, daily and weekly sine terms plus uniform noise drive temperature;
    humidity falls with temperature and is clamped to [40, 95]; solar radiation
    follows the season and a random cloud cover. VPD and PAR are derived.

    Without ``rng`` a new generator is built from WEATHER_SEED, so with a seed set
    every standalone call repeats the same draws; pass one generator to advance.
    """
    if rng is None:
        rng = default_rng()
    u_temp, u_range, u_hum, cloudiness, u_press, u_wind = rng.random(DRAWS_PER_DAY)

    day = start_date + timedelta(days=day_index)
    season = seasonal_phase(approx_day_of_year(day))

    seasonal_temp = 15 + 8 * season
    daily_variation = np.sin(day_index * 0.3) * 3
    weekly_variation = np.sin(day_index * 0.1) * 2
    random_variation = (u_temp - 0.5) * 4
    temp_avg = seasonal_temp + daily_variation + weekly_variation + random_variation

    temp_range = 8 + u_range * 4
    temp_min = temp_avg - temp_range / 2
    temp_max = temp_avg + temp_range / 2

    # humidity drops as it warms
    base_humidity = 75 - (temp_avg - 15) * 1.5
    humidity = float(np.clip(base_humidity + (u_hum - 0.5) * 20, 40, 95))

    max_solar_rad = 800 + 200 * season
    solar_rad = max_solar_rad * (0.3 + 0.7 * (1 - cloudiness))

    pressure = 1013 + (u_press - 0.5) * 30
    wind = 5 + u_wind * 15

    return WeatherRecord(
        date=day,
        temp_min=round_half_up(float(temp_min), 1),
        temp_max=round_half_up(float(temp_max), 1),
        temp_avg=round_half_up(float(temp_avg), 1),
        humidity=round_half_up(humidity, 1),
        vpd=round_half_up(vpd_kpa(float(temp_avg), humidity), 3),
        par=round_int(estimate_par(float(solar_rad))),
        solar_rad=round_int(solar_rad),
        pressure=round_half_up(float(pressure), 1),
        wind=round_half_up(float(wind), 1),
    )


def generate_series(
    start_date: date = WEATHER_START_DATE,
    length: int = WEATHER_SERIES_DAYS,
    rng: Optional[np.random.Generator] = None,
) -> WeatherSeries:
    if length < 0:
        raise ValueError(f"series length must be >= 0, got {length}")
    if rng is None:
        rng = default_rng()
    LOGGER.info("Generating %d synthetic days from %s", length, start_date.isoformat())
    return tuple(generate_day(i, start_date, rng) for i in range(length))
