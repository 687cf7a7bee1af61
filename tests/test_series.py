from datetime import date

import pytest
from pydantic import ValidationError

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from oberweather.data.records import WeatherRecord
from oberweather.data.synthetic import default_rng, generate_series
from oberweather.met.series import (
    EmptySeriesError,
    period_label,
    recompute_vpd,
    series_frame,
    summarize,
)
from oberweather.met.vpd import vpd_kpa
from oberweather.utils.rounding import round_half_up


def _record(day=17, temp_avg=20.0, humidity=60.0, vpd=0.935, par=1500):
    return WeatherRecord(
        date=date(2025, 5, day),
        temp_min=temp_avg - 5,
        temp_max=temp_avg + 5,
        temp_avg=temp_avg,
        humidity=humidity,
        vpd=vpd,
        par=par,
        solar_rad=700,
        pressure=1012.4,
        wind=9.8,
    )


def test_summary_of_single_record_is_the_record():
    rec = _record()
    stats = summarize((rec,))
    assert stats.avg_temp == rec.temp_avg
    assert stats.avg_humidity == rec.humidity
    assert stats.avg_vpd == rec.vpd
    assert stats.avg_par == rec.par


def test_summary_means_round_ties_up():
    series = (
        _record(17, temp_avg=20.0, humidity=60.0, vpd=0.9, par=1000),
        _record(18, temp_avg=20.5, humidity=61.1, vpd=1.0, par=1001),
    )
    stats = summarize(series)
    # 20.25 is an exact tie; (60.0 + 61.1) / 2 is 60.5499... in binary
    assert stats.avg_temp == 20.3
    assert stats.avg_humidity == 60.5
    assert stats.avg_vpd == 0.95
    assert stats.avg_par == 1001
    assert isinstance(stats.avg_par, int)


def test_summarize_empty_series_raises():
    with pytest.raises(EmptySeriesError):
        summarize(())
    with pytest.raises(ValueError):
        summarize(())


def test_recompute_vpd_is_idempotent():
    series = generate_series(date(2025, 5, 17), 30, default_rng(3))
    once = recompute_vpd(series)
    twice = recompute_vpd(once)
    assert once == twice


def test_recompute_vpd_only_touches_vpd():
    series = (_record(vpd=9.999),)
    out = recompute_vpd(series)
    assert out[0].vpd == round_half_up(vpd_kpa(20.0, 60.0), 3)
    assert out[0].model_dump(exclude={"vpd"}) == series[0].model_dump(exclude={"vpd"})
    assert series[0].vpd == 9.999


def test_recompute_after_external_change():
    changed = _record().model_copy(update={"temp_avg": 30.0, "humidity": 45.0})
    out = recompute_vpd((changed,))
    assert out[0].vpd == round_half_up(vpd_kpa(30.0, 45.0), 3)


def test_records_are_frozen():
    rec = _record()
    with pytest.raises(ValidationError):
        rec.vpd = 1.0


def test_series_frame_columns():
    df = series_frame((_record(17, vpd=0.3), _record(18, vpd=1.0)))
    assert list(df.columns)[:3] == ["date", "temp_min", "temp_max"]
    assert list(df["vpd_band"]) == ["very-humid", "optimal"]
    assert len(series_frame(())) == 0


def test_period_label():
    series = generate_series(date(2025, 5, 17), 30, default_rng(0))
    assert period_label(series) == "17 May - 15 Jun 2025"
    assert period_label(()) == ""
