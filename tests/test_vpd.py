import numpy as np
import pytest

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parents[1]))

from oberweather.met.vpd import saturation_vapor_pressure_kpa, vpd_bands, vpd_kpa


def test_saturated_air_has_zero_deficit():
    for t in (-5.0, 0.0, 12.5, 25.0, 40.0):
        assert vpd_kpa(t, 100.0) == pytest.approx(0.0, abs=1e-12)


def test_known_value_at_25c():
    es = 0.6112 * np.exp(17.67 * 25 / (25 + 243.5))
    assert saturation_vapor_pressure_kpa(25.0) == pytest.approx(3.1674, abs=1e-3)
    assert vpd_kpa(25.0, 60.0) == pytest.approx(es * 0.4)


def test_vpd_decreasing_in_humidity():
    rh = np.linspace(0, 100, 101)
    for t in (0.0, 15.0, 30.0, 40.0):
        vals = vpd_kpa(np.full_like(rh, t), rh)
        assert float(np.diff(vals).max()) < 0.0


def test_vpd_increasing_in_temperature():
    t = np.linspace(0, 40, 81)
    for rh in (20.0, 50.0, 90.0):
        vals = vpd_kpa(t, np.full_like(t, rh))
        assert float(np.diff(vals).min()) > 0.0


def test_scalar_input_returns_float():
    assert isinstance(vpd_kpa(20.0, 50.0), float)


def test_vpd_band_edges_default_thresholds(monkeypatch):
    monkeypatch.delenv("VPD_THRESH", raising=False)
    vals = [0.0, 0.399, 0.4, 0.799, 0.8, 1.199, 1.2, 1.999, 2.0, 3.5]
    expected = [
        "very-humid",
        "very-humid",
        "moderate",
        "moderate",
        "optimal",
        "optimal",
        "high-stress",
        "high-stress",
        "drought-stress",
        "drought-stress",
    ]
    assert list(vpd_bands(vals)) == expected


def test_vpd_band_env_thresholds(monkeypatch):
    monkeypatch.setenv("VPD_THRESH", "0.5,1.0,1.5,2.5")
    assert list(vpd_bands([0.45, 0.5, 1.4, 2.4, 2.5])) == [
        "very-humid",
        "moderate",
        "optimal",
        "high-stress",
        "drought-stress",
    ]


def test_vpd_band_bad_env_falls_back(monkeypatch):
    monkeypatch.setenv("VPD_THRESH", "not,numbers")
    assert list(vpd_bands([0.9])) == ["optimal"]
