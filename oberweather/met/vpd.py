import numpy as np
import pandas as pd
import os

# Vapor pressure deficit from air temperature and relative humidity.
# Works on scalars and numpy arrays alike.

VPD_BAND_LABELS = ["very-humid", "moderate", "optimal", "high-stress", "drought-stress"]


def saturation_vapor_pressure_kpa(temp_c):
    # Magnus-Tetens approximation
    a, b = 17.67, 243.5
    return 0.6112 * np.exp((a * temp_c) / (temp_c + b))


def vpd_kpa(temp_c, rh_pct):
    """
    Vapor pressure deficit (kPa) for air at ``temp_c`` (degC) and ``rh_pct`` (0-100).

    No clamping: callers supply physically plausible inputs. Returns a plain
    float for scalar input and an ndarray otherwise.
    """
    es = saturation_vapor_pressure_kpa(temp_c)
    vpd = es * (1 - rh_pct / 100)
    if np.ndim(vpd) == 0:
        return float(vpd)
    return vpd


def _vpd_thresholds_from_env() -> tuple[float, float, float, float]:
    raw = os.getenv("VPD_THRESH", "0.4,0.8,1.2,2.0")
    try:
        parts = [float(x.strip()) for x in raw.split(",") if x.strip()]
        if len(parts) >= 4 and parts[:4] == sorted(parts[:4]):
            return parts[0], parts[1], parts[2], parts[3]
    except ValueError:
        pass
    return 0.4, 0.8, 1.2, 2.0


def vpd_bands(vpd_values) -> pd.Series:
    # Plant-stress guide (kPa):
    # <0.4 very humid, 0.4-0.8 moderate, 0.8-1.2 optimal, 1.2-2.0 high stress, >=2.0 drought
    t1, t2, t3, t4 = _vpd_thresholds_from_env()
    bands = pd.cut(
        np.atleast_1d(np.asarray(vpd_values, dtype=float)),
        bins=[-np.inf, t1, t2, t3, t4, np.inf],
        labels=VPD_BAND_LABELS,
        right=False,
    )
    return pd.Series(bands).astype(str)
