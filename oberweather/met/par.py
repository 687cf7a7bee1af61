import numpy as np

# Broadband shortwave -> photosynthetically active photon flux.

PAR_FRACTION = 0.45
# W/m2 of PAR-band radiation to umol/m2/s
PAR_UMOL_PER_JOULE = 4.57


def time_adjustment(hour=12):
    # Diurnal weight: 1.0 at solar noon, 0.4 at midnight
    return np.cos((hour - 12) * np.pi / 12) * 0.3 + 0.7


def estimate_par(solar_rad_wm2, hour=12):
    """Estimate PAR (umol m-2 s-1) from broadband solar radiation (W m-2).

    ``hour`` defaults to solar noon. Scalar input gives a float, arrays give an ndarray.
    """
    par = solar_rad_wm2 * PAR_FRACTION * time_adjustment(hour) * PAR_UMOL_PER_JOULE
    if np.ndim(par) == 0:
        return float(par)
    return par
