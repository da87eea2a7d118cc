"""
Extinction Coefficients

Derives the band-independent terms of the model and the per-band Rayleigh,
aerosol, ozone and water vapor extinction coefficients from the conditions
at the observing site.
"""

from __future__ import annotations

import logging
import math

from skyglow.api.brightness.models import BandCoefficients, FixedBrightnessData
from skyglow.api.brightness.photometry import compute_air_mass, mag_to_brightness
from skyglow.api.core.constants import (
    AEROSOL_SCALE_HEIGHT_M,
    BANDS,
    FOURTH_POWER_TERMS,
    ONE_POINT_THREE_POWER_TERMS,
    OZONE_TERMS,
    RAYLEIGH_SCALE_HEIGHT_M,
    SATURATED_HUMIDITY_PARAM,
    SOLAR_CYCLE_EPOCH,
    SOLAR_CYCLE_YEARS,
    WATER_VAPOR_TERMS,
)


logger = logging.getLogger(__name__)


__all__ = [
    "aerosol_coefficient",
    "compute_band_coefficients",
    "lunar_magnitude",
    "ozone_coefficient",
    "rayleigh_coefficient",
    "solar_cycle_term",
    "water_vapor_coefficient",
]


def rayleigh_coefficient(height_m: float) -> float:
    """V-band Rayleigh extinction at a given height above sea level."""
    return 0.1066 * math.exp(-height_m / RAYLEIGH_SCALE_HEIGHT_M)


def aerosol_coefficient(height_m: float, relative_humidity: float, latitude: float, month_angle: float) -> float:
    """
    V-band aerosol extinction.

    Haze grows with humidity and follows a seasonal cycle that is reversed
    between hemispheres.

    Args:
        height_m: Height above sea level in meters
        relative_humidity: Relative humidity in percent (0-100)
        latitude: Latitude in radians
        month_angle: (month - 3) * pi / 6

    Returns:
        Aerosol extinction in magnitudes per air mass
    """
    ka = 0.1 * math.exp(-height_m / AEROSOL_SCALE_HEIGHT_M)
    if relative_humidity > 0.0:
        # log(1) is zero at saturation, so 100% is pinned
        if relative_humidity >= 100.0:
            humidity_param = SATURATED_HUMIDITY_PARAM
        else:
            humidity_param = 1.0 - 0.32 / math.log(relative_humidity / 100.0)
        ka *= math.exp(1.33 * math.log(humidity_param))

    if latitude < 0.0:
        ka *= 1.0 - math.sin(month_angle)
    else:
        ka *= 1.0 + math.sin(month_angle)
    return ka


def ozone_coefficient(latitude: float, month_angle: float) -> float:
    """
    Ozone extinction scale.

    The latitude enters in radians, exactly as in the published program.
    """
    return (3.0 + 0.4 * (latitude * math.cos(month_angle) - math.cos(3.0 * latitude))) / 3.0


def water_vapor_coefficient(height_m: float, relative_humidity: float, temperature: float) -> float:
    """Water vapor extinction scale."""
    return (
        0.94
        * (relative_humidity / 100.0)
        * math.exp(temperature / 15.0)
        * math.exp(-height_m / RAYLEIGH_SCALE_HEIGHT_M)
    )


def solar_cycle_term(year: int) -> float:
    """Airglow modulation by the 11-year solar cycle (about +/-30%)."""
    return 1.0 + 0.3 * math.cos(2.0 * math.pi * (year - SOLAR_CYCLE_EPOCH) / SOLAR_CYCLE_YEARS)


def lunar_magnitude(moon_elongation: float) -> float:
    """Approximate V magnitude of the Moon as a function of its elongation in radians."""
    elong_deg = math.degrees(moon_elongation)
    return -12.73 + elong_deg * (0.026 + 4.0e-9 * (elong_deg * elong_deg * elong_deg))


def compute_band_coefficients(fixed: FixedBrightnessData) -> BandCoefficients:
    """
    Compute the brightness parameters for all five bands.

    Args:
        fixed: Site-wide observing conditions

    Returns:
        Extinction coefficients, path transmissions to the Moon and Sun,
        and the band-independent terms of the model
    """
    month_angle = (fixed.month - 3.0) * math.pi / 6.0

    kr_coeff = rayleigh_coefficient(fixed.height_above_sea_level)
    ka_coeff = aerosol_coefficient(
        fixed.height_above_sea_level, fixed.relative_humidity, fixed.latitude, month_angle
    )
    ko_coeff = ozone_coefficient(fixed.latitude, month_angle)
    kw_coeff = water_vapor_coefficient(fixed.height_above_sea_level, fixed.relative_humidity, fixed.temperature)

    air_mass_moon = compute_air_mass(fixed.moon_zenith_angle)
    air_mass_sun = compute_air_mass(fixed.sun_zenith_angle)

    kr = tuple(kr_coeff * FOURTH_POWER_TERMS[i] for i in range(BANDS))
    ka = tuple(ka_coeff * ONE_POINT_THREE_POWER_TERMS[i] for i in range(BANDS))
    ko = tuple(ko_coeff * OZONE_TERMS[i] for i in range(BANDS))
    kw = tuple(kw_coeff * WATER_VAPOR_TERMS[i] for i in range(BANDS))
    k = tuple(kr[i] + ka[i] + ko[i] + kw[i] for i in range(BANDS))

    coefficients = BandCoefficients(
        fixed=fixed,
        kr=kr,
        ka=ka,
        ko=ko,
        kw=kw,
        k=k,
        c3=tuple(mag_to_brightness(k[i] * air_mass_moon) for i in range(BANDS)),
        c4=tuple(mag_to_brightness(k[i] * air_mass_sun) for i in range(BANDS)),
        year_term=solar_cycle_term(fixed.year),
        air_mass_moon=air_mass_moon,
        air_mass_sun=air_mass_sun,
        lunar_mag=lunar_magnitude(fixed.moon_elongation),
    )
    logger.debug(
        f"Band coefficients: k={tuple(round(v, 4) for v in k)}, "
        f"X(moon)={air_mass_moon:.3f}, X(sun)={air_mass_sun:.3f}, lunar_mag={coefficients.lunar_mag:.2f}"
    )
    return coefficients
