"""
Photometric and Physical Constants

Band tables and constants used by the sky brightness and extinction model.
All per-band tuples are ordered U, B, V, R, I.
"""

from typing import Final


__all__ = [
    "AEROSOL_SCALE_HEIGHT_M",
    "ATMOSPHERE_SHELL_HEIGHT_KM",
    "BANDS",
    "BASE_SKY_BRIGHTNESS",
    "DAYLIGHT_SCATTER_OFFSET",
    "EARTH_RADIUS_KM",
    "FOURTH_POWER_TERMS",
    "HORIZON_AIR_MASS",
    "LUNAR_MAG",
    "MOON_MAG_CORRECTION",
    "NANOLAMBERT_SCALE",
    "ONE_POINT_THREE_POWER_TERMS",
    "OZONE_TERMS",
    "RAYLEIGH_SCALE_HEIGHT_M",
    "SATURATED_HUMIDITY_PARAM",
    "SCATTER_FLOOR",
    "SOLAR_CYCLE_EPOCH",
    "SOLAR_CYCLE_YEARS",
    "SOLAR_MAG",
    "TWILIGHT_OFFSET",
    "WATER_VAPOR_TERMS",
]


BANDS: Final[int] = 5
"""Number of photometric bands (U, B, V, R, I)."""

# Extinction scaling per band
FOURTH_POWER_TERMS: Final[tuple[float, ...]] = (5.155601, 2.441406, 1.0, 0.381117, 0.139470)
"""Rayleigh scattering scale, (550nm / lambda)^4."""

ONE_POINT_THREE_POWER_TERMS: Final[tuple[float, ...]] = (1.704083, 1.336543, 1.0, 0.730877, 0.527177)
"""Aerosol scattering scale, (550nm / lambda)^1.3."""

OZONE_TERMS: Final[tuple[float, ...]] = (0.0, 0.0, 0.031, 0.008, 0.0)
"""Ozone absorption per band."""

WATER_VAPOR_TERMS: Final[tuple[float, ...]] = (0.074, 0.045, 0.031, 0.020, 0.015)
"""Water vapor absorption per band."""

# Brightness terms per band
BASE_SKY_BRIGHTNESS: Final[tuple[float, ...]] = (8.0e-14, 7.0e-14, 1.0e-13, 1.0e-13, 3.0e-13)
"""Dark-sky (airglow) brightness at zenith."""

MOON_MAG_CORRECTION: Final[tuple[float, ...]] = (1.36, 0.91, 0.00, -0.76, -1.17)
"""Colour correction applied to the V-band lunar magnitude."""

SOLAR_MAG: Final[tuple[float, ...]] = (-25.96, -26.09, -26.74, -27.26, -27.55)
"""Apparent magnitude of the Sun."""

LUNAR_MAG: Final[tuple[float, ...]] = (-10.93, -10.45, -11.05, -11.90, -12.70)
"""Magnitude zero point for conversion to sky brightness units."""

# Model constants
HORIZON_AIR_MASS: Final[float] = 40.0
"""Air mass used when the object is at or below the horizon."""

RAYLEIGH_SCALE_HEIGHT_M: Final[float] = 8200.0
"""Scale height of the gas (Rayleigh and water vapor) column in meters."""

AEROSOL_SCALE_HEIGHT_M: Final[float] = 1500.0
"""Scale height of the aerosol column in meters."""

SATURATED_HUMIDITY_PARAM: Final[float] = 1.0e6
"""Humidity parameter pinned at 100% relative humidity."""

SOLAR_CYCLE_EPOCH: Final[int] = 1992
"""Reference year of the solar activity cycle."""

SOLAR_CYCLE_YEARS: Final[float] = 11.0
"""Length of the solar activity cycle in years."""

SCATTER_FLOOR: Final[float] = 440000.0
"""Scattering contribution of light already extinguished along the path."""

DAYLIGHT_SCATTER_OFFSET: Final[float] = 43.27
"""Magnitude offset of scattered Sun and Moon light."""

TWILIGHT_OFFSET: Final[float] = 32.5
"""Magnitude offset of the twilight term."""

EARTH_RADIUS_KM: Final[float] = 6378.0
"""Equatorial Earth radius in kilometers."""

ATMOSPHERE_SHELL_HEIGHT_KM: Final[float] = 20.0
"""Height of the ozone shell above the surface in kilometers."""

NANOLAMBERT_SCALE: Final[float] = 1.11e-15
"""Raw brightness corresponding to one nanolambert."""
