"""
Sky Brightness

Brightness of one point of the sky: airglow of the dark sky, moonlight
scattered by the atmosphere, and scattered sunlight (daylight or twilight).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from skyglow.api.brightness.models import AngularBrightnessData, BandCoefficients, SkyBrightnessResult
from skyglow.api.brightness.photometry import compute_air_mass, compute_f_factor, mag_to_brightness
from skyglow.api.core.constants import (
    BANDS,
    BASE_SKY_BRIGHTNESS,
    DAYLIGHT_SCATTER_OFFSET,
    LUNAR_MAG,
    MOON_MAG_CORRECTION,
    SCATTER_FLOOR,
    SOLAR_MAG,
    TWILIGHT_OFFSET,
)


logger = logging.getLogger(__name__)


__all__ = [
    "BrightnessComponents",
    "compute_band_brightness",
    "compute_sky_brightness",
    "zenith_brightness_drop",
]


@dataclass(frozen=True, slots=True)
class BrightnessComponents:
    """Contributions to the sky brightness of one band."""

    night: float  # Airglow, attenuated by extinction
    moon: float  # Scattered moonlight
    twilight: float  # Twilight scattering
    daylight: float  # Daylight scattering

    @property
    def solar(self) -> float:
        """
        Scattered sunlight: the smaller of the daylight and twilight terms.

        Taking the smaller is intentional. With the Sun well below the horizon
        the daylight term is millions of times the airglow, so the larger of
        the two would light up a dark night sky.
        """
        return self.twilight if self.daylight > self.twilight else self.daylight

    @property
    def total(self) -> float:
        return self.night + self.solar + self.moon


def zenith_brightness_drop(zenith_angle: float) -> float:
    """Van Rhijn-type brightening of the airglow towards the horizon."""
    sin_zenith = math.sin(zenith_angle)
    return 0.4 + 0.6 / math.sqrt(1.0 - 0.96 * sin_zenith * sin_zenith)


def compute_band_brightness(
    coefficients: BandCoefficients,
    angular: AngularBrightnessData,
    band: int,
    *,
    air_mass: float | None = None,
    f_moon: float | None = None,
    f_sun: float | None = None,
) -> BrightnessComponents:
    """
    Compute the brightness contributions for a single band.

    The point-dependent factors can be passed in when evaluating several
    bands for the same point.

    Args:
        coefficients: Result of compute_band_coefficients
        angular: Geometry of the evaluated point
        band: Band index (0-4)

    Returns:
        Brightness contributions in raw model units
    """
    fixed = coefficients.fixed
    if air_mass is None:
        air_mass = compute_air_mass(angular.zenith_angle)
    if f_moon is None:
        f_moon = compute_f_factor(angular.moon_angular_distance)
    if f_sun is None:
        f_sun = compute_f_factor(angular.sun_angular_distance)

    k = coefficients.k[band]
    direct_loss = mag_to_brightness(k * air_mass)

    night = BASE_SKY_BRIGHTNESS[band] * coefficients.year_term
    night *= zenith_brightness_drop(angular.zenith_angle)
    night *= direct_loss

    if fixed.moon_zenith_angle < math.pi / 2.0:  # moon above horizon
        c3 = coefficients.c3[band]
        moon = mag_to_brightness(
            coefficients.lunar_mag + MOON_MAG_CORRECTION[band] - LUNAR_MAG[band] + DAYLIGHT_SCATTER_OFFSET
        )
        moon *= 1.0 - direct_loss
        moon *= f_moon * c3 + SCATTER_FLOOR * (1.0 - c3)
    else:
        moon = 0.0

    twilight_mag = (
        SOLAR_MAG[band]
        - LUNAR_MAG[band]
        + TWILIGHT_OFFSET
        - (90.0 - math.degrees(fixed.sun_zenith_angle))
        - angular.zenith_angle / (2.0 * math.pi * k)
    )
    twilight = mag_to_brightness(twilight_mag)
    twilight *= 100.0 / math.degrees(angular.sun_angular_distance)
    twilight *= 1.0 - mag_to_brightness(k)

    c4 = coefficients.c4[band]
    daylight = mag_to_brightness(SOLAR_MAG[band] - LUNAR_MAG[band] + DAYLIGHT_SCATTER_OFFSET)
    daylight *= 1.0 - direct_loss
    daylight *= f_sun * c4 + SCATTER_FLOOR * (1.0 - c4)

    return BrightnessComponents(night=night, moon=moon, twilight=twilight, daylight=daylight)


def compute_sky_brightness(
    coefficients: BandCoefficients,
    angular: AngularBrightnessData,
    mask: int,
) -> SkyBrightnessResult:
    """
    Compute the total sky brightness for the selected bands.

    Args:
        coefficients: Result of compute_band_coefficients
        angular: Geometry of the evaluated point
        mask: Band selection bit mask (U=1, B=2, V=4, R=8, I=16)

    Returns:
        Brightness per band; unselected bands are left empty

    Raises:
        SingularGeometryError: If the point coincides with the Sun or Moon
    """
    air_mass = compute_air_mass(angular.zenith_angle)
    f_moon = compute_f_factor(angular.moon_angular_distance)
    f_sun = compute_f_factor(angular.sun_angular_distance)

    values: list[float | None] = [None] * BANDS
    for i in range(BANDS):
        if (mask >> i) & 1:
            components = compute_band_brightness(
                coefficients, angular, i, air_mass=air_mass, f_moon=f_moon, f_sun=f_sun
            )
            values[i] = components.total

    logger.debug(f"Sky brightness (mask 0x{mask:02X}): {values}")
    return SkyBrightnessResult(mask=mask, values=tuple(values))
