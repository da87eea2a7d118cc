"""
Sky Brightness and Limiting Magnitude

Calculates sky brightness, extinction and the naked-eye limiting magnitude.
Based on C code by Bill Gray (www.projectpluto.com), itself based on Brad
Schaefer's article and code on pages 57-60 of the May 1998 Sky & Telescope,
"To the Visual Limits".

The computation is broken into pieces. Some terms depend only on things that
are constant for a given site and time (lunar and solar zenith distances,
air masses towards them, temperature, humidity and so forth); the rest
depends on the point of the sky being evaluated.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable
from datetime import UTC, datetime

import deal
from cachetools import LRUCache, cached

from skyglow.api.brightness.coefficients import compute_band_coefficients
from skyglow.api.brightness.extinction import compute_extinction
from skyglow.api.brightness.models import (
    AngularBrightnessData,
    BandCoefficients,
    ExtinctionResult,
    FixedBrightnessData,
    LuminaryPosition,
    SkyBrightnessResult,
    resolve_band,
)
from skyglow.api.brightness.photometry import brightness_to_mag
from skyglow.api.brightness.sky_brightness import compute_sky_brightness
from skyglow.api.core.constants import BANDS, NANOLAMBERT_SCALE
from skyglow.api.core.enums import ALL_BANDS_MASK, Band
from skyglow.api.core.exceptions import BandNotComputedError, InvalidBandError, ObserverNotOnEarthError
from skyglow.api.core.utils import angular_distance, approximate_angular_distance, elevation_to_zenith_angle
from skyglow.api.location.observer import ObserverSite


logger = logging.getLogger(__name__)


__all__ = [
    "VisualLimit",
    "build_brightness_data",
    "clear_model_cache",
    "evaluate",
    "get_extinction_coefficients",
    "get_limiting_magnitude",
    "get_limiting_magnitude_now",
    "get_sky_brightness",
    "is_visible_to_naked_eye",
    "is_visible_to_naked_eye_now",
    "limiting_magnitude_from_brightness",
    "normalize_mask",
]


def normalize_mask(mask: int | Iterable[Band]) -> int:
    """
    Turn a band selection into a bit mask.

    Args:
        mask: Bit mask (U=1, B=2, V=4, R=8, I=16) or an iterable of bands

    Returns:
        Bit mask between 0x01 and 0x1F

    Raises:
        InvalidBandError: If the selection is empty or names unknown bands
    """
    if isinstance(mask, bool):
        raise InvalidBandError(mask, f"invalid band mask {mask!r}")
    if isinstance(mask, int):
        value = mask
    else:
        value = Band.to_mask(resolve_band(band) for band in mask)
    if not 0 < value <= ALL_BANDS_MASK:
        raise InvalidBandError(value, f"invalid band mask 0x{value:02X}, expected 0x01-0x{ALL_BANDS_MASK:02X}")
    return value


def limiting_magnitude_from_brightness(v_brightness: float, v_extinction: float) -> float:
    """
    Naked-eye limiting magnitude for a V-band sky brightness.

    Uses a two-regime threshold model of the eye: cones above roughly 1500
    nanolamberts, rods below.

    Args:
        v_brightness: V-band sky brightness in raw model units
        v_extinction: V-band extinction towards the point in magnitudes

    Returns:
        Limiting magnitude
    """
    bl = v_brightness / NANOLAMBERT_SCALE
    if bl > 1500.0:
        c1 = 4.4668e-9
        c2 = 1.2589e-6
    else:
        c1 = 1.5849e-10
        c2 = 1.2589e-2
    tval = 1.0 + math.sqrt(c2 * bl)
    th = c1 * tval * tval  # threshold illuminance
    return -16.57 + brightness_to_mag(th) - v_extinction


class VisualLimit:
    """
    Sky brightness, extinction and limiting magnitude for one point of the sky.

    Everything is computed when the instance is created; the instance is
    read-only afterwards. Extinction coefficients are available for every
    band, while brightness and extinction towards the point only exist for
    the bands in the selection.

    Example:
        >>> model = VisualLimit(fixed, angular, mask=Band.V.mask)
        >>> model.limiting_magnitude()
    """

    __slots__ = ("_angular", "_brightness", "_coefficients", "_extinction", "_mask")

    def __init__(
        self,
        fixed: FixedBrightnessData,
        angular: AngularBrightnessData,
        mask: int | Iterable[Band] = ALL_BANDS_MASK,
    ) -> None:
        """
        Args:
            fixed: Site-wide observing conditions
            angular: Geometry of the evaluated point
            mask: Bands to compute, as a bit mask (U=1, B=2, V=4, R=8, I=16)
                  or an iterable of Band. Defaults to all five bands.

        Raises:
            InvalidBandError: If the band selection is invalid
            SingularGeometryError: If the point coincides with the Sun or Moon
        """
        self._mask = normalize_mask(mask)
        self._angular = angular
        self._coefficients = compute_band_coefficients(fixed)
        self._brightness = compute_sky_brightness(self._coefficients, angular, self._mask)
        self._extinction = compute_extinction(self._coefficients, angular, self._mask)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mask=0x{self._mask:02X}, fixed={self.fixed!r}, angular={self._angular!r})"

    @property
    def mask(self) -> int:
        """Band selection bit mask."""
        return self._mask

    @property
    def bands(self) -> tuple[Band, ...]:
        """Selected bands in index order."""
        return Band.from_mask(self._mask)

    @property
    def fixed(self) -> FixedBrightnessData:
        return self._coefficients.fixed

    @property
    def angular(self) -> AngularBrightnessData:
        return self._angular

    @property
    def coefficients(self) -> BandCoefficients:
        return self._coefficients

    @property
    def sky_brightness(self) -> SkyBrightnessResult:
        return self._brightness

    @property
    def extinction_result(self) -> ExtinctionResult:
        return self._extinction

    def with_mask(self, mask: int | Iterable[Band]) -> VisualLimit:
        """Return a new model for the same conditions and another band selection."""
        return type(self)(self.fixed, self._angular, mask)

    def k(self, band: Band | int) -> float:
        """Total extinction coefficient (mag/airmass) of a band."""
        return self._coefficients.k[resolve_band(band)]

    def kr(self, band: Band | int) -> float:
        """Rayleigh extinction coefficient of a band."""
        return self._coefficients.kr[resolve_band(band)]

    def ka(self, band: Band | int) -> float:
        """Aerosol extinction coefficient of a band."""
        return self._coefficients.ka[resolve_band(band)]

    def ko(self, band: Band | int) -> float:
        """Ozone extinction coefficient of a band."""
        return self._coefficients.ko[resolve_band(band)]

    def kw(self, band: Band | int) -> float:
        """Water vapor extinction coefficient of a band."""
        return self._coefficients.kw[resolve_band(band)]

    @deal.raises(InvalidBandError, BandNotComputedError)
    def brightness(self, band: Band | int) -> float:
        """Sky brightness of a selected band in raw model units."""
        return self._brightness.get(band)

    @deal.raises(InvalidBandError, BandNotComputedError)
    def brightness_nanolamberts(self, band: Band | int) -> float:
        """Sky brightness of a selected band in nanolamberts."""
        return self._brightness.get(band) / NANOLAMBERT_SCALE

    @deal.raises(InvalidBandError, BandNotComputedError)
    def extinction(self, band: Band | int) -> float:
        """Extinction towards the point for a selected band, in magnitudes."""
        return self._extinction.get(band)

    def limiting_magnitude(self) -> float:
        """
        Naked-eye limiting magnitude.

        Raises:
            BandNotComputedError: If the V band is not in the selection
        """
        return limiting_magnitude_from_brightness(self.brightness(Band.V), self.extinction(Band.V))


_model_cache: LRUCache[tuple[object, ...], VisualLimit] = LRUCache(maxsize=1024)


@cached(_model_cache)
def evaluate(mask: int, fixed: FixedBrightnessData, angular: AngularBrightnessData) -> VisualLimit:
    """
    Memoized VisualLimit construction.

    The model is deterministic in its inputs, so repeated evaluations of the
    same point (for instance while redrawing a chart) reuse the result.
    """
    return VisualLimit(fixed, angular, mask)


def clear_model_cache() -> None:
    """Drop all memoized models."""
    _model_cache.clear()


def build_brightness_data(
    site: ObserverSite,
    when: datetime,
    sun: LuminaryPosition,
    moon: LuminaryPosition,
    azimuth: float,
    elevation: float,
    *,
    exact_distances: bool = True,
) -> tuple[FixedBrightnessData, AngularBrightnessData]:
    """
    Build the model inputs from an observer, a date and Sun/Moon positions.

    Args:
        site: Observer site (must be on Earth)
        when: Date of the observation (year and month are used)
        sun: Apparent position of the Sun
        moon: Apparent position and elongation of the Moon
        azimuth: Azimuth of the evaluated point in radians
        elevation: Elevation of the evaluated point in radians
        exact_distances: Use exact angular distances; the approximate formula
                         is faster and good to about 0.2 degrees

    Returns:
        Tuple of (fixed, angular) brightness data

    Raises:
        ObserverNotOnEarthError: If the observer is not on Earth
    """
    if not site.is_on_earth:
        raise ObserverNotOnEarthError()

    fixed = FixedBrightnessData(
        moon_zenith_angle=moon.zenith_angle,
        sun_zenith_angle=sun.zenith_angle,
        moon_elongation=moon.elongation,
        height_above_sea_level=site.elevation,
        latitude=site.latitude_rad,
        temperature=site.temperature,
        relative_humidity=site.relative_humidity,
        year=when.year,
        month=when.month,
    )

    distance = angular_distance if exact_distances else approximate_angular_distance
    angular = AngularBrightnessData(
        zenith_angle=elevation_to_zenith_angle(elevation),
        moon_angular_distance=distance(azimuth, elevation, moon.azimuth, moon.elevation),
        sun_angular_distance=distance(azimuth, elevation, sun.azimuth, sun.elevation),
    )
    return fixed, angular


def get_limiting_magnitude(
    site: ObserverSite,
    when: datetime,
    sun: LuminaryPosition,
    moon: LuminaryPosition,
    azimuth: float,
    elevation: float,
) -> float:
    """
    Naked-eye limiting magnitude towards a point of the sky.

    Args:
        site: Observer site (must be on Earth)
        when: Date of the observation
        sun: Apparent position of the Sun
        moon: Apparent position and elongation of the Moon
        azimuth: Azimuth of the point in radians
        elevation: Elevation of the point in radians

    Returns:
        Limiting V magnitude
    """
    fixed, angular = build_brightness_data(site, when, sun, moon, azimuth, elevation, exact_distances=False)
    limit = evaluate(ALL_BANDS_MASK, fixed, angular).limiting_magnitude()
    logger.debug(f"Limiting magnitude at az={math.degrees(azimuth):.1f}°, el={math.degrees(elevation):.1f}°: {limit:.2f}")
    return limit


def get_sky_brightness(
    site: ObserverSite,
    when: datetime,
    sun: LuminaryPosition,
    moon: LuminaryPosition,
    azimuth: float,
    elevation: float,
) -> tuple[float, ...]:
    """
    Sky brightness towards a point of the sky for the U, B, V, R and I bands.

    Returns:
        Brightness per band in nanolamberts
    """
    fixed, angular = build_brightness_data(site, when, sun, moon, azimuth, elevation)
    model = evaluate(ALL_BANDS_MASK, fixed, angular)
    return tuple(model.brightness_nanolamberts(i) for i in range(BANDS))


def get_extinction_coefficients(
    site: ObserverSite,
    when: datetime,
    sun: LuminaryPosition,
    moon: LuminaryPosition,
    azimuth: float,
    elevation: float,
) -> tuple[float, ...]:
    """
    Extinction towards a point of the sky for the U, B, V, R and I bands.

    Returns:
        Extinction per band in magnitudes
    """
    fixed, angular = build_brightness_data(site, when, sun, moon, azimuth, elevation)
    model = evaluate(ALL_BANDS_MASK, fixed, angular)
    return tuple(model.extinction(i) for i in range(BANDS))


def is_visible_to_naked_eye(
    apparent_magnitude: float,
    site: ObserverSite,
    when: datetime,
    sun: LuminaryPosition,
    moon: LuminaryPosition,
    azimuth: float,
    elevation: float,
) -> bool:
    """
    Whether an object is bright enough to be seen without optical aid.

    Args:
        apparent_magnitude: Apparent magnitude of the object
        azimuth: Azimuth of the object in radians
        elevation: Elevation of the object in radians

    Returns:
        True if the magnitude does not exceed the limiting magnitude
    """
    return apparent_magnitude <= get_limiting_magnitude(site, when, sun, moon, azimuth, elevation)


def get_limiting_magnitude_now(
    site: ObserverSite,
    azimuth: float,
    elevation: float,
    dt: datetime | None = None,
) -> float:
    """
    Limiting magnitude with Sun and Moon positions computed by Skyfield.

    Args:
        site: Observer site
        azimuth: Azimuth of the point in radians
        elevation: Elevation of the point in radians
        dt: Datetime to calculate for (default: now)

    Returns:
        Limiting V magnitude
    """
    from skyglow.api.ephemeris.sun_moon import get_sun_moon_positions

    when = dt if dt is not None else datetime.now(UTC)
    sun, moon = get_sun_moon_positions(site, when)
    return get_limiting_magnitude(site, when, sun, moon, azimuth, elevation)


def is_visible_to_naked_eye_now(
    apparent_magnitude: float,
    site: ObserverSite,
    azimuth: float,
    elevation: float,
    dt: datetime | None = None,
) -> bool:
    """
    Naked-eye visibility with Sun and Moon positions computed by Skyfield.

    Args:
        apparent_magnitude: Apparent magnitude of the object
        site: Observer site
        azimuth: Azimuth of the object in radians
        elevation: Elevation of the object in radians
        dt: Datetime to calculate for (default: now)

    Returns:
        True if the magnitude does not exceed the limiting magnitude
    """
    return apparent_magnitude <= get_limiting_magnitude_now(site, azimuth, elevation, dt)
