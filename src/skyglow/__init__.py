"""
skyglow - Sky Brightness and Visual Limit Library

Computes atmospheric extinction, sky brightness in the U, B, V, R and I bands
and the naked-eye limiting magnitude for an observer on Earth, following
Schaefer's photometric model of the night, twilight and daylight sky.

Example:
    >>> import math
    >>> from skyglow import AngularBrightnessData, FixedBrightnessData, VisualLimit
    >>> fixed = FixedBrightnessData(
    ...     moon_zenith_angle=math.pi,
    ...     sun_zenith_angle=math.pi,
    ...     moon_elongation=0.0,
    ...     height_above_sea_level=1000,
    ...     latitude=math.radians(30),
    ...     temperature=15,
    ...     relative_humidity=40,
    ...     year=1998,
    ...     month=2,
    ... )
    >>> angular = AngularBrightnessData(math.radians(45), math.pi, math.pi)
    >>> VisualLimit(fixed, angular).limiting_magnitude()
"""

# Model
from skyglow.api.brightness import (
    AngularBrightnessData,
    FixedBrightnessData,
    LuminaryPosition,
    VisualLimit,
    brightness_to_mag,
    compute_air_mass,
    get_extinction_coefficients,
    get_limiting_magnitude,
    get_sky_brightness,
    is_visible_to_naked_eye,
    mag_to_brightness,
)

# Enums
from skyglow.api.core.enums import ALL_BANDS_MASK, Band, MotherBody

# Exceptions
from skyglow.api.core.exceptions import (
    BandNotComputedError,
    InvalidBandError,
    InvalidBrightnessDataError,
    ObserverNotOnEarthError,
    SingularGeometryError,
    SkyglowError,
)

# Observer
from skyglow.api.location.observer import ObserverSite


__version__ = "0.1.0"

__all__ = [
    "ALL_BANDS_MASK",
    "AngularBrightnessData",
    "Band",
    "BandNotComputedError",
    "FixedBrightnessData",
    "InvalidBandError",
    "InvalidBrightnessDataError",
    "LuminaryPosition",
    "MotherBody",
    "ObserverNotOnEarthError",
    "ObserverSite",
    "SingularGeometryError",
    "SkyglowError",
    "VisualLimit",
    "brightness_to_mag",
    "compute_air_mass",
    "get_extinction_coefficients",
    "get_limiting_magnitude",
    "get_sky_brightness",
    "is_visible_to_naked_eye",
    "mag_to_brightness",
]
