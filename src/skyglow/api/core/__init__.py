"""Core subpackage for shared constants, enums, utilities, and exceptions."""

from skyglow.api.core.enums import ALL_BANDS_MASK, Band, MotherBody
from skyglow.api.core.utils import (
    angular_distance,
    approximate_angular_distance,
    elevation_to_zenith_angle,
)


__all__ = [
    "ALL_BANDS_MASK",
    "Band",
    "MotherBody",
    "angular_distance",
    "approximate_angular_distance",
    "elevation_to_zenith_angle",
]
