"""
Photometric Helpers

Magnitude/brightness conversions, air mass and the scattering falloff
function shared by every phase of the sky brightness model.
"""

from __future__ import annotations

import math

import deal

from skyglow.api.core.constants import HORIZON_AIR_MASS
from skyglow.api.core.exceptions import PhotometryDomainError, SingularGeometryError


__all__ = [
    "brightness_to_mag",
    "compute_air_mass",
    "compute_f_factor",
    "mag_to_brightness",
]

_LN10 = math.log(10.0)


@deal.post(lambda result: result >= 0.0, message="Brightness must not be negative")
def mag_to_brightness(m: float) -> float:
    """Convert a magnitude to a linear brightness, 10^(-0.4 m)."""
    return math.exp(-0.4 * m * _LN10)


@deal.raises(PhotometryDomainError)
def brightness_to_mag(b: float) -> float:
    """
    Convert a linear brightness to a magnitude, -2.5 log10(b).

    Raises:
        PhotometryDomainError: If the brightness is not positive
    """
    if not b > 0.0:
        raise PhotometryDomainError(f"brightness must be positive to convert to magnitude, got {b!r}")
    return -2.5 * math.log(b) / _LN10


@deal.post(lambda result: 0.0 < result <= HORIZON_AIR_MASS, message="Air mass must be in (0, 40]")
def compute_air_mass(zenith_angle: float) -> float:
    """
    Air mass towards a given zenith angle.

    Objects at or below the horizon get the saturating value of 40 instead
    of a negative or infinite air mass.

    Args:
        zenith_angle: Zenith angle in radians

    Returns:
        Relative air mass
    """
    cos_ang = math.cos(zenith_angle)
    if cos_ang > 0.0:
        return 1.0 / (cos_ang + 0.025 * math.exp(-11.0 * cos_ang))
    return HORIZON_AIR_MASS


@deal.raises(SingularGeometryError)
def compute_f_factor(obj_dist: float) -> float:
    """
    Falloff of light scattered from a bright source.

    Sum of an inverse-square term, an exponential aureole term and a
    polarization term, as a function of distance from the source.

    Args:
        obj_dist: Angular distance from the Sun or Moon in radians

    Returns:
        Scattering factor

    Raises:
        SingularGeometryError: If the distance is zero or negative
    """
    if not obj_dist > 0.0:
        raise SingularGeometryError(
            f"angular distance to the light source must be positive, got {obj_dist!r}"
        )
    obj_dist_deg = math.degrees(obj_dist)
    cos_dist = math.cos(obj_dist)
    rval = 6.2e7 / (obj_dist_deg * obj_dist_deg) + math.exp(_LN10 * (6.15 - obj_dist_deg / 40.0))
    # polarization term
    rval += 229086.0 * (1.06 + cos_dist * cos_dist)
    return rval
