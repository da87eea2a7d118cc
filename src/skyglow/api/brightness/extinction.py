"""
Line-of-Sight Extinction

Total extinction towards the evaluated point, using separate air masses for
the gas, aerosol and ozone layers. Points at or below the horizon take the
horizon air mass of each layer, so extinction stays finite and non-negative.
"""

from __future__ import annotations

import logging
import math

import deal

from skyglow.api.brightness.models import AngularBrightnessData, BandCoefficients, ExtinctionResult
from skyglow.api.core.constants import ATMOSPHERE_SHELL_HEIGHT_KM, BANDS, EARTH_RADIUS_KM


logger = logging.getLogger(__name__)


__all__ = [
    "aerosol_air_mass",
    "compute_extinction",
    "gas_air_mass",
    "ozone_air_mass",
]


def gas_air_mass(zenith_angle: float) -> float:
    """Air mass of the Rayleigh and water vapor column."""
    cos_z = max(0.0, math.cos(zenith_angle))
    return 1.0 / (cos_z + 0.0286 * math.exp(-10.5 * cos_z))


def aerosol_air_mass(zenith_angle: float) -> float:
    """Air mass of the aerosol column."""
    cos_z = max(0.0, math.cos(zenith_angle))
    return 1.0 / (cos_z + 0.0123 * math.exp(-24.5 * cos_z))


def ozone_air_mass(zenith_angle: float) -> float:
    """Air mass through the ozone shell, 20 km above a spherical Earth."""
    sin_z = 1.0 if math.cos(zenith_angle) <= 0.0 else math.sin(zenith_angle)
    tval = sin_z / (1.0 + ATMOSPHERE_SHELL_HEIGHT_KM / EARTH_RADIUS_KM)
    return 1.0 / math.sqrt(1.0 - tval * tval)


@deal.post(
    lambda result: all(v is None or 0.0 <= v < math.inf for v in result.values),
    message="Extinction must be finite and non-negative",
)
def compute_extinction(
    coefficients: BandCoefficients,
    angular: AngularBrightnessData,
    mask: int,
) -> ExtinctionResult:
    """
    Compute the extinction towards the evaluated point for the selected bands.

    Args:
        coefficients: Result of compute_band_coefficients
        angular: Geometry of the evaluated point
        mask: Band selection bit mask (U=1, B=2, V=4, R=8, I=16)

    Returns:
        Extinction in magnitudes per band; unselected bands are left empty
    """
    x_gas = gas_air_mass(angular.zenith_angle)
    x_aerosol = aerosol_air_mass(angular.zenith_angle)
    x_ozone = ozone_air_mass(angular.zenith_angle)

    values: list[float | None] = [None] * BANDS
    for i in range(BANDS):
        if (mask >> i) & 1:
            values[i] = (
                (coefficients.kr[i] + coefficients.kw[i]) * x_gas
                + coefficients.ka[i] * x_aerosol
                + coefficients.ko[i] * x_ozone
            )

    logger.debug(
        f"Extinction (mask 0x{mask:02X}): X(gas)={x_gas:.3f}, X(aerosol)={x_aerosol:.3f}, "
        f"X(ozone)={x_ozone:.3f}, values={values}"
    )
    return ExtinctionResult(
        mask=mask,
        values=tuple(values),
        air_mass_gas=x_gas,
        air_mass_aerosol=x_aerosol,
        air_mass_ozone=x_ozone,
    )
