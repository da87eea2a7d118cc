"""
Sky Brightness Data Model

Explicit boundaries between the inputs of the model (site-wide and per-point
data) and the results of each computation phase.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields

from skyglow.api.core.enums import Band
from skyglow.api.core.exceptions import BandNotComputedError, InvalidBandError, InvalidBrightnessDataError


__all__ = [
    "AngularBrightnessData",
    "BandCoefficients",
    "BandValues",
    "ExtinctionResult",
    "FixedBrightnessData",
    "LuminaryPosition",
    "SkyBrightnessResult",
    "resolve_band",
]


def resolve_band(band: Band | int) -> Band:
    """
    Validate a band index.

    Raises:
        InvalidBandError: If the index is outside 0 (U) to 4 (I)
    """
    if isinstance(band, bool) or not isinstance(band, int):
        raise InvalidBandError(band)
    try:
        return Band(band)
    except ValueError:
        raise InvalidBandError(band) from None


def _check_finite(obj: object) -> None:
    for f in fields(obj):  # type: ignore[arg-type]
        value = getattr(obj, f.name)
        if not math.isfinite(value):
            raise InvalidBrightnessDataError(f"{f.name} must be a finite number, got {value!r}")


@dataclass(frozen=True, slots=True)
class FixedBrightnessData:
    """
    Observing conditions that are constant across one field of sky.

    Angles are in radians. A relative humidity of exactly 100% is accepted
    and pinned to a saturating aerosol penalty.
    """

    moon_zenith_angle: float  # Zenith angle of the Moon
    sun_zenith_angle: float  # Zenith angle of the Sun
    moon_elongation: float  # Sun-Moon separation (pi = full moon)
    height_above_sea_level: float  # Meters
    latitude: float  # Radians, negative south
    temperature: float  # Degrees Celsius
    relative_humidity: float  # Percent, 0-100
    year: int
    month: int  # 1-12

    def __post_init__(self) -> None:
        _check_finite(self)
        if not 0.0 <= self.relative_humidity <= 100.0:
            raise InvalidBrightnessDataError(
                f"relative_humidity must be 0-100%, got {self.relative_humidity}"
            )
        if not 1 <= self.month <= 12:
            raise InvalidBrightnessDataError(f"month must be 1-12, got {self.month}")


@dataclass(frozen=True, slots=True)
class AngularBrightnessData:
    """Geometry of the evaluated point of the sky, in radians."""

    zenith_angle: float  # Zenith angle of the evaluated point
    moon_angular_distance: float  # Separation from the point to the Moon
    sun_angular_distance: float  # Separation from the point to the Sun

    def __post_init__(self) -> None:
        _check_finite(self)


@dataclass(frozen=True, slots=True)
class LuminaryPosition:
    """Apparent horizontal position of the Sun or the Moon, in radians."""

    azimuth: float
    elevation: float
    elongation: float = 0.0  # Angular distance from the Sun (pi = full moon)

    @property
    def zenith_angle(self) -> float:
        return math.pi * 0.5 - self.elevation

    @classmethod
    def from_degrees(cls, azimuth: float, elevation: float, elongation: float = 0.0) -> LuminaryPosition:
        """Build a position from angles given in degrees."""
        return cls(
            azimuth=math.radians(azimuth),
            elevation=math.radians(elevation),
            elongation=math.radians(elongation),
        )


@dataclass(frozen=True, slots=True)
class BandCoefficients:
    """
    Band-independent terms and per-band extinction coefficients.

    Result of the brightness-parameter setup. Every band is always computed
    here; only the per-point results honor the band selection.
    """

    fixed: FixedBrightnessData
    kr: tuple[float, ...]  # Rayleigh (gas) extinction, mag/airmass
    ka: tuple[float, ...]  # Aerosol extinction
    ko: tuple[float, ...]  # Ozone extinction
    kw: tuple[float, ...]  # Water vapor extinction
    k: tuple[float, ...]  # Total extinction coefficient
    c3: tuple[float, ...]  # Transmission along the path to the Moon
    c4: tuple[float, ...]  # Transmission along the path to the Sun
    year_term: float  # Solar-cycle modulation of the airglow
    air_mass_moon: float
    air_mass_sun: float
    lunar_mag: float  # Approximate V magnitude of the Moon


@dataclass(frozen=True, slots=True)
class BandValues:
    """
    Per-band values computed only for a selection of bands.

    Unselected bands hold None and cannot be read through get().
    """

    mask: int
    values: tuple[float | None, ...]

    def get(self, band: Band | int) -> float:
        """
        Value for one band.

        Raises:
            InvalidBandError: If the band index is outside 0-4
            BandNotComputedError: If the band was not selected
        """
        resolved = resolve_band(band)
        value = self.values[resolved]
        if value is None:
            raise BandNotComputedError(resolved.name, self.mask)
        return value

    @property
    def bands(self) -> tuple[Band, ...]:
        """Selected bands in index order."""
        return Band.from_mask(self.mask)

    def as_dict(self) -> dict[str, float]:
        """Selected values keyed by band name."""
        return {band.name: self.get(band) for band in self.bands}


@dataclass(frozen=True, slots=True)
class SkyBrightnessResult(BandValues):
    """Total sky brightness per band, in raw model units."""

    pass


@dataclass(frozen=True, slots=True)
class ExtinctionResult(BandValues):
    """Line-of-sight extinction per band, in magnitudes."""

    air_mass_gas: float = 1.0
    air_mass_aerosol: float = 1.0
    air_mass_ozone: float = 1.0
