"""
Common Enums

Enumerations used throughout the skyglow API.
"""

from collections.abc import Iterable
from enum import IntEnum, StrEnum


__all__ = [
    "ALL_BANDS_MASK",
    "Band",
    "MotherBody",
]


class Band(IntEnum):
    """Johnson-Cousins photometric bands, valued by their array index."""

    U = 0
    B = 1
    V = 2
    R = 3
    I = 4  # noqa: E741

    @property
    def mask(self) -> int:
        """Bit of this band in a band selection mask."""
        return 1 << self.value

    @classmethod
    def from_mask(cls, mask: int) -> tuple["Band", ...]:
        """Bands selected by a bit mask, in index order."""
        return tuple(band for band in cls if mask & band.mask)

    @classmethod
    def to_mask(cls, bands: Iterable["Band"]) -> int:
        """Bit mask selecting the given bands."""
        mask = 0
        for band in bands:
            mask |= cls(band).mask
        return mask


ALL_BANDS_MASK = Band.to_mask(Band)


class MotherBody(StrEnum):
    """Body the observer stands on."""

    EARTH = "earth"
    MOON = "moon"
    MARS = "mars"
