"""
Custom exception classes for skyglow.

This module defines specific exceptions for the different ways a sky
brightness or limiting magnitude computation can fail.
"""

from __future__ import annotations


__all__ = [
    "BandNotComputedError",
    # Configuration exceptions
    "ConfigurationError",
    # Ephemeris exceptions
    "EphemerisError",
    "EphemerisFileNotFoundError",
    # Model exceptions
    "InvalidBandError",
    "InvalidBrightnessDataError",
    "InvalidConfigurationError",
    # Location/Observer exceptions
    "LocationError",
    "ObserverNotOnEarthError",
    "PhotometryDomainError",
    "SingularGeometryError",
    # Base exception
    "SkyglowError",
]


class SkyglowError(Exception):
    """
    Base exception for all skyglow errors.

    All custom exceptions in this library inherit from this base class,
    making it easy to catch every model-related error at once.
    """

    pass


# ============================================================================
# Model Exceptions
# ============================================================================


class InvalidBandError(SkyglowError, ValueError):
    """
    Raised when a band index is outside the U..I range.

    Valid indices are 0 (U) to 4 (I).
    """

    def __init__(self, index: object, message: str | None = None) -> None:
        super().__init__(message or f"invalid band data index {index}.")
        self.index = index


class BandNotComputedError(SkyglowError):
    """
    Raised when querying a band that was left out of the band selection.

    Per-point brightness and extinction are only computed for the selected
    bands, so reading any other band is an error rather than a zero.
    """

    def __init__(self, band: object, mask: int) -> None:
        super().__init__(f"band {band} was not computed (band mask 0x{mask:02X})")
        self.band = band
        self.mask = mask


class InvalidBrightnessDataError(SkyglowError, ValueError):
    """
    Raised when brightness input data is out of range.

    This occurs when:
    - Relative humidity is outside 0-100%
    - Month is outside 1-12
    - A value is not a finite number
    """

    pass


class SingularGeometryError(SkyglowError):
    """
    Raised when the evaluated point coincides with the Sun or the Moon.

    The scattering falloff diverges at zero angular distance.
    """

    pass


class PhotometryDomainError(SkyglowError, ValueError):
    """Raised when a brightness cannot be converted to a magnitude."""

    pass


# ============================================================================
# Location/Observer Exceptions
# ============================================================================


class LocationError(SkyglowError):
    """Base exception for location-related errors."""

    pass


class ObserverNotOnEarthError(LocationError):
    """Raised when the observer is not located on Earth."""

    def __init__(self, message: str = "Observer must be located on Earth.") -> None:
        super().__init__(message)


# ============================================================================
# Ephemeris Exceptions
# ============================================================================


class EphemerisError(SkyglowError):
    """Base exception for ephemeris-related errors."""

    pass


class EphemerisFileNotFoundError(EphemerisError):
    """Raised when the ephemeris file cannot be loaded."""

    pass


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationError(SkyglowError):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when the saved configuration is invalid."""

    pass
