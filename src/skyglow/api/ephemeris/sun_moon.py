"""
Sun and Moon Positions

Apparent horizontal positions of the Sun and the Moon and their elongation,
computed with Skyfield. These feed the site-wide part of the sky brightness
model.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from skyglow.api.brightness.models import LuminaryPosition
from skyglow.api.core.exceptions import EphemerisError, EphemerisFileNotFoundError, ObserverNotOnEarthError
from skyglow.api.location.observer import ObserverSite


if TYPE_CHECKING:
    from skyfield.api import Loader


logger = logging.getLogger(__name__)


__all__ = [
    "EPHEMERIS_FILE",
    "get_skyfield_directory",
    "get_skyfield_loader",
    "get_sun_moon_positions",
]


EPHEMERIS_FILE = "de421.bsp"


def get_skyfield_directory() -> Path:
    """
    Get the Skyfield cache directory.

    Checks SKYFIELD_DIR environment variable first, then defaults to ~/.skyfield

    Returns:
        Path to Skyfield cache directory
    """
    env_dir = os.environ.get("SKYFIELD_DIR")
    if env_dir:
        return Path(env_dir).expanduser().resolve()
    return Path.home() / ".skyfield"


# Module-level loader instance - created lazily on first access
_loader: Loader | None = None
_ephemeris: Any = None


def get_skyfield_loader() -> Loader:
    """
    Get a shared Skyfield Loader instance.

    The loader is created once and reused for all subsequent calls.
    """
    global _loader
    if _loader is None:
        from skyfield.api import Loader

        skyfield_dir = get_skyfield_directory()
        skyfield_dir.mkdir(parents=True, exist_ok=True)
        _loader = Loader(str(skyfield_dir.resolve()))
    return _loader


def _get_ephemeris() -> Any:
    global _ephemeris
    if _ephemeris is None:
        loader = get_skyfield_loader()
        try:
            _ephemeris = loader(EPHEMERIS_FILE)
        except (OSError, ValueError) as e:
            raise EphemerisFileNotFoundError(f"Could not load {EPHEMERIS_FILE}: {e}") from e
    return _ephemeris


def get_sun_moon_positions(
    site: ObserverSite,
    dt: datetime | None = None,
) -> tuple[LuminaryPosition, LuminaryPosition]:
    """
    Compute the apparent positions of the Sun and the Moon.

    Args:
        site: Observer site
        dt: Datetime to calculate for (default: now; naive values are UTC)

    Returns:
        Tuple of (sun, moon) positions; the Moon's elongation is its angular
        distance from the Sun

    Raises:
        ObserverNotOnEarthError: If the site is not on Earth
        EphemerisError: If the ephemeris cannot be loaded or evaluated
    """
    if not site.is_on_earth:
        raise ObserverNotOnEarthError()

    if dt is None:
        dt = datetime.now(UTC)
    elif dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    from skyfield.api import wgs84

    eph = _get_ephemeris()
    ts = get_skyfield_loader().timescale()

    try:
        t = ts.from_datetime(dt)
        observer = eph["earth"] + wgs84.latlon(
            latitude_degrees=site.latitude,
            longitude_degrees=site.longitude,
            elevation_m=site.elevation,
        )
        sun_apparent = observer.at(t).observe(eph["sun"]).apparent()
        moon_apparent = observer.at(t).observe(eph["moon"]).apparent()

        sun_alt, sun_az, _ = sun_apparent.altaz()
        moon_alt, moon_az, _ = moon_apparent.altaz()
        elongation = sun_apparent.separation_from(moon_apparent)
    except (KeyError, ValueError) as e:
        raise EphemerisError(f"Failed to compute Sun and Moon positions: {e}") from e

    sun = LuminaryPosition(azimuth=sun_az.radians, elevation=sun_alt.radians, elongation=0.0)
    moon = LuminaryPosition(azimuth=moon_az.radians, elevation=moon_alt.radians, elongation=elongation.radians)
    logger.debug(
        f"Sun alt={sun_alt.degrees:.2f}°, Moon alt={moon_alt.degrees:.2f}°, "
        f"elongation={elongation.degrees:.2f}° at {dt.isoformat()}"
    )
    return sun, moon
