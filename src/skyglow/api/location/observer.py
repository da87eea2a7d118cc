"""
Observer Site Management

Manages the observer's site: geographic position plus the weather conditions
that drive atmospheric extinction. The site is persisted as JSON under the
user's configuration directory.
"""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

import deal

from skyglow.api.core.enums import MotherBody
from skyglow.api.core.exceptions import InvalidConfigurationError


logger = logging.getLogger(__name__)


__all__ = [
    "DEFAULT_SITE",
    "ObserverSite",
    "clear_observer_site",
    "delete_saved_site",
    "get_config_path",
    "get_observer_site",
    "load_site",
    "save_site",
    "set_observer_site",
]


@dataclass(frozen=True, slots=True)
class ObserverSite:
    """Observer's site and local weather."""

    latitude: float  # Degrees north (negative for south)
    longitude: float  # Degrees east (negative for west)
    elevation: float = 0.0  # Meters above sea level
    temperature: float = 10.0  # Degrees Celsius
    relative_humidity: float = 50.0  # Percent
    name: str | None = None  # Optional site name
    body: MotherBody = MotherBody.EARTH

    @property
    def latitude_rad(self) -> float:
        """Latitude in radians."""
        return math.radians(self.latitude)

    @property
    def is_on_earth(self) -> bool:
        return self.body == MotherBody.EARTH


# Default site (Greenwich Observatory)
DEFAULT_SITE = ObserverSite(
    latitude=51.4769,
    longitude=-0.0005,
    elevation=0.0,
    name="Greenwich Observatory (default)",
)

# Global current site
_current_site: ObserverSite | None = None


def get_config_path() -> Path:
    """
    Get path to observer site config file.

    Uses SKYGLOW_CONFIG_DIR when set, otherwise ~/.config/skyglow.
    """
    env_dir = os.environ.get("SKYGLOW_CONFIG_DIR")
    config_dir = Path(env_dir).expanduser() if env_dir else Path.home() / ".config" / "skyglow"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "observer_site.json"


def _validate_site_values(latitude: float, longitude: float, relative_humidity: float) -> None:
    if not -90 <= latitude <= 90:
        raise InvalidConfigurationError(f"Invalid latitude: {latitude} (must be -90 to 90)")
    if not -180 <= longitude <= 180:
        raise InvalidConfigurationError(f"Invalid longitude: {longitude} (must be -180 to 180)")
    if not 0 <= relative_humidity <= 100:
        raise InvalidConfigurationError(f"Invalid relative humidity: {relative_humidity} (must be 0 to 100)")


@deal.pre(lambda site: site is not None, message="Site must be provided")  # type: ignore[misc,arg-type]
@deal.pre(lambda site: -90 <= site.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda site: -180 <= site.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
@deal.pre(lambda site: 0 <= site.relative_humidity <= 100, message="Humidity must be 0 to 100")  # type: ignore[misc,arg-type]
@deal.post(lambda result: result is None, message="Save must complete")
def save_site(site: ObserverSite) -> None:
    """
    Save observer site to config file.

    Args:
        site: Observer site to save
    """
    config_path = get_config_path()
    logger.info(f"Saving observer site: {site.name or 'Unnamed'} ({site.latitude:.4f}, {site.longitude:.4f})")

    data = {
        "latitude": site.latitude,
        "longitude": site.longitude,
        "elevation": site.elevation,
        "temperature": site.temperature,
        "relative_humidity": site.relative_humidity,
        "name": site.name,
        "body": site.body.value,
    }

    with config_path.open("w") as f:
        json.dump(data, f, indent=2)

    logger.debug(f"Site saved to {config_path}")


@deal.post(lambda result: result is not None, message="Site must be returned")
def load_site() -> ObserverSite:
    """
    Load observer site from config file.

    Returns:
        Saved observer site, or default if not configured or unreadable
    """
    config_path = get_config_path()

    if not config_path.exists():
        logger.debug(f"No saved site found at {config_path}")
        return DEFAULT_SITE

    try:
        with config_path.open("r") as f:
            data = json.load(f)

        if "latitude" not in data or "longitude" not in data:
            raise KeyError("Missing required fields: latitude and/or longitude")

        latitude = float(data["latitude"])
        longitude = float(data["longitude"])
        relative_humidity = float(data.get("relative_humidity", DEFAULT_SITE.relative_humidity))
        _validate_site_values(latitude, longitude, relative_humidity)

        elevation = float(data.get("elevation", 0.0))
        if elevation < 0:
            logger.warning(f"Negative elevation in config: {elevation}, using 0.0")
            elevation = 0.0

        site = ObserverSite(
            latitude=latitude,
            longitude=longitude,
            elevation=elevation,
            temperature=float(data.get("temperature", DEFAULT_SITE.temperature)),
            relative_humidity=relative_humidity,
            name=data.get("name"),
            body=MotherBody(data.get("body", MotherBody.EARTH.value)),
        )
        logger.info(f"Loaded observer site: {site.name or 'Unnamed'} ({site.latitude:.4f}, {site.longitude:.4f})")
        return site
    except (json.JSONDecodeError, KeyError, ValueError, TypeError, InvalidConfigurationError) as e:
        logger.warning(f"Failed to load site from {config_path}: {e}. Using default site.")
        return DEFAULT_SITE


@deal.post(lambda result: result is not None, message="Observer site must be returned")
def get_observer_site() -> ObserverSite:
    """
    Get current observer site.

    Returns the cached site if set, otherwise loads it from config.
    """
    global _current_site

    if _current_site is None:
        _current_site = load_site()

    return _current_site


@deal.pre(lambda site, save=True: site is not None, message="Site must be provided")  # type: ignore[misc,arg-type]
@deal.pre(lambda site, save=True: -90 <= site.latitude <= 90, message="Latitude must be -90 to +90")  # type: ignore[misc,arg-type]
@deal.pre(lambda site, save=True: -180 <= site.longitude <= 180, message="Longitude must be -180 to +180")  # type: ignore[misc,arg-type]
@deal.pre(lambda site, save=True: 0 <= site.relative_humidity <= 100, message="Humidity must be 0 to 100")  # type: ignore[misc,arg-type]
def set_observer_site(site: ObserverSite, save: bool = True) -> None:
    """
    Set current observer site.

    Args:
        site: New observer site
        save: Whether to save to config file (default: True)
    """
    global _current_site
    _current_site = site

    if save:
        save_site(site)


@deal.post(lambda result: result is None, message="Clear must complete")
def clear_observer_site() -> None:
    """Clear cached observer site (will reload from config on next access)."""
    global _current_site
    _current_site = None


def delete_saved_site() -> bool:
    """
    Delete the saved site file and clear the cached site.

    Returns:
        True if a saved file was removed
    """
    clear_observer_site()
    config_path = get_config_path()
    if config_path.exists():
        config_path.unlink()
        logger.info(f"Removed saved site {config_path}")
        return True
    return False
