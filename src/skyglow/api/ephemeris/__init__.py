"""Sun and Moon ephemeris."""

from skyglow.api.ephemeris.sun_moon import get_sun_moon_positions


__all__ = ["get_sun_moon_positions"]
