"""
Utility functions for angles and distances on the sky.

Spherical coordinates are (longitude, latitude) pairs in radians: azimuth
and elevation for horizontal coordinates.
"""

from __future__ import annotations

import math


__all__ = [
    "angular_distance",
    "approximate_angular_distance",
    "elevation_to_zenith_angle",
    "to_cartesian",
]


def to_cartesian(lon: float, lat: float) -> tuple[float, float, float]:
    """
    Convert spherical coordinates on the unit sphere to cartesian.

    Args:
        lon: Longitude (or azimuth) in radians
        lat: Latitude (or elevation) in radians

    Returns:
        Tuple of (x, y, z)
    """
    cos_lat = math.cos(lat)
    return cos_lat * math.cos(lon), cos_lat * math.sin(lon), math.sin(lat)


def angular_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Exact angular distance between two points on the sphere.

    Computed from the chord length between the two unit vectors, which stays
    well conditioned for small separations.

    Args:
        lon1: Longitude of the first point in radians
        lat1: Latitude of the first point in radians
        lon2: Longitude of the second point in radians
        lat2: Latitude of the second point in radians

    Returns:
        Distance in radians, from 0 to pi
    """
    x1, y1, z1 = to_cartesian(lon1, lat1)
    x2, y2, z2 = to_cartesian(lon2, lat2)
    r2 = (x1 - x2) ** 2 + (y1 - y2) ** 2 + (z1 - z2) ** 2
    return 2.0 * math.asin(min(1.0, math.sqrt(r2) * 0.5))


def approximate_angular_distance(lon1: float, lat1: float, lon2: float, lat2: float) -> float:
    """
    Angular distance by the spherical law of cosines.

    Faster than angular_distance and accurate to roughly 0.2 degrees.

    Returns:
        Distance in radians, from 0 to pi
    """
    cos_d = math.sin(lat2) * math.sin(lat1) + math.cos(lat2) * math.cos(lat1) * math.cos(lon2 - lon1)
    return math.acos(max(-1.0, min(1.0, cos_d)))


def elevation_to_zenith_angle(elevation: float) -> float:
    """Zenith angle in radians for an elevation in radians."""
    return math.pi * 0.5 - elevation
