"""
Sky Commands

Limiting magnitude, sky brightness, extinction and naked-eye visibility
towards a point of the sky.
"""

import logging
import math
from dataclasses import replace
from datetime import UTC, datetime

import typer

from skyglow.api.brightness.models import LuminaryPosition
from skyglow.api.brightness.visual_limit import (
    build_brightness_data,
    evaluate,
    get_limiting_magnitude,
    get_sky_brightness,
)
from skyglow.api.core.constants import BANDS
from skyglow.api.core.enums import ALL_BANDS_MASK, Band
from skyglow.api.core.exceptions import SkyglowError
from skyglow.api.location.observer import ObserverSite, get_observer_site
from skyglow.cli.utils.output import (
    console,
    format_latitude,
    format_longitude,
    print_band_table,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)


logger = logging.getLogger(__name__)


# Options shared by every command
AZIMUTH_OPTION = typer.Option(0.0, "--az", help="Azimuth of the evaluated point in degrees")
ALTITUDE_OPTION = typer.Option(90.0, "--alt", help="Altitude of the evaluated point in degrees")
SUN_ALT_OPTION = typer.Option(-90.0, "--sun-alt", help="Altitude of the Sun in degrees")
SUN_AZ_OPTION = typer.Option(0.0, "--sun-az", help="Azimuth of the Sun in degrees")
MOON_ALT_OPTION = typer.Option(-90.0, "--moon-alt", help="Altitude of the Moon in degrees")
MOON_AZ_OPTION = typer.Option(0.0, "--moon-az", help="Azimuth of the Moon in degrees")
MOON_ELONG_OPTION = typer.Option(
    180.0, "--moon-elong", help="Moon-Sun elongation in degrees (0 = new moon, 180 = full moon)"
)
NOW_OPTION = typer.Option(False, "--now", help="Compute Sun and Moon positions with Skyfield instead")
DATE_OPTION = typer.Option(None, "--date", help="Date and time in UTC (default: now)")
LAT_OPTION = typer.Option(None, "--lat", help="Override site latitude in degrees")
LON_OPTION = typer.Option(None, "--lon", help="Override site longitude in degrees")
ELEV_OPTION = typer.Option(None, "--elev", help="Override site elevation in meters")
TEMP_OPTION = typer.Option(None, "--temp", help="Override temperature in degrees Celsius")
HUMIDITY_OPTION = typer.Option(None, "--humidity", help="Override relative humidity in percent")
JSON_OPTION = typer.Option(False, "--json", help="Output as JSON")


def _resolve_site(
    latitude: float | None,
    longitude: float | None,
    elevation: float | None,
    temperature: float | None,
    humidity: float | None,
) -> ObserverSite:
    """Saved observer site with command-line overrides applied."""
    if latitude is not None and not -90 <= latitude <= 90:
        print_error("Latitude must be between -90 and +90 degrees")
        raise typer.Exit(code=1) from None
    if longitude is not None and not -180 <= longitude <= 180:
        print_error("Longitude must be between -180 and +180 degrees")
        raise typer.Exit(code=1) from None

    overrides = {
        "latitude": latitude,
        "longitude": longitude,
        "elevation": elevation,
        "temperature": temperature,
        "relative_humidity": humidity,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    site = get_observer_site()
    return replace(site, **overrides) if overrides else site


def _resolve_when(when: datetime | None) -> datetime:
    if when is None:
        return datetime.now(UTC)
    if when.tzinfo is None:
        return when.replace(tzinfo=UTC)
    return when


def _resolve_luminaries(
    site: ObserverSite,
    when: datetime,
    now: bool,
    sun_alt: float,
    sun_az: float,
    moon_alt: float,
    moon_az: float,
    moon_elong: float,
) -> tuple[LuminaryPosition, LuminaryPosition]:
    if now:
        from skyglow.api.ephemeris.sun_moon import get_sun_moon_positions

        logger.debug(f"Computing Sun and Moon positions for {when.isoformat()}")
        return get_sun_moon_positions(site, when)
    sun = LuminaryPosition.from_degrees(sun_az, sun_alt)
    moon = LuminaryPosition.from_degrees(moon_az, moon_alt, moon_elong)
    return sun, moon


def _conditions(
    site: ObserverSite, when: datetime, sun: LuminaryPosition, moon: LuminaryPosition, az: float, alt: float
) -> dict[str, object]:
    return {
        "site": {
            "name": site.name,
            "latitude": site.latitude,
            "longitude": site.longitude,
            "elevation": site.elevation,
            "temperature": site.temperature,
            "relative_humidity": site.relative_humidity,
        },
        "date": when.isoformat(),
        "sun": {"azimuth": math.degrees(sun.azimuth), "altitude": math.degrees(sun.elevation)},
        "moon": {
            "azimuth": math.degrees(moon.azimuth),
            "altitude": math.degrees(moon.elevation),
            "elongation": math.degrees(moon.elongation),
        },
        "point": {"azimuth": az, "altitude": alt},
    }


def _print_conditions(site: ObserverSite, sun: LuminaryPosition, moon: LuminaryPosition, az: float, alt: float) -> None:
    print_info(
        f"Site: {site.name or 'Unnamed'} ({format_latitude(site.latitude)}, {format_longitude(site.longitude)}), "
        f"{site.temperature:.1f}°C, {site.relative_humidity:.0f}% RH"
    )
    print_info(
        f"Sun alt {math.degrees(sun.elevation):+.1f}°, Moon alt {math.degrees(moon.elevation):+.1f}° "
        f"(elongation {math.degrees(moon.elongation):.1f}°), point az {az:.1f}° alt {alt:.1f}°"
    )


def limit(
    az: float = AZIMUTH_OPTION,
    alt: float = ALTITUDE_OPTION,
    sun_alt: float = SUN_ALT_OPTION,
    sun_az: float = SUN_AZ_OPTION,
    moon_alt: float = MOON_ALT_OPTION,
    moon_az: float = MOON_AZ_OPTION,
    moon_elong: float = MOON_ELONG_OPTION,
    now: bool = NOW_OPTION,
    date: datetime | None = DATE_OPTION,
    latitude: float | None = LAT_OPTION,
    longitude: float | None = LON_OPTION,
    elevation: float | None = ELEV_OPTION,
    temperature: float | None = TEMP_OPTION,
    humidity: float | None = HUMIDITY_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Naked-eye limiting magnitude towards a point of the sky.

    Example:
        skyglow limit --alt 45 --sun-alt -30 --moon-alt -10
        skyglow limit --now --alt 60 --az 180
    """
    site = _resolve_site(latitude, longitude, elevation, temperature, humidity)
    when = _resolve_when(date)
    try:
        sun, moon = _resolve_luminaries(site, when, now, sun_alt, sun_az, moon_alt, moon_az, moon_elong)
        magnitude = get_limiting_magnitude(site, when, sun, moon, math.radians(az), math.radians(alt))
    except SkyglowError as e:
        print_error(f"Failed to compute limiting magnitude: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json({**_conditions(site, when, sun, moon, az, alt), "limiting_magnitude": magnitude})
        return

    _print_conditions(site, sun, moon, az, alt)
    console.print(f"Limiting magnitude: [bold cyan]{magnitude:.2f}[/bold cyan]")


def brightness(
    az: float = AZIMUTH_OPTION,
    alt: float = ALTITUDE_OPTION,
    sun_alt: float = SUN_ALT_OPTION,
    sun_az: float = SUN_AZ_OPTION,
    moon_alt: float = MOON_ALT_OPTION,
    moon_az: float = MOON_AZ_OPTION,
    moon_elong: float = MOON_ELONG_OPTION,
    now: bool = NOW_OPTION,
    date: datetime | None = DATE_OPTION,
    latitude: float | None = LAT_OPTION,
    longitude: float | None = LON_OPTION,
    elevation: float | None = ELEV_OPTION,
    temperature: float | None = TEMP_OPTION,
    humidity: float | None = HUMIDITY_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Sky brightness in nanolamberts for the U, B, V, R and I bands.

    Example:
        skyglow brightness --alt 30 --sun-alt -12
    """
    site = _resolve_site(latitude, longitude, elevation, temperature, humidity)
    when = _resolve_when(date)
    try:
        sun, moon = _resolve_luminaries(site, when, now, sun_alt, sun_az, moon_alt, moon_az, moon_elong)
        values = get_sky_brightness(site, when, sun, moon, math.radians(az), math.radians(alt))
    except SkyglowError as e:
        print_error(f"Failed to compute sky brightness: {e}")
        raise typer.Exit(code=1) from e

    if json_output:
        print_json(
            {
                **_conditions(site, when, sun, moon, az, alt),
                "brightness_nl": {band.name: value for band, value in zip(Band, values, strict=True)},
            }
        )
        return

    _print_conditions(site, sun, moon, az, alt)
    print_band_table("Sky Brightness", "Brightness (nL)", values)


def extinction(
    az: float = AZIMUTH_OPTION,
    alt: float = ALTITUDE_OPTION,
    sun_alt: float = SUN_ALT_OPTION,
    sun_az: float = SUN_AZ_OPTION,
    moon_alt: float = MOON_ALT_OPTION,
    moon_az: float = MOON_AZ_OPTION,
    moon_elong: float = MOON_ELONG_OPTION,
    now: bool = NOW_OPTION,
    date: datetime | None = DATE_OPTION,
    latitude: float | None = LAT_OPTION,
    longitude: float | None = LON_OPTION,
    elevation: float | None = ELEV_OPTION,
    temperature: float | None = TEMP_OPTION,
    humidity: float | None = HUMIDITY_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Extinction coefficients and line-of-sight extinction per band.

    Example:
        skyglow extinction --alt 20 --humidity 80
    """
    from rich.table import Table

    site = _resolve_site(latitude, longitude, elevation, temperature, humidity)
    when = _resolve_when(date)
    try:
        sun, moon = _resolve_luminaries(site, when, now, sun_alt, sun_az, moon_alt, moon_az, moon_elong)
        fixed, angular = build_brightness_data(site, when, sun, moon, math.radians(az), math.radians(alt))
        model = evaluate(ALL_BANDS_MASK, fixed, angular)
    except SkyglowError as e:
        print_error(f"Failed to compute extinction: {e}")
        raise typer.Exit(code=1) from e

    rows = [
        {
            "band": Band(i).name,
            "k": model.k(i),
            "kr": model.kr(i),
            "ka": model.ka(i),
            "ko": model.ko(i),
            "kw": model.kw(i),
            "extinction": model.extinction(i),
        }
        for i in range(BANDS)
    ]

    if json_output:
        print_json({**_conditions(site, when, sun, moon, az, alt), "bands": rows})
        return

    _print_conditions(site, sun, moon, az, alt)
    if alt <= 0:
        print_warning("Point is at or below the horizon")

    table = Table(title="Atmospheric Extinction", show_header=True, header_style="bold magenta")
    table.add_column("Band", style="cyan")
    for column in ("k", "Rayleigh", "Aerosol", "Ozone", "Water", "Extinction (mag)"):
        table.add_column(column, style="green", justify="right")
    for row in rows:
        table.add_row(
            str(row["band"]),
            f"{row['k']:.4f}",
            f"{row['kr']:.4f}",
            f"{row['ka']:.4f}",
            f"{row['ko']:.4f}",
            f"{row['kw']:.4f}",
            f"{row['extinction']:.3f}",
        )
    console.print(table)


def visible(
    magnitude: float = typer.Argument(..., help="Apparent magnitude of the object"),
    az: float = AZIMUTH_OPTION,
    alt: float = ALTITUDE_OPTION,
    sun_alt: float = SUN_ALT_OPTION,
    sun_az: float = SUN_AZ_OPTION,
    moon_alt: float = MOON_ALT_OPTION,
    moon_az: float = MOON_AZ_OPTION,
    moon_elong: float = MOON_ELONG_OPTION,
    now: bool = NOW_OPTION,
    date: datetime | None = DATE_OPTION,
    latitude: float | None = LAT_OPTION,
    longitude: float | None = LON_OPTION,
    elevation: float | None = ELEV_OPTION,
    temperature: float | None = TEMP_OPTION,
    humidity: float | None = HUMIDITY_OPTION,
    json_output: bool = JSON_OPTION,
) -> None:
    """
    Whether an object of the given magnitude is visible to the naked eye.

    Example:
        skyglow visible 5.5 --alt 40 --sun-alt -25
    """
    site = _resolve_site(latitude, longitude, elevation, temperature, humidity)
    when = _resolve_when(date)
    try:
        sun, moon = _resolve_luminaries(site, when, now, sun_alt, sun_az, moon_alt, moon_az, moon_elong)
        limit_mag = get_limiting_magnitude(site, when, sun, moon, math.radians(az), math.radians(alt))
    except SkyglowError as e:
        print_error(f"Failed to compute visibility: {e}")
        raise typer.Exit(code=1) from e

    is_visible = magnitude <= limit_mag

    if json_output:
        print_json(
            {
                **_conditions(site, when, sun, moon, az, alt),
                "magnitude": magnitude,
                "limiting_magnitude": limit_mag,
                "visible": is_visible,
            }
        )
        return

    _print_conditions(site, sun, moon, az, alt)
    if is_visible:
        print_success(f"Magnitude {magnitude:.2f} is visible to the naked eye (limit {limit_mag:.2f})")
    else:
        print_warning(f"Magnitude {magnitude:.2f} is too faint for the naked eye (limit {limit_mag:.2f})")
