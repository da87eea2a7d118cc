"""
Site Commands

Commands for managing the saved observer site.
"""

import typer
from rich.table import Table

from skyglow.api.core.enums import MotherBody
from skyglow.api.location.observer import (
    ObserverSite,
    delete_saved_site,
    get_config_path,
    get_observer_site,
    set_observer_site,
)
from skyglow.cli.utils.groups import SortedCommandsGroup
from skyglow.cli.utils.output import (
    console,
    format_latitude,
    format_longitude,
    print_error,
    print_info,
    print_json,
    print_success,
    print_warning,
)


app = typer.Typer(help="Observer site commands", cls=SortedCommandsGroup)


@app.command("show")
def show_site(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """
    Show the current observer site.

    Example:
        skyglow site show
        skyglow site show --json
    """
    site = get_observer_site()

    if json_output:
        print_json(
            {
                "name": site.name,
                "latitude": site.latitude,
                "longitude": site.longitude,
                "elevation": site.elevation,
                "temperature": site.temperature,
                "relative_humidity": site.relative_humidity,
                "body": site.body.value,
                "latitude_formatted": format_latitude(site.latitude),
                "longitude_formatted": format_longitude(site.longitude),
                "config_file": str(get_config_path()),
            }
        )
        return

    table = Table(title="Observer Site", show_header=True, header_style="bold magenta")
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Name", site.name or "Unnamed")
    table.add_row("Latitude", f"{format_latitude(site.latitude)} ({site.latitude:+.4f}°)")
    table.add_row("Longitude", f"{format_longitude(site.longitude)} ({site.longitude:+.4f}°)")
    table.add_row("Elevation", f"{site.elevation:.0f} m")
    table.add_row("Temperature", f"{site.temperature:.1f} °C")
    table.add_row("Relative Humidity", f"{site.relative_humidity:.0f}%")
    table.add_row("Body", site.body.value.title())

    console.print(table)
    if not site.is_on_earth:
        print_warning("Sky brightness can only be computed for observers on Earth")


@app.command("set")
def set_site(
    latitude: float = typer.Option(..., "--lat", help="Latitude in degrees (-90 to +90, North is positive)"),
    longitude: float = typer.Option(..., "--lon", help="Longitude in degrees (-180 to +180, East is positive)"),
    elevation: float = typer.Option(0.0, "--elev", help="Elevation in meters above sea level"),
    temperature: float = typer.Option(10.0, "--temp", help="Air temperature in degrees Celsius"),
    humidity: float = typer.Option(50.0, "--humidity", help="Relative humidity in percent (0 to 100)"),
    name: str | None = typer.Option(None, "--name", help="Optional site name"),
    body: MotherBody = typer.Option(MotherBody.EARTH, "--body", help="Body the observer stands on"),
) -> None:
    """
    Set and save the observer site.

    Example:
        # Mauna Kea
        skyglow site set --lat 19.8207 --lon -155.4681 --elev 4205 --temp 2 --humidity 20 --name "Mauna Kea"

        # London
        skyglow site set --lat 51.5074 --lon -0.1278
    """
    if not -90 <= latitude <= 90:
        print_error("Latitude must be between -90 and +90 degrees")
        raise typer.Exit(code=1) from None
    if not -180 <= longitude <= 180:
        print_error("Longitude must be between -180 and +180 degrees")
        raise typer.Exit(code=1) from None
    if not 0 <= humidity <= 100:
        print_error("Relative humidity must be between 0 and 100 percent")
        raise typer.Exit(code=1) from None

    site = ObserverSite(
        latitude=latitude,
        longitude=longitude,
        elevation=elevation,
        temperature=temperature,
        relative_humidity=humidity,
        name=name,
        body=body,
    )
    try:
        set_observer_site(site, save=True)
    except OSError as e:
        print_error(f"Failed to save site: {e}")
        raise typer.Exit(code=1) from e

    print_success(
        f"Site set to {name or 'Unnamed'} ({format_latitude(latitude)}, {format_longitude(longitude)}, {elevation:.0f} m)"
    )
    print_info(f"Saved to {get_config_path()}")


@app.command("clear")
def clear_site() -> None:
    """
    Delete the saved observer site and fall back to the default.

    Example:
        skyglow site clear
    """
    if delete_saved_site():
        print_success("Saved site removed")
    else:
        print_info("No saved site to remove")
