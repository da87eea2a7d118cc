"""Observer site and configuration."""

from skyglow.api.location.observer import (
    DEFAULT_SITE,
    ObserverSite,
    clear_observer_site,
    get_observer_site,
    set_observer_site,
)


__all__ = [
    "DEFAULT_SITE",
    "ObserverSite",
    "clear_observer_site",
    "get_observer_site",
    "set_observer_site",
]
