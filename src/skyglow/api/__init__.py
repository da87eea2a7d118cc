"""
skyglow API - Computation Layer

This package contains the sky brightness and visual limit model, separated
from CLI presentation concerns.

The API is organized into logical subpackages:
- brightness: Extinction, sky brightness and limiting magnitude
- location: Observer site and its configuration
- ephemeris: Sun and Moon positions
- core: Constants, enums, utilities and exceptions
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from skyglow.api.brightness import ...
    # from skyglow.api.location import ...
    # etc.
]
