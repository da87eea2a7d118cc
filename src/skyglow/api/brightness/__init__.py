"""Sky brightness, extinction and limiting magnitude model."""

from skyglow.api.brightness.models import (
    AngularBrightnessData,
    BandCoefficients,
    ExtinctionResult,
    FixedBrightnessData,
    LuminaryPosition,
    SkyBrightnessResult,
)
from skyglow.api.brightness.photometry import (
    brightness_to_mag,
    compute_air_mass,
    compute_f_factor,
    mag_to_brightness,
)
from skyglow.api.brightness.visual_limit import (
    VisualLimit,
    build_brightness_data,
    evaluate,
    get_extinction_coefficients,
    get_limiting_magnitude,
    get_limiting_magnitude_now,
    get_sky_brightness,
    is_visible_to_naked_eye,
    is_visible_to_naked_eye_now,
)


__all__ = [
    "AngularBrightnessData",
    "BandCoefficients",
    "ExtinctionResult",
    "FixedBrightnessData",
    "LuminaryPosition",
    "SkyBrightnessResult",
    "VisualLimit",
    "brightness_to_mag",
    "build_brightness_data",
    "compute_air_mass",
    "compute_f_factor",
    "evaluate",
    "get_extinction_coefficients",
    "get_limiting_magnitude",
    "get_limiting_magnitude_now",
    "get_sky_brightness",
    "is_visible_to_naked_eye",
    "is_visible_to_naked_eye_now",
    "mag_to_brightness",
]
