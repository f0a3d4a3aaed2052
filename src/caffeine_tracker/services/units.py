"""Conversions between milliliters and US fluid ounces."""

import math

from caffeine_tracker.domain.units import UnitPreference

ML_PER_FL_OZ = 29.5735

_DEFAULT_SERVINGS = {
    UnitPreference.MILLILITERS: 240.0,
    UnitPreference.FLUID_OUNCES: 8.0,
}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to the given number of decimals with ties going up."""
    factor = 10**digits
    if not math.isfinite(value * factor):
        return value
    return math.floor(value * factor + 0.5) / factor


def to_fluid_ounces(ml: float) -> float:
    """Convert milliliters to fluid ounces, rounded to one decimal for display."""
    return round_half_up(ml / ML_PER_FL_OZ, 1)


def to_milliliters(fl_oz: float) -> float:
    """Convert fluid ounces to milliliters without rounding."""
    return fl_oz * ML_PER_FL_OZ


def to_milliliters_from(volume: float, unit: UnitPreference) -> float:
    """Normalize a volume entered in the given unit to milliliters."""
    if unit == UnitPreference.FLUID_OUNCES:
        return to_milliliters(volume)
    return volume


def format_volume(volume_ml: float, unit: UnitPreference) -> str:
    """Render a stored volume in the preferred unit from its whole milliliters."""
    if unit == UnitPreference.FLUID_OUNCES:
        return f"{to_fluid_ounces(round_half_up(volume_ml)):.1f} fl oz"
    return f"{int(round_half_up(volume_ml))}ml"


def default_serving(unit: UnitPreference) -> float:
    """Return the volume prefilled when logging a drink in the given unit."""
    return _DEFAULT_SERVINGS[unit]


def parse_volume(value: object) -> float | None:
    """Return a positive finite volume from a number or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        volume = float(value)
    elif isinstance(value, str):
        try:
            volume = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(volume) or volume <= 0:
        return None
    return volume
