"""Volume unit preferences."""

from enum import StrEnum


class UnitPreference(StrEnum):
    """Unit used to enter and display drink volumes."""

    MILLILITERS = "ml"
    FLUID_OUNCES = "fl oz"


DEFAULT_UNIT = UnitPreference.MILLILITERS


def parse_unit(value: object) -> UnitPreference | None:
    """Return the matching unit preference, or None for unknown values."""
    if isinstance(value, UnitPreference):
        return value
    if isinstance(value, str):
        try:
            return UnitPreference(value.strip())
        except ValueError:
            return None
    return None
