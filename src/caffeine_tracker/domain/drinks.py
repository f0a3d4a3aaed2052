"""Drink categories and their caffeine reference amounts."""

from dataclasses import dataclass
from enum import StrEnum


class DrinkCategory(StrEnum):
    """Beverage types offered for logging."""

    COFFEE = "coffee"
    ESPRESSO = "espresso"
    TEA = "tea"
    SODA = "soda"

    @property
    def label(self) -> str:
        """Return the capitalized display name."""
        return self.value.capitalize()


@dataclass(frozen=True)
class DrinkReference:
    """Caffeine amount measured for a reference volume of a drink."""

    caffeine_mg: int
    volume_ml: float


DRINK_REFERENCES: dict[DrinkCategory, DrinkReference] = {
    DrinkCategory.COFFEE: DrinkReference(caffeine_mg=95, volume_ml=240),
    DrinkCategory.TEA: DrinkReference(caffeine_mg=47, volume_ml=240),
    DrinkCategory.SODA: DrinkReference(caffeine_mg=22, volume_ml=240),
    DrinkCategory.ESPRESSO: DrinkReference(caffeine_mg=64, volume_ml=30),
}


def parse_category(value: object) -> DrinkCategory | None:
    """Return the matching category, or None for unknown values."""
    if isinstance(value, DrinkCategory):
        return value
    if isinstance(value, str):
        try:
            return DrinkCategory(value.strip().lower())
        except ValueError:
            return None
    return None
