"""Caffeine estimation from drink category and volume."""

import math

from caffeine_tracker.domain.drinks import DRINK_REFERENCES, parse_category
from caffeine_tracker.services.units import round_half_up


def scaled_caffeine(category: object, volume_ml: float) -> float | None:
    """Return the unrounded caffeine amount, or None for unknown categories."""
    drink = parse_category(category)
    if drink is None:
        return None
    reference = DRINK_REFERENCES[drink]
    return volume_ml / reference.volume_ml * reference.caffeine_mg


def estimate(category: object, volume_ml: float) -> int:
    """Estimate milligrams of caffeine by scaling the category's reference amount.

    Unknown categories and volumes too large to scale estimate to zero.
    """
    scaled = scaled_caffeine(category, volume_ml)
    if scaled is None or not math.isfinite(scaled):
        return 0
    return int(round_half_up(scaled))
