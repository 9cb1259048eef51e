"""Weight unit conversion between kilograms and pounds."""
from typing import Literal, Union

from backend.core.rounding import round_half_up

Number = Union[int, float]
Unit = Literal["kg", "lbs"]

KG_TO_LBS = 2.20462


def kg_to_lbs(kg: Number) -> int:
    """Convert kilograms to whole pounds."""
    return round_half_up(kg * KG_TO_LBS)


def lbs_to_kg(lbs: Number) -> int:
    """Convert pounds to whole kilograms."""
    return round_half_up(lbs / KG_TO_LBS)


def convert_weight(weight: Number, from_unit: Unit, to_unit: Unit) -> Number:
    """
    Convert a weight between units.

    The weight is returned unchanged when both units match.

    Raises:
        ValueError: If either unit is not "kg" or "lbs"
    """
    if from_unit not in ("kg", "lbs") or to_unit not in ("kg", "lbs"):
        raise ValueError(f"Unsupported unit conversion: {from_unit} -> {to_unit}")
    if from_unit == to_unit:
        return weight
    return kg_to_lbs(weight) if from_unit == "kg" else lbs_to_kg(weight)
