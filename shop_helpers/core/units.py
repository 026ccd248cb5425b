"""Weight and length conversion between units of measure.

Each direction carries its own legacy constant, so the tables are not exact
reciprocals (lb->kg is 0.453592 while kg->lb is 2.20462). Downstream rates
and labels depend on these exact values; do not derive one direction from
the other.
"""

import logging
from numbers import Real
from typing import Dict, Tuple

from .errors import InvalidParameter


logger = logging.getLogger(__name__)

WEIGHT_UNITS = ("g", "kg", "lb", "oz")
LENGTH_UNITS = ("in", "cm", "ft")

WEIGHT_FACTORS: Dict[Tuple[str, str], float] = {
    # grams
    ("lb", "g"): 453.592,
    ("kg", "g"): 1000,
    ("oz", "g"): 28.3495,
    # pounds
    ("kg", "lb"): 2.20462,
    ("g", "lb"): 0.00220462,
    ("oz", "lb"): 0.0625,
    # ounces
    ("lb", "oz"): 16,
    ("g", "oz"): 0.035274,
    ("kg", "oz"): 35.274,
    # kilograms
    ("g", "kg"): 0.001,
    ("oz", "kg"): 0.0283495,
    ("lb", "kg"): 0.453592,
}

LENGTH_FACTORS: Dict[Tuple[str, str], float] = {
    ("cm", "in"): 0.393,
    ("in", "cm"): 2.54,
    ("cm", "ft"): 0.0328084,
    ("ft", "cm"): 30.48,
    ("in", "ft"): 0.0833,
    ("ft", "in"): 12,
}


def _check_arguments(from_unit, to_unit, value) -> None:
    if not isinstance(from_unit, str) or not isinstance(to_unit, str):
        logger.warning(f"Unit codes must be strings, got {from_unit!r} and {to_unit!r}")
        raise InvalidParameter("Unit codes must be strings")
    if isinstance(value, bool) or not isinstance(value, Real):
        logger.warning(f"Value to convert must be a number, got {value!r}")
        raise InvalidParameter("Value to convert must be a number")


def _lookup(table: Dict[Tuple[str, str], float], kind: str, from_unit: str, to_unit: str) -> float:
    factor = table.get((from_unit, to_unit))
    if factor is None:
        logger.warning(f"Unsupported {kind} conversion {from_unit!r} -> {to_unit!r}")
        raise InvalidParameter()
    return factor


def convert_weight(from_unit: str, to_unit: str, weight: float) -> float:
    """Convert ``weight`` from one weight unit to another.

    Args:
        from_unit: Unit to convert from (``g``, ``kg``, ``lb`` or ``oz``).
        to_unit: Unit to convert to.
        weight: The value to convert.

    Returns:
        The converted value, unrounded. Identical units return ``weight`` as is.

    Raises:
        InvalidParameter: The ordered unit pair has no conversion factor.
    """
    _check_arguments(from_unit, to_unit, weight)

    if from_unit == to_unit:
        return weight

    return weight * _lookup(WEIGHT_FACTORS, "weight", from_unit, to_unit)


def convert_length(from_unit: str, to_unit: str, length: float) -> float:
    """Convert ``length`` between ``in``, ``cm`` and ``ft``.

    Unlike weights, both unit codes are checked against the supported set
    before the identity short-circuit.
    """
    _check_arguments(from_unit, to_unit, length)
    for unit in (from_unit, to_unit):
        if unit not in LENGTH_UNITS:
            logger.warning(f"Unsupported length unit {unit!r}")
            raise InvalidParameter(f"Invalid length unit {unit!r}, expected one of {', '.join(LENGTH_UNITS)}")

    if from_unit == to_unit:
        return length

    return length * _lookup(LENGTH_FACTORS, "length", from_unit, to_unit)
