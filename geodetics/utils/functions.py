"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_bearing', 'parse_float', 'round_half_up']

import math
from typing import Any

from geodetics.exceptions import InvalidArgumentError


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def parse_float(value: Any, name: str = 'value') -> float:
    """
    Converts a number or numeric string to a finite float.

    Strings are accepted only when they hold a number once surrounding whitespace
    is removed; booleans, None, empty strings and non-finite values are rejected.

    Args:
        value:
            The value to convert

        name:
            The name of the argument, used in the error message

    Returns:
        float

    Raises:
        InvalidArgumentError
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidArgumentError(f'{name} must be numeric, not {type(value).__name__}')

    if isinstance(value, str):
        value = value.strip()
        if not value:
            raise InvalidArgumentError(f'{name} must be numeric, received an empty string')

    try:
        parsed = float(value)
    except ValueError as e:
        raise InvalidArgumentError(f'{name} must be numeric, received {value!r}') from e

    if not math.isfinite(parsed):
        raise InvalidArgumentError(f'{name} must be finite, received {value!r}')

    return parsed


def normalize_bearing(radians: float) -> float:
    """Converts an azimuth in radians (-pi, pi] to degrees in [0, 360)"""
    return (180.0 * (((radians + 2 * math.pi) % (2 * math.pi)) / math.pi)) % 360.0
