"""
Module for angle and unit conversions
"""
__all__ = [
    'convert_from_meters', 'convert_to_meters',
    'degrees_to_radians', 'radians_to_degrees',
]

import math

from geodetics.exceptions import InvalidArgumentError

_DISTANCE_FACTORS = {
    'm': 1.,
    'km': 1000.,
    'mi': 1609.34,
    'ft': 0.3048,
    'nmi': 1852.,
    'yd': 0.9144,
}


def degrees_to_radians(deg: float) -> float:
    """Converts an angle in degrees to radians"""
    return deg * (math.pi / 180.0)


def radians_to_degrees(rad: float) -> float:
    """Converts an angle in radians to degrees"""
    return 180.0 * (rad / math.pi)


def _distance_factor(unit: str) -> float:
    try:
        return _DISTANCE_FACTORS[unit.lower()]
    except KeyError as e:
        raise InvalidArgumentError(
            f"Unknown distance unit '{unit}'. Options: {list(_DISTANCE_FACTORS.keys())}"
        ) from e


def convert_to_meters(distance: float, unit: str) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (str): The unit of distance (meter = 'm', kilometer = 'km', mile = 'mi',
        feet = 'ft', nautical mile = 'nmi', yard = 'yd').

    Returns:
        float: The distance in meters.
    """
    return distance * _distance_factor(unit)


def convert_from_meters(distance: float, unit: str) -> float:
    """
    Converts a distance in meters to another unit. Accepts the same units as
    convert_to_meters.

    Args:
        distance (float): The distance in meters.
        unit (str): The target unit of distance.

    Returns:
        float: The distance in the target unit.
    """
    return distance / _distance_factor(unit)
