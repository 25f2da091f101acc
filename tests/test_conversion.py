import math

import pytest

from geodetics.conversion import *
from geodetics.exceptions import InvalidArgumentError


def test_degrees_to_radians():
    assert degrees_to_radians(90) == math.pi / 2
    assert degrees_to_radians(0) == 0.


def test_radians_to_degrees():
    assert radians_to_degrees(math.pi / 2) == 90
    assert radians_to_degrees(-math.pi) == -180


def test_degrees_radians_round_trip():
    for value in (-180., -90.5, -1e-9, 0., 0.1, 37.6194847, 151., 359.999):
        assert radians_to_degrees(degrees_to_radians(value)) == pytest.approx(value, abs=1e-12)


def test_convert_to_meters():
    # Test cases: (distance, unit, expected_result)
    test_data = [
        (1.0, 'm', 1.0),
        (1.0, 'km', 1000.0),
        (1.0, 'KM', 1000.0),
        (1.0, 'mi', 1609.34),
        (1.0, 'ft', 0.3048),
        (1.0, 'nmi', 1852.0),
        (1.0, 'yd', 0.9144),
    ]

    for distance, unit, expected_result in test_data:
        result = convert_to_meters(distance, unit)
        assert result == pytest.approx(expected_result, rel=1e-6)

    with pytest.raises(InvalidArgumentError):
        convert_to_meters(1.0, 'furlong')


def test_convert_from_meters():
    assert convert_from_meters(348538.7223209787, 'km') == pytest.approx(348.5387223209787, rel=1e-12)
    assert convert_from_meters(1852., 'nmi') == pytest.approx(1.)

    with pytest.raises(InvalidArgumentError):
        convert_from_meters(1.0, 'parsec')
