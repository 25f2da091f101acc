import math

import pytest

from geodetics.exceptions import InvalidArgumentError
from geodetics.utils.functions import *


def test_round_half_up():
    assert round_half_up(0.5, 0) == 1.
    assert round_half_up(2.675, 2) == 2.68
    assert round_half_up(555253.570719, 1) == 555253.6
    assert round_half_up(-122.373893269, 8) == -122.37389327


def test_parse_float():
    assert parse_float(1) == 1.
    assert parse_float(1.5) == 1.5
    assert parse_float('1.5') == 1.5
    assert parse_float(' -2e3 ') == -2000.

    for value in ('', '   ', 'abc', '1,000', None, True, [1.], math.nan, 'inf', -math.inf):
        with pytest.raises(InvalidArgumentError):
            parse_float(value)

    with pytest.raises(InvalidArgumentError, match='distance'):
        parse_float('far', 'distance')


def test_normalize_bearing():
    assert normalize_bearing(0.) == 0.
    assert normalize_bearing(math.pi / 2) == pytest.approx(90.)
    assert normalize_bearing(-math.pi / 2) == pytest.approx(270.)
    assert normalize_bearing(math.pi) == pytest.approx(180.)
    assert normalize_bearing(-math.pi) == pytest.approx(180.)

    for radians in (-1e-18, -1e-15, 2 * math.pi, -2 * math.pi):
        assert 0 <= normalize_bearing(radians) < 360
