
import json

import pytest

from geodetics import Coordinate, UTMCoordinate, geographic_to_utm, utm_to_geographic
from geodetics.exceptions import InvalidArgumentError
from geodetics.parsers import *


def test_parse_geojson_point():
    gjson = {'type': 'Point', 'coordinates': [-122.3738936, 37.6194847]}
    assert parse_geojson_point(gjson) == Coordinate(-122.3738936, 37.6194847)
    assert parse_geojson_point(json.dumps(gjson)) == Coordinate(-122.3738936, 37.6194847)

    # Round trip
    c = Coordinate(151., -34.)
    assert parse_geojson_point(c.to_geojson()) == c

    # Altitude is ignored
    assert parse_geojson_point({'type': 'Point', 'coordinates': [1., 2., 3.]}) == Coordinate(1., 2.)


def test_parse_geojson_point_malformed():
    with pytest.raises(InvalidArgumentError):
        parse_geojson_point('{"type": "Point", ')

    with pytest.raises(InvalidArgumentError):
        parse_geojson_point('[1, 2]')

    with pytest.raises(InvalidArgumentError):
        parse_geojson_point({'type': 'LineString', 'coordinates': [[0, 0], [1, 1]]})

    with pytest.raises(InvalidArgumentError):
        parse_geojson_point({'type': 'Point', 'coordinates': [0]})

    with pytest.raises(InvalidArgumentError):
        parse_geojson_point({'type': 'Point', 'coordinates': ['a', 'b']})

    with pytest.raises(InvalidArgumentError):
        parse_geojson_point({'type': 'Point', 'coordinates': [0, 95]})


def test_parse_utm_feature():
    gjson = {
        'type': 'Feature',
        'geometry': {'type': 'Point', 'coordinates': [555253.6, 4163781.7]},
        'properties': {'zoneLetter': 'N', 'zoneNumber': 10}
    }
    expected = UTMCoordinate(555253.6, 4163781.7, 10, 'N')
    assert parse_utm_feature(gjson) == expected
    assert parse_utm_feature(json.dumps(gjson)) == expected

    # Round trip
    assert parse_utm_feature(expected.to_geojson()) == expected

    # Through the projection and back
    sydney = parse_geojson_point({'type': 'Point', 'coordinates': [151, -34]})
    utm = parse_utm_feature(geographic_to_utm(sydney).to_geojson())
    assert utm == UTMCoordinate(315290.2, 6236040.9, 56, 'S')
    assert utm_to_geographic(utm).to_geojson() == {
        'type': 'Point',
        'coordinates': [151.00000035, -33.99999965]
    }


def test_parse_utm_feature_malformed():
    with pytest.raises(InvalidArgumentError):
        parse_utm_feature({'type': 'Point', 'coordinates': [555253.6, 4163781.7]})

    with pytest.raises(InvalidArgumentError):
        parse_utm_feature({
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [555253.6, 4163781.7]},
            'properties': {'zoneNumber': 10}
        })

    with pytest.raises(InvalidArgumentError):
        parse_utm_feature({
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [555253.6, 4163781.7]},
        })

    with pytest.raises(InvalidArgumentError):
        parse_utm_feature({
            'type': 'Feature',
            'geometry': None,
            'properties': {'zoneLetter': 'N', 'zoneNumber': 10}
        })

    with pytest.raises(InvalidArgumentError):
        parse_utm_feature({
            'type': 'Feature',
            'geometry': {'type': 'Point', 'coordinates': [555253.6, 4163781.7]},
            'properties': {'zoneLetter': 'Q', 'zoneNumber': 10}
        })
