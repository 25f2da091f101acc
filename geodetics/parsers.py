"""Module for parsing external GeoJSON-style structures into geodetics objects"""

__all__ = ['parse_geojson_point', 'parse_utm_feature']

import json
from typing import Any, Dict, Union

from geodetics.coordinates import Coordinate
from geodetics.exceptions import InvalidArgumentError
from geodetics.utm import UTMCoordinate


def _load(obj: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(obj, str):
        try:
            obj = json.loads(obj)
        except json.JSONDecodeError as e:
            raise InvalidArgumentError('Failed to parse geojson.') from e

    if not isinstance(obj, dict):
        raise InvalidArgumentError('Failed to parse geojson.')

    return obj


def _point_coordinates(geometry: Any):
    if not isinstance(geometry, dict) or geometry.get('type') != 'Point':
        raise InvalidArgumentError('Malformed GeoJSON; expected a Point geometry')

    coords = geometry.get('coordinates')
    if not isinstance(coords, (list, tuple)) or len(coords) < 2:
        raise InvalidArgumentError('Malformed GeoJSON; Point requires two coordinates')

    return coords[0], coords[1]


def parse_geojson_point(gjson: Union[str, Dict[str, Any]]) -> Coordinate:
    """
    Parses a GeoJSON Point geometry, e.g.

        {"type": "Point", "coordinates": [-122.3738936, 37.6194847]}

    Args:
        gjson:
            A GeoJSON Point, as a dict or a JSON string

    Returns:
        Coordinate
    """
    lon, lat = _point_coordinates(_load(gjson))
    return Coordinate(lon, lat)


def parse_utm_feature(gjson: Union[str, Dict[str, Any]]) -> UTMCoordinate:
    """
    Parses a GeoJSON Feature holding a UTM position, e.g.

        {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [555253.6, 4163781.7]},
            "properties": {"zoneLetter": "N", "zoneNumber": 10}
        }

    Args:
        gjson:
            A GeoJSON Feature, as a dict or a JSON string

    Returns:
        UTMCoordinate
    """
    gjson = _load(gjson)
    if gjson.get('type') != 'Feature':
        raise InvalidArgumentError('Malformed GeoJSON; expected Feature')

    easting, northing = _point_coordinates(gjson.get('geometry'))
    properties = gjson.get('properties') or {}
    if 'zoneNumber' not in properties or 'zoneLetter' not in properties:
        raise InvalidArgumentError(
            'Malformed GeoJSON; UTM Feature requires zoneNumber and zoneLetter properties'
        )

    return UTMCoordinate(
        easting,
        northing,
        properties['zoneNumber'],
        properties['zoneLetter'],
    )
