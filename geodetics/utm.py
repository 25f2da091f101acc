"""
Conversion between geographic coordinates and Universal Transverse Mercator (UTM)
coordinates on the WGS84 ellipsoid.

The series follow Snyder, "Map Projections - A Working Manual" (USGS PP 1395).
Polar regions (UPS) are not supported.
"""

__all__ = [
    'BoundingBox', 'UTMCoordinate',
    'geographic_to_utm', 'mgrs_bounding_box', 'utm_to_geographic', 'utm_zone_number',
]

import math
from typing import Any, Dict, NamedTuple, Optional, Union

from geodetics._const import (
    UTM_FALSE_EASTING, UTM_FALSE_NORTHING, UTM_K0, UTM_MAX_LATITUDE, UTM_MIN_LATITUDE,
    WGS84_A, WGS84_E2,
)
from geodetics.conversion import degrees_to_radians, radians_to_degrees
from geodetics.coordinates import Coordinate
from geodetics.exceptions import InvalidArgumentError
from geodetics.utils.functions import parse_float, round_half_up
from geodetics.utils.logging import LOGGER, warn_once

# Projected coordinates resolve to 0.1m, geographic coordinates to 8 decimal places
UTM_PRECISION = 1
GEOGRAPHIC_PRECISION = 8

_HEMISPHERES = ('N', 'S')


class BoundingBox(NamedTuple):
    """Extent of a UTM grid cell, in decimal degrees"""
    top: float
    right: float
    bottom: float
    left: float


class UTMCoordinate:
    """
    A UTM grid position.

    Args:
        easting:
            Meters east, including the 500,000m false easting

        northing:
            Meters north, including the 10,000,000m false northing in the southern
            hemisphere

        zone_number:
            The UTM longitudinal zone. Validity is checked on conversion, not here.

        zone_letter:
            'N' or 'S'. This is a hemisphere flag, not an MGRS latitude band.
    """

    __slots__ = ('_easting', '_northing', '_zone_number', '_zone_letter')

    def __init__(
        self,
        easting: Union[float, int, str],
        northing: Union[float, int, str],
        zone_number: Union[int, str],
        zone_letter: str,
    ):
        self._easting = parse_float(easting, 'easting')
        self._northing = parse_float(northing, 'northing')

        _zone = parse_float(zone_number, 'zone_number')
        if not _zone.is_integer():
            raise InvalidArgumentError(f'zone_number must be a whole number, received {zone_number!r}')
        self._zone_number = int(_zone)

        if not isinstance(zone_letter, str) or zone_letter.upper() not in _HEMISPHERES:
            raise InvalidArgumentError(f"zone_letter must be 'N' or 'S', received {zone_letter!r}")
        self._zone_letter = zone_letter.upper()

    @property
    def easting(self) -> float:
        return self._easting

    @property
    def northing(self) -> float:
        return self._northing

    @property
    def zone_number(self) -> int:
        return self._zone_number

    @property
    def zone_letter(self) -> str:
        return self._zone_letter

    def __eq__(self, other):
        if not isinstance(other, UTMCoordinate):
            return False

        return (
            self.easting == other.easting and
            self.northing == other.northing and
            self.zone_number == other.zone_number and
            self.zone_letter == other.zone_letter
        )

    def __hash__(self):
        return hash((self.easting, self.northing, self.zone_number, self.zone_letter))

    def __repr__(self):
        return (
            f'<UTMCoordinate({self.zone_number}{self.zone_letter} '
            f'{self.easting}E {self.northing}N)>'
        )

    def to_geojson(self) -> Dict[str, Any]:
        """Converts the UTM coordinate to a GeoJSON Feature with zone properties"""
        return {
            'type': 'Feature',
            'geometry': {
                'type': 'Point',
                'coordinates': [self.easting, self.northing]
            },
            'properties': {
                'zoneLetter': self.zone_letter,
                'zoneNumber': self.zone_number,
            }
        }


def utm_zone_number(coordinate: Coordinate) -> int:
    """
    Determines the UTM zone for a coordinate, including the irregular zones
    around Norway and Svalbard.

    Args:
        coordinate:
            The geographic coordinate

    Returns:
        int in [1, 60]
    """
    lon, lat = coordinate.longitude, coordinate.latitude

    # Longitude 180 belongs to the last zone rather than a 61st
    if lon == 180:
        return 60

    zone = math.floor((lon + 180) / 6) + 1

    # Southwest Norway
    if 56 <= lat < 64 and 3 <= lon < 12:
        return 32

    # Svalbard
    if 72 <= lat < 84:
        if 0 <= lon < 9:
            return 31
        if 9 <= lon < 21:
            return 33
        if 21 <= lon < 33:
            return 35
        if 33 <= lon < 42:
            return 37

    return zone


def _central_meridian(zone_number: int) -> float:
    return (zone_number - 1) * 6 - 180 + 3


def geographic_to_utm(coordinate: Coordinate) -> UTMCoordinate:
    """
    Projects a geographic coordinate onto the UTM grid.

    Easting and northing are rounded (half up) to 0.1m.

    Args:
        coordinate:
            The geographic coordinate

    Returns:
        UTMCoordinate
    """
    lat = coordinate.latitude
    if not UTM_MIN_LATITUDE <= lat <= UTM_MAX_LATITUDE:
        warn_once(
            f'UTM is not defined beyond {UTM_MAX_LATITUDE}N/{-UTM_MIN_LATITUDE}S; '
            'projected values are increasingly distorted (this warning will not repeat)'
        )

    zone_number = utm_zone_number(coordinate)
    lat_rad = degrees_to_radians(lat)
    lon_rad = degrees_to_radians(coordinate.longitude)
    lon_origin_rad = degrees_to_radians(_central_meridian(zone_number))

    e2 = WGS84_E2
    e4, e6 = e2 * e2, e2 * e2 * e2
    ep2 = e2 / (1 - e2)
    sin_lat, cos_lat, tan_lat = math.sin(lat_rad), math.cos(lat_rad), math.tan(lat_rad)

    n = WGS84_A / math.sqrt(1 - e2 * sin_lat * sin_lat)
    t = tan_lat * tan_lat
    c = ep2 * cos_lat * cos_lat
    a = cos_lat * (lon_rad - lon_origin_rad)

    # Meridional arc
    m = WGS84_A * (
        (1 - e2 / 4 - 3 * e4 / 64 - 5 * e6 / 256) * lat_rad
        - (3 * e2 / 8 + 3 * e4 / 32 + 45 * e6 / 1024) * math.sin(2 * lat_rad)
        + (15 * e4 / 256 + 45 * e6 / 1024) * math.sin(4 * lat_rad)
        - (35 * e6 / 3072) * math.sin(6 * lat_rad)
    )

    easting = UTM_K0 * n * (
        a
        + (1 - t + c) * a ** 3 / 6
        + (5 - 18 * t + t * t + 72 * c - 58 * ep2) * a ** 5 / 120
    ) + UTM_FALSE_EASTING

    northing = UTM_K0 * (
        m + n * tan_lat * (
            a ** 2 / 2
            + (5 - t + 9 * c + 4 * c * c) * a ** 4 / 24
            + (61 - 58 * t + t * t + 600 * c - 330 * ep2) * a ** 6 / 720
        )
    )

    zone_letter = 'N'
    if lat < 0:
        northing += UTM_FALSE_NORTHING
        zone_letter = 'S'

    return UTMCoordinate(
        round_half_up(easting, UTM_PRECISION),
        round_half_up(northing, UTM_PRECISION),
        zone_number,
        zone_letter,
    )


def _utm_to_coordinate(utm: UTMCoordinate) -> Coordinate:
    e2 = WGS84_E2
    ep2 = e2 / (1 - e2)
    e1 = (1 - math.sqrt(1 - e2)) / (1 + math.sqrt(1 - e2))

    x = utm.easting - UTM_FALSE_EASTING
    y = utm.northing
    if utm.zone_letter == 'S':
        y -= UTM_FALSE_NORTHING

    # Footpoint latitude
    m = y / UTM_K0
    mu = m / (WGS84_A * (1 - e2 / 4 - 3 * e2 * e2 / 64 - 5 * e2 * e2 * e2 / 256))
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1 ** 3 / 32) * math.sin(2 * mu)
        + (21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32) * math.sin(4 * mu)
        + (151 * e1 ** 3 / 96) * math.sin(6 * mu)
    )

    sin_phi1, cos_phi1, tan_phi1 = math.sin(phi1), math.cos(phi1), math.tan(phi1)
    n1 = WGS84_A / math.sqrt(1 - e2 * sin_phi1 * sin_phi1)
    t1 = tan_phi1 * tan_phi1
    c1 = ep2 * cos_phi1 * cos_phi1
    r1 = WGS84_A * (1 - e2) / math.pow(1 - e2 * sin_phi1 * sin_phi1, 1.5)
    d = x / (n1 * UTM_K0)

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d ** 2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 * c1 - 9 * ep2) * d ** 4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 * t1 - 252 * ep2 - 3 * c1 * c1) * d ** 6 / 720
    )
    lon = (
        d
        - (1 + 2 * t1 + c1) * d ** 3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 * c1 + 8 * ep2 + 24 * t1 * t1) * d ** 5 / 120
    ) / cos_phi1

    lon_deg = _central_meridian(utm.zone_number) + radians_to_degrees(lon)
    # Zone 0 is centered on -183 degrees
    if lon_deg < -180:
        lon_deg += 360
    elif lon_deg > 180:
        lon_deg -= 360

    try:
        return Coordinate(
            round_half_up(lon_deg, GEOGRAPHIC_PRECISION),
            round_half_up(radians_to_degrees(lat), GEOGRAPHIC_PRECISION),
        )
    except InvalidArgumentError as exc:
        raise InvalidArgumentError(
            f"{utm!r} lies outside the UTM grid and can't be converted: {exc}"
        ) from exc


def utm_to_geographic(
    utm: UTMCoordinate,
    accuracy: Optional[Union[float, int, str]] = None
) -> Union[Coordinate, BoundingBox, None]:
    """
    Converts a UTM coordinate to latitude/longitude.

    Latitude and longitude are rounded (half up) to 8 decimal places.

    Args:
        utm:
            The UTM coordinate

        accuracy: (float)
            (Optional) The size of the grid cell the UTM coordinate refers to, in meters.
            When provided, a BoundingBox spanning from the coordinate to the coordinate
            offset by the accuracy in both easting and northing is returned instead
            of a single Coordinate.

    Returns:
        Coordinate, a BoundingBox if accuracy was provided, or None if the zone number
        is outside [0, 60]

    Raises:
        InvalidArgumentError
            If the accuracy is not a positive number, or the northing lies beyond
            the pole
    """
    if not 0 <= utm.zone_number <= 60:
        LOGGER.warning('Invalid UTM zone number %s; no conversion performed.', utm.zone_number)
        return None

    coordinate = _utm_to_coordinate(utm)
    if accuracy is None:
        return coordinate

    accuracy = parse_float(accuracy, 'accuracy')
    if accuracy <= 0:
        raise InvalidArgumentError(f'accuracy must be positive, received {accuracy}')

    top_right = _utm_to_coordinate(
        UTMCoordinate(
            utm.easting + accuracy,
            utm.northing + accuracy,
            utm.zone_number,
            utm.zone_letter
        )
    )
    return BoundingBox(
        top=top_right.latitude,
        right=top_right.longitude,
        bottom=coordinate.latitude,
        left=coordinate.longitude,
    )


def mgrs_bounding_box(mgrs_str: str) -> BoundingBox:
    """
    Calculates the extent of the grid cell referenced by a (possibly truncated) MGRS
    string. Each pair of digits dropped from the full 10-digit reference widens
    the cell tenfold, e.g. '31NAA660210' refers to a 100m square.

    Args:
        mgrs_str:
            The MGRS reference, e.g. '31NAA6602100000'

    Returns:
        BoundingBox
    """
    mgrs_str = mgrs_str.replace(' ', '').upper()
    digits = len(mgrs_str) - len(mgrs_str.rstrip('0123456789'))
    if digits % 2 or digits > 10:
        raise InvalidArgumentError(f'Malformed MGRS reference: {mgrs_str}')

    import mgrs  # pylint: disable=import-outside-toplevel
    _MGRS = mgrs.MGRS()

    # The south-west corner, in the zone the reference names
    zone, hemisphere, easting, northing = _MGRS.MGRSToUTM(mgrs_str)
    if isinstance(hemisphere, bytes):
        hemisphere = hemisphere.decode()

    accuracy = 10 ** (5 - digits // 2)
    return utm_to_geographic(UTMCoordinate(easting, northing, zone, hemisphere), accuracy)
