"""
Representation of a specific point on earth
"""

__all__ = ['Coordinate']

from typing import Any, Dict, Tuple, Union

from geodetics.exceptions import InvalidArgumentError
from geodetics.utils.functions import parse_float


class Coordinate:
    """
    Representation of a coordinate on the WGS84 ellipsoid (i.e., a lon/lat pair).

    Coordinates are immutable. Unlike a free-floating map position, values are not
    wrapped around the poles or the antimeridian; anything outside
    [-180, 180] x [-90, 90] is rejected.

    Args:
        longitude:
            Longitude in degrees, as a number or numeric string

        latitude:
            Latitude in degrees, as a number or numeric string

    Raises:
        InvalidArgumentError
    """

    __slots__ = ('_longitude', '_latitude')

    def __init__(
        self,
        longitude: Union[float, int, str],
        latitude: Union[float, int, str],
    ):
        lon = parse_float(longitude, 'longitude')
        lat = parse_float(latitude, 'latitude')

        if not -90 <= lat <= 90:
            raise InvalidArgumentError(f'latitude must be within [-90, 90], received {lat}')

        if not -180 <= lon <= 180:
            raise InvalidArgumentError(f'longitude must be within [-180, 180], received {lon}')

        self._longitude = lon
        self._latitude = lat

    @property
    def longitude(self) -> float:
        return self._longitude

    @property
    def latitude(self) -> float:
        return self._latitude

    def __eq__(self, other):
        if not isinstance(other, Coordinate):
            return False

        return (
            self.latitude == other.latitude and
            self.longitude == other.longitude
        )

    def __hash__(self):
        return hash((self.longitude, self.latitude))

    def __repr__(self):
        return f'<Coordinate({self.longitude}, {self.latitude})>'

    @classmethod
    def from_mgrs(cls, mgrs_str: str):
        """Create a Coordinate object from a MGRS string"""
        import mgrs  # pylint: disable=import-outside-toplevel
        _MGRS = mgrs.MGRS()

        # Spaces in the mgrs string can produce inaccurate coordinates
        lat, lon = _MGRS.toLatLon(mgrs_str.replace(' ', ''))
        return Coordinate(lon, lat)

    def to_float(self, reverse: bool = False) -> Tuple[float, float]:
        """
        Converts the coordinate to a tuple of floats (longitude, latitude).

        Args:
            reverse: (bool)
                (Default False) If True, reverses the coordinate order to (latitude, longitude)

        Returns:
            Tuple of (longitude, latitude)
        """
        if reverse:
            return self.latitude, self.longitude

        return self.longitude, self.latitude

    def to_geojson(self) -> Dict[str, Any]:
        """Converts the coordinate to a GeoJSON Point geometry"""
        return {
            'type': 'Point',
            'coordinates': list(self.to_float())
        }

    def to_mgrs(self) -> str:
        """Convert this coordinate to a MGRS string"""
        import mgrs  # pylint: disable=import-outside-toplevel
        _MGRS = mgrs.MGRS()

        return _MGRS.toMGRS(self.latitude, self.longitude)
