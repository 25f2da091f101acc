"""
Geodesic calculation module.

Vincenty's inverse and direct solutions on the WGS84 ellipsoid, with a spherical
(Haversine) alternative and a Karney (geographiclib) reference implementation.
geodesic_algorithm looks up the distance, destination and bearing functions of
each algorithm by name.
"""

__all__ = [
    'Bearings', 'DirectResult', 'GeodesicSolution',
    'bearings_between', 'direct_geodesic', 'inverse_geodesic',
    'haversine_bearing', 'haversine_destination', 'haversine_distance',
    'karney_bearing', 'karney_destination', 'karney_direct', 'karney_distance',
    'karney_inverse',
    'vincenty_bearing', 'vincenty_destination', 'vincenty_distance',
    'GeodesicAlgorithm', 'geodesic_algorithm',
]

import math
from typing import Callable, Literal, NamedTuple, Optional, Union

from geodetics._const import EARTH_RADIUS_METERS, WGS84_A, WGS84_B, WGS84_F
from geodetics.conversion import degrees_to_radians, radians_to_degrees
from geodetics.coordinates import Coordinate
from geodetics.exceptions import ConvergenceError, InvalidArgumentError
from geodetics.utils.functions import normalize_bearing, parse_float, round_half_up
from geodetics.utils.logging import LOGGER

VINCENTY_INVERSE_MAX_ITERATIONS = 100
VINCENTY_DIRECT_MAX_ITERATIONS = 200
VINCENTY_TOLERANCE = 1e-12

# Distances resolve to 0.1mm, destinations to 10 decimal places
DISTANCE_PRECISION = 4
DESTINATION_PRECISION = 10


class GeodesicSolution(NamedTuple):
    """Solution to the inverse geodesic problem"""
    distance: float
    initial_bearing: float
    final_bearing: float


class Bearings(NamedTuple):
    """Forward azimuths at the start and end of a geodesic, in degrees"""
    initial_bearing: float
    final_bearing: float


class DirectResult(NamedTuple):
    """Solution to the direct geodesic problem"""
    destination: Coordinate
    final_bearing: float


def _parse_bearing_and_distance(bearing, distance):
    bearing = parse_float(bearing, 'bearing')
    distance = parse_float(distance, 'distance')
    if distance < 0:
        raise InvalidArgumentError(f'distance must not be negative, received {distance}')

    return bearing, distance


def _normalize_longitude(lon_rad: float) -> float:
    """Wraps a longitude in radians to [-pi, pi)"""
    return (lon_rad + 3 * math.pi) % (2 * math.pi) - math.pi


def _ellipsoid_series(cos_sq_alpha: float):
    """Vincenty's A and B coefficients (eq. 3, 4)"""
    u_sq = cos_sq_alpha * (WGS84_A ** 2 - WGS84_B ** 2) / (WGS84_B ** 2)
    a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    return a, b


def _delta_sigma(b: float, sin_sigma: float, cos_sigma: float, cos_2sigma_m: float) -> float:
    """Vincenty eq. 6"""
    return b * sin_sigma * (
        cos_2sigma_m + b / 4 * (
            cos_sigma * (-1 + 2 * cos_2sigma_m ** 2) -
            b / 6 * cos_2sigma_m * (-3 + 4 * sin_sigma ** 2) * (-3 + 4 * cos_2sigma_m ** 2)
        )
    )


def _reduced_latitude(lat: float):
    """Returns sin and cos of the reduced latitude"""
    tan_u = (1 - WGS84_F) * math.tan(degrees_to_radians(lat))
    cos_u = 1 / math.sqrt(1 + tan_u ** 2)
    return tan_u * cos_u, cos_u


# -------------------------------------------------------------------------
# Vincenty Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _solve_inverse(coord1: Coordinate, coord2: Coordinate) -> Optional[GeodesicSolution]:
    """
    Vincenty's inverse formula. Returns None if lambda fails to converge within
    VINCENTY_INVERSE_MAX_ITERATIONS.
    """
    L = degrees_to_radians(coord2.longitude) - degrees_to_radians(coord1.longitude)
    sinU1, cosU1 = _reduced_latitude(coord1.latitude)
    sinU2, cosU2 = _reduced_latitude(coord2.latitude)

    Lambda = L
    for _ in range(VINCENTY_INVERSE_MAX_ITERATIONS):
        sinLambda, cosLambda = math.sin(Lambda), math.cos(Lambda)

        # eq. 14
        sinSigma = math.sqrt(
            (cosU2 * sinLambda) ** 2 +
            (cosU1 * sinU2 - sinU1 * cosU2 * cosLambda) ** 2
        )
        if sinSigma == 0:
            # Coincident points
            return GeodesicSolution(0.0, 0.0, 0.0)

        # eq. 15 - 17
        cosSigma = sinU1 * sinU2 + cosU1 * cosU2 * cosLambda
        sigma = math.atan2(sinSigma, cosSigma)
        sinAlpha = cosU1 * cosU2 * sinLambda / sinSigma
        cosSqAlpha = 1 - sinAlpha ** 2

        # eq. 18; both points on the equator leaves cosSqAlpha at 0
        cos2SigmaM = cosSigma - 2 * sinU1 * sinU2 / cosSqAlpha if cosSqAlpha != 0 else 0.

        # eq. 10, 11
        C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))
        Lambda_prev = Lambda
        Lambda = L + (1 - C) * WGS84_F * sinAlpha * (
            sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
        )

        if abs(Lambda - Lambda_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        return None

    A, B = _ellipsoid_series(cosSqAlpha)
    s = WGS84_B * A * (sigma - _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM))

    # eq. 20
    alpha1 = math.atan2(cosU2 * sinLambda, cosU1 * sinU2 - sinU1 * cosU2 * cosLambda)
    alpha2 = math.atan2(cosU1 * sinLambda, -sinU1 * cosU2 + cosU1 * sinU2 * cosLambda)

    return GeodesicSolution(
        round_half_up(s, DISTANCE_PRECISION),
        normalize_bearing(alpha1),
        normalize_bearing(alpha2),
    )


def inverse_geodesic(
    coord1: Coordinate,
    coord2: Coordinate,
    include_bearings: bool = False
) -> Union[float, GeodesicSolution]:
    """
    Calculate the distance between two coordinates using Vincenty's inverse formula.

    Adapted from http://www.movable-type.co.uk/scripts/latlong-vincenty.html

    Args:
        coord1:
            The start point Coordinate

        coord2:
            The finish point Coordinate

        include_bearings: (bool)
            (Default False) If True, returns the distance along with the initial and final
            bearings. Coincident points report bearings of 0.

    Returns:
        The distance in meters, rounded to 4 decimal places, or a GeodesicSolution

    Raises:
        ConvergenceError
            If the formula fails to converge, typically for (nearly) antipodal points
    """
    solution = _solve_inverse(coord1, coord2)
    if solution is None:
        LOGGER.debug(
            'Vincenty inverse formula did not converge for %s -> %s', coord1, coord2
        )
        raise ConvergenceError(
            f'Vincenty inverse formula failed to converge within '
            f'{VINCENTY_INVERSE_MAX_ITERATIONS} iterations'
        )

    if include_bearings:
        return solution

    return solution.distance


def bearings_between(coord1: Coordinate, coord2: Coordinate) -> Bearings:
    """
    Calculate the initial and final bearings (forward azimuths at each point) of the
    geodesic between two coordinates.

    Raises:
        ConvergenceError
    """
    solution = inverse_geodesic(coord1, coord2, include_bearings=True)
    return Bearings(solution.initial_bearing, solution.final_bearing)


def _solve_direct(start: Coordinate, bearing: float, distance: float) -> Optional[DirectResult]:
    """
    Vincenty's direct formula. Returns None if sigma fails to converge within
    VINCENTY_DIRECT_MAX_ITERATIONS.
    """
    alpha1 = degrees_to_radians(bearing)
    sinAlpha1, cosAlpha1 = math.sin(alpha1), math.cos(alpha1)

    sinU1, cosU1 = _reduced_latitude(start.latitude)
    sigma1 = math.atan2(sinU1 / cosU1, cosAlpha1)
    sinAlpha = cosU1 * sinAlpha1
    cosSqAlpha = 1 - sinAlpha ** 2
    A, B = _ellipsoid_series(cosSqAlpha)

    sigma = distance / (WGS84_B * A)
    for _ in range(VINCENTY_DIRECT_MAX_ITERATIONS):
        cos2SigmaM = math.cos(2 * sigma1 + sigma)
        sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
        sigma_prev = sigma
        sigma = distance / (WGS84_B * A) + _delta_sigma(B, sinSigma, cosSigma, cos2SigmaM)

        if abs(sigma - sigma_prev) <= VINCENTY_TOLERANCE:
            break
    else:
        return None

    sinSigma, cosSigma = math.sin(sigma), math.cos(sigma)
    cos2SigmaM = math.cos(2 * sigma1 + sigma)

    tmp = sinU1 * sinSigma - cosU1 * cosSigma * cosAlpha1
    lat2 = math.atan2(
        sinU1 * cosSigma + cosU1 * sinSigma * cosAlpha1,
        (1 - WGS84_F) * math.sqrt(sinAlpha ** 2 + tmp ** 2)
    )
    lambda_val = math.atan2(
        sinSigma * sinAlpha1,
        cosU1 * cosSigma - sinU1 * sinSigma * cosAlpha1
    )
    C = WGS84_F / 16 * cosSqAlpha * (4 + WGS84_F * (4 - 3 * cosSqAlpha))
    L = lambda_val - (1 - C) * WGS84_F * sinAlpha * (
        sigma + C * sinSigma * (cos2SigmaM + C * cosSigma * (-1 + 2 * cos2SigmaM ** 2))
    )
    lon2 = _normalize_longitude(degrees_to_radians(start.longitude) + L)
    alpha2 = math.atan2(sinAlpha, -tmp)

    return DirectResult(
        Coordinate(
            round_half_up(radians_to_degrees(lon2), DESTINATION_PRECISION),
            round_half_up(radians_to_degrees(lat2), DESTINATION_PRECISION),
        ),
        normalize_bearing(alpha2),
    )


def direct_geodesic(
    start: Coordinate,
    bearing: Union[float, str],
    distance: Union[float, str],
) -> DirectResult:
    """
    Calculate the destination reached by travelling a distance along a geodesic
    from a start point, using Vincenty's direct formula.

    Adapted from http://www.movable-type.co.uk/scripts/latlong-vincenty.html

    Args:
        start:
            The starting Coordinate

        bearing:
            The initial bearing, in degrees clockwise from North

        distance:
            The distance to travel, in meters

    Returns:
        DirectResult holding the destination (rounded to 10 decimal places) and the
        final bearing

    Raises:
        InvalidArgumentError
            If the bearing or distance is not numeric, or the distance is negative

        ConvergenceError
            If the formula fails to converge
    """
    bearing, distance = _parse_bearing_and_distance(bearing, distance)

    result = _solve_direct(start, bearing, distance)
    if result is None:
        LOGGER.debug(
            'Vincenty direct formula did not converge for %s, bearing %s, distance %s',
            start, bearing, distance
        )
        raise ConvergenceError(
            f'Vincenty direct formula failed to converge within '
            f'{VINCENTY_DIRECT_MAX_ITERATIONS} iterations'
        )

    return result


def vincenty_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """Calculate distance in meters using Vincenty's inverse formula (WGS84 ellipsoid)."""
    return inverse_geodesic(coord1, coord2)


def vincenty_destination(start: Coordinate, bearing_degrees: float, distance: float) -> Coordinate:
    """Calculate destination using Vincenty's direct formula."""
    return direct_geodesic(start, bearing_degrees, distance).destination


def vincenty_bearing(start: Coordinate, end: Coordinate) -> float:
    """Calculate the initial bearing (forward azimuth) using Vincenty's inverse formula."""
    return bearings_between(start, end).initial_bearing


# -------------------------------------------------------------------------
# Haversine Implementation (Spherical)
# -------------------------------------------------------------------------

def haversine_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """
    Calculate distance in meters using the Haversine formula, on a sphere with the
    WGS84 equatorial radius. Within about 0.5% of the ellipsoidal distance.

    From: R.W. Sinnott, "Virtues of the Haversine", Sky and Telescope, vol 68, no 2, 1984
    """
    lon1, lat1 = degrees_to_radians(coord1.longitude), degrees_to_radians(coord1.latitude)
    lon2, lat2 = degrees_to_radians(coord2.longitude), degrees_to_radians(coord2.latitude)

    dlon = lon2 - lon1
    dlat = lat2 - lat1

    a = (math.sin(dlat / 2) ** 2 +
         math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2)
    # Rounding can push a just past 1 for antipodal points
    a = min(1.0, a)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_METERS * c


def haversine_destination(
        start: Coordinate,
        bearing_degrees: Union[float, str],
        distance: Union[float, str],
) -> Coordinate:
    """
    Calculate destination point using spherical trigonometry. The result is rounded to
    10 decimal places.

    Raises:
        InvalidArgumentError
            If the bearing or distance is not numeric, or the distance is negative
    """
    bearing_degrees, distance = _parse_bearing_and_distance(bearing_degrees, distance)

    lon1 = degrees_to_radians(start.longitude)
    lat1 = degrees_to_radians(start.latitude)
    bearing_rad = degrees_to_radians(bearing_degrees)

    ang_dist = distance / EARTH_RADIUS_METERS

    lat2 = math.asin(math.sin(lat1) * math.cos(ang_dist) +
                     math.cos(lat1) * math.sin(ang_dist) * math.cos(bearing_rad))

    lon2 = lon1 + math.atan2(math.sin(bearing_rad) * math.sin(ang_dist) * math.cos(lat1),
                             math.cos(ang_dist) - math.sin(lat1) * math.sin(lat2))

    return Coordinate(
        round_half_up(radians_to_degrees(_normalize_longitude(lon2)), DESTINATION_PRECISION),
        round_half_up(radians_to_degrees(lat2), DESTINATION_PRECISION),
    )


def haversine_bearing(start: Coordinate, end: Coordinate) -> float:
    """Calculate initial bearing using spherical trigonometry."""
    lon1, lat1 = degrees_to_radians(start.longitude), degrees_to_radians(start.latitude)
    lon2, lat2 = degrees_to_radians(end.longitude), degrees_to_radians(end.latitude)

    dlon = lon2 - lon1

    y = math.sin(dlon) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(dlon)

    return normalize_bearing(math.atan2(y, x))


# -------------------------------------------------------------------------
# Karney Implementation (Ellipsoidal)
# -------------------------------------------------------------------------

def _azimuth_to_bearing(azimuth: float) -> float:
    # geographiclib returns azimuths in [-180, 180]
    return (azimuth + 360) % 360


def karney_inverse(coord1: Coordinate, coord2: Coordinate) -> GeodesicSolution:
    """
    Solve the inverse problem using Karney's algorithm (via geographiclib).
    Robust against antipodal points and convergence failures.

    Returns:
        GeodesicSolution, with the distance rounded to 4 decimal places. Coincident
        points report bearings of 0.
    """
    from geographiclib.geodesic import Geodesic

    res = Geodesic.WGS84.Inverse(
        coord1.latitude, coord1.longitude,
        coord2.latitude, coord2.longitude
    )
    if res['s12'] == 0:
        return GeodesicSolution(0.0, 0.0, 0.0)

    return GeodesicSolution(
        round_half_up(res['s12'], DISTANCE_PRECISION),
        _azimuth_to_bearing(res['azi1']),
        _azimuth_to_bearing(res['azi2']),
    )


def karney_direct(
        start: Coordinate,
        bearing: Union[float, str],
        distance: Union[float, str],
) -> DirectResult:
    """
    Solve the direct problem using Karney's algorithm (via geographiclib).

    Raises:
        InvalidArgumentError
            If the bearing or distance is not numeric, or the distance is negative
    """
    from geographiclib.geodesic import Geodesic

    bearing, distance = _parse_bearing_and_distance(bearing, distance)

    # Direct takes (lat1, lon1, azi1, s12)
    res = Geodesic.WGS84.Direct(
        start.latitude, start.longitude,
        bearing, distance
    )
    lon2 = _normalize_longitude(degrees_to_radians(res['lon2']))

    return DirectResult(
        Coordinate(
            round_half_up(radians_to_degrees(lon2), DESTINATION_PRECISION),
            round_half_up(res['lat2'], DESTINATION_PRECISION),
        ),
        _azimuth_to_bearing(res['azi2']),
    )


def karney_distance(coord1: Coordinate, coord2: Coordinate) -> float:
    """Calculate distance in meters using Karney's algorithm."""
    return karney_inverse(coord1, coord2).distance


def karney_destination(start: Coordinate, bearing_degrees: float, distance: float) -> Coordinate:
    """Calculate destination using Karney's algorithm."""
    return karney_direct(start, bearing_degrees, distance).destination


def karney_bearing(start: Coordinate, end: Coordinate) -> float:
    """Calculate initial bearing using Karney's algorithm."""
    return karney_inverse(start, end).initial_bearing


# -------------------------------------------------------------------------
# Algorithm Lookup
# -------------------------------------------------------------------------

class GeodesicAlgorithm(NamedTuple):
    """The distance, destination and bearing functions of one geodesic algorithm"""
    distance: Callable[[Coordinate, Coordinate], float]
    destination: Callable[[Coordinate, float, float], Coordinate]
    bearing: Callable[[Coordinate, Coordinate], float]


_ALGORITHMS = {
    'haversine': GeodesicAlgorithm(
        haversine_distance,
        haversine_destination,
        haversine_bearing
    ),
    'vincenty': GeodesicAlgorithm(
        vincenty_distance,
        vincenty_destination,
        vincenty_bearing
    ),
    'karney': GeodesicAlgorithm(
        karney_distance,
        karney_destination,
        karney_bearing
    ),
}


def geodesic_algorithm(
    algorithm: Literal['haversine', 'vincenty', 'karney'] = 'vincenty'
) -> GeodesicAlgorithm:
    """
    Look up the functions implementing a geodesic algorithm. Nothing is registered
    or switched globally; callers hold on to the returned functions.

    Args:
        algorithm: 'haversine', 'vincenty' (default) or 'karney'

    Raises:
        ValueError
            If the algorithm is unknown
    """
    if algorithm not in _ALGORITHMS:
        raise ValueError(f"Unknown algorithm '{algorithm}'. Options: {list(_ALGORITHMS.keys())}")

    return _ALGORITHMS[algorithm]
