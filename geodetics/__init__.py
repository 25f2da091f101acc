
import sys

from geodetics._version import __version__  # noqa: F401
from geodetics.utils.logging import LOGGER
from geodetics.conversion import degrees_to_radians, radians_to_degrees
from geodetics.coordinates import Coordinate
from geodetics.exceptions import ConvergenceError, GeodeticsError, InvalidArgumentError
from geodetics.geodesic import (
    Bearings, DirectResult, GeodesicSolution,
    bearings_between, direct_geodesic, haversine_distance, inverse_geodesic
)
from geodetics.utm import BoundingBox, UTMCoordinate, geographic_to_utm, utm_to_geographic
from geodetics.utils.conditional_imports import ConditionalPackageInterceptor


ConditionalPackageInterceptor.permit_packages(
    {
        'geographiclib': 'geodetics[karney]',
        'mgrs': 'geodetics[mgrs]',
    }
)
sys.meta_path.append(ConditionalPackageInterceptor)  # type: ignore

__all__ = [
    'Bearings',
    'BoundingBox',
    'ConvergenceError',
    'Coordinate',
    'DirectResult',
    'GeodesicSolution',
    'GeodeticsError',
    'InvalidArgumentError',
    'UTMCoordinate',
    'bearings_between',
    'degrees_to_radians',
    'direct_geodesic',
    'geographic_to_utm',
    'haversine_distance',
    'inverse_geodesic',
    'radians_to_degrees',
    'utm_to_geographic',
    'LOGGER',
]
