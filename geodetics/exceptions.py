"""
Exceptions raised by geodetics
"""

__all__ = ['ConvergenceError', 'GeodeticsError', 'InvalidArgumentError']


class GeodeticsError(Exception):
    """Base class for all geodetics errors"""


class InvalidArgumentError(GeodeticsError, ValueError):
    """A coordinate, bearing, distance or other input could not be used"""


class ConvergenceError(GeodeticsError, ArithmeticError):
    """
    An iterative geodesic solution failed to converge within its iteration budget.

    Usually signals (nearly) antipodal points; no reliable solution exists for the input.
    """
