"""
Constants declarations for geodetics
"""

# WGS84 Ellipsoid Constants
WGS84_A = 6378137.0  # Semi-major axis (meters)
WGS84_B = 6356752.314245  # Semi-minor axis (meters)
WGS84_F = 1 / 298.257223563  # Flattening
WGS84_E2 = 0.006694380004260827  # First eccentricity squared

# UTM projection
UTM_K0 = 0.9996  # Scale factor on the central meridian
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING = 10_000_000.0  # Southern hemisphere only
UTM_MIN_LATITUDE = -80.0
UTM_MAX_LATITUDE = 84.0

# Spherical approximations use the equatorial radius
EARTH_RADIUS_METERS = WGS84_A
