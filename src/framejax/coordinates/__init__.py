"""Coordinate transformations.

This sub-module provides functions for converting between common
coordinate representations of Earth-fixed positions:

- **Geodetic**: ellipsoid latitude, longitude and height <-> ECEF
- **Geocentric**: geocentric latitude, longitude and radius <-> ECEF, and
  geocentric <-> geodetic latitude (Borkowski)
- **Local NED**: North-East-Down frame at a geodetic point
"""

from .ellipsoid import WGS84, Ellipsoid, create_ellipsoid
from .geocentric import (
    ecef_to_geocentric,
    geocentric_to_ecef,
    geocentric_to_geodetic,
    geodetic_to_geocentric,
)
from .geodetic import ecef_to_geodetic, geodetic_to_ecef
from .local import ecef_to_ned, ned_to_ecef, rotation_ecef_to_ned

__all__ = [
    "WGS84",
    "Ellipsoid",
    "create_ellipsoid",
    "ecef_to_geocentric",
    "geocentric_to_ecef",
    "geocentric_to_geodetic",
    "geodetic_to_geocentric",
    "ecef_to_geodetic",
    "geodetic_to_ecef",
    "ecef_to_ned",
    "ned_to_ecef",
    "rotation_ecef_to_ned",
]
