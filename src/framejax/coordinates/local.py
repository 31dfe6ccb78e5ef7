"""North-East-Down (NED) local frame transformations.

The NED frame at a geodetic point has X toward geodetic north, Y toward
east and Z along the inward ellipsoid normal.  Vectors are rotated between
ECEF and NED, and optionally translated so that the NED origin is the
geodetic point itself.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.coordinates.ellipsoid import WGS84, Ellipsoid
from framejax.coordinates.geodetic import geodetic_to_ecef
from framejax.rotations import angle_to_dcm


def rotation_ecef_to_ned(lat: ArrayLike, lon: ArrayLike) -> Array:
    """DCM that rotates ECEF into the NED frame at ``(lat, lon)``.

    Args:
        lat: Geodetic latitude [rad].
        lon: Longitude [rad].

    Returns:
        jax.Array: 3x3 rotation matrix (ECEF -> NED).
    """
    dtype = get_dtype()
    lat = jnp.asarray(lat, dtype=dtype)
    lon = jnp.asarray(lon, dtype=dtype)
    return angle_to_dcm(lon, -(lat + jnp.pi / 2.0), 0.0, "ZYX")


def ecef_to_ned(
    r_ecef: ArrayLike,
    lat: ArrayLike,
    lon: ArrayLike,
    h: ArrayLike,
    translate: bool = False,
    ellipsoid: Ellipsoid = WGS84,
) -> Array:
    """Express an ECEF vector in the NED frame at a geodetic point.

    Args:
        r_ecef: ECEF vector [m].
        lat: Geodetic latitude of the NED origin [rad].
        lon: Longitude of the NED origin [rad].
        h: Height of the NED origin above the ellipsoid [m].  Used only
            when ``translate`` is ``True``.
        translate: If ``True``, treat ``r_ecef`` as a position and return
            it relative to the NED origin.  Otherwise only rotate.
        ellipsoid: Reference ellipsoid of the NED origin. Default: WGS84.

    Returns:
        jax.Array: Vector in NED [m].

    Examples:
        ```python
        from framejax.coordinates import ecef_to_ned
        r_ned = ecef_to_ned([7000e3, 0.0, 0.0], 0.0, 0.0, 0.0, translate=True)
        # [0, 0, -621863]
        ```
    """
    r_ecef = jnp.asarray(r_ecef, dtype=get_dtype())
    if translate:
        r_ecef = r_ecef - geodetic_to_ecef(lat, lon, h, ellipsoid)
    return rotation_ecef_to_ned(lat, lon) @ r_ecef


def ned_to_ecef(
    r_ned: ArrayLike,
    lat: ArrayLike,
    lon: ArrayLike,
    h: ArrayLike,
    translate: bool = False,
    ellipsoid: Ellipsoid = WGS84,
) -> Array:
    """Express a NED vector in ECEF.  Inverse of :func:`ecef_to_ned`.

    Args:
        r_ned: Vector in NED [m].
        lat: Geodetic latitude of the NED origin [rad].
        lon: Longitude of the NED origin [rad].
        h: Height of the NED origin above the ellipsoid [m].
        translate: If ``True``, add the ECEF position of the NED origin.
        ellipsoid: Reference ellipsoid of the NED origin. Default: WGS84.

    Returns:
        jax.Array: ECEF vector [m].
    """
    r_ned = jnp.asarray(r_ned, dtype=get_dtype())
    r_ecef = rotation_ecef_to_ned(lat, lon).T @ r_ned
    if translate:
        r_ecef = r_ecef + geodetic_to_ecef(lat, lon, h, ellipsoid)
    return r_ecef
