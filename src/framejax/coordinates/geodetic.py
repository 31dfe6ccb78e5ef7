"""Geodetic (ellipsoidal) coordinate transformations.

Converts between geodetic latitude, longitude and ellipsoidal height and
Earth-Centered Earth-Fixed (ECEF) Cartesian coordinates.  Both directions
are closed-form, so they trace under ``jax.jit`` without loops.

All inputs and outputs use SI base units (metres, radians).

References:
    1. NIMA Technical Report TR8350.2, *Department of Defense World Geodetic
       System 1984*.
    2. u-blox AG, *Datum Transformations of GPS Positions*, Application
       Note GPS.G1-X-00006, 1999.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.coordinates.ellipsoid import WGS84, Ellipsoid

# cos(1 deg); closer to the poles the height is taken from z
_COS_1DEG = 0.01745240643728351


def geodetic_to_ecef(
    lat: ArrayLike,
    lon: ArrayLike,
    h: ArrayLike,
    ellipsoid: Ellipsoid = WGS84,
) -> Array:
    """Convert geodetic coordinates to an ECEF position.

    Uses the prime vertical radius of curvature:

    .. math::

        N = \\frac{a}{\\sqrt{1 - e^2 \\sin^2 \\phi}}

    Args:
        lat: Geodetic latitude [rad].
        lon: Longitude [rad].
        h: Height above the ellipsoid [m].
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        jax.Array: ECEF position ``[x, y, z]`` in *m*.

    Examples:
        ```python
        from framejax.coordinates import geodetic_to_ecef
        r = geodetic_to_ecef(0.0, 0.0, 0.0)  # [6378137., 0., 0.]
        ```
    """
    dtype = get_dtype()
    lat = jnp.asarray(lat, dtype=dtype)
    lon = jnp.asarray(lon, dtype=dtype)
    h = jnp.asarray(h, dtype=dtype)

    sin_lat = jnp.sin(lat)
    cos_lat = jnp.cos(lat)

    N = ellipsoid.a / jnp.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat)
    b_over_a2 = (ellipsoid.b / ellipsoid.a) ** 2

    x = (N + h) * cos_lat * jnp.cos(lon)
    y = (N + h) * cos_lat * jnp.sin(lon)
    z = (b_over_a2 * N + h) * sin_lat

    return jnp.stack([x, y, z])


def ecef_to_geodetic(r_ecef: ArrayLike, ellipsoid: Ellipsoid = WGS84) -> tuple[Array, Array, Array]:
    """Convert an ECEF position to geodetic coordinates.

    Closed-form solution with the parametric latitude as the auxiliary
    angle.  Within one degree of the poles the height is computed from the
    Z component, where ``p / cos(lat)`` loses precision.

    Args:
        r_ecef: ECEF position ``[x, y, z]`` in *m*.
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        Tuple of (latitude [rad], longitude [rad], height [m]).

    Examples:
        ```python
        from framejax.constants import WGS84_a
        from framejax.coordinates import ecef_to_geodetic
        lat, lon, h = ecef_to_geodetic([WGS84_a, 0.0, 0.0])  # (0, 0, 0)
        ```
    """
    r_ecef = jnp.asarray(r_ecef, dtype=get_dtype())
    x, y, z = r_ecef[0], r_ecef[1], r_ecef[2]

    a = ellipsoid.a
    b = ellipsoid.b
    e2 = ellipsoid.e2

    p = jnp.sqrt(x * x + y * y)
    theta = jnp.arctan2(z * a, p * b)
    sin_t = jnp.sin(theta)
    cos_t = jnp.cos(theta)

    lon = jnp.arctan2(y, x)
    lat = jnp.arctan2(z + ellipsoid.el2 * b * sin_t**3, p - e2 * a * cos_t**3)

    sin_lat = jnp.sin(lat)
    cos_lat = jnp.cos(lat)
    N = a / jnp.sqrt(1.0 - e2 * sin_lat * sin_lat)

    near_pole = jnp.abs(cos_lat) < _COS_1DEG
    safe_cos = jnp.where(near_pole, 1.0, cos_lat)
    safe_sin = jnp.where(near_pole, sin_lat, 1.0)
    h = jnp.where(near_pole, z / safe_sin - N * (1.0 - e2), p / safe_cos - N)

    return lat, lon, h
