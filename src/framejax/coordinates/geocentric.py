"""Geocentric coordinates and their relation to geodetic coordinates.

Geocentric latitude is measured from the equatorial plane to the position
vector, as opposed to the geodetic latitude which is measured to the
ellipsoid normal.

All inputs and outputs use SI base units (metres, radians).

References:
    1. K. M. Borkowski, *Accurate algorithms to transform geocentric to
       geodetic coordinates*, Bulletin Geodesique 63, 50-56, 1989.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.coordinates.ellipsoid import WGS84, Ellipsoid


def ecef_to_geocentric(r_ecef: ArrayLike) -> tuple[Array, Array, Array]:
    """Convert an ECEF position to geocentric coordinates.

    Args:
        r_ecef: ECEF position ``[x, y, z]``.

    Returns:
        Tuple of (geocentric latitude [rad], longitude [rad], distance from
        the Earth center, in the unit of ``r_ecef``).
    """
    r_ecef = jnp.asarray(r_ecef, dtype=get_dtype())
    x, y, z = r_ecef[0], r_ecef[1], r_ecef[2]

    rho2 = x * x + y * y
    lat = jnp.arctan2(z, jnp.sqrt(rho2))
    lon = jnp.arctan2(y, x)
    r = jnp.sqrt(rho2 + z * z)

    return lat, lon, r


def geocentric_to_ecef(lat: ArrayLike, lon: ArrayLike, r: ArrayLike) -> Array:
    """Convert geocentric coordinates to an ECEF position.

    Args:
        lat: Geocentric latitude [rad].
        lon: Longitude [rad].
        r: Distance from the Earth center.

    Returns:
        jax.Array: ECEF position ``[x, y, z]`` in the unit of ``r``.
    """
    dtype = get_dtype()
    lat = jnp.asarray(lat, dtype=dtype)
    lon = jnp.asarray(lon, dtype=dtype)
    r = jnp.asarray(r, dtype=dtype)

    return jnp.stack(
        [
            r * jnp.cos(lat) * jnp.cos(lon),
            r * jnp.cos(lat) * jnp.sin(lon),
            r * jnp.sin(lat),
        ]
    )


def geocentric_to_geodetic(
    lat_gc: ArrayLike,
    r: ArrayLike,
    ellipsoid: Ellipsoid = WGS84,
) -> tuple[Array, Array]:
    """Convert geocentric latitude and distance to geodetic latitude and height.

    Uses Borkowski's closed-form solution of the quartic.  The point must
    not lie on the polar axis.

    Args:
        lat_gc: Geocentric latitude [rad].
        r: Distance from the Earth center [m].
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        Tuple of (geodetic latitude [rad], height above the ellipsoid [m]).

    Examples:
        ```python
        from framejax.coordinates import geocentric_to_geodetic
        lat, h = geocentric_to_geodetic(0.0, 6378137.0 + 500e3)  # (0, 500e3)
        ```
    """
    dtype = get_dtype()
    lat_gc = jnp.asarray(lat_gc, dtype=dtype)
    r = jnp.asarray(r, dtype=dtype)

    re = r * jnp.cos(lat_gc)
    z = r * jnp.sin(lat_gc)

    a = ellipsoid.a
    a2 = a * a
    b = jnp.where(z >= 0.0, ellipsoid.b, -ellipsoid.b)
    b2 = b * b

    E = (b * z - (a2 - b2)) / (a * re)
    F = (b * z + (a2 - b2)) / (a * re)
    P = 4.0 / 3.0 * (E * F + 1.0)
    Q = 2.0 * (E * E - F * F)
    D = P**3 + Q * Q

    # One real root when D >= 0, otherwise the trigonometric form
    sqrt_d = jnp.sqrt(jnp.maximum(D, 0.0))
    v_real = jnp.cbrt(sqrt_d - Q) - jnp.cbrt(Q + sqrt_d)

    sqrt_mp = jnp.sqrt(jnp.maximum(-P, jnp.finfo(dtype).tiny))
    cos_arg = jnp.clip(Q / (P * sqrt_mp), -1.0, 1.0)
    v_trig = 2.0 * sqrt_mp * jnp.cos(jnp.arccos(cos_arg) / 3.0)

    v = jnp.where(D >= 0.0, v_real, v_trig)

    G = (jnp.sqrt(E * E + v) + E) / 2.0
    t = jnp.sqrt(G * G + (F - v * G) / (2.0 * G - E)) - G

    lat_gd = jnp.arctan(a * (1.0 - t * t) / (2.0 * b * t))
    h = (re - a * t) * jnp.cos(lat_gd) + (z - b) * jnp.sin(lat_gd)

    return lat_gd, h


def geodetic_to_geocentric(
    lat_gd: ArrayLike,
    h: ArrayLike,
    ellipsoid: Ellipsoid = WGS84,
) -> tuple[Array, Array]:
    """Convert geodetic latitude and height to geocentric latitude and distance.

    Args:
        lat_gd: Geodetic latitude [rad].
        h: Height above the ellipsoid [m].
        ellipsoid: Reference ellipsoid. Default: WGS84.

    Returns:
        Tuple of (geocentric latitude [rad], distance from the Earth center [m]).
    """
    dtype = get_dtype()
    lat_gd = jnp.asarray(lat_gd, dtype=dtype)
    h = jnp.asarray(h, dtype=dtype)

    sin_lat = jnp.sin(lat_gd)
    cos_lat = jnp.cos(lat_gd)
    e2 = ellipsoid.e2

    N = ellipsoid.a / jnp.sqrt(1.0 - e2 * sin_lat * sin_lat)

    rho = (N + h) * cos_lat
    z = (N * (1.0 - e2) + h) * sin_lat
    r = jnp.sqrt(rho * rho + z * z)

    return jnp.arcsin(z / r), r
