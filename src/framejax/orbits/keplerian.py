"""Keplerian element <-> Cartesian state conversions.

Converts between :class:`KeplerianElements` (true anomaly form) and
:class:`OrbitStateVector`.  The position and velocity are built from the
perifocal P and Q unit vectors (Montenbruck & Gill Eq. 2.43-2.44), and the
elements are recovered from the angular momentum and vis-viva
(Eq. 2.56-2.68).

All inputs and outputs use SI base units (metres, metres/second, radians)
unless another gravitational parameter is given.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 2.2.
"""

from __future__ import annotations

import jax.numpy as jnp

from framejax.config import get_dtype
from framejax.constants import GM_EARTH
from framejax.orbits.anomalies import (
    check_eccentricity,
    eccentric_to_true_anomaly,
    true_to_eccentric_anomaly,
)
from framejax.orbits.state_vector import KeplerianElements, OrbitStateVector, state_vector
from framejax.utils import wrap_to_2pi


def keplerian_to_cartesian(elements: KeplerianElements, gm: float = GM_EARTH) -> OrbitStateVector:
    """Convert Keplerian elements to a Cartesian state.

    Args:
        elements: Osculating elements.  ``e`` must be in ``[0, 1)``.
        gm: Gravitational parameter. Default: ``GM_EARTH`` [m^3/s^2].

    Returns:
        OrbitStateVector: State at ``elements.t`` with zero acceleration.

    Raises:
        ValueError: If a concrete eccentricity is outside ``[0, 1)``.

    Examples:
        ```python
        from framejax.orbits import KeplerianElements, keplerian_to_cartesian
        oe = KeplerianElements(2453101.8, 7000e3, 0.01, 0.9, 0.3, 0.5, 1.0)
        sv = keplerian_to_cartesian(oe)
        ```
    """
    check_eccentricity(elements.e)

    dtype = get_dtype()
    a = jnp.asarray(elements.a, dtype=dtype)
    e = jnp.asarray(elements.e, dtype=dtype)
    i = jnp.asarray(elements.i, dtype=dtype)
    raan = jnp.asarray(elements.raan, dtype=dtype)
    argp = jnp.asarray(elements.argp, dtype=dtype)

    E = true_to_eccentric_anomaly(elements.f, e)

    cos_o = jnp.cos(argp)
    sin_o = jnp.sin(argp)
    cos_R = jnp.cos(raan)
    sin_R = jnp.sin(raan)
    cos_i = jnp.cos(i)
    sin_i = jnp.sin(i)

    P = jnp.array(
        [
            cos_o * cos_R - sin_o * cos_i * sin_R,
            cos_o * sin_R + sin_o * cos_i * cos_R,
            sin_o * sin_i,
        ]
    )
    Q = jnp.array(
        [
            -sin_o * cos_R - cos_o * cos_i * sin_R,
            -sin_o * sin_R + cos_o * cos_i * cos_R,
            cos_o * sin_i,
        ]
    )

    cos_E = jnp.cos(E)
    sin_E = jnp.sin(E)
    sqrt_1me2 = jnp.sqrt(1.0 - e * e)

    r = a * (cos_E - e) * P + a * sqrt_1me2 * sin_E * Q
    v = (jnp.sqrt(gm * a) / jnp.linalg.norm(r)) * (-sin_E * P + sqrt_1me2 * cos_E * Q)

    return state_vector(elements.t, r, v)


def cartesian_to_keplerian(sv: OrbitStateVector, gm: float = GM_EARTH) -> KeplerianElements:
    """Convert a Cartesian state to osculating Keplerian elements.

    Only ``sv.r`` and ``sv.v`` are used.  Angles are wrapped to ``[0, 2pi)``.

    Args:
        sv: Cartesian state of a closed orbit.
        gm: Gravitational parameter. Default: ``GM_EARTH`` [m^3/s^2].

    Returns:
        KeplerianElements: Elements at ``sv.t``.
    """
    dtype = get_dtype()
    r = jnp.asarray(sv.r, dtype=dtype)
    v = jnp.asarray(sv.v, dtype=dtype)

    r_mag = jnp.linalg.norm(r)
    v_mag = jnp.linalg.norm(v)

    h = jnp.cross(r, v)
    W = h / jnp.linalg.norm(h)

    i = jnp.arctan2(jnp.sqrt(W[0] * W[0] + W[1] * W[1]), W[2])
    raan = jnp.arctan2(W[0], -W[1])

    p = jnp.dot(h, h) / gm
    a = 1.0 / (2.0 / r_mag - v_mag * v_mag / gm)
    n = jnp.sqrt(gm / jnp.abs(a) ** 3)

    # Clamp (1 - p/a) so round-off on circular orbits cannot reach sqrt of a negative
    e = jnp.sqrt(jnp.maximum(1.0 - p / a, 0.0))

    E = jnp.arctan2(jnp.dot(r, v) / (n * a * a), 1.0 - r_mag / a)
    f = eccentric_to_true_anomaly(E, e)

    # Argument of latitude
    u = jnp.arctan2(r[2], -r[0] * W[1] + r[1] * W[0])

    return KeplerianElements(
        t=jnp.asarray(sv.t, dtype=dtype),
        a=a,
        e=e,
        i=i,
        raan=wrap_to_2pi(raan),
        argp=wrap_to_2pi(u - f),
        f=f,
    )
