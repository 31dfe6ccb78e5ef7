"""Orbit state containers."""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype


class OrbitStateVector(NamedTuple):
    """Cartesian orbit state at an epoch.

    Distances may be in any unit as long as velocity and acceleration use
    the same one per second.  ``v`` and ``a`` left as ``None`` are zero
    vectors; :func:`state_vector` fills them in.

    Attributes:
        t: Epoch, Julian Date [UTC].
        r: Position, shape ``(3,)``.
        v: Velocity, shape ``(3,)``.
        a: Acceleration, shape ``(3,)``.
    """

    t: Array
    r: Array
    v: Array | None = None
    a: Array | None = None


class KeplerianElements(NamedTuple):
    """Osculating Keplerian elements at an epoch.

    Attributes:
        t: Epoch, Julian Date [UTC].
        a: Semi-major axis [m].
        e: Eccentricity.
        i: Inclination [rad].
        raan: Right ascension of the ascending node [rad].
        argp: Argument of perigee [rad].
        f: True anomaly [rad].
    """

    t: Array
    a: Array
    e: Array
    i: Array
    raan: Array
    argp: Array
    f: Array


def state_vector(
    t: ArrayLike,
    r: ArrayLike,
    v: ArrayLike | None = None,
    a: ArrayLike | None = None,
) -> OrbitStateVector:
    """Build an :class:`OrbitStateVector` with arrays of the configured dtype.

    Args:
        t: Epoch, Julian Date [UTC].
        r: Position, shape ``(3,)``.
        v: Velocity. Defaults to zero.
        a: Acceleration. Defaults to zero.

    Returns:
        OrbitStateVector: State with every field populated.

    Examples:
        ```python
        from framejax.orbits import state_vector
        sv = state_vector(2453101.827411, [5102.509, 6123.011, 6378.136])
        sv.v  # Array([0., 0., 0.], dtype=float64)
        ```
    """
    dtype = get_dtype()
    zero = jnp.zeros(3, dtype=dtype)
    return OrbitStateVector(
        t=jnp.asarray(t, dtype=dtype),
        r=jnp.asarray(r, dtype=dtype),
        v=zero if v is None else jnp.asarray(v, dtype=dtype),
        a=zero if a is None else jnp.asarray(a, dtype=dtype),
    )


def as_state_vector(sv: OrbitStateVector) -> OrbitStateVector:
    """Return ``sv`` with dtype-coerced arrays and zero-filled ``v``/``a``."""
    return state_vector(sv.t, sv.r, sv.v, sv.a)
