"""Conversions between the mean, eccentric and true anomalies.

All functions use JAX operations and are compatible with ``jax.jit``,
``jax.vmap`` and ``jax.grad``.  Results are wrapped into ``[0, 2pi)`` (or
``[0, 360)`` with ``use_degrees=True``).  Inputs are coerced to the
configured float dtype (see :func:`framejax.config.set_dtype`).

Kepler's equation is solved by Newton-Raphson inside ``jax.lax.fori_loop``.
The loop always runs ``max_iterations`` steps; once the residual falls
below machine epsilon the update is frozen, so the result is the same as
an early exit.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.utils import from_radians, to_radians, wrap_to_2pi


def check_eccentricity(e: ArrayLike) -> None:
    """Raise ``ValueError`` if a concrete eccentricity is outside ``[0, 1)``.

    Traced values cannot be inspected and are accepted as they are.
    """
    try:
        invalid = bool(jnp.any((jnp.asarray(e) < 0.0) | (jnp.asarray(e) >= 1.0)))
    except jax.errors.ConcretizationTypeError:
        return
    if invalid:
        raise ValueError(f"Eccentricity must be in [0, 1), got {e}")


def mean_to_eccentric_anomaly(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    max_iterations: int = 10,
) -> Array:
    """Convert mean anomaly to eccentric anomaly.

    Solves ``M = E - e * sin(E)`` for ``E``.  The initial guess is
    ``M - e`` when ``M > pi`` and ``M + e`` otherwise.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity, in ``[0, 1)``.
        use_degrees: If ``True``, input and output are in degrees.
        max_iterations: Newton-Raphson iteration count. Values below 1
            fall back to 10.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*

    Raises:
        ValueError: If a concrete ``e`` is outside ``[0, 1)``.

    Examples:
        ```python
        from framejax.orbits import mean_to_eccentric_anomaly
        E = mean_to_eccentric_anomaly(235.4, 0.4, use_degrees=True)  # 220.512...
        ```
    """
    check_eccentricity(e)
    if max_iterations < 1:
        max_iterations = 10

    dtype = get_dtype()
    e = jnp.asarray(e, dtype=dtype)
    M = wrap_to_2pi(to_radians(jnp.asarray(anm_mean, dtype=dtype), use_degrees))

    tol = jnp.finfo(dtype).eps
    E0 = jnp.where(M > jnp.pi, M - e, M + e)

    def newton_step(_, E):
        f = E - e * jnp.sin(E) - M
        step = f / (1.0 - e * jnp.cos(E))
        return E - jnp.where(jnp.abs(f) <= tol, 0.0, step)

    E = jax.lax.fori_loop(0, max_iterations, newton_step, E0)
    return from_radians(wrap_to_2pi(E), use_degrees)


def eccentric_to_mean_anomaly(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to mean anomaly (Kepler's equation).

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Mean anomaly. Units: *rad* or *deg*
    """
    dtype = get_dtype()
    E = to_radians(jnp.asarray(anm_ecc, dtype=dtype), use_degrees)
    e = jnp.asarray(e, dtype=dtype)
    return from_radians(wrap_to_2pi(E - e * jnp.sin(E)), use_degrees)


def eccentric_to_true_anomaly(anm_ecc: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert eccentric anomaly to true anomaly.

    Uses the half-angle form ``f = 2 atan2(sqrt(1+e) sin(E/2), sqrt(1-e) cos(E/2))``.

    Args:
        anm_ecc: Eccentric anomaly. Units: *rad* or *deg*
        e: Eccentricity.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        True anomaly. Units: *rad* or *deg*

    References:
        D. Vallado, *Fundamentals of Astrodynamics and Applications
        (4th Ed.)*, pp. 47, eq. 2-9, 2013.
    """
    dtype = get_dtype()
    E = to_radians(jnp.asarray(anm_ecc, dtype=dtype), use_degrees)
    e = jnp.asarray(e, dtype=dtype)
    f = 2.0 * jnp.arctan2(jnp.sqrt(1.0 + e) * jnp.sin(E / 2.0), jnp.sqrt(1.0 - e) * jnp.cos(E / 2.0))
    return from_radians(wrap_to_2pi(f), use_degrees)


def true_to_eccentric_anomaly(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to eccentric anomaly.

    Args:
        anm_true: True anomaly. Units: *rad* or *deg*
        e: Eccentricity.
        use_degrees: If ``True``, input and output are in degrees.

    Returns:
        Eccentric anomaly. Units: *rad* or *deg*
    """
    dtype = get_dtype()
    f = to_radians(jnp.asarray(anm_true, dtype=dtype), use_degrees)
    e = jnp.asarray(e, dtype=dtype)
    E = 2.0 * jnp.arctan2(jnp.sqrt(1.0 - e) * jnp.sin(f / 2.0), jnp.sqrt(1.0 + e) * jnp.cos(f / 2.0))
    return from_radians(wrap_to_2pi(E), use_degrees)


def mean_to_true_anomaly(
    anm_mean: ArrayLike,
    e: ArrayLike,
    use_degrees: bool = False,
    max_iterations: int = 10,
) -> Array:
    """Convert mean anomaly to true anomaly.

    Composite conversion: mean -> eccentric -> true.

    Args:
        anm_mean: Mean anomaly. Units: *rad* or *deg*
        e: Eccentricity, in ``[0, 1)``.
        use_degrees: If ``True``, input and output are in degrees.
        max_iterations: Newton-Raphson iteration count.

    Returns:
        True anomaly. Units: *rad* or *deg*
    """
    E = mean_to_eccentric_anomaly(anm_mean, e, use_degrees, max_iterations)
    return eccentric_to_true_anomaly(E, e, use_degrees)


def true_to_mean_anomaly(anm_true: ArrayLike, e: ArrayLike, use_degrees: bool = False) -> Array:
    """Convert true anomaly to mean anomaly (true -> eccentric -> mean)."""
    E = true_to_eccentric_anomaly(anm_true, e, use_degrees)
    return eccentric_to_mean_anomaly(E, e, use_degrees)
