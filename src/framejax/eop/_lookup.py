"""JIT-compatible EOP interpolation and query functions.

All functions use only JAX primitives (``jnp.searchsorted``, array indexing,
``jnp.where``) and are fully compatible with ``jax.jit``, ``jax.vmap``,
and ``jax.grad``.  Queries outside the tabulated range hold the boundary
value; they never fail.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.constants import JD_J2000
from framejax.eop._types import EopIau1980, EopIau2000A, EopSeries


def query(series: EopSeries, jd: ArrayLike) -> Array:
    """Linearly interpolate an EOP channel at the given Julian Date.

    Uses ``jnp.searchsorted`` for O(log n) lookup, then linear interpolation
    between the bracketing knots.  Outside the knot range the value of the
    nearest knot is returned.

    Args:
        series: The channel to query.
        jd: Julian Date [UTC], scalar or array.

    Returns:
        Interpolated channel value, same shape as ``jd``.

    Examples:
        ```python
        from framejax.eop import query, static_eop_iau1980
        eop = static_eop_iau1980(ut1_utc=-0.44)
        query(eop.ut1_utc, 2453101.83)  # -0.44
        ```
    """
    jd = jnp.asarray(jd, dtype=series.jd.dtype)
    n = series.jd.shape[0]

    # idx is the insertion point (right side)
    idx = jnp.searchsorted(series.jd, jd, side="right")

    idx_lo = jnp.clip(idx - 1, 0, n - 1)
    idx_hi = jnp.clip(idx, 0, n - 1)

    jd_lo = series.jd[idx_lo]
    jd_hi = series.jd[idx_hi]
    val_lo = series.values[idx_lo]
    val_hi = series.values[idx_hi]

    # Clamped queries have jd_lo == jd_hi and fall back to frac = 0.
    djd = jd_hi - jd_lo
    frac = jnp.where(djd > 0.0, (jd - jd_lo) / jnp.where(djd > 0.0, djd, 1.0), 0.0)
    return val_lo + frac * (val_hi - val_lo)


def get_pm(eop: EopIau1980 | EopIau2000A, jd: ArrayLike) -> tuple[Array, Array]:
    """Query the polar motion components.

    Returns:
        Tuple of (x, y) [arcsec].
    """
    return query(eop.x, jd), query(eop.y, jd)


def get_ut1_utc(eop: EopIau1980 | EopIau2000A, jd: ArrayLike) -> Array:
    """Query UT1-UTC [s]."""
    return query(eop.ut1_utc, jd)


def get_lod(eop: EopIau1980 | EopIau2000A, jd: ArrayLike) -> Array:
    """Query the excess length of day [ms]."""
    return query(eop.lod, jd)


def get_nutation_corrections(eop: EopIau1980, jd: ArrayLike) -> tuple[Array, Array]:
    """Query the IAU-1980 nutation corrections.

    Returns:
        Tuple of (ddeps, ddpsi) [mas].
    """
    return query(eop.ddeps, jd), query(eop.ddpsi, jd)


def get_cip_corrections(eop: EopIau2000A, jd: ArrayLike) -> tuple[Array, Array]:
    """Query the celestial pole offsets.

    Returns:
        Tuple of (dx, dy) [mas].
    """
    return query(eop.dx, jd), query(eop.dy, jd)


def dxdy_to_ddeps_ddpsi(eop: EopIau2000A, jd: ArrayLike) -> tuple[Array, Array]:
    """Map the celestial pole offsets onto nutation corrections.

    The equinox-based IAU-2006 transformations are corrected in longitude
    and obliquity, while the IERS publishes the offsets of the CIP (dX, dY).
    The two parameterizations are related by a linear map built from the
    luni-solar and planetary precession rates (IERS Conventions 2010,
    eq. 5.26)::

        dX = ddpsi * sin(eps0) + aux * ddeps
        dY = ddeps - aux * ddpsi * sin(eps0)

    with ``aux = psi_a * cos(eps0) - chi_a``.  This function solves that
    system for ``(ddeps, ddpsi)``.

    Args:
        eop: IAU-2000A EOP series.
        jd: Julian Date at which to query the offsets.

    Returns:
        Tuple of (ddeps, ddpsi), in the unit of the offsets [mas].
    """
    dx, dy = get_cip_corrections(eop, jd)

    a2r = jnp.pi / 648000.0
    t = (jnp.asarray(jd, dtype=eop.dx.jd.dtype) - JD_J2000) / 36525.0

    # Luni-solar and planetary precession [rad]
    psi_a = ((-0.001147 * t - 1.07259) * t + 5038.47875) * t * a2r
    chi_a = ((-0.001125 * t - 2.38064) * t + 10.5526) * t * a2r

    s_eps0 = jnp.sin(84381.406 * a2r)
    c_eps0 = jnp.cos(84381.406 * a2r)
    aux = psi_a * c_eps0 - chi_a
    den = aux**2 * s_eps0 + s_eps0

    ddeps = (aux * s_eps0 * dx + s_eps0 * dy) / den
    ddpsi = (dx - aux * dy) / den
    return ddeps, ddpsi
