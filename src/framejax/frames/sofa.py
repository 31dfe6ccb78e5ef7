"""JAX kernels of the IAU 2006 precession-nutation model, after IAU SOFA.

Provides the quantities needed by the CIO-based and equinox-based IAU-2006
reductions:

- fundamental arguments (IERS Conventions 2003)
- mean obliquity and Fukushima-Williams precession angles (IAU 2006)
- nutation, IAU 2000B luni-solar series with the fixed planetary offset and
  the IAU 2006 J2 rate adjustment
- CIP coordinates X, Y and the CIO locator s
- Earth rotation angle, TIO locator s' and the complementary terms of the
  equation of the equinoxes

The 77-term IAU 2000B series keeps the CIP within about 1 mas of the full
IAU 2000A model between 1995 and 2050.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.

All time arguments are single Julian Dates.  Functions respect
:func:`~framejax.config.get_dtype` for float precision.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.constants import AS2RAD, DAYS_PER_CENTURY, JD_J2000, TURNAS
from framejax.frames._nutation_2000b import LUNI_SOLAR_2000B
from framejax.rotations import Rx, Rz

D2PI: float = 6.283185307179586476925287
"""2*pi."""

# Units of 0.1 microarcsecond to radians
_U2R: float = AS2RAD / 1e7

# Fixed offsets standing in for the IAU 2000A planetary nutation [rad]
_DPPLAN: float = -0.135e-3 * AS2RAD
_DEPLAN: float = 0.388e-3 * AS2RAD


def _centuries(jd: ArrayLike) -> Array:
    return (jnp.asarray(jd, dtype=get_dtype()) - JD_J2000) / DAYS_PER_CENTURY


def _horner(t: Array, coeffs: tuple[float, ...]) -> Array:
    acc = jnp.zeros_like(t) + coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = acc * t + c
    return acc


# ---------------------------------------------------------------------------
# Fundamental arguments (IERS Conventions 2003)
# ---------------------------------------------------------------------------

# Delaunay arguments l, l', F, D, Omega as polynomials in t [arcsec]
# fmt: off
_DELAUNAY_2003 = (
    (485868.249036, 1717915923.2178, 31.8792, 0.051635, -0.00024470),
    (1287104.793048, 129596581.0481, -0.5532, 0.000136, -0.00001149),
    (335779.526232, 1739527262.8478, -12.7512, -0.001037, 0.00000417),
    (1072260.703692, 1602961601.2090, -6.3706, 0.006593, -0.00003169),
    (450160.398036, -6962890.5431, 7.4722, 0.007702, -0.00005939),
)
# fmt: on


def fundamental_arguments(t: ArrayLike) -> Array:
    """Fundamental arguments used by the CIO locator and equinox series.

    Args:
        t: TT Julian centuries since J2000.0.

    Returns:
        Array of shape ``(8,)`` with the mean anomaly of the Moon and of the
        Sun, the mean argument of latitude of the Moon, the mean elongation
        of the Moon from the Sun, the mean longitude of the lunar node, the
        mean longitudes of Venus and Earth, and the general accumulated
        precession in longitude [rad].
    """
    t = jnp.asarray(t, dtype=get_dtype())
    delaunay = [jnp.fmod(_horner(t, c), TURNAS) * AS2RAD for c in _DELAUNAY_2003]

    # Venus, Earth, accumulated precession
    l_venus = jnp.fmod(3.176146697 + 1021.3285546211 * t, D2PI)
    l_earth = jnp.fmod(1.753470314 + 628.3075849991 * t, D2PI)
    p_a = (0.024381750 + 0.00000538691 * t) * t

    return jnp.stack([*delaunay, l_venus, l_earth, p_a])


# ---------------------------------------------------------------------------
# Precession
# ---------------------------------------------------------------------------


def obl06(jd_tt: ArrayLike) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Obliquity of the ecliptic [rad].
    """
    t = _centuries(jd_tt)
    return _horner(
        t, (84381.406, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434)
    ) * AS2RAD


def pfw06(jd_tt: ArrayLike) -> tuple[Array, Array, Array, Array]:
    """Precession angles, IAU 2006, Fukushima-Williams 4-angle formulation.

    The angles include the frame bias.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (gamb, phib, psib, epsa) [rad].
    """
    t = _centuries(jd_tt)

    gamb = _horner(
        t, (-0.052928, 10.556378, 0.4932044, -0.00031238, -0.000002788, 0.0000000260)
    ) * AS2RAD
    phib = _horner(
        t, (84381.412819, -46.811016, 0.0511268, 0.00053289, -0.000000440, -0.0000000176)
    ) * AS2RAD
    psib = _horner(
        t, (-0.041775, 5038.481484, 1.5584175, -0.00018522, -0.000026452, -0.0000000148)
    ) * AS2RAD

    return gamb, phib, psib, obl06(jd_tt)


def precession_rates_iau2006(jd_tt: ArrayLike) -> tuple[Array, Array, Array]:
    """Precession quantities of the equinox-based chain (IERS 2010, eq. 5.39).

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (psi_a, omega_a, chi_a) [rad]: the luni-solar precession,
        the inclination of the mean equator on the fixed ecliptic, and the
        planetary precession.
    """
    t = _centuries(jd_tt)

    psi_a = _horner(
        t, (0.0, 5038.481507, -1.0790069, -0.00114045, 0.000132851, -0.0000000951)
    ) * AS2RAD
    omega_a = _horner(
        t, (84381.406, -0.025754, 0.0512623, -0.00772503, -0.000000467, 0.0000003337)
    ) * AS2RAD
    chi_a = _horner(
        t, (0.0, 10.556403, -2.3814292, -0.00121197, 0.000170663, -0.0000000560)
    ) * AS2RAD

    return psi_a, omega_a, chi_a


# ---------------------------------------------------------------------------
# Nutation
# ---------------------------------------------------------------------------


def nut00b(jd_tt: ArrayLike) -> tuple[Array, Array]:
    """Nutation, IAU 2000B model.

    Sums the 77 luni-solar terms with linear fundamental arguments and adds
    the fixed offsets that replace the planetary series.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (dpsi, deps), nutation in longitude and obliquity [rad].
    """
    dtype = get_dtype()
    t = _centuries(jd_tt)

    el = jnp.fmod(485868.249036 + 1717915923.2178 * t, TURNAS) * AS2RAD
    elp = jnp.fmod(1287104.79305 + 129596581.0481 * t, TURNAS) * AS2RAD
    f = jnp.fmod(335779.526232 + 1739527262.8478 * t, TURNAS) * AS2RAD
    d = jnp.fmod(1072260.70369 + 1602961601.2090 * t, TURNAS) * AS2RAD
    om = jnp.fmod(450160.398036 - 6962890.5431 * t, TURNAS) * AS2RAD

    ls = jnp.array(LUNI_SOLAR_2000B, dtype=dtype)
    args = jnp.fmod(ls[:, :5] @ jnp.stack([el, elp, f, d, om]), D2PI)
    sarg = jnp.sin(args)
    carg = jnp.cos(args)

    dp = jnp.sum((ls[:, 5] + ls[:, 6] * t) * sarg + ls[:, 7] * carg)
    de = jnp.sum((ls[:, 8] + ls[:, 9] * t) * carg + ls[:, 10] * sarg)

    return dp * _U2R + _DPPLAN, de * _U2R + _DEPLAN


def nut06b(jd_tt: ArrayLike) -> tuple[Array, Array]:
    """IAU 2000B nutation adjusted to the IAU 2006 precession.

    Applies the J2 secular-rate factor of Capitaine et al. (2005) to the
    :func:`nut00b` series.  This is the truncated counterpart of SOFA's
    ``nut06a``, which sums the full IAU 2000A luni-solar and planetary
    series.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (dpsi, deps), nutation in longitude and obliquity [rad].
    """
    t = _centuries(jd_tt)
    fj2 = -2.7774e-6 * t

    dp, de = nut00b(jd_tt)

    return dp + dp * (0.4697e-6 + fj2), de + de * fj2


# ---------------------------------------------------------------------------
# Bias-precession-nutation and CIP coordinates
# ---------------------------------------------------------------------------


def fw2m(gamb: ArrayLike, phib: ArrayLike, psi: ArrayLike, eps: ArrayLike) -> Array:
    """Fukushima-Williams angles to rotation matrix.

    ``NxPxB = R_1(-eps) . R_3(-psi) . R_1(phib) . R_3(gamb)``

    Args:
        gamb: F-W angle gamma_bar [rad].
        phib: F-W angle phi_bar [rad].
        psi: F-W angle psi [rad].
        eps: F-W angle epsilon [rad].

    Returns:
        3x3 bias-precession-nutation matrix.
    """
    return Rx(-eps) @ Rz(-psi) @ Rx(phib) @ Rz(gamb)


def pnm06b(jd_tt: ArrayLike) -> Array:
    """Bias-precession-nutation matrix (GCRF -> true equator and equinox), 2000B nutation."""
    gamb, phib, psib, epsa = pfw06(jd_tt)
    dpsi, deps = nut06b(jd_tt)
    return fw2m(gamb, phib, psib + dpsi, epsa + deps)


def bpn2xy(rbpn: Array) -> tuple[Array, Array]:
    """CIP X, Y coordinates: the bottom row of the BPN matrix."""
    return rbpn[2, 0], rbpn[2, 1]


# ---------------------------------------------------------------------------
# CIO locator s
# ---------------------------------------------------------------------------

# Polynomial part of s + XY/2 [arcsec]
_S06_POLY = (94.00e-6, 3808.65e-6, -122.68e-6, -72574.11e-6, 27.98e-6, 15.62e-6)

# Periodic part of s + XY/2.  Each row is (power of t, 8 multipliers of the
# fundamental arguments, sine coefficient, cosine coefficient) [arcsec].
# fmt: off
_S06_TERMS = (
    (0,  0,  0,  0,  0,  1,  0,  0,  0, -2640.73e-6, 0.39e-6),
    (0,  0,  0,  0,  0,  2,  0,  0,  0, -63.53e-6, 0.02e-6),
    (0,  0,  0,  2, -2,  3,  0,  0,  0, -11.75e-6, -0.01e-6),
    (0,  0,  0,  2, -2,  1,  0,  0,  0, -11.21e-6, -0.01e-6),
    (0,  0,  0,  2, -2,  2,  0,  0,  0, 4.57e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  3,  0,  0,  0, -2.02e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  1,  0,  0,  0, -1.98e-6, 0.00e-6),
    (0,  0,  0,  0,  0,  3,  0,  0,  0, 1.72e-6, 0.00e-6),
    (0,  0,  1,  0,  0,  1,  0,  0,  0, 1.41e-6, 0.01e-6),
    (0,  0,  1,  0,  0, -1,  0,  0,  0, 1.26e-6, 0.01e-6),
    (0,  1,  0,  0,  0, -1,  0,  0,  0, 0.63e-6, 0.00e-6),
    (0,  1,  0,  0,  0,  1,  0,  0,  0, 0.63e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  3,  0,  0,  0, -0.46e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  1,  0,  0,  0, -0.45e-6, 0.00e-6),
    (0,  0,  0,  4, -4,  4,  0,  0,  0, -0.36e-6, 0.00e-6),
    (0,  0,  0,  1, -1,  1, -8, 12,  0, 0.24e-6, 0.12e-6),
    (0,  0,  0,  2,  0,  0,  0,  0,  0, -0.32e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  2,  0,  0,  0, -0.28e-6, 0.00e-6),
    (0,  1,  0,  2,  0,  3,  0,  0,  0, -0.27e-6, 0.00e-6),
    (0,  1,  0,  2,  0,  1,  0,  0,  0, -0.26e-6, 0.00e-6),
    (0,  0,  0,  2, -2,  0,  0,  0,  0, 0.21e-6, 0.00e-6),
    (0,  0,  1, -2,  2, -3,  0,  0,  0, -0.19e-6, 0.00e-6),
    (0,  0,  1, -2,  2, -1,  0,  0,  0, -0.18e-6, 0.00e-6),
    (0,  0,  0,  0,  0,  0,  8, -13, -1, 0.10e-6, -0.05e-6),
    (0,  0,  0,  0,  2,  0,  0,  0,  0, -0.15e-6, 0.00e-6),
    (0,  2,  0, -2,  0, -1,  0,  0,  0, 0.14e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  2,  0,  0,  0, 0.14e-6, 0.00e-6),
    (0,  1,  0,  0, -2,  1,  0,  0,  0, -0.14e-6, 0.00e-6),
    (0,  1,  0,  0, -2, -1,  0,  0,  0, -0.14e-6, 0.00e-6),
    (0,  0,  0,  4, -2,  4,  0,  0,  0, -0.13e-6, 0.00e-6),
    (0,  0,  0,  2, -2,  4,  0,  0,  0, 0.11e-6, 0.00e-6),
    (0,  1,  0, -2,  0, -3,  0,  0,  0, -0.11e-6, 0.00e-6),
    (0,  1,  0, -2,  0, -1,  0,  0,  0, -0.11e-6, 0.00e-6),
    (1,  0,  0,  0,  0,  2,  0,  0,  0, -0.07e-6, 3.57e-6),
    (1,  0,  0,  0,  0,  1,  0,  0,  0, 1.73e-6, -0.03e-6),
    (1,  0,  0,  2, -2,  3,  0,  0,  0, 0.00e-6, 0.48e-6),
    (2,  0,  0,  0,  0,  1,  0,  0,  0, 743.52e-6, -0.17e-6),
    (2,  0,  0,  2, -2,  2,  0,  0,  0, 56.91e-6, 0.06e-6),
    (2,  0,  0,  2,  0,  2,  0,  0,  0, 9.84e-6, -0.01e-6),
    (2,  0,  0,  0,  0,  2,  0,  0,  0, -8.85e-6, 0.01e-6),
    (2,  0,  1,  0,  0,  0,  0,  0,  0, -6.38e-6, -0.05e-6),
    (2,  1,  0,  0,  0,  0,  0,  0,  0, -3.07e-6, 0.00e-6),
    (2,  0,  1,  2, -2,  2,  0,  0,  0, 2.23e-6, 0.00e-6),
    (2,  0,  0,  2,  0,  1,  0,  0,  0, 1.67e-6, 0.00e-6),
    (2,  1,  0,  2,  0,  2,  0,  0,  0, 1.30e-6, 0.00e-6),
    (2,  0,  1, -2,  2, -2,  0,  0,  0, 0.93e-6, 0.00e-6),
    (2,  1,  0,  0, -2,  0,  0,  0,  0, 0.68e-6, 0.00e-6),
    (2,  0,  0,  2, -2,  1,  0,  0,  0, -0.55e-6, 0.00e-6),
    (2,  1,  0, -2,  0, -2,  0,  0,  0, 0.53e-6, 0.00e-6),
    (2,  0,  0,  0,  2,  0,  0,  0,  0, -0.27e-6, 0.00e-6),
    (2,  1,  0,  0,  0,  1,  0,  0,  0, -0.27e-6, 0.00e-6),
    (2,  1,  0, -2, -2, -2,  0,  0,  0, -0.26e-6, 0.00e-6),
    (2,  1,  0,  0,  0, -1,  0,  0,  0, -0.25e-6, 0.00e-6),
    (2,  1,  0,  2,  0,  1,  0,  0,  0, 0.22e-6, 0.00e-6),
    (2,  2,  0,  0, -2,  0,  0,  0,  0, -0.21e-6, 0.00e-6),
    (2,  2,  0, -2,  0, -1,  0,  0,  0, 0.20e-6, 0.00e-6),
    (2,  0,  0,  2,  2,  2,  0,  0,  0, 0.17e-6, 0.00e-6),
    (2,  2,  0,  2,  0,  2,  0,  0,  0, 0.13e-6, 0.00e-6),
    (2,  2,  0,  0,  0,  0,  0,  0,  0, -0.13e-6, 0.00e-6),
    (2,  1,  0,  2, -2,  2,  0,  0,  0, -0.12e-6, 0.00e-6),
    (2,  0,  0,  2,  0,  0,  0,  0,  0, -0.11e-6, 0.00e-6),
    (3,  0,  0,  0,  0,  1,  0,  0,  0, 0.30e-6, -23.42e-6),
    (3,  0,  0,  2, -2,  2,  0,  0,  0, -0.03e-6, -1.46e-6),
    (3,  0,  0,  2,  0,  2,  0,  0,  0, -0.01e-6, -0.25e-6),
    (3,  0,  0,  0,  0,  2,  0,  0,  0, 0.00e-6, 0.23e-6),
    (4,  0,  0,  0,  0,  1,  0,  0,  0, -0.26e-6, -0.01e-6),
)
# fmt: on


def _periodic_by_power(terms: tuple, fa: Array, n_powers: int) -> Array:
    """Sum periodic terms into one coefficient per power of t."""
    table = jnp.array(terms, dtype=get_dtype())
    powers = table[:, 0].astype(jnp.int32)
    args = table[:, 1:9] @ fa
    values = table[:, 9] * jnp.sin(args) + table[:, 10] * jnp.cos(args)
    return jnp.zeros(n_powers, dtype=table.dtype).at[powers].add(values)


def s06(jd_tt: ArrayLike, x: ArrayLike, y: ArrayLike) -> Array:
    """CIO locator s, compatible with IAU 2006/2000A precession-nutation.

    The series is for ``s + XY/2``; ``XY/2`` is subtracted before returning.

    Args:
        jd_tt: Julian Date [TT].
        x: CIP X coordinate.
        y: CIP Y coordinate.

    Returns:
        CIO locator s [rad].
    """
    t = _centuries(jd_tt)
    w = jnp.asarray(_S06_POLY, dtype=get_dtype())
    w = w + _periodic_by_power(_S06_TERMS, fundamental_arguments(t), len(_S06_POLY))

    return _horner(t, tuple(w)) * AS2RAD - x * y / 2.0


def xys06b(jd_tt: ArrayLike) -> tuple[Array, Array, Array]:
    """CIP X, Y and CIO locator s, IAU 2006 precession with IAU 2000B nutation.

    X and Y come from the bottom row of :func:`pnm06b` and agree with the
    IAU 2006/2000A series to about 1 mas between 1995 and 2050.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (x, y, s) [rad].
    """
    x, y = bpn2xy(pnm06b(jd_tt))
    return x, y, s06(jd_tt, x, y)


# ---------------------------------------------------------------------------
# Earth rotation
# ---------------------------------------------------------------------------


def era00(jd_ut1: ArrayLike) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    Args:
        jd_ut1: Julian Date [UT1].

    Returns:
        Earth Rotation Angle in [0, 2pi) [rad].
    """
    jd_ut1 = jnp.asarray(jd_ut1, dtype=get_dtype())
    t = jd_ut1 - JD_J2000

    # The integer part of the date contributes whole turns only
    f = jnp.fmod(jd_ut1, 1.0)
    theta = jnp.fmod(f + 0.7790572732640 + 0.00273781191135448 * t, 1.0) * D2PI
    return jnp.mod(theta, D2PI)


def sp00(jd_tt: ArrayLike) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin [rad]."""
    return -47e-6 * _centuries(jd_tt) * AS2RAD


# ---------------------------------------------------------------------------
# Equation of the equinoxes, complementary terms
# ---------------------------------------------------------------------------

# Same layout as the CIO locator terms; powers 0 and 1 [arcsec].
# fmt: off
_EECT00_TERMS = (
    (0,  0,  0,  0,  0,  1,  0,  0,  0, 2640.96e-6, -0.39e-6),
    (0,  0,  0,  0,  0,  2,  0,  0,  0, 63.52e-6, -0.02e-6),
    (0,  0,  0,  2, -2,  3,  0,  0,  0, 11.75e-6, 0.01e-6),
    (0,  0,  0,  2, -2,  1,  0,  0,  0, 11.21e-6, 0.01e-6),
    (0,  0,  0,  2, -2,  2,  0,  0,  0, -4.55e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  3,  0,  0,  0, 2.02e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  1,  0,  0,  0, 1.98e-6, 0.00e-6),
    (0,  0,  0,  0,  0,  3,  0,  0,  0, -1.72e-6, 0.00e-6),
    (0,  0,  1,  0,  0,  1,  0,  0,  0, -1.41e-6, -0.01e-6),
    (0,  0,  1,  0,  0, -1,  0,  0,  0, -1.26e-6, -0.01e-6),
    (0,  1,  0,  0,  0, -1,  0,  0,  0, -0.63e-6, 0.00e-6),
    (0,  1,  0,  0,  0,  1,  0,  0,  0, -0.63e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  3,  0,  0,  0, 0.46e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  1,  0,  0,  0, 0.45e-6, 0.00e-6),
    (0,  0,  0,  4, -4,  4,  0,  0,  0, 0.36e-6, 0.00e-6),
    (0,  0,  0,  1, -1,  1, -8, 12,  0, -0.24e-6, -0.12e-6),
    (0,  0,  0,  2,  0,  0,  0,  0,  0, 0.32e-6, 0.00e-6),
    (0,  0,  0,  2,  0,  2,  0,  0,  0, 0.28e-6, 0.00e-6),
    (0,  1,  0,  2,  0,  3,  0,  0,  0, 0.27e-6, 0.00e-6),
    (0,  1,  0,  2,  0,  1,  0,  0,  0, 0.26e-6, 0.00e-6),
    (0,  0,  0,  2, -2,  0,  0,  0,  0, -0.21e-6, 0.00e-6),
    (0,  0,  1, -2,  2, -3,  0,  0,  0, 0.19e-6, 0.00e-6),
    (0,  0,  1, -2,  2, -1,  0,  0,  0, 0.18e-6, 0.00e-6),
    (0,  0,  0,  0,  0,  0,  8,-13, -1, -0.10e-6, 0.05e-6),
    (0,  0,  0,  0,  2,  0,  0,  0,  0, 0.15e-6, 0.00e-6),
    (0,  2,  0, -2,  0, -1,  0,  0,  0, -0.14e-6, 0.00e-6),
    (0,  1,  0,  0, -2,  1,  0,  0,  0, 0.14e-6, 0.00e-6),
    (0,  0,  1,  2, -2,  2,  0,  0,  0, -0.14e-6, 0.00e-6),
    (0,  1,  0,  0, -2, -1,  0,  0,  0, 0.14e-6, 0.00e-6),
    (0,  0,  0,  4, -2,  4,  0,  0,  0, 0.13e-6, 0.00e-6),
    (0,  0,  0,  2, -2,  4,  0,  0,  0, -0.11e-6, 0.00e-6),
    (0,  1,  0, -2,  0, -3,  0,  0,  0, 0.11e-6, 0.00e-6),
    (0,  1,  0, -2,  0, -1,  0,  0,  0, 0.11e-6, 0.00e-6),
    (1,  0,  0,  0,  0,  1,  0,  0,  0, -0.87e-6, 0.00e-6),
)
# fmt: on


def eect00(jd_tt: ArrayLike) -> Array:
    """Complementary terms of the equation of the equinoxes (IAU 2000).

    These are the terms of ``GAST - GMST`` beyond ``dpsi * cos(eps_a)``.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Complementary terms [rad].
    """
    t = _centuries(jd_tt)
    w = _periodic_by_power(_EECT00_TERMS, fundamental_arguments(t), 2)
    return (w[0] + w[1] * t) * AS2RAD
