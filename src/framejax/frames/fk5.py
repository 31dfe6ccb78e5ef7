"""IAU-76/FK5 reduction between the terrestrial and celestial frames.

The reduction chain is ``ITRF -> PEF -> TOD -> MOD -> GCRF``:

- **Polar motion** (ITRF <-> PEF), small-angle rotation by ``x_p`` and ``y_p``
- **Sidereal time** (PEF <-> TOD), GAST = GMST (IAU-82) + equation of the
  equinoxes (IAU-94)
- **Nutation** (TOD <-> MOD), the 106-term IAU-1980 theory
- **Precession** (MOD <-> GCRF), the IAU-1976 model

Every rotation function accepts a ``rotation_type`` keyword and returns a
3x3 DCM or a unit quaternion.  When the EOP nutation corrections are
omitted, the celestial frame reached through the chain is J2000 rather
than GCRF.

References:
    Vallado, D. A. (2013). *Fundamentals of Astrodynamics and
    Applications*, 4th ed. Microcosm Press, Hawthorn, CA.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.constants import AS2RAD, DAYS_PER_CENTURY, DEG2RAD, JD_J2000
from framejax.frames._nutation_fk5 import NUTATION_IAU1980
from framejax.rotations import (
    RotationType,
    angle_to_rot,
    compose_rotation,
    inv_rotation,
    smallangle_to_rot,
)

_DCM = RotationType.DCM


def _centuries(jd: ArrayLike) -> Array:
    return (jnp.asarray(jd, dtype=get_dtype()) - JD_J2000) / DAYS_PER_CENTURY


def _poly(t: Array, coeffs: tuple[float, ...]) -> Array:
    """Evaluate ``c0 + c1*t + c2*t^2 + ...`` in Horner form."""
    acc = jnp.zeros_like(t) + coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = acc * t + c
    return acc


# ---------------------------------------------------------------------------
# Precession, nutation and sidereal time
# ---------------------------------------------------------------------------


def precession_fk5(jd_tt: ArrayLike) -> tuple[Array, Array, Array]:
    """IAU-1976 precession angles.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (zeta, theta, z) [rad].

    Examples:
        ```python
        from framejax.frames import precession_fk5
        zeta, theta, z = precession_fk5(2453101.828154745)
        ```
    """
    t = _centuries(jd_tt)

    zeta = _poly(t, (0.0, 2306.2181, 0.30188, 0.017998)) * AS2RAD
    theta = _poly(t, (0.0, 2004.3109, -0.42665, -0.041833)) * AS2RAD
    z = _poly(t, (0.0, 2306.2181, 1.09468, 0.018203)) * AS2RAD

    return zeta, theta, z


def _delaunay_fk5(t: Array) -> Array:
    """Delaunay arguments of the IAU-1980 nutation theory [rad]."""
    r = 360.0
    # Mean anomaly of the Moon
    l_moon = _poly(t, (134.96298139, 1325 * r + 198.8673981, 0.0086972, 1.78e-5))
    # Mean anomaly of the Sun
    l_sun = _poly(t, (357.52772333, 99 * r + 359.0503400, -0.0001603, -3.3e-6))
    # Mean argument of latitude of the Moon
    f = _poly(t, (93.27191028, 1342 * r + 82.0175381, -0.0036825, 3.1e-6))
    # Mean elongation of the Moon from the Sun
    d = _poly(t, (297.85036306, 1236 * r + 307.1114800, -0.0019142, 5.3e-6))
    # Longitude of the ascending node of the Moon
    om = _poly(t, (125.04452222, -(5 * r + 134.1362608), 0.0020708, 2.2e-6))

    return jnp.mod(jnp.stack([l_moon, l_sun, f, d, om]), 360.0) * DEG2RAD


def nutation_fk5(jd_tt: ArrayLike, n_terms: int = 106) -> tuple[Array, Array, Array]:
    """IAU-1980 nutation.

    Args:
        jd_tt: Julian Date [TT].
        n_terms: Number of series terms to sum, taken in order of
            decreasing amplitude.  Between 1 and 106. Default: ``106``.

    Returns:
        Tuple of (mean_obliquity, deps, dpsi) [rad]: the mean obliquity of
        the ecliptic, the nutation in obliquity and the nutation in
        longitude.

    Raises:
        ValueError: If ``n_terms`` is outside ``[1, 106]``.
    """
    if not 1 <= n_terms <= len(NUTATION_IAU1980):
        raise ValueError(
            f"n_terms must be between 1 and {len(NUTATION_IAU1980)}, got {n_terms}"
        )

    dtype = get_dtype()
    t = _centuries(jd_tt)

    mean_obliquity = _poly(t, (23.439291, -0.0130042, -1.64e-7, 5.04e-7)) * DEG2RAD

    coeffs = jnp.array(NUTATION_IAU1980[:n_terms], dtype=dtype)
    args = coeffs[:, :5] @ _delaunay_fk5(t)

    # Rates are tabulated per Julian millennium
    tm = t / 10.0
    dpsi = jnp.sum((coeffs[:, 5] + coeffs[:, 6] * tm) * jnp.sin(args))
    deps = jnp.sum((coeffs[:, 7] + coeffs[:, 8] * tm) * jnp.cos(args))

    # 0.1 mas -> rad
    return mean_obliquity, deps * 1e-4 * AS2RAD, dpsi * 1e-4 * AS2RAD


def gmst_from_jd_ut1(jd_ut1: ArrayLike) -> Array:
    """Greenwich Mean Sidereal Time, IAU-82 model.

    Args:
        jd_ut1: Julian Date [UT1].

    Returns:
        GMST in [0, 2pi) [rad].
    """
    t = _centuries(jd_ut1)

    # Seconds of time
    gmst = _poly(t, (67310.54841, 876600.0 * 3600.0 + 8640184.812866, 0.093104, -6.2e-6))
    gmst = jnp.mod(gmst, 86400.0) / 240.0

    return jnp.mod(gmst * DEG2RAD, 2.0 * jnp.pi)


def equation_of_equinoxes_fk5(jd_tt: ArrayLike, dpsi: ArrayLike, mean_obliquity: ArrayLike) -> Array:
    """Equation of the equinoxes, IAU-94 form.

    Args:
        jd_tt: Julian Date [TT].
        dpsi: Nutation in longitude, including any EOP correction [rad].
        mean_obliquity: Mean obliquity of the ecliptic [rad].

    Returns:
        GAST - GMST [rad].
    """
    t = _centuries(jd_tt)
    om = _poly(t, (125.04452222, -(5 * 360.0 + 134.1362608), 0.0020708, 2.2e-6))
    om = jnp.mod(om, 360.0) * DEG2RAD

    return dpsi * jnp.cos(mean_obliquity) + (
        0.002640 * jnp.sin(om) + 0.000063 * jnp.sin(2.0 * om)
    ) * AS2RAD


def _gast_fk5(jd_ut1, jd_tt, dpsi, mean_obliquity):
    return gmst_from_jd_ut1(jd_ut1) + equation_of_equinoxes_fk5(jd_tt, dpsi, mean_obliquity)


# ---------------------------------------------------------------------------
# ITRF <-> PEF
# ---------------------------------------------------------------------------


def r_itrf_to_pef_fk5(x_p: ArrayLike, y_p: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from ITRF to PEF due to polar motion.

    Args:
        x_p: Polar motion about the X axis (IERS reference meridian) [rad].
        y_p: Polar motion about the Y axis (270 deg E meridian) [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ITRF with PEF.
    """
    return smallangle_to_rot(rotation_type, y_p, x_p, 0.0)


def r_pef_to_itrf_fk5(x_p: ArrayLike, y_p: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from PEF to ITRF due to polar motion.

    Args:
        x_p: Polar motion about the X axis [rad].
        y_p: Polar motion about the Y axis [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns PEF with ITRF.
    """
    return smallangle_to_rot(rotation_type, -y_p, -x_p, 0.0)


# ---------------------------------------------------------------------------
# PEF <-> TOD
# ---------------------------------------------------------------------------


def r_pef_to_tod_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from PEF to TOD by the Greenwich apparent sidereal time.

    ``jd_ut1`` drives GMST and ``jd_tt`` the nutation.  Both must describe
    the same instant; this is not checked.

    Args:
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns PEF with TOD.
    """
    mean_obliquity, _, dpsi = nutation_fk5(jd_tt)
    gast = _gast_fk5(jd_ut1, jd_tt, dpsi + ddpsi, mean_obliquity)
    return angle_to_rot(rotation_type, -gast, 0.0, 0.0, "ZYX")


def r_tod_to_pef_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TOD to PEF. Inverse of :func:`r_pef_to_tod_fk5`."""
    return inv_rotation(r_pef_to_tod_fk5(jd_ut1, jd_tt, ddpsi, rotation_type))


# ---------------------------------------------------------------------------
# TOD <-> MOD
# ---------------------------------------------------------------------------


def r_tod_to_mod_fk5(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TOD to MOD due to the IAU-1980 nutation.

    Args:
        jd_tt: Julian Date [TT].
        ddeps: EOP correction to the nutation in obliquity [rad].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TOD with MOD.
    """
    mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
    deps = deps + ddeps
    dpsi = dpsi + ddpsi
    true_obliquity = mean_obliquity + deps
    return angle_to_rot(rotation_type, true_obliquity, dpsi, -mean_obliquity, "XZX")


def r_mod_to_tod_fk5(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from MOD to TOD. Inverse of :func:`r_tod_to_mod_fk5`."""
    return inv_rotation(r_tod_to_mod_fk5(jd_tt, ddeps, ddpsi, rotation_type))


# ---------------------------------------------------------------------------
# MOD <-> GCRF
# ---------------------------------------------------------------------------


def r_mod_to_gcrf_fk5(jd_tt: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from MOD to GCRF due to the IAU-1976 precession.

    If the TOD -> MOD step was computed without the EOP nutation
    corrections, the frame reached here is J2000.

    Args:
        jd_tt: Julian Date [TT].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns MOD with GCRF.
    """
    zeta, theta, z = precession_fk5(jd_tt)
    return angle_to_rot(rotation_type, z, -theta, zeta, "ZYZ")


def r_gcrf_to_mod_fk5(jd_tt: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from GCRF to MOD. Inverse of :func:`r_mod_to_gcrf_fk5`."""
    return inv_rotation(r_mod_to_gcrf_fk5(jd_tt, rotation_type))


# ---------------------------------------------------------------------------
# Fused chains
# ---------------------------------------------------------------------------


def r_pef_to_mod_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from PEF to MOD, evaluating the nutation series once.

    Equivalent to composing :func:`r_pef_to_tod_fk5` and
    :func:`r_tod_to_mod_fk5`.

    Args:
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        ddeps: EOP correction to the nutation in obliquity [rad].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns PEF with MOD.
    """
    mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
    deps = deps + ddeps
    dpsi = dpsi + ddpsi
    true_obliquity = mean_obliquity + deps

    gast = _gast_fk5(jd_ut1, jd_tt, dpsi, mean_obliquity)

    r_tod_pef = angle_to_rot(rotation_type, -gast, 0.0, 0.0, "ZYX")
    r_mod_tod = angle_to_rot(rotation_type, true_obliquity, dpsi, -mean_obliquity, "XZX")
    return compose_rotation(r_tod_pef, r_mod_tod)


def r_mod_to_pef_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from MOD to PEF. Inverse of :func:`r_pef_to_mod_fk5`."""
    return inv_rotation(r_pef_to_mod_fk5(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type))


def r_itrf_to_gcrf_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Full FK5 rotation from ITRF to GCRF.

    Polar motion is always applied.  Without the nutation corrections the
    destination is J2000 instead of GCRF.

    Args:
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        x_p: Polar motion about the X axis [rad].
        y_p: Polar motion about the Y axis [rad].
        ddeps: EOP correction to the nutation in obliquity [rad].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ITRF with GCRF.

    Examples:
        ```python
        from framejax.frames import r_itrf_to_gcrf_fk5
        D = r_itrf_to_gcrf_fk5(2453101.827406783, 2453101.828154745, 0.0, 0.0)
        D.shape  # (3, 3)
        ```
    """
    r_pef_itrf = r_itrf_to_pef_fk5(x_p, y_p, rotation_type)
    r_mod_pef = r_pef_to_mod_fk5(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type)
    r_gcrf_mod = r_mod_to_gcrf_fk5(jd_tt, rotation_type)
    return compose_rotation(r_pef_itrf, r_mod_pef, r_gcrf_mod)


def r_gcrf_to_itrf_fk5(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Full FK5 rotation from GCRF to ITRF. Inverse of :func:`r_itrf_to_gcrf_fk5`."""
    return inv_rotation(
        r_itrf_to_gcrf_fk5(jd_ut1, jd_tt, x_p, y_p, ddeps, ddpsi, rotation_type)
    )
