"""CIO-based IAU-2006/2010 reduction between ITRF and GCRF.

The chain is ``ITRF -> TIRS -> CIRS -> GCRF``:

- **Polar motion** (ITRF <-> TIRS), with the TIO locator s'
- **Earth rotation** (TIRS <-> CIRS), by the Earth Rotation Angle
- **Celestial motion of the CIP** (CIRS <-> GCRF), from the CIP coordinates
  X, Y and the CIO locator s

The CIP coordinates come from the IAU 2006 precession and the IAU 2000B
nutation (see :mod:`framejax.frames.sofa`).  Supplying the IERS celestial
pole offsets ``dx``/``dy`` brings CIRS to full precision.

References:
    IERS Conventions (2010), IERS Technical Note No. 36, Chapter 5.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.frames.sofa import era00, sp00, xys06b
from framejax.rotations import RotationType, Rz, angle_to_rot, dcm_to_rot, inv_rotation

_DCM = RotationType.DCM


def cip_iau2006(jd_tt: ArrayLike) -> tuple[Array, Array, Array]:
    """CIP coordinates and CIO locator.

    X and Y follow the IAU 2006 precession with the IAU 2000B nutation
    series (see :func:`framejax.frames.sofa.xys06b`), which stays within
    about 1 mas of the full IAU 2006/2000A series between 1995 and 2050.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (X, Y, s) [rad].
    """
    return xys06b(jd_tt)


# ---------------------------------------------------------------------------
# ITRF <-> TIRS
# ---------------------------------------------------------------------------


def r_itrf_to_tirs_iau2006(
    jd_tt: ArrayLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from ITRF to TIRS due to polar motion.

    Args:
        jd_tt: Julian Date [TT], used by the TIO locator.
        x_p: Polar motion about the X axis [rad].
        y_p: Polar motion about the Y axis [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ITRF with TIRS.
    """
    sp = sp00(jd_tt)
    return angle_to_rot(rotation_type, y_p, x_p, -sp, "XYZ")


def r_tirs_to_itrf_iau2006(
    jd_tt: ArrayLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TIRS to ITRF due to polar motion.

    Args:
        jd_tt: Julian Date [TT], used by the TIO locator.
        x_p: Polar motion about the X axis [rad].
        y_p: Polar motion about the Y axis [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TIRS with ITRF.
    """
    sp = sp00(jd_tt)
    return angle_to_rot(rotation_type, sp, -x_p, -y_p, "ZYX")


# ---------------------------------------------------------------------------
# TIRS <-> CIRS
# ---------------------------------------------------------------------------


def r_tirs_to_cirs_iau2006(jd_ut1: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from TIRS to CIRS by the Earth Rotation Angle.

    Args:
        jd_ut1: Julian Date [UT1].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TIRS with CIRS.
    """
    return angle_to_rot(rotation_type, -era00(jd_ut1), 0.0, 0.0, "ZXY")


def r_cirs_to_tirs_iau2006(jd_ut1: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from CIRS to TIRS. Inverse of :func:`r_tirs_to_cirs_iau2006`."""
    return angle_to_rot(rotation_type, era00(jd_ut1), 0.0, 0.0, "ZXY")


# ---------------------------------------------------------------------------
# GCRF <-> CIRS
# ---------------------------------------------------------------------------


def _gcrf_to_cirs_dcm(jd_tt: ArrayLike, dx: ArrayLike, dy: ArrayLike) -> Array:
    x, y, s = cip_iau2006(jd_tt)
    x = x + dx
    y = y + dy

    x2 = x * x
    y2 = y * y
    xy = x * y
    a = 0.5 + (x2 + y2) / 8.0

    D = jnp.array(
        [
            [1.0 - a * x2, -a * xy, -x],
            [-a * xy, 1.0 - a * y2, -y],
            [x, y, 1.0 - a * (x2 + y2)],
        ]
    )
    return Rz(-s) @ D


def r_gcrf_to_cirs_iau2006(
    jd_tt: ArrayLike,
    dx: ArrayLike = 0.0,
    dy: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from GCRF to CIRS.

    Args:
        jd_tt: Julian Date [TT].
        dx: Celestial pole offset added to X [rad].
        dy: Celestial pole offset added to Y [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns GCRF with CIRS.

    Examples:
        ```python
        from framejax.frames import r_gcrf_to_cirs_iau2006
        D = r_gcrf_to_cirs_iau2006(2453101.828154745)
        ```
    """
    return dcm_to_rot(rotation_type, _gcrf_to_cirs_dcm(jd_tt, dx, dy))


def r_cirs_to_gcrf_iau2006(
    jd_tt: ArrayLike,
    dx: ArrayLike = 0.0,
    dy: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from CIRS to GCRF. Inverse of :func:`r_gcrf_to_cirs_iau2006`."""
    return inv_rotation(r_gcrf_to_cirs_iau2006(jd_tt, dx, dy, rotation_type))
