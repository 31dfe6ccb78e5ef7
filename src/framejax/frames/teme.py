"""TEME (True Equator, Mean Equinox) rotations.

TEME is the output frame of the SGP4/SDP4 propagator.  Its Z axis is the
true pole of date, and its X axis points to the mean equinox measured along
the true equator.  It therefore sits between TOD and PEF:

- **TEME -> TOD**: ``Rz(-Eq)``, where Eq is the equation of the equinoxes
  without the lunar terms, ``dpsi * cos(mean_obliquity)``
- **TEME -> PEF**: ``Rz(GMST)``
- **TEME -> MOD / GCRF**: TEME -> TOD followed by the FK5 nutation and
  precession

Without EOP nutation corrections, TEME -> GCRF actually reaches J2000.

References:
    Vallado, D. A., Crawford, P., Hujsak, R., Kelso, T. S. (2006).
    *Revisiting Spacetrack Report #3*. AIAA 2006-6753.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.frames.fk5 import (
    gmst_from_jd_ut1,
    nutation_fk5,
    r_mod_to_gcrf_fk5,
    r_tod_to_mod_fk5,
)
from framejax.rotations import RotationType, angle_to_rot, compose_rotation, inv_rotation

_DCM = RotationType.DCM


def r_teme_to_tod(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TEME to TOD.

    Args:
        jd_tt: Julian Date [TT].
        ddeps: EOP correction to the nutation in obliquity [rad]. It does
            not enter this rotation and is accepted for a uniform signature.
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TEME with TOD.
    """
    mean_obliquity, _, dpsi = nutation_fk5(jd_tt)
    eq_equinox = (dpsi + ddpsi) * jnp.cos(mean_obliquity)
    return angle_to_rot(rotation_type, -eq_equinox, 0.0, 0.0, "ZYX")


def r_tod_to_teme(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TOD to TEME. Inverse of :func:`r_teme_to_tod`."""
    return inv_rotation(r_teme_to_tod(jd_tt, ddeps, ddpsi, rotation_type))


def r_teme_to_mod(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TEME to MOD.

    Args:
        jd_tt: Julian Date [TT].
        ddeps: EOP correction to the nutation in obliquity [rad].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TEME with MOD.
    """
    r_tod_teme = r_teme_to_tod(jd_tt, ddeps, ddpsi, rotation_type)
    r_mod_tod = r_tod_to_mod_fk5(jd_tt, ddeps, ddpsi, rotation_type)
    return compose_rotation(r_tod_teme, r_mod_tod)


def r_mod_to_teme(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from MOD to TEME. Inverse of :func:`r_teme_to_mod`."""
    return inv_rotation(r_teme_to_mod(jd_tt, ddeps, ddpsi, rotation_type))


def r_teme_to_gcrf(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TEME to GCRF.

    With zero nutation corrections the destination is J2000.

    Args:
        jd_tt: Julian Date [TT].
        ddeps: EOP correction to the nutation in obliquity [rad].
        ddpsi: EOP correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TEME with GCRF.
    """
    r_mod_teme = r_teme_to_mod(jd_tt, ddeps, ddpsi, rotation_type)
    r_gcrf_mod = r_mod_to_gcrf_fk5(jd_tt, rotation_type)
    return compose_rotation(r_mod_teme, r_gcrf_mod)


def r_gcrf_to_teme(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from GCRF to TEME. Inverse of :func:`r_teme_to_gcrf`."""
    return inv_rotation(r_teme_to_gcrf(jd_tt, ddeps, ddpsi, rotation_type))


def r_teme_to_pef(jd_ut1: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from TEME to PEF by the Greenwich mean sidereal time.

    Args:
        jd_ut1: Julian Date [UT1].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TEME with PEF.
    """
    return angle_to_rot(rotation_type, gmst_from_jd_ut1(jd_ut1), 0.0, 0.0, "ZYX")


def r_pef_to_teme(jd_ut1: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Rotation from PEF to TEME. Inverse of :func:`r_teme_to_pef`."""
    return inv_rotation(r_teme_to_pef(jd_ut1, rotation_type))
