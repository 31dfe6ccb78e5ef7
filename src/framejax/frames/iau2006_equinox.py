"""Equinox-based IAU-2006/2010 reduction between TIRS and GCRF.

The chain is ``TIRS -> ERS -> MOD06 -> MJ2000 -> GCRF``:

- **Greenwich apparent sidereal time** (TIRS <-> ERS), GAST = ERA - EO
- **Nutation** (ERS <-> MOD06), IAU 2006/2000B
- **Precession** (MOD06 <-> MJ2000), the 4-rotation form with the
  ``psi_A``, ``omega_A`` and ``chi_A`` angles
- **Frame bias** (MJ2000 <-> GCRF), constant

ERS is the Earth Reference System of the true equator and equinox of date.
ITRF <-> TIRS is shared with the CIO-based chain.

References:
    IERS Conventions (2010), IERS Technical Note No. 36, Sections 5.6-5.7.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.constants import AS2RAD, DAYS_PER_CENTURY, JD_J2000
from framejax.frames.sofa import eect00, era00, nut06b, obl06, precession_rates_iau2006
from framejax.rotations import (
    RotationType,
    Rx,
    Ry,
    Rz,
    angle_to_rot,
    compose_rotation,
    dcm_to_rot,
    inv_rotation,
)

_DCM = RotationType.DCM

# Frame bias of the mean J2000 equator and equinox with respect to GCRS
_XI0: float = -0.016617 * AS2RAD
_ETA0: float = -0.0068192 * AS2RAD
_DA0: float = -0.0146 * AS2RAD

# Obliquity of the ecliptic at J2000.0 [rad]
_EPS0: float = 84381.406 * AS2RAD


def equation_of_origins_iau2006(jd_tt: ArrayLike, dpsi: ArrayLike, eps_a: ArrayLike) -> Array:
    """Equation of the origins, ``EO = ERA - GAST``.

    Args:
        jd_tt: Julian Date [TT].
        dpsi: Nutation in longitude, including any correction [rad].
        eps_a: Mean obliquity of the ecliptic [rad].

    Returns:
        Equation of the origins [rad].
    """
    t = (jnp.asarray(jd_tt, dtype=get_dtype()) - JD_J2000) / DAYS_PER_CENTURY

    # Accumulated precession in right ascension [arcsec]
    acc = -0.014506 + t * (
        -4612.156534 + t * (-1.3915817 + t * (0.00000044 + t * (0.000029956 + t * 0.0000000368)))
    )

    return acc * AS2RAD - dpsi * jnp.cos(eps_a) - eect00(jd_tt)


# ---------------------------------------------------------------------------
# GCRF <-> MJ2000
# ---------------------------------------------------------------------------


def r_gcrf_to_mj2000_iau2006(rotation_type: RotationType | str = _DCM) -> Array:
    """Frame bias rotation from GCRF to MJ2000.

    Args:
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns GCRF with MJ2000.
    """
    B = Rx(-_ETA0) @ Ry(_XI0) @ Rz(_DA0)
    return dcm_to_rot(rotation_type, B)


def r_mj2000_to_gcrf_iau2006(rotation_type: RotationType | str = _DCM) -> Array:
    """Frame bias rotation from MJ2000 to GCRF."""
    return inv_rotation(r_gcrf_to_mj2000_iau2006(rotation_type))


# ---------------------------------------------------------------------------
# MJ2000 <-> MOD06
# ---------------------------------------------------------------------------


def r_mj2000_to_mod06_iau2006(jd_tt: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Precession rotation from MJ2000 to MOD06.

    Args:
        jd_tt: Julian Date [TT].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns MJ2000 with MOD06.
    """
    psi_a, omega_a, chi_a = precession_rates_iau2006(jd_tt)
    return compose_rotation(
        angle_to_rot(rotation_type, _EPS0, -psi_a, -omega_a, "XZX"),
        angle_to_rot(rotation_type, chi_a, 0.0, 0.0, "ZYX"),
    )


def r_mod06_to_mj2000_iau2006(jd_tt: ArrayLike, rotation_type: RotationType | str = _DCM) -> Array:
    """Precession rotation from MOD06 to MJ2000."""
    return inv_rotation(r_mj2000_to_mod06_iau2006(jd_tt, rotation_type))


# ---------------------------------------------------------------------------
# MOD06 <-> ERS
# ---------------------------------------------------------------------------


def _nutation(jd_tt, ddeps, ddpsi):
    eps_a = obl06(jd_tt)
    dpsi, deps = nut06b(jd_tt)
    return eps_a, deps + ddeps, dpsi + ddpsi


def _ers_to_mod06(rotation_type, eps_a, deps, dpsi):
    return angle_to_rot(rotation_type, eps_a + deps, dpsi, -eps_a, "XZX")


def r_mod06_to_ers_iau2006(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Nutation rotation from MOD06 to ERS.

    Args:
        jd_tt: Julian Date [TT].
        ddeps: Correction to the nutation in obliquity [rad].
        ddpsi: Correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns MOD06 with ERS.
    """
    return inv_rotation(r_ers_to_mod06_iau2006(jd_tt, ddeps, ddpsi, rotation_type))


def r_ers_to_mod06_iau2006(
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Nutation rotation from ERS to MOD06."""
    eps_a, deps, dpsi = _nutation(jd_tt, ddeps, ddpsi)
    return _ers_to_mod06(rotation_type, eps_a, deps, dpsi)


# ---------------------------------------------------------------------------
# TIRS <-> ERS
# ---------------------------------------------------------------------------


def _tirs_to_ers(rotation_type, jd_ut1, jd_tt, eps_a, dpsi):
    gast = era00(jd_ut1) - equation_of_origins_iau2006(jd_tt, dpsi, eps_a)
    return angle_to_rot(rotation_type, -gast, 0.0, 0.0, "ZYX")


def r_tirs_to_ers_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TIRS to ERS by the Greenwich apparent sidereal time.

    Args:
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        ddpsi: Correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TIRS with ERS.
    """
    eps_a, _, dpsi = _nutation(jd_tt, 0.0, ddpsi)
    return _tirs_to_ers(rotation_type, jd_ut1, jd_tt, eps_a, dpsi)


def r_ers_to_tirs_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from ERS to TIRS. Inverse of :func:`r_tirs_to_ers_iau2006`."""
    return inv_rotation(r_tirs_to_ers_iau2006(jd_ut1, jd_tt, ddpsi, rotation_type))


# ---------------------------------------------------------------------------
# Fused chains
# ---------------------------------------------------------------------------


def r_tirs_to_mod06_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TIRS to MOD06, evaluating the nutation series once.

    Args:
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        ddeps: Correction to the nutation in obliquity [rad].
        ddpsi: Correction to the nutation in longitude [rad].
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns TIRS with MOD06.
    """
    eps_a, deps, dpsi = _nutation(jd_tt, ddeps, ddpsi)
    return compose_rotation(
        _tirs_to_ers(rotation_type, jd_ut1, jd_tt, eps_a, dpsi),
        _ers_to_mod06(rotation_type, eps_a, deps, dpsi),
    )


def r_mod06_to_tirs_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from MOD06 to TIRS. Inverse of :func:`r_tirs_to_mod06_iau2006`."""
    return inv_rotation(r_tirs_to_mod06_iau2006(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type))


def r_tirs_to_mj2000_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from TIRS to MJ2000 through ERS and MOD06."""
    return compose_rotation(
        r_tirs_to_mod06_iau2006(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type),
        r_mod06_to_mj2000_iau2006(jd_tt, rotation_type),
    )


def r_mj2000_to_tirs_iau2006(
    jd_ut1: ArrayLike,
    jd_tt: ArrayLike,
    ddeps: ArrayLike = 0.0,
    ddpsi: ArrayLike = 0.0,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from MJ2000 to TIRS. Inverse of :func:`r_tirs_to_mj2000_iau2006`."""
    return inv_rotation(r_tirs_to_mj2000_iau2006(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type))
