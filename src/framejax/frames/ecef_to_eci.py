"""Rotations between the Earth-fixed and the quasi-inertial frames.

Every chain passes through the terrestrial intermediate frame of its
theory: PEF for FK5 and TIRS for IAU-2006.  Leaving ITRF needs polar motion,
so EOP of the matching type is required whenever ITRF is involved.  From
PEF or TIRS the EOP is optional, except for FK5 PEF <-> GCRF where the
nutation corrections are what distinguish GCRF from J2000.

Without EOP, UT1 is taken equal to UTC and every correction is zero.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from framejax.eop import EopIau1980, EopIau2000A
from framejax.frames._resolve import (
    cip_offsets,
    fk5_corrections,
    iau2006_corrections,
    julian_dates,
    polar_motion,
    resolve_theory,
    transformation_error,
)
from framejax.frames._types import FrameTag, Theory, as_frame
from framejax.frames.fk5 import (
    r_itrf_to_gcrf_fk5,
    r_itrf_to_pef_fk5,
    r_mod_to_gcrf_fk5,
    r_pef_to_mod_fk5,
    r_pef_to_tod_fk5,
)
from framejax.frames.iau2006_cio import (
    r_cirs_to_gcrf_iau2006,
    r_itrf_to_tirs_iau2006,
    r_tirs_to_cirs_iau2006,
)
from framejax.frames.iau2006_equinox import (
    r_tirs_to_ers_iau2006,
    r_tirs_to_mj2000_iau2006,
    r_tirs_to_mod06_iau2006,
)
from framejax.frames.teme import r_pef_to_teme
from framejax.rotations import RotationType, compose_rotation, inv_rotation

_DCM = RotationType.DCM


# ---------------------------------------------------------------------------
# FK5
# ---------------------------------------------------------------------------


def _pef_to_eci_fk5(frame_to, jd_utc, eop, rotation_type):
    jd_ut1, jd_tt = julian_dates(jd_utc, eop)

    if frame_to is FrameTag.TEME:
        return r_pef_to_teme(jd_ut1, rotation_type)

    # J2000 is what the chain reaches without nutation corrections
    if frame_to is FrameTag.J2000:
        ddeps, ddpsi = 0.0, 0.0
    else:
        ddeps, ddpsi = fk5_corrections(eop, jd_utc)

    if frame_to is FrameTag.TOD:
        return r_pef_to_tod_fk5(jd_ut1, jd_tt, ddpsi, rotation_type)

    r_mod_pef = r_pef_to_mod_fk5(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type)
    if frame_to is FrameTag.MOD:
        return r_mod_pef
    return compose_rotation(r_mod_pef, r_mod_to_gcrf_fk5(jd_tt, rotation_type))


def _ecef_to_eci_fk5(frame_from, frame_to, jd_utc, eop, rotation_type):
    if frame_to is FrameTag.GCRF and eop is None:
        raise transformation_error(
            frame_from, frame_to, eop, "GCRF requires EopIau1980 nutation corrections"
        )

    if frame_from is FrameTag.PEF:
        return _pef_to_eci_fk5(frame_to, jd_utc, eop, rotation_type)

    if eop is None:
        raise transformation_error(frame_from, frame_to, eop, "ITRF requires EopIau1980")

    x_p, y_p = polar_motion(eop, jd_utc)

    if frame_to is FrameTag.GCRF:
        jd_ut1, jd_tt = julian_dates(jd_utc, eop)
        ddeps, ddpsi = fk5_corrections(eop, jd_utc)
        return r_itrf_to_gcrf_fk5(jd_ut1, jd_tt, x_p, y_p, ddeps, ddpsi, rotation_type)

    return compose_rotation(
        r_itrf_to_pef_fk5(x_p, y_p, rotation_type),
        _pef_to_eci_fk5(frame_to, jd_utc, eop, rotation_type),
    )


# ---------------------------------------------------------------------------
# IAU-2006
# ---------------------------------------------------------------------------


def _tirs_to_eci_iau2006(frame_to, jd_utc, eop, rotation_type):
    jd_ut1, jd_tt = julian_dates(jd_utc, eop)

    if frame_to in (FrameTag.CIRS, FrameTag.GCRF):
        r_cirs_tirs = r_tirs_to_cirs_iau2006(jd_ut1, rotation_type)
        if frame_to is FrameTag.CIRS:
            return r_cirs_tirs
        dx, dy = cip_offsets(eop, jd_utc)
        return compose_rotation(r_cirs_tirs, r_cirs_to_gcrf_iau2006(jd_tt, dx, dy, rotation_type))

    ddeps, ddpsi = iau2006_corrections(eop, jd_utc)

    if frame_to is FrameTag.ERS:
        return r_tirs_to_ers_iau2006(jd_ut1, jd_tt, ddpsi, rotation_type)
    if frame_to is FrameTag.MOD06:
        return r_tirs_to_mod06_iau2006(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type)
    return r_tirs_to_mj2000_iau2006(jd_ut1, jd_tt, ddeps, ddpsi, rotation_type)


def _ecef_to_eci_iau2006(frame_from, frame_to, jd_utc, eop, rotation_type):
    if frame_from is FrameTag.TIRS:
        return _tirs_to_eci_iau2006(frame_to, jd_utc, eop, rotation_type)

    if eop is None:
        raise transformation_error(frame_from, frame_to, eop, "ITRF requires EopIau2000A")

    x_p, y_p = polar_motion(eop, jd_utc)
    _, jd_tt = julian_dates(jd_utc, eop)

    return compose_rotation(
        r_itrf_to_tirs_iau2006(jd_tt, x_p, y_p, rotation_type),
        _tirs_to_eci_iau2006(frame_to, jd_utc, eop, rotation_type),
    )


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


def _check_pair(frame_from: FrameTag, frame_to: FrameTag, eop) -> None:
    if not frame_from.is_ecef:
        raise transformation_error(frame_from, frame_to, eop, f"{frame_from.name} is not an ECEF frame")
    if not frame_to.is_eci:
        raise transformation_error(frame_from, frame_to, eop, f"{frame_to.name} is not an ECI frame")


def r_ecef_to_eci(
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike,
    eop: EopIau1980 | EopIau2000A | None = None,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from an Earth-fixed frame to a quasi-inertial frame.

    The theory is inferred from the frames, or from the EOP type for
    ITRF -> GCRF.

    Args:
        frame_from: Origin ECEF frame (ITRF, PEF or TIRS).
        frame_to: Destination ECI frame.
        jd_utc: Julian Date [UTC].  EOP is queried at this date.
        eop: EOP of the type matching the theory, or ``None``.
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ``frame_from`` with ``frame_to``.

    Raises:
        FrameTransformationError: If the frames mix theories, the EOP type
            contradicts the theory, or EOP is required but missing.

    Examples:
        ```python
        from framejax.eop import static_eop_iau1980
        from framejax.frames import r_ecef_to_eci
        eop = static_eop_iau1980(x=-0.140682, y=0.333309, ut1_utc=-0.4399619,
                                 ddpsi=-52.195, ddeps=-3.875)
        D = r_ecef_to_eci("ITRF", "GCRF", 2453101.827411, eop)
        ```
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)
    _check_pair(frame_from, frame_to, eop)

    theory = resolve_theory(frame_from, frame_to, eop)
    if theory is Theory.FK5:
        return _ecef_to_eci_fk5(frame_from, frame_to, jd_utc, eop, rotation_type)
    return _ecef_to_eci_iau2006(frame_from, frame_to, jd_utc, eop, rotation_type)


def r_eci_to_ecef(
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike,
    eop: EopIau1980 | EopIau2000A | None = None,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation from a quasi-inertial frame to an Earth-fixed frame.

    Inverse of :func:`r_ecef_to_eci` with the frames swapped; the same EOP
    rules apply.
    """
    return inv_rotation(r_ecef_to_eci(frame_to, frame_from, jd_utc, eop, rotation_type))
