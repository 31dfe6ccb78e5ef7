"""Rotations between the quasi-inertial frames.

Each side of the pair is rotated to an anchor frame at its own epoch and
the two rotations are joined there.  The anchor is GCRF, or J2000 for FK5
pairs without EOP, or MJ2000 for pairs made only of ERS, MOD06 and
MJ2000.  When both sides share the epoch and lie next to each other on one
chain (MOD/TOD/TEME in FK5, ERS/MOD06 in IAU-2006), the direct rotation is
returned instead.

FK5 pairs that involve GCRF need :class:`EopIau1980`, since the IAU-1980
nutation corrections are what separate GCRF from J2000.  IAU-2006 pairs
never need EOP; when :class:`EopIau2000A` is given, CIRS uses the celestial
pole offsets and ERS the nutation corrections derived from them.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from framejax.eop import EopIau1980, EopIau2000A
from framejax.frames._resolve import (
    cip_offsets,
    fk5_corrections,
    iau2006_corrections,
    resolve_theory,
    transformation_error,
)
from framejax.frames._types import IAU2006_EQUINOX_FRAMES, FrameTag, Theory, as_frame
from framejax.frames.fk5 import (
    r_gcrf_to_mod_fk5,
    r_mod_to_gcrf_fk5,
    r_mod_to_tod_fk5,
    r_tod_to_mod_fk5,
)
from framejax.frames.iau2006_cio import r_cirs_to_gcrf_iau2006
from framejax.frames.iau2006_equinox import (
    r_ers_to_mod06_iau2006,
    r_mj2000_to_gcrf_iau2006,
    r_mod06_to_ers_iau2006,
    r_mod06_to_mj2000_iau2006,
)
from framejax.frames.teme import (
    r_mod_to_teme,
    r_teme_to_gcrf,
    r_teme_to_mod,
    r_teme_to_tod,
    r_tod_to_teme,
)
from framejax.rotations import RotationType, compose_rotation, identity_rotation, inv_rotation
from framejax.time import jd_utc_to_tt

_DCM = RotationType.DCM

_T = FrameTag

# Same-epoch rotations, called as fn(jd_tt, ddeps, ddpsi, rotation_type)
_DIRECT_FK5 = {
    (_T.MOD, _T.TOD): r_mod_to_tod_fk5,
    (_T.TOD, _T.MOD): r_tod_to_mod_fk5,
    (_T.TEME, _T.TOD): r_teme_to_tod,
    (_T.TOD, _T.TEME): r_tod_to_teme,
    (_T.TEME, _T.MOD): r_teme_to_mod,
    (_T.MOD, _T.TEME): r_mod_to_teme,
}

_DIRECT_IAU2006 = {
    (_T.ERS, _T.MOD06): r_ers_to_mod06_iau2006,
    (_T.MOD06, _T.ERS): r_mod06_to_ers_iau2006,
}

_EQUINOX_ECI = IAU2006_EQUINOX_FRAMES - {_T.ITRF, _T.TIRS, _T.GCRF}


# ---------------------------------------------------------------------------
# FK5
# ---------------------------------------------------------------------------


def _to_anchor_fk5(frame, jd_utc, eop, rotation_type):
    if frame in (_T.GCRF, _T.J2000):
        return identity_rotation(rotation_type)

    jd_tt = jd_utc_to_tt(jd_utc)
    ddeps, ddpsi = fk5_corrections(eop, jd_utc)

    if frame is _T.TEME:
        return r_teme_to_gcrf(jd_tt, ddeps, ddpsi, rotation_type)

    r_gcrf_mod = r_mod_to_gcrf_fk5(jd_tt, rotation_type)
    if frame is _T.MOD:
        return r_gcrf_mod
    return compose_rotation(r_tod_to_mod_fk5(jd_tt, ddeps, ddpsi, rotation_type), r_gcrf_mod)


def _gcrf_to_j2000_fk5(jd_utc, eop, rotation_type):
    # GCRF and J2000 meet at TOD: corrected nutation on one side, uncorrected on the other
    jd_tt = jd_utc_to_tt(jd_utc)
    ddeps, ddpsi = fk5_corrections(eop, jd_utc)
    return compose_rotation(
        r_gcrf_to_mod_fk5(jd_tt, rotation_type),
        r_mod_to_tod_fk5(jd_tt, ddeps, ddpsi, rotation_type),
        r_tod_to_mod_fk5(jd_tt, 0.0, 0.0, rotation_type),
        r_mod_to_gcrf_fk5(jd_tt, rotation_type),
    )


def _eci_to_eci_fk5(frame_from, jd_from, frame_to, jd_to, same_epoch, eop, rotation_type):
    if _T.GCRF in (frame_from, frame_to) and eop is None:
        raise transformation_error(
            frame_from, frame_to, eop, "GCRF requires EopIau1980 nutation corrections"
        )

    if {frame_from, frame_to} == {_T.GCRF, _T.J2000}:
        r = _gcrf_to_j2000_fk5(jd_from, eop, rotation_type)
        return r if frame_from is _T.GCRF else inv_rotation(r)

    direct = _DIRECT_FK5.get((frame_from, frame_to))
    if same_epoch and direct is not None:
        ddeps, ddpsi = fk5_corrections(eop, jd_from)
        return direct(jd_utc_to_tt(jd_from), ddeps, ddpsi, rotation_type)

    return compose_rotation(
        _to_anchor_fk5(frame_from, jd_from, eop, rotation_type),
        inv_rotation(_to_anchor_fk5(frame_to, jd_to, eop, rotation_type)),
    )


# ---------------------------------------------------------------------------
# IAU-2006
# ---------------------------------------------------------------------------


def _to_anchor_iau2006(frame, jd_utc, eop, anchor, rotation_type):
    if frame is anchor:
        return identity_rotation(rotation_type)

    jd_tt = jd_utc_to_tt(jd_utc)

    if frame is _T.CIRS:
        dx, dy = cip_offsets(eop, jd_utc)
        return r_cirs_to_gcrf_iau2006(jd_tt, dx, dy, rotation_type)

    chain = []
    if frame is _T.ERS:
        ddeps, ddpsi = iau2006_corrections(eop, jd_utc)
        chain.append(r_ers_to_mod06_iau2006(jd_tt, ddeps, ddpsi, rotation_type))
    if frame in (_T.ERS, _T.MOD06):
        chain.append(r_mod06_to_mj2000_iau2006(jd_tt, rotation_type))
    if anchor is _T.GCRF:
        chain.append(r_mj2000_to_gcrf_iau2006(rotation_type))
    return compose_rotation(*chain)


def _eci_to_eci_iau2006(frame_from, jd_from, frame_to, jd_to, same_epoch, eop, rotation_type):
    direct = _DIRECT_IAU2006.get((frame_from, frame_to))
    if same_epoch and direct is not None:
        ddeps, ddpsi = iau2006_corrections(eop, jd_from)
        return direct(jd_utc_to_tt(jd_from), ddeps, ddpsi, rotation_type)

    anchor = _T.MJ2000 if {frame_from, frame_to} <= _EQUINOX_ECI else _T.GCRF
    return compose_rotation(
        _to_anchor_iau2006(frame_from, jd_from, eop, anchor, rotation_type),
        inv_rotation(_to_anchor_iau2006(frame_to, jd_to, eop, anchor, rotation_type)),
    )


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def r_eci_to_eci(
    frame_from: FrameTag | str,
    jd_from: ArrayLike,
    frame_to: FrameTag | str,
    jd_to: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
    rotation_type: RotationType | str = _DCM,
) -> Array:
    """Rotation between two quasi-inertial frames.

    Args:
        frame_from: Origin ECI frame.
        jd_from: Julian Date [UTC] of the origin frame.
        frame_to: Destination ECI frame.
        jd_to: Julian Date [UTC] of the destination frame.  Defaults to
            ``jd_from``.  Only of-date frames depend on it.
        eop: EOP of the type matching the theory, or ``None``.
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ``frame_from`` at ``jd_from`` with
            ``frame_to`` at ``jd_to``.

    Raises:
        FrameTransformationError: If a frame is not ECI, the frames mix
            theories, the EOP type contradicts the theory, or GCRF is paired
            with an FK5 frame without EOP.

    Examples:
        ```python
        from framejax.frames import r_eci_to_eci
        # Precess a mean-of-date frame from one epoch to another
        D = r_eci_to_eci("MOD", 2453101.8, "MOD", 2458849.5)
        ```
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)
    for frame in (frame_from, frame_to):
        if not frame.is_eci:
            raise transformation_error(frame_from, frame_to, eop, f"{frame.name} is not an ECI frame")

    same_epoch = jd_to is None
    if same_epoch:
        jd_to = jd_from

    if frame_from is frame_to and (same_epoch or not frame_from.is_of_date):
        return identity_rotation(rotation_type)

    theory = resolve_theory(frame_from, frame_to, eop)
    if theory is Theory.FK5:
        return _eci_to_eci_fk5(frame_from, jd_from, frame_to, jd_to, same_epoch, eop, rotation_type)
    return _eci_to_eci_iau2006(frame_from, jd_from, frame_to, jd_to, same_epoch, eop, rotation_type)
