"""Rotations between the Earth-fixed frames (ITRF, PEF, TIRS).

ITRF <-> PEF is the FK5 polar motion and needs :class:`EopIau1980`.
ITRF <-> TIRS is the IAU-2006 polar motion with the TIO locator and needs
:class:`EopIau2000A`.  PEF and TIRS cannot be paired.
"""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from framejax.eop import EopIau1980, EopIau2000A
from framejax.frames._resolve import (
    julian_dates,
    polar_motion,
    resolve_theory,
    transformation_error,
)
from framejax.frames._types import FrameTag, as_frame
from framejax.frames.fk5 import r_itrf_to_pef_fk5, r_pef_to_itrf_fk5
from framejax.frames.iau2006_cio import r_itrf_to_tirs_iau2006, r_tirs_to_itrf_iau2006
from framejax.rotations import RotationType, identity_rotation


def _check_ecef(frame_from: FrameTag, frame_to: FrameTag, eop) -> None:
    for frame in (frame_from, frame_to):
        if not frame.is_ecef:
            raise transformation_error(frame_from, frame_to, eop, f"{frame.name} is not an ECEF frame")


def r_ecef_to_ecef(
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike,
    eop: EopIau1980 | EopIau2000A,
    rotation_type: RotationType | str = RotationType.DCM,
) -> Array:
    """Rotation between two Earth-fixed frames.

    Args:
        frame_from: Origin ECEF frame.
        frame_to: Destination ECEF frame.
        jd_utc: Julian Date [UTC].  EOP is queried at this date.
        eop: EOP matching the theory of the pair.  ``None`` is accepted
            only when both frames are the same.
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ``frame_from`` with ``frame_to``.

    Raises:
        FrameTransformationError: If a frame is not Earth-fixed, if PEF is
            paired with TIRS, or if the EOP type does not match.

    Examples:
        ```python
        from framejax.eop import static_eop_iau1980
        from framejax.frames import r_ecef_to_ecef
        eop = static_eop_iau1980(x=-0.140682, y=0.333309)
        D = r_ecef_to_ecef("ITRF", "PEF", 2453101.827411, eop)
        ```
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)
    _check_ecef(frame_from, frame_to, eop)

    if frame_from is frame_to:
        return identity_rotation(rotation_type)

    if FrameTag.ITRF not in (frame_from, frame_to):
        raise transformation_error(
            frame_from, frame_to, eop, "the frames belong to the FK5 and IAU-2006 theories"
        )

    resolve_theory(frame_from, frame_to, eop)
    if eop is None:
        raise transformation_error(frame_from, frame_to, eop, "polar motion requires EOP data")

    x_p, y_p = polar_motion(eop, jd_utc)

    if FrameTag.PEF in (frame_from, frame_to):
        if frame_from is FrameTag.ITRF:
            return r_itrf_to_pef_fk5(x_p, y_p, rotation_type)
        return r_pef_to_itrf_fk5(x_p, y_p, rotation_type)

    _, jd_tt = julian_dates(jd_utc, eop)
    if frame_from is FrameTag.ITRF:
        return r_itrf_to_tirs_iau2006(jd_tt, x_p, y_p, rotation_type)
    return r_tirs_to_itrf_iau2006(jd_tt, x_p, y_p, rotation_type)
