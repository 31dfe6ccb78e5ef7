"""Theory resolution and EOP-derived arguments for the frame selector."""

from __future__ import annotations

import logging

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.constants import AS2RAD, MAS2RAD
from framejax.eop import (
    EopIau1980,
    EopIau2000A,
    dxdy_to_ddeps_ddpsi,
    get_cip_corrections,
    get_nutation_corrections,
    get_pm,
    get_ut1_utc,
)
from framejax.frames._types import (
    ANCHOR_FRAMES,
    FK5_FRAMES,
    IAU2006_FRAMES,
    FrameTag,
    FrameTransformationError,
    Theory,
)
from framejax.time import jd_utc_to_tt, jd_utc_to_ut1

logger = logging.getLogger(__name__)

_EOP_THEORY = {EopIau1980: Theory.FK5, EopIau2000A: Theory.IAU2006}


def eop_name(eop) -> str:
    """Name of the EOP type for error messages, or ``"no EOP"``."""
    return "no EOP" if eop is None else type(eop).__name__


def transformation_error(
    frame_from: FrameTag, frame_to: FrameTag, eop, reason: str
) -> FrameTransformationError:
    """Build the error raised when a frame pair cannot be transformed.

    The message names both frames, the EOP type and *reason*.
    """
    return FrameTransformationError(
        f"Cannot transform {frame_from.name} -> {frame_to.name} with {eop_name(eop)}: {reason}"
    )


def resolve_theory(frame_from: FrameTag, frame_to: FrameTag, eop) -> Theory:
    """Infer the theory of a frame pair and check it against the EOP type.

    Raises:
        FrameTransformationError: If the frames belong to different theories,
            if the EOP type belongs to the other theory, or if only ITRF/GCRF
            are involved and no EOP was given to choose a theory.
    """
    if eop is not None and type(eop) not in _EOP_THEORY:
        raise transformation_error(frame_from, frame_to, eop, "unsupported EOP type")

    specific = {frame_from, frame_to} - ANCHOR_FRAMES
    fk5 = any(f in FK5_FRAMES for f in specific)
    iau = any(f in IAU2006_FRAMES for f in specific)

    if fk5 and iau:
        raise transformation_error(
            frame_from, frame_to, eop, "the frames belong to the FK5 and IAU-2006 theories"
        )

    eop_theory = None if eop is None else _EOP_THEORY[type(eop)]

    if fk5:
        theory = Theory.FK5
    elif iau:
        theory = Theory.IAU2006
    elif eop_theory is not None:
        logger.debug(
            "%s -> %s resolved to %s from %s",
            frame_from.name,
            frame_to.name,
            eop_theory.value,
            eop_name(eop),
        )
        return eop_theory
    else:
        raise transformation_error(
            frame_from, frame_to, eop, "EOP data is required to select the theory"
        )

    if eop_theory is not None and eop_theory is not theory:
        expected = "EopIau1980" if theory is Theory.FK5 else "EopIau2000A"
        raise transformation_error(
            frame_from, frame_to, eop, f"the {theory.value} theory requires {expected}"
        )
    logger.debug("%s -> %s resolved to %s", frame_from.name, frame_to.name, theory.value)
    return theory


def julian_dates(jd_utc: ArrayLike, eop) -> tuple[Array, Array]:
    """Return ``(jd_ut1, jd_tt)``.  UT1 equals UTC when ``eop`` is ``None``."""
    jd_utc = jnp.asarray(jd_utc, dtype=get_dtype())
    jd_tt = jd_utc_to_tt(jd_utc)
    if eop is None:
        return jd_utc, jd_tt
    return jd_utc_to_ut1(jd_utc, get_ut1_utc(eop, jd_utc)), jd_tt


def polar_motion(eop, jd_utc: ArrayLike) -> tuple[Array, Array]:
    """Polar motion ``(x_p, y_p)`` [rad]."""
    x, y = get_pm(eop, jd_utc)
    return x * AS2RAD, y * AS2RAD


def fk5_corrections(eop, jd_utc: ArrayLike) -> tuple[Array, Array]:
    """IAU-1980 nutation corrections ``(ddeps, ddpsi)`` [rad], zero without EOP."""
    if eop is None:
        return 0.0, 0.0
    ddeps, ddpsi = get_nutation_corrections(eop, jd_utc)
    return ddeps * MAS2RAD, ddpsi * MAS2RAD


def cip_offsets(eop, jd_utc: ArrayLike) -> tuple[Array, Array]:
    """Celestial pole offsets ``(dx, dy)`` [rad], zero without EOP."""
    if eop is None:
        return 0.0, 0.0
    dx, dy = get_cip_corrections(eop, jd_utc)
    return dx * MAS2RAD, dy * MAS2RAD


def iau2006_corrections(eop, jd_utc: ArrayLike) -> tuple[Array, Array]:
    """Equinox nutation corrections ``(ddeps, ddpsi)`` [rad], zero without EOP."""
    if eop is None:
        return 0.0, 0.0
    ddeps, ddpsi = dxdy_to_ddeps_ddpsi(eop, jd_utc)
    return ddeps * MAS2RAD, ddpsi * MAS2RAD
