"""Single entry point that dispatches on the categories of a frame pair."""

from __future__ import annotations

from jax import Array
from jax.typing import ArrayLike

from framejax.eop import EopIau1980, EopIau2000A
from framejax.frames._resolve import transformation_error
from framejax.frames._types import FrameTag, as_frame
from framejax.frames.ecef_to_ecef import r_ecef_to_ecef
from framejax.frames.ecef_to_eci import r_eci_to_ecef, r_ecef_to_eci
from framejax.frames.eci_to_eci import r_eci_to_eci
from framejax.rotations import RotationType


def rotation(
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike,
    jd_to: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
    rotation_type: RotationType | str = RotationType.DCM,
) -> Array:
    """Rotation between any two supported frames.

    Forwards to :func:`r_ecef_to_ecef`, :func:`r_ecef_to_eci`,
    :func:`r_eci_to_ecef` or :func:`r_eci_to_eci` according to whether each
    frame is Earth-fixed or quasi-inertial.

    Args:
        frame_from: Origin frame.
        frame_to: Destination frame.
        jd_utc: Julian Date [UTC] of the rotation, or of ``frame_from`` for
            ECI -> ECI pairs.
        jd_to: Julian Date [UTC] of ``frame_to``.  Only valid between two
            ECI frames.
        eop: EOP of the type matching the theory, or ``None``.
        rotation_type: Representation of the result. Default: DCM.

    Returns:
        jnp.ndarray: Rotation that aligns ``frame_from`` with ``frame_to``.

    Raises:
        FrameTransformationError: If the pair cannot be transformed, or if
            ``jd_to`` is given for a pair that involves an ECEF frame.

    Examples:
        ```python
        from framejax.frames import rotation
        q = rotation("TEME", "TOD", 2453101.827411, rotation_type="quaternion")
        ```
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)

    if frame_from.is_eci and frame_to.is_eci:
        return r_eci_to_eci(frame_from, jd_utc, frame_to, jd_to, eop, rotation_type)

    if jd_to is not None:
        raise transformation_error(
            frame_from, frame_to, eop, "a second epoch only applies between ECI frames"
        )

    if frame_from.is_ecef and frame_to.is_ecef:
        return r_ecef_to_ecef(frame_from, frame_to, jd_utc, eop, rotation_type)
    if frame_from.is_ecef:
        return r_ecef_to_eci(frame_from, frame_to, jd_utc, eop, rotation_type)
    return r_eci_to_ecef(frame_from, frame_to, jd_utc, eop, rotation_type)
