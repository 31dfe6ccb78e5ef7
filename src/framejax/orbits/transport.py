"""Orbit state transport between reference frames.

Positions are rotated directly.  Whenever the transformation crosses the
boundary between a quasi-inertial and an Earth-fixed frame, the velocity
and acceleration pick up the transport terms of the Earth rotation:

.. math::

    \\mathbf{r}_{\\text{ECEF}} &= D \\, \\mathbf{r}_{\\text{ECI}} \\\\
    \\mathbf{v}_{\\text{ECEF}} &= D \\, \\mathbf{v}_{\\text{ECI}}
        - \\boldsymbol{\\omega} \\times \\mathbf{r}_{\\text{ECEF}} \\\\
    \\mathbf{a}_{\\text{ECEF}} &= D \\, \\mathbf{a}_{\\text{ECI}}
        - \\boldsymbol{\\omega} \\times (\\boldsymbol{\\omega} \\times
          \\mathbf{r}_{\\text{ECEF}})
        - 2 \\boldsymbol{\\omega} \\times \\mathbf{v}_{\\text{ECEF}}

with :math:`\\omega = \\omega_E (1 - \\text{LOD} / 86400000)` about the Z
axis of PEF (FK5) or TIRS (IAU-2006).  The terms are applied in that
intermediate frame; ITRF differs from it only by polar motion, which is
treated as a plain rotation.

Transformations between two ECI frames, or between two ECEF frames, are
plain rotations of all three vectors.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.constants import GM_EARTH, OMEGA_EARTH
from framejax.eop import EopIau1980, EopIau2000A, get_lod
from framejax.frames import (
    FrameTag,
    Theory,
    as_frame,
    r_ecef_to_ecef,
    r_ecef_to_eci,
    r_eci_to_ecef,
    r_eci_to_eci,
)
from framejax.frames._resolve import resolve_theory, transformation_error
from framejax.orbits.keplerian import cartesian_to_keplerian, keplerian_to_cartesian
from framejax.orbits.state_vector import KeplerianElements, OrbitStateVector, as_state_vector


def earth_angular_velocity(jd_utc: ArrayLike, eop: EopIau1980 | EopIau2000A | None = None) -> Array:
    """Angular velocity vector of the Earth-fixed frames [rad/s].

    Args:
        jd_utc: Julian Date [UTC] at which the LOD is queried.
        eop: EOP providing the excess length of day.  Without it the
            nominal rate ``OMEGA_EARTH`` is used.

    Returns:
        jnp.ndarray: ``[0, 0, omega]``.
    """
    dtype = get_dtype()
    omega = jnp.asarray(OMEGA_EARTH, dtype=dtype)
    if eop is not None:
        omega = omega * (1.0 - get_lod(eop, jd_utc) / 86400000.0)
    zero = jnp.zeros((), dtype=dtype)
    return jnp.stack([zero, zero, omega])


def _rotate(sv: OrbitStateVector, D: Array, t=None) -> OrbitStateVector:
    return OrbitStateVector(sv.t if t is None else t, D @ sv.r, D @ sv.v, D @ sv.a)


def _epoch(sv: OrbitStateVector, jd_utc):
    return sv.t if jd_utc is None else jd_utc


def _terrestrial_frame(frame_from: FrameTag, frame_to: FrameTag, eop) -> FrameTag:
    if resolve_theory(frame_from, frame_to, eop) is Theory.FK5:
        return FrameTag.PEF
    return FrameTag.TIRS


def _require(frame_from: FrameTag, frame_to: FrameTag, eop, from_ecef: bool, to_ecef: bool) -> None:
    for frame, ecef in ((frame_from, from_ecef), (frame_to, to_ecef)):
        if frame.is_ecef != ecef:
            kind = "an ECEF" if ecef else "an ECI"
            raise transformation_error(frame_from, frame_to, eop, f"{frame.name} is not {kind} frame")
    if FrameTag.ITRF in (frame_from, frame_to) and eop is None:
        raise transformation_error(frame_from, frame_to, eop, "ITRF requires EOP data")


# ---------------------------------------------------------------------------
# State vectors
# ---------------------------------------------------------------------------


def sv_ecef_to_ecef(
    sv: OrbitStateVector,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    eop: EopIau1980 | EopIau2000A,
    jd_utc: ArrayLike | None = None,
) -> OrbitStateVector:
    """Transform a state vector between two Earth-fixed frames.

    Args:
        sv: State in ``frame_from``.
        frame_from: Origin ECEF frame.
        frame_to: Destination ECEF frame.
        eop: EOP matching the theory of the pair.
        jd_utc: Julian Date [UTC] of the rotation. Defaults to ``sv.t``.

    Returns:
        OrbitStateVector: State in ``frame_to``.
    """
    sv = as_state_vector(sv)
    D = r_ecef_to_ecef(frame_from, frame_to, _epoch(sv, jd_utc), eop)
    return _rotate(sv, D)


def sv_ecef_to_eci(
    sv: OrbitStateVector,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
) -> OrbitStateVector:
    """Transform a state vector from an Earth-fixed to a quasi-inertial frame.

    Args:
        sv: State in ``frame_from``.
        frame_from: Origin ECEF frame.
        frame_to: Destination ECI frame.
        jd_utc: Julian Date [UTC] of the rotation. Defaults to ``sv.t``.
        eop: EOP matching the theory, or ``None``.  ITRF requires it.

    Returns:
        OrbitStateVector: State in ``frame_to``.

    Raises:
        FrameTransformationError: Under the rules of :func:`r_ecef_to_eci`.

    Examples:
        ```python
        from framejax.eop import static_eop_iau1980
        from framejax.orbits import state_vector, sv_ecef_to_eci
        eop = static_eop_iau1980(x=-0.140682, y=0.333309, ut1_utc=-0.4399619,
                                 lod=1.5563, ddpsi=-52.195, ddeps=-3.875)
        sv = state_vector(2453101.827411, [-1033.479, 7901.295, 6380.357],
                          [-3.225637, -2.872451, 5.531924])
        sv_gcrf = sv_ecef_to_eci(sv, "ITRF", "GCRF", eop=eop)
        ```
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)
    _require(frame_from, frame_to, eop, from_ecef=True, to_ecef=False)

    sv = as_state_vector(sv)
    jd_utc = _epoch(sv, jd_utc)
    mid = _terrestrial_frame(frame_from, frame_to, eop)

    if frame_from is FrameTag.ITRF:
        sv = _rotate(sv, r_ecef_to_ecef(FrameTag.ITRF, mid, jd_utc, eop))

    D = r_ecef_to_eci(mid, frame_to, jd_utc, eop)
    w = earth_angular_velocity(jd_utc, eop)

    w_x_r = jnp.cross(w, sv.r)
    r_eci = D @ sv.r
    v_eci = D @ (sv.v + w_x_r)
    a_eci = D @ (sv.a + jnp.cross(w, w_x_r) + 2.0 * jnp.cross(w, sv.v))

    return OrbitStateVector(sv.t, r_eci, v_eci, a_eci)


def sv_eci_to_ecef(
    sv: OrbitStateVector,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
) -> OrbitStateVector:
    """Transform a state vector from a quasi-inertial to an Earth-fixed frame.

    Args:
        sv: State in ``frame_from``.
        frame_from: Origin ECI frame.
        frame_to: Destination ECEF frame.
        jd_utc: Julian Date [UTC] of the rotation. Defaults to ``sv.t``.
        eop: EOP matching the theory, or ``None``.  ITRF requires it.

    Returns:
        OrbitStateVector: State in ``frame_to``.

    Raises:
        FrameTransformationError: Under the rules of :func:`r_eci_to_ecef`.
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)
    _require(frame_from, frame_to, eop, from_ecef=False, to_ecef=True)

    sv = as_state_vector(sv)
    jd_utc = _epoch(sv, jd_utc)
    mid = _terrestrial_frame(frame_from, frame_to, eop)

    D = r_eci_to_ecef(frame_from, mid, jd_utc, eop)
    w = earth_angular_velocity(jd_utc, eop)

    r_ecef = D @ sv.r
    w_x_r = jnp.cross(w, r_ecef)
    v_ecef = D @ sv.v - w_x_r
    a_ecef = D @ sv.a - jnp.cross(w, w_x_r) - 2.0 * jnp.cross(w, v_ecef)

    sv_mid = OrbitStateVector(sv.t, r_ecef, v_ecef, a_ecef)
    if frame_to is FrameTag.ITRF:
        return _rotate(sv_mid, r_ecef_to_ecef(mid, FrameTag.ITRF, jd_utc, eop))
    return sv_mid


def sv_eci_to_eci(
    sv: OrbitStateVector,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_from: ArrayLike | None = None,
    jd_to: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
) -> OrbitStateVector:
    """Transform a state vector between two quasi-inertial frames.

    The relative angular velocity of two ECI frames is negligible, so all
    three vectors are rotated.

    Args:
        sv: State in ``frame_from``.
        frame_from: Origin ECI frame.
        frame_to: Destination ECI frame.
        jd_from: Julian Date [UTC] of ``frame_from``. Defaults to ``sv.t``.
        jd_to: Julian Date [UTC] of ``frame_to``. Defaults to ``jd_from``.
        eop: EOP matching the theory, or ``None``.

    Returns:
        OrbitStateVector: State in ``frame_to``, stamped with ``jd_to``
            when it is given.
    """
    sv = as_state_vector(sv)
    D = r_eci_to_eci(frame_from, _epoch(sv, jd_from), frame_to, jd_to, eop)
    t = None if jd_to is None else jnp.asarray(jd_to, dtype=get_dtype())
    return _rotate(sv, D, t)


def transform_state_vector(
    sv: OrbitStateVector,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_utc: ArrayLike | None = None,
    jd_to: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
) -> OrbitStateVector:
    """Transform a state vector between any two supported frames.

    Forwards to :func:`sv_ecef_to_ecef`, :func:`sv_ecef_to_eci`,
    :func:`sv_eci_to_ecef` or :func:`sv_eci_to_eci`.

    Args:
        sv: State in ``frame_from``.
        frame_from: Origin frame.
        frame_to: Destination frame.
        jd_utc: Julian Date [UTC] of the rotation. Defaults to ``sv.t``.
        jd_to: Julian Date [UTC] of ``frame_to``.  Only valid between two
            ECI frames.
        eop: EOP matching the theory, or ``None``.

    Returns:
        OrbitStateVector: State in ``frame_to``.
    """
    frame_from = as_frame(frame_from)
    frame_to = as_frame(frame_to)

    if frame_from.is_eci and frame_to.is_eci:
        return sv_eci_to_eci(sv, frame_from, frame_to, jd_utc, jd_to, eop)

    if jd_to is not None:
        raise transformation_error(
            frame_from, frame_to, eop, "a second epoch only applies between ECI frames"
        )

    if frame_from.is_ecef and frame_to.is_ecef:
        return sv_ecef_to_ecef(sv, frame_from, frame_to, eop, jd_utc)
    if frame_from.is_ecef:
        return sv_ecef_to_eci(sv, frame_from, frame_to, jd_utc, eop)
    return sv_eci_to_ecef(sv, frame_from, frame_to, jd_utc, eop)


# ---------------------------------------------------------------------------
# Keplerian elements
# ---------------------------------------------------------------------------


def orb_eci_to_eci(
    elements: KeplerianElements,
    frame_from: FrameTag | str,
    frame_to: FrameTag | str,
    jd_to: ArrayLike | None = None,
    eop: EopIau1980 | EopIau2000A | None = None,
    gm: float = GM_EARTH,
) -> KeplerianElements:
    """Express Keplerian elements in another ECI frame.

    The elements are converted to a Cartesian state, rotated with
    :func:`sv_eci_to_eci` (``frame_from`` evaluated at ``elements.t``), and
    converted back.

    Args:
        elements: Elements in ``frame_from``.
        frame_from: Origin ECI frame.
        frame_to: Destination ECI frame.
        jd_to: Julian Date [UTC] of ``frame_to``. Defaults to ``elements.t``.
        eop: EOP matching the theory, or ``None``.
        gm: Gravitational parameter. Default: ``GM_EARTH`` [m^3/s^2].

    Returns:
        KeplerianElements: Elements in ``frame_to``.
    """
    sv = keplerian_to_cartesian(elements, gm)
    sv_to = sv_eci_to_eci(sv, frame_from, frame_to, elements.t, jd_to, eop)
    return cartesian_to_keplerian(sv_to, gm)
