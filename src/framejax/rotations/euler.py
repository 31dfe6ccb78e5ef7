"""Euler angle sequences as DCMs and quaternions.

A sequence such as ``ZYX`` with angles ``(a1, a2, a3)`` rotates first by
``a1`` about Z, then by ``a2`` about the new Y, then by ``a3`` about the new
X.  For passive rotations the resulting DCM is ``R3(a3) @ R2(a2) @ R1(a1)``
and the quaternion is ``q1 * q2 * q3``.
"""

from __future__ import annotations

import enum

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.rotations.quaternions import axis_quaternion, quaternion_multiply
from framejax.rotations.rotation_matrices import Rx, Ry, Rz


class EulerAngleOrder(enum.IntEnum):
    """The 12 standard Euler angle rotation sequences.

    Each member specifies the axes for three successive rotations.  For
    example, ``XYZ`` means rotate first about X, then Y, then Z.

    Attributes:
        XYX: X-Y-X symmetric sequence.
        XYZ: X-Y-Z Tait-Bryan sequence.
        XZX: X-Z-X symmetric sequence, used by the nutation rotations.
        XZY: X-Z-Y Tait-Bryan sequence.
        YXY: Y-X-Y symmetric sequence.
        YXZ: Y-X-Z Tait-Bryan sequence.
        YZX: Y-Z-X Tait-Bryan sequence.
        YZY: Y-Z-Y symmetric sequence.
        ZXY: Z-X-Y Tait-Bryan sequence.
        ZXZ: Z-X-Z symmetric sequence.
        ZYX: Z-Y-X Tait-Bryan sequence.
        ZYZ: Z-Y-Z symmetric sequence, used by the FK5 precession.
    """

    XYX = 0
    XYZ = 1
    XZX = 2
    XZY = 3
    YXY = 4
    YXZ = 5
    YZX = 6
    YZY = 7
    ZXY = 8
    ZXZ = 9
    ZYX = 10
    ZYZ = 11

    @property
    def axes(self) -> tuple[str, str, str]:
        """The three rotation axes, e.g. ``("Z", "Y", "X")``."""
        return tuple(self.name)


_AXIS_DCM = {"X": Rx, "Y": Ry, "Z": Rz}


def _as_order(order: EulerAngleOrder | str) -> EulerAngleOrder:
    if isinstance(order, EulerAngleOrder):
        return order
    try:
        return EulerAngleOrder[str(order).upper()]
    except KeyError as err:
        raise ValueError(
            f"Unknown rotation sequence '{order}'. "
            f"Must be one of: {', '.join(o.name for o in EulerAngleOrder)}"
        ) from err


def angle_to_dcm(
    a1: ArrayLike,
    a2: ArrayLike,
    a3: ArrayLike,
    order: EulerAngleOrder | str = EulerAngleOrder.ZYX,
) -> Array:
    """DCM for three successive rotations about the axes of ``order``.

    Args:
        a1 (ArrayLike): First rotation angle [rad].
        a2 (ArrayLike): Second rotation angle [rad].
        a3 (ArrayLike): Third rotation angle [rad].
        order (EulerAngleOrder | str): Rotation sequence. Default: ``ZYX``.

    Returns:
        jnp.ndarray: DCM of shape ``(3, 3)``.

    Raises:
        ValueError: If ``order`` is not a valid sequence name.

    Examples:
        ```python
        from framejax.rotations import angle_to_dcm
        D = angle_to_dcm(0.1, 0.0, 0.0, "ZYX")  # same as Rz(0.1)
        ```
    """
    ax1, ax2, ax3 = _as_order(order).axes
    return _AXIS_DCM[ax3](a3) @ _AXIS_DCM[ax2](a2) @ _AXIS_DCM[ax1](a1)


def angle_to_quaternion(
    a1: ArrayLike,
    a2: ArrayLike,
    a3: ArrayLike,
    order: EulerAngleOrder | str = EulerAngleOrder.ZYX,
) -> Array:
    """Quaternion for three successive rotations about the axes of ``order``.

    Args:
        a1 (ArrayLike): First rotation angle [rad].
        a2 (ArrayLike): Second rotation angle [rad].
        a3 (ArrayLike): Third rotation angle [rad].
        order (EulerAngleOrder | str): Rotation sequence. Default: ``ZYX``.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` with ``q0 >= 0``.

    Raises:
        ValueError: If ``order`` is not a valid sequence name.
    """
    ax1, ax2, ax3 = _as_order(order).axes
    q = quaternion_multiply(
        quaternion_multiply(axis_quaternion(ax1, a1), axis_quaternion(ax2, a2)),
        axis_quaternion(ax3, a3),
    )
    return jnp.where(q[0] < 0.0, -q, q)
