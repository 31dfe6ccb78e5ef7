"""Representation-agnostic rotation algebra.

Frame rotations are returned either as a DCM (``(3, 3)`` array) or as a
unit quaternion (``(4,)`` array), selected with :class:`RotationType`.  The
helpers here construct, compose, invert and apply both representations; the
representation of an existing rotation is read from its static shape, so
the helpers trace cleanly under ``jax.jit``.
"""

from __future__ import annotations

import enum
from functools import reduce

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.config import get_dtype
from framejax.rotations.euler import EulerAngleOrder, angle_to_dcm, angle_to_quaternion
from framejax.rotations.quaternions import (
    dcm_to_quaternion,
    quaternion_conjugate,
    quaternion_multiply,
    quaternion_rotate_vector,
    quaternion_to_dcm,
    smallangle_to_quaternion,
)
from framejax.rotations.rotation_matrices import smallangle_to_dcm


class RotationType(enum.Enum):
    """Representation returned by the frame rotation functions.

    Attributes:
        DCM: 3x3 direction cosine matrix.
        QUATERNION: Unit quaternion, scalar first.
    """

    DCM = "dcm"
    QUATERNION = "quaternion"


def as_rotation_type(rotation_type: RotationType | str) -> RotationType:
    """Coerce a :class:`RotationType` or its string value."""
    if isinstance(rotation_type, RotationType):
        return rotation_type
    try:
        return RotationType(str(rotation_type).lower())
    except ValueError as err:
        raise ValueError(
            f"Unknown rotation type '{rotation_type}'. Must be 'dcm' or 'quaternion'"
        ) from err


def is_quaternion(rotation: Array) -> bool:
    """Return ``True`` if ``rotation`` is a quaternion (shape ``(4,)``)."""
    return jnp.shape(rotation) == (4,)


def identity_rotation(rotation_type: RotationType | str = RotationType.DCM) -> Array:
    """The identity rotation in the requested representation."""
    dtype = get_dtype()
    if as_rotation_type(rotation_type) is RotationType.QUATERNION:
        return jnp.array([1.0, 0.0, 0.0, 0.0], dtype=dtype)
    return jnp.eye(3, dtype=dtype)


def angle_to_rot(
    rotation_type: RotationType | str,
    a1: ArrayLike,
    a2: ArrayLike,
    a3: ArrayLike,
    order: EulerAngleOrder | str = EulerAngleOrder.ZYX,
) -> Array:
    """Euler-sequence rotation in the requested representation."""
    if as_rotation_type(rotation_type) is RotationType.QUATERNION:
        return angle_to_quaternion(a1, a2, a3, order)
    return angle_to_dcm(a1, a2, a3, order)


def smallangle_to_rot(
    rotation_type: RotationType | str,
    theta_x: ArrayLike,
    theta_y: ArrayLike,
    theta_z: ArrayLike,
) -> Array:
    """First-order small-angle rotation in the requested representation."""
    if as_rotation_type(rotation_type) is RotationType.QUATERNION:
        return smallangle_to_quaternion(theta_x, theta_y, theta_z)
    return smallangle_to_dcm(theta_x, theta_y, theta_z)


def dcm_to_rot(rotation_type: RotationType | str, D: Array) -> Array:
    """Return the DCM ``D`` in the requested representation."""
    if as_rotation_type(rotation_type) is RotationType.QUATERNION:
        return dcm_to_quaternion(D)
    return D


def to_dcm(rotation: Array) -> Array:
    """Return ``rotation`` as a DCM."""
    if is_quaternion(rotation):
        return quaternion_to_dcm(rotation)
    return rotation


def to_quaternion(rotation: Array) -> Array:
    """Return ``rotation`` as a quaternion."""
    if is_quaternion(rotation):
        return rotation
    return dcm_to_quaternion(rotation)


def inv_rotation(rotation: Array) -> Array:
    """Inverse rotation: the transpose of a DCM or the conjugate of a quaternion."""
    if is_quaternion(rotation):
        return quaternion_conjugate(rotation)
    return jnp.swapaxes(rotation, -1, -2)


def compose_rotation(*rotations: Array) -> Array:
    """Compose rotations in the order they are applied.

    ``compose_rotation(R1, R2, R3)`` first applies ``R1``, then ``R2``, then
    ``R3``.  For DCMs that is ``R3 @ R2 @ R1`` and for quaternions
    ``q1 * q2 * q3``.  All arguments must share one representation.

    Args:
        *rotations: One or more DCMs or quaternions.

    Returns:
        jnp.ndarray: The composed rotation, in the representation of the
            inputs.

    Raises:
        ValueError: If no rotation is given or the representations differ.
    """
    if not rotations:
        raise ValueError("compose_rotation requires at least one rotation")

    quaternion = is_quaternion(rotations[0])
    if any(is_quaternion(r) != quaternion for r in rotations[1:]):
        raise ValueError("Cannot compose DCMs and quaternions in a single call")

    if quaternion:
        q = reduce(quaternion_multiply, rotations)
        return q / jnp.linalg.norm(q)
    return reduce(lambda acc, D: D @ acc, rotations)


def rotate_vector(rotation: Array, v: ArrayLike) -> Array:
    """Express the vector ``v`` in the frame reached by ``rotation``."""
    if is_quaternion(rotation):
        return quaternion_rotate_vector(rotation, v)
    return rotation @ jnp.asarray(v)
