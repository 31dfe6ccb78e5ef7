"""Rotation algebra for frame transformations.

Elementary DCMs, Euler sequences, small-angle rotations, quaternion
conversions, and representation-agnostic composition and inversion.
"""

from framejax.rotations.euler import EulerAngleOrder, angle_to_dcm, angle_to_quaternion
from framejax.rotations.quaternions import (
    axis_quaternion,
    dcm_to_quaternion,
    quaternion_conjugate,
    quaternion_multiply,
    quaternion_rotate_vector,
    quaternion_to_dcm,
    smallangle_to_quaternion,
)
from framejax.rotations.rotation import (
    RotationType,
    angle_to_rot,
    as_rotation_type,
    compose_rotation,
    dcm_to_rot,
    identity_rotation,
    inv_rotation,
    is_quaternion,
    rotate_vector,
    smallangle_to_rot,
    to_dcm,
    to_quaternion,
)
from framejax.rotations.rotation_matrices import Rx, Ry, Rz, smallangle_to_dcm

__all__ = [
    "EulerAngleOrder",
    "RotationType",
    "Rx",
    "Ry",
    "Rz",
    "angle_to_dcm",
    "angle_to_quaternion",
    "angle_to_rot",
    "as_rotation_type",
    "axis_quaternion",
    "compose_rotation",
    "dcm_to_quaternion",
    "dcm_to_rot",
    "identity_rotation",
    "inv_rotation",
    "is_quaternion",
    "quaternion_conjugate",
    "quaternion_multiply",
    "quaternion_rotate_vector",
    "quaternion_to_dcm",
    "rotate_vector",
    "smallangle_to_dcm",
    "smallangle_to_quaternion",
    "smallangle_to_rot",
    "to_dcm",
    "to_quaternion",
]
