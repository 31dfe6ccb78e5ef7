"""Quaternion kernels for frame rotations.

Quaternions are raw JAX arrays of shape ``(4,)`` in scalar-first order
``[q0, q1, q2, q3]``.  A quaternion ``q`` represents the same passive
rotation as the DCM ``quaternion_to_dcm(q)``, so a vector is transformed as
``v' = q* v q``.  With that convention the rotation "apply ``q1``, then
``q2``" is the Hamilton product ``q1 * q2``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

_AXIS_INDEX = {"X": 1, "Y": 2, "Z": 3}


def axis_quaternion(axis: str, angle: ArrayLike) -> Array:
    """Quaternion for a rotation of ``angle`` about a coordinate axis.

    Args:
        axis (str): One of ``"X"``, ``"Y"`` or ``"Z"``.
        angle (ArrayLike): Rotation angle [rad].

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.
    """
    half = jnp.asarray(angle) / 2.0
    q = jnp.zeros(4, dtype=half.dtype)
    q = q.at[0].set(jnp.cos(half))
    return q.at[_AXIS_INDEX[axis]].set(jnp.sin(half))


def smallangle_to_quaternion(theta_x: ArrayLike, theta_y: ArrayLike, theta_z: ArrayLike) -> Array:
    """First-order quaternion for three small rotations about x, y and z.

    The result is normalized.

    Args:
        theta_x (ArrayLike): Rotation about the x-axis [rad].
        theta_y (ArrayLike): Rotation about the y-axis [rad].
        theta_z (ArrayLike): Rotation about the z-axis [rad].

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)``.
    """
    theta_x = jnp.asarray(theta_x)
    q = jnp.array([jnp.ones_like(theta_x), theta_x / 2.0, theta_y / 2.0, theta_z / 2.0])
    return q / jnp.linalg.norm(q)


# ---------------------------------------------------------------------------
# Algebra
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: Array, q2: Array) -> Array:
    """Hamilton product of two quaternions.

    Args:
        q1 (jax.Array): First quaternion of shape ``(4,)`` in scalar-first order.
        q2 (jax.Array): Second quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: Product quaternion of shape ``(4,)``.
    """
    s1, v1 = q1[0], q1[1:]
    s2, v2 = q2[0], q2[1:]

    s = s1 * s2 - jnp.dot(v1, v2)
    v = s1 * v2 + s2 * v1 + jnp.cross(v1, v2)

    return jnp.concatenate([jnp.array([s]), v])


def quaternion_conjugate(q: Array) -> Array:
    """Conjugate of a quaternion, which is its inverse for unit quaternions."""
    return q * jnp.array([1.0, -1.0, -1.0, -1.0], dtype=q.dtype)


def quaternion_rotate_vector(q: Array, v: ArrayLike) -> Array:
    """Express the vector ``v`` in the frame rotated by ``q``.

    Computes the vector part of ``q* v q`` without forming the product
    quaternions.

    Args:
        q (jax.Array): Unit quaternion of shape ``(4,)``.
        v (ArrayLike): Vector of shape ``(3,)``.

    Returns:
        jnp.ndarray: Rotated vector of shape ``(3,)``.
    """
    v = jnp.asarray(v)
    s, u = q[0], q[1:]
    return (s * s - jnp.dot(u, u)) * v + 2.0 * jnp.dot(u, v) * u - 2.0 * s * jnp.cross(u, v)


# ---------------------------------------------------------------------------
# Quaternion <-> DCM
# ---------------------------------------------------------------------------

def quaternion_to_dcm(q: Array) -> Array:
    """Convert a unit quaternion to a direction cosine matrix.

    Uses the bilinear product form (Diebel eq. 125).

    Args:
        q (jax.Array): Quaternion of shape ``(4,)`` in scalar-first order.

    Returns:
        jnp.ndarray: DCM of shape ``(3, 3)``.
    """
    qs, q1, q2, q3 = q[0], q[1], q[2], q[3]

    return jnp.array([
        [qs*qs + q1*q1 - q2*q2 - q3*q3,  2.0*q1*q2 + 2.0*qs*q3,          2.0*q1*q3 - 2.0*qs*q2],
        [2.0*q1*q2 - 2.0*qs*q3,           qs*qs - q1*q1 + q2*q2 - q3*q3,  2.0*q2*q3 + 2.0*qs*q1],
        [2.0*q1*q3 + 2.0*qs*q2,           2.0*q2*q3 - 2.0*qs*q1,          qs*qs - q1*q1 - q2*q2 + q3*q3],
    ])


def dcm_to_quaternion(D: Array) -> Array:
    """Convert a direction cosine matrix to a unit quaternion.

    Uses Shepperd's method, selecting the largest of the four candidate
    diagonal combinations with ``jax.lax.switch`` so the conversion never
    divides by a small number.  The sign is fixed so that ``q0 >= 0``.

    Args:
        D (jax.Array): DCM of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Unit quaternion of shape ``(4,)`` in scalar-first order.
    """
    qvec = jnp.array([
        1.0 + D[0, 0] + D[1, 1] + D[2, 2],
        1.0 + D[0, 0] - D[1, 1] - D[2, 2],
        1.0 - D[0, 0] + D[1, 1] - D[2, 2],
        1.0 - D[0, 0] - D[1, 1] + D[2, 2],
    ])

    ind_max = jnp.argmax(qvec)
    sq = jnp.sqrt(qvec[ind_max])

    def _case0(_):
        return 0.5 * jnp.array([
            sq,
            (D[1, 2] - D[2, 1]) / sq,
            (D[2, 0] - D[0, 2]) / sq,
            (D[0, 1] - D[1, 0]) / sq,
        ])

    def _case1(_):
        return 0.5 * jnp.array([
            (D[1, 2] - D[2, 1]) / sq,
            sq,
            (D[0, 1] + D[1, 0]) / sq,
            (D[2, 0] + D[0, 2]) / sq,
        ])

    def _case2(_):
        return 0.5 * jnp.array([
            (D[2, 0] - D[0, 2]) / sq,
            (D[0, 1] + D[1, 0]) / sq,
            sq,
            (D[1, 2] + D[2, 1]) / sq,
        ])

    def _case3(_):
        return 0.5 * jnp.array([
            (D[0, 1] - D[1, 0]) / sq,
            (D[2, 0] + D[0, 2]) / sq,
            (D[1, 2] + D[2, 1]) / sq,
            sq,
        ])

    q = jax.lax.switch(ind_max, [_case0, _case1, _case2, _case3], None)
    q = q / jnp.linalg.norm(q)
    return jnp.where(q[0] < 0.0, -q, q)
