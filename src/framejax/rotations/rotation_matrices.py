"""Elementary direction cosine matrices.

All matrices are *passive*: ``Rz(angle) @ v`` expresses the vector ``v`` in
a frame rotated by ``angle`` about the z-axis.  This is the convention of
the IERS Conventions and of Vallado, so frame transformations compose by
plain matrix multiplication.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from framejax.utils import to_radians


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the x-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and Applications*, 2012, p.27.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[one, zero, zero],
                      [zero,  +c,   +s],
                      [zero,  -s,   +c]])


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the y-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[  +c, zero,   -s],
                      [zero,  one, zero],
                      [  +s, zero,   +c]])


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Rotation matrix, for a rotation about the z-axis.

    Args:
        angle (ArrayLike): Counter-clockwise angle of rotation as viewed
            looking back along the postive direction of the rotation axis.
        use_degrees (bool): Handle input in degrees. Default: ``False``

    Returns:
        jnp.ndarray: Rotation matrix.
    """
    angle = to_radians(angle, use_degrees)

    c = jnp.cos(angle)
    s = jnp.sin(angle)
    zero = jnp.zeros_like(c)
    one = jnp.ones_like(c)

    return jnp.array([[  +c,   +s, zero],
                      [  -s,   +c, zero],
                      [zero, zero,  one]])


def smallangle_to_dcm(theta_x: ArrayLike, theta_y: ArrayLike, theta_z: ArrayLike) -> Array:
    """First-order DCM for three small rotations about the x, y and z axes.

    Only valid when every angle is small enough for ``sin(a) ~ a`` and
    ``cos(a) ~ 1``.  Polar motion (a fraction of an arcsecond) is the
    typical use.  The result is orthonormal only to first order.

    Args:
        theta_x (ArrayLike): Rotation about the x-axis [rad].
        theta_y (ArrayLike): Rotation about the y-axis [rad].
        theta_z (ArrayLike): Rotation about the z-axis [rad].

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    theta_x = jnp.asarray(theta_x)
    theta_y = jnp.asarray(theta_y)
    theta_z = jnp.asarray(theta_z)
    one = jnp.ones_like(theta_x + theta_y + theta_z)

    return jnp.array([[     one, +theta_z, -theta_y],
                      [-theta_z,      one, +theta_x],
                      [+theta_y, -theta_x,      one]])
