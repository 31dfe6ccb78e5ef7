"""Reference ellipsoids."""

from __future__ import annotations

import math
from typing import NamedTuple

from framejax.constants import WGS84_a, WGS84_f


class Ellipsoid(NamedTuple):
    """Reference ellipsoid of revolution.

    Attributes:
        a: Semi-major axis [m].
        f: Flattening.
        b: Semi-minor axis [m].
        e2: First eccentricity squared.
        el2: Second eccentricity squared.
    """

    a: float
    f: float
    b: float
    e2: float
    el2: float


def create_ellipsoid(a: float, f: float) -> Ellipsoid:
    """Build an :class:`Ellipsoid` from its semi-major axis and flattening.

    Args:
        a: Semi-major axis [m].
        f: Flattening.

    Returns:
        Ellipsoid: With the derived semi-minor axis and eccentricities.

    Examples:
        ```python
        from framejax.coordinates import create_ellipsoid
        grs80 = create_ellipsoid(6378137.0, 1.0 / 298.257222101)
        ```
    """
    b = a * (1.0 - f)
    e2 = (a * a - b * b) / (a * a)
    el2 = (a * a - b * b) / (b * b) if b != 0.0 else math.inf
    if not math.isfinite(el2) or e2 < 0.0:
        raise ValueError(f"Invalid ellipsoid parameters a={a}, f={f}")
    return Ellipsoid(a=a, f=f, b=b, e2=e2, el2=el2)


WGS84 = create_ellipsoid(WGS84_a, WGS84_f)
"""The WGS-84 ellipsoid (NIMA TR8350.2)."""
