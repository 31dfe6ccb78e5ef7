"""Type definitions for Earth Orientation Parameters (EOP).

Provides the core data types for EOP storage and lookup:

- :class:`EopSeries`: one tabulated channel (knots and values) queried by
  linear interpolation with flat extrapolation.
- :class:`EopIau1980`: the channels of the IERS ``finals.all`` product,
  consumed by the IAU-76/FK5 transformations.
- :class:`EopIau2000A`: the channels of the IERS ``finals2000A.all``
  product, consumed by the IAU-2006/2010 transformations.
- :class:`EopProduct`: selects which of the two products to parse or
  download.

All containers are :class:`~typing.NamedTuple` instances, which JAX treats
as pytrees.  They can be passed straight into ``jax.jit``-compiled
functions, and the arrays they hold are never mutated.
"""

from __future__ import annotations

import enum
from typing import NamedTuple

from jax import Array


class EopSeries(NamedTuple):
    """A single tabulated EOP channel.

    Attributes:
        jd: Strictly increasing Julian Dates [UTC] of the knots, shape ``(N,)``.
        values: Channel value at each knot, shape ``(N,)``.
    """

    jd: Array
    values: Array


class EopIau1980(NamedTuple):
    """EOP series for the IAU-76/FK5 theory.

    Units follow the IERS product: polar motion in arcsec, UT1-UTC in
    seconds, LOD in milliseconds, and the nutation corrections in
    milliarcseconds.

    Attributes:
        x: Polar motion x-component [arcsec].
        y: Polar motion y-component [arcsec].
        ut1_utc: UT1-UTC [s].
        lod: Excess length of day [ms].
        ddpsi: Correction to the nutation in longitude [mas].
        ddeps: Correction to the nutation in obliquity [mas].
        x_error: Formal error of ``x`` [arcsec].
        y_error: Formal error of ``y`` [arcsec].
        ut1_utc_error: Formal error of ``ut1_utc`` [s].
        lod_error: Formal error of ``lod`` [ms].
        ddpsi_error: Formal error of ``ddpsi`` [mas].
        ddeps_error: Formal error of ``ddeps`` [mas].
    """

    x: EopSeries
    y: EopSeries
    ut1_utc: EopSeries
    lod: EopSeries
    ddpsi: EopSeries
    ddeps: EopSeries
    x_error: EopSeries
    y_error: EopSeries
    ut1_utc_error: EopSeries
    lod_error: EopSeries
    ddpsi_error: EopSeries
    ddeps_error: EopSeries


class EopIau2000A(NamedTuple):
    """EOP series for the IAU-2006/2010 theory.

    Attributes:
        x: Polar motion x-component [arcsec].
        y: Polar motion y-component [arcsec].
        ut1_utc: UT1-UTC [s].
        lod: Excess length of day [ms].
        dx: Celestial pole offset dX [mas].
        dy: Celestial pole offset dY [mas].
        x_error: Formal error of ``x`` [arcsec].
        y_error: Formal error of ``y`` [arcsec].
        ut1_utc_error: Formal error of ``ut1_utc`` [s].
        lod_error: Formal error of ``lod`` [ms].
        dx_error: Formal error of ``dx`` [mas].
        dy_error: Formal error of ``dy`` [mas].
    """

    x: EopSeries
    y: EopSeries
    ut1_utc: EopSeries
    lod: EopSeries
    dx: EopSeries
    dy: EopSeries
    x_error: EopSeries
    y_error: EopSeries
    ut1_utc_error: EopSeries
    lod_error: EopSeries
    dx_error: EopSeries
    dy_error: EopSeries


class EopProduct(enum.Enum):
    """IERS EOP product variants.

    Attributes:
        IAU1980: ``finals.all.csv``, nutation corrections dPsi/dEps.
        IAU2000A: ``finals2000A.all.csv``, celestial pole offsets dX/dY.
    """

    IAU1980 = "IAU1980"
    IAU2000A = "IAU2000A"


class EopFormatError(ValueError):
    """Raised when an EOP product does not match a known column layout."""
