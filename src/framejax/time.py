"""Time-scale helpers for the frame transformations.

Every transformation is driven by a single UTC Julian Date.  Precession and
nutation are evaluated in Terrestrial Time, sidereal rotation in UT1, and
EOP series are indexed in UTC.  This module derives TT and UT1 from UTC
consistently: TT through the leap-second table, UT1 through the
``UT1 - UTC`` offset supplied by the caller (usually read from an EOP
series).

All functions are JIT-compatible.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import JD_MJD_OFFSET, SECONDS_PER_DAY, TT_TAI

# Leap second table: (MJD of introduction, TAI-UTC in seconds)
# Each entry marks the MJD at which TAI-UTC steps to the given value.
# Source: IERS Bulletin C / USNO leap second table (1972-01-01 through 2017-01-01).
_LEAP_SECOND_TABLE: tuple[tuple[float, float], ...] = (
    (41317.0, 10.0),  # 1972-01-01
    (41499.0, 11.0),  # 1972-07-01
    (41683.0, 12.0),  # 1973-01-01
    (42048.0, 13.0),  # 1974-01-01
    (42413.0, 14.0),  # 1975-01-01
    (42778.0, 15.0),  # 1976-01-01
    (43144.0, 16.0),  # 1977-01-01
    (43509.0, 17.0),  # 1978-01-01
    (43874.0, 18.0),  # 1979-01-01
    (44239.0, 19.0),  # 1980-01-01
    (44786.0, 20.0),  # 1981-07-01
    (45151.0, 21.0),  # 1982-01-01
    (45516.0, 22.0),  # 1983-07-01
    (46247.0, 23.0),  # 1985-07-01
    (47161.0, 24.0),  # 1988-01-01
    (47892.0, 25.0),  # 1990-01-01
    (48257.0, 26.0),  # 1991-01-01
    (48804.0, 27.0),  # 1992-07-01
    (49169.0, 28.0),  # 1993-07-01
    (49534.0, 29.0),  # 1994-07-01
    (50083.0, 30.0),  # 1996-01-01
    (50630.0, 31.0),  # 1997-07-01
    (51179.0, 32.0),  # 1999-01-01
    (53736.0, 33.0),  # 2006-01-01
    (54832.0, 34.0),  # 2009-01-01
    (56109.0, 35.0),  # 2012-07-01
    (57204.0, 36.0),  # 2015-07-01
    (57754.0, 37.0),  # 2017-01-01
)


def tai_utc(jd_utc: ArrayLike) -> jax.Array:
    """Return TAI-UTC (cumulative leap seconds) at a UTC Julian Date.

    Uses a step-function lookup over the leap-second table.  Dates before
    1972 return 10.0 s and dates after the last entry return the most recent
    value (37.0 s).

    Args:
        jd_utc: Julian Date [UTC], scalar or array.

    Returns:
        TAI-UTC in seconds.
    """
    mjd = jnp.asarray(jd_utc, dtype=get_dtype()) - JD_MJD_OFFSET
    mjd_breaks = jnp.array([m for m, _ in _LEAP_SECOND_TABLE], dtype=get_dtype())
    tai_utc_vals = jnp.array([v for _, v in _LEAP_SECOND_TABLE], dtype=get_dtype())

    # idx-1 is the last entry <= mjd
    idx = jnp.searchsorted(mjd_breaks, mjd, side="right")

    return jnp.where(idx == 0, get_dtype()(10.0), tai_utc_vals[idx - 1])


def jd_utc_to_tt(jd_utc: ArrayLike) -> jax.Array:
    """Convert a Julian Date from UTC to Terrestrial Time.

    Args:
        jd_utc: Julian Date [UTC].

    Returns:
        Julian Date [TT].
    """
    jd_utc = jnp.asarray(jd_utc, dtype=get_dtype())
    return jd_utc + (tai_utc(jd_utc) + TT_TAI) / SECONDS_PER_DAY


def jd_tt_to_utc(jd_tt: ArrayLike) -> jax.Array:
    """Convert a Julian Date from Terrestrial Time to UTC.

    The leap-second offset is looked up at an approximate UTC date, then
    refined once, which is exact everywhere except inside the leap second
    itself.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Julian Date [UTC].
    """
    jd_tt = jnp.asarray(jd_tt, dtype=get_dtype())
    guess = jd_tt - (tai_utc(jd_tt) + TT_TAI) / SECONDS_PER_DAY
    return jd_tt - (tai_utc(guess) + TT_TAI) / SECONDS_PER_DAY


def jd_utc_to_ut1(jd_utc: ArrayLike, ut1_utc: ArrayLike = 0.0) -> jax.Array:
    """Convert a Julian Date from UTC to UT1.

    Args:
        jd_utc: Julian Date [UTC].
        ut1_utc: UT1-UTC offset [s].  When omitted, UT1 is taken equal to
            UTC.

    Returns:
        Julian Date [UT1].
    """
    jd_utc = jnp.asarray(jd_utc, dtype=get_dtype())
    return jd_utc + ut1_utc / SECONDS_PER_DAY


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Modified Julian Date. Algorithm is only valid from year 1583 onward.

    Args:
        year (ArrayLike): Year of the calendar date.
        month (ArrayLike): Month of the calendar date.
        day (ArrayLike): Day of the calendar date.
        hour (ArrayLike): Hour of the calendar date. Default: ``0``
        minute (ArrayLike): Minute of the calendar date. Default: ``0``
        second (ArrayLike): Second of the calendar date. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. Montenbruck, O., & Gill, E. (2012). *Satellite Orbits: Models, Methods and Applications*. Springer Science & Business Media.
    """
    is_jan_or_feb = month <= 2
    year = jnp.where(is_jan_or_feb, year - 1, year)
    month = jnp.where(is_jan_or_feb, month + 12, month)

    B = jnp.floor(year / 400) - jnp.floor(year / 100) + jnp.floor(year / 4)

    mjd = 365 * year - 679004 + B + jnp.floor(30.6001 * (month + 1)) + day

    frac_day = (hour + (minute + second / 60.0) / 60.0) / 24.0

    return jnp.floor(mjd).astype(get_dtype()) + frac_day


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Convert a calendar date to Julian Date.

    The time scale of the result is the time scale of the input date.

    Examples:
        ```python
        from framejax.time import caldate_to_jd
        jd_utc = caldate_to_jd(2004, 4, 6, 7, 51, 28.386009)
        ```
    """
    return caldate_to_mjd(year, month, day, hour, minute, second) + JD_MJD_OFFSET


def jd_to_caldate(
    jd: ArrayLike,
) -> tuple[jax.Array, jax.Array, jax.Array, jax.Array, jax.Array, jax.Array]:
    """Convert Julian Date to calendar date.

    Uses the algorithm from Montenbruck & Gill for Gregorian calendar dates.
    The seconds are rounded to the microsecond.

    Args:
        jd (ArrayLike): Julian Date.

    Returns:
        tuple[jax.Array, ...]: (year, month, day, hour, minute, second) where
            year/month/day/hour/minute are int32 and second uses the
            configured float dtype.

    References:

        1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
           Applications*, 2012, p. 322.
    """
    jd_shifted = jnp.asarray(jd, dtype=get_dtype()) + 0.5
    z = jnp.floor(jd_shifted).astype(jnp.int64)
    f = jd_shifted - z

    alpha = (100 * z - 186721625) // 3652425
    a_gregorian = z + 1 + alpha - alpha // 4
    a = jnp.where(z < 2299161, z, a_gregorian)

    b = a + 1524
    c = (100 * b - 12210) // 36525
    d = (36525 * c) // 100
    e = ((b - d) * 10000) // 306001

    day_with_frac = b - d - (306001 * e) // 10000 + f
    day = jnp.floor(day_with_frac).astype(jnp.int32)
    frac_of_day = day_with_frac - day

    month = jnp.where(e < 14, e - 1, e - 13).astype(jnp.int32)
    year = jnp.where(month > 2, c - 4716, c - 4715).astype(jnp.int32)

    total_us = jnp.round(frac_of_day * 86400.0e6).astype(jnp.int64)
    hour = total_us // 3600000000
    total_us = total_us - hour * 3600000000
    minute = total_us // 60000000
    total_us = total_us - minute * 60000000
    second = total_us.astype(get_dtype()) / 1.0e6

    return year, month, day, hour.astype(jnp.int32), minute.astype(jnp.int32), second
