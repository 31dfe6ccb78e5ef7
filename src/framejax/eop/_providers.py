"""Factory functions for creating EOP series.

Provides convenience constructors for common EOP configurations:

- :func:`static_eop_iau1980` / :func:`static_eop_iau2000a`: constant EOP
  values (useful for testing or when specific values are known).
- :func:`zero_eop_iau1980` / :func:`zero_eop_iau2000a`: all-zero EOP.
- :func:`read_iers_eop`: load an IERS CSV product from disk.
- :func:`fetch_iers_eop`: download an IERS CSV product and load it.
- :func:`load_cached_eop`: load from a local cache, downloading fresh data
  from IERS when stale.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx
import jax.numpy as jnp

from framejax.config import get_dtype
from framejax.eop._download import EOP_FILENAMES, download_eop_file
from framejax.eop._parsers import parse_eop_csv
from framejax.eop._types import EopIau1980, EopIau2000A, EopProduct, EopSeries
from framejax.utils.caching import eop_cache_path, needs_refresh

logger = logging.getLogger(__name__)

_DEFAULT_MAX_AGE_DAYS: float = 7.0
"""Default maximum age for cached EOP data in days."""

_JD_MIN: float = 2400000.5
"""Start of the range covered by the static constructors (MJD 0)."""

_JD_MAX: float = 2500000.5
"""End of the range covered by the static constructors (MJD 100000)."""


def _constant(value: float) -> EopSeries:
    dtype = get_dtype()
    return EopSeries(
        jd=jnp.array([_JD_MIN, _JD_MAX], dtype=dtype),
        values=jnp.array([value, value], dtype=dtype),
    )


def static_eop_iau1980(
    x: float = 0.0,
    y: float = 0.0,
    ut1_utc: float = 0.0,
    lod: float = 0.0,
    ddpsi: float = 0.0,
    ddeps: float = 0.0,
) -> EopIau1980:
    """Create an :class:`EopIau1980` with constant values.

    The formal errors are zero.

    Args:
        x: Polar motion x-component [arcsec]. Default: 0.0.
        y: Polar motion y-component [arcsec]. Default: 0.0.
        ut1_utc: UT1-UTC offset [s]. Default: 0.0.
        lod: Excess length of day [ms]. Default: 0.0.
        ddpsi: Nutation correction in longitude [mas]. Default: 0.0.
        ddeps: Nutation correction in obliquity [mas]. Default: 0.0.

    Returns:
        EopIau1980 with constant channels.

    Examples:
        ```python
        from framejax.eop import get_ut1_utc, static_eop_iau1980
        eop = static_eop_iau1980(ut1_utc=-0.4399619)
        val = get_ut1_utc(eop, 2453101.83)  # returns -0.4399619
        ```
    """
    zero = _constant(0.0)
    return EopIau1980(
        x=_constant(x),
        y=_constant(y),
        ut1_utc=_constant(ut1_utc),
        lod=_constant(lod),
        ddpsi=_constant(ddpsi),
        ddeps=_constant(ddeps),
        x_error=zero,
        y_error=zero,
        ut1_utc_error=zero,
        lod_error=zero,
        ddpsi_error=zero,
        ddeps_error=zero,
    )


def static_eop_iau2000a(
    x: float = 0.0,
    y: float = 0.0,
    ut1_utc: float = 0.0,
    lod: float = 0.0,
    dx: float = 0.0,
    dy: float = 0.0,
) -> EopIau2000A:
    """Create an :class:`EopIau2000A` with constant values.

    The formal errors are zero.

    Args:
        x: Polar motion x-component [arcsec]. Default: 0.0.
        y: Polar motion y-component [arcsec]. Default: 0.0.
        ut1_utc: UT1-UTC offset [s]. Default: 0.0.
        lod: Excess length of day [ms]. Default: 0.0.
        dx: Celestial pole offset dX [mas]. Default: 0.0.
        dy: Celestial pole offset dY [mas]. Default: 0.0.

    Returns:
        EopIau2000A with constant channels.
    """
    zero = _constant(0.0)
    return EopIau2000A(
        x=_constant(x),
        y=_constant(y),
        ut1_utc=_constant(ut1_utc),
        lod=_constant(lod),
        dx=_constant(dx),
        dy=_constant(dy),
        x_error=zero,
        y_error=zero,
        ut1_utc_error=zero,
        lod_error=zero,
        dx_error=zero,
        dy_error=zero,
    )


def zero_eop_iau1980() -> EopIau1980:
    """Create an :class:`EopIau1980` with every channel set to zero."""
    return static_eop_iau1980()


def zero_eop_iau2000a() -> EopIau2000A:
    """Create an :class:`EopIau2000A` with every channel set to zero."""
    return static_eop_iau2000a()


def read_iers_eop(
    filepath: str | Path,
    product: EopProduct | str = EopProduct.IAU1980,
) -> EopIau1980 | EopIau2000A:
    """Load an IERS EOP CSV product from disk.

    Args:
        filepath: Path to ``finals.all.csv`` or ``finals2000A.all.csv``.
        product: Which product the file holds. Default: ``IAU1980``.

    Returns:
        :class:`EopIau1980` or :class:`EopIau2000A`.

    Raises:
        FileNotFoundError: If the file does not exist.
        EopFormatError: If the file does not match a known layout.

    Examples:
        ```python
        from framejax.eop import read_iers_eop
        eop = read_iers_eop("finals2000A.all.csv", "IAU2000A")
        ```
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    return parse_eop_csv(filepath.read_text(encoding="utf-8"), product)


def fetch_iers_eop(
    product: EopProduct | str = EopProduct.IAU1980,
    filepath: str | Path | None = None,
    *,
    url: str | None = None,
) -> EopIau1980 | EopIau2000A:
    """Download an IERS EOP product and load it.

    The download always happens; use :func:`load_cached_eop` to reuse a
    recent copy.

    Args:
        product: Which product to fetch. Default: ``IAU1980``.
        filepath: Where to save the file.  Defaults to the EOP cache
            directory.
        url: Override the download URL.

    Returns:
        :class:`EopIau1980` or :class:`EopIau2000A`.

    Raises:
        httpx.HTTPError: If the download fails.
    """
    product = EopProduct(product)
    if filepath is None:
        filepath = eop_cache_path(EOP_FILENAMES[product])

    path = download_eop_file(filepath, product, url=url)
    return read_iers_eop(path, product)


def load_cached_eop(
    product: EopProduct | str = EopProduct.IAU1980,
    filepath: str | Path | None = None,
    *,
    max_age_days: float = _DEFAULT_MAX_AGE_DAYS,
) -> EopIau1980 | EopIau2000A:
    """Load EOP data from a local cache, downloading fresh data when stale.

    Checks whether the cached file at *filepath* exists and is younger than
    *max_age_days*.  If the file is missing or stale, a fresh copy is
    downloaded from IERS.  If that download fails and a stale copy exists,
    the stale copy is used and a warning is logged.

    Args:
        product: Which product to load. Default: ``IAU1980``.
        filepath: Path to the cached file.  When ``None`` (the default),
            uses ``<cache_dir>/eop/<product filename>``.
        max_age_days: Maximum acceptable age of the cached file in days.
            Defaults to 7.

    Returns:
        :class:`EopIau1980` or :class:`EopIau2000A`.

    Raises:
        httpx.HTTPError: If the download fails and no cached copy exists.

    Examples:
        ```python
        from framejax.eop import load_cached_eop

        # Uses default cache location and 7-day refresh
        eop = load_cached_eop("IAU2000A")

        # Custom path and 1-day refresh
        eop = load_cached_eop("IAU1980", "/tmp/eop/finals.all.csv", max_age_days=1.0)
        ```
    """
    product = EopProduct(product)
    if filepath is None:
        filepath = eop_cache_path(EOP_FILENAMES[product])
    else:
        filepath = Path(filepath)

    if needs_refresh(filepath, max_age_days):
        try:
            download_eop_file(filepath, product)
        except httpx.HTTPError:
            if not filepath.exists():
                raise
            logger.warning(
                "Failed to download EOP data; using stale cached file %s.",
                filepath,
                exc_info=True,
            )
    else:
        logger.info("Using cached EOP data from %s", filepath)

    return read_iers_eop(filepath, product)
