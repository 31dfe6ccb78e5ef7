"""Download IERS Earth Orientation Parameter products.

Provides a helper to fetch the latest ``finals.all.csv`` or
``finals2000A.all.csv`` from the IERS data centre.  Network errors are
propagated to the caller so that higher-level code (e.g.
:func:`~framejax.eop.load_cached_eop`) can decide on fallback behaviour.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from framejax.eop._types import EopProduct
from framejax.utils.caching import write_cache_file

logger = logging.getLogger(__name__)

IERS_EOP_URLS: dict[EopProduct, str] = {
    EopProduct.IAU1980: "https://datacenter.iers.org/data/csv/finals.all.csv",
    EopProduct.IAU2000A: "https://datacenter.iers.org/data/csv/finals2000A.all.csv",
}
"""Default download URL for each IERS EOP product."""

EOP_FILENAMES: dict[EopProduct, str] = {
    EopProduct.IAU1980: "finals.all.csv",
    EopProduct.IAU2000A: "finals2000A.all.csv",
}
"""Canonical filename used for cached EOP products."""

_DEFAULT_TIMEOUT: float = 120.0
"""Default HTTP timeout in seconds."""


def download_eop_file(
    filepath: str | Path,
    product: EopProduct | str = EopProduct.IAU1980,
    *,
    url: str | None = None,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Path:
    """Download an IERS EOP CSV product to *filepath*.

    Creates parent directories if they do not exist.  The file is
    replaced only once the download has completed.

    Args:
        filepath: Destination path for the downloaded file.
        product: Which product to fetch. Default: ``IAU1980``.
        url: URL to fetch.  Defaults to the IERS URL of *product*.
        timeout: HTTP timeout in seconds.  Defaults to 120.

    Returns:
        Resolved :class:`~pathlib.Path` to the written file.

    Raises:
        httpx.HTTPStatusError: If the server returns a non-2xx status.
        httpx.TransportError: On network-level failures (DNS, timeout, etc.).
    """
    product = EopProduct(product)
    if url is None:
        url = IERS_EOP_URLS[product]

    logger.info("Downloading %s EOP data from %s", product.value, url)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        response = client.get(url)
        response.raise_for_status()

    path = write_cache_file(filepath, response.text)
    logger.info("EOP data written to %s", path)
    return path
