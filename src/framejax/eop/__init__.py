"""Earth Orientation Parameters (EOP) for JAX-compatible lookups.

Provides immutable EOP series parsed from the IERS CSV products, and
JIT-compatible interpolation using ``jnp.searchsorted``.  Two variants
exist, one per theory: :class:`EopIau1980` for IAU-76/FK5 and
:class:`EopIau2000A` for IAU-2006/2010.

Typical usage::

    from framejax.eop import load_cached_eop, get_ut1_utc
    eop = load_cached_eop("IAU1980")
    ut1_utc = get_ut1_utc(eop, 2459569.5)
"""

from framejax.eop._download import EOP_FILENAMES, IERS_EOP_URLS, download_eop_file
from framejax.eop._lookup import (
    dxdy_to_ddeps_ddpsi,
    get_cip_corrections,
    get_lod,
    get_nutation_corrections,
    get_pm,
    get_ut1_utc,
    query,
)
from framejax.eop._parsers import parse_eop_csv
from framejax.eop._providers import (
    fetch_iers_eop,
    load_cached_eop,
    read_iers_eop,
    static_eop_iau1980,
    static_eop_iau2000a,
    zero_eop_iau1980,
    zero_eop_iau2000a,
)
from framejax.eop._types import (
    EopFormatError,
    EopIau1980,
    EopIau2000A,
    EopProduct,
    EopSeries,
)

__all__ = [
    "EOP_FILENAMES",
    "EopFormatError",
    "EopIau1980",
    "EopIau2000A",
    "EopProduct",
    "EopSeries",
    "IERS_EOP_URLS",
    "download_eop_file",
    "dxdy_to_ddeps_ddpsi",
    "fetch_iers_eop",
    "get_cip_corrections",
    "get_lod",
    "get_nutation_corrections",
    "get_pm",
    "get_ut1_utc",
    "load_cached_eop",
    "parse_eop_csv",
    "query",
    "read_iers_eop",
    "static_eop_iau1980",
    "static_eop_iau2000a",
    "zero_eop_iau1980",
    "zero_eop_iau2000a",
]
