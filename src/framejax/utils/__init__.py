"""Shared utility functions for framejax.

Provides angle conversion helpers and the on-disk cache for IERS products.
"""

from framejax.utils._angle import from_radians, to_radians, wrap_to_2pi
from framejax.utils.caching import (
    cache_age_days,
    eop_cache_path,
    get_cache_dir,
    get_eop_cache_dir,
    needs_refresh,
    write_cache_file,
)

__all__ = [
    "cache_age_days",
    "eop_cache_path",
    "from_radians",
    "get_cache_dir",
    "get_eop_cache_dir",
    "needs_refresh",
    "to_radians",
    "wrap_to_2pi",
    "write_cache_file",
]
