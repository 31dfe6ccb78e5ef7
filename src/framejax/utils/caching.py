"""On-disk cache for downloaded IERS products.

The cache root is ``$FRAMEJAX_CACHE`` when set, otherwise
``~/.cache/framejax``.  EOP CSV files live in its ``eop/`` directory under
their IERS file names.  IERS refreshes ``finals.all`` daily, so file age is
measured in days.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

_ENV_VAR = "FRAMEJAX_CACHE"
_DEFAULT_SUBDIR = ".cache/framejax"
_EOP_SUBDIR = "eop"

_SECONDS_PER_DAY = 86400.0


def get_cache_dir() -> Path:
    """Return the framejax cache root, creating it if needed."""
    env = os.environ.get(_ENV_VAR)
    root = Path(env) if env is not None else Path.home() / _DEFAULT_SUBDIR
    root.mkdir(parents=True, exist_ok=True)
    return root


def get_eop_cache_dir() -> Path:
    """Return the EOP cache directory (``<cache>/eop``), creating it if needed."""
    eop_dir = get_cache_dir() / _EOP_SUBDIR
    eop_dir.mkdir(exist_ok=True)
    return eop_dir


def eop_cache_path(filename: str) -> Path:
    """Path of an EOP product named *filename* inside the EOP cache.

    Args:
        filename: IERS file name, e.g. ``"finals.all.csv"``.

    Returns:
        :class:`~pathlib.Path` of the cached product.  The file itself may
        not exist yet.
    """
    return get_eop_cache_dir() / filename


def cache_age_days(filepath: str | Path) -> float | None:
    """Days since *filepath* was last written, or ``None`` if it is missing."""
    filepath = Path(filepath)
    try:
        mtime = filepath.stat().st_mtime
    except FileNotFoundError:
        return None
    return max(0.0, time.time() - mtime) / _SECONDS_PER_DAY


def needs_refresh(filepath: str | Path, max_age_days: float) -> bool:
    """Check whether a cached product is missing or older than *max_age_days*.

    Args:
        filepath: Path of the cached product.
        max_age_days: Maximum acceptable age in days.

    Returns:
        ``True`` if the product should be downloaded again.
    """
    age = cache_age_days(filepath)
    return age is None or age > max_age_days


def write_cache_file(filepath: str | Path, text: str) -> Path:
    """Write *text* to *filepath* through a sibling ``.part`` file.

    The product only appears under its final name once fully written, so an
    interrupted download never leaves a truncated CSV behind for the
    parser.  Parent directories are created as needed.

    Args:
        filepath: Destination of the cached product.
        text: File contents.

    Returns:
        Resolved :class:`~pathlib.Path` of the written file.
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    partial = filepath.with_name(filepath.name + ".part")
    partial.write_text(text, encoding="utf-8")
    os.replace(partial, filepath)
    return filepath.resolve()
