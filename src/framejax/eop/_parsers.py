"""Parsers for the IERS EOP CSV products.

The IERS data centre publishes ``finals.all.csv`` (IAU-1980 nutation
corrections) and ``finals2000A.all.csv`` (IAU-2000A celestial pole
offsets) as semicolon-delimited tables with a header row.  Two historical
layouts exist: the current one with 37 columns and an older, narrower one.
The column layout is selected from the column count of the table.

Every channel is truncated after its last non-empty entry, so predicted
values that IERS publishes only for some channels (e.g. polar motion but
not the nutation corrections) are honoured without inventing data for the
others.
"""

from __future__ import annotations

import logging

import jax.numpy as jnp

from framejax.config import get_dtype
from framejax.constants import JD_MJD_OFFSET
from framejax.eop._types import (
    EopFormatError,
    EopIau1980,
    EopIau2000A,
    EopProduct,
    EopSeries,
)

logger = logging.getLogger(__name__)

_CURRENT_LAYOUT_COLUMNS = 37
"""Column count of the current IERS CSV layout."""

_MJD_COLUMN = 0

# Zero-based column indices of each channel, in the order of the
# EopIau1980/EopIau2000A fields.  The error channels follow their value
# columns immediately.
_COLUMNS: dict[tuple[EopProduct, bool], dict[str, int]] = {
    (EopProduct.IAU1980, True): {
        "x": 5, "y": 7, "ut1_utc": 14, "lod": 16, "ddpsi": 19, "ddeps": 21,
    },
    (EopProduct.IAU1980, False): {
        "x": 5, "y": 7, "ut1_utc": 10, "lod": 12, "ddpsi": 15, "ddeps": 17,
    },
    (EopProduct.IAU2000A, True): {
        "x": 5, "y": 7, "ut1_utc": 14, "lod": 16, "dx": 23, "dy": 25,
    },
    (EopProduct.IAU2000A, False): {
        "x": 5, "y": 7, "ut1_utc": 10, "lod": 12, "dx": 19, "dy": 21,
    },
}


def _detect_delimiter(header: str) -> str:
    return ";" if ";" in header else ","


def _build_series(knots: list[float], cells: list[str]) -> EopSeries:
    """Build an interpolation series from one column of the table.

    Rows after the last non-empty cell are dropped, as are empty cells
    inside the table.
    """
    dtype = get_dtype()
    jd = [k for k, c in zip(knots, cells) if c]
    values = [float(c) for c in cells if c]

    if not values:
        # Channel never published: hold zero over the whole table.
        jd = [knots[0], knots[-1]] if len(knots) > 1 else [knots[0], knots[0] + 1.0]
        values = [0.0, 0.0]

    return EopSeries(
        jd=jnp.array(jd, dtype=dtype),
        values=jnp.array(values, dtype=dtype),
    )


def parse_eop_csv(text: str, product: EopProduct | str = EopProduct.IAU1980) -> EopIau1980 | EopIau2000A:
    """Parse the text of an IERS EOP CSV product.

    Args:
        text: Full file contents, including the header row.
        product: Which product the text holds.  Default: ``IAU1980``.

    Returns:
        :class:`EopIau1980` or :class:`EopIau2000A` depending on *product*.

    Raises:
        EopFormatError: If the table has no data rows, or fewer columns
            than the selected layout requires.

    Examples:
        ```python
        from framejax.eop import EopProduct, parse_eop_csv
        eop = parse_eop_csv(open("finals.all.csv").read(), EopProduct.IAU1980)
        ```
    """
    product = EopProduct(product)
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise EopFormatError("EOP product has no data rows")

    delimiter = _detect_delimiter(lines[0])
    n_columns = len(lines[0].split(delimiter))
    columns = _COLUMNS[(product, n_columns == _CURRENT_LAYOUT_COLUMNS)]

    required = max(columns.values()) + 2
    if n_columns < required:
        raise EopFormatError(
            f"Unknown EOP layout for {product.value}: {n_columns} columns, "
            f"expected {_CURRENT_LAYOUT_COLUMNS} or at least {required}"
        )

    knots: list[float] = []
    rows: list[list[str]] = []
    for line in lines[1:]:
        cells = [c.strip() for c in line.split(delimiter)]
        if not cells[_MJD_COLUMN]:
            continue
        cells += [""] * (n_columns - len(cells))
        knots.append(float(cells[_MJD_COLUMN]) + JD_MJD_OFFSET)
        rows.append(cells)

    if not rows:
        raise EopFormatError("EOP product has no data rows")

    fields: dict[str, EopSeries] = {}
    for name, index in columns.items():
        fields[name] = _build_series(knots, [r[index] for r in rows])
        fields[f"{name}_error"] = _build_series(knots, [r[index + 1] for r in rows])

    logger.debug(
        "Parsed %d EOP rows (%s, %d columns) spanning JD %.1f to %.1f",
        len(rows),
        product.value,
        n_columns,
        knots[0],
        knots[-1],
    )

    if product is EopProduct.IAU1980:
        return EopIau1980(**fields)
    return EopIau2000A(**fields)
