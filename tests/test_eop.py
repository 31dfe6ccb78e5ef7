"""Tests for Earth Orientation Parameters (EOP) module."""

from __future__ import annotations

import math
from pathlib import Path

import jax
import jax.numpy as jnp
import pytest

from framejax.config import get_dtype
from framejax.constants import JD_J2000, JD_MJD_OFFSET
from framejax.eop import (
    EopFormatError,
    EopIau1980,
    EopIau2000A,
    EopProduct,
    EopSeries,
    dxdy_to_ddeps_ddpsi,
    get_cip_corrections,
    get_lod,
    get_nutation_corrections,
    get_pm,
    get_ut1_utc,
    parse_eop_csv,
    query,
    read_iers_eop,
    static_eop_iau1980,
    static_eop_iau2000a,
    zero_eop_iau1980,
    zero_eop_iau2000a,
)

_MJD0 = 53100.0

# Column indices of the current 37-column IERS layout
_CURRENT = {
    EopProduct.IAU1980: {"x": 5, "y": 7, "ut1_utc": 14, "lod": 16, "ddpsi": 19, "ddeps": 21},
    EopProduct.IAU2000A: {"x": 5, "y": 7, "ut1_utc": 14, "lod": 16, "dx": 23, "dy": 25},
}

# Column indices of the older, narrower layout
_LEGACY = {
    EopProduct.IAU1980: {"x": 5, "y": 7, "ut1_utc": 10, "lod": 12, "ddpsi": 15, "ddeps": 17},
    EopProduct.IAU2000A: {"x": 5, "y": 7, "ut1_utc": 10, "lod": 12, "dx": 19, "dy": 21},
}


def _make_csv(
    rows: list[dict[str, float | None]],
    product: EopProduct = EopProduct.IAU1980,
    n_columns: int = 37,
    delimiter: str = ";",
) -> str:
    """Build an IERS-style CSV table from per-row channel values.

    Each row dict holds ``mjd`` plus any channel names; missing channels and
    ``None`` values are written as empty cells.
    """
    layout = (_CURRENT if n_columns == 37 else _LEGACY)[product]
    header = delimiter.join(f"col{i}" for i in range(n_columns))
    lines = [header]
    for row in rows:
        cells = [""] * n_columns
        cells[0] = f"{row['mjd']:.2f}"
        for name, index in layout.items():
            value = row.get(name)
            if value is not None:
                cells[index] = repr(value)
                cells[index + 1] = "0.0001"
        lines.append(delimiter.join(cells))
    return "\n".join(lines) + "\n"


def _sample_rows_iau1980() -> list[dict[str, float | None]]:
    return [
        {"mjd": _MJD0, "x": -0.14, "y": 0.33, "ut1_utc": -0.44, "lod": 1.5, "ddpsi": -52.0, "ddeps": -3.8},
        {"mjd": _MJD0 + 1, "x": -0.15, "y": 0.34, "ut1_utc": -0.46, "lod": 1.6, "ddpsi": -53.0, "ddeps": -3.9},
        {"mjd": _MJD0 + 2, "x": -0.16, "y": 0.35, "ut1_utc": -0.48, "lod": 1.7, "ddpsi": None, "ddeps": None},
    ]


def _sample_rows_iau2000a() -> list[dict[str, float | None]]:
    return [
        {"mjd": _MJD0, "x": -0.14, "y": 0.33, "ut1_utc": -0.44, "lod": 1.5, "dx": -0.2, "dy": -0.1},
        {"mjd": _MJD0 + 1, "x": -0.15, "y": 0.34, "ut1_utc": -0.46, "lod": 1.6, "dx": -0.3, "dy": -0.2},
    ]


def _jd(mjd: float) -> float:
    return mjd + JD_MJD_OFFSET


# ---------------------------------------------------------------------------
# Static / Zero provider tests
# ---------------------------------------------------------------------------


class TestStaticEop:
    def test_static_iau1980_values(self):
        eop = static_eop_iau1980(x=-0.140682, y=0.333309, ut1_utc=-0.4399619, lod=1.5563, ddpsi=-52.195, ddeps=-3.875)
        jd = 2453101.827411
        x, y = get_pm(eop, jd)
        assert jnp.allclose(x, -0.140682)
        assert jnp.allclose(y, 0.333309)
        assert jnp.allclose(get_ut1_utc(eop, jd), -0.4399619)
        assert jnp.allclose(get_lod(eop, jd), 1.5563)
        ddeps, ddpsi = get_nutation_corrections(eop, jd)
        assert jnp.allclose(ddeps, -3.875)
        assert jnp.allclose(ddpsi, -52.195)

    def test_static_iau2000a_values(self):
        eop = static_eop_iau2000a(dx=-0.205, dy=-0.136)
        dx, dy = get_cip_corrections(eop, 2453101.827411)
        assert jnp.allclose(dx, -0.205)
        assert jnp.allclose(dy, -0.136)

    def test_zero_eop_types(self):
        assert isinstance(zero_eop_iau1980(), EopIau1980)
        assert isinstance(zero_eop_iau2000a(), EopIau2000A)

    def test_zero_eop_values(self):
        eop = zero_eop_iau2000a()
        for series in eop:
            assert jnp.all(series.values == 0.0)

    def test_dtype(self):
        eop = static_eop_iau1980(ut1_utc=0.1)
        assert eop.ut1_utc.values.dtype == get_dtype()

    def test_is_pytree(self):
        eop = static_eop_iau1980(ut1_utc=0.1)
        leaves = jax.tree_util.tree_leaves(eop)
        assert len(leaves) == 24


# ---------------------------------------------------------------------------
# Interpolation tests
# ---------------------------------------------------------------------------


class TestQuery:
    @pytest.fixture()
    def series(self) -> EopSeries:
        dtype = get_dtype()
        return EopSeries(
            jd=jnp.array([10.0, 11.0, 13.0], dtype=dtype),
            values=jnp.array([1.0, 3.0, -1.0], dtype=dtype),
        )

    def test_at_knots(self, series):
        assert jnp.allclose(query(series, jnp.array([10.0, 11.0, 13.0])), series.values)

    def test_linear_between_knots(self, series):
        assert jnp.allclose(query(series, 10.25), 1.5)
        assert jnp.allclose(query(series, 12.0), 1.0)

    def test_flat_extrapolation(self, series):
        """Queries outside the table hold the boundary value."""
        assert jnp.allclose(query(series, 0.0), 1.0)
        assert jnp.allclose(query(series, 1e6), -1.0)

    def test_jit(self, series):
        result = jax.jit(query)(series, 11.5)
        assert jnp.allclose(result, 2.0)

    def test_vmap(self, series):
        result = jax.vmap(query, in_axes=(None, 0))(series, jnp.array([9.0, 10.5, 14.0]))
        assert jnp.allclose(result, jnp.array([1.0, 2.0, -1.0]))

    def test_grad(self, series):
        slope = jax.grad(query, argnums=1)(series, 10.5)
        assert jnp.allclose(slope, 2.0)


# ---------------------------------------------------------------------------
# CSV parser tests
# ---------------------------------------------------------------------------


class TestParseEopCsv:
    def test_current_layout_iau1980(self):
        eop = parse_eop_csv(_make_csv(_sample_rows_iau1980()), EopProduct.IAU1980)
        assert isinstance(eop, EopIau1980)
        assert eop.x.jd.shape == (3,)
        assert jnp.allclose(eop.x.jd[0], _jd(_MJD0))
        assert jnp.allclose(get_ut1_utc(eop, _jd(_MJD0 + 1)), -0.46)
        assert jnp.allclose(get_lod(eop, _jd(_MJD0 + 0.5)), 1.55)

    def test_current_layout_iau2000a(self):
        eop = parse_eop_csv(_make_csv(_sample_rows_iau2000a(), EopProduct.IAU2000A), "IAU2000A")
        assert isinstance(eop, EopIau2000A)
        dx, dy = get_cip_corrections(eop, _jd(_MJD0 + 0.5))
        assert jnp.allclose(dx, -0.25)
        assert jnp.allclose(dy, -0.15)

    def test_legacy_layout(self):
        text = _make_csv(_sample_rows_iau2000a(), EopProduct.IAU2000A, n_columns=30)
        eop = parse_eop_csv(text, EopProduct.IAU2000A)
        assert jnp.allclose(get_ut1_utc(eop, _jd(_MJD0)), -0.44)
        dx, _ = get_cip_corrections(eop, _jd(_MJD0 + 1))
        assert jnp.allclose(dx, -0.3)

    def test_comma_delimiter(self):
        text = _make_csv(_sample_rows_iau1980(), delimiter=",")
        eop = parse_eop_csv(text, EopProduct.IAU1980)
        x, y = get_pm(eop, _jd(_MJD0 + 2))
        assert jnp.allclose(x, -0.16)
        assert jnp.allclose(y, 0.35)

    def test_error_channels(self):
        eop = parse_eop_csv(_make_csv(_sample_rows_iau1980()), EopProduct.IAU1980)
        assert jnp.allclose(query(eop.ut1_utc_error, _jd(_MJD0)), 0.0001)

    def test_channel_truncated_after_last_value(self):
        """Nutation corrections stop one row before polar motion."""
        eop = parse_eop_csv(_make_csv(_sample_rows_iau1980()), EopProduct.IAU1980)
        assert eop.ddpsi.jd.shape == (2,)
        assert eop.x.jd.shape == (3,)
        ddeps, ddpsi = get_nutation_corrections(eop, _jd(_MJD0 + 2))
        assert jnp.allclose(ddpsi, -53.0)
        assert jnp.allclose(ddeps, -3.9)

    def test_unpublished_channel_is_zero(self):
        rows = [{"mjd": _MJD0, "x": 0.1}, {"mjd": _MJD0 + 1, "x": 0.2}]
        eop = parse_eop_csv(_make_csv(rows), EopProduct.IAU1980)
        assert jnp.allclose(get_lod(eop, _jd(_MJD0 + 0.5)), 0.0)

    def test_rows_without_mjd_skipped(self):
        text = _make_csv(_sample_rows_iau1980()) + ";" * 36 + "\n"
        eop = parse_eop_csv(text, EopProduct.IAU1980)
        assert eop.x.jd.shape == (3,)

    def test_empty_raises(self):
        with pytest.raises(EopFormatError, match="no data rows"):
            parse_eop_csv("col0;col1\n", EopProduct.IAU1980)

    def test_narrow_table_raises(self):
        text = "a;b;c\n53100;1;2\n"
        with pytest.raises(EopFormatError, match="Unknown EOP layout"):
            parse_eop_csv(text, EopProduct.IAU1980)

    def test_invalid_product_raises(self):
        with pytest.raises(ValueError):
            parse_eop_csv(_make_csv(_sample_rows_iau1980()), "IAU1976")


class TestReadIersEop:
    def test_read_from_file(self, tmp_path: Path):
        path = tmp_path / "finals.all.csv"
        path.write_text(_make_csv(_sample_rows_iau1980()), encoding="utf-8")
        eop = read_iers_eop(path, "IAU1980")
        assert jnp.allclose(get_ut1_utc(eop, _jd(_MJD0)), -0.44)

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError, match="EOP file not found"):
            read_iers_eop(tmp_path / "missing.csv")


# ---------------------------------------------------------------------------
# Celestial pole offsets to nutation corrections
# ---------------------------------------------------------------------------


class TestDxdyToDdepsDdpsi:
    def test_at_j2000(self):
        """At J2000 the precession rates vanish and the map is a plain scaling."""
        eop = static_eop_iau2000a(dx=-0.205, dy=-0.136)
        ddeps, ddpsi = dxdy_to_ddeps_ddpsi(eop, JD_J2000)
        sin_eps0 = math.sin(84381.406 * math.pi / 648000.0)
        assert jnp.allclose(ddeps, -0.136, atol=1e-15)
        assert jnp.allclose(ddpsi, -0.205 / sin_eps0, atol=1e-15)

    def test_inverts_forward_relation(self):
        jd = 2453101.827411
        dx_in, dy_in = -0.205, -0.136
        ddeps, ddpsi = dxdy_to_ddeps_ddpsi(static_eop_iau2000a(dx=dx_in, dy=dy_in), jd)

        a2r = math.pi / 648000.0
        t = (jd - JD_J2000) / 36525.0
        psi_a = ((-0.001147 * t - 1.07259) * t + 5038.47875) * t * a2r
        chi_a = ((-0.001125 * t - 2.38064) * t + 10.5526) * t * a2r
        s_eps0 = math.sin(84381.406 * a2r)
        aux = psi_a * math.cos(84381.406 * a2r) - chi_a

        dx = ddpsi * s_eps0 + aux * ddeps
        dy = ddeps - aux * ddpsi * s_eps0
        assert jnp.allclose(dx, dx_in, atol=1e-14), f"dX {dx} != {dx_in}"
        assert jnp.allclose(dy, dy_in, atol=1e-14), f"dY {dy} != {dy_in}"

    def test_zero_offsets(self):
        ddeps, ddpsi = dxdy_to_ddeps_ddpsi(zero_eop_iau2000a(), 2458849.5)
        assert ddeps == 0.0
        assert ddpsi == 0.0
