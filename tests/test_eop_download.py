"""Tests for EOP download and caching functionality."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from unittest.mock import patch

import httpx
import jax.numpy as jnp
import pytest

from framejax.eop import (
    EOP_FILENAMES,
    IERS_EOP_URLS,
    EopIau1980,
    EopIau2000A,
    EopProduct,
    download_eop_file,
    fetch_iers_eop,
    get_ut1_utc,
    load_cached_eop,
)

_HEADER = ";".join(f"col{i}" for i in range(37))


def _csv_text(ut1_utc: float) -> str:
    """Minimal current-layout table with two rows of constant UT1-UTC."""
    lines = [_HEADER]
    for mjd in (53100.0, 53101.0):
        cells = [""] * 37
        cells[0] = f"{mjd:.2f}"
        cells[14] = repr(ut1_utc)
        lines.append(";".join(cells))
    return "\n".join(lines) + "\n"


def _mock_client(mock_client_cls, text: str):
    mock_response = mock_client_cls.return_value.__enter__.return_value.get.return_value
    mock_response.text = text
    mock_response.raise_for_status.return_value = None
    return mock_response


def _age(path: Path, days: float) -> None:
    old_time = path.stat().st_mtime - days * 86400
    os.utime(path, (old_time, old_time))


# ---------------------------------------------------------------------------
# download_eop_file tests
# ---------------------------------------------------------------------------


class TestDownloadEopFile:
    """Tests for download_eop_file."""

    @pytest.mark.ci
    def test_download_success(self, tmp_path: Path) -> None:
        """Actual download from IERS produces a parseable table."""
        dest = tmp_path / "finals.all.csv"
        result = download_eop_file(dest, EopProduct.IAU1980)
        assert result.exists()
        assert result.read_text(encoding="utf-8").splitlines()[0].count(";") > 20

    def test_default_urls(self) -> None:
        """Default URLs point to the IERS data centre."""
        assert "iers.org" in IERS_EOP_URLS[EopProduct.IAU1980]
        assert IERS_EOP_URLS[EopProduct.IAU1980].endswith(EOP_FILENAMES[EopProduct.IAU1980])
        assert IERS_EOP_URLS[EopProduct.IAU2000A].endswith(EOP_FILENAMES[EopProduct.IAU2000A])

    def test_download_creates_parent_dirs(self, tmp_path: Path) -> None:
        """Parent directories are created if they do not exist."""
        dest = tmp_path / "deep" / "nested" / "finals.all.csv"
        assert not dest.parent.exists()

        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, "mock eop data\n")
            result = download_eop_file(dest)

        assert dest.exists()
        assert result == dest.resolve()
        assert dest.read_text(encoding="utf-8") == "mock eop data\n"

    def test_download_uses_product_url(self, tmp_path: Path) -> None:
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, "x\n")
            download_eop_file(tmp_path / "f.csv", "IAU2000A")
            get = mock_client_cls.return_value.__enter__.return_value.get
            get.assert_called_once_with(IERS_EOP_URLS[EopProduct.IAU2000A])

    def test_download_url_override(self, tmp_path: Path) -> None:
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, "x\n")
            download_eop_file(tmp_path / "f.csv", url="https://example.org/eop.csv")
            get = mock_client_cls.return_value.__enter__.return_value.get
            get.assert_called_once_with("https://example.org/eop.csv")

    def test_http_error_propagates(self, tmp_path: Path) -> None:
        """A failed request raises and leaves no file behind."""
        dest = tmp_path / "finals.all.csv"
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            get = mock_client_cls.return_value.__enter__.return_value.get
            get.side_effect = httpx.ConnectError("unreachable")
            with pytest.raises(httpx.TransportError):
                download_eop_file(dest)
        assert not dest.exists()

    def test_http_error_keeps_cached_copy(self, tmp_path: Path) -> None:
        """A failed refresh leaves the previous product untouched."""
        dest = tmp_path / "finals.all.csv"
        dest.write_text(_csv_text(-0.44), encoding="utf-8")
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, "").raise_for_status.side_effect = httpx.HTTPStatusError(
                "503", request=None, response=None
            )
            with pytest.raises(httpx.HTTPStatusError):
                download_eop_file(dest)
        assert dest.read_text(encoding="utf-8") == _csv_text(-0.44)
        assert not (tmp_path / "finals.all.csv.part").exists()


# ---------------------------------------------------------------------------
# fetch_iers_eop tests
# ---------------------------------------------------------------------------


class TestFetchIersEop:
    def test_fetch_parses_download(self, tmp_path: Path) -> None:
        dest = tmp_path / "finals2000A.all.csv"
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, _csv_text(-0.25))
            eop = fetch_iers_eop("IAU2000A", dest)

        assert isinstance(eop, EopIau2000A)
        assert jnp.allclose(get_ut1_utc(eop, 53100.5 + 2400000.5), -0.25)

    def test_fetch_default_path_in_cache(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRAMEJAX_CACHE", str(tmp_path))
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, _csv_text(-0.25))
            fetch_iers_eop(EopProduct.IAU1980)
        assert (tmp_path / "eop" / "finals.all.csv").exists()


# ---------------------------------------------------------------------------
# load_cached_eop tests
# ---------------------------------------------------------------------------


class TestLoadCachedEop:
    """Tests for load_cached_eop."""

    def test_fresh_file_reused(self, tmp_path: Path) -> None:
        """A fresh cached file is loaded without downloading."""
        dest = tmp_path / "finals.all.csv"
        dest.write_text(_csv_text(-0.44), encoding="utf-8")

        with patch("framejax.eop._providers.download_eop_file") as mock_dl:
            eop = load_cached_eop("IAU1980", dest, max_age_days=7.0)
            mock_dl.assert_not_called()

        assert isinstance(eop, EopIau1980)
        assert jnp.allclose(get_ut1_utc(eop, 2453600.0), -0.44)

    def test_stale_file_triggers_download(self, tmp_path: Path) -> None:
        """A stale file is replaced by a fresh download."""
        dest = tmp_path / "finals.all.csv"
        dest.write_text(_csv_text(-0.44), encoding="utf-8")
        _age(dest, 30)

        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, _csv_text(-0.11))
            eop = load_cached_eop("IAU1980", dest, max_age_days=7.0)

        assert jnp.allclose(get_ut1_utc(eop, 2453600.0), -0.11)

    def test_missing_file_triggers_download(self, tmp_path: Path) -> None:
        dest = tmp_path / "sub" / "finals.all.csv"
        with patch("framejax.eop._download.httpx.Client") as mock_client_cls:
            _mock_client(mock_client_cls, _csv_text(-0.33))
            eop = load_cached_eop(EopProduct.IAU1980, dest)
        assert dest.exists()
        assert jnp.allclose(get_ut1_utc(eop, 2453600.0), -0.33)

    def test_download_failure_falls_back_to_stale(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """If the download fails, the stale cached copy is used with a warning."""
        dest = tmp_path / "finals.all.csv"
        dest.write_text(_csv_text(-0.44), encoding="utf-8")
        _age(dest, 30)

        with patch(
            "framejax.eop._providers.download_eop_file",
            side_effect=httpx.ConnectError("unreachable"),
        ):
            with caplog.at_level(logging.WARNING, logger="framejax.eop._providers"):
                eop = load_cached_eop("IAU1980", dest, max_age_days=7.0)

        assert jnp.allclose(get_ut1_utc(eop, 2453600.0), -0.44)
        assert "stale cached file" in caplog.text

    def test_download_failure_without_cache_raises(self, tmp_path: Path) -> None:
        dest = tmp_path / "finals.all.csv"
        with patch(
            "framejax.eop._providers.download_eop_file",
            side_effect=httpx.ConnectError("unreachable"),
        ):
            with pytest.raises(httpx.ConnectError):
                load_cached_eop("IAU1980", dest)

    def test_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FRAMEJAX_CACHE", str(tmp_path))
        cached = tmp_path / "eop" / "finals2000A.all.csv"
        cached.parent.mkdir(parents=True)
        cached.write_text(_csv_text(-0.2), encoding="utf-8")

        with patch("framejax.eop._providers.download_eop_file") as mock_dl:
            eop = load_cached_eop("IAU2000A")
            mock_dl.assert_not_called()

        assert isinstance(eop, EopIau2000A)
