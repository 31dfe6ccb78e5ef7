"""Tests for the framejax.coordinates module.

Covers the ellipsoid model, geodetic and geocentric conversions, the
Borkowski geocentric -> geodetic solution and the NED local frame, with
round-trip validation, cardinal-point checks and JAX compatibility.
"""

import jax
import jax.numpy as jnp
import pytest

from framejax.constants import DEG2RAD, WGS84_a, WGS84_f
from framejax.coordinates import (
    WGS84,
    create_ellipsoid,
    ecef_to_geocentric,
    ecef_to_geodetic,
    ecef_to_ned,
    geocentric_to_ecef,
    geocentric_to_geodetic,
    geodetic_to_ecef,
    geodetic_to_geocentric,
    ned_to_ecef,
    rotation_ecef_to_ned,
)

# ──────────────────────────────────────────────
# Tolerance constants
# ──────────────────────────────────────────────

_POS_TOL = 1e-6  # metres
_HEIGHT_TOL = 1e-3  # metres
_ANGLE_TOL = 1e-9  # radians

_WGS84_b = WGS84_a * (1.0 - WGS84_f)

_POINTS = [
    (0.0, 0.0, 0.0),
    (45.0, 120.0, 1000.0),
    (-33.9, 18.4, 35.0),
    (89.5, -60.0, 500e3),
    (-89.99, 10.0, 20.0),
    (10.0, 179.0, -100.0),
]


# ──────────────────────────────────────────────
# Ellipsoid
# ──────────────────────────────────────────────


class TestEllipsoid:
    def test_wgs84(self):
        assert WGS84.a == WGS84_a
        assert WGS84.f == WGS84_f
        assert abs(WGS84.b - 6356752.314245) < 1e-6
        assert abs(WGS84.e2 - 6.69437999014e-3) < 1e-14

    def test_sphere(self):
        sphere = create_ellipsoid(6371e3, 0.0)
        assert sphere.b == sphere.a
        assert sphere.e2 == 0.0

    @pytest.mark.parametrize("f", [1.0, -0.5])
    def test_invalid(self, f):
        with pytest.raises(ValueError, match="Invalid ellipsoid"):
            create_ellipsoid(6378137.0, f)


# ──────────────────────────────────────────────
# Geodetic
# ──────────────────────────────────────────────


class TestGeodeticToECEF:
    def test_origin_equator(self):
        """lat=0, lon=0, h=0 -> [WGS84_a, 0, 0]."""
        r = geodetic_to_ecef(0.0, 0.0, 0.0)
        assert jnp.allclose(r, jnp.array([WGS84_a, 0.0, 0.0]), atol=_POS_TOL)

    def test_90deg_lon(self):
        r = geodetic_to_ecef(0.0, 90.0 * DEG2RAD, 0.0)
        assert jnp.allclose(r, jnp.array([0.0, WGS84_a, 0.0]), atol=_POS_TOL)

    def test_north_pole(self):
        """lat=90 deg -> [0, 0, b]."""
        r = geodetic_to_ecef(90.0 * DEG2RAD, 0.0, 0.0)
        assert jnp.allclose(r, jnp.array([0.0, 0.0, _WGS84_b]), atol=_POS_TOL)

    def test_with_altitude(self):
        r = geodetic_to_ecef(0.0, 0.0, 500e3)
        assert jnp.allclose(r[0], WGS84_a + 500e3, atol=_POS_TOL)

    def test_custom_ellipsoid(self):
        sphere = create_ellipsoid(6371e3, 0.0)
        r = geodetic_to_ecef(45.0 * DEG2RAD, 0.0, 0.0, sphere)
        assert jnp.allclose(jnp.linalg.norm(r), 6371e3, atol=_POS_TOL)


class TestECEFToGeodetic:
    def test_origin_equator(self):
        lat, lon, h = ecef_to_geodetic(jnp.array([WGS84_a, 0.0, 0.0]))
        assert jnp.abs(lat) < _ANGLE_TOL
        assert jnp.abs(lon) < _ANGLE_TOL
        assert jnp.abs(h) < _HEIGHT_TOL

    def test_north_pole(self):
        lat, _, h = ecef_to_geodetic(jnp.array([0.0, 0.0, _WGS84_b + 100.0]))
        assert jnp.abs(lat - jnp.pi / 2.0) < _ANGLE_TOL
        assert jnp.abs(h - 100.0) < _HEIGHT_TOL

    def test_south_pole(self):
        lat, _, h = ecef_to_geodetic(jnp.array([0.0, 0.0, -_WGS84_b]))
        assert jnp.abs(lat + jnp.pi / 2.0) < _ANGLE_TOL
        assert jnp.abs(h) < _HEIGHT_TOL

    def test_longitude_range(self):
        _, lon, _ = ecef_to_geodetic(jnp.array([-WGS84_a, -1.0, 0.0]))
        assert -jnp.pi <= lon <= jnp.pi


class TestGeodeticRoundTrip:
    @pytest.mark.parametrize(("lat_deg", "lon_deg", "h"), _POINTS)
    def test_roundtrip(self, lat_deg, lon_deg, h):
        r = geodetic_to_ecef(lat_deg * DEG2RAD, lon_deg * DEG2RAD, h)
        lat, lon, h_back = ecef_to_geodetic(r)
        assert jnp.abs(lat - lat_deg * DEG2RAD) < 1e-8, f"lat = {lat}"
        assert jnp.abs(lon - lon_deg * DEG2RAD) < 1e-12, f"lon = {lon}"
        assert jnp.abs(h_back - h) < _HEIGHT_TOL, f"h = {h_back}"


# ──────────────────────────────────────────────
# Geocentric
# ──────────────────────────────────────────────


class TestGeocentric:
    def test_geocentric_to_ecef_pole(self):
        r = geocentric_to_ecef(jnp.pi / 2.0, 0.0, 7000e3)
        assert jnp.allclose(r, jnp.array([0.0, 0.0, 7000e3]), atol=_POS_TOL)

    def test_ecef_to_geocentric(self):
        lat, lon, r = ecef_to_geocentric(jnp.array([1.0, 1.0, jnp.sqrt(2.0)]) * 1e6)
        assert jnp.abs(lat - jnp.pi / 4.0) < 1e-14
        assert jnp.abs(lon - jnp.pi / 4.0) < 1e-14
        assert jnp.abs(r - 2e6) < 1e-8

    def test_roundtrip(self):
        r_ecef = jnp.array([-1033479.3830, 7901295.2754, 6380356.5958])
        lat, lon, r = ecef_to_geocentric(r_ecef)
        assert jnp.allclose(geocentric_to_ecef(lat, lon, r), r_ecef, atol=_POS_TOL)

    def test_geocentric_latitude_below_geodetic(self):
        """North of the equator the geocentric latitude is the smaller one."""
        lat_gc, _ = geodetic_to_geocentric(45.0 * DEG2RAD, 0.0)
        assert 0.0 < 45.0 * DEG2RAD - lat_gc < 0.2 * DEG2RAD

    def test_matches_ecef_path(self):
        lat_gd, h = 0.7, 1200.0
        lat_gc, r = geodetic_to_geocentric(lat_gd, h)
        lat_e, _, r_e = ecef_to_geocentric(geodetic_to_ecef(lat_gd, 0.3, h))
        assert jnp.abs(lat_gc - lat_e) < 1e-14
        assert jnp.abs(r - r_e) < _POS_TOL


class TestBorkowski:
    def test_equator(self):
        lat, h = geocentric_to_geodetic(0.0, WGS84_a + 500e3)
        assert jnp.abs(lat) < _ANGLE_TOL
        assert jnp.abs(h - 500e3) < _HEIGHT_TOL

    @pytest.mark.parametrize("lat_deg", [-80.0, -45.0, -5.0, 5.0, 30.0, 60.0, 89.0])
    @pytest.mark.parametrize("h", [0.0, 400.0, 35786e3])
    def test_inverts_geodetic_to_geocentric(self, lat_deg, h):
        lat_gc, r = geodetic_to_geocentric(lat_deg * DEG2RAD, h)
        lat, h_back = geocentric_to_geodetic(lat_gc, r)
        assert jnp.abs(lat - lat_deg * DEG2RAD) < _ANGLE_TOL, f"lat = {lat / DEG2RAD}"
        assert jnp.abs(h_back - h) < _HEIGHT_TOL, f"h = {h_back}"

    def test_vmap(self):
        lats = jnp.array([0.1, 0.5, 1.0])
        lat_gc, r = jax.vmap(lambda lat: geodetic_to_geocentric(lat, 0.0))(lats)
        lat, h = jax.vmap(geocentric_to_geodetic)(lat_gc, r)
        assert jnp.allclose(lat, lats, atol=_ANGLE_TOL)
        assert jnp.allclose(h, 0.0, atol=_HEIGHT_TOL)


# ──────────────────────────────────────────────
# NED
# ──────────────────────────────────────────────


class TestNED:
    def test_rotation_at_origin(self):
        """At lat=lon=0, north is +Z, east is +Y and down is -X."""
        D = rotation_ecef_to_ned(0.0, 0.0)
        expected = jnp.array([[0.0, 0.0, 1.0], [0.0, 1.0, 0.0], [-1.0, 0.0, 0.0]])
        assert jnp.allclose(D, expected, atol=1e-15)

    def test_rotation_at_north_pole(self):
        D = rotation_ecef_to_ned(jnp.pi / 2.0, 0.0)
        # Down is -Z, north is -X along the prime meridian
        assert jnp.allclose(D @ jnp.array([0.0, 0.0, 1.0]), jnp.array([0.0, 0.0, -1.0]), atol=1e-15)
        assert jnp.allclose(D @ jnp.array([-1.0, 0.0, 0.0]), jnp.array([1.0, 0.0, 0.0]), atol=1e-15)

    def test_translated_point_above_origin(self):
        r_ned = ecef_to_ned(jnp.array([7000e3, 0.0, 0.0]), 0.0, 0.0, 0.0, translate=True)
        assert jnp.allclose(r_ned, jnp.array([0.0, 0.0, -(7000e3 - WGS84_a)]), atol=_POS_TOL)

    def test_rotation_only(self):
        r_ned = ecef_to_ned(jnp.array([7000e3, 0.0, 0.0]), 0.0, 0.0, 0.0)
        assert jnp.allclose(r_ned, jnp.array([0.0, 0.0, -7000e3]), atol=_POS_TOL)

    def test_down_is_ellipsoid_normal(self):
        lat, lon, h = 0.6, -1.2, 250.0
        origin = geodetic_to_ecef(lat, lon, h)
        above = geodetic_to_ecef(lat, lon, h + 100.0)
        r_ned = ecef_to_ned(above, lat, lon, h, translate=True)
        assert jnp.allclose(r_ned, jnp.array([0.0, 0.0, -100.0]), atol=1e-6)
        assert jnp.allclose(ned_to_ecef(r_ned, lat, lon, h, translate=True), above, atol=_POS_TOL)
        assert jnp.allclose(origin, ned_to_ecef(jnp.zeros(3), lat, lon, h, translate=True), atol=_POS_TOL)

    @pytest.mark.parametrize("translate", [False, True])
    def test_roundtrip(self, translate):
        r = jnp.array([1234.5, -6789.0, 4321.0])
        lat, lon, h = -0.4, 2.2, 50.0
        back = ned_to_ecef(ecef_to_ned(r, lat, lon, h, translate), lat, lon, h, translate)
        assert jnp.allclose(back, r, atol=_POS_TOL)

    def test_custom_ellipsoid(self):
        sphere = create_ellipsoid(6371e3, 0.0)
        r_ned = ecef_to_ned(
            jnp.array([0.0, 0.0, 7371e3]), jnp.pi / 2.0, 0.0, 0.0, translate=True, ellipsoid=sphere
        )
        assert jnp.allclose(r_ned, jnp.array([0.0, 0.0, -1000e3]), atol=_POS_TOL)


# ──────────────────────────────────────────────
# JAX compatibility
# ──────────────────────────────────────────────


class TestJAXCompatibility:
    def test_jit_ecef_to_geodetic(self):
        r = geodetic_to_ecef(0.5, 0.1, 300.0)
        lat, lon, h = jax.jit(ecef_to_geodetic)(r)
        assert jnp.abs(h - 300.0) < _HEIGHT_TOL

    def test_vmap_geodetic(self):
        lats = jnp.array([-0.5, 0.0, 0.5])
        rs = jax.vmap(lambda lat: geodetic_to_ecef(lat, 0.3, 10.0))(lats)
        lat, _, h = jax.vmap(ecef_to_geodetic)(rs)
        assert jnp.allclose(lat, lats, atol=1e-8)
        assert jnp.allclose(h, 10.0, atol=_HEIGHT_TOL)

    def test_grad_height(self):
        """dh/dz is sin(lat) for a point on the ellipsoid."""
        r = geodetic_to_ecef(0.5, 0.1, 0.0)
        g = jax.grad(lambda v: ecef_to_geodetic(v)[2])(r)
        assert jnp.allclose(g[2], jnp.sin(0.5), atol=1e-6)
