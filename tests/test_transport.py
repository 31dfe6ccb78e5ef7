"""Tests for state vector and Keplerian element transport between frames.

Vectors are those of Vallado (2013), Examples 3-14 and 3-15, in km and km/s.
"""

import jax
import jax.numpy as jnp
import pytest

from framejax.constants import OMEGA_EARTH
from framejax.eop import static_eop_iau1980, static_eop_iau2000a
from framejax.frames import FrameTransformationError, r_eci_to_eci
from framejax.orbits import (
    KeplerianElements,
    earth_angular_velocity,
    orb_eci_to_eci,
    state_vector,
    sv_ecef_to_ecef,
    sv_ecef_to_eci,
    sv_eci_to_ecef,
    sv_eci_to_eci,
    transform_state_vector,
)
from framejax.time import caldate_to_jd

JD_UTC = caldate_to_jd(2004, 4, 6, 7, 51, 28.386009)

EOP_FK5 = static_eop_iau1980(
    x=-0.140682, y=0.333309, ut1_utc=-0.4399619, lod=1.5563, ddpsi=-52.195, ddeps=-3.875
)
EOP_IAU2006 = static_eop_iau2000a(
    x=-0.140682, y=0.333309, ut1_utc=-0.4399619, lod=1.5563, dx=-0.205, dy=-0.136
)

R_ITRF = jnp.array([-1033.4793830, 7901.2952754, 6380.3565958])
V_ITRF = jnp.array([-3.225636520, -2.872451450, 5.531924446])
SV_ITRF = state_vector(JD_UTC, R_ITRF, V_ITRF)

R_TIRS = jnp.array([-1033.47503120, 7901.30558560, 6380.34453270])
V_TIRS = jnp.array([-3.2256327470, -2.8724425110, 5.5319312880])

R_GCRF = jnp.array([5102.50895790, 6123.01140070, 6378.13692820])
V_GCRF = jnp.array([-4.7432201570, 0.7905364970, 5.5337557270])
R_TEME = jnp.array([5094.18016210, 6127.64465950, 6380.34453270])
V_TEME = jnp.array([-4.7461314870, 0.7858180410, 5.5319312880])
R_TOD = jnp.array([5094.51620300, 6127.36527840, 6380.34453270])
V_TOD = jnp.array([-4.7460883850, 0.7860783240, 5.5319312880])
R_MOD = jnp.array([5094.02837450, 6127.87081640, 6380.24851640])
V_MOD = jnp.array([-4.7462630520, 0.7860140450, 5.5317905620])

R_CIRS = jnp.array([5100.01840470, 6122.78636480, 6380.34453270])
V_CIRS = jnp.array([-4.7453803300, 0.7903414530, 5.5319312880])
R_GCRF06 = jnp.array([5102.50895290, 6123.01139910, 6378.13693380])
V_GCRF06 = jnp.array([-4.7432201610, 0.7905364950, 5.5337557240])

_POS_TOL = 5e-4  # km
_VEL_TOL = 1e-6  # km/s


class TestEarthAngularVelocity:
    def test_nominal(self):
        w = earth_angular_velocity(JD_UTC)
        assert jnp.array_equal(w, jnp.array([0.0, 0.0, OMEGA_EARTH]))

    def test_lod_slows_rotation(self):
        w = earth_angular_velocity(JD_UTC, EOP_FK5)
        expected = OMEGA_EARTH * (1.0 - 1.5563 / 86400000.0)
        assert jnp.allclose(w[2], expected, rtol=1e-14, atol=0.0)
        assert w[0] == 0.0 and w[1] == 0.0


# ---------------------------------------------------------------------------
# ECEF -> ECI
# ---------------------------------------------------------------------------


class TestFk5Transport:
    @pytest.mark.parametrize(
        ("frame_to", "r_expected", "v_expected"),
        [
            ("GCRF", R_GCRF, V_GCRF),
            ("TEME", R_TEME, V_TEME),
            ("TOD", R_TOD, V_TOD),
            ("MOD", R_MOD, V_MOD),
        ],
    )
    def test_itrf_to_eci(self, frame_to, r_expected, v_expected):
        sv = sv_ecef_to_eci(SV_ITRF, "ITRF", frame_to, eop=EOP_FK5)
        assert jnp.allclose(sv.r, r_expected, atol=_POS_TOL), f"r_{frame_to} = {sv.r}"
        assert jnp.allclose(sv.v, v_expected, atol=_VEL_TOL), f"v_{frame_to} = {sv.v}"

    @pytest.mark.parametrize(
        ("frame_from", "r", "v"),
        [("GCRF", R_GCRF, V_GCRF), ("TEME", R_TEME, V_TEME)],
    )
    def test_eci_to_itrf(self, frame_from, r, v):
        sv = sv_eci_to_ecef(state_vector(JD_UTC, r, v), frame_from, "ITRF", eop=EOP_FK5)
        assert jnp.allclose(sv.r, R_ITRF, atol=_POS_TOL), f"r_itrf = {sv.r}"
        assert jnp.allclose(sv.v, V_ITRF, atol=_VEL_TOL), f"v_itrf = {sv.v}"

    def test_epoch_defaults_to_state_time(self):
        implicit = sv_ecef_to_eci(SV_ITRF, "ITRF", "GCRF", eop=EOP_FK5)
        explicit = sv_ecef_to_eci(SV_ITRF, "ITRF", "GCRF", JD_UTC, EOP_FK5)
        assert jnp.array_equal(implicit.r, explicit.r)
        assert jnp.array_equal(implicit.v, explicit.v)


class TestIau2006Transport:
    def test_itrf_to_tirs(self):
        sv = sv_ecef_to_ecef(SV_ITRF, "ITRF", "TIRS", EOP_IAU2006)
        assert jnp.allclose(sv.r, R_TIRS, atol=1e-5)
        assert jnp.allclose(sv.v, V_TIRS, atol=1e-8)

    @pytest.mark.parametrize(
        ("frame_to", "r_expected", "v_expected"),
        [("GCRF", R_GCRF06, V_GCRF06), ("CIRS", R_CIRS, V_CIRS)],
    )
    def test_itrf_to_eci(self, frame_to, r_expected, v_expected):
        sv = sv_ecef_to_eci(SV_ITRF, "ITRF", frame_to, eop=EOP_IAU2006)
        assert jnp.allclose(sv.r, r_expected, atol=_POS_TOL), f"r_{frame_to} = {sv.r}"
        assert jnp.allclose(sv.v, v_expected, atol=_VEL_TOL), f"v_{frame_to} = {sv.v}"

    def test_tirs_to_cirs_without_eop(self):
        sv = state_vector(JD_UTC, R_TIRS, V_TIRS)
        out = sv_ecef_to_eci(sv, "TIRS", "CIRS", jd_utc=2453101.827406783)
        assert jnp.allclose(out.r, R_CIRS, atol=1e-4)
        assert jnp.allclose(out.v, V_CIRS, atol=_VEL_TOL)


# ---------------------------------------------------------------------------
# Transport terms
# ---------------------------------------------------------------------------


class TestTransportTerms:
    @pytest.mark.parametrize(
        ("frame_eci", "eop"),
        [("GCRF", EOP_FK5), ("TEME", EOP_FK5), ("GCRF", EOP_IAU2006), ("MOD06", EOP_IAU2006)],
    )
    def test_roundtrip(self, frame_eci, eop):
        sv = state_vector(JD_UTC, R_ITRF, V_ITRF, jnp.array([1e-3, -2e-3, 5e-4]))
        back = sv_eci_to_ecef(sv_ecef_to_eci(sv, "ITRF", frame_eci, eop=eop), frame_eci, "ITRF", eop=eop)
        assert jnp.allclose(back.r, sv.r, atol=1e-9)
        assert jnp.allclose(back.v, sv.v, atol=1e-12)
        assert jnp.allclose(back.a, sv.a, atol=1e-15)

    def test_point_at_rest_on_earth(self):
        """A point fixed in PEF moves on a circle in TOD."""
        r_pef = jnp.array([6378.137, 0.0, 100.0])
        sv = sv_ecef_to_eci(state_vector(JD_UTC, r_pef), "PEF", "TOD", eop=EOP_FK5)
        w = OMEGA_EARTH * (1.0 - 1.5563 / 86400000.0)
        assert jnp.allclose(jnp.linalg.norm(sv.v), w * 6378.137, rtol=1e-12)
        assert jnp.allclose(jnp.linalg.norm(sv.a), w * w * 6378.137, rtol=1e-12)
        assert jnp.abs(jnp.dot(sv.r, sv.v)) < 1e-9
        assert jnp.allclose(sv.v[2], 0.0, atol=1e-15)

    def test_ecef_to_ecef_rotates_only(self):
        sv = sv_ecef_to_ecef(SV_ITRF, "ITRF", "PEF", EOP_FK5)
        assert jnp.allclose(jnp.linalg.norm(sv.v), jnp.linalg.norm(V_ITRF), rtol=1e-14)

    def test_tirs_without_eop(self):
        sv = sv_ecef_to_eci(state_vector(JD_UTC, R_TIRS, V_TIRS), "TIRS", "MJ2000")
        assert sv.r.shape == (3,)


# ---------------------------------------------------------------------------
# ECI -> ECI
# ---------------------------------------------------------------------------


class TestEciTransport:
    def test_teme_to_gcrf(self):
        sv = sv_eci_to_eci(state_vector(JD_UTC, R_TEME, V_TEME), "TEME", "GCRF", eop=EOP_FK5)
        assert jnp.allclose(sv.r, R_GCRF, atol=1e-5)
        assert jnp.allclose(sv.v, V_GCRF, atol=1e-8)

    def test_stamps_destination_epoch(self):
        sv = state_vector(JD_UTC, R_MOD, V_MOD)
        jd_to = JD_UTC + 365.25
        out = sv_eci_to_eci(sv, "MOD", "MOD", jd_to=jd_to)
        assert out.t == jd_to
        D = r_eci_to_eci("MOD", JD_UTC, "MOD", jd_to)
        assert jnp.allclose(out.r, D @ R_MOD, atol=1e-12)

    def test_keeps_epoch_without_destination(self):
        sv = state_vector(JD_UTC, R_TEME, V_TEME)
        out = sv_eci_to_eci(sv, "TEME", "TOD")
        assert out.t == sv.t

    def test_jit(self):
        fn = jax.jit(lambda sv: sv_eci_to_eci(sv, "TEME", "GCRF", eop=EOP_FK5))
        out = fn(state_vector(JD_UTC, R_TEME, V_TEME))
        assert jnp.allclose(out.r, R_GCRF, atol=1e-5)


# ---------------------------------------------------------------------------
# Generic dispatch and errors
# ---------------------------------------------------------------------------


class TestTransformStateVector:
    def test_dispatch_ecef_to_eci(self):
        a = transform_state_vector(SV_ITRF, "ITRF", "GCRF", eop=EOP_FK5)
        b = sv_ecef_to_eci(SV_ITRF, "ITRF", "GCRF", eop=EOP_FK5)
        assert jnp.array_equal(a.r, b.r) and jnp.array_equal(a.v, b.v)

    def test_dispatch_eci_to_ecef(self):
        sv = state_vector(JD_UTC, R_GCRF, V_GCRF)
        a = transform_state_vector(sv, "GCRF", "ITRF", eop=EOP_IAU2006)
        b = sv_eci_to_ecef(sv, "GCRF", "ITRF", eop=EOP_IAU2006)
        assert jnp.array_equal(a.r, b.r) and jnp.array_equal(a.v, b.v)

    def test_dispatch_ecef_to_ecef(self):
        a = transform_state_vector(SV_ITRF, "ITRF", "PEF", eop=EOP_FK5)
        b = sv_ecef_to_ecef(SV_ITRF, "ITRF", "PEF", EOP_FK5)
        assert jnp.array_equal(a.r, b.r)

    def test_dispatch_eci_to_eci(self):
        sv = state_vector(JD_UTC, R_TEME, V_TEME)
        out = transform_state_vector(sv, "TEME", "GCRF", eop=EOP_FK5)
        assert jnp.allclose(out.r, R_GCRF, atol=1e-5)

    def test_second_epoch_with_ecef(self):
        with pytest.raises(FrameTransformationError, match="second epoch"):
            transform_state_vector(SV_ITRF, "ITRF", "GCRF", jd_to=JD_UTC + 1.0, eop=EOP_FK5)

    def test_wrong_direction(self):
        with pytest.raises(FrameTransformationError, match="is not an ECEF frame"):
            sv_ecef_to_eci(SV_ITRF, "GCRF", "TOD", eop=EOP_FK5)
        with pytest.raises(FrameTransformationError, match="is not an ECI frame"):
            sv_eci_to_ecef(SV_ITRF, "ITRF", "PEF", eop=EOP_FK5)

    def test_itrf_without_eop(self):
        with pytest.raises(FrameTransformationError, match="ITRF requires EOP"):
            sv_ecef_to_eci(SV_ITRF, "ITRF", "TOD")


# ---------------------------------------------------------------------------
# Keplerian elements
# ---------------------------------------------------------------------------


class TestOrbEciToEci:
    def test_shape_is_invariant(self):
        """Semi-major axis and eccentricity do not depend on the frame."""
        oe = KeplerianElements(JD_UTC, 7130e3, 0.0012, 1.7, 0.5, 1.1, 2.3)
        out = orb_eci_to_eci(oe, "TEME", "GCRF", eop=EOP_FK5)
        assert jnp.abs(out.a - oe.a) < 1e-3
        assert jnp.abs(out.e - oe.e) < 1e-10
        assert out.t == oe.t

    def test_inclination_changes_slightly(self):
        oe = KeplerianElements(JD_UTC, 7130e3, 0.0012, 1.7, 0.5, 1.1, 2.3)
        out = orb_eci_to_eci(oe, "MOD", "J2000")
        di = jnp.abs(out.i - oe.i)
        assert 0.0 < di < 1e-3

    def test_identity(self):
        oe = KeplerianElements(JD_UTC, 7130e3, 0.0012, 1.7, 0.5, 1.1, 2.3)
        out = orb_eci_to_eci(oe, "GCRF", "GCRF")
        assert jnp.abs(out.i - oe.i) < 1e-12
        assert jnp.abs(out.raan - oe.raan) < 1e-12

    def test_destination_epoch(self):
        oe = KeplerianElements(JD_UTC, 7130e3, 0.0012, 1.7, 0.5, 1.1, 2.3)
        out = orb_eci_to_eci(oe, "MOD", "MOD", jd_to=JD_UTC + 3652.5)
        assert out.t == JD_UTC + 3652.5
        # About 1.4 deg of precession per decade, mostly in the node
        assert jnp.abs(out.raan - oe.raan) < 0.01
