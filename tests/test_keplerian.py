import jax
import jax.numpy as jnp
import pytest

from framejax.constants import GM_EARTH, WGS84_a
from framejax.orbits import (
    KeplerianElements,
    OrbitStateVector,
    as_state_vector,
    cartesian_to_keplerian,
    keplerian_to_cartesian,
    state_vector,
)

_JD = 2453101.827411875

_DISTANCE_TOL = 1e-4  # metres
_ANGLE_TOL = 1e-10  # radians


def _elements(a=WGS84_a + 700e3, e=0.01, i=0.9, raan=0.3, argp=0.5, f=1.0):
    return KeplerianElements(_JD, a, e, i, raan, argp, f)


class TestStateVector:
    def test_defaults_fill_zero(self):
        sv = state_vector(_JD, [7000e3, 0.0, 0.0])
        assert jnp.array_equal(sv.v, jnp.zeros(3))
        assert jnp.array_equal(sv.a, jnp.zeros(3))
        assert sv.t.dtype == jnp.float64

    def test_as_state_vector_fills_missing(self):
        sv = as_state_vector(OrbitStateVector(_JD, jnp.array([1.0, 2.0, 3.0])))
        assert sv.v.shape == (3,)
        assert sv.a.shape == (3,)

    def test_is_pytree(self):
        sv = state_vector(_JD, [7000e3, 0.0, 0.0], [0.0, 7.5e3, 0.0])
        doubled = jax.tree_util.tree_map(lambda x: 2.0 * x, sv)
        assert isinstance(doubled, OrbitStateVector)
        assert jnp.allclose(doubled.v, jnp.array([0.0, 15e3, 0.0]))


class TestKeplerianToCartesian:
    def test_circular_equatorial(self):
        a = WGS84_a + 500e3
        sv = keplerian_to_cartesian(_elements(a=a, e=0.0, i=0.0, raan=0.0, argp=0.0, f=0.0))
        assert jnp.allclose(sv.r, jnp.array([a, 0.0, 0.0]), atol=_DISTANCE_TOL)
        assert jnp.allclose(sv.v, jnp.array([0.0, jnp.sqrt(GM_EARTH / a), 0.0]), atol=1e-8)

    def test_perigee_distance(self):
        a, e = 8000e3, 0.2
        sv = keplerian_to_cartesian(_elements(a=a, e=e, f=0.0))
        assert jnp.abs(jnp.linalg.norm(sv.r) - a * (1.0 - e)) < _DISTANCE_TOL

    def test_vis_viva(self):
        a, e = 8000e3, 0.2
        sv = keplerian_to_cartesian(_elements(a=a, e=e, f=2.1))
        r = jnp.linalg.norm(sv.r)
        v2 = jnp.dot(sv.v, sv.v)
        assert jnp.abs(v2 - GM_EARTH * (2.0 / r - 1.0 / a)) < 1e-6

    def test_inclination_tilts_angular_momentum(self):
        sv = keplerian_to_cartesian(_elements(i=0.9))
        h = jnp.cross(sv.r, sv.v)
        assert jnp.abs(jnp.arccos(h[2] / jnp.linalg.norm(h)) - 0.9) < _ANGLE_TOL

    def test_keeps_epoch(self):
        sv = keplerian_to_cartesian(_elements())
        assert sv.t == _JD

    def test_invalid_eccentricity(self):
        with pytest.raises(ValueError, match="Eccentricity"):
            keplerian_to_cartesian(_elements(e=1.2))


class TestCartesianToKeplerian:
    @pytest.mark.parametrize(
        "oe",
        [
            _elements(),
            _elements(e=0.3, i=0.1, raan=5.0, argp=2.0, f=4.0),
            _elements(a=26600e3, e=0.74, i=1.1, raan=1.2, argp=4.7, f=0.2),
        ],
    )
    def test_recovers_elements(self, oe):
        back = cartesian_to_keplerian(keplerian_to_cartesian(oe))
        assert jnp.abs(back.a - oe.a) < 1e-3
        assert jnp.abs(back.e - oe.e) < 1e-10
        for name in ("i", "raan", "argp", "f"):
            diff = jnp.mod(getattr(back, name) - getattr(oe, name) + jnp.pi, 2.0 * jnp.pi) - jnp.pi
            assert jnp.abs(diff) < 1e-8, f"{name} differs by {diff}"

    def test_angles_wrapped(self):
        sv = keplerian_to_cartesian(_elements(raan=-1.0, argp=-0.5, f=-2.0))
        oe = cartesian_to_keplerian(sv)
        for value in (oe.raan, oe.argp, oe.f):
            assert 0.0 <= value < 2.0 * jnp.pi

    def test_circular_orbit_is_finite(self):
        sv = keplerian_to_cartesian(_elements(e=0.0))
        oe = cartesian_to_keplerian(sv)
        assert jnp.isfinite(oe.e)
        assert oe.e < 1e-7

    def test_custom_gm(self):
        gm = 398600.4415  # km^3/s^2
        oe = _elements(a=7000.0, e=0.05)
        back = cartesian_to_keplerian(keplerian_to_cartesian(oe, gm), gm)
        assert jnp.abs(back.a - 7000.0) < 1e-8

    def test_jit(self):
        sv = keplerian_to_cartesian(_elements())
        oe = jax.jit(cartesian_to_keplerian)(sv)
        assert jnp.abs(oe.i - 0.9) < _ANGLE_TOL
