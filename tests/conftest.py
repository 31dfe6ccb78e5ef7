import jax.numpy as jnp
import pytest

from framejax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    Tests that switch to float32 (e.g. test_config.py) leave the module-wide
    dtype changed; this fixture restores the default for the next test.
    """
    set_dtype(jnp.float64)
