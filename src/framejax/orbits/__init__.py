"""Orbit states, anomaly conversions and frame transport.

This sub-package provides:

- **State containers**: :class:`OrbitStateVector` and
  :class:`KeplerianElements`.
- **Anomaly conversions**: between mean, eccentric and true anomalies,
  including a JAX-traceable Kepler equation solver.
- **Keplerian conversions**: between elements and Cartesian states.
- **Frame transport**: state vectors and Keplerian elements carried between
  the frames of :mod:`framejax.frames`, with the Earth-rotation terms on
  ECI/ECEF crossings.
"""

from .anomalies import (
    check_eccentricity,
    eccentric_to_mean_anomaly,
    eccentric_to_true_anomaly,
    mean_to_eccentric_anomaly,
    mean_to_true_anomaly,
    true_to_eccentric_anomaly,
    true_to_mean_anomaly,
)
from .keplerian import cartesian_to_keplerian, keplerian_to_cartesian
from .state_vector import KeplerianElements, OrbitStateVector, as_state_vector, state_vector
from .transport import (
    earth_angular_velocity,
    orb_eci_to_eci,
    sv_ecef_to_ecef,
    sv_ecef_to_eci,
    sv_eci_to_ecef,
    sv_eci_to_eci,
    transform_state_vector,
)

__all__ = [
    # State containers
    "KeplerianElements",
    "OrbitStateVector",
    "as_state_vector",
    "state_vector",
    # Anomalies
    "check_eccentricity",
    "eccentric_to_mean_anomaly",
    "eccentric_to_true_anomaly",
    "mean_to_eccentric_anomaly",
    "mean_to_true_anomaly",
    "true_to_eccentric_anomaly",
    "true_to_mean_anomaly",
    # Keplerian
    "cartesian_to_keplerian",
    "keplerian_to_cartesian",
    # Transport
    "earth_angular_velocity",
    "orb_eci_to_eci",
    "sv_ecef_to_ecef",
    "sv_ecef_to_eci",
    "sv_eci_to_ecef",
    "sv_eci_to_eci",
    "transform_state_vector",
]
