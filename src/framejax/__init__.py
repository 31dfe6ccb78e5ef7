"""
framejax is a geocentric reference frame rotation library implemented in JAX.

It provides the rotations between the Earth-fixed and quasi-inertial frames
of the IAU-76/FK5 and IAU-2006/2010 theories, Earth Orientation Parameters
(EOP) from the IERS, transport of orbit state vectors between frames, and
geodetic, geocentric and local NED coordinate conversions.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    MAS2RAD,
    JD_MJD_OFFSET,
    JD_J2000,
    MJD2000,
    WGS84_a,
    WGS84_f,
    GM_EARTH,
    OMEGA_EARTH,
)

from .config import set_dtype, get_dtype

from .time import (
    caldate_to_jd,
    caldate_to_mjd,
    jd_to_caldate,
    jd_utc_to_tt,
    jd_tt_to_utc,
    jd_utc_to_ut1,
)

from .rotations import (
    RotationType,
    Rx,
    Ry,
    Rz,
    angle_to_rot,
    compose_rotation,
    inv_rotation,
)

from .eop import (
    EopIau1980,
    EopIau2000A,
    fetch_iers_eop,
    load_cached_eop,
    read_iers_eop,
)

from .frames import (
    FrameTag,
    FrameTransformationError,
    r_ecef_to_ecef,
    r_ecef_to_eci,
    r_eci_to_ecef,
    r_eci_to_eci,
    rotation,
)

from .orbits import (
    KeplerianElements,
    OrbitStateVector,
    state_vector,
    sv_ecef_to_ecef,
    sv_ecef_to_eci,
    sv_eci_to_ecef,
    sv_eci_to_eci,
    transform_state_vector,
    orb_eci_to_eci,
)

from .coordinates import (
    WGS84,
    Ellipsoid,
    ecef_to_geodetic,
    geodetic_to_ecef,
    ecef_to_geocentric,
    geocentric_to_ecef,
    ecef_to_ned,
    ned_to_ecef,
)

__version__ = "0.1.0"

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "MAS2RAD",
    "JD_MJD_OFFSET",
    "JD_J2000",
    "MJD2000",
    "WGS84_a",
    "WGS84_f",
    "GM_EARTH",
    "OMEGA_EARTH",
    # Config
    "set_dtype",
    "get_dtype",
    # Time
    "caldate_to_jd",
    "caldate_to_mjd",
    "jd_to_caldate",
    "jd_utc_to_tt",
    "jd_tt_to_utc",
    "jd_utc_to_ut1",
    # Rotations
    "RotationType",
    "Rx",
    "Ry",
    "Rz",
    "angle_to_rot",
    "compose_rotation",
    "inv_rotation",
    # EOP
    "EopIau1980",
    "EopIau2000A",
    "fetch_iers_eop",
    "load_cached_eop",
    "read_iers_eop",
    # Frames
    "FrameTag",
    "FrameTransformationError",
    "r_ecef_to_ecef",
    "r_ecef_to_eci",
    "r_eci_to_ecef",
    "r_eci_to_eci",
    "rotation",
    # Orbits
    "KeplerianElements",
    "OrbitStateVector",
    "state_vector",
    "sv_ecef_to_ecef",
    "sv_ecef_to_eci",
    "sv_eci_to_ecef",
    "sv_eci_to_eci",
    "transform_state_vector",
    "orb_eci_to_eci",
    # Coordinates
    "WGS84",
    "Ellipsoid",
    "ecef_to_geodetic",
    "geodetic_to_ecef",
    "ecef_to_geocentric",
    "geocentric_to_ecef",
    "ecef_to_ned",
    "ned_to_ecef",
]
