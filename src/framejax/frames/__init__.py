"""Geocentric reference frame rotations.

This sub-package provides the rotations between the Earth-fixed (ITRF,
PEF, TIRS) and quasi-inertial (GCRF, J2000, MOD, TOD, TEME, CIRS, MOD06,
MJ2000, ERS) frames under two theories:

- **IAU-76/FK5**: ``ITRF -> PEF -> TOD -> MOD -> GCRF``, plus TEME
- **IAU-2006/2010, CIO-based**: ``ITRF -> TIRS -> CIRS -> GCRF``
- **IAU-2006/2010, equinox-based**: ``ITRF -> TIRS -> ERS -> MOD06 -> MJ2000 -> GCRF``

The frame selector (:func:`r_ecef_to_ecef`, :func:`r_ecef_to_eci`,
:func:`r_eci_to_ecef`, :func:`r_eci_to_eci` and the generic
:func:`rotation`) picks the chain for a frame pair, pulls what it needs
from the EOP and composes the elementary rotations once.  Every function
returns a DCM or a quaternion according to its ``rotation_type``.
"""

from framejax.frames._types import (
    ECEF_FRAMES,
    ECI_FRAMES,
    FK5_FRAMES,
    IAU2006_CIO_FRAMES,
    IAU2006_EQUINOX_FRAMES,
    OF_DATE_FRAMES,
    FrameTag,
    FrameTransformationError,
    Theory,
    as_frame,
)
from framejax.frames.dispatch import rotation
from framejax.frames.ecef_to_ecef import r_ecef_to_ecef
from framejax.frames.ecef_to_eci import r_ecef_to_eci, r_eci_to_ecef
from framejax.frames.eci_to_eci import r_eci_to_eci
from framejax.frames.fk5 import (
    equation_of_equinoxes_fk5,
    gmst_from_jd_ut1,
    nutation_fk5,
    precession_fk5,
    r_gcrf_to_itrf_fk5,
    r_gcrf_to_mod_fk5,
    r_itrf_to_gcrf_fk5,
    r_itrf_to_pef_fk5,
    r_mod_to_gcrf_fk5,
    r_mod_to_pef_fk5,
    r_mod_to_tod_fk5,
    r_pef_to_itrf_fk5,
    r_pef_to_mod_fk5,
    r_pef_to_tod_fk5,
    r_tod_to_mod_fk5,
    r_tod_to_pef_fk5,
)
from framejax.frames.iau2006_cio import (
    cip_iau2006,
    r_cirs_to_gcrf_iau2006,
    r_cirs_to_tirs_iau2006,
    r_gcrf_to_cirs_iau2006,
    r_itrf_to_tirs_iau2006,
    r_tirs_to_cirs_iau2006,
    r_tirs_to_itrf_iau2006,
)
from framejax.frames.iau2006_equinox import (
    equation_of_origins_iau2006,
    r_ers_to_mod06_iau2006,
    r_ers_to_tirs_iau2006,
    r_gcrf_to_mj2000_iau2006,
    r_mj2000_to_gcrf_iau2006,
    r_mj2000_to_mod06_iau2006,
    r_mj2000_to_tirs_iau2006,
    r_mod06_to_ers_iau2006,
    r_mod06_to_mj2000_iau2006,
    r_mod06_to_tirs_iau2006,
    r_tirs_to_ers_iau2006,
    r_tirs_to_mj2000_iau2006,
    r_tirs_to_mod06_iau2006,
)
from framejax.frames.teme import (
    r_gcrf_to_teme,
    r_mod_to_teme,
    r_pef_to_teme,
    r_teme_to_gcrf,
    r_teme_to_mod,
    r_teme_to_pef,
    r_teme_to_tod,
    r_tod_to_teme,
)

__all__ = [
    # Frame tags and errors
    "ECEF_FRAMES",
    "ECI_FRAMES",
    "FK5_FRAMES",
    "IAU2006_CIO_FRAMES",
    "IAU2006_EQUINOX_FRAMES",
    "OF_DATE_FRAMES",
    "FrameTag",
    "FrameTransformationError",
    "Theory",
    "as_frame",
    # Frame selector
    "r_ecef_to_ecef",
    "r_ecef_to_eci",
    "r_eci_to_ecef",
    "r_eci_to_eci",
    "rotation",
    # FK5
    "equation_of_equinoxes_fk5",
    "gmst_from_jd_ut1",
    "nutation_fk5",
    "precession_fk5",
    "r_gcrf_to_itrf_fk5",
    "r_gcrf_to_mod_fk5",
    "r_itrf_to_gcrf_fk5",
    "r_itrf_to_pef_fk5",
    "r_mod_to_gcrf_fk5",
    "r_mod_to_pef_fk5",
    "r_mod_to_tod_fk5",
    "r_pef_to_itrf_fk5",
    "r_pef_to_mod_fk5",
    "r_pef_to_tod_fk5",
    "r_tod_to_mod_fk5",
    "r_tod_to_pef_fk5",
    # TEME
    "r_gcrf_to_teme",
    "r_mod_to_teme",
    "r_pef_to_teme",
    "r_teme_to_gcrf",
    "r_teme_to_mod",
    "r_teme_to_pef",
    "r_teme_to_tod",
    "r_tod_to_teme",
    # IAU-2006 CIO-based
    "cip_iau2006",
    "r_cirs_to_gcrf_iau2006",
    "r_cirs_to_tirs_iau2006",
    "r_gcrf_to_cirs_iau2006",
    "r_itrf_to_tirs_iau2006",
    "r_tirs_to_cirs_iau2006",
    "r_tirs_to_itrf_iau2006",
    # IAU-2006 equinox-based
    "equation_of_origins_iau2006",
    "r_ers_to_mod06_iau2006",
    "r_ers_to_tirs_iau2006",
    "r_gcrf_to_mj2000_iau2006",
    "r_mj2000_to_gcrf_iau2006",
    "r_mj2000_to_mod06_iau2006",
    "r_mj2000_to_tirs_iau2006",
    "r_mod06_to_ers_iau2006",
    "r_mod06_to_mj2000_iau2006",
    "r_mod06_to_tirs_iau2006",
    "r_tirs_to_ers_iau2006",
    "r_tirs_to_mj2000_iau2006",
    "r_tirs_to_mod06_iau2006",
]
