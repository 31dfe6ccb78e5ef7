"""Frame tags, theories and frame-set membership."""

from __future__ import annotations

import enum


class FrameTransformationError(ValueError):
    """Raised when a frame pair cannot be transformed.

    Covers pairs that mix the FK5 and IAU-2006 theories, pairs whose theory
    contradicts the type of the supplied EOP, and pairs that need EOP data
    when none was given.
    """


class Theory(enum.Enum):
    """Reduction theory used for a frame pair."""

    FK5 = "FK5"
    IAU2006 = "IAU2006"


class FrameTag(enum.Enum):
    """Geocentric reference frames.

    Attributes:
        ITRF: International Terrestrial Reference Frame.
        PEF: Pseudo-Earth Fixed frame (FK5).
        TIRS: Terrestrial Intermediate Reference System (IAU-2006).
        MOD: Mean of Date (FK5).
        TOD: True of Date (FK5).
        GCRF: Geocentric Celestial Reference Frame.
        J2000: J2000 frame, FK5 reduction without EOP nutation corrections.
        TEME: True Equator, Mean Equinox (SGP4).
        CIRS: Celestial Intermediate Reference System (IAU-2006).
        MOD06: Mean of Date, IAU-2006 precession.
        MJ2000: Mean equator and equinox of J2000, IAU-2006.
        ERS: Earth Reference System, true equator and equinox of date.
    """

    ITRF = "ITRF"
    PEF = "PEF"
    TIRS = "TIRS"
    MOD = "MOD"
    TOD = "TOD"
    GCRF = "GCRF"
    J2000 = "J2000"
    TEME = "TEME"
    CIRS = "CIRS"
    MOD06 = "MOD06"
    MJ2000 = "MJ2000"
    ERS = "ERS"

    @property
    def is_ecef(self) -> bool:
        """Whether the frame rotates with the Earth."""
        return self in ECEF_FRAMES

    @property
    def is_eci(self) -> bool:
        """Whether the frame is quasi-inertial."""
        return self in ECI_FRAMES

    @property
    def is_of_date(self) -> bool:
        """Whether the frame orientation depends on the epoch."""
        return self in OF_DATE_FRAMES


ECEF_FRAMES = frozenset({FrameTag.ITRF, FrameTag.PEF, FrameTag.TIRS})
ECI_FRAMES = frozenset(FrameTag) - ECEF_FRAMES

FK5_FRAMES = frozenset(
    {
        FrameTag.ITRF,
        FrameTag.PEF,
        FrameTag.MOD,
        FrameTag.TOD,
        FrameTag.GCRF,
        FrameTag.J2000,
        FrameTag.TEME,
    }
)
IAU2006_CIO_FRAMES = frozenset({FrameTag.ITRF, FrameTag.TIRS, FrameTag.CIRS, FrameTag.GCRF})
IAU2006_EQUINOX_FRAMES = frozenset(
    {
        FrameTag.ITRF,
        FrameTag.TIRS,
        FrameTag.ERS,
        FrameTag.MOD06,
        FrameTag.MJ2000,
        FrameTag.GCRF,
    }
)
IAU2006_FRAMES = IAU2006_CIO_FRAMES | IAU2006_EQUINOX_FRAMES

# ITRF and GCRF belong to both theories
ANCHOR_FRAMES = FK5_FRAMES & IAU2006_FRAMES

OF_DATE_FRAMES = frozenset(
    {
        FrameTag.MOD,
        FrameTag.TOD,
        FrameTag.TEME,
        FrameTag.CIRS,
        FrameTag.MOD06,
        FrameTag.ERS,
    }
)


def as_frame(frame: FrameTag | str) -> FrameTag:
    """Coerce a :class:`FrameTag` or its case-insensitive name.

    Raises:
        FrameTransformationError: If the name is not a known frame.
    """
    if isinstance(frame, FrameTag):
        return frame
    try:
        return FrameTag[str(frame).upper()]
    except KeyError as err:
        raise FrameTransformationError(
            f"Unknown frame '{frame}'. Must be one of: {', '.join(f.name for f in FrameTag)}"
        ) from err
