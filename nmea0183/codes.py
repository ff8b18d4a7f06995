"""Closed-set coded fields.

Many NMEA fields carry a single letter or a small integer drawn from a fixed
table (status flags, hemispheres, fix quality, ...). Each table is an
``Enum`` whose member values are the wire tokens, and :func:`decode_code`
is the one lookup every decoder goes through.

No table has an ``UNKNOWN`` member. A token outside the table raises :class:`~nmea0183.errors.StatusParsingError` naming the field
kind, it is never mapped to a default.
"""

from enum import Enum
from typing import TypeVar

from nmea0183.errors import StatusKind, StatusParsingError

__all__ = [
    "ArrivalStatus",
    "DataValidity",
    "GllStatus",
    "GpsQuality",
    "GsaMode",
    "GsaSelectionMode",
    "LatitudeDirection",
    "LongitudeDirection",
    "PositioningMode",
    "RmStatus",
    "RteMode",
    "SteerDirection",
    "decode_code",
]


class RmStatus(Enum):
    """Status letter of the RMA, RMB and RMC sentences."""

    ACTIVE = "A"
    WARNING = "V"
    PRECISE = "P"


class LatitudeDirection(Enum):
    NORTH = "N"
    SOUTH = "S"


class LongitudeDirection(Enum):
    EAST = "E"
    WEST = "W"


class GpsQuality(Enum):
    """GGA fix quality indicator.

    0 = Invalid (no fix)
    1 = GPS fix (SPS)
    2 = DGPS fix
    3 = PPS fix
    4 = RTK Fixed (centimeter-level accuracy)
    5 = RTK Float (decimeter-level accuracy, converging)
    6 = Estimated (dead reckoning)
    7 = Manual input
    8 = Simulation
    """

    FIX_NOT_AVAILABLE = 0
    FIX = 1
    DIFFERENTIAL_FIX = 2
    PPS_FIX = 3
    RTK_FIXED = 4
    RTK_FLOAT = 5
    ESTIMATED = 6
    MANUAL = 7
    SIMULATION = 8


class GllStatus(Enum):
    DATA_VALID = "A"
    DATA_INVALID = "V"
    PRECISE = "P"


class GsaMode(Enum):
    """GSA fix type."""

    FIX_NOT_AVAILABLE = 1
    FIX_2D = 2
    FIX_3D = 3


class GsaSelectionMode(Enum):
    MANUAL = "M"
    AUTOMATIC = "A"


class SteerDirection(Enum):
    LEFT = "L"
    RIGHT = "R"


class ArrivalStatus(Enum):
    ARRIVED = "A"
    NOT_ARRIVED = "V"


class RteMode(Enum):
    """Route completeness flag of RTE sentences."""

    COMPLETE_ROUTE = "c"
    WORKING_ROUTE = "w"


class DataValidity(Enum):
    DATA_VALID = "A"


class PositioningMode(Enum):
    """FAA mode indicator (NMEA 2.3+), also used per system in GNS.

    A = Autonomous (standard GPS positioning)
    D = Differential (DGPS or SBAS)
    E = Estimated (dead reckoning)
    F = Float RTK
    M = Manual input
    N = Not valid (no fix)
    P = Precise
    R = Real Time Kinematic (RTK fixed)
    S = Simulator
    """

    AUTONOMOUS = "A"
    DIFFERENTIAL = "D"
    ESTIMATED = "E"
    FLOAT_RTK = "F"
    MANUAL = "M"
    NOT_VALID = "N"
    PRECISE = "P"
    RTK = "R"
    SIMULATOR = "S"


_ERROR_KINDS: dict[type[Enum], StatusKind] = {
    RmStatus: StatusKind.RM_STATUS,
    LatitudeDirection: StatusKind.LATITUDE_DIRECTION,
    LongitudeDirection: StatusKind.LONGITUDE_DIRECTION,
    GpsQuality: StatusKind.GPS_QUALITY,
    GllStatus: StatusKind.GLL_STATUS,
    GsaMode: StatusKind.GSA_MODE,
    GsaSelectionMode: StatusKind.GSA_SELECTION_MODE,
    SteerDirection: StatusKind.STEER_DIRECTION,
    ArrivalStatus: StatusKind.ARRIVAL_STATUS,
    RteMode: StatusKind.RTE_MODE,
    DataValidity: StatusKind.DATA_VALIDITY,
    PositioningMode: StatusKind.POSITIONING_MODE,
}

CodeT = TypeVar("CodeT", bound=Enum)


def decode_code(code_type: type[CodeT], token: str | int) -> CodeT:
    """Look a wire token up in the table of a coded field.

    Args:
        code_type: One of the coded field enums of this module.
        token: Wire token, a one-character string or a small integer
            depending on the field.

    Returns:
        The matching enum member.

    Raises:
        StatusParsingError: If the token is not in the table. The error's
            ``kind`` identifies the field.

    Example:
        >>> decode_code(LatitudeDirection, "S")
        <LatitudeDirection.SOUTH: 'S'>
        >>> decode_code(GsaMode, 3)
        <GsaMode.FIX_3D: 3>
    """
    try:
        return code_type(token)
    except ValueError as exc:
        raise StatusParsingError(_ERROR_KINDS[code_type], token) from exc
