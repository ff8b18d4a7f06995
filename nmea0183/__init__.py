"""NMEA 0183 sentence decoder.

Turns raw sentences such as ``$GPGLL,4916.45,N,12311.12,W,225444,A,*1D``
into typed records, or raises an ``NmeaSentenceError`` subclass that says
exactly why the sentence was rejected.
"""

from nmea0183.codes import (
    ArrivalStatus,
    DataValidity,
    GllStatus,
    GpsQuality,
    GsaMode,
    GsaSelectionMode,
    LatitudeDirection,
    LongitudeDirection,
    PositioningMode,
    RmStatus,
    RteMode,
    SteerDirection,
)
from nmea0183.config import DEFAULT_OPTIONS, DecodeOptions
from nmea0183.dispatch import decode, implemented_types
from nmea0183.errors import (
    ChecksumError,
    DataParsingError,
    GeneralParsingError,
    HexParsingError,
    NmeaSentenceError,
    SentenceLengthError,
    StatusKind,
    StatusParsingError,
    TypeNotImplementedError,
    UnknownTypeError,
    UnkownTypeError,
)
from nmea0183.frame import Frame, parse_frame, validate_checksum
from nmea0183.registry import SentenceType
from nmea0183.types import (
    BODData,
    BWCData,
    Date,
    GBSData,
    GGAData,
    GLLData,
    GNSData,
    GSAData,
    GSVData,
    GSVSatellite,
    HDTData,
    Position,
    RMAData,
    RMBData,
    RMCData,
    SentenceData,
    STNData,
    Time,
    VBWData,
    VTGData,
    WPLData,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ArrivalStatus",
    "BODData",
    "BWCData",
    "ChecksumError",
    "DataParsingError",
    "DataValidity",
    "Date",
    "DecodeOptions",
    "Frame",
    "GBSData",
    "GGAData",
    "GLLData",
    "GNSData",
    "GSAData",
    "GSVData",
    "GSVSatellite",
    "GeneralParsingError",
    "GllStatus",
    "GpsQuality",
    "GsaMode",
    "GsaSelectionMode",
    "HDTData",
    "HexParsingError",
    "LatitudeDirection",
    "LongitudeDirection",
    "NmeaSentenceError",
    "Position",
    "PositioningMode",
    "RMAData",
    "RMBData",
    "RMCData",
    "RmStatus",
    "RteMode",
    "STNData",
    "SentenceData",
    "SentenceLengthError",
    "SentenceType",
    "StatusKind",
    "StatusParsingError",
    "SteerDirection",
    "Time",
    "TypeNotImplementedError",
    "UnknownTypeError",
    "UnkownTypeError",
    "VBWData",
    "VTGData",
    "WPLData",
    "decode",
    "implemented_types",
    "parse_frame",
    "validate_checksum",
]
