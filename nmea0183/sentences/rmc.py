"""RMC sentence decoder.

RMC (Recommended Minimum Specific GNSS Data) is the minimum set of data a
GNSS receiver reports: time, date, position, course and speed.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      |     +-- Variation direction E/W
           |      | |        | |         | |     |     |      +-- Magnetic variation, degrees
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground, degrees true
           |      | |        | |         | +-- Speed over ground, knots
           |      | +--------+-+---------+-- Position
           |      +-- Status (A = active, V = warning)
           +-- UTC time (HHMMSS.ss)

NMEA 2.3+ receivers append a mode indicator: ``...,003.1,W,A*hh``.
"""

from nmea0183.codes import LongitudeDirection, PositioningMode, RmStatus
from nmea0183.fields import FieldReader
from nmea0183.types import RMCData

__all__ = ["parse_rmc"]


def parse_rmc(data: bytes | memoryview) -> RMCData:
    """Decode the data span of an RMC sentence.

    Raises:
        NmeaSentenceError: Any grammar failure; no partial record is built.
    """
    reader = FieldReader(data)
    time = reader.optional_time()
    reader.literal(b",")
    status = reader.optional_code(RmStatus)
    reader.literal(b",")
    position = reader.position()
    reader.literal(b",")
    speed = reader.optional_float()
    reader.literal(b",")
    heading = reader.optional_float()
    reader.literal(b",")
    date = reader.optional_date()
    reader.literal(b",")
    magnetic_variation = reader.optional_float()
    reader.literal(b",")
    magnetic_direction = reader.optional_code(LongitudeDirection, b",*")
    mode = None
    if reader.peek() == b",":
        reader.literal(b",")
        mode = reader.optional_code(PositioningMode, b"*")
    reader.literal(b"*")
    reader.finish()

    return RMCData(
        time=time,
        status=status,
        position=position,
        speed=speed,
        heading=heading,
        date=date,
        magnetic_variation=magnetic_variation,
        magnetic_direction=magnetic_direction,
        mode=mode,
    )
