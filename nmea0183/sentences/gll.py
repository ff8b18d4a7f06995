"""GLL sentence decoder.

GLL (Geographic Position - Latitude/Longitude) reports the current position
with the time of the fix and a status flag.

GLL Sentence Format:
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
           |       | |        | |      | |
           |       | |        | |      | +-- Mode indicator (NMEA 2.3+, may be empty)
           |       | |        | |      +-- Status (A = valid, V = invalid, P = precise)
           |       | |        | +-- UTC time (HHMMSS.ss)
           |       | +--------+-- Longitude + E/W
           +-------+-- Latitude + N/S

Older receivers stop after the status field.
"""

from nmea0183.codes import GllStatus, PositioningMode
from nmea0183.fields import FieldReader
from nmea0183.types import GLLData

__all__ = ["parse_gll"]


def parse_gll(data: bytes | memoryview) -> GLLData:
    """Decode the data span of a GLL sentence.

    Example:
        >>> gll = parse_gll(b"4916.45,N,12311.12,W,225444,A,*")
        >>> gll.position.latitude, gll.status
        (49.274166..., <GllStatus.DATA_VALID: 'A'>)
    """
    reader = FieldReader(data)
    position = reader.position()
    reader.literal(b",")
    time = reader.optional_time()
    reader.literal(b",")
    status = reader.optional_code(GllStatus, b",*")
    mode = None
    if reader.peek() == b",":
        reader.literal(b",")
        mode = reader.optional_code(PositioningMode, b"*")
    reader.literal(b"*")
    reader.finish()

    return GLLData(position=position, time=time, status=status, mode=mode)
