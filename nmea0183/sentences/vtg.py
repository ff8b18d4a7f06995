"""VTG sentence decoder.

VTG (Track Made Good and Ground Speed) provides velocity information from GNSS.

VTG Sentence Format:
    $GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25
           |     | |     | |     | |     | |
           |     | |     | |     | |     | +-- Mode indicator (NMEA 2.3+, optional)
           |     | |     | |     | +-----+-- Speed in km/h
           |     | |     | +-----+-- Speed in knots
           |     | +-----+-- Track (magnetic north, degrees)
           +-----+-- Track (true north, degrees)

Note: When stationary, the track angle may be empty (no heading when not moving).
"""

from nmea0183.codes import PositioningMode
from nmea0183.fields import FieldReader
from nmea0183.types import VTGData

__all__ = ["parse_vtg"]


def _read_mode(reader: FieldReader) -> PositioningMode | None:
    """Read the optional FAA mode field that follows the ``K`` unit tag.

    Pre-2.3 receivers end the sentence with ``,K*``; newer ones append
    ``,<mode>`` before the '*'.
    """
    if reader.peek() == b"*":
        return None
    reader.literal(b",")
    return reader.optional_code(PositioningMode, b"*")


def parse_vtg(data: bytes | memoryview) -> VTGData:
    """Decode the data span of a VTG sentence.

    Example:
        >>> parse_vtg(b"123.4,T,121.2,M,5.5,N,10.2,K*")
        VTGData(bearing_true=123.4, bearing_magnetic=121.2, speed_knots=5.5, speed_kmh=10.2, mode=None)
    """
    reader = FieldReader(data)
    bearing_true = reader.optional_float()
    reader.literal(b",T,")
    bearing_magnetic = reader.optional_float()
    reader.literal(b",M,")
    speed_knots = reader.optional_float()
    reader.literal(b",N,")
    speed_kmh = reader.optional_float()
    reader.literal(b",K")
    mode = _read_mode(reader)
    reader.literal(b"*")
    reader.finish()

    return VTGData(
        bearing_true=bearing_true,
        bearing_magnetic=bearing_magnetic,
        speed_knots=speed_knots,
        speed_kmh=speed_kmh,
        mode=mode,
    )
