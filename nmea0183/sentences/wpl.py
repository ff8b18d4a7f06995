"""WPL (Waypoint Location) sentence decoder.

    $GPWPL,4917.16,N,12310.64,W,003*65
           |                  | |
           |                  | +-- Waypoint name
           +------------------+-- Waypoint position
"""

from nmea0183.fields import FieldReader
from nmea0183.types import WPLData

__all__ = ["parse_wpl"]


def parse_wpl(data: bytes | memoryview) -> WPLData:
    reader = FieldReader(data)
    position = reader.position()
    reader.literal(b",")
    waypoint_name = reader.optional_text(b"*")
    reader.literal(b"*")
    reader.finish()
    return WPLData(position=position, waypoint_name=waypoint_name)
