"""BWC sentence decoder.

BWC (Bearing and Distance to Waypoint - Great Circle) gives the bearing and
range from the current position to a waypoint.

BWC Sentence Format:
    $GPBWC,225444,4917.24,N,12309.57,W,051.9,T,031.6,M,001.3,N,004*29
           |      |                  | |     | |     | |     | |
           |      |                  | |     | |     | |     | +-- Waypoint ID
           |      |                  | |     | |     | +-----+-- Distance, nautical miles
           |      |                  | |     | +-----+-- Bearing, degrees magnetic
           |      |                  | +-----+-- Bearing, degrees true
           |      +------------------+-- Waypoint position
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.fields import FieldReader
from nmea0183.types import BWCData

__all__ = ["parse_bwc"]


def parse_bwc(data: bytes | memoryview) -> BWCData:
    reader = FieldReader(data)
    time = reader.optional_time()
    reader.literal(b",")
    waypoint_position = reader.position()
    reader.literal(b",")
    bearing_true = reader.optional_float()
    reader.literal(b",T,")
    bearing_magnetic = reader.optional_float()
    reader.literal(b",M,")
    nautical_miles = reader.optional_float()
    reader.literal(b",N,")
    waypoint = reader.optional_text(b"*")
    reader.literal(b"*")
    reader.finish()

    return BWCData(
        time=time,
        waypoint_position=waypoint_position,
        bearing_true=bearing_true,
        bearing_magnetic=bearing_magnetic,
        nautical_miles=nautical_miles,
        waypoint=waypoint,
    )
