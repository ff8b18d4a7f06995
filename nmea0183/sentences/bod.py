"""BOD (Bearing - Origin to Destination) sentence decoder.

    $GPBOD,099.3,T,105.6,M,POINTB,POINTA*45
           |     | |     | |      |
           |     | |     | |      +-- Origin waypoint ID
           |     | |     | +-- Destination waypoint ID
           |     | +-----+-- Bearing, degrees magnetic
           +-----+-- Bearing, degrees true
"""

from nmea0183.fields import FieldReader
from nmea0183.types import BODData

__all__ = ["parse_bod"]


def parse_bod(data: bytes | memoryview) -> BODData:
    reader = FieldReader(data)
    bearing_true = reader.optional_float()
    reader.literal(b",T,")
    bearing_magnetic = reader.optional_float()
    reader.literal(b",M,")
    to_waypoint = reader.optional_text()
    reader.literal(b",")
    from_waypoint = reader.optional_text(b"*")
    reader.literal(b"*")
    reader.finish()

    return BODData(
        bearing_true=bearing_true,
        bearing_magnetic=bearing_magnetic,
        to_waypoint=to_waypoint,
        from_waypoint=from_waypoint,
    )
