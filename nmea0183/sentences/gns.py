"""GNS sentence decoder.

GNS (GNSS Fix Data) is the multi-constellation successor of GGA. Instead of
a single quality digit it carries one mode letter per satellite system.

GNS Sentence Format:
    $GNGNS,014035.00,4332.69262,S,17235.48549,E,RR,13,0.9,25.63,11.24,,*70
           |         |                          |  |  |   |     |    ||
           |         |                          |  |  |   |     |    |+-- DGPS station ID
           |         |                          |  |  |   |     |    +-- Age of DGPS data
           |         |                          |  |  |   |     +-- Geoid separation ('-' = unknown)
           |         |                          |  |  |   +-- Orthometric height, meters
           |         |                          |  |  +-- HDOP
           |         |                          |  +-- Satellites in use
           |         |                          +-- Mode letters (GPS, GLONASS, Galileo, ...)
           |         +-- Position
           +-- UTC time (HHMMSS.ss)
"""

from nmea0183.fields import UINT16_MAX, FieldReader
from nmea0183.types import GNSData

__all__ = ["parse_gns"]


def parse_gns(data: bytes | memoryview) -> GNSData:
    """Decode the data span of a GNS sentence.

    Raises:
        StatusParsingError: If any mode letter is not a known mode indicator.
        NmeaSentenceError: Any other grammar failure.
    """
    reader = FieldReader(data)
    time = reader.optional_time()
    reader.literal(b",")
    position = reader.position()
    reader.literal(b",")
    mode = reader.optional_mode_list()
    reader.literal(b",")
    sats_in_use = reader.optional_int()
    reader.literal(b",")
    hdop = reader.optional_float()
    reader.literal(b",")
    orthometric_height = reader.optional_float()
    reader.literal(b",")
    geoid_separation = reader.optional_sentinel_float()
    reader.literal(b",")
    age_of_differential = reader.optional_float()
    reader.literal(b",")
    differential_station_id = reader.optional_int(b"*", maximum=UINT16_MAX)
    reader.literal(b"*")
    reader.finish()

    return GNSData(
        time=time,
        position=position,
        mode=mode,
        sats_in_use=sats_in_use,
        hdop=hdop,
        orthometric_height=orthometric_height,
        geoid_separation=geoid_separation,
        age_of_differential=age_of_differential,
        differential_station_id=differential_station_id,
    )
