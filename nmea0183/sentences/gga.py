"""GGA sentence decoder.

GGA (Global Positioning System Fix Data) is one of the most important NMEA
sentences, providing position fix information including coordinates, altitude,
fix quality, and satellite/accuracy metrics.

GGA Sentence Format:
    $GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47
           |      |        | |         | | |  |   |     | |    | |||
           |      |        | |         | | |  |   |     | |    | ||+-- DGPS station ID
           |      |        | |         | | |  |   |     | |    | |+-- Age of DGPS data
           |      |        | |         | | |  |   |     | +----+-- Geoid separation ('-' = unknown)
           |      |        | |         | | |  |   +-----+-- Altitude above MSL
           |      |        | |         | | |  +-- HDOP (horizontal dilution)
           |      |        | |         | | +-- Number of satellites
           |      |        | |         | +-- Fix quality (0-8)
           |      |        | +---------+-- Longitude + E/W
           |      +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)

The unit tags after altitude and geoid separation must both be ",M,".
"""

from nmea0183.codes import GpsQuality
from nmea0183.fields import UINT16_MAX, FieldReader
from nmea0183.types import GGAData

__all__ = ["parse_gga"]


def parse_gga(data: bytes | memoryview) -> GGAData:
    """Decode the data span of a GGA sentence.

    Args:
        data: Fields after ``$xxGGA,`` up to and including '*'.

    Returns:
        The decoded record. Every field except the structure itself may be
        None when the receiver left it empty.

    Raises:
        NmeaSentenceError: Any grammar failure; no partial record is built.
    """
    reader = FieldReader(data)
    time = reader.optional_time()
    reader.literal(b",")
    position = reader.position()
    reader.literal(b",")
    quality = reader.optional_numeric_code(GpsQuality)
    reader.literal(b",")
    sats_in_view = reader.optional_int()
    reader.literal(b",")
    hdop = reader.optional_float()
    reader.literal(b",")
    altitude = reader.optional_float()
    reader.literal(b",M,")
    geoid_separation = reader.optional_sentinel_float()
    reader.literal(b",M,")
    age_of_differential = reader.optional_float()
    reader.literal(b",")
    differential_station_id = reader.optional_int(b"*", maximum=UINT16_MAX)
    reader.literal(b"*")
    reader.finish()

    return GGAData(
        time=time,
        position=position,
        quality=quality,
        sats_in_view=sats_in_view,
        hdop=hdop,
        altitude=altitude,
        geoid_separation=geoid_separation,
        age_of_differential=age_of_differential,
        differential_station_id=differential_station_id,
    )
