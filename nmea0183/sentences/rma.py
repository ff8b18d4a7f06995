"""RMA (Recommended Minimum Specific Loran-C Data) sentence decoder.

    $GPRMA,A,4916.45,N,12311.12,W,12.5,-3.2,5.5,54.7,3.1,E*40
           | |                  | |    |    |   |    |   |
           | |                  | |    |    |   |    |   +-- Variation direction E/W
           | |                  | |    |    |   |    +-- Magnetic variation, degrees
           | |                  | |    |    |   +-- Course over ground, degrees true
           | |                  | |    |    +-- Speed over ground, knots
           | |                  | +----+-- Time differences A and B, microseconds
           | +------------------+-- Position
           +-- Status (A = active, V = warning)
"""

from nmea0183.codes import LongitudeDirection, RmStatus
from nmea0183.fields import FieldReader
from nmea0183.types import RMAData

__all__ = ["parse_rma"]


def parse_rma(data: bytes | memoryview) -> RMAData:
    reader = FieldReader(data)
    status = reader.optional_code(RmStatus)
    reader.literal(b",")
    position = reader.position()
    reader.literal(b",")
    time_diff_a = reader.optional_float()
    reader.literal(b",")
    time_diff_b = reader.optional_float()
    reader.literal(b",")
    speed = reader.optional_float()
    reader.literal(b",")
    heading = reader.optional_float()
    reader.literal(b",")
    magnetic_variation = reader.optional_float()
    reader.literal(b",")
    magnetic_direction = reader.optional_code(LongitudeDirection, b"*")
    reader.literal(b"*")
    reader.finish()

    return RMAData(
        status=status,
        position=position,
        time_diff_a=time_diff_a,
        time_diff_b=time_diff_b,
        speed=speed,
        heading=heading,
        magnetic_variation=magnetic_variation,
        magnetic_direction=magnetic_direction,
    )
