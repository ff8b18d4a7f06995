"""HDT (Heading, True) sentence decoder.

    $HEHDT,274.07,T*19
           |      |
           |      +-- T = true
           +-- Heading, degrees true
"""

from nmea0183.fields import FieldReader
from nmea0183.types import HDTData

__all__ = ["parse_hdt"]


def parse_hdt(data: bytes | memoryview) -> HDTData:
    reader = FieldReader(data)
    heading_true = reader.optional_float()
    reader.literal(b",T*")
    reader.finish()
    return HDTData(heading_true=heading_true)
