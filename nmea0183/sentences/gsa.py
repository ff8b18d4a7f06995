"""GSA sentence decoder.

GSA (GNSS DOP and Active Satellites) lists the satellites used in the fix
and the dilution of precision values.

GSA Sentence Format:
    $GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39
           | | |                     | |   |   |
           | | |                     | |   |   +-- VDOP
           | | |                     | |   +-- HDOP
           | | |                     | +-- PDOP
           | | +---------------------+-- 12 satellite ID slots (empty when unused)
           | +-- Fix type (1 = no fix, 2 = 2D, 3 = 3D)
           +-- Selection mode (M = manual, A = automatic)
"""

from nmea0183.codes import GsaMode, GsaSelectionMode
from nmea0183.fields import FieldReader
from nmea0183.types import GSAData

__all__ = ["parse_gsa"]

_SATELLITE_SLOTS = 12


def parse_gsa(data: bytes | memoryview) -> GSAData:
    """Decode the data span of a GSA sentence.

    The ``satellites`` tuple always has 12 entries so slot positions are
    preserved.
    """
    reader = FieldReader(data)
    selection_mode = reader.optional_code(GsaSelectionMode)
    reader.literal(b",")
    mode = reader.optional_numeric_code(GsaMode)
    reader.literal(b",")

    satellites = []
    for _ in range(_SATELLITE_SLOTS):
        satellites.append(reader.optional_int())
        reader.literal(b",")

    pdop = reader.optional_float()
    reader.literal(b",")
    hdop = reader.optional_float()
    reader.literal(b",")
    vdop = reader.optional_float(b"*")
    reader.literal(b"*")
    reader.finish()

    return GSAData(
        selection_mode=selection_mode,
        mode=mode,
        satellites=tuple(satellites),
        pdop=pdop,
        hdop=hdop,
        vdop=vdop,
    )
