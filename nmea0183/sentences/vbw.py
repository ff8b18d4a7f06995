"""VBW (Dual Ground/Water Speed) sentence decoder.

    $VDVBW,5.2,-0.3,A,5.4,-0.1,A*55
           |   |    | |   |    |
           |   |    | |   |    +-- Ground speed validity (A = valid)
           |   |    | +---+-- Longitudinal / transverse ground speed, knots
           |   |    +-- Water speed validity (A = valid)
           +---+-- Longitudinal / transverse water speed, knots

A speed of '-' means the sensor cannot provide it and is reported as None.
Negative speeds are astern / to port.
"""

from nmea0183.codes import DataValidity
from nmea0183.fields import FieldReader
from nmea0183.types import VBWData

__all__ = ["parse_vbw"]


def parse_vbw(data: bytes | memoryview) -> VBWData:
    reader = FieldReader(data)
    lon_water_speed = reader.optional_sentinel_float()
    reader.literal(b",")
    transverse_water_speed = reader.optional_sentinel_float()
    reader.literal(b",")
    water_validity = reader.optional_code(DataValidity)
    reader.literal(b",")
    lon_ground_speed = reader.optional_sentinel_float()
    reader.literal(b",")
    transverse_ground_speed = reader.optional_sentinel_float()
    reader.literal(b",")
    ground_validity = reader.optional_code(DataValidity, b"*")
    reader.literal(b"*")
    reader.finish()

    return VBWData(
        lon_water_speed=lon_water_speed,
        transverse_water_speed=transverse_water_speed,
        water_validity=water_validity,
        lon_ground_speed=lon_ground_speed,
        transverse_ground_speed=transverse_ground_speed,
        ground_validity=ground_validity,
    )
