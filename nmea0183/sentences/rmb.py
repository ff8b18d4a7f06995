"""RMB sentence decoder.

RMB (Recommended Minimum Navigation Information) is sent by a navigation
receiver while a destination waypoint is active.

RMB Sentence Format:
    $GPRMB,A,0.66,L,003,004,4917.24,N,12309.57,W,001.3,052.5,000.5,V*20
           | |    | |   |   |                  | |     |     |     |
           | |    | |   |   |                  | |     |     |     +-- Arrival status (A = arrived, V = not)
           | |    | |   |   |                  | |     |     +-- Closing velocity, knots
           | |    | |   |   |                  | |     +-- Bearing to destination, degrees true
           | |    | |   |   |                  | +-- Range to destination, nautical miles
           | |    | |   |   +------------------+-- Destination waypoint position
           | |    | |   +-- Origin (from) waypoint ID
           | |    | +-- Destination (to) waypoint ID
           | |    +-- Direction to steer (L/R)
           | +-- Cross track error, nautical miles
           +-- Status (A = active, V = warning)
"""

from nmea0183.codes import ArrivalStatus, RmStatus, SteerDirection
from nmea0183.fields import FieldReader
from nmea0183.types import RMBData

__all__ = ["parse_rmb"]


def parse_rmb(data: bytes | memoryview) -> RMBData:
    """Decode the data span of an RMB sentence.

    Waypoint identifiers are returned as ``str``; an empty identifier is None.
    """
    reader = FieldReader(data)
    status = reader.optional_code(RmStatus)
    reader.literal(b",")
    cross_error = reader.optional_float()
    reader.literal(b",")
    steer_direction = reader.optional_code(SteerDirection)
    reader.literal(b",")
    to_waypoint = reader.optional_text()
    reader.literal(b",")
    from_waypoint = reader.optional_text()
    reader.literal(b",")
    destination_position = reader.position()
    reader.literal(b",")
    range_to_destination = reader.optional_float()
    reader.literal(b",")
    bearing = reader.optional_float()
    reader.literal(b",")
    closing_velocity = reader.optional_float()
    reader.literal(b",")
    arrival_status = reader.optional_code(ArrivalStatus, b"*")
    reader.literal(b"*")
    reader.finish()

    return RMBData(
        status=status,
        cross_error=cross_error,
        steer_direction=steer_direction,
        to_waypoint=to_waypoint,
        from_waypoint=from_waypoint,
        destination_position=destination_position,
        range_to_destination=range_to_destination,
        bearing=bearing,
        closing_velocity=closing_velocity,
        arrival_status=arrival_status,
    )
