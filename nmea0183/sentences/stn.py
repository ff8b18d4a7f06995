"""STN (Multiple Data ID) sentence decoder.

STN precedes a block of sentences from the same talker and carries the
talker ID number (00-99). The field is mandatory.
"""

from nmea0183.errors import GeneralParsingError
from nmea0183.fields import FieldReader, parse_unsigned
from nmea0183.types import STNData

__all__ = ["parse_stn"]


def parse_stn(data: bytes | memoryview) -> STNData:
    reader = FieldReader(data)
    token = reader.token(b"*")
    if not token:
        raise GeneralParsingError(token)
    talker_id = parse_unsigned(token)
    reader.literal(b"*")
    reader.finish()
    return STNData(talker_id=talker_id)
