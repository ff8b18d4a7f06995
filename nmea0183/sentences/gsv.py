"""GSV sentence decoder.

GSV (GNSS Satellites in View) describes up to four satellites per sentence;
a full sky view is spread over ``number_of_sentences`` sentences.

GSV Sentence Format:
    $GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75
           | | |  |  |  |   |  +-- next satellite block ...
           | | |  |  |  |   +-- SNR, dB (empty when not tracking)
           | | |  |  |  +-- Azimuth, degrees true
           | | |  |  +-- Elevation, degrees
           | | |  +-- Satellite ID
           | | +-- Satellites in view
           | +-- Sentence number
           +-- Number of sentences
"""

from nmea0183.fields import UINT16_MAX, FieldReader
from nmea0183.types import GSVData, GSVSatellite

__all__ = ["parse_gsv"]

_MAX_SATELLITES_PER_SENTENCE = 4


def _parse_satellite(reader: FieldReader) -> GSVSatellite:
    """Read one ``id,elevation,azimuth,snr`` block and its trailing ',' or '*'."""
    reader.literal(b",")
    sat_id = reader.optional_int()
    reader.literal(b",")
    elevation = reader.optional_float()
    reader.literal(b",")
    true_azimuth = reader.optional_float()
    reader.literal(b",")
    snr = reader.optional_int(b",*")
    return GSVSatellite(
        sat_id=sat_id,
        elevation=elevation,
        true_azimuth=true_azimuth,
        snr=snr,
    )


def parse_gsv(data: bytes | memoryview) -> GSVData:
    """Decode the data span of a GSV sentence.

    Sentences with fewer than four satellite blocks (the last sentence of a
    cycle, or ``$GPGSV,1,1,00*79`` with none at all) are accepted.
    """
    reader = FieldReader(data)
    number_of_sentences = reader.optional_int(maximum=UINT16_MAX)
    reader.literal(b",")
    sentence_number = reader.optional_int(maximum=UINT16_MAX)
    reader.literal(b",")
    sats_in_view = reader.optional_int(b",*")

    satellites = []
    while reader.peek() == b"," and len(satellites) < _MAX_SATELLITES_PER_SENTENCE:
        satellites.append(_parse_satellite(reader))
    reader.literal(b"*")
    reader.finish()

    return GSVData(
        number_of_sentences=number_of_sentences,
        sentence_number=sentence_number,
        sats_in_view=sats_in_view,
        satellites=tuple(satellites),
    )
