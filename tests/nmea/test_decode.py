"""Tests for the decode entry point."""

import dataclasses
import logging

import pytest

from nmea0183 import (
    ChecksumError,
    DecodeOptions,
    GeneralParsingError,
    GGAData,
    GLLData,
    HDTData,
    NmeaSentenceError,
    SentenceLengthError,
    SentenceType,
    TypeNotImplementedError,
    UnknownTypeError,
    VTGData,
    decode,
    implemented_types,
)
from tests.nmea.helpers import make_sentence

SAMPLES = {
    SentenceType.BOD: b"$GPBOD,099.3,T,105.6,M,POINTB,POINTA*45",
    SentenceType.BWC: b"$GPBWC,225444,4917.24,N,12309.57,W,051.9,T,031.6,M,001.3,N,004*29",
    SentenceType.GBS: b"$GPGBS,015509.00,-0.031,-0.186,0.219,19,0.000,-0.354,6.972*4D",
    SentenceType.GGA: b"$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47",
    SentenceType.GLL: b"$GPGLL,4916.45,N,12311.12,W,225444,A,*1D",
    SentenceType.GNS: b"$GNGNS,014035.00,4332.69262,S,17235.48549,E,RR,13,0.9,25.63,11.24,,*70",
    SentenceType.GSA: b"$GPGSA,A,3,04,05,,09,12,,,24,,,,,2.5,1.3,2.1*39",
    SentenceType.GSV: b"$GPGSV,2,1,08,01,40,083,46,02,17,308,41,12,07,344,39,14,22,228,45*75",
    SentenceType.HDT: b"$GPHDT,123.45,T*04",
    SentenceType.RMA: b"$GPRMA,A,4916.45,N,12311.12,W,12.5,-3.2,5.5,54.7,3.1,E*40",
    SentenceType.RMB: b"$GPRMB,A,0.66,L,003,004,4917.24,N,12309.57,W,001.3,052.5,000.5,V*20",
    SentenceType.RMC: b"$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A",
    SentenceType.STN: make_sentence("$GPSTN,01", terminator=""),
    SentenceType.VBW: b"$VDVBW,5.2,-0.3,A,5.4,-0.1,A*55",
    SentenceType.VTG: b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25",
    SentenceType.WPL: b"$GPWPL,4917.16,N,12310.64,W,003*65",
}

# Every field left empty; STN is absent because its one field is mandatory
EMPTY_BODIES = [
    "$GPBOD,,T,,M,,",
    "$GPBWC,,,,,,,T,,M,,N,",
    "$GPGBS,,,,,,,,",
    "$GPGGA,,,,,,,,,,M,,M,,",
    "$GPGLL,,,,,,,",
    "$GNGNS,,,,,,,,,,,,",
    "$GPGSA,,,,,,,,,,,,,,,,,",
    "$GPGSV,,,",
    "$GPHDT,,T",
    "$GPRMA,,,,,,,,,,,",
    "$GPRMB,,,,,,,,,,,,,",
    "$GPRMC,,,,,,,,,,,",
    "$VDVBW,,,,,,",
    "$GPVTG,,T,,M,,N,,K",
    "$GPWPL,,,,,",
]


def _is_absent(value) -> bool:
    if isinstance(value, tuple):
        return all(_is_absent(item) for item in value)
    return value is None


class TestDecode:
    """Tests for decode function."""

    def test_gll(self):
        result = decode(b"$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\r\n")
        assert isinstance(result, GLLData)

    def test_hdt(self):
        assert decode(b"$GPHDT,123.45,T*04\r\n") == HDTData(heading_true=123.45)

    def test_gga_without_fix(self):
        result = decode(b"$GPGGA,,,,,,,,,,M,,M,,*56\r\n")
        assert isinstance(result, GGAData)
        assert result.position is None

    def test_vtg(self):
        result = decode(b"$GPVTG,123.4,T,121.2,M,5.5,N,10.2,K*79")
        assert isinstance(result, VTGData)
        assert result.speed_kmh == pytest.approx(10.2)

    def test_str_input(self):
        assert decode("$GPHDT,123.45,T*04") == decode(b"$GPHDT,123.45,T*04")

    def test_decoding_twice_gives_equal_records(self):
        sentence = SAMPLES[SentenceType.RMC]
        assert decode(sentence) == decode(sentence)

    @pytest.mark.parametrize("sentence_type", sorted(SAMPLES, key=lambda t: t.name))
    def test_record_matches_sentence_type(self, sentence_type):
        result = decode(SAMPLES[sentence_type])
        assert result.sentence_type is sentence_type

    @pytest.mark.parametrize("body", EMPTY_BODIES)
    def test_empty_fields_decode_to_none(self, body):
        result = decode(make_sentence(body))
        for field in dataclasses.fields(result):
            assert _is_absent(getattr(result, field.name)), field.name


class TestDecodeErrors:
    """Tests for decode failures."""

    def test_known_type_without_decoder(self):
        with pytest.raises(TypeNotImplementedError) as exc_info:
            decode(make_sentence("$GPRTE,2,1,c,0,W1,W2"))
        assert exc_info.value.sentence_type is SentenceType.RTE

    def test_unknown_type(self):
        with pytest.raises(UnknownTypeError):
            decode(make_sentence("$GPZZZ,1,2,3"))

    def test_mutated_byte(self):
        with pytest.raises(ChecksumError):
            decode(b"$GPVTG,123.4,T,121.3,M,5.5,N,10.2,K*79")

    def test_too_long(self):
        with pytest.raises(SentenceLengthError):
            decode(make_sentence("$GPSTN," + "0" * 91))

    def test_errors_share_base_class(self):
        with pytest.raises(ValueError):
            decode(b"$GPHDT,123.45,T*FF")

    def test_rejection_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="nmea0183.dispatch")
        with pytest.raises(NmeaSentenceError):
            decode(b"$GPHDT,123.45,T*FF")
        assert any(record.levelno == logging.DEBUG for record in caplog.records)


class TestBufferRelease:
    """Tests that decode only borrows a bytearray buffer."""

    def test_resize_after_decoder_failure(self):
        buffer = bytearray(make_sentence("$GPHDT,abc,T"))
        with pytest.raises(GeneralParsingError) as exc_info:
            decode(buffer)
        buffer.clear()
        assert buffer == bytearray()
        assert exc_info.value.token == b"abc"

    def test_resize_after_missing_decoder(self):
        buffer = bytearray(make_sentence("$GPRTE,2,1,c,0,W1,W2"))
        with pytest.raises(TypeNotImplementedError):
            decode(buffer)
        del buffer[:]
        assert buffer == bytearray()

    def test_resize_after_success(self):
        buffer = bytearray(b"$GPHDT,123.45,T*04\r\n")
        result = decode(buffer)
        buffer.clear()
        assert result == HDTData(heading_true=123.45)


class TestImplementedTypes:
    """Tests for implemented_types function."""

    def test_all_decoders(self):
        assert implemented_types() == frozenset(SAMPLES)

    def test_without_mode_lists(self):
        types = implemented_types(DecodeOptions(mode_lists=False))
        assert SentenceType.GNS not in types
        assert types == frozenset(SAMPLES) - {SentenceType.GNS}
