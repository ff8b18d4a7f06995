"""Tests for GLL sentence decoding."""

import pytest

from nmea0183 import (
    GllStatus,
    GLLData,
    LatitudeDirection,
    LongitudeDirection,
    PositioningMode,
    SentenceType,
    StatusKind,
    StatusParsingError,
    Time,
    decode,
)
from nmea0183.sentences import parse_gll

GLL = b"$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\r\n"


class TestParseGLL:
    """Tests for GLL decoding."""

    def test_position_and_time(self):
        result = decode(GLL)
        assert isinstance(result, GLLData)
        assert result.sentence_type is SentenceType.GLL
        assert result.position.latitude == pytest.approx(49.2742, abs=1e-4)
        assert result.position.latitude_direction is LatitudeDirection.NORTH
        assert result.position.longitude == pytest.approx(123.1853, abs=1e-4)
        assert result.position.longitude_direction is LongitudeDirection.WEST
        assert result.time == Time(hour=22, minute=54, second=44.0)
        assert result.status is GllStatus.DATA_VALID
        assert result.mode is None

    def test_without_trailing_field(self):
        result = parse_gll(b"4916.45,N,12311.12,W,225444,A*")
        assert result.status is GllStatus.DATA_VALID
        assert result.mode is None

    def test_mode_indicator(self):
        result = parse_gll(b"4916.45,N,12311.12,W,225444.00,A,D*")
        assert result.mode is PositioningMode.DIFFERENTIAL

    def test_no_fix(self):
        result = parse_gll(b",,,,225444,V,N*")
        assert result.position is None
        assert result.status is GllStatus.DATA_INVALID
        assert result.mode is PositioningMode.NOT_VALID

    def test_unknown_status(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_gll(b"4916.45,N,12311.12,W,225444,X,*")
        assert exc_info.value.kind is StatusKind.GLL_STATUS

    def test_unknown_hemisphere(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_gll(b"4916.45,X,12311.12,W,225444,A,*")
        assert exc_info.value.kind is StatusKind.LATITUDE_DIRECTION
