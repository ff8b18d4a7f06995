"""Tests for RMC sentence decoding."""

import pytest

from nmea0183 import (
    Date,
    GeneralParsingError,
    LongitudeDirection,
    PositioningMode,
    RMCData,
    RmStatus,
    StatusKind,
    StatusParsingError,
    Time,
    decode,
)
from nmea0183.sentences import parse_rmc

RMC = b"$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A\r\n"


class TestParseRMC:
    """Tests for RMC decoding."""

    def test_active_fix(self):
        result = decode(RMC)
        assert isinstance(result, RMCData)
        assert result.time == Time(12, 35, 19.0)
        assert result.status is RmStatus.ACTIVE
        assert result.position.latitude == pytest.approx(48.1173, abs=1e-6)
        assert result.position.longitude == pytest.approx(11.516667, abs=1e-6)
        assert result.speed == pytest.approx(22.4)
        assert result.heading == pytest.approx(84.4)
        assert result.date == Date(day=23, month=3, year=94)
        assert result.magnetic_variation == pytest.approx(3.1)
        assert result.magnetic_direction is LongitudeDirection.WEST
        assert result.mode is None
        assert result.valid is True

    def test_mode_indicator(self):
        result = parse_rmc(
            b"123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W,A*"
        )
        assert result.mode is PositioningMode.AUTONOMOUS

    def test_precise_status_is_valid(self):
        result = parse_rmc(b"123519,P,4807.038,N,01131.000,E,022.4,084.4,230394,,*")
        assert result.status is RmStatus.PRECISE
        assert result.magnetic_variation is None
        assert result.magnetic_direction is None
        assert result.valid is True

    def test_warning_without_position(self):
        result = parse_rmc(b"123519,V,,,,,,,230394,,,N*")
        assert result.status is RmStatus.WARNING
        assert result.position is None
        assert result.date == Date(23, 3, 94)
        assert result.valid is False

    def test_short_date(self):
        with pytest.raises(GeneralParsingError):
            parse_rmc(b"123519,A,4807.038,N,01131.000,E,022.4,084.4,2303,003.1,W*")

    def test_unknown_status(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_rmc(b"123519,X,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*")
        assert exc_info.value.kind is StatusKind.RM_STATUS

    def test_magnetic_direction_must_be_east_or_west(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_rmc(b"123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,N*")
        assert exc_info.value.kind is StatusKind.LONGITUDE_DIRECTION
