"""Tests for VTG sentence decoding."""

import pytest

from nmea0183 import (
    DataParsingError,
    PositioningMode,
    StatusKind,
    StatusParsingError,
    VTGData,
    decode,
)
from nmea0183.sentences import parse_vtg

# Standard VTG from a GPS-only receiver
VTG_GPS = b"$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*25"

# VTG from a multi-constellation receiver (GN prefix)
VTG_GN = b"$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"


class TestParseVTG:
    """Tests for VTG decoding."""

    def test_without_mode_indicator(self):
        result = decode(b"$GPVTG,123.4,T,121.2,M,5.5,N,10.2,K*79\r\n")
        assert result == VTGData(
            bearing_true=123.4,
            bearing_magnetic=121.2,
            speed_knots=5.5,
            speed_kmh=10.2,
            mode=None,
        )

    def test_gps_prefix(self):
        result = decode(VTG_GPS)
        assert result.bearing_true == pytest.approx(54.7)
        assert result.bearing_magnetic == pytest.approx(34.4)
        assert result.speed_knots == pytest.approx(5.5)
        assert result.speed_kmh == pytest.approx(10.2)
        assert result.mode is PositioningMode.AUTONOMOUS

    def test_gn_prefix(self):
        assert decode(VTG_GN) == decode(VTG_GPS)

    def test_speed_meters_per_second(self):
        result = parse_vtg(b"054.7,T,034.4,M,019.4,N,036.0,K,D*")
        assert result.speed_meters_per_second == pytest.approx(10.0)
        assert result.mode is PositioningMode.DIFFERENTIAL

    def test_stationary_without_track(self):
        result = parse_vtg(b",T,,M,0.0,N,0.0,K,A*")
        assert result.bearing_true is None
        assert result.bearing_magnetic is None
        assert result.speed_knots == pytest.approx(0.0)
        assert result.speed_meters_per_second == pytest.approx(0.0)

    def test_not_valid_mode(self):
        result = parse_vtg(b",T,,M,,N,,K,N*")
        assert result.mode is PositioningMode.NOT_VALID
        assert result.speed_kmh is None
        assert result.speed_meters_per_second is None

    def test_empty_mode_indicator(self):
        result = parse_vtg(b"054.7,T,034.4,M,005.5,N,010.2,K,*")
        assert result.mode is None

    def test_unknown_mode(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_vtg(b"054.7,T,034.4,M,005.5,N,010.2,K,Z*")
        assert exc_info.value.kind is StatusKind.POSITIONING_MODE

    def test_wrong_unit_tag(self):
        with pytest.raises(DataParsingError):
            parse_vtg(b"054.7,X,034.4,M,005.5,N,010.2,K*")

    def test_missing_speed_unit(self):
        with pytest.raises(DataParsingError):
            parse_vtg(b"054.7,T,034.4,M,005.5,N,010.2*")
