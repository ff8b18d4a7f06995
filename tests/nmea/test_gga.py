"""Tests for GGA sentence decoding."""

import pytest

from nmea0183 import (
    DataParsingError,
    GeneralParsingError,
    GGAData,
    GpsQuality,
    LatitudeDirection,
    LongitudeDirection,
    StatusKind,
    StatusParsingError,
    Time,
    decode,
)
from nmea0183.sentences import parse_gga

GGA_FIX = b"$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47\r\n"
GGA_EMPTY = b"$GPGGA,,,,,,,,,,M,,M,,*56\r\n"


class TestParseGGA:
    """Tests for GGA decoding."""

    def test_valid_gga_with_fix(self):
        result = decode(GGA_FIX)
        assert isinstance(result, GGAData)
        assert result.time == Time(12, 35, 19.0)
        assert result.position.latitude == pytest.approx(48.1173, abs=1e-6)
        assert result.position.latitude_direction is LatitudeDirection.NORTH
        assert result.position.longitude == pytest.approx(11.516667, abs=1e-6)
        assert result.position.longitude_direction is LongitudeDirection.EAST
        assert result.quality is GpsQuality.FIX
        assert result.sats_in_view == 8
        assert result.hdop == pytest.approx(0.9)
        assert result.altitude == pytest.approx(545.4)
        assert result.geoid_separation == pytest.approx(46.9)
        assert result.age_of_differential is None
        assert result.differential_station_id is None
        assert result.valid is True

    def test_all_fields_empty(self):
        result = decode(GGA_EMPTY)
        assert result == GGAData(
            time=None,
            position=None,
            quality=None,
            sats_in_view=None,
            hdop=None,
            altitude=None,
            geoid_separation=None,
            age_of_differential=None,
            differential_station_id=None,
        )
        assert result.valid is False

    def test_no_fix_quality(self):
        result = parse_gga(b"123519,,,,,0,00,,,M,,M,,*")
        assert result.quality is GpsQuality.FIX_NOT_AVAILABLE
        assert result.sats_in_view == 0
        assert result.valid is False

    def test_geoid_separation_unavailable(self):
        result = parse_gga(b"123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,-,M,,*")
        assert result.geoid_separation is None

    def test_differential_fields(self):
        result = parse_gga(
            b"123519,4807.038,N,01131.000,E,2,08,0.9,545.4,M,-30.0,M,1.0,1023*"
        )
        assert result.quality is GpsQuality.DIFFERENTIAL_FIX
        assert result.geoid_separation == pytest.approx(-30.0)
        assert result.age_of_differential == pytest.approx(1.0)
        assert result.differential_station_id == 1023

    def test_rtk_quality(self):
        result = parse_gga(b"123519,4807.038,N,01131.000,E,4,12,0.5,545.4,M,46.9,M,,*")
        assert result.quality is GpsQuality.RTK_FIXED
        assert result.valid is True

    def test_unknown_quality(self):
        with pytest.raises(StatusParsingError) as exc_info:
            parse_gga(b"123519,4807.038,N,01131.000,E,9,08,0.9,545.4,M,46.9,M,,*")
        assert exc_info.value.kind is StatusKind.GPS_QUALITY

    def test_southern_western_hemispheres(self):
        result = parse_gga(b"123519,3356.123,S,15112.456,W,1,08,0.9,10.0,M,20.0,M,,*")
        assert result.position.latitude_degrees == pytest.approx(-33.935383, abs=1e-6)
        assert result.position.longitude_degrees == pytest.approx(-151.2076, abs=1e-6)

    def test_partial_position(self):
        with pytest.raises(GeneralParsingError):
            parse_gga(b"123519,4807.038,N,,E,1,08,0.9,545.4,M,46.9,M,,*")

    def test_empty_hemisphere(self):
        with pytest.raises(GeneralParsingError):
            parse_gga(b"123519,4807.038,,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*")

    def test_wrong_altitude_unit(self):
        with pytest.raises(DataParsingError):
            parse_gga(b"123519,4807.038,N,01131.000,E,1,08,0.9,545.4,F,46.9,M,,*")

    def test_malformed_number(self):
        with pytest.raises(GeneralParsingError):
            parse_gga(b"123519,4807.038,N,01131.000,E,1,08,0.x9,545.4,M,46.9,M,,*")

    def test_station_id_out_of_range(self):
        with pytest.raises(GeneralParsingError):
            parse_gga(b"123519,4807.038,N,01131.000,E,2,08,0.9,545.4,M,46.9,M,1.0,65536*")

    def test_missing_trailing_field(self):
        with pytest.raises(DataParsingError):
            parse_gga(b"123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M*")

    def test_trailing_data(self):
        with pytest.raises(DataParsingError):
            parse_gga(b"123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*00")
