"""NMEA data types for decoded sentences.

This module defines dataclasses for structured NMEA sentence data.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero" - critical for stationary detection and data quality.

    2. Coded fields are enums, never raw letters. A letter outside the
       field's table fails the whole decode, so a record never holds a
       value the consumer cannot interpret.

    3. Every record class carries a ``sentence_type`` class attribute. The
       returned record is its own tag, so consumers can branch on either
       ``isinstance`` or ``record.sentence_type``.

    4. Text fields (waypoint identifiers) are plain ``str`` copies, so a
       record stays valid after the input buffer is reused.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from nmea0183.codes import (
    ArrivalStatus,
    DataValidity,
    GllStatus,
    GpsQuality,
    GsaMode,
    GsaSelectionMode,
    LatitudeDirection,
    LongitudeDirection,
    PositioningMode,
    RmStatus,
    SteerDirection,
)
from nmea0183.registry import SentenceType

__all__ = [
    "BODData",
    "BWCData",
    "Date",
    "GBSData",
    "GGAData",
    "GLLData",
    "GNSData",
    "GSAData",
    "GSVData",
    "GSVSatellite",
    "HDTData",
    "Position",
    "RMAData",
    "RMBData",
    "RMCData",
    "STNData",
    "SentenceData",
    "Time",
    "VBWData",
    "VTGData",
    "WPLData",
]

# Conversion factor: km/h to m/s
# 1 km/h = 1000m / 3600s = 1/3.6 m/s
_KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND = 3.6


@dataclass
class Time:
    """UTC time of day as transmitted (HHMMSS.ss).

    Only the lexical form is checked; an hour of 25 is passed through
    unchanged.

    Attributes:
        hour: Hour, from the first two digits.
        minute: Minute, from the next two digits.
        second: Seconds including any fractional part.
    """

    hour: int
    minute: int
    second: float


@dataclass
class Date:
    """Calendar date as transmitted (DDMMYY).

    The year is the raw two-digit value; no century is inferred and the
    date is not checked against the calendar.
    """

    day: int
    month: int
    year: int


@dataclass
class Position:
    """Geographic position in unsigned decimal degrees plus hemispheres.

    Attributes:
        latitude: Latitude magnitude, ``degrees + minutes / 60``.
        latitude_direction: North or South.
        longitude: Longitude magnitude, ``degrees + minutes / 60``.
        longitude_direction: East or West.

    Example:
        >>> position = Position(49.2742, LatitudeDirection.NORTH,
        ...                     123.1853, LongitudeDirection.WEST)
        >>> position.longitude_degrees
        -123.1853
    """

    latitude: float
    latitude_direction: LatitudeDirection
    longitude: float
    longitude_direction: LongitudeDirection

    @property
    def latitude_degrees(self) -> float:
        """Signed latitude, positive North and negative South."""
        if self.latitude_direction is LatitudeDirection.SOUTH:
            return -self.latitude
        return self.latitude

    @property
    def longitude_degrees(self) -> float:
        """Signed longitude, positive East and negative West."""
        if self.longitude_direction is LongitudeDirection.WEST:
            return -self.longitude
        return self.longitude


@dataclass
class BODData:
    """Parsed BOD (Bearing, Origin to Destination) sentence."""

    sentence_type: ClassVar[SentenceType] = SentenceType.BOD

    bearing_true: float | None
    bearing_magnetic: float | None
    to_waypoint: str | None
    from_waypoint: str | None


@dataclass
class BWCData:
    """Parsed BWC (Bearing and Distance to Waypoint, great circle) sentence.

    Attributes:
        time: UTC time of the observation.
        waypoint_position: Position of the waypoint, None if all four
            position fields were empty.
        bearing_true: Bearing to the waypoint, degrees true.
        bearing_magnetic: Bearing to the waypoint, degrees magnetic.
        nautical_miles: Distance to the waypoint.
        waypoint: Waypoint identifier.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.BWC

    time: Time | None
    waypoint_position: Position | None
    bearing_true: float | None
    bearing_magnetic: float | None
    nautical_miles: float | None
    waypoint: str | None


@dataclass
class GBSData:
    """Parsed GBS (GNSS Satellite Fault Detection) sentence.

    Attributes:
        time: UTC time of the GGA or GNS fix this refers to.
        lat_error: Expected error in latitude, meters.
        lon_error: Expected error in longitude, meters.
        alt_error: Expected error in altitude, meters.
        most_likely_failed_sat: ID of the most likely failed satellite.
        missed_probability: Probability of missed detection.
        bias_estimate: Estimated bias of the failed satellite, meters.
        bias_standard_deviation: Standard deviation of the bias estimate.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GBS

    time: Time | None
    lat_error: float | None
    lon_error: float | None
    alt_error: float | None
    most_likely_failed_sat: int | None
    missed_probability: float | None
    bias_estimate: float | None
    bias_standard_deviation: float | None


@dataclass
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    GGA provides the primary position fix information from GNSS receivers,
    including coordinates, altitude, and fix quality metrics.

    Attributes:
        time: UTC time of the fix. None if field was empty.

        position: Fix position. None when the receiver sent all four
            position fields empty (no fix).

        quality: GPS fix quality indicator, see ``GpsQuality``.
            None if field was empty.

        sats_in_view: Number of satellites used in the fix solution.
            None if field was empty.

        hdop: HDOP value indicating position accuracy. Lower is better
            (< 1 = ideal, 1-2 = excellent, 2-5 = good, > 10 = poor).

        altitude: Altitude above mean sea level (MSL) in meters.

        geoid_separation: Height of geoid (MSL) above WGS84 ellipsoid.
            None if the field was empty or '-' (receiver cannot compute it).

        age_of_differential: Seconds since the last DGPS update.

        differential_station_id: DGPS reference station ID (0000-1023).

    Example:
        >>> gga = decode(b"$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47")
        >>> gga.quality
        <GpsQuality.FIX: 1>
        >>> gga.position.latitude
        48.1173
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GGA

    time: Time | None
    position: Position | None
    quality: GpsQuality | None
    sats_in_view: int | None
    hdop: float | None
    altitude: float | None
    geoid_separation: float | None
    age_of_differential: float | None
    differential_station_id: int | None

    @property
    def valid(self) -> bool:
        """Navigation validity: a position is present and the fix quality is > 0."""
        return (
            self.position is not None
            and self.quality is not None
            and self.quality is not GpsQuality.FIX_NOT_AVAILABLE
        )


@dataclass
class GLLData:
    """Parsed GLL (Geographic Position, Latitude/Longitude) sentence.

    Attributes:
        position: Reported position, None if all position fields were empty.
        time: UTC time of the position.
        status: Data status (A = valid, V = invalid, P = precise).
        mode: FAA mode indicator, present on NMEA 2.3+ receivers.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GLL

    position: Position | None
    time: Time | None
    status: GllStatus | None
    mode: PositioningMode | None


@dataclass
class GNSData:
    """Parsed GNS (GNSS Fix Data) sentence.

    Attributes:
        time: UTC time of the fix.
        position: Fix position, None if all position fields were empty.
        mode: One mode indicator per satellite system, in the order
            GPS, GLONASS, Galileo, BeiDou, ... as sent by the receiver.
        sats_in_use: Total number of satellites used.
        hdop: Horizontal dilution of precision.
        orthometric_height: Antenna altitude above MSL, meters.
        geoid_separation: Geoid separation in meters; None if empty or '-'.
        age_of_differential: Seconds since the last DGPS update.
        differential_station_id: DGPS reference station ID.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GNS

    time: Time | None
    position: Position | None
    mode: tuple[PositioningMode, ...] | None
    sats_in_use: int | None
    hdop: float | None
    orthometric_height: float | None
    geoid_separation: float | None
    age_of_differential: float | None
    differential_station_id: int | None


@dataclass
class GSAData:
    """Parsed GSA (GNSS DOP and Active Satellites) sentence.

    Attributes:
        selection_mode: Manual or automatic 2D/3D selection.
        mode: Fix type (no fix, 2D, 3D).
        satellites: Exactly 12 slots of satellite IDs used in the fix;
            unused slots are None.
        pdop: Position dilution of precision.
        hdop: Horizontal dilution of precision.
        vdop: Vertical dilution of precision.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GSA

    selection_mode: GsaSelectionMode | None
    mode: GsaMode | None
    satellites: tuple[int | None, ...]
    pdop: float | None
    hdop: float | None
    vdop: float | None


@dataclass
class GSVSatellite:
    """One satellite block of a GSV sentence."""

    sat_id: int | None
    elevation: float | None
    true_azimuth: float | None
    snr: int | None


@dataclass
class GSVData:
    """Parsed GSV (GNSS Satellites in View) sentence.

    A full sky view is split over several GSV sentences; this record holds
    one of them. Reassembling the set is up to the caller.

    Attributes:
        number_of_sentences: Total number of GSV sentences in this cycle.
        sentence_number: Index of this sentence, starting at 1.
        sats_in_view: Total number of satellites in view.
        satellites: Zero to four satellite blocks carried by this sentence.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.GSV

    number_of_sentences: int | None
    sentence_number: int | None
    sats_in_view: int | None
    satellites: tuple[GSVSatellite, ...]


@dataclass
class HDTData:
    """Parsed HDT (Heading, True) sentence."""

    sentence_type: ClassVar[SentenceType] = SentenceType.HDT

    heading_true: float | None


@dataclass
class RMAData:
    """Parsed RMA (Recommended Minimum Specific Loran-C Data) sentence.

    Attributes:
        status: Data status.
        position: Position, None if all position fields were empty.
        time_diff_a: Loran-C time difference A, microseconds.
        time_diff_b: Loran-C time difference B, microseconds.
        speed: Speed over ground, knots.
        heading: Course over ground, degrees true.
        magnetic_variation: Magnetic variation, degrees.
        magnetic_direction: Direction of the magnetic variation.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.RMA

    status: RmStatus | None
    position: Position | None
    time_diff_a: float | None
    time_diff_b: float | None
    speed: float | None
    heading: float | None
    magnetic_variation: float | None
    magnetic_direction: LongitudeDirection | None


@dataclass
class RMBData:
    """Parsed RMB (Recommended Minimum Navigation Information) sentence.

    Attributes:
        status: Data status.
        cross_error: Cross track error, nautical miles.
        steer_direction: Direction to steer to correct the cross track error.
        to_waypoint: Destination waypoint identifier.
        from_waypoint: Origin waypoint identifier.
        destination_position: Position of the destination waypoint.
        range_to_destination: Range to destination, nautical miles.
        bearing: Bearing to destination, degrees true.
        closing_velocity: Destination closing velocity, knots.
        arrival_status: Whether the arrival circle has been entered.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.RMB

    status: RmStatus | None
    cross_error: float | None
    steer_direction: SteerDirection | None
    to_waypoint: str | None
    from_waypoint: str | None
    destination_position: Position | None
    range_to_destination: float | None
    bearing: float | None
    closing_velocity: float | None
    arrival_status: ArrivalStatus | None


@dataclass
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        time: UTC time of the fix.
        status: A = active (valid), V = warning (navigation receiver warning).
        position: Fix position, None if all position fields were empty.
        speed: Speed over ground, knots.
        heading: Course over ground, degrees true.
        date: UTC date of the fix.
        magnetic_variation: Magnetic variation, degrees.
        magnetic_direction: Direction of the magnetic variation.
        mode: FAA mode indicator, present on NMEA 2.3+ receivers.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.RMC

    time: Time | None
    status: RmStatus | None
    position: Position | None
    speed: float | None
    heading: float | None
    date: Date | None
    magnetic_variation: float | None
    magnetic_direction: LongitudeDirection | None
    mode: PositioningMode | None

    @property
    def valid(self) -> bool:
        """Navigation validity: status is not V (warning) and a position is present."""
        return self.position is not None and self.status in (
            RmStatus.ACTIVE,
            RmStatus.PRECISE,
        )


@dataclass
class STNData:
    """Parsed STN (Multiple Data ID) sentence."""

    sentence_type: ClassVar[SentenceType] = SentenceType.STN

    talker_id: int


@dataclass
class VBWData:
    """Parsed VBW (Dual Ground/Water Speed) sentence.

    Speeds are in knots; negative values mean astern / port. A speed field
    of '-' is reported as None.
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.VBW

    lon_water_speed: float | None
    transverse_water_speed: float | None
    water_validity: DataValidity | None
    lon_ground_speed: float | None
    transverse_ground_speed: float | None
    ground_validity: DataValidity | None


@dataclass
class VTGData:
    """Parsed VTG (Track Made Good and Ground Speed) sentence.

    VTG provides velocity information - ground speed and heading (track).

    Attributes:
        bearing_true: Track relative to true north in degrees.
            None when stationary (GNSS cannot determine heading without
            movement).

        bearing_magnetic: Track relative to magnetic north in degrees.

        speed_knots: Ground speed in knots (1 knot = 1.852 km/h).

        speed_kmh: Ground speed in km/h.

        mode: FAA mode indicator (NMEA 2.3+), None on older receivers.

    Example:
        >>> vtg = decode(b"$GPVTG,123.4,T,121.2,M,5.5,N,10.2,K*79")
        >>> vtg.speed_kmh
        10.2
        >>> vtg.speed_meters_per_second
        2.833...
    """

    sentence_type: ClassVar[SentenceType] = SentenceType.VTG

    bearing_true: float | None
    bearing_magnetic: float | None
    speed_knots: float | None
    speed_kmh: float | None
    mode: PositioningMode | None

    @property
    def speed_meters_per_second(self) -> float | None:
        """Ground speed in m/s, derived from km/h; None if km/h is absent."""
        if self.speed_kmh is None:
            return None
        return self.speed_kmh / _KILOMETERS_PER_HOUR_TO_METERS_PER_SECOND


@dataclass
class WPLData:
    """Parsed WPL (Waypoint Location) sentence."""

    sentence_type: ClassVar[SentenceType] = SentenceType.WPL

    position: Position | None
    waypoint_name: str | None


SentenceData = Union[
    BODData,
    BWCData,
    GBSData,
    GGAData,
    GLLData,
    GNSData,
    GSAData,
    GSVData,
    HDTData,
    RMAData,
    RMBData,
    RMCData,
    STNData,
    VBWData,
    VTGData,
    WPLData,
]
