"""GBS (GNSS Satellite Fault Detection) sentence decoder.

    $GPGBS,015509.00,-0.031,-0.186,0.219,19,0.000,-0.354,6.972*4D
           |         |      |      |     |  |     |      |
           |         |      |      |     |  |     |      +-- Std. deviation of bias
           |         |      |      |     |  |     +-- Bias estimate, meters
           |         |      |      |     |  +-- Probability of missed detection
           |         |      |      |     +-- Most likely failed satellite ID
           |         +------+------+-- Expected lat / lon / alt errors, meters
           +-- UTC time of the associated fix
"""

from nmea0183.fields import FieldReader
from nmea0183.types import GBSData

__all__ = ["parse_gbs"]


def parse_gbs(data: bytes | memoryview) -> GBSData:
    reader = FieldReader(data)
    time = reader.optional_time()
    reader.literal(b",")
    lat_error = reader.optional_float()
    reader.literal(b",")
    lon_error = reader.optional_float()
    reader.literal(b",")
    alt_error = reader.optional_float()
    reader.literal(b",")
    most_likely_failed_sat = reader.optional_int()
    reader.literal(b",")
    missed_probability = reader.optional_float()
    reader.literal(b",")
    bias_estimate = reader.optional_float()
    reader.literal(b",")
    bias_standard_deviation = reader.optional_float(b"*")
    reader.literal(b"*")
    reader.finish()

    return GBSData(
        time=time,
        lat_error=lat_error,
        lon_error=lon_error,
        alt_error=alt_error,
        most_likely_failed_sat=most_likely_failed_sat,
        missed_probability=missed_probability,
        bias_estimate=bias_estimate,
        bias_standard_deviation=bias_standard_deviation,
    )
