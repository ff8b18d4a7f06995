"""NMEA checksum calculation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between the start delimiter
('$' or '!') and '*' (both exclusive), then represented as a two-digit
hexadecimal number after the '*'. Receivers emit uppercase digits, but
lowercase digits are accepted as well.

Example sentence structure:
    $GPGLL,4916.45,N,12311.12,W,225444,A,*1D
     ^                 checksum content  ^ ^^
     |                                      checksum (0x1D = 29)
     first byte included
"""

import string

from nmea0183.errors import HexParsingError

__all__ = ["calculate_checksum", "parse_checksum_digits"]

_HEX_DIGITS = frozenset(string.hexdigits.encode("ascii"))


def calculate_checksum(content: bytes | memoryview) -> int:
    """Calculate the XOR checksum of a content span.

    The NMEA checksum algorithm XORs the value of each byte in the content.
    This is a simple error-detection mechanism that detects single-bit
    errors and some multi-bit errors.

    Args:
        content: The bytes strictly between the start delimiter and '*'.

    Returns:
        Integer checksum value (0-255)

    Example:
        >>> calculate_checksum(b"GPHDT,123.45,T")
        4
    """
    result = 0
    for byte in content:
        result ^= byte
    return result


def parse_checksum_digits(high: int, low: int) -> int:
    """Convert the two checksum characters following '*' into a byte.

    Args:
        high: Byte value of the first (most significant) hex digit.
        low: Byte value of the second hex digit.

    Returns:
        The checksum byte.

    Raises:
        HexParsingError: If either character is not a hex digit. Python's
            ``int(..., 16)`` also accepts signs and whitespace, so the
            digits are checked explicitly first.

    Example:
        >>> parse_checksum_digits(ord("1"), ord("d"))
        29
    """
    if high not in _HEX_DIGITS or low not in _HEX_DIGITS:
        raise HexParsingError(high, low)
    return int(bytes((high, low)), 16)
