"""NMEA field grammar primitives.

This module provides the building blocks every sentence decoder is made of.
NMEA fields are comma-separated and may be empty (consecutive commas
indicate missing data). An empty token is always reported as None, so
callers can distinguish "no data" from "zero value". A non-empty token that
does not match the field's grammar is an error, never a None.

Decoders walk the data span of a frame with a :class:`FieldReader`, reading
each field and then the literal separator or unit tag that follows it:

    >>> reader = FieldReader(b"123.4,T,121.2,M,5.5,N,10.2,K*")
    >>> reader.optional_float()
    123.4
    >>> reader.literal(b",T,")

Coordinates use the DDMM.MMMM (latitude) and DDDMM.MMMM (longitude) format
and are converted to decimal degrees with ``degrees + minutes / 60``.
"""

import re
from enum import Enum
from typing import TypeVar

from nmea0183.codes import (
    LatitudeDirection,
    LongitudeDirection,
    PositioningMode,
    decode_code,
)
from nmea0183.errors import DataParsingError, GeneralParsingError
from nmea0183.types import Date, Position, Time

__all__ = ["FieldReader", "parse_float", "parse_unsigned"]

UINT8_MAX = 0xFF
UINT16_MAX = 0xFFFF

# Plain decimal notation only. float() would also accept "nan", "inf",
# exponents and digit separators, none of which are valid NMEA numbers.
_SIGNED_DECIMAL = re.compile(rb"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
_UNSIGNED_DECIMAL = re.compile(rb"(?:\d+(?:\.\d*)?|\.\d+)")
_DIGITS = re.compile(rb"\d+")

# Geoid separation and VBW speeds use '-' for "present but not computable"
_UNAVAILABLE = b"-"

_LATITUDE_DEGREE_DIGITS = 2
_LONGITUDE_DEGREE_DIGITS = 3

CodeT = TypeVar("CodeT", bound=Enum)


def parse_float(token: bytes, signed: bool = True) -> float:
    """Parse a non-empty decimal token.

    Args:
        token: Raw field bytes, e.g. ``b"545.4"``.
        signed: Whether a leading '+' or '-' is allowed.

    Returns:
        The parsed value.

    Raises:
        GeneralParsingError: If the token is not a plain decimal number.

    Example:
        >>> parse_float(b"-30.0")
        -30.0
    """
    pattern = _SIGNED_DECIMAL if signed else _UNSIGNED_DECIMAL
    if pattern.fullmatch(token) is None:
        raise GeneralParsingError(token)
    return float(token)


def parse_unsigned(token: bytes, maximum: int = UINT8_MAX) -> int:
    """Parse a non-empty unsigned integer token no larger than ``maximum``.

    Raises:
        GeneralParsingError: If the token has non-digit characters or is
            out of range.
    """
    if _DIGITS.fullmatch(token) is None:
        raise GeneralParsingError(token)
    value = int(token)
    if value > maximum:
        raise GeneralParsingError(token)
    return value


def _as_text(token: bytes) -> str:
    return token.decode("ascii", errors="replace")


def _parse_time(token: bytes) -> Time:
    """Parse HHMMSS[.sss]; only the lexical form is validated."""
    hour, minute, second = token[:2], token[2:4], token[4:]
    if _DIGITS.fullmatch(hour) is None or _DIGITS.fullmatch(minute) is None:
        raise GeneralParsingError(token)
    if len(hour) != 2 or len(minute) != 2:
        raise GeneralParsingError(token)
    return Time(
        hour=int(hour),
        minute=int(minute),
        second=parse_float(second, signed=False),
    )


def _parse_date(token: bytes) -> Date:
    """Parse DDMMYY. The two-digit year is kept as is."""
    if len(token) != 6 or _DIGITS.fullmatch(token) is None:
        raise GeneralParsingError(token)
    return Date(day=int(token[0:2]), month=int(token[2:4]), year=int(token[4:6]))


def _parse_coordinate(token: bytes, degree_digits: int) -> float:
    """Convert a DDMM.MMMM / DDDMM.MMMM token into unsigned decimal degrees.

    Example:
        >>> _parse_coordinate(b"4916.45", 2)  # 49 deg 16.45'
        49.274166...
    """
    degrees = token[:degree_digits]
    if len(degrees) != degree_digits or _DIGITS.fullmatch(degrees) is None:
        raise GeneralParsingError(token)
    minutes = parse_float(token[degree_digits:], signed=False)
    return int(degrees) + minutes / 60.0


class FieldReader:
    """Cursor over the data span of one sentence.

    The span starts right after the prefix comma and ends with the '*'
    checksum marker. Every ``optional_*`` method reads one field up to (but
    not including) its terminator; the decoder then consumes the separator
    with :meth:`literal`. Any mismatch raises, so a decoder either returns a
    complete record or nothing.

    Args:
        data: The data span, ``*`` included.
    """

    def __init__(self, data: bytes | memoryview) -> None:
        self._data = bytes(data)
        self._offset = 0

    def at_end(self) -> bool:
        """Return True once every byte of the span has been consumed."""
        return self._offset >= len(self._data)

    def finish(self) -> None:
        """Require that nothing is left after the last expected field."""
        if not self.at_end():
            raise DataParsingError(
                f"unexpected trailing data {self._data[self._offset:]!r}"
            )

    def peek(self, size: int = 1) -> bytes:
        return self._data[self._offset : self._offset + size]

    def literal(self, expected: bytes) -> None:
        """Consume an exact separator or unit tag such as ``b",T,"``.

        Raises:
            DataParsingError: If the next bytes differ from ``expected``.
        """
        if not self._data.startswith(expected, self._offset):
            raise DataParsingError(
                f"expected {expected!r} at offset {self._offset}, "
                f"found {self.peek(len(expected))!r}"
            )
        self._offset += len(expected)

    def token(self, stops: bytes = b",") -> bytes:
        """Read up to the nearest of the single-byte terminators in ``stops``.

        The terminator itself is not consumed.

        Raises:
            DataParsingError: If none of the terminators follows.
        """
        positions = [
            position
            for position in (self._data.find(stop, self._offset) for stop in stops)
            if position >= 0
        ]
        if not positions:
            raise DataParsingError(
                f"no {stops!r} delimiter after offset {self._offset}"
            )
        end = min(positions)
        value = self._data[self._offset : end]
        self._offset = end
        return value

    def optional_float(self, stops: bytes = b",") -> float | None:
        token = self.token(stops)
        if not token:
            return None
        return parse_float(token)

    def optional_sentinel_float(self, stops: bytes = b",") -> float | None:
        """Like :meth:`optional_float`, but a lone '-' also means absent.

        Receivers send '-' when the value exists in the layout but could not
        be computed (e.g. geoid separation without a geoid model). This is
        the only case in which a non-empty token yields None.
        """
        token = self.token(stops)
        if not token or token == _UNAVAILABLE:
            return None
        return parse_float(token)

    def optional_int(
        self, stops: bytes = b",", maximum: int = UINT8_MAX
    ) -> int | None:
        token = self.token(stops)
        if not token:
            return None
        return parse_unsigned(token, maximum)

    def optional_text(self, stops: bytes = b",") -> str | None:
        token = self.token(stops)
        if not token:
            return None
        return _as_text(token)

    def optional_time(self, stops: bytes = b",") -> Time | None:
        token = self.token(stops)
        if not token:
            return None
        return _parse_time(token)

    def optional_date(self, stops: bytes = b",") -> Date | None:
        token = self.token(stops)
        if not token:
            return None
        return _parse_date(token)

    def optional_code(self, code_type: type[CodeT], stops: bytes = b",") -> CodeT | None:
        """Read a letter-coded field and look it up in ``code_type``.

        Raises:
            StatusParsingError: If the token is not in the field's table.
        """
        token = self.token(stops)
        if not token:
            return None
        return decode_code(code_type, _as_text(token))

    def optional_numeric_code(
        self, code_type: type[CodeT], stops: bytes = b","
    ) -> CodeT | None:
        """Read a number-coded field (e.g. GGA fix quality) and look it up."""
        token = self.token(stops)
        if not token:
            return None
        return decode_code(code_type, parse_unsigned(token))

    def optional_mode_list(self, stops: bytes = b",") -> tuple[PositioningMode, ...] | None:
        """Read a run of mode letters, one per satellite system (e.g. ``b"AAN"``)."""
        token = self.token(stops)
        if not token:
            return None
        return tuple(decode_code(PositioningMode, chr(letter)) for letter in token)

    def position(self) -> Position | None:
        """Read the four position fields: lat, N|S, lon, E|W.

        The separators between the four fields are consumed; the one after
        the longitude hemisphere is left for the caller.

        Returns:
            The position, or None when all four fields are empty (receivers
            send ``,,,,`` when they have no fix).

        Raises:
            GeneralParsingError: If a coordinate is malformed, or any of the
                four fields is empty while others are present.
            StatusParsingError: If a hemisphere letter is not N/S or E/W.
        """
        latitude = self.token()
        self.literal(b",")
        latitude_direction = self.token()
        self.literal(b",")
        longitude = self.token()
        self.literal(b",")
        longitude_direction = self.token()

        tokens = (latitude, latitude_direction, longitude, longitude_direction)
        if not any(tokens):
            return None
        if not all(tokens):
            raise GeneralParsingError(b",".join(tokens))

        latitude_value = _parse_coordinate(latitude, _LATITUDE_DEGREE_DIGITS)
        latitude_code = decode_code(LatitudeDirection, _as_text(latitude_direction))
        longitude_value = _parse_coordinate(longitude, _LONGITUDE_DEGREE_DIGITS)
        longitude_code = decode_code(LongitudeDirection, _as_text(longitude_direction))
        return Position(
            latitude=latitude_value,
            latitude_direction=latitude_code,
            longitude=longitude_value,
            longitude_direction=longitude_code,
        )
