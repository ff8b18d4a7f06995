"""Helper factories for NMEA decoder tests."""

from functools import reduce


def make_sentence(body: str, terminator: str = "\r\n") -> bytes:
    """Append a correct '*hh' checksum (and terminator) to ``body``.

    ``body`` starts with the '$' or '!' delimiter, e.g. ``"$GPHDT,1.0,T"``.
    """
    checksum = reduce(lambda value, char: value ^ ord(char), body[1:], 0)
    return f"{body}*{checksum:02X}{terminator}".encode("ascii")
