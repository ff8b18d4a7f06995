"""Error taxonomy shared by every decoding stage.

Every failure raised by :func:`nmea0183.decode` is a subclass of
:class:`NmeaSentenceError`, so callers can handle the whole family with a
single ``except`` clause and still dispatch on the concrete kind when they
need to:

    >>> try:
    ...     decode(b"$GPHDT,123.45,T*FF\\r\\n")
    ... except ChecksumError as error:
    ...     error.parsed, error.calculated
    (255, 4)

The set of exceptions is closed. Decoders never substitute a default value
for a malformed field; they raise one of the classes below instead.
"""

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from nmea0183.registry import SentenceType

__all__ = [
    "ChecksumError",
    "DataParsingError",
    "GeneralParsingError",
    "HexParsingError",
    "NmeaSentenceError",
    "SentenceLengthError",
    "StatusKind",
    "StatusParsingError",
    "TypeNotImplementedError",
    "UnknownTypeError",
    "UnkownTypeError",
]


class StatusKind(Enum):
    """Which coded field a :class:`StatusParsingError` was raised for."""

    RM_STATUS = "RmStatusError"
    LATITUDE_DIRECTION = "LatitudeDirectionError"
    LONGITUDE_DIRECTION = "LongitudeDirectionError"
    GPS_QUALITY = "GpsQualityError"
    GLL_STATUS = "GllStatusError"
    GSA_MODE = "GsaModeError"
    GSA_SELECTION_MODE = "GsaSelectionModeError"
    STEER_DIRECTION = "SteerDirectionError"
    ARRIVAL_STATUS = "ArrivalStatusError"
    RTE_MODE = "RteModeError"
    DATA_VALIDITY = "DataValidityError"
    POSITIONING_MODE = "PositioningModeError"


class NmeaSentenceError(ValueError):
    """Base class for every sentence decoding failure."""


class SentenceLengthError(NmeaSentenceError):
    """The raw sentence is longer than the 102 bytes NMEA 0183 allows.

    Attributes:
        length: Length of the rejected input in bytes.
    """

    def __init__(self, length: int) -> None:
        super().__init__(f"sentence is {length} bytes long, at most 102 allowed")
        self.length = length


class ChecksumError(NmeaSentenceError):
    """The transmitted checksum does not match the calculated one.

    Attributes:
        parsed: Checksum byte read from the ``*hh`` field.
        calculated: XOR of the bytes between the delimiter and ``*``.
    """

    def __init__(self, parsed: int, calculated: int) -> None:
        super().__init__(
            f"checksum mismatch: sentence says {parsed:02X}, "
            f"calculated {calculated:02X}"
        )
        self.parsed = parsed
        self.calculated = calculated


class HexParsingError(NmeaSentenceError):
    """The two checksum characters are not hexadecimal digits.

    Attributes:
        high: Raw byte value of the first checksum character.
        low: Raw byte value of the second checksum character.
    """

    def __init__(self, high: int, low: int) -> None:
        super().__init__(f"checksum {bytes((high, low))!r} is not hexadecimal")
        self.high = high
        self.low = low


class UnknownTypeError(NmeaSentenceError):
    """The 3-letter mnemonic is not a known NMEA 0183 sentence type.

    Attributes:
        prefix: The 7-byte sentence prefix (delimiter, talker, mnemonic, comma).
    """

    def __init__(self, prefix: bytes) -> None:
        super().__init__(f"unknown sentence type in prefix {prefix!r}")
        self.prefix = prefix


# Historical spelling, kept so both names can be caught.
UnkownTypeError = UnknownTypeError


class TypeNotImplementedError(NmeaSentenceError):
    """The sentence type is known, but no decoder exists for it.

    Attributes:
        sentence_type: The resolved :class:`~nmea0183.registry.SentenceType`.
    """

    def __init__(self, sentence_type: "SentenceType") -> None:
        super().__init__(f"no decoder for {sentence_type.name} sentences")
        self.sentence_type = sentence_type


class StatusParsingError(NmeaSentenceError):
    """A coded field carried a token outside its closed table.

    Attributes:
        kind: Which coded field failed.
        token: The offending wire token.
    """

    def __init__(self, kind: StatusKind, token: str | int | None = None) -> None:
        super().__init__(f"{kind.value}: unexpected token {token!r}")
        self.kind = kind
        self.token = token


class GeneralParsingError(NmeaSentenceError):
    """A non-empty numeric token could not be converted.

    Attributes:
        token: The raw token that failed to parse.
    """

    def __init__(self, token: bytes = b"") -> None:
        super().__init__(f"cannot parse {token!r} as a number")
        self.token = token


class DataParsingError(NmeaSentenceError):
    """The sentence does not follow the wire layout of its type.

    Raised when a literal separator or unit tag (``,T,``, ``,K*`` ...) is
    missing, when a field delimiter cannot be found, or when the frame
    itself is malformed.

    Attributes:
        detail: Human readable description of the mismatch.
    """

    def __init__(self, detail: str = "sentence layout mismatch") -> None:
        super().__init__(detail)
        self.detail = detail
