"""Sentence framing: length bound, prefix split, checksum and type lookup.

Frame layout:
    $GPHDT,123.45,T*04\\r\\n
    |     ||        ||  |
    |     ||        ||  +-- optional line terminator
    |     ||        |+-- checksum, 2 hex digits
    |     |+--------+-- data span ('*' included)
    +-----+-- prefix: delimiter, 2-letter talker id, 3-letter mnemonic, comma

The checksum covers every byte strictly between the delimiter and '*'.
"""

from dataclasses import dataclass

from nmea0183.checksum import calculate_checksum, parse_checksum_digits
from nmea0183.errors import (
    ChecksumError,
    DataParsingError,
    NmeaSentenceError,
    SentenceLengthError,
    UnknownTypeError,
)
from nmea0183.registry import SentenceType

__all__ = ["Frame", "parse_frame", "validate_checksum"]

_MAX_SENTENCE_LENGTH = 102
_PREFIX_LENGTH = 7
_MNEMONIC_SLICE = slice(3, 6)
_START_DELIMITERS = b"$!"
_FIELD_DELIMITER = ord(",")
_CHECKSUM_DELIMITER = ord("*")
_CHECKSUM_DIGITS = 2
_LINE_TERMINATORS = (b"\r\n", b"\n", b"\r")


@dataclass(frozen=True)
class Frame:
    """A validated sentence, split into its parts.

    ``prefix`` and ``data`` are views into the buffer passed to
    :func:`parse_frame`; they are only meaningful while that buffer is alive
    and unchanged. Decoders copy whatever they keep.

    Attributes:
        sentence_type: Type resolved from the mnemonic.
        data: Field span from after the prefix comma up to and including '*'.
        checksum: Checksum byte parsed from the ``*hh`` field.
        prefix: The 7-byte prefix, e.g. ``b"$GPGGA,"``.
    """

    sentence_type: SentenceType
    data: memoryview
    checksum: int
    prefix: memoryview

    @property
    def talker_id(self) -> bytes:
        return bytes(self.prefix[1:3])

    def release(self) -> None:
        """Release the views so the underlying buffer can be resized."""
        self.data.release()
        self.prefix.release()


def _terminator_length(view: memoryview) -> int:
    for terminator in _LINE_TERMINATORS:
        if view[-len(terminator) :] == terminator:
            return len(terminator)
    return 0


def _as_view(sentence: bytes | bytearray | memoryview | str) -> memoryview:
    if isinstance(sentence, str):
        try:
            sentence = sentence.encode("ascii")
        except UnicodeEncodeError as exc:
            raise DataParsingError(f"non-ASCII character in {sentence!r}") from exc
    return memoryview(sentence).cast("B")


def _check_sentence(view: memoryview) -> tuple[int, int]:
    """Run the length, structure and checksum checks on a whole sentence.

    Works on offsets only, so no view of the caller's buffer outlives a
    failed check.

    Returns:
        The offset of the '*' marker and the parsed checksum byte.
    """
    if len(view) > _MAX_SENTENCE_LENGTH:
        raise SentenceLengthError(len(view))

    end = len(view) - _terminator_length(view)
    if end < _PREFIX_LENGTH + 1 + _CHECKSUM_DIGITS:
        raise DataParsingError(f"sentence too short: {bytes(view)!r}")
    if view[0] not in _START_DELIMITERS:
        raise DataParsingError(f"sentence must start with '$' or '!': {bytes(view)!r}")
    if view[_PREFIX_LENGTH - 1] != _FIELD_DELIMITER:
        raise DataParsingError(
            f"malformed sentence prefix {bytes(view[:_PREFIX_LENGTH])!r}"
        )

    marker = end - _CHECKSUM_DIGITS - 1
    if view[marker] != _CHECKSUM_DELIMITER:
        raise DataParsingError(f"missing '*hh' checksum trailer: {bytes(view)!r}")

    parsed = parse_checksum_digits(view[marker + 1], view[marker + 2])
    calculated = calculate_checksum(view[1:marker])
    if calculated != parsed:
        raise ChecksumError(parsed, calculated)
    return marker, parsed


def validate_checksum(sentence: bytes | bytearray | memoryview | str) -> bool:
    """Check the framing and checksum of a sentence without decoding it.

    Applies the same checks as :func:`parse_frame` except the sentence type
    lookup, so a sentence with an unregistered mnemonic can still validate.

    Args:
        sentence: Complete NMEA sentence including the start delimiter, '*'
            and checksum, optionally followed by a line terminator.

    Returns:
        True if the sentence is well formed and its checksum matches, False
        otherwise.

    Example:
        >>> validate_checksum("$GPHDT,123.45,T*04\\r\\n")
        True
        >>> validate_checksum("$GPHDT,123.45,T*FF")  # wrong checksum
        False
    """
    try:
        with _as_view(sentence) as view:
            _check_sentence(view)
    except NmeaSentenceError:
        return False
    return True


def parse_frame(sentence: bytes | bytearray | memoryview | str) -> Frame:
    """Validate one raw sentence and split it into a :class:`Frame`.

    Checks are applied in this order, and the first failure is raised:
    length, structure, checksum digits, checksum value, sentence type.
    On failure no view of ``sentence`` is left open, so a ``bytearray``
    buffer can be resized right away.

    Args:
        sentence: One complete sentence, optionally followed by a line
            terminator. ``str`` input must be ASCII.

    Returns:
        The validated frame.

    Raises:
        SentenceLengthError: If the input is longer than 102 bytes.
        DataParsingError: If the delimiter, prefix or ``*hh`` trailer is
            missing, or a ``str`` holds non-ASCII characters.
        HexParsingError: If the checksum digits are not hexadecimal.
        ChecksumError: If the checksum does not match.
        UnknownTypeError: If the mnemonic is not registered.

    Example:
        >>> frame = parse_frame(b"$GPHDT,123.45,T*04\\r\\n")
        >>> frame.sentence_type
        <SentenceType.HDT: b'HDT'>
        >>> bytes(frame.data)
        b'123.45,T*'
    """
    view = _as_view(sentence)
    try:
        marker, checksum = _check_sentence(view)
        sentence_type = SentenceType.from_mnemonic(bytes(view[_MNEMONIC_SLICE]))
        if sentence_type is None:
            raise UnknownTypeError(bytes(view[:_PREFIX_LENGTH]))
    except BaseException:
        view.release()
        raise

    return Frame(
        sentence_type=sentence_type,
        data=view[_PREFIX_LENGTH : marker + 1],
        checksum=checksum,
        prefix=view[:_PREFIX_LENGTH],
    )
