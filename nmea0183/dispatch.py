"""Dispatch engine: the single entry point from raw bytes to a record.

    raw bytes -> parse_frame -> decoder lookup -> parse_<type> -> record

The mnemonic registry (``registry.py``) and the decoder table below are kept
apart, so adding a decoder never touches the framing code.
"""

import logging
from collections.abc import Callable

from nmea0183.config import DEFAULT_OPTIONS, DecodeOptions
from nmea0183.errors import NmeaSentenceError, TypeNotImplementedError
from nmea0183.frame import parse_frame
from nmea0183.registry import SentenceType
from nmea0183.sentences import (
    parse_bod,
    parse_bwc,
    parse_gbs,
    parse_gga,
    parse_gll,
    parse_gns,
    parse_gsa,
    parse_gsv,
    parse_hdt,
    parse_rma,
    parse_rmb,
    parse_rmc,
    parse_stn,
    parse_vbw,
    parse_vtg,
    parse_wpl,
)
from nmea0183.types import SentenceData

__all__ = ["DECODERS", "decode", "implemented_types"]

_logger = logging.getLogger(__name__)

Decoder = Callable[[memoryview], SentenceData]

DECODERS: dict[SentenceType, Decoder] = {
    SentenceType.BOD: parse_bod,
    SentenceType.BWC: parse_bwc,
    SentenceType.GBS: parse_gbs,
    SentenceType.GGA: parse_gga,
    SentenceType.GLL: parse_gll,
    SentenceType.GNS: parse_gns,
    SentenceType.GSA: parse_gsa,
    SentenceType.GSV: parse_gsv,
    SentenceType.HDT: parse_hdt,
    SentenceType.RMA: parse_rma,
    SentenceType.RMB: parse_rmb,
    SentenceType.RMC: parse_rmc,
    SentenceType.STN: parse_stn,
    SentenceType.VBW: parse_vbw,
    SentenceType.VTG: parse_vtg,
    SentenceType.WPL: parse_wpl,
}

# Sentence types whose decoder needs variable-length mode letter lists
_MODE_LIST_TYPES = frozenset({SentenceType.GNS})


def _find_decoder(
    sentence_type: SentenceType, options: DecodeOptions
) -> Decoder | None:
    if sentence_type in _MODE_LIST_TYPES and not options.mode_lists:
        return None
    return DECODERS.get(sentence_type)


def implemented_types(options: DecodeOptions = DEFAULT_OPTIONS) -> frozenset[SentenceType]:
    """Return the sentence types :func:`decode` can turn into records."""
    return frozenset(
        sentence_type
        for sentence_type in DECODERS
        if _find_decoder(sentence_type, options) is not None
    )


def decode(
    sentence: bytes | bytearray | memoryview | str,
    options: DecodeOptions = DEFAULT_OPTIONS,
) -> SentenceData:
    """Decode one NMEA 0183 sentence into a typed record.

    This is the main entry point. It performs:
    1. Framing: length bound, prefix split, checksum verification
    2. Type resolution against the sentence registry
    3. Decoder lookup
    4. Field decoding into the record of that type

    Args:
        sentence: One complete sentence, e.g.
            ``b"$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\r\\n"``.
        options: Decoder switches, see :class:`DecodeOptions`.

    The buffer is only borrowed for the call: every view of it is released
    before :func:`decode` returns or raises.

    Returns:
        The record for the sentence type (``GLLData``, ``GGAData`` ...).
        ``record.sentence_type`` tells which one.

    Raises:
        NmeaSentenceError: One of its subclasses, describing the first
            failure. Decoding is all-or-nothing.

    Example:
        >>> gll = decode(b"$GPGLL,4916.45,N,12311.12,W,225444,A,*1D\\r\\n")
        >>> gll.sentence_type
        <SentenceType.GLL: b'GLL'>
        >>> gll.time
        Time(hour=22, minute=54, second=44.0)
    """
    try:
        frame = parse_frame(sentence)
        try:
            decoder = _find_decoder(frame.sentence_type, options)
            if decoder is None:
                raise TypeNotImplementedError(frame.sentence_type)
            return decoder(frame.data)
        finally:
            frame.release()
    except NmeaSentenceError as error:
        _logger.debug("Rejected sentence %r: %s", sentence, error)
        raise
