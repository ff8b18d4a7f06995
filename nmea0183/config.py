"""Decoder options."""

from dataclasses import dataclass

__all__ = ["DEFAULT_OPTIONS", "DecodeOptions"]


@dataclass(frozen=True)
class DecodeOptions:
    """Switches that change which sentences can be decoded.

    Attributes:
        mode_lists: Decode variable-length mode indicator lists (one
            letter per satellite system, as in GNS). When False, sentences
            that need them are rejected with ``TypeNotImplementedError``.
    """

    mode_lists: bool = True


DEFAULT_OPTIONS = DecodeOptions()
