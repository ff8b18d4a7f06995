"""Registry of known NMEA 0183 sentence types.

The registry is a superset of the implemented decoders: a mnemonic found
here but without a decoder is reported as "not implemented", while a
mnemonic missing from here is reported as unknown.
"""

from enum import Enum

__all__ = ["SentenceType"]


class SentenceType(Enum):
    """Closed set of sentence types, keyed by their 3-letter mnemonic."""

    AAM = b"AAM"
    ABK = b"ABK"
    ACK = b"ACK"
    ALM = b"ALM"
    APA = b"APA"
    APB = b"APB"
    BEC = b"BEC"
    BOD = b"BOD"
    BWC = b"BWC"
    BWR = b"BWR"
    BWW = b"BWW"
    DBK = b"DBK"
    DBS = b"DBS"
    DBT = b"DBT"
    DCN = b"DCN"
    DPT = b"DPT"
    DTM = b"DTM"
    FSI = b"FSI"
    GBS = b"GBS"
    GGA = b"GGA"
    GLC = b"GLC"
    GLL = b"GLL"
    GNS = b"GNS"
    GRS = b"GRS"
    GST = b"GST"
    GSA = b"GSA"
    GSV = b"GSV"
    GTD = b"GTD"
    GXA = b"GXA"
    HDG = b"HDG"
    HDM = b"HDM"
    HDT = b"HDT"
    HSC = b"HSC"
    LCD = b"LCD"
    MSK = b"MSK"
    MTW = b"MTW"
    MWV = b"MWV"
    OLN = b"OLN"
    OSD = b"OSD"
    ROO = b"ROO"
    RMA = b"RMA"
    RMB = b"RMB"
    RMC = b"RMC"
    ROT = b"ROT"
    RPM = b"RPM"
    RSA = b"RSA"
    RSD = b"RSD"
    RTE = b"RTE"
    SFI = b"SFI"
    STN = b"STN"
    TLL = b"TLL"
    TRF = b"TRF"
    TTM = b"TTM"
    VBW = b"VBW"
    VDR = b"VDR"
    VHW = b"VHW"
    VLW = b"VLW"
    VPW = b"VPW"
    VTG = b"VTG"
    VWR = b"VWR"
    WCV = b"WCV"
    WNC = b"WNC"
    WPL = b"WPL"
    XDR = b"XDR"
    XTE = b"XTE"
    XTR = b"XTR"
    ZDA = b"ZDA"
    ZFO = b"ZFO"
    ZTG = b"ZTG"

    @classmethod
    def from_mnemonic(cls, mnemonic: bytes) -> "SentenceType | None":
        """Resolve a 3-byte mnemonic, or return None if it is not registered.

        Example:
            >>> SentenceType.from_mnemonic(b"GGA")
            <SentenceType.GGA: b'GGA'>
            >>> SentenceType.from_mnemonic(b"ZZZ") is None
            True
        """
        return _BY_MNEMONIC.get(bytes(mnemonic))


_BY_MNEMONIC: dict[bytes, SentenceType] = {
    sentence_type.value: sentence_type for sentence_type in SentenceType
}
