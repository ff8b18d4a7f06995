"""Per-sentence decoders, one module per implemented sentence type."""

from nmea0183.sentences.bod import parse_bod
from nmea0183.sentences.bwc import parse_bwc
from nmea0183.sentences.gbs import parse_gbs
from nmea0183.sentences.gga import parse_gga
from nmea0183.sentences.gll import parse_gll
from nmea0183.sentences.gns import parse_gns
from nmea0183.sentences.gsa import parse_gsa
from nmea0183.sentences.gsv import parse_gsv
from nmea0183.sentences.hdt import parse_hdt
from nmea0183.sentences.rma import parse_rma
from nmea0183.sentences.rmb import parse_rmb
from nmea0183.sentences.rmc import parse_rmc
from nmea0183.sentences.stn import parse_stn
from nmea0183.sentences.vbw import parse_vbw
from nmea0183.sentences.vtg import parse_vtg
from nmea0183.sentences.wpl import parse_wpl

__all__ = [
    "parse_bod",
    "parse_bwc",
    "parse_gbs",
    "parse_gga",
    "parse_gll",
    "parse_gns",
    "parse_gsa",
    "parse_gsv",
    "parse_hdt",
    "parse_rma",
    "parse_rmb",
    "parse_rmc",
    "parse_stn",
    "parse_vbw",
    "parse_vtg",
    "parse_wpl",
]
