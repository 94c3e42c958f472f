"""TinySDP - Parser e serializer SDP (RFC 4566) leve para Python."""

__version__ = "0.1.0"
__author__ = "TinySDP Contributors"
__email__ = ""
__description__ = "A tiny SDP parser and serializer"

from tinysdp.attributes import (  # noqa: E402
    Attribute,
    Fingerprint,
    Fmtp,
    Generic,
    IcePwd,
    IceUfrag,
    Mid,
    Msid,
    Rtpmap,
    SDPAttribute,
    Setup,
    Ssrc,
    parse_attribute,
)
from tinysdp.errors import ParseFailure, ParseFailureKind, SDPError  # noqa: E402
from tinysdp.parser import parse  # noqa: E402
from tinysdp.sdp import (  # noqa: E402
    SDPBandwidth,
    SDPConnection,
    SDPMedia,
    SDPOrigin,
    SDPSession,
)
from tinysdp.serializer import to_text  # noqa: E402
from tinysdp.timing import format_timing  # noqa: E402

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "__description__",
    # Operações principais
    "parse",
    "to_text",
    "parse_attribute",
    "format_timing",
    # Modelo
    "SDPSession",
    "SDPOrigin",
    "SDPConnection",
    "SDPBandwidth",
    "SDPMedia",
    # Atributos
    "Attribute",
    "SDPAttribute",
    "Generic",
    "Rtpmap",
    "Fmtp",
    "Mid",
    "Msid",
    "Ssrc",
    "IceUfrag",
    "IcePwd",
    "Fingerprint",
    "Setup",
    # Erros
    "SDPError",
    "ParseFailure",
    "ParseFailureKind",
]
