"""
Atributos SDP (a=) tipados, com fallback generico.

Cada variante conhece o proprio nome e sabe produzir o valor exatamente
como ele aparece na linha ``a=<name>:<value>``. Atributos sem valor
(flags como ``a=sendonly``) tem ``value == ""``.
"""

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from tinysdp.utils import to_int

logger = logging.getLogger(__name__)


class SDPAttribute:
    """Base comum: renderiza a linha a= a partir de name/value"""

    name: str
    value: str

    @property
    def is_flag(self) -> bool:
        return not self.value

    def __str__(self) -> str:
        # "a=" sozinho seria descartado no parse; nome vazio mantem o ":"
        if self.value or not self.name:
            return f"a={self.name}:{self.value}"
        return f"a={self.name}"


@dataclass(frozen=True)
class Generic(SDPAttribute):
    """Atributo sem interpretacao tipada (nome e valor crus)"""

    name: str
    value: str = ""


@dataclass(frozen=True)
class Rtpmap(SDPAttribute):
    """a=rtpmap:<payload type> <encoding name>/<clock rate>[/<params>]"""

    name: ClassVar[str] = "rtpmap"

    payload_type: int
    encoding_name: str
    clock_rate: int
    params: str = ""

    @property
    def value(self) -> str:
        value = f"{self.payload_type} {self.encoding_name}/{self.clock_rate}"
        if self.params:
            value += f"/{self.params}"
        return value


@dataclass(frozen=True)
class Fmtp(SDPAttribute):
    """a=fmtp:<payload type> <format specific params>"""

    name: ClassVar[str] = "fmtp"

    payload_type: int
    params: str = ""

    @property
    def value(self) -> str:
        if self.params:
            return f"{self.payload_type} {self.params}"
        return str(self.payload_type)


@dataclass(frozen=True)
class Mid(SDPAttribute):
    name: ClassVar[str] = "mid"

    id: str

    @property
    def value(self) -> str:
        return self.id


@dataclass(frozen=True)
class Msid(SDPAttribute):
    """a=msid:<stream id> [<track id>]"""

    name: ClassVar[str] = "msid"

    stream_id: str
    track_id: str = ""

    @property
    def value(self) -> str:
        if self.track_id:
            return f"{self.stream_id} {self.track_id}"
        return self.stream_id


@dataclass(frozen=True)
class Ssrc(SDPAttribute):
    """a=ssrc:<ssrc id> <attribute>[:<value>]"""

    name: ClassVar[str] = "ssrc"

    ssrc_id: int
    attribute: str = ""
    attribute_value: str = ""

    @property
    def value(self) -> str:
        value = str(self.ssrc_id)
        if self.attribute or self.attribute_value:
            value += f" {self.attribute}"
        if self.attribute_value:
            value += f":{self.attribute_value}"
        return value


@dataclass(frozen=True)
class IceUfrag(SDPAttribute):
    name: ClassVar[str] = "ice-ufrag"

    ufrag: str

    @property
    def value(self) -> str:
        return self.ufrag


@dataclass(frozen=True)
class IcePwd(SDPAttribute):
    name: ClassVar[str] = "ice-pwd"

    password: str

    @property
    def value(self) -> str:
        return self.password


@dataclass(frozen=True)
class Fingerprint(SDPAttribute):
    """a=fingerprint:<hash function> <fingerprint>"""

    name: ClassVar[str] = "fingerprint"

    hash_algorithm: str
    fingerprint: str

    @property
    def value(self) -> str:
        return f"{self.hash_algorithm} {self.fingerprint}"


@dataclass(frozen=True)
class Setup(SDPAttribute):
    """a=setup:<role> (active, passive, actpass, holdconn)"""

    name: ClassVar[str] = "setup"

    role: str

    @property
    def value(self) -> str:
        return self.role


Attribute = (
    Generic | Rtpmap | Fmtp | Mid | Msid | Ssrc | IceUfrag | IcePwd | Fingerprint | Setup
)


# ---------- Parsers por atributo ----------
# Cada parser pode levantar ValueError/IndexError; parse_attribute absorve.


def _parse_rtpmap(value: str) -> Rtpmap:
    pt, encoding = value.split(None, 1)
    enc_parts = encoding.split("/", 2)
    if len(enc_parts) < 2:
        raise ValueError("rtpmap without clock rate")
    params = enc_parts[2] if len(enc_parts) > 2 else ""
    return Rtpmap(to_int(pt, 32), enc_parts[0], to_int(enc_parts[1], 32), params)


def _parse_fmtp(value: str) -> Fmtp:
    parts = value.split(None, 1)
    params = parts[1] if len(parts) > 1 else ""
    return Fmtp(to_int(parts[0], 32), params)


def _parse_msid(value: str) -> Msid:
    parts = value.split(None, 1)
    return Msid(parts[0], parts[1] if len(parts) > 1 else "")


def _parse_ssrc(value: str) -> Ssrc:
    parts = value.split(None, 1)
    ssrc_id = to_int(parts[0])
    if len(parts) == 1:
        return Ssrc(ssrc_id)
    attr_name, _, attr_value = parts[1].partition(":")
    return Ssrc(ssrc_id, attr_name, attr_value)


def _parse_fingerprint(value: str) -> Fingerprint:
    hash_algorithm, fingerprint = value.split(None, 1)
    return Fingerprint(hash_algorithm, fingerprint)


_ATTRIBUTE_PARSERS: Mapping[str, Callable[[str], Attribute]] = MappingProxyType(
    {
        "rtpmap": _parse_rtpmap,
        "fmtp": _parse_fmtp,
        "mid": Mid,
        "msid": _parse_msid,
        "ssrc": _parse_ssrc,
        "ice-ufrag": IceUfrag,
        "ice-pwd": IcePwd,
        "fingerprint": _parse_fingerprint,
        "setup": Setup,
    }
)


def parse_attribute(raw_value: str) -> Attribute:
    """
    Parse do valor de uma linha a= (sem o prefixo "a=").

    Nunca levanta excecao: se a forma tipada nao casar, devolve Generic com
    o nome e valor originais.
    """
    name, _, value = raw_value.partition(":")
    parser = _ATTRIBUTE_PARSERS.get(name.lower())
    if parser is None:
        return Generic(name, value)

    try:
        return parser(value)
    except (ValueError, IndexError) as e:
        logger.debug(f"Atributo {name!r} mantido como generico: {e}")
        return Generic(name, value)
