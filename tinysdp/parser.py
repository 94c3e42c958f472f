"""
Parser SDP linha a linha (RFC 4566).

O parser mantem apenas dois estados: a sessao em construcao e a secao de
media aberta (se houver). Depois do primeiro m= somente linhas c=, b= e a=
sao aplicadas, sempre na media corrente.
"""

import logging
from dataclasses import dataclass, field

from tinysdp.attributes import Attribute, parse_attribute
from tinysdp.errors import ParseFailure
from tinysdp.sdp import (
    SDPBandwidth,
    SDPConnection,
    SDPMedia,
    SDPMediaBuilder,
    SDPOrigin,
    SDPSession,
)
from tinysdp.utils import split_lines, to_int

logger = logging.getLogger(__name__)

SESSION_FIELDS = frozenset("vosiuepcbta")
MEDIA_FIELDS = frozenset("cba")


class _FieldError(ValueError):
    """Erro interno de campo estrutural, convertido em ParseFailure"""


def _int_field(token: str, what: str, bits: int = 64) -> int:
    try:
        return to_int(token, bits)
    except ValueError as e:
        raise _FieldError(f"invalid {what}: {e}") from None


def parse_origin(value: str) -> SDPOrigin | None:
    """o=<username> <sess-id> <sess-version> <nettype> <addrtype> <unicast-address>"""
    parts = value.split()
    if len(parts) < 6:
        return None
    return SDPOrigin(
        username=parts[0],
        session_id=_int_field(parts[1], "session id"),
        session_version=_int_field(parts[2], "session version"),
        net_type=parts[3],
        addr_type=parts[4],
        address=parts[5],
    )


def parse_connection(value: str) -> SDPConnection:
    """c=<nettype> <addrtype> <connection-address>[/<ttl>][/<number of addresses>]"""
    parts = value.split()
    if len(parts) < 3:
        raise _FieldError("expected nettype, addrtype and address")

    net_type, addr_type, addr_part = parts[0], parts[1], parts[2]
    ttl = None
    count = None
    address = addr_part
    if "/" in addr_part:
        addr_tokens = addr_part.split("/")
        address = addr_tokens[0]
        if len(addr_tokens) >= 2:
            ttl = _int_field(addr_tokens[1], "ttl", 32)
        if len(addr_tokens) >= 3:
            count = _int_field(addr_tokens[2], "address count", 32)

    return SDPConnection(net_type, addr_type, address, ttl, count)


def parse_bandwidth(value: str) -> SDPBandwidth:
    """b=<bwtype>:<bandwidth>"""
    bw_type, sep, amount = value.partition(":")
    if not sep:
        raise _FieldError("expected <type>:<value>")
    return SDPBandwidth(bw_type, _int_field(amount, "bandwidth"))


def parse_timing(value: str) -> tuple[int, int] | None:
    """t=<start-time> <stop-time>; None se faltarem tokens"""
    parts = value.split()
    if len(parts) < 2:
        return None
    return _int_field(parts[0], "start time"), _int_field(parts[1], "stop time")


def parse_media_line(value: str) -> SDPMediaBuilder:
    """m=<media> <port>[/<number of ports>] <proto> <fmt> ..."""
    parts = value.split()
    if len(parts) < 4:
        raise _FieldError("expected media, port, proto and at least one format")

    port_part = parts[1]
    port_count = 1
    if "/" in port_part:
        port_token, count_token = port_part.split("/", 1)
        port = _int_field(port_token, "port", 32)
        port_count = _int_field(count_token, "port count", 32)
    else:
        port = _int_field(port_part, "port", 32)

    return SDPMediaBuilder(
        media_type=parts[0],
        port=port,
        protocol=parts[2],
        formats=parts[3:],
        port_count=port_count,
    )


@dataclass
class _SessionState:
    """Campos de sessao acumulados durante um parse"""

    version: int = 0
    origin: SDPOrigin | None = None
    session_name: str = ""
    information: str | None = None
    uri: str | None = None
    emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    connection: SDPConnection | None = None
    bandwidths: list[SDPBandwidth] = field(default_factory=list)
    start_time: int = 0
    stop_time: int = 0
    attributes: list[Attribute] = field(default_factory=list)
    media: list[SDPMedia] = field(default_factory=list)

    def apply(self, field_type: str, value: str) -> None:
        if field_type == "v":
            self.version = _int_field(value, "version", 32)
        elif field_type == "o":
            origin = parse_origin(value)
            if origin is None:
                logger.warning(f"Origin com menos de 6 tokens ignorado: {value!r}")
            else:
                self.origin = origin
        elif field_type == "s":
            self.session_name = value
        elif field_type == "i":
            self.information = value
        elif field_type == "u":
            self.uri = value
        elif field_type == "e":
            self.emails.append(value)
        elif field_type == "p":
            self.phones.append(value)
        elif field_type == "c":
            self.connection = parse_connection(value)
        elif field_type == "b":
            self.bandwidths.append(parse_bandwidth(value))
        elif field_type == "t":
            timing = parse_timing(value)
            if timing is None:
                logger.warning(f"Timing incompleto, usando 0 0: {value!r}")
            else:
                self.start_time, self.stop_time = timing
        elif field_type == "a":
            self.attributes.append(parse_attribute(value))

    def build(self) -> SDPSession:
        if self.origin is None:
            raise ParseFailure.missing_origin()
        return SDPSession(
            origin=self.origin,
            version=self.version,
            session_name=self.session_name,
            information=self.information,
            uri=self.uri,
            emails=tuple(self.emails),
            phones=tuple(self.phones),
            connection=self.connection,
            bandwidths=tuple(self.bandwidths),
            start_time=self.start_time,
            stop_time=self.stop_time,
            attributes=tuple(self.attributes),
            media=tuple(self.media),
        )


def _apply_media_field(builder: SDPMediaBuilder, field_type: str, value: str) -> None:
    if field_type == "c":
        builder.connection = parse_connection(value)
    elif field_type == "b":
        builder.bandwidths.append(parse_bandwidth(value))
    elif field_type == "a":
        builder.attributes.append(parse_attribute(value))


def parse(text: str) -> SDPSession:
    """
    Parse de texto SDP para SDPSession.

    Linhas malformadas ou de tipo desconhecido sao ignoradas; inteiros
    invalidos ou tokens faltando em v=, o=, c=, b=, t= e m= levantam
    ParseFailure e nenhuma sessao parcial e devolvida.
    """
    state = _SessionState()
    current_media: SDPMediaBuilder | None = None

    for raw_line in split_lines(text):
        line = raw_line.strip()
        if not line:
            continue

        if len(line) < 3 or line[1] != "=":
            logger.debug(f"Linha SDP invalida ignorada: {line!r}")
            continue

        field_type = line[0]
        value = line[2:]

        try:
            if field_type == "m":
                # Nova secao de media: congela a anterior
                if current_media is not None:
                    state.media.append(current_media.build())
                current_media = parse_media_line(value)
            elif current_media is not None:
                if field_type in MEDIA_FIELDS:
                    _apply_media_field(current_media, field_type, value)
                else:
                    logger.debug(f"Campo '{field_type}=' ignorado no escopo de media")
            elif field_type in SESSION_FIELDS:
                state.apply(field_type, value)
            else:
                logger.debug(f"Campo '{field_type}=' desconhecido ignorado")
        except _FieldError as e:
            raise ParseFailure.malformed(field_type, line, str(e)) from e

    if current_media is not None:
        state.media.append(current_media.build())

    return state.build()
