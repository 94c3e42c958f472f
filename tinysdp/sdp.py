from dataclasses import dataclass, field

from tinysdp.attributes import Attribute
from tinysdp.serializer import to_text


@dataclass(frozen=True)
class SDPOrigin:
    """Origem da sessao (o=)"""

    username: str
    session_id: int
    session_version: int
    net_type: str
    addr_type: str
    address: str

    def __str__(self) -> str:
        return (
            f"{self.username} {self.session_id} {self.session_version} "
            f"{self.net_type} {self.addr_type} {self.address}"
        )


@dataclass(frozen=True)
class SDPConnection:
    """Connection info (c=), com TTL/quantidade opcionais para multicast"""

    net_type: str
    addr_type: str
    address: str
    ttl: int | None = None
    count: int | None = None

    @property
    def is_multicast(self) -> bool:
        return self.ttl is not None or self.count is not None

    def __str__(self) -> str:
        value = f"{self.net_type} {self.addr_type} {self.address}"
        if self.ttl is not None:
            value += f"/{self.ttl}"
        if self.count is not None:
            value += f"/{self.count}"
        return value


@dataclass(frozen=True)
class SDPBandwidth:
    """Bandwidth (b=<type>:<value>)"""

    bw_type: str
    value: int

    def __str__(self) -> str:
        return f"{self.bw_type}:{self.value}"


@dataclass(frozen=True)
class SDPMedia:
    """Descricao de media SDP (m=)"""

    media_type: str
    port: int
    protocol: str
    formats: tuple[str, ...]
    port_count: int = 1
    connection: SDPConnection | None = None
    bandwidths: tuple[SDPBandwidth, ...] = ()
    attributes: tuple[Attribute, ...] = ()

    def find_attributes(self, name: str) -> list[Attribute]:
        """Atributos com o nome dado, na ordem original"""
        return [attr for attr in self.attributes if attr.name == name]

    def __str__(self) -> str:
        port = f"{self.port}/{self.port_count}" if self.port_count != 1 else str(self.port)
        return f"{self.media_type} {port} {self.protocol} {' '.join(self.formats)}"


@dataclass
class SDPMediaBuilder:
    """Acumulador mutavel da secao m= aberta durante um parse"""

    media_type: str
    port: int
    protocol: str
    formats: list[str]
    port_count: int = 1
    connection: SDPConnection | None = None
    bandwidths: list[SDPBandwidth] = field(default_factory=list)
    attributes: list[Attribute] = field(default_factory=list)

    def build(self) -> SDPMedia:
        """Congela a secao em um SDPMedia imutavel"""
        return SDPMedia(
            media_type=self.media_type,
            port=self.port,
            protocol=self.protocol,
            formats=tuple(self.formats),
            port_count=self.port_count,
            connection=self.connection,
            bandwidths=tuple(self.bandwidths),
            attributes=tuple(self.attributes),
        )


@dataclass(frozen=True)
class SDPSession:
    """Sessao SDP completa (RFC 4566)"""

    origin: SDPOrigin
    version: int = 0
    session_name: str = ""
    information: str | None = None
    uri: str | None = None
    emails: tuple[str, ...] = ()
    phones: tuple[str, ...] = ()
    connection: SDPConnection | None = None
    bandwidths: tuple[SDPBandwidth, ...] = ()

    # Timing: 0 0 significa sessao permanente/sem limites
    start_time: int = 0
    stop_time: int = 0

    attributes: tuple[Attribute, ...] = ()
    media: tuple[SDPMedia, ...] = ()

    @property
    def is_unbounded(self) -> bool:
        return self.start_time == 0 and self.stop_time == 0

    def find_attributes(self, name: str) -> list[Attribute]:
        """Atributos de sessao com o nome dado"""
        return [attr for attr in self.attributes if attr.name == name]

    def encode(self) -> str:
        """Codifica sessao SDP para string"""
        return to_text(self)

    def __str__(self) -> str:
        return self.encode()

    @classmethod
    def parse(cls, sdp_content: str) -> "SDPSession":
        """Parse de string SDP para objeto SDPSession"""
        from tinysdp.parser import parse

        return parse(sdp_content)
