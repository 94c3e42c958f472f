from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tinysdp.sdp import SDPMedia, SDPSession

CRLF = "\r\n"


def media_lines(media: "SDPMedia") -> list[str]:
    """Linhas de uma secao de media: m=, c=, b=*, a=*"""
    lines = [f"m={media}"]

    if media.connection is not None:
        lines.append(f"c={media.connection}")

    for bandwidth in media.bandwidths:
        lines.append(f"b={bandwidth}")

    for attr in media.attributes:
        lines.append(str(attr))

    return lines


def session_lines(session: "SDPSession") -> list[str]:
    """Linhas da sessao na ordem canonica da RFC 4566"""
    lines = []

    # Version, origin e session name (obrigatorios)
    lines.append(f"v={session.version}")
    lines.append(f"o={session.origin}")
    lines.append(f"s={session.session_name}")

    if session.information is not None:
        lines.append(f"i={session.information}")
    if session.uri is not None:
        lines.append(f"u={session.uri}")

    lines.extend(f"e={email}" for email in session.emails)
    lines.extend(f"p={phone}" for phone in session.phones)

    if session.connection is not None:
        lines.append(f"c={session.connection}")

    for bandwidth in session.bandwidths:
        lines.append(f"b={bandwidth}")

    # Timing (obrigatorio)
    lines.append(f"t={session.start_time} {session.stop_time}")

    # Atributos globais
    for attr in session.attributes:
        lines.append(str(attr))

    # Media descriptions
    for media in session.media:
        lines.extend(media_lines(media))

    return lines


def to_text(session: "SDPSession") -> str:
    """Serializa a sessao em texto SDP, cada linha terminada em CRLF"""
    return "".join(line + CRLF for line in session_lines(session))
