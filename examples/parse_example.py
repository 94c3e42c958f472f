#!/usr/bin/env python3
"""
Exemplo de uso do TinySDP

Este exemplo demonstra:
- Parse de uma oferta WebRTC
- Acesso aos atributos tipados (rtpmap, mid, fingerprint)
- Serialização canônica e round-trip
- Tratamento de ParseFailure
"""

from pathlib import Path

from rich.panel import Panel
from rich.traceback import install

from tinysdp import ParseFailure, Rtpmap, parse, to_text
from tinysdp.logging_utils import RichSDPLogger, console, setup_logging
from tinysdp.report import session_tree

# Instalar Rich traceback para exceções mais bonitas
install(show_locals=True)

SDP_DIR = Path(__file__).parent / "sdps"


def show_codecs(text: str, logger: RichSDPLogger):
    """Lista os codecs de cada media"""
    session = parse(text)
    logger.log_renderable(session_tree(session, title="WebRTC offer"))

    for media in session.media:
        codecs = [
            f"{attr.payload_type}={attr.encoding_name}/{attr.clock_rate}"
            for attr in media.attributes
            if isinstance(attr, Rtpmap)
        ]
        logger.log_info(f"{media.media_type}: {', '.join(codecs)}", style="cyan")

    # Round-trip: parse(to_text(parse(text))) == parse(text)
    assert parse(to_text(session)) == session
    logger.log_success("Round-trip OK")


def show_failure(logger: RichSDPLogger):
    """Um m= com porta inválida aborta o parse inteiro"""
    broken = "v=0\r\no=- 1 1 IN IP4 127.0.0.1\r\ns=-\r\nt=0 0\r\nm=audio port RTP/AVP 0\r\n"
    try:
        parse(broken)
    except ParseFailure as e:
        logger.log_error(e, context="broken SDP")


def main():
    setup_logging("INFO")
    logger = RichSDPLogger("tinysdp.example")

    show_codecs((SDP_DIR / "01.sdp").read_text(encoding="utf-8"), logger)
    show_failure(logger)

    console.print(Panel("Veja também: python -m tinysdp examples/sdps", border_style="dim"))


if __name__ == "__main__":
    main()
