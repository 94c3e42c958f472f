"""Testes do serializer e da propriedade de round-trip."""

import pytest

from tinysdp import (
    Generic,
    Mid,
    Rtpmap,
    SDPBandwidth,
    SDPConnection,
    SDPMedia,
    SDPOrigin,
    SDPSession,
    parse,
    to_text,
)
from tinysdp.serializer import media_lines, session_lines


def test_round_trip(fixture_text):
    """parse(to_text(parse(text))) == parse(text) para toda fixture."""
    session = parse(fixture_text)
    assert parse(to_text(session)) == session


def test_serialization_is_deterministic(fixture_text):
    session = parse(fixture_text)
    assert to_text(session) == to_text(session)
    assert to_text(parse(to_text(session))) == to_text(session)


def test_every_line_ends_with_crlf(fixture_text):
    text = to_text(parse(fixture_text))
    assert text.endswith("\r\n")
    assert "\n" not in text.replace("\r\n", "")


def test_canonical_field_order():
    session = SDPSession(
        origin=SDPOrigin("jdoe", 1, 2, "IN", "IP4", "10.47.16.5"),
        session_name="Order",
        information="info",
        uri="http://example.com",
        emails=("a@example.com", "b@example.com"),
        phones=("+1 555",),
        connection=SDPConnection("IN", "IP4", "224.2.17.12", 127),
        bandwidths=(SDPBandwidth("CT", 128),),
        start_time=10,
        stop_time=20,
        attributes=(Generic("recvonly"), Generic("tool", "tinysdp")),
        media=(
            SDPMedia(
                "video",
                49170,
                "RTP/AVP",
                ("99", "31"),
                port_count=2,
                connection=SDPConnection("IN", "IP4", "224.2.1.1", 127, 3),
                bandwidths=(SDPBandwidth("AS", 64),),
                attributes=(Rtpmap(99, "h263-1998", 90000), Mid("v")),
            ),
        ),
    )

    assert to_text(session) == (
        "v=0\r\n"
        "o=jdoe 1 2 IN IP4 10.47.16.5\r\n"
        "s=Order\r\n"
        "i=info\r\n"
        "u=http://example.com\r\n"
        "e=a@example.com\r\n"
        "e=b@example.com\r\n"
        "p=+1 555\r\n"
        "c=IN IP4 224.2.17.12/127\r\n"
        "b=CT:128\r\n"
        "t=10 20\r\n"
        "a=recvonly\r\n"
        "a=tool:tinysdp\r\n"
        "m=video 49170/2 RTP/AVP 99 31\r\n"
        "c=IN IP4 224.2.1.1/127/3\r\n"
        "b=AS:64\r\n"
        "a=rtpmap:99 h263-1998/90000\r\n"
        "a=mid:v\r\n"
    )


def test_encode_matches_to_text(read_fixture):
    session = parse(read_fixture("sip_audio.sdp"))
    assert session.encode() == to_text(session)
    assert str(session) == to_text(session)


def test_sip_audio_is_reproduced_exactly(read_fixture):
    """SDP já canônico é reproduzido byte a byte (apenas CRLF)."""
    original = read_fixture("sip_audio.sdp")
    assert to_text(parse(original)) == original.replace("\n", "\r\n")


def test_flag_attribute_has_no_trailing_colon():
    text = "v=0\r\no=- 1 1 IN IP4 127.0.0.1\r\ns=-\r\nt=0 0\r\nm=audio 1 RTP/AVP 0\r\na=sendonly\r\n"
    out = to_text(parse(text))
    assert out.endswith("a=sendonly\r\n")
    assert "a=sendonly:" not in out


def test_generic_fallback_serializes_input_text():
    text = "v=0\r\no=- 1 1 IN IP4 127.0.0.1\r\ns=-\r\nt=0 0\r\na=rtpmap:bad\r\n"
    assert to_text(parse(text)) == text


@pytest.mark.parametrize("line", ["a=:", "a=:x"])
def test_empty_attribute_name_round_trips(line):
    text = "v=0\r\no=- 1 1 IN IP4 127.0.0.1\r\ns=-\r\nt=0 0\r\n" + line + "\r\n"
    session = parse(text)
    assert to_text(session) == text
    assert parse(to_text(session)) == session


def test_port_count_of_one_is_omitted():
    text = "v=0\r\no=- 1 1 IN IP4 127.0.0.1\r\ns=-\r\nt=0 0\r\nm=audio 49170/1 RTP/AVP 0\r\n"
    out = to_text(parse(text))
    assert "m=audio 49170 RTP/AVP 0\r\n" in out
    assert parse(out) == parse(text)


def test_lossy_simplifications_are_stable():
    """Informação descartada pelo parser não volta, mas o round-trip se mantém."""
    text = "v=0\no=- 1 1 IN IP4 127.0.0.1\ns=-\nt=123\ngarbage\nz=1\n"
    session = parse(text)
    out = to_text(session)
    assert "t=0 0\r\n" in out
    assert "garbage" not in out
    assert parse(out) == session


@pytest.mark.parametrize(
    "media,expected",
    [
        (SDPMedia("audio", 9, "UDP/TLS/RTP/SAVPF", ("111",)), ["m=audio 9 UDP/TLS/RTP/SAVPF 111"]),
        (
            SDPMedia("audio", 0, "RTP/AVP", ("0",), attributes=(Generic("inactive"),)),
            ["m=audio 0 RTP/AVP 0", "a=inactive"],
        ),
    ],
)
def test_media_lines(media, expected):
    assert media_lines(media) == expected


def test_session_lines_without_optional_fields():
    session = SDPSession(origin=SDPOrigin("-", 0, 0, "IN", "IP4", "0.0.0.0"))
    assert session_lines(session) == ["v=0", "o=- 0 0 IN IP4 0.0.0.0", "s=", "t=0 0"]
    assert parse(to_text(session)) == session
