"""Testes do sub-parser de atributos a=."""

import pytest

from tinysdp.attributes import (
    Fingerprint,
    Fmtp,
    Generic,
    IcePwd,
    IceUfrag,
    Mid,
    Msid,
    Rtpmap,
    Setup,
    Ssrc,
    parse_attribute,
)


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("rtpmap:111 opus/48000/2", Rtpmap(111, "opus", 48000, "2")),
        ("rtpmap:0 PCMU/8000", Rtpmap(0, "PCMU", 8000)),
        ("fmtp:111 minptime=10;useinbandfec=1", Fmtp(111, "minptime=10;useinbandfec=1")),
        ("fmtp:101", Fmtp(101)),
        ("mid:audio", Mid("audio")),
        ("msid:stream0 track0", Msid("stream0", "track0")),
        ("msid:stream0", Msid("stream0")),
        ("ssrc:1001 cname:4TOk42mSjXCkVIa6", Ssrc(1001, "cname", "4TOk42mSjXCkVIa6")),
        ("ssrc:1001 msid:stream0 track0", Ssrc(1001, "msid", "stream0 track0")),
        ("ssrc:1001", Ssrc(1001)),
        ("ice-ufrag:Kw3F", IceUfrag("Kw3F")),
        ("ice-pwd:8S1Zq3OWmJbE+4PZmKM2nEb6", IcePwd("8S1Zq3OWmJbE+4PZmKM2nEb6")),
        ("fingerprint:sha-256 6B:8B:5D", Fingerprint("sha-256", "6B:8B:5D")),
        ("setup:actpass", Setup("actpass")),
    ],
)
def test_typed_attributes(raw, expected):
    """Cada atributo conhecido vira a variante tipada correspondente."""
    attr = parse_attribute(raw)
    assert attr == expected
    assert f"{attr.name}:{attr.value}" == raw


def test_name_dispatch_is_case_insensitive():
    attr = parse_attribute("RTPMAP:96 VP8/90000")
    assert attr == Rtpmap(96, "VP8", 90000)
    assert str(attr) == "a=rtpmap:96 VP8/90000"


@pytest.mark.parametrize(
    "raw,name,value",
    [
        ("rtpmap:bad", "rtpmap", "bad"),
        ("rtpmap:96 VP8", "rtpmap", "96 VP8"),
        ("rtpmap:96 VP8/fast", "rtpmap", "96 VP8/fast"),
        ("fmtp:", "fmtp", ""),
        ("fmtp:x apt=96", "fmtp", "x apt=96"),
        ("ssrc:notanumber cname:x", "ssrc", "notanumber cname:x"),
        ("fingerprint:sha-256", "fingerprint", "sha-256"),
        ("msid:", "msid", ""),
        ("rtpmap:1_000 opus/48000", "rtpmap", "1_000 opus/48000"),
        ("rtpmap:4294967296 opus/48000", "rtpmap", "4294967296 opus/48000"),
        ("ssrc:18446744073709551616", "ssrc", "18446744073709551616"),
    ],
)
def test_generic_fallback(raw, name, value):
    """Atributo tipado malformado degrada para Generic sem levantar erro."""
    attr = parse_attribute(raw)
    assert attr == Generic(name, value)


def test_unknown_attribute_is_generic():
    attr = parse_attribute("extmap:1 urn:ietf:params:rtp-hdrext:ssrc-audio-level")
    assert attr == Generic("extmap", "1 urn:ietf:params:rtp-hdrext:ssrc-audio-level")
    assert str(attr) == "a=extmap:1 urn:ietf:params:rtp-hdrext:ssrc-audio-level"


def test_flag_attribute():
    """a=sendonly tem valor vazio e serializa sem ':'."""
    attr = parse_attribute("sendonly")
    assert attr == Generic("sendonly")
    assert attr.value == ""
    assert attr.is_flag
    assert str(attr) == "a=sendonly"


def test_empty_value_after_colon_is_flag():
    attr = parse_attribute("rtcp-mux:")
    assert attr == Generic("rtcp-mux", "")
    assert str(attr) == "a=rtcp-mux"


def test_rtpmap_params_keep_extra_slashes():
    attr = parse_attribute("rtpmap:96 X-CODEC/90000/2/extra")
    assert attr == Rtpmap(96, "X-CODEC", 90000, "2/extra")
    assert attr.value == "96 X-CODEC/90000/2/extra"


def test_ssrc_value_rendering():
    assert Ssrc(5).value == "5"
    assert Ssrc(5, "cname").value == "5 cname"
    assert Ssrc(5, "cname", "abc").value == "5 cname:abc"
    assert parse_attribute(f"ssrc:{Ssrc(5, '', 'abc').value}") == Ssrc(5, "", "abc")


def test_attributes_are_immutable():
    attr = Rtpmap(0, "PCMU", 8000)
    with pytest.raises(AttributeError):
        attr.payload_type = 8  # type: ignore[misc]


def test_empty_name_keeps_colon():
    assert str(parse_attribute(":")) == "a=:"
    assert str(Generic("", "x")) == "a=:x"
