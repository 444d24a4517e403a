import pytest

from tlsdebug.common.protocol import (
    EXTENSION_TYPES, SNI, MaxFragmentLength, StatusRequest, EllipticCurves,
    EcPointFormats, SignatureAlgorithms, SessionTicket, KeyShare, PreSharedKey,
    EarlyData, SupportedVersions, Cookie, PskExchangeModes, Heartbeat, ALPN,
    SignedCertificateTimestamp, Padding, EncryptThenMac, ExtendedMasterSecret,
    NextProtocolNegotiation, RenegotiationInfo, UnknownExtension,
)
from tlsdebug.common.utils import INVALID_UTF8
from tlsdebug.registry.resolve import Registries
from tlsdebug.render.extensions import render_extension, render_extensions

SAMPLES = [
    (SNI(names=[(0, b"example.com")]), "SNI([type=0x0,name=example.com])"),
    (MaxFragmentLength(length=2), "MaxFragmentLength(2)"),
    (StatusRequest(data=b"\x01\x00"), "StatusRequest(data=[01 00])"),
    (StatusRequest(), "StatusRequest(data=None)"),
    (EllipticCurves(groups=[0x1d, 0x17]), "EllipticCurves([0x001d(x25519), 0x0017(secp256r1)])"),
    (EcPointFormats(formats=b"\x00\x01\x02"), "EcPointFormats(data=[00 01 02])"),
    (SignatureAlgorithms(algorithms=[(4, 3), (6, 1)]),
     "SignatureAlgorithms([(sha256,ecdsa), (sha512,rsa)])"),
    (SessionTicket(), "SessionTicket(data=[])"),
    (KeyShare(data=b"\x00\x1d\x00\x20"), "KeyShare(data=[00 1d 00 20])"),
    (PreSharedKey(data=b"\xaa"), "PreSharedKey(data=[aa])"),
    (EarlyData(), "EarlyData"),
    (SupportedVersions(versions=[0x0304, 0x0303]), "SupportedVersions([0x0304, 0x0303])"),
    (Cookie(data=b"\xde\xad"), "Cookie(data=[de ad])"),
    (PskExchangeModes(modes=[1]), "PskExchangeModes([0x01])"),
    (Heartbeat(mode=1), "Heartbeat(1)"),
    (ALPN(protocols=[b"h2", b"http/1.1"]), "ALPN([h2, http/1.1])"),
    (SignedCertificateTimestamp(), "SignedCertificateTimestamp(data=None)"),
    (SignedCertificateTimestamp(data=b""), "SignedCertificateTimestamp(data=[])"),
    (Padding(data=b"\x00\x00"), "Padding(data=[00 00])"),
    (EncryptThenMac(), "EncryptThenMac"),
    (ExtendedMasterSecret(), "ExtendedMasterSecret"),
    (NextProtocolNegotiation(), "NextProtocolNegotiation"),
    (RenegotiationInfo(data=b"\x00"), "RenegotiationInfo(data=[00])"),
    (UnknownExtension(id=0x44, data=b"\x01\x02"), "Unknown(id=0x44,data=[01 02])"),
]

@pytest.mark.parametrize("ext, expected", SAMPLES)
def test_render_extension(ext, expected):
    assert render_extension(ext) == expected

def test_every_variant_has_a_renderer():
    covered = {type(ext) for ext, _ in SAMPLES}
    assert covered == set(EXTENSION_TYPES)
    for cls in EXTENSION_TYPES:
        assert render_extension.dispatch(cls) is not render_extension.dispatch(object)

def test_non_extension_is_rejected():
    with pytest.raises(TypeError):
        render_extension(object())

def test_invalid_sni_name_does_not_abort_the_list():
    ext = SNI(names=[(0, b"bad\xff\xfe"), (0, b"good.example")])
    assert render_extension(ext) == (
        f"SNI([type=0x0,name={INVALID_UTF8}, type=0x0,name=good.example])"
    )

def test_invalid_alpn_entry_does_not_abort_the_list():
    ext = ALPN(protocols=[b"h2", b"\xc3\x28", b"http/1.1"])
    assert render_extension(ext) == f"ALPN([h2, {INVALID_UTF8}, http/1.1])"

def test_unknown_sub_codes_fall_back_per_element():
    ext = EllipticCurves(groups=[0x1d, 0x9999])
    assert render_extension(ext) == "EllipticCurves([0x001d(x25519), <Unknown curve 0x9999/39321>])"
    ext = SignatureAlgorithms(algorithms=[(0x0a, 3), (4, 0xee)])
    assert render_extension(ext) == (
        "SignatureAlgorithms([(<Unknown hash 0xa/10>,ecdsa), (sha256,<Unknown signature 0xee/238>)])"
    )

def test_empty_lists_render_empty_brackets():
    assert render_extension(SNI()) == "SNI([])"
    assert render_extension(EllipticCurves()) == "EllipticCurves([])"
    assert render_extension(ALPN()) == "ALPN([])"
    assert render_extensions([]) == "[]"

def test_injected_registries_reach_the_elements():
    regs = Registries.from_tables(named_group={0x9999: "test_group"})
    assert render_extension(EllipticCurves(groups=[0x9999, 0x1d]), regs) == (
        "EllipticCurves([0x9999(test_group), <Unknown curve 0x1d/29>])"
    )

def test_unknown_extension_in_a_list():
    out = render_extensions([UnknownExtension(id=0x44, data=b"\x01\x02")])
    assert out == "[Unknown(id=0x44,data=[01 02])]"

def test_render_extensions_keeps_order():
    out = render_extensions([EarlyData(), Heartbeat(mode=2), ExtendedMasterSecret()])
    assert out == "[EarlyData, Heartbeat(2), ExtendedMasterSecret]"

def test_unknown_extension_keeps_raw_type_id():
    out = render_extension(UnknownExtension(id=0x44, data=b"\x01\x02"))
    assert "0x44" in out
    assert "[01 02]" in out
    assert render_extension(UnknownExtension(id=0xff01)) == "Unknown(id=0xff01,data=[])"

def test_sni_name_type_is_raw_hex():
    out = render_extension(SNI(names=[(0, b"a.example"), (0x1f, b"b.example")]))
    assert out == "SNI([type=0x0,name=a.example, type=0x1f,name=b.example])"
