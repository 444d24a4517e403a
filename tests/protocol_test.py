import pydantic
import pytest

from tlsdebug.common.protocol import (
    Alert, ClientHello, EarlyData, SNI, ServerDHParams, UnknownExtension,
    parse_extension,
)

def test_parse_extension_picks_the_variant():
    ext = parse_extension({"type": "unknown", "id": 0x44, "data": b"\x01\x02"})
    assert isinstance(ext, UnknownExtension)
    assert ext.id == 0x44
    assert isinstance(parse_extension({"type": "early_data"}), EarlyData)
    sni = parse_extension({"type": "sni", "names": [[0, b"host"]]})
    assert isinstance(sni, SNI)
    assert sni.names == [(0, b"host")]

def test_parse_extension_rejects_unknown_tag():
    with pytest.raises(pydantic.ValidationError):
        parse_extension({"type": "no_such_extension"})

def test_ranges_are_checked_at_construction():
    with pytest.raises(pydantic.ValidationError):
        Alert(severity=256, code=0)
    with pytest.raises(pydantic.ValidationError):
        ClientHello(version=0x10000, rand_time=0, rand_data=b"")
    with pytest.raises(pydantic.ValidationError):
        UnknownExtension(id=-1)

def test_models_are_frozen():
    alert = Alert(severity=2, code=10)
    with pytest.raises(pydantic.ValidationError):
        alert.code = 11

def test_absent_and_empty_are_distinct():
    absent = ClientHello(version=0x0303, rand_time=0, rand_data=b"")
    empty = ClientHello(version=0x0303, rand_time=0, rand_data=b"", session_id=b"")
    assert absent.session_id is None
    assert empty.session_id == b""

def test_group_size_is_derived_from_generator():
    assert ServerDHParams(dh_p=b"", dh_g=bytes(32), dh_ys=b"").group_size == 256
    assert ServerDHParams(dh_p=b"", dh_g=b"", dh_ys=b"").group_size == 0
