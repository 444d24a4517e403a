from functools import singledispatch
from typing import Iterable, Optional

from tlsdebug.common.protocol import (
    SNI, MaxFragmentLength, StatusRequest, EllipticCurves, EcPointFormats,
    SignatureAlgorithms, SessionTicket, KeyShare, PreSharedKey, EarlyData,
    SupportedVersions, Cookie, PskExchangeModes, Heartbeat, ALPN,
    SignedCertificateTimestamp, Padding, EncryptThenMac, ExtendedMasterSecret,
    NextProtocolNegotiation, RenegotiationInfo, UnknownExtension,
)
from tlsdebug.common.utils import decode_text, hex_optional, hex_slice, hex_u8, hex_u16
from tlsdebug.registry.resolve import (
    Registries, render_hash_algorithm, render_named_group, render_sign_algorithm,
)

def _list(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"

def _blob(tag: str, data: Optional[bytes]) -> str:
    return f"{tag}(data={hex_optional(data)})"

@singledispatch
def render_extension(ext, registries: Optional[Registries] = None) -> str:
    raise TypeError(f"no renderer for {type(ext).__name__}")

def render_extensions(exts, registries: Optional[Registries] = None) -> str:
    return _list(render_extension(e, registries) for e in exts)

# list-valued

@render_extension.register
def _(ext: SNI, registries=None):
    names = (f"type=0x{t:x},name={decode_text(n)}" for t, n in ext.names)
    return f"SNI({_list(names)})"

@render_extension.register
def _(ext: EllipticCurves, registries=None):
    return f"EllipticCurves({_list(render_named_group(g, registries) for g in ext.groups)})"

@render_extension.register
def _(ext: SignatureAlgorithms, registries=None):
    pairs = (
        f"({render_hash_algorithm(h, registries)},{render_sign_algorithm(s, registries)})"
        for h, s in ext.algorithms
    )
    return f"SignatureAlgorithms({_list(pairs)})"

@render_extension.register
def _(ext: SupportedVersions, registries=None):
    return f"SupportedVersions({_list(hex_u16(v) for v in ext.versions)})"

@render_extension.register
def _(ext: PskExchangeModes, registries=None):
    return f"PskExchangeModes({_list(hex_u8(m) for m in ext.modes)})"

@render_extension.register
def _(ext: ALPN, registries=None):
    return f"ALPN({_list(decode_text(p) for p in ext.protocols)})"

# scalar

@render_extension.register
def _(ext: MaxFragmentLength, registries=None):
    return f"MaxFragmentLength({ext.length})"

@render_extension.register
def _(ext: Heartbeat, registries=None):
    return f"Heartbeat({ext.mode})"

# byte blobs

@render_extension.register
def _(ext: StatusRequest, registries=None):
    return _blob("StatusRequest", ext.data)

@render_extension.register
def _(ext: EcPointFormats, registries=None):
    return _blob("EcPointFormats", ext.formats)

@render_extension.register
def _(ext: SessionTicket, registries=None):
    return _blob("SessionTicket", ext.data)

@render_extension.register
def _(ext: KeyShare, registries=None):
    return _blob("KeyShare", ext.data)

@render_extension.register
def _(ext: PreSharedKey, registries=None):
    return _blob("PreSharedKey", ext.data)

@render_extension.register
def _(ext: Cookie, registries=None):
    return _blob("Cookie", ext.data)

@render_extension.register
def _(ext: SignedCertificateTimestamp, registries=None):
    return _blob("SignedCertificateTimestamp", ext.data)

@render_extension.register
def _(ext: Padding, registries=None):
    return _blob("Padding", ext.data)

@render_extension.register
def _(ext: RenegotiationInfo, registries=None):
    return _blob("RenegotiationInfo", ext.data)

# markers

@render_extension.register(EarlyData)
@render_extension.register(EncryptThenMac)
@render_extension.register(ExtendedMasterSecret)
@render_extension.register(NextProtocolNegotiation)
def _marker(ext, registries=None):
    return type(ext).__name__

@render_extension.register
def _(ext: UnknownExtension, registries=None):
    return f"Unknown(id=0x{ext.id:x},data={hex_slice(ext.data)})"
