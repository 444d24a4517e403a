# Renderers for decoded records and handshake messages: `TypeName { field: value, ... }`
# with fields in wire order.

from functools import singledispatch
from typing import Iterable, Optional, Tuple

from tlsdebug.common.protocol import (
    Alert, ClientHello, ClientKeyExchange, DigitallySigned, HashSignAlgorithm,
    HelloRetryRequest, RawCertificate, RecordHeader, ServerDHParams,
    ServerHello, ServerHelloV13, ServerKeyExchange, ExtensionModel,
)
from tlsdebug.common.utils import hex_optional, hex_slice, hex_u8, hex_u16
from tlsdebug.registry.resolve import (
    Registries, render_alert_severity, render_cipher, render_hash_algorithm,
    render_sign_algorithm,
)
from tlsdebug.render.extensions import render_extension

def debug_struct(name: str, fields: Iterable[Tuple[str, str]]) -> str:
    body = ", ".join(f"{k}: {v}" for k, v in fields)
    return f"{name} {{ {body} }}"

def _seq(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"

def render_client_hello(msg: ClientHello, registries: Optional[Registries] = None) -> str:
    return debug_struct("ClientHello", [
        ("version", hex_u16(msg.version)),
        ("rand_time", str(msg.rand_time)),
        ("rand_data", hex_slice(msg.rand_data)),
        ("session_id", hex_optional(msg.session_id)),
        ("ciphers", _seq(render_cipher(c, registries) for c in msg.ciphers)),
        ("comp", _seq(hex_u8(c) for c in msg.comp)),
        ("ext", hex_optional(msg.ext)),
    ])

def render_server_hello(msg: ServerHello, registries: Optional[Registries] = None) -> str:
    return debug_struct("ServerHello", [
        ("version", hex_u16(msg.version)),
        ("rand_time", str(msg.rand_time)),
        ("rand_data", hex_slice(msg.rand_data)),
        ("session_id", hex_optional(msg.session_id)),
        ("cipher", render_cipher(msg.cipher, registries)),
        ("compression", hex_u8(msg.compression)),
        ("ext", hex_optional(msg.ext)),
    ])

def render_server_hello_v13(msg: ServerHelloV13, registries: Optional[Registries] = None) -> str:
    return debug_struct("ServerHelloV13", [
        ("version", hex_u16(msg.version)),
        ("random", hex_slice(msg.random)),
        ("cipher", render_cipher(msg.cipher, registries)),
        ("ext", hex_optional(msg.ext)),
    ])

def render_hello_retry_request(msg: HelloRetryRequest, registries: Optional[Registries] = None) -> str:
    return debug_struct("HelloRetryRequest", [
        ("version", hex_u16(msg.version)),
        ("ext", hex_optional(msg.ext)),
    ])

def render_certificate(msg: RawCertificate, registries: Optional[Registries] = None) -> str:
    return debug_struct("RawCertificate", [("data", hex_slice(msg.data))])

def render_server_key_exchange(msg: ServerKeyExchange, registries: Optional[Registries] = None) -> str:
    return debug_struct("ServerKeyExchange", [("parameters", hex_slice(msg.parameters))])

def render_client_key_exchange(msg: ClientKeyExchange, registries: Optional[Registries] = None) -> str:
    return debug_struct("ClientKeyExchange", [("parameters", hex_slice(msg.parameters))])

def render_record_header(hdr: RecordHeader, registries: Optional[Registries] = None) -> str:
    return debug_struct("RecordHeader", [
        ("type", hex_u8(hdr.record_type)),
        ("version", hex_u16(hdr.version)),
        ("len", str(hdr.len)),
    ])

def render_alert(msg: Alert, registries: Optional[Registries] = None) -> str:
    return debug_struct("Alert", [
        ("severity", render_alert_severity(msg.severity, registries)),
        ("code", str(msg.code)),
    ])

def render_dh_params(params: ServerDHParams, registries: Optional[Registries] = None) -> str:
    return debug_struct("ServerDHParams", [
        ("group size", str(params.group_size)),
        ("dh_p", hex_slice(params.dh_p)),
        ("dh_g", hex_slice(params.dh_g)),
        ("dh_ys", hex_slice(params.dh_ys)),
    ])

def render_hash_sign(alg: HashSignAlgorithm, registries: Optional[Registries] = None) -> str:
    return debug_struct("HashSignAlgorithm", [
        ("hash", render_hash_algorithm(alg.hash, registries)),
        ("sign", render_sign_algorithm(alg.sign, registries)),
    ])

def render_digitally_signed(sig: DigitallySigned, registries: Optional[Registries] = None) -> str:
    return debug_struct("DigitallySigned", [
        ("alg", render_hash_sign(sig.alg, registries)),
        ("data", hex_slice(sig.data)),
    ])

@singledispatch
def render(obj, registries: Optional[Registries] = None) -> str:
    """Render any decoded structure; TypeError for anything that is not a protocol model."""
    raise TypeError(f"no renderer for {type(obj).__name__}")

render.register(ClientHello, render_client_hello)
render.register(ServerHello, render_server_hello)
render.register(ServerHelloV13, render_server_hello_v13)
render.register(HelloRetryRequest, render_hello_retry_request)
render.register(RawCertificate, render_certificate)
render.register(ServerKeyExchange, render_server_key_exchange)
render.register(ClientKeyExchange, render_client_key_exchange)
render.register(RecordHeader, render_record_header)
render.register(Alert, render_alert)
render.register(ServerDHParams, render_dh_params)
render.register(HashSignAlgorithm, render_hash_sign)
render.register(DigitallySigned, render_digitally_signed)
render.register(ExtensionModel, render_extension)
