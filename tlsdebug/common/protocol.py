from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import Annotated, List, Literal, Optional, Tuple, Union

U8 = Annotated[int, Field(ge=0, le=0xff)]
U16 = Annotated[int, Field(ge=0, le=0xffff)]
U32 = Annotated[int, Field(ge=0, le=0xffffffff)]

class Parsed(BaseModel):
    """Decoded structure handed over by the parser. Read-only once built."""
    model_config = ConfigDict(frozen=True)

# -------------------------
# Record layer
# -------------------------

class RecordHeader(Parsed):
    record_type: U8
    version: U16
    len: Annotated[int, Field(ge=0)]   # as decoded, never checked against the payload

class Alert(Parsed):
    severity: U8
    code: U8

# -------------------------
# Hellos
# -------------------------

class ClientHello(Parsed):
    version: U16
    rand_time: U32
    rand_data: bytes
    session_id: Optional[bytes] = None
    ciphers: List[U16] = []
    comp: List[U8] = []
    ext: Optional[bytes] = None

class ServerHello(Parsed):
    version: U16
    rand_time: U32
    rand_data: bytes
    session_id: Optional[bytes] = None
    cipher: U16
    compression: U8
    ext: Optional[bytes] = None

class ServerHelloV13(Parsed):
    version: U16
    random: bytes
    cipher: U16
    ext: Optional[bytes] = None

class HelloRetryRequest(Parsed):
    version: U16
    ext: Optional[bytes] = None

# -------------------------
# Certificates and key exchange
# -------------------------

class RawCertificate(Parsed):
    data: bytes        # DER, opaque here

class ServerKeyExchange(Parsed):
    parameters: bytes

class ClientKeyExchange(Parsed):
    parameters: bytes

class ServerDHParams(Parsed):
    dh_p: bytes
    dh_g: bytes
    dh_ys: bytes

    @property
    def group_size(self) -> int:
        # derived from the generator length, not from dh_p
        return len(self.dh_g) * 8

class HashSignAlgorithm(Parsed):
    hash: U8
    sign: U8

class DigitallySigned(Parsed):
    alg: HashSignAlgorithm
    data: bytes

# -------------------------
# Extensions (closed tagged union)
# -------------------------

class ExtensionModel(Parsed):
    """Common base of the extension variants."""

class SNI(ExtensionModel):
    type: Literal["sni"] = "sni"
    names: List[Tuple[U8, bytes]] = []   # (name_type, host_name)

class MaxFragmentLength(ExtensionModel):
    type: Literal["max_fragment_length"] = "max_fragment_length"
    length: U8

class StatusRequest(ExtensionModel):
    type: Literal["status_request"] = "status_request"
    data: Optional[bytes] = None

class EllipticCurves(ExtensionModel):
    type: Literal["elliptic_curves"] = "elliptic_curves"
    groups: List[U16] = []

class EcPointFormats(ExtensionModel):
    type: Literal["ec_point_formats"] = "ec_point_formats"
    formats: bytes = b""

class SignatureAlgorithms(ExtensionModel):
    type: Literal["signature_algorithms"] = "signature_algorithms"
    algorithms: List[Tuple[U8, U8]] = []   # (hash, sign)

class SessionTicket(ExtensionModel):
    type: Literal["session_ticket"] = "session_ticket"
    data: bytes = b""

class KeyShare(ExtensionModel):
    type: Literal["key_share"] = "key_share"
    data: bytes

class PreSharedKey(ExtensionModel):
    type: Literal["pre_shared_key"] = "pre_shared_key"
    data: bytes

class EarlyData(ExtensionModel):
    type: Literal["early_data"] = "early_data"

class SupportedVersions(ExtensionModel):
    type: Literal["supported_versions"] = "supported_versions"
    versions: List[U16] = []

class Cookie(ExtensionModel):
    type: Literal["cookie"] = "cookie"
    data: bytes

class PskExchangeModes(ExtensionModel):
    type: Literal["psk_exchange_modes"] = "psk_exchange_modes"
    modes: List[U8] = []

class Heartbeat(ExtensionModel):
    type: Literal["heartbeat"] = "heartbeat"
    mode: U8

class ALPN(ExtensionModel):
    type: Literal["alpn"] = "alpn"
    protocols: List[bytes] = []

class SignedCertificateTimestamp(ExtensionModel):
    type: Literal["signed_certificate_timestamp"] = "signed_certificate_timestamp"
    data: Optional[bytes] = None

class Padding(ExtensionModel):
    type: Literal["padding"] = "padding"
    data: bytes = b""

class EncryptThenMac(ExtensionModel):
    type: Literal["encrypt_then_mac"] = "encrypt_then_mac"

class ExtendedMasterSecret(ExtensionModel):
    type: Literal["extended_master_secret"] = "extended_master_secret"

class NextProtocolNegotiation(ExtensionModel):
    type: Literal["next_protocol_negotiation"] = "next_protocol_negotiation"

class RenegotiationInfo(ExtensionModel):
    type: Literal["renegotiation_info"] = "renegotiation_info"
    data: bytes = b""

class UnknownExtension(ExtensionModel):
    type: Literal["unknown"] = "unknown"
    id: U16
    data: bytes = b""

EXTENSION_TYPES = (
    SNI, MaxFragmentLength, StatusRequest, EllipticCurves, EcPointFormats,
    SignatureAlgorithms, SessionTicket, KeyShare, PreSharedKey, EarlyData,
    SupportedVersions, Cookie, PskExchangeModes, Heartbeat, ALPN,
    SignedCertificateTimestamp, Padding, EncryptThenMac, ExtendedMasterSecret,
    NextProtocolNegotiation, RenegotiationInfo, UnknownExtension,
)

Extension = Annotated[Union[EXTENSION_TYPES], Field(discriminator="type")]

_extension_adapter = TypeAdapter(Extension)

def parse_extension(obj: dict):
    """Build the matching extension model from a plain dict keyed by ``type``."""
    return _extension_adapter.validate_python(obj)
