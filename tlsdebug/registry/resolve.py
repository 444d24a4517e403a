# Symbolic names for protocol codes. A code missing from the registry renders as
# an explicit Unknown marker that keeps the raw value in hex and decimal.

import logging
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, Optional

from tlsdebug.common.utils import hex_u16
from tlsdebug.registry import iana

logger = logging.getLogger(__name__)

class RegistryKind(str, Enum):
    cipher_suite = "cipher_suite"
    named_group = "named_group"
    signature_scheme = "signature_scheme"
    hash_algorithm = "hash_algorithm"
    signature_algorithm = "signature_algorithm"
    alert_severity = "alert_severity"

class Registries:
    """Read-only set of ``{code: name}`` tables, one per ``RegistryKind``."""

    def __init__(self, tables: Mapping[RegistryKind, Mapping[int, str]]):
        self._tables = MappingProxyType({
            RegistryKind(kind): MappingProxyType(dict(table))
            for kind, table in tables.items()
        })

    @classmethod
    def from_tables(cls, **tables: Mapping[int, str]) -> "Registries":
        """
        Build a registry set from keyword tables, e.g.
        ``Registries.from_tables(cipher_suite={0x1301: "TLS_AES_128_GCM_SHA256"})``.

        Kinds that are not given have an empty table.
        """
        return cls({RegistryKind(k): v for k, v in tables.items()})

    @staticmethod
    def default() -> "Registries":
        return _default_registries()

    def table(self, kind: RegistryKind) -> Mapping[int, str]:
        return self._tables.get(RegistryKind(kind), MappingProxyType({}))

    def resolve(self, kind: RegistryKind, code: int) -> Optional[str]:
        return self.table(kind).get(code)

@lru_cache(maxsize=None)
def _default_registries() -> Registries:
    return Registries({
        RegistryKind.cipher_suite: iana.CIPHER_SUITES,
        RegistryKind.named_group: iana.NAMED_GROUPS,
        RegistryKind.signature_scheme: iana.SIGNATURE_SCHEMES,
        RegistryKind.hash_algorithm: iana.HASH_ALGORITHMS,
        RegistryKind.signature_algorithm: iana.SIGNATURE_ALGORITHMS,
        RegistryKind.alert_severity: iana.ALERT_SEVERITIES,
    })

def _lookup(kind: RegistryKind, code: int, registries: Optional[Registries]) -> Optional[str]:
    name = (registries or Registries.default()).resolve(kind, code)
    if name is None:
        logger.debug("no %s entry for %#x", kind.value, code)
    return name

def render_cipher(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.cipher_suite, code, registries)
    if name is None:
        return f"{hex_u16(code)}(Unknown cipher/{code})"
    return f"{hex_u16(code)}({name})"

def render_signature_scheme(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.signature_scheme, code, registries)
    if name is None:
        return f"{hex_u16(code)}(Unknown signature scheme/{code})"
    return f"{hex_u16(code)}({name})"

def render_named_group(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.named_group, code, registries)
    if name is None:
        return f"<Unknown curve 0x{code:x}/{code}>"
    return f"{hex_u16(code)}({name})"

def render_hash_algorithm(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.hash_algorithm, code, registries)
    return name if name is not None else f"<Unknown hash 0x{code:x}/{code}>"

def render_sign_algorithm(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.signature_algorithm, code, registries)
    return name if name is not None else f"<Unknown signature 0x{code:x}/{code}>"

def render_alert_severity(code: int, registries: Optional[Registries] = None) -> str:
    name = _lookup(RegistryKind.alert_severity, code, registries)
    return name if name is not None else f"<Unknown severity 0x{code:x}/{code}>"

_RENDERERS = {
    RegistryKind.cipher_suite: render_cipher,
    RegistryKind.named_group: render_named_group,
    RegistryKind.signature_scheme: render_signature_scheme,
    RegistryKind.hash_algorithm: render_hash_algorithm,
    RegistryKind.signature_algorithm: render_sign_algorithm,
    RegistryKind.alert_severity: render_alert_severity,
}

def render_code(kind: RegistryKind, code: int, registries: Optional[Registries] = None) -> str:
    return _RENDERERS[RegistryKind(kind)](code, registries)
