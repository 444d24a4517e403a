import hashlib, logging
from typing import Union

logger = logging.getLogger(__name__)

INVALID_UTF8 = "<error decoding utf8 string>"

def hex_u8(v: int) -> str:
    return "0x%02x" % v

def hex_u16(v: int) -> str:
    return "0x%04x" % v

def hex_slice(data: bytes) -> str:
    return "[" + " ".join("%02x" % b for b in data) + "]"

def hex_optional(data) -> str:
    # absent is "None", present-but-empty is "[]"
    return "None" if data is None else hex_slice(data)

def decode_text(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("invalid utf-8 in text field: %r", data)
        return INVALID_UTF8

def sha256_hex(data: Union[bytes, str]) -> str:
    if isinstance(data, str): data = data.encode()
    return hashlib.sha256(data).hexdigest()
