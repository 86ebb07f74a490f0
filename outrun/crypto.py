"""Message encryption and the envelope used between the game client and the server.

Encrypted messages are AES-128-CBC with PKCS#5 padding, base64 encoded.
The AES key is fixed by the game client; the client sends the IV in the
"key" form field, and the server answers with its own default IV.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "ENCRYPTION_KEY",
    "DEFAULT_IV",
    "BLOCK_SIZE",
    "b64_decode",
    "b64_encode",
    "pkcs5_padding",
    "encrypt",
    "decrypt",
    "clean_bytes",
    "get_received_message",
    "build_response",
]

log = logging.getLogger(__name__)

# Protocol constant compiled into the game client, not a secret of this server.
ENCRYPTION_KEY = b"Ec7bLaTdSuXuf5pW"
DEFAULT_IV = "HotAndSunnyMiami"
BLOCK_SIZE = 16

FormValue = Union[str, Sequence[str]]


def b64_decode(text: str | bytes) -> bytes:
    """Decode standard base64; malformed input gives empty bytes."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return b""


def b64_encode(data: bytes) -> str:
    """Encode bytes as standard, padded base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def pkcs5_padding(data: bytes, block_size: int) -> bytes:
    """Pad data to a whole number of blocks; a full block is added if already aligned."""
    if not 0 < block_size < 256:
        raise ValueError(f"block size must be between 1 and 255, got {block_size}")
    pad = block_size - len(data) % block_size
    return bytes(data) + bytes([pad]) * pad


def _cipher(key: bytes, iv: bytes) -> Cipher:
    return Cipher(algorithms.AES(bytes(key)), modes.CBC(bytes(iv)))


def encrypt(content: bytes, key: bytes, iv: bytes) -> bytes:
    """Pad and encrypt content with AES-CBC; raises ValueError on a bad key or IV."""
    encryptor = _cipher(key, iv).encryptor()
    return encryptor.update(pkcs5_padding(content, BLOCK_SIZE)) + encryptor.finalize()


def decrypt(content: bytes, key: bytes, iv: bytes) -> bytes:
    """Decrypt AES-CBC content without removing the padding.

    Raises ValueError on a bad key or IV, or content that is not whole blocks.
    """
    if len(content) % BLOCK_SIZE:
        raise ValueError("encrypted content is not a whole number of blocks")
    decryptor = _cipher(key, iv).decryptor()
    return decryptor.update(bytes(content)) + decryptor.finalize()


def clean_bytes(data: bytes) -> bytes:
    """Keep only the bytes from space up to 0x7f, dropping padding and control bytes."""
    return bytes(b for b in data if 0x20 <= b <= 0x7F)


def _form_get(form: Mapping[str, FormValue], name: str) -> str:
    value = form.get(name, "")
    if isinstance(value, str):
        return value
    return value[0] if value else ""


def get_received_message(form: Mapping[str, FormValue]) -> bytes:
    """Return the message a client sent in its "param" form field.

    When "secure" is "1" the parameter is base64 AES data, decrypted with the
    IV given in "key" and stripped of non-printable bytes.
    """
    param = _form_get(form, "param")
    if _form_get(form, "secure") != "1":
        return param.encode("utf-8")
    iv = _form_get(form, "key").encode("utf-8")
    return clean_bytes(decrypt(b64_decode(param), ENCRYPTION_KEY, iv))


def _go_style_json(value: object) -> bytes:
    text = json.dumps(value, separators=(",", ":"), ensure_ascii=False, sort_keys=True)
    for char, escaped in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escaped)
    return text.encode("utf-8")


def build_response(out: bytes, secure_flag: str = "1", iv: str = DEFAULT_IV) -> bytes:
    """Wrap a response body in the JSON envelope the client expects."""
    if secure_flag not in ("0", "1"):
        log.warning("Improper secure flag %r in response", secure_flag)
    if secure_flag == "1":
        param = b64_encode(encrypt(out, ENCRYPTION_KEY, iv.encode("utf-8")))
    else:
        param = bytes(out).decode("utf-8", errors="replace")
    return _go_style_json({"secure": secure_flag, "key": iv, "param": param})