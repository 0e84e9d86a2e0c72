"""Random salt generation in bytes, byte-list, and hex string forms.

String salts are the hex encoding of fresh random bytes cut to the requested
number of characters.  Should a string ever come up short it is right-padded
with a single pad character chosen once per process.  The pad character is
arbitrary and carries no security weight.
"""

from __future__ import annotations

import hashlib
import secrets
import threading
import uuid
from enum import StrEnum

from hash_generator.config import get_settings
from hash_generator.errors import UnsupportedFormatError
from hash_generator.rng.failover import generate_random_bytes

_pad_lock = threading.Lock()
_pad: str | None = None


class SaltKind(StrEnum):
    DATA = "data"  # bytes
    BYTES = "bytes"  # list[int]
    STRING = "string"  # hex str, length counted in characters


def pad_character() -> str:
    """Return the process-wide pad character, computing it on first use."""
    global _pad
    if _pad is None:
        with _pad_lock:
            if _pad is None:
                _pad = get_settings().salt_pad_character or _derive_pad_character()
    return _pad


def _derive_pad_character() -> str:
    seed = hashlib.sha256(uuid.uuid4().bytes).hexdigest()
    return secrets.choice(seed)


def pad_or_truncate(text: str, length: int, pad: str) -> str:
    """Cut *text* to *length* characters or right-pad it with *pad*."""
    if len(text) >= length:
        return text[:length]
    return text + pad * (length - len(text))


def generate_salt(length: int, kind: SaltKind | str = SaltKind.DATA) -> bytes | list[int] | str:
    """Generate a random salt value.

    For ``DATA`` and ``BYTES`` *length* is a byte count; for ``STRING`` it is
    the number of characters in the returned hex string.
    """
    try:
        kind = SaltKind(kind)
    except ValueError:
        raise UnsupportedFormatError(kind, [k.value for k in SaltKind]) from None
    if length < 0:
        raise ValueError(f"Salt length must be non-negative, got {length}")

    if kind is SaltKind.DATA:
        return generate_random_bytes(length)
    if kind is SaltKind.BYTES:
        return list(generate_random_bytes(length))
    return pad_or_truncate(generate_random_bytes(length).hex(), length, pad_character())
