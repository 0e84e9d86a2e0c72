"""Supported hash algorithms and dispatch to their primitives.

The five cryptographic variants are backed by :mod:`hashlib`.  ``PLATFORM``
uses Python's builtin :func:`hash`, which is salted per process (see
``PYTHONHASHSEED``) and therefore only stable for the lifetime of the
interpreter.  Never use it to reference externally stored values.
"""

from __future__ import annotations

import hashlib
from enum import StrEnum
from typing import TYPE_CHECKING

from hash_generator.errors import InvalidAlgorithmError

if TYPE_CHECKING:
    from hash_generator.models.digest import Digest


class HashAlgorithm(StrEnum):
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA1 = "sha1"
    MD5 = "md5"
    PLATFORM = "platform"
    # Provenance of concatenated digests from different algorithms.
    # Never computes a digest.
    INVALID = "invalid"

    @property
    def output_length(self) -> int | None:
        """Digest size in bytes, or ``None`` when it is not fixed."""
        return _OUTPUT_LENGTHS.get(self)

    @property
    def is_cryptographic(self) -> bool:
        return self in _OUTPUT_LENGTHS

    @property
    def description(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"HashAlgorithm({self.name})"

    def compute_digest(self, data: bytes | bytearray | memoryview) -> Digest:
        """Hash *data* and wrap the result in a :class:`Digest`.

        Raises :class:`InvalidAlgorithmError` for ``INVALID``.
        """
        from hash_generator.models.digest import Digest

        if self is HashAlgorithm.PLATFORM:
            return self.digest_from_hash_value(hash(bytes(data)))
        if not self.is_cryptographic:
            raise InvalidAlgorithmError(self.description)

        # SHA-1 and MD5 stay available on FIPS builds when not flagged for security use
        h = hashlib.new(self.value, bytes(data), usedforsecurity=self not in _LEGACY)
        raw = h.digest()
        return Digest(raw_value=raw, algorithm=self)

    def digest_from_hash_value(self, hash_value: int) -> Digest:
        """Convert an already computed platform hash into a ``PLATFORM`` digest."""
        from hash_generator.models.digest import Digest

        if self is not HashAlgorithm.PLATFORM:
            raise InvalidAlgorithmError(self.description)
        return Digest(raw_value=str(hash_value).encode("utf-8"), algorithm=self)


_OUTPUT_LENGTHS: dict[HashAlgorithm, int] = {
    HashAlgorithm.SHA256: 32,
    HashAlgorithm.SHA384: 48,
    HashAlgorithm.SHA512: 64,
    HashAlgorithm.SHA1: 20,
    HashAlgorithm.MD5: 16,
}

_LEGACY = frozenset({HashAlgorithm.SHA1, HashAlgorithm.MD5})
