"""Stateful hash generator with one-shot salt staging.

A :class:`HashGenerator` hashes values with its current algorithm.  Salt can
be staged to be appended and/or prepended to the *next* input only; the next
hash call consumes it, whichever entry point is used, and records it on the
returned :class:`Digest`.

    generator = HashGenerator(HashAlgorithm.SHA256)
    digest = generator.append_salt(length=20).prepend_salt(length=20).hash("Hello, world!")
    digest.appended_salt  # the 20 random bytes that were appended

Instances hold mutable staging state and are not safe to share between
threads.  Use one generator per thread.
"""

from __future__ import annotations

import struct
import warnings
from typing import Any, NamedTuple

from hash_generator.config import get_settings
from hash_generator.errors import InputEncodingError, InvalidAlgorithmError
from hash_generator.models.algorithm import HashAlgorithm
from hash_generator.models.digest import Digest, SaltValue
from hash_generator.salt import SaltKind, generate_salt

BytesLike = bytes | bytearray | memoryview
SaltInput = bytes | bytearray | memoryview | list[int] | str


class _StagedSalt(NamedTuple):
    buffer: bytes
    provenance: SaltValue


def _encode_utf8(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise InputEncodingError(f"String cannot be encoded as UTF-8: {e.reason}") from e


def _stage(data: SaltInput) -> _StagedSalt:
    if isinstance(data, bytes):
        return _StagedSalt(data, data)
    if isinstance(data, (bytearray, memoryview)):
        raw = bytes(data)
        return _StagedSalt(raw, raw)
    if isinstance(data, str):
        return _StagedSalt(_encode_utf8(data), data)
    if isinstance(data, list):
        # bytes() rejects values outside 0-255
        return _StagedSalt(bytes(data), list(data))
    raise TypeError(f"Unsupported salt type: {type(data).__name__}")


def _fixed_layout_bytes(value: Any) -> bytes:
    if isinstance(value, bool):
        return struct.pack("<?", value)
    if isinstance(value, int):
        try:
            return struct.pack("<q", value)
        except struct.error:
            length = (value.bit_length() + 8) // 8
            return value.to_bytes(length, "little", signed=True)
    if isinstance(value, float):
        return struct.pack("<d", value)
    try:
        return memoryview(value).tobytes()
    except TypeError:
        raise TypeError(f"Value of type {type(value).__name__} has no fixed byte layout") from None


class HashGenerator:
    """Computes digests with a chosen algorithm, applying staged salt once."""

    def __init__(self, algorithm: HashAlgorithm | str | None = None):
        self.algorithm = self._check_algorithm(
            algorithm if algorithm is not None else get_settings().default_algorithm
        )
        self._appended: _StagedSalt | None = None
        self._prepended: _StagedSalt | None = None

    @staticmethod
    def _check_algorithm(algorithm: HashAlgorithm | str) -> HashAlgorithm:
        # Names are accepted in either case, "SHA256" as well as "sha256"
        if isinstance(algorithm, str) and not isinstance(algorithm, HashAlgorithm):
            algorithm = algorithm.lower()
        algorithm = HashAlgorithm(algorithm)
        if algorithm is HashAlgorithm.INVALID:
            raise InvalidAlgorithmError(algorithm.description)
        if algorithm is HashAlgorithm.PLATFORM and not get_settings().enable_platform_hash:
            raise InvalidAlgorithmError(algorithm.description)
        return algorithm

    def set_algorithm(self, algorithm: HashAlgorithm | str) -> HashGenerator:
        """Switch the algorithm used by subsequent hashes.  Staged salt is kept."""
        self.algorithm = self._check_algorithm(algorithm)
        return self

    # ------------------------------------------------------------------
    # Salt staging
    # ------------------------------------------------------------------

    def _resolve_salt(self, data: SaltInput | None, length: int | None) -> _StagedSalt:
        if data is not None and length is not None:
            raise ValueError("Pass either salt data or a salt length, not both")
        if data is not None:
            return _stage(data)
        if length is None:
            length = get_settings().default_salt_length
        return _stage(generate_salt(length, SaltKind.DATA))

    def append_salt(self, data: SaltInput | None = None, *, length: int | None = None) -> HashGenerator:
        """Append salt to the next hashed input only.

        Give either explicit *data* or a *length* of random bytes to generate.
        """
        self._appended = self._resolve_salt(data, length)
        return self

    def prepend_salt(self, data: SaltInput | None = None, *, length: int | None = None) -> HashGenerator:
        """Prepend salt to the next hashed input only.

        Give either explicit *data* or a *length* of random bytes to generate.
        """
        self._prepended = self._resolve_salt(data, length)
        return self

    def appending_salt(self, data: SaltInput | None = None, *, length: int | None = None) -> HashGenerator:
        warnings.warn("appending_salt() is deprecated, use append_salt()", DeprecationWarning, stacklevel=2)
        return self.append_salt(data, length=length)

    def prepending_salt(self, data: SaltInput | None = None, *, length: int | None = None) -> HashGenerator:
        warnings.warn("prepending_salt() is deprecated, use prepend_salt()", DeprecationWarning, stacklevel=2)
        return self.prepend_salt(data, length=length)

    # ------------------------------------------------------------------
    # Hashing
    # ------------------------------------------------------------------

    def _consume_staged(self) -> tuple[_StagedSalt | None, _StagedSalt | None]:
        staged = self._appended, self._prepended
        self._appended = None
        self._prepended = None
        return staged

    def hash_data(self, data: BytesLike) -> Digest:
        """Hash raw bytes, applying and then clearing any staged salt."""
        # Strided or otherwise non-contiguous views are copied out flat
        buffer = bytes(data)
        appended, prepended = self._consume_staged()
        if appended is None and prepended is None:
            return self.algorithm.compute_digest(buffer)

        if prepended is not None:
            buffer = prepended.buffer + buffer
        if appended is not None:
            buffer = buffer + appended.buffer

        digest = self.algorithm.compute_digest(buffer)
        return digest.with_salt(
            appended=appended.provenance if appended is not None else None,
            prepended=prepended.provenance if prepended is not None else None,
        )

    def hash_string(self, text: str) -> Digest:
        """Hash the UTF-8 encoding of *text*.

        Raises :class:`InputEncodingError` for text that is not valid Unicode
        (lone surrogates); staged salt is left in place in that case.
        """
        return self.hash_data(_encode_utf8(text))

    def hash_value(self, value: Any) -> Digest:
        """Hash the in-memory byte layout of a fixed-size value.

        Ints are packed as signed 64-bit little-endian (wider ints use the
        minimal two's-complement width), floats as IEEE-754 doubles, and any
        buffer-protocol object as its raw contents.  This layout is specific
        to this library; do not expect other tools to produce the same digest.
        """
        return self.hash_data(_fixed_layout_bytes(value))

    def hash_hashable(self, value: Any) -> Digest:
        """Hash a value through its platform hash.

        Under ``PLATFORM`` the platform hash is the digest itself, except for
        bytes and strings which take their normal path.  Other algorithms
        hash the decimal text of ``hash(value)``.
        """
        if self.algorithm is not HashAlgorithm.PLATFORM:
            return self.hash_string(str(hash(value)))

        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.hash_data(value)
        if isinstance(value, str):
            return self.hash_string(value)
        if self._appended is None and self._prepended is None:
            return self.algorithm.digest_from_hash_value(hash(value))
        return self.hash_string(str(hash(value)))

    def hash(self, value: Any) -> Digest:
        """Hash bytes, text, or any hashable value."""
        if isinstance(value, (bytes, bytearray, memoryview)):
            return self.hash_data(value)
        if isinstance(value, str):
            return self.hash_string(value)
        return self.hash_hashable(value)

    def __str__(self) -> str:
        return f"HashGenerator(algorithm: {self.algorithm.description})"

    def __repr__(self) -> str:
        appended = self._appended.provenance if self._appended is not None else None
        prepended = self._prepended.provenance if self._prepended is not None else None
        return (
            f"HashGenerator(algorithm={self.algorithm.description}, "
            f"appended={appended!r}, prepended={prepended!r})"
        )
