"""Digest value model returned by every hash operation."""

from __future__ import annotations

from enum import StrEnum
from typing import Union

from pydantic import BaseModel, ConfigDict

from hash_generator.errors import UnsupportedFormatError
from hash_generator.models.algorithm import HashAlgorithm

# Salt provenance keeps whichever representation the caller supplied.
SaltValue = Union[bytes, str, list[int]]


class DigestFormat(StrEnum):
    DATA = "data"  # bytes
    BYTES = "bytes"  # list[int], each 0-255
    STRING = "string"  # lowercase hex


class Digest(BaseModel):
    """The immutable result of a hash computation.

    Two digests are equal when their raw bytes are identical; the algorithm
    and salt provenance do not take part in comparison or hashing.
    """

    model_config = ConfigDict(frozen=True)

    raw_value: bytes
    algorithm: HashAlgorithm
    appended_salt: SaltValue | None = None
    prepended_salt: SaltValue | None = None

    def __str__(self) -> str:
        return self.raw_value.hex()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self.raw_value == other.raw_value

    def __hash__(self) -> int:
        return hash(self.raw_value)

    def __add__(self, other: Digest) -> Digest:
        """Concatenate two digests.

        The result keeps the algorithm only when both sides share it and is
        marked ``INVALID`` otherwise.  That marks provenance, not validity.
        """
        if not isinstance(other, Digest):
            return NotImplemented
        algorithm = self.algorithm if self.algorithm == other.algorithm else HashAlgorithm.INVALID
        return Digest(raw_value=self.raw_value + other.raw_value, algorithm=algorithm)

    def string(self) -> str:
        """Return the lowercase hex form, same as ``str(digest)``."""
        return str(self)

    def as_data(self) -> bytes:
        return self.raw_value

    def as_bytes(self) -> list[int]:
        return list(self.raw_value)

    def as_string(self) -> str:
        return str(self)

    def format(self, kind: DigestFormat | str) -> bytes | list[int] | str:
        """Return the digest in the representation selected by *kind*."""
        try:
            kind = DigestFormat(kind)
        except ValueError:
            raise UnsupportedFormatError(kind, [f.value for f in DigestFormat]) from None

        if kind is DigestFormat.DATA:
            return self.as_data()
        if kind is DigestFormat.BYTES:
            return self.as_bytes()
        return self.as_string()

    def with_salt(
        self,
        *,
        appended: SaltValue | None = None,
        prepended: SaltValue | None = None,
    ) -> Digest:
        """Return a copy recording the salt used to compute this digest."""
        return self.model_copy(update={"appended_salt": appended, "prepended_salt": prepended})
