"""Exception types raised by the hash generator."""

from __future__ import annotations


class HashGeneratorError(Exception):
    """Base class for all hash generator errors."""


class InvalidAlgorithmError(HashGeneratorError, ValueError):
    """A digest was requested from an algorithm that cannot compute one."""

    def __init__(self, algorithm: object):
        self.algorithm = algorithm
        super().__init__(f"Attempted to use incorrect hash function for '{algorithm}' algorithm")


class UnsupportedFormatError(HashGeneratorError, ValueError):
    """A digest format or salt kind outside the supported set was requested."""

    def __init__(self, kind: object, supported: list[str]):
        self.kind = kind
        super().__init__(f"Bad format: {kind!r} (expected one of {', '.join(supported)})")


class InputEncodingError(HashGeneratorError, UnicodeError):
    """A string input or salt could not be encoded as UTF-8."""


class RandomSourceError(HashGeneratorError):
    """A single random byte source failed to produce output."""
