"""Concrete random byte sources, from strongest to always-available."""

from __future__ import annotations

import os
import random
import secrets

from hash_generator.errors import RandomSourceError

from .base import RandomSource


class GetRandomSource(RandomSource):
    """Bulk bytes straight from the ``getrandom(2)`` syscall.

    Only present on Linux; elsewhere every call fails over.
    """

    def generate(self, count: int) -> bytes:
        getrandom = getattr(os, "getrandom", None)
        if getrandom is None:
            raise RandomSourceError("os.getrandom is not available on this platform")
        try:
            data = getrandom(count)
        except OSError as e:
            raise RandomSourceError(f"getrandom failed: {e}") from e
        # getrandom may return fewer bytes than requested when interrupted
        if len(data) != count:
            raise RandomSourceError(f"getrandom returned {len(data)} of {count} bytes")
        return data

    def get_source_name(self) -> str:
        return "getrandom"


class SecretsSource(RandomSource):
    """The OS random-bytes service as exposed by :mod:`secrets`."""

    def generate(self, count: int) -> bytes:
        try:
            return secrets.token_bytes(count)
        except (OSError, NotImplementedError) as e:
            raise RandomSourceError(f"secrets.token_bytes failed: {e}") from e

    def get_source_name(self) -> str:
        return "secrets"


class PerByteSource(RandomSource):
    """Draws one byte at a time from a general-purpose generator.

    Not cryptographically secure.  Last resort only; it cannot fail.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def generate(self, count: int) -> bytes:
        collected = bytearray()
        while len(collected) < count:
            collected.append(self._rng.randint(0, 255))
        return bytes(collected)

    def get_source_name(self) -> str:
        return "per-byte"
