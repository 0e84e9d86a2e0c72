"""Random byte generation that falls back through several sources."""
from __future__ import annotations
from hash_generator.errors import RandomSourceError
from hash_generator.utils.logging import get_logger
from .base import RandomSource
from .sources import GetRandomSource, PerByteSource, SecretsSource

logger = get_logger(__name__)


class FailoverRandomSource(RandomSource):
    """Tries each source once, in order; the final source must not fail."""

    def __init__(self, sources: list[RandomSource], final: RandomSource):
        self._sources = list(sources)
        self._final = final
        self._failover_count = 0

    def generate(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"Cannot generate a negative number of bytes: {count}")
        if count == 0:
            return b""
        for source in self._sources:
            try:
                return source.generate(count)
            except RandomSourceError as e:
                logger.warning("random_source_failed", error=str(e), source=source.get_source_name())
                self._failover_count += 1
        return self._final.generate(count)

    def get_source_name(self) -> str:
        names = [s.get_source_name() for s in self._sources]
        return " -> ".join(names + [self._final.get_source_name()])

    @property
    def failover_count(self) -> int:
        return self._failover_count


def default_random_source() -> FailoverRandomSource:
    """Build the standard chain: getrandom, then secrets, then per-byte draws."""
    return FailoverRandomSource([GetRandomSource(), SecretsSource()], PerByteSource())


_default_source = default_random_source()


def generate_random_bytes(count: int) -> bytes:
    """Return *count* random bytes from the strongest source that works."""
    return _default_source.generate(count)
