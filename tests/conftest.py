"""Shared test fixtures."""
import pytest
from unittest.mock import MagicMock
from hash_generator import salt
from hash_generator.config import get_settings
from hash_generator.generator import HashGenerator
from hash_generator.models.algorithm import HashAlgorithm
from hash_generator.rng.base import RandomSource


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Re-read HASHGEN_* settings and forget the pad character for every test."""
    for name in ("HASHGEN_DEFAULT_ALGORITHM", "HASHGEN_DEFAULT_SALT_LENGTH",
                 "HASHGEN_SALT_PAD_CHARACTER", "HASHGEN_ENABLE_PLATFORM_HASH", "HASHGEN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(salt, "_pad", None)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def generator():
    return HashGenerator(HashAlgorithm.SHA256)


@pytest.fixture
def failing_source():
    """A random source that always fails."""
    from hash_generator.errors import RandomSourceError
    source = MagicMock(spec=RandomSource)
    source.get_source_name.return_value = "failing"
    source.generate.side_effect = RandomSourceError("unavailable")
    return source
