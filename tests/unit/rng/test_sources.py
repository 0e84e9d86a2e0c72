"""Test the individual random byte sources."""
import os
import random
import secrets
import pytest
from hash_generator.errors import RandomSourceError
from hash_generator.rng.sources import GetRandomSource, PerByteSource, SecretsSource


class TestGetRandomSource:
    @pytest.mark.skipif(not hasattr(os, "getrandom"), reason="getrandom is Linux only")
    def test_returns_requested_length(self):
        assert len(GetRandomSource().generate(32)) == 32

    def test_missing_syscall_fails(self, monkeypatch):
        monkeypatch.delattr(os, "getrandom", raising=False)
        with pytest.raises(RandomSourceError):
            GetRandomSource().generate(8)

    def test_os_error_fails(self, monkeypatch):
        def broken(count):
            raise OSError("ENOSYS")
        monkeypatch.setattr(os, "getrandom", broken, raising=False)
        with pytest.raises(RandomSourceError, match="ENOSYS"):
            GetRandomSource().generate(8)

    def test_short_read_fails(self, monkeypatch):
        monkeypatch.setattr(os, "getrandom", lambda count: b"\x00" * (count - 1), raising=False)
        with pytest.raises(RandomSourceError):
            GetRandomSource().generate(8)


class TestSecretsSource:
    def test_returns_requested_length(self):
        assert len(SecretsSource().generate(24)) == 24

    def test_os_error_fails(self, monkeypatch):
        def broken(count):
            raise NotImplementedError("no entropy")
        monkeypatch.setattr(secrets, "token_bytes", broken)
        with pytest.raises(RandomSourceError):
            SecretsSource().generate(8)


class TestPerByteSource:
    def test_returns_requested_length(self):
        assert len(PerByteSource().generate(100)) == 100

    def test_zero(self):
        assert PerByteSource().generate(0) == b""

    def test_seeded_is_reproducible(self):
        a = PerByteSource(random.Random(7)).generate(16)
        b = PerByteSource(random.Random(7)).generate(16)
        assert a == b
