"""Test salt generation and string padding."""
import string
import pytest
from hash_generator import salt
from hash_generator.errors import UnsupportedFormatError
from hash_generator.salt import SaltKind, generate_salt, pad_character, pad_or_truncate


class TestGenerateSalt:
    def test_default_kind_is_data(self):
        value = generate_salt(20)
        assert isinstance(value, bytes)
        assert len(value) == 20

    def test_bytes_kind(self):
        value = generate_salt(20, SaltKind.BYTES)
        assert isinstance(value, list)
        assert len(value) == 20
        assert all(0 <= b <= 255 for b in value)

    @pytest.mark.parametrize("length", [0, 1, 2, 7, 16, 20, 63, 128])
    def test_string_length_is_characters(self, length):
        value = generate_salt(length, SaltKind.STRING)
        assert len(value) == length
        assert set(value) <= set(string.hexdigits.lower())

    def test_kind_by_name(self):
        assert isinstance(generate_salt(4, "string"), str)

    def test_unsupported_kind(self):
        with pytest.raises(UnsupportedFormatError):
            generate_salt(4, "base64")

    def test_negative_length(self):
        with pytest.raises(ValueError):
            generate_salt(-1)

    def test_unique(self):
        seen = {generate_salt(16) for _ in range(1000)}
        assert len(seen) == 1000


class TestPadding:
    def test_truncate(self):
        assert pad_or_truncate("abcdef", 3, "0") == "abc"

    def test_pad(self):
        assert pad_or_truncate("ab", 5, "9") == "ab999"

    def test_exact(self):
        assert pad_or_truncate("abc", 3, "0") == "abc"

    def test_pad_character_is_hex(self):
        assert pad_character() in string.hexdigits.lower()

    def test_pad_character_stable(self):
        assert pad_character() == pad_character()

    def test_pad_character_from_settings(self, monkeypatch):
        monkeypatch.setenv("HASHGEN_SALT_PAD_CHARACTER", "e")
        assert pad_character() == "e"

    def test_pad_character_computed_once(self, monkeypatch):
        first = pad_character()
        monkeypatch.setattr(salt, "_derive_pad_character", lambda: "not-called")
        assert pad_character() == first
