"""Tests for the SHA-256 digest helpers."""

import string

import pytest

from password_toolkit.core import digest
from password_toolkit.core.digest import hash_password, is_digest_hex, new_hasher
from password_toolkit.utils.exceptions import HashAlgorithmUnavailableError


class TestHashPassword:
    """Tests for hash_password."""

    @pytest.mark.parametrize("text", ["", "000000", "AbCdEf 123456", "mot de passe é", "🔑" * 100])
    def test_output_is_64_lowercase_hex_chars(self, text):
        result = hash_password(text)
        assert len(result) == 64
        assert set(result) <= set(string.hexdigits.lower())

    def test_known_vectors(self):
        assert hash_password("") == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert hash_password("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"

    def test_is_deterministic(self):
        assert hash_password("123456") == hash_password("123456")

    def test_different_inputs_give_different_digests(self):
        assert hash_password("123456") != hash_password("123457")

    def test_hashes_utf8_bytes(self):
        import hashlib
        assert hash_password("é") == hashlib.sha256("é".encode("utf-8")).hexdigest()

    def test_missing_algorithm_is_fatal(self, monkeypatch):
        monkeypatch.setattr(digest, "DIGEST_ALGORITHM", "no-such-digest")
        with pytest.raises(HashAlgorithmUnavailableError):
            hash_password("000000")
        with pytest.raises(HashAlgorithmUnavailableError):
            new_hasher()


class TestIsDigestHex:
    """Tests for the digest shape check."""

    def test_accepts_hash_password_output(self):
        assert is_digest_hex(hash_password("x"))

    @pytest.mark.parametrize("value", [
        "",
        "abc",
        "0" * 63,
        "0" * 65,
        hash_password("x").upper(),
        "g" * 64,
        None,
    ])
    def test_rejects_other_shapes(self, value):
        assert not is_digest_hex(value)
