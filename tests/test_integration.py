"""
Integration tests for SHAVault.

Tests end-to-end hashing against independent implementations and the
package entry points.
"""

import pytest
import hashlib
import secrets
from concurrent.futures import ThreadPoolExecutor

import shavault
from shavault.core_crypto.sha256 import sha256, sha256_hex
from shavault.core_crypto.hasher import SHA256
from shavault.core_crypto.reference import reference_sha256, reference_sha256_hex
from shavault.main import main, run_self_check, KNOWN_ANSWERS


class TestAgainstReference:
    """Compare with the cryptography library and hashlib."""

    def test_all_lengths_up_to_four_blocks(self):
        """Every message length from 0 to 200 bytes matches."""
        for length in range(201):
            data = bytes(range(256))[:length]
            assert sha256_hex(data) == reference_sha256_hex(data), f"length {length}"

    def test_random_messages(self):
        """Random messages of varying size match."""
        for length in (1, 17, 64, 300, 1000, 4096):
            data = secrets.token_bytes(length)
            assert sha256(data) == reference_sha256(data)
            assert sha256(data) == hashlib.sha256(data).digest()

    def test_known_answers_match_reference(self):
        """Stored vectors agree with the reference library."""
        for data, expected in KNOWN_ANSWERS:
            assert reference_sha256_hex(data) == expected
            assert sha256_hex(data) == expected

    def test_hasher_object_matches_reference(self):
        """SHA256().exec on text hashes the UTF-8 bytes."""
        hasher = SHA256()
        for text in ["", "hello", "あいうえお", "Ελληνικά", "emoji 🎉"]:
            assert hasher.exec(text) == reference_sha256_hex(text.encode("utf-8"))


class TestConcurrentUse:
    """Independent calls share nothing mutable."""

    def test_parallel_calls(self):
        """Hashing different inputs on threads gives the sequential results."""
        messages = [bytes([i]) * (i * 3) for i in range(40)]
        expected = [sha256_hex(message) for message in messages]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(sha256_hex, messages))

        assert results == expected

    def test_shared_hasher_instance(self):
        """One hasher instance can be used from several threads."""
        hasher = SHA256()
        texts = [f"message {i}" for i in range(20)]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(hasher.exec, texts))
        assert results == [reference_sha256_hex(t.encode()) for t in texts]


class TestPackageEntryPoints:
    """Top-level package exports and the main entry."""

    def test_lazy_exports(self):
        """Public names resolve from the package root."""
        assert shavault.sha256_hex(b"abc") == sha256_hex(b"abc")
        assert shavault.sha256_string("abc") == sha256(b"abc")
        assert shavault.verify_digest(b"abc", sha256_hex(b"abc"))
        assert isinstance(shavault.SHA256(), SHA256)

    def test_unknown_attribute(self):
        """Unknown names raise AttributeError."""
        with pytest.raises(AttributeError):
            shavault.sha512

    def test_self_check_passes(self, capsys):
        """Self-check passes and reports every case."""
        assert run_self_check() is True
        output = capsys.readouterr().out
        assert "✗ FAIL" not in output
        assert "Passed 12/12" in output

    def test_main_exit_code(self, capsys):
        """main() prints the banner and returns 0."""
        assert main() == 0
        output = capsys.readouterr().out
        assert "SHAVault" in output
        assert "64-round compression" in output
