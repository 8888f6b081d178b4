"""
Reference SHA-256

Independent SHA-256 digests computed by the `cryptography` package
(OpenSSL-backed). Used to cross-check the from-scratch implementation
in self-tests and the test suite.
"""

from cryptography.hazmat.primitives import hashes


REFERENCE_ALGORITHM = hashes.SHA256()


def reference_sha256(data: bytes) -> bytes:
    """Compute the 32-byte SHA-256 digest with the cryptography library."""
    digest = hashes.Hash(REFERENCE_ALGORITHM)
    digest.update(bytes(data))
    return digest.finalize()


def reference_sha256_hex(data: bytes) -> str:
    """Compute the SHA-256 hex digest with the cryptography library."""
    return reference_sha256(data).hex()
