# SHAVault
"""
SHA-256 computed from scratch per FIPS 180-2 §6.2.

    >>> from shavault import sha256_hex
    >>> sha256_hex(b"abc")
    'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'
"""

__version__ = "1.0.0"

_EXPORTS = {
    'sha256': 'sha256',
    'sha256_hex': 'sha256',
    'sha256_string': 'sha256',
    'verify_digest': 'sha256',
    'SHA256': 'hasher',
}


# Lazy imports to avoid RuntimeWarning when running modules directly
def __getattr__(name):
    """Lazy import of the public API from shavault.core_crypto."""
    if name not in _EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    from importlib import import_module
    module = import_module(f".core_crypto.{_EXPORTS[name]}", __name__)
    return getattr(module, name)

__all__ = [
    'sha256',
    'sha256_hex',
    'sha256_string',
    'verify_digest',
    'SHA256',
]
