# Core Cryptography Module
"""
Core SHA-256 implementation:
- Padding & 64-bit length encoding
- 512-bit block parsing
- Message schedule + 64-round compression
- Digest formatting
- Stateless SHA256 hasher object
- Reference digests (cryptography library) for cross-checking
"""
