"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-2 §6.2.
This implementation avoids using hashlib and builds the algorithm from scratch.

Stages:
- Padding: Appends 0x80, zero bytes and the 64-bit bit length
- Block Parser: Splits the padded message into 512-bit blocks of 16 words
- Compression: Message schedule expansion + 64 rounds + feed-forward
- Digest Formatter: 8 state words -> 32 bytes -> 64 lowercase hex chars
"""

import hmac
import struct
from typing import List, Sequence, Union

BytesLike = Union[bytes, bytearray, memoryview]


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

BLOCK_SIZE = 64            # bytes per 512-bit block
WORDS_PER_BLOCK = 16
SCHEDULE_LENGTH = 64       # words in the message schedule, one per round
LENGTH_FIELD_SIZE = 8      # 64-bit big-endian bit length
DELIMITER = 0x80
DIGEST_SIZE = 32

_BLOCK_FORMAT = struct.Struct('>16I')
_STATE_FORMAT = struct.Struct('>8I')


# ============================================================================
# Bit Operations
# ============================================================================

def _right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (~x & z & MASK_32)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return _right_rotate(x, 7) ^ _right_rotate(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return _right_rotate(x, 17) ^ _right_rotate(x, 19) ^ (x >> 10)


def _big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return _right_rotate(x, 2) ^ _right_rotate(x, 13) ^ _right_rotate(x, 22)


def _big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return _right_rotate(x, 6) ^ _right_rotate(x, 11) ^ _right_rotate(x, 25)


def _as_bytes(data: BytesLike) -> bytes:
    """Take an immutable copy of a bytes-like message."""
    if isinstance(data, str):
        raise TypeError("Strings must be encoded before hashing (use sha256_string)")
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"Expected a bytes-like object, got {type(data).__name__}"
        ) from None


# ============================================================================
# Padding & Block Parsing
# ============================================================================

def _length_field(byte_length: int) -> bytes:
    """Encode a message length as its bit count, 64-bit big-endian, mod 2^64."""
    bit_length = (byte_length * 8) & MASK_64
    return bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big')


def pad_message(data: BytesLike) -> bytes:
    """
    Pad the message according to FIPS 180-2 §5.1.1.

    Padding rules:
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length in bits as 64-bit big-endian integer

    The caller's buffer is never modified; a padded copy is returned.

    Args:
        data: The original message bytes

    Returns:
        Padded message as bytes (length is a positive multiple of 64 bytes)

    Raises:
        TypeError: If data is not bytes-like
    """
    message = _as_bytes(data)

    # (L + 1 + zeros) % 64 == 56
    zero_count = (BLOCK_SIZE - LENGTH_FIELD_SIZE - 1 - len(message)) % BLOCK_SIZE

    return b''.join((
        message,
        bytes([DELIMITER]),
        b'\x00' * zero_count,
        _length_field(len(message)),
    ))


def parse_blocks(padded: BytesLike) -> List[List[int]]:
    """
    Split a padded message into 512-bit blocks of 16 big-endian 32-bit words.

    Args:
        padded: Output of pad_message

    Returns:
        List of blocks in message order, each a list of 16 words

    Raises:
        ValueError: If the length is not a positive multiple of 64 bytes
    """
    if not padded or len(padded) % BLOCK_SIZE:
        raise ValueError(
            f"Padded message length must be a positive multiple of {BLOCK_SIZE} "
            f"bytes, got {len(padded)}"
        )
    return [list(words) for words in _BLOCK_FORMAT.iter_unpack(padded)]


# ============================================================================
# Compression Engine
# ============================================================================

def create_message_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    if len(words) != WORDS_PER_BLOCK:
        raise ValueError(f"A block has {WORDS_PER_BLOCK} words, got {len(words)}")

    w = list(words)
    for i in range(WORDS_PER_BLOCK, SCHEDULE_LENGTH):
        s0 = _sigma0(w[i - 15])
        s1 = _sigma1(w[i - 2])
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & MASK_32)
    return w


def compress(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression and fold the result into the state.

    Args:
        state: Current hash state (8 32-bit words), left untouched
        w: Message schedule (64 32-bit words)

    Returns:
        New hash state H' where H'[i] = H[i] + working_variable[i] mod 2^32
    """
    if len(state) != 8:
        raise ValueError(f"Hash state has 8 words, got {len(state)}")
    if len(w) != SCHEDULE_LENGTH:
        raise ValueError(f"Message schedule has {SCHEDULE_LENGTH} words, got {len(w)}")

    a, b, c, d, e, f, g, h = state

    for i in range(SCHEDULE_LENGTH):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    return [
        (word + var) & MASK_32
        for word, var in zip(state, (a, b, c, d, e, f, g, h))
    ]


def process_blocks(blocks: Sequence[Sequence[int]]) -> List[int]:
    """
    Fold the compression function over the blocks, starting from H_INITIAL.

    Blocks are processed strictly in order; each depends on the state left
    by the previous one.
    """
    state = list(H_INITIAL)
    for words in blocks:
        state = compress(state, create_message_schedule(words))
    return state


# ============================================================================
# Digest Formatting
# ============================================================================

def state_to_bytes(state: Sequence[int]) -> bytes:
    """Serialize the 8 state words big-endian into the 32-byte digest."""
    return _STATE_FORMAT.pack(*state)


def format_digest(state: Sequence[int]) -> str:
    """Render the final hash state as 64 lowercase hex characters."""
    return ''.join(f'{word:08x}' for word in state)


# ============================================================================
# Public API
# ============================================================================

def sha256(data: BytesLike) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    blocks = parse_blocks(pad_message(data))
    return state_to_bytes(process_blocks(blocks))


def sha256_hex(data: BytesLike) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character lowercase hexadecimal string
    """
    blocks = parse_blocks(pad_message(data))
    return format_digest(process_blocks(blocks))


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))


def verify_digest(data: BytesLike, expected_hex: str) -> bool:
    """
    Check data against an expected hex digest in constant time.

    Case-insensitive. Anything other than exactly 64 hex digits (including
    whitespace-separated groups) never matches.
    """
    if not isinstance(expected_hex, str) or len(expected_hex) != DIGEST_SIZE * 2:
        return False
    try:
        expected = bytes.fromhex(expected_hex)
    except (TypeError, ValueError):
        return False
    if len(expected) != DIGEST_SIZE:
        return False
    return hmac.compare_digest(sha256(data), expected)

