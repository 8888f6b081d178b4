"""
SHA-256 Hasher Object

Object-style access to the SHA-256 stages. A hasher carries no state of its
own: every exec() call starts from the FIPS initial hash values, so one
instance can be reused for any number of independent messages.

There is no update()/incremental interface; each call hashes one complete
message held in memory.
"""

from typing import List, Sequence, Union

from .sha256 import (
    BytesLike,
    format_digest,
    pad_message,
    parse_blocks,
    process_blocks,
)


class SHA256:
    """
    Stateless SHA-256 hasher.

    Example:
        >>> hasher = SHA256()
        >>> hasher.exec("hello")
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
        >>> hasher.exec(b"hello world")
        'b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9'
    """

    encoding = 'utf-8'

    def exec(self, message: Union[str, BytesLike]) -> str:
        """
        Hash one complete message and return the hex digest.

        Text is hashed as its UTF-8 byte encoding, so each multi-byte
        character contributes all of its bytes.

        Args:
            message: Text or bytes to hash

        Returns:
            64-character lowercase hexadecimal string
        """
        if isinstance(message, str):
            message = message.encode(self.encoding)
        padded = self.add_padding(message)
        blocks = self.into_512bit_blocks(padded)
        return format_digest(self.hash(blocks))

    def add_padding(self, message: BytesLike) -> bytes:
        """Append the 0x80 delimiter, zero fill and 64-bit bit length."""
        return pad_message(message)

    def into_512bit_blocks(self, padded: BytesLike) -> List[List[int]]:
        """Parse the padded message into blocks of 16 32-bit words."""
        return parse_blocks(padded)

    def hash(self, blocks: Sequence[Sequence[int]]) -> List[int]:
        """Run the compression function over all blocks; return the final 8 words."""
        return process_blocks(blocks)

    def __repr__(self) -> str:
        return "SHA256()"
