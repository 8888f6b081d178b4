"""
SHAVault - Main Entry Point
Prints a banner and runs the SHA-256 known-answer self-check.
"""

import sys
from typing import List, Tuple

from shavault.core_crypto.sha256 import sha256_hex, pad_message, parse_blocks
from shavault.core_crypto.reference import reference_sha256_hex


# FIPS 180-2 examples plus common test vectors
KNOWN_ANSWERS: List[Tuple[bytes, str]] = [
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"hello", "2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824"),
    (b"hello world", "b94d27b9934d3e08a52e52d7da7dabfac484efe37a5380ee9088f7ace2efcde9"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
]

# Message lengths around the point where the length field stops fitting
BOUNDARY_LENGTHS = (55, 56, 63, 64, 119, 120)


def run_self_check() -> bool:
    """
    Hash the known-answer vectors and boundary-length messages.

    Every digest is compared with its stored value (if any) and with the
    cryptography library's SHA-256.

    Returns:
        True if every check passed
    """
    cases = list(KNOWN_ANSWERS)
    cases += [(b"a" * length, None) for length in BOUNDARY_LENGTHS]

    tests_passed = 0
    for number, (data, expected) in enumerate(cases, start=1):
        result = sha256_hex(data)
        reference = reference_sha256_hex(data)
        passed = result == reference and (expected is None or result == expected)
        if passed:
            tests_passed += 1

        label = data[:40] if len(data) <= 40 else data[:37] + b"..."
        blocks = len(parse_blocks(pad_message(data)))
        print(f"\n[Test {number}] {label!r} ({len(data)} bytes, {blocks} block(s))")
        print(f"  Got:       {result}")
        print(f"  Reference: {reference}")
        print(f"  Status: {'✓ PASS' if passed else '✗ FAIL'}")

    print("\n" + "=" * 70)
    print(f"Passed {tests_passed}/{len(cases)}")
    return tests_passed == len(cases)


def main() -> int:
    """Main entry point for SHAVault."""
    print("=" * 70)
    print("SHAVault - SHA-256 from scratch (FIPS 180-2)")
    print("=" * 70)
    print("\nStages:")
    print("  - Padding & length encoding")
    print("  - 512-bit block parsing")
    print("  - Message schedule + 64-round compression")
    print("  - Digest formatting")

    return 0 if run_self_check() else 1


if __name__ == "__main__":
    sys.exit(main())
