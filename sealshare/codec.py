"""
Secret Codec
Convert between text secrets and the integers the polynomial works on.

The secret's UTF-8 bytes are read as a non-negative big-endian integer.
Share values are signed over their minimal two's-complement bytes, which
carry an extra leading zero byte whenever the top bit of the first content
byte is set. Both sides of a split/recover cycle must agree on these bytes
exactly or every signature check fails.
"""


def encode_secret(text: str) -> int:
    """UTF-8 encode the text and read the bytes as a non-negative integer."""
    return int.from_bytes(text.encode("utf-8"), "big")


def decode_secret(value: int) -> str:
    """
    Inverse of encode_secret.

    Takes the minimal big-endian magnitude of the value and decodes it as
    UTF-8. Byte sequences that are not valid UTF-8 (only produced by a
    share set that cannot reconstruct the secret) decode with U+FFFD
    replacement characters.
    """
    length = (value.bit_length() + 7) // 8
    return value.to_bytes(length, "big").decode("utf-8", errors="replace")


def to_signed_bytes(value: int) -> bytes:
    """
    Minimal big-endian two's-complement bytes of a non-negative integer.

    0x7F -> b"\\x7f", 0x80 -> b"\\x00\\x80", 0 -> b"\\x00".
    """
    if value < 0:
        raise ValueError("Share values are never negative")
    return value.to_bytes(value.bit_length() // 8 + 1, "big", signed=True)
