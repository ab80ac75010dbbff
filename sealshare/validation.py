"""Input checks that gate a split before any randomness is drawn."""

from sealshare.config import SharingConfig
from sealshare.errors import InvalidEncoding, InvalidParameter, SecretTooLarge


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_split_request(k: int, n: int, secret: str, config: SharingConfig) -> bytes:
    """
    Validate split parameters and the secret.

    Args:
        k: Threshold, shares needed to reconstruct.
        n: Total shares to produce.
        secret: The text to split.
        config: Supplies max_shares and max_byte_size.

    Returns:
        The UTF-8 encoding of the secret.

    Raises:
        InvalidParameter: k/n out of bounds, or the secret missing or blank.
        InvalidEncoding: The secret has unpaired surrogates or a leading NUL.
        SecretTooLarge: The encoded secret does not fit the modulus.
    """
    if not (_is_int(k) and _is_int(n)) or k < 1 or n < 1 or k > n or n > config.max_shares:
        raise InvalidParameter("Invalid parameter(s) provided.")
    if not isinstance(secret, str) or not secret.strip():
        raise InvalidParameter("Invalid parameter(s) provided.")

    try:
        encoded = secret.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidEncoding("Invalid character(s) in secret.") from None

    # Leading zero bytes vanish in the integer encoding
    if encoded.startswith(b"\x00"):
        raise InvalidEncoding("Invalid character(s) in secret.")

    # +1 byte for the sign representation of the share integers
    trimmed_size = len(secret.strip().encode("utf-8")) + 1
    if trimmed_size > config.max_byte_size or len(encoded) + 1 > config.max_byte_size:
        raise SecretTooLarge("Secret byte size overflow for current bit size.")

    return encoded
