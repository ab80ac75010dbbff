"""
Shamir's Secret Sharing with signed shares
Split a text secret into N shares where any K can reconstruct it.

The secret's integer encoding is the constant term of a random polynomial
over a large prime field. Each share is one point on that polynomial plus a
signature over the point's value, so a forged or corrupted share is
rejected before Lagrange interpolation ever sees it.

Shares are evaluated at x = 0..N-1, so share 0 is f(0) itself: its value
is the encoded secret, and any set containing it recovers the secret
whatever K was. Only shares 1..N-1 carry the threshold guarantee.

Supplying fewer than K shares to recover_secret is not detectable: no
share records K, and interpolation over shares 1..N-1 simply yields a
different (wrong) constant term.
"""

import base64
import binascii
import json
import logging
from dataclasses import dataclass

from Crypto.Util.number import getPrime

from sealshare.codec import decode_secret, encode_secret, to_signed_bytes
from sealshare.config import SharingContext
from sealshare.errors import EmptyShareSet, IntegrityViolation, InvalidParameter
from sealshare.field import evaluate_polynomial, interpolate_at_zero
from sealshare.signing import Signer
from sealshare.validation import validate_split_request


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """A single signed share of a split secret."""
    index: int        # The x-coordinate (0-indexed)
    value: int        # The y-coordinate, reduced modulo the prime
    signature: bytes  # Signature over to_signed_bytes(value)

    def to_dict(self) -> dict:
        """
        Serialize to the wire representation.

        The value travels as decimal text so JSON consumers never lose
        precision; the signature travels as standard base64.
        """
        return {
            "index": self.index,
            "value": str(self.value),
            "signature": base64.b64encode(self.signature).decode("ascii"),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Share":
        """
        Deserialize from the wire representation.

        Accepts "share" as an alias for "value" and an integer value as well
        as decimal text.

        Raises:
            InvalidParameter: If any field is missing or malformed.
        """
        if not isinstance(data, dict):
            raise InvalidParameter("Share must be a JSON object")

        index = data.get("index")
        value = data.get("value", data.get("share"))
        signature = data.get("signature")

        if not isinstance(index, int) or isinstance(index, bool) or index < 0:
            raise InvalidParameter(f"Invalid share index: {index!r}")

        if isinstance(value, str):
            digits = value.strip()
            if not (digits.isascii() and digits.isdigit()):
                raise InvalidParameter(f"Invalid value for share at index: {index}")
            try:
                value = int(digits)
            except ValueError:
                raise InvalidParameter(f"Invalid value for share at index: {index}") from None
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise InvalidParameter(f"Invalid value for share at index: {index}")

        if not isinstance(signature, str):
            raise InvalidParameter(f"Missing signature for share at index: {index}")
        try:
            raw_signature = base64.b64decode(signature, validate=True)
        except (binascii.Error, ValueError):
            raise InvalidParameter(f"Malformed signature for share at index: {index}") from None

        return cls(index=index, value=value, signature=raw_signature)


def dump_shares(shares: list[Share]) -> str:
    """Serialize shares to a JSON array."""
    return json.dumps([share.to_dict() for share in shares])


def load_shares(text: str) -> list[Share]:
    """
    Deserialize shares from a JSON array.

    Raises:
        InvalidParameter: If the text is not a JSON array of shares.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        raise InvalidParameter("Shares must be a JSON array") from None
    if not isinstance(data, list):
        raise InvalidParameter("Shares must be a JSON array")
    return [Share.from_dict(item) for item in data]


class SecretSharing:
    """
    Splits secrets into signed shares and recovers them.

    All operations are synchronous and allocate their own polynomial and
    share list; the only shared state is the read-only context, so one
    instance can serve concurrent callers.

    Args:
        context: Prime modulus, key material and settings.
    """

    def __init__(self, context: SharingContext):
        self.context = context
        self.signer = Signer(context.keys)

    @property
    def prime(self) -> int:
        return self.context.prime

    def split_secret(self, k: int, n: int, secret: str) -> list[Share]:
        """
        Split a secret into n signed shares, any k of which recover it.

        Args:
            k: Minimum shares needed to reconstruct.
            n: Total shares to generate.
            secret: The text to split.

        Returns:
            n Shares with indices 0..n-1.

        Raises:
            InvalidParameter: k/n out of bounds, or a blank secret.
            InvalidEncoding: The secret is not representable in UTF-8.
            SecretTooLarge: The secret does not fit the modulus.
            SigningFailure: The private key cannot sign.
        """
        validate_split_request(k, n, secret, self.context.config)

        # f(x) = secret + a1*x + ... + a(k-1)*x^(k-1), with probable-prime a_i
        bit_size = self.context.config.bit_size
        coefficients = [encode_secret(secret)]
        for _ in range(k - 1):
            coefficients.append(getPrime(bit_size))

        shares = []
        for i in range(n):
            value = evaluate_polynomial(coefficients, i, self.prime)
            signature = self.signer.sign(to_signed_bytes(value))
            shares.append(Share(index=i, value=value, signature=signature))

        logger.debug("Split secret into %d shares (threshold %d)", n, k)
        return shares

    def recover_secret(self, shares: list[Share]) -> str:
        """
        Verify shares and reconstruct the secret by Lagrange interpolation.

        The number of shares given is the threshold used. Every signature
        is checked first; the first bad one aborts the whole recovery.

        Args:
            shares: Shares from a single split.

        Returns:
            The recovered secret text.

        Raises:
            EmptyShareSet: If no shares are given.
            InvalidParameter: If an item is not a share, an index is not
                below the prime, or indices repeat.
            IntegrityViolation: If a share's signature does not verify.
        """
        shares = list(shares or [])
        if not shares:
            raise EmptyShareSet("Empty shares provided.")

        seen = set()
        for share in shares:
            if not isinstance(share, Share) or share.index < 0 or share.value < 0:
                raise InvalidParameter(f"Invalid share: {share!r}")
            # Indices must stay distinct modulo the prime
            if share.index >= self.prime:
                raise InvalidParameter(f"Share index out of range: {share.index}")
            if share.index in seen:
                raise InvalidParameter(f"Duplicate share index: {share.index}")
            seen.add(share.index)

        for share in shares:
            if not self.signer.verify(to_signed_bytes(share.value), share.signature):
                logger.warning("Signature verification failed for share %d", share.index)
                raise IntegrityViolation(share.index)

        xs = [share.index for share in shares]
        ys = [share.value for share in shares]
        secret_int = interpolate_at_zero(xs, ys, self.prime)

        logger.debug("Recovered secret from %d shares", len(shares))
        return decode_secret(secret_int)
