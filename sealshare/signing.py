"""
Share Signing
Sign and verify the byte representation of share values.

Every share leaves the splitter with a signature over its value. The
reconstructor refuses to interpolate until every supplied share verifies,
so a tampered share is caught before it can corrupt the recovered secret.

Algorithm names follow the Java Cryptography Architecture spelling used by
the original service configuration ("SHA256withRSA", "SHA384withECDSA",
"Ed25519"), mapped onto the `cryptography` primitives.
"""

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, padding, rsa

from sealshare.errors import CryptoConfigurationFailure, SigningFailure


RSA_PUBLIC_EXPONENT = 65537

_HASHES = {
    "SHA224": hashes.SHA224,
    "SHA256": hashes.SHA256,
    "SHA384": hashes.SHA384,
    "SHA512": hashes.SHA512,
}

# EC key size selects the curve
_CURVES = {
    256: ec.SECP256R1,
    384: ec.SECP384R1,
    521: ec.SECP521R1,
}

_KEY_TYPES = {
    "RSA": (rsa.RSAPrivateKey, rsa.RSAPublicKey),
    "ECDSA": (ec.EllipticCurvePrivateKey, ec.EllipticCurvePublicKey),
    "ED25519": (ed25519.Ed25519PrivateKey, ed25519.Ed25519PublicKey),
}


def _parse_signature_algorithm(name: str) -> tuple[str, hashes.HashAlgorithm | None]:
    """Split "SHA256withRSA" into ("RSA", SHA256()). Ed25519 has no separate hash."""
    upper = name.upper()
    if upper == "ED25519":
        return "ED25519", None

    digest, sep, family = upper.partition("WITH")
    if not sep or digest not in _HASHES or family not in ("RSA", "ECDSA"):
        raise CryptoConfigurationFailure(f"Unsupported signature algorithm: {name}")
    return family, _HASHES[digest]()


def _generate_private_key(asymmetric_algorithm: str, key_size: int):
    algorithm = asymmetric_algorithm.upper()
    try:
        if algorithm == "RSA":
            return rsa.generate_private_key(
                public_exponent=RSA_PUBLIC_EXPONENT,
                key_size=key_size,
            )
        if algorithm in ("EC", "ECDSA"):
            if key_size not in _CURVES:
                raise CryptoConfigurationFailure(
                    f"Unsupported EC key size: {key_size} (use 256, 384 or 521)"
                )
            return ec.generate_private_key(_CURVES[key_size]())
        if algorithm == "ED25519":
            return ed25519.Ed25519PrivateKey.generate()
    except (ValueError, UnsupportedAlgorithm) as e:
        raise CryptoConfigurationFailure(
            f"Cannot generate {asymmetric_algorithm} key pair: {e}"
        ) from e

    raise CryptoConfigurationFailure(f"Unsupported asymmetric algorithm: {asymmetric_algorithm}")


@dataclass(frozen=True)
class KeyMaterial:
    """
    An asymmetric key pair plus the signature algorithm that uses it.

    Generated once per configuration and read-only afterwards. The keys
    never travel inside a Share.
    """
    private_key: object
    public_key: object
    signature_algorithm: str = "SHA256withRSA"

    @classmethod
    def generate(
        cls,
        asymmetric_algorithm: str = "RSA",
        key_size: int = 2048,
        signature_algorithm: str = "SHA256withRSA",
    ) -> "KeyMaterial":
        """Generate a fresh key pair for the given algorithms."""
        private_key = _generate_private_key(asymmetric_algorithm, key_size)
        return cls(
            private_key=private_key,
            public_key=private_key.public_key(),
            signature_algorithm=signature_algorithm,
        )

    @classmethod
    def from_pem(
        cls,
        private_pem: bytes,
        signature_algorithm: str = "SHA256withRSA",
        password: bytes = None,
    ) -> "KeyMaterial":
        """Load a PEM-encoded private key, e.g. one kept across restarts."""
        try:
            private_key = serialization.load_pem_private_key(private_pem, password=password)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise CryptoConfigurationFailure(f"Cannot load private key: {e}") from e
        return cls(
            private_key=private_key,
            public_key=private_key.public_key(),
            signature_algorithm=signature_algorithm,
        )

    def private_pem(self, password: bytes = None) -> bytes:
        """Serialize the private key as PKCS#8 PEM, encrypted if a password is given."""
        if password:
            encryption = serialization.BestAvailableEncryption(password)
        else:
            encryption = serialization.NoEncryption()
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=encryption,
        )


class Signer:
    """
    Signs and verifies share value bytes with one KeyMaterial.

    Holds no per-call state, so a single Signer can be shared by
    concurrent split and recover operations.

    Args:
        keys: The key pair and signature algorithm to use.

    Raises:
        CryptoConfigurationFailure: If the algorithm is unknown or does not
            match the key type.
    """

    def __init__(self, keys: KeyMaterial):
        self.keys = keys
        self._family, self._hash = _parse_signature_algorithm(keys.signature_algorithm)

        private_type, public_type = _KEY_TYPES[self._family]
        if not isinstance(keys.private_key, private_type) or not isinstance(keys.public_key, public_type):
            raise CryptoConfigurationFailure(
                f"{keys.signature_algorithm} cannot be used with "
                f"{type(keys.private_key).__name__}"
            )

    def sign(self, data: bytes) -> bytes:
        """Sign data with the private key."""
        try:
            if self._family == "RSA":
                return self.keys.private_key.sign(data, padding.PKCS1v15(), self._hash)
            if self._family == "ECDSA":
                return self.keys.private_key.sign(data, ec.ECDSA(self._hash))
            return self.keys.private_key.sign(data)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SigningFailure(f"Signing with {self.keys.signature_algorithm} failed: {e}") from e

    def verify(self, data: bytes, signature: bytes) -> bool:
        """
        Verify a signature with the public key.

        Returns:
            True if the signature matches, False otherwise.

        Raises:
            CryptoConfigurationFailure: If the public key cannot be used.
        """
        try:
            if self._family == "RSA":
                self.keys.public_key.verify(signature, data, padding.PKCS1v15(), self._hash)
            elif self._family == "ECDSA":
                self.keys.public_key.verify(signature, data, ec.ECDSA(self._hash))
            else:
                self.keys.public_key.verify(signature, data)
        except InvalidSignature:
            return False
        except UnsupportedAlgorithm as e:
            raise CryptoConfigurationFailure(
                f"Verifying with {self.keys.signature_algorithm} failed: {e}"
            ) from e
        return True
