"""
Configuration for secret sharing.

SharingConfig holds the tunable settings. SharingContext holds what is
generated from them once: the prime modulus and the signing key pair.
The context is passed explicitly to SecretSharing; there are no
module-level singletons.
"""

import logging
import os
from dataclasses import dataclass, field

from Crypto.Util.number import getPrime

from sealshare.errors import CryptoConfigurationFailure
from sealshare.signing import KeyMaterial


logger = logging.getLogger(__name__)

# Defaults of the original service
DEFAULT_BIT_SIZE = 2048
DEFAULT_KEY_PAIR_BIT_SIZE = 2048
DEFAULT_SIGNATURE_ALGORITHM = "SHA256withRSA"
DEFAULT_ASYMMETRIC_ALGORITHM = "RSA"
DEFAULT_MAX_SHARES = 300

ENV_PREFIX = "SECRET_SHARING_"


@dataclass(frozen=True)
class SharingConfig:
    """Settings for one secret sharing deployment."""
    bit_size: int = DEFAULT_BIT_SIZE                  # Modulus size in bits
    key_pair_bit_size: int = DEFAULT_KEY_PAIR_BIT_SIZE
    signature_algorithm: str = DEFAULT_SIGNATURE_ALGORITHM
    asymmetric_algorithm: str = DEFAULT_ASYMMETRIC_ALGORITHM
    max_shares: int = DEFAULT_MAX_SHARES              # Upper bound for n

    def __post_init__(self):
        if self.bit_size < 16:
            raise CryptoConfigurationFailure("bit_size must be at least 16")
        if self.max_shares < 1:
            raise CryptoConfigurationFailure("max_shares must be at least 1")
        # Share indices 0..n-1 must stay distinct modulo the prime
        if self.max_shares >= 2 ** (self.bit_size - 1):
            raise CryptoConfigurationFailure("max_shares too large for bit_size")

    @property
    def max_byte_size(self) -> int:
        """Largest encoded secret (sign byte included) the modulus can hold."""
        return (self.bit_size - 1) // 8

    @classmethod
    def from_env(cls, environ: dict = None) -> "SharingConfig":
        """
        Build a config from SECRET_SHARING_* environment variables.

        Unset variables keep their defaults.
        """
        environ = os.environ if environ is None else environ

        def _int(name: str, default: int) -> int:
            raw = environ.get(ENV_PREFIX + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return int(raw)
            except ValueError:
                raise CryptoConfigurationFailure(
                    f"{ENV_PREFIX + name} must be an integer, got {raw!r}"
                ) from None

        return cls(
            bit_size=_int("BIT_SIZE", DEFAULT_BIT_SIZE),
            key_pair_bit_size=_int("KEY_PAIR_BIT_SIZE", DEFAULT_KEY_PAIR_BIT_SIZE),
            signature_algorithm=environ.get(
                ENV_PREFIX + "SIGNATURE_ALGORITHM", DEFAULT_SIGNATURE_ALGORITHM
            ),
            asymmetric_algorithm=environ.get(
                ENV_PREFIX + "ASYMMETRIC_ALGORITHM", DEFAULT_ASYMMETRIC_ALGORITHM
            ),
            max_shares=_int("MAX_SHARES", DEFAULT_MAX_SHARES),
        )


@dataclass(frozen=True)
class SharingContext:
    """
    The read-only material every split and recover operation shares.

    Safe for unsynchronized concurrent reads. Shares are only recoverable
    under the same context that produced them.
    """
    config: SharingConfig
    prime: int
    keys: KeyMaterial = field(repr=False)

    @classmethod
    def generate(cls, config: SharingConfig = None) -> "SharingContext":
        """Draw a fresh probable-prime modulus and key pair for the config."""
        config = config or SharingConfig()
        prime = getPrime(config.bit_size)
        keys = KeyMaterial.generate(
            asymmetric_algorithm=config.asymmetric_algorithm,
            key_size=config.key_pair_bit_size,
            signature_algorithm=config.signature_algorithm,
        )
        logger.debug(
            "Generated sharing context: %d-bit modulus, %s key pair, %s",
            config.bit_size, config.asymmetric_algorithm, config.signature_algorithm,
        )
        return cls(config=config, prime=prime, keys=keys)
