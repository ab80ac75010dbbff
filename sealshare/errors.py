"""
Error taxonomy for secret sharing.

Bad input raises one of the ValueError subclasses before any randomness is
consumed or any signature is computed. A forged or corrupted share raises
IntegrityViolation and aborts the whole reconstruction. Unusable key
material is a configuration problem, not a validation problem.
"""


class SecretSharingError(Exception):
    """Base class for every error raised by sealshare."""


class InvalidParameter(SecretSharingError, ValueError):
    """k/n out of bounds, blank secret, or a malformed share."""


class InvalidEncoding(SecretSharingError, ValueError):
    """The secret cannot be represented as UTF-8."""


class SecretTooLarge(SecretSharingError, ValueError):
    """The encoded secret does not fit the configured modulus."""


class EmptyShareSet(SecretSharingError, ValueError):
    """Reconstruction was asked to work with zero shares."""


class IntegrityViolation(SecretSharingError):
    """A share's signature did not verify."""

    def __init__(self, index: int):
        self.index = index
        super().__init__(f"Invalid signature for share at index: {index}")


class CryptoConfigurationFailure(SecretSharingError):
    """The key material, algorithm or configuration is unusable."""


class SigningFailure(CryptoConfigurationFailure):
    """The private key refused to produce a signature."""
