"""
sealshare — Signed Shamir Secret Sharing
Split a text secret into N shares where any K reconstruct it exactly.

Every share is signed when it is created. Reconstruction verifies every
signature before interpolating, so a forged or corrupted share is rejected
instead of silently producing a wrong secret.

Usage:
    from sealshare import SecretSharing, SharingContext
    sharing = SecretSharing(SharingContext.generate())
    shares = sharing.split_secret(2, 4, "Super Secret")
    sharing.recover_secret(shares[:2])
"""

from sealshare.config import SharingConfig, SharingContext
from sealshare.errors import (
    SecretSharingError,
    InvalidParameter,
    InvalidEncoding,
    SecretTooLarge,
    EmptyShareSet,
    IntegrityViolation,
    CryptoConfigurationFailure,
    SigningFailure,
)
from sealshare.shamir import SecretSharing, Share, dump_shares, load_shares
from sealshare.signing import KeyMaterial, Signer

__version__ = "0.1.0"
__all__ = [
    "SecretSharing",
    "Share",
    "SharingConfig",
    "SharingContext",
    "KeyMaterial",
    "Signer",
    "dump_shares",
    "load_shares",
    "SecretSharingError",
    "InvalidParameter",
    "InvalidEncoding",
    "SecretTooLarge",
    "EmptyShareSet",
    "IntegrityViolation",
    "CryptoConfigurationFailure",
    "SigningFailure",
]
