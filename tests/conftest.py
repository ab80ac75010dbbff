"""Shared fixtures. Prime and key generation are slow, so contexts are built once."""

import sys
from pathlib import Path

import pytest
from Crypto.Util.number import getPrime

sys.path.insert(0, str(Path(__file__).parent.parent))

from sealshare.config import SharingConfig, SharingContext
from sealshare.shamir import SecretSharing
from sealshare.signing import KeyMaterial


@pytest.fixture(scope="session")
def rsa_keys():
    return KeyMaterial.generate("RSA", 2048, "SHA256withRSA")


@pytest.fixture(scope="session")
def config_512():
    return SharingConfig(bit_size=512, max_shares=60)


@pytest.fixture(scope="session")
def sharing_512(config_512, rsa_keys):
    """512-bit modulus, 60 shares max — the small test configuration."""
    return SecretSharing(SharingContext(config=config_512, prime=getPrime(512), keys=rsa_keys))


@pytest.fixture(scope="session")
def sharing_2048(rsa_keys):
    """Default 2048-bit modulus."""
    config = SharingConfig()
    return SecretSharing(SharingContext(config=config, prime=getPrime(2048), keys=rsa_keys))
