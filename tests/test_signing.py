"""Tests for share signing and verification."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from sealshare.errors import CryptoConfigurationFailure
from sealshare.signing import KeyMaterial, Signer


DATA = b"\x00\x80share-value-bytes"


def test_rsa_sign_and_verify(rsa_keys):
    """SHA256withRSA signatures verify and reject other data."""
    signer = Signer(rsa_keys)
    signature = signer.sign(DATA)
    assert signer.verify(DATA, signature)
    assert not signer.verify(DATA + b"x", signature)


def test_verify_rejects_flipped_signature_bit(rsa_keys):
    """A single flipped bit returns False rather than raising."""
    signer = Signer(rsa_keys)
    signature = bytearray(signer.sign(DATA))
    signature[-1] ^= 0x01
    assert signer.verify(DATA, bytes(signature)) is False


def test_verify_rejects_garbage_signature(rsa_keys):
    signer = Signer(rsa_keys)
    assert signer.verify(DATA, b"") is False
    assert signer.verify(DATA, b"\xff" * 300) is False


def test_other_key_pair_does_not_verify(rsa_keys):
    """A signature from a different key pair is rejected."""
    other = Signer(KeyMaterial.generate("RSA", 2048, "SHA256withRSA"))
    assert not Signer(rsa_keys).verify(DATA, other.sign(DATA))


@pytest.mark.parametrize("asymmetric, size, algorithm", [
    ("EC", 256, "SHA256withECDSA"),
    ("EC", 384, "SHA384withECDSA"),
    ("Ed25519", 0, "Ed25519"),
    ("RSA", 2048, "SHA512withRSA"),
])
def test_supported_algorithms(asymmetric, size, algorithm):
    signer = Signer(KeyMaterial.generate(asymmetric, size, algorithm))
    signature = signer.sign(DATA)
    assert signer.verify(DATA, signature)
    assert not signer.verify(b"tampered", signature)


def test_unknown_signature_algorithm(rsa_keys):
    keys = KeyMaterial(rsa_keys.private_key, rsa_keys.public_key, "MD5withDSA")
    with pytest.raises(CryptoConfigurationFailure):
        Signer(keys)


def test_algorithm_key_mismatch(rsa_keys):
    """An ECDSA algorithm cannot drive an RSA key."""
    keys = KeyMaterial(rsa_keys.private_key, rsa_keys.public_key, "SHA256withECDSA")
    with pytest.raises(CryptoConfigurationFailure):
        Signer(keys)


def test_unknown_asymmetric_algorithm():
    with pytest.raises(CryptoConfigurationFailure):
        KeyMaterial.generate("DSA-9000", 2048, "SHA256withRSA")


def test_unsupported_ec_key_size():
    with pytest.raises(CryptoConfigurationFailure):
        KeyMaterial.generate("EC", 1000, "SHA256withECDSA")


def test_rsa_key_too_small():
    with pytest.raises(CryptoConfigurationFailure):
        KeyMaterial.generate("RSA", 256, "SHA256withRSA")


def test_pem_round_trip(rsa_keys):
    """Keys reloaded from PEM verify signatures made before the restart."""
    signature = Signer(rsa_keys).sign(DATA)

    reloaded = KeyMaterial.from_pem(rsa_keys.private_pem(b"pw"), "SHA256withRSA", password=b"pw")
    assert Signer(reloaded).verify(DATA, signature)

    with pytest.raises(CryptoConfigurationFailure):
        KeyMaterial.from_pem(b"not a pem")
