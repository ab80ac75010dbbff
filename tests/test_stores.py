"""Tests for share stores."""

import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from sealshare.errors import IntegrityViolation, InvalidParameter
from sealshare.shamir import Share
from sealshare.stores import LocalShareStore, ShareStore


def test_local_store_round_trip(tmp_path, sharing_512):
    """Stored shares load back and still recover the secret."""
    store = LocalShareStore(tmp_path)
    shares = sharing_512.split_secret(2, 4, "stored secret")

    receipt = store.save_group("team-alpha", shares)
    assert receipt["success"]
    assert receipt["share_count"] == 4
    assert Path(receipt["location"]).name == "group-team-alpha.json"

    loaded = store.load_group("team-alpha")
    assert loaded == shares
    assert sharing_512.recover_secret(loaded[2:]) == "stored secret"

    info = store.get_info("team-alpha")
    assert info["share_count"] == 4
    assert info["indices"] == [0, 1, 2, 3]
    assert info["encrypted"] is False


def test_local_store_encrypted(tmp_path, sharing_512):
    """With a key, share values never appear in plaintext on disk."""
    key = os.urandom(32)
    store = LocalShareStore(tmp_path, encryption_key=key)
    shares = sharing_512.split_secret(2, 3, "encrypted at rest")
    receipt = store.save_group("vault", shares)

    raw = Path(receipt["location"]).read_bytes()
    assert str(shares[0].value).encode() not in raw

    assert store.load_group("vault") == shares

    wrong = LocalShareStore(tmp_path, encryption_key=os.urandom(32))
    with pytest.raises(InvalidParameter):
        wrong.load_group("vault")


def test_local_store_missing_and_delete(tmp_path, sharing_512):
    store = LocalShareStore(tmp_path)
    assert store.load_group("nothing") is None
    assert store.get_info("nothing") is None
    assert store.delete_group("nothing") is False

    store.save_group("a", sharing_512.split_secret(1, 2, "one"))
    store.save_group("b", sharing_512.split_secret(1, 2, "two"))
    assert store.list_groups() == ["a", "b"]

    assert store.delete_group("a") is True
    assert store.list_groups() == ["b"]
    assert store.get_info("a") is None


def test_local_store_tampering_caught_on_recovery(tmp_path, sharing_512):
    """Edits to the stored file are caught by the share signatures."""
    store = LocalShareStore(tmp_path)
    shares = sharing_512.split_secret(2, 3, "on disk")
    receipt = store.save_group("g1", shares)

    path = Path(receipt["location"])
    original = str(shares[1].value)
    tampered = str(shares[1].value + 1)
    path.write_text(path.read_text().replace(original, tampered))

    loaded = store.load_group("g1")
    with pytest.raises(IntegrityViolation) as exc:
        sharing_512.recover_secret(loaded[:2])
    assert exc.value.index == 1


@pytest.mark.parametrize("group_id", ["", "../escape", "a/b", "x" * 65, "dots.are.out", None])
def test_local_store_rejects_unsafe_group_ids(tmp_path, group_id):
    store = LocalShareStore(tmp_path)
    with pytest.raises(InvalidParameter):
        store.save_group(group_id, [])


def test_local_store_rejects_bad_key(tmp_path):
    with pytest.raises(InvalidParameter):
        LocalShareStore(tmp_path, encryption_key=b"short")


def test_store_interface():
    """Stores must implement the full interface."""
    assert issubclass(LocalShareStore, ShareStore)

    class Partial(ShareStore):
        def save_group(self, group_id: str, shares: list[Share]) -> dict:
            return {}

    with pytest.raises(TypeError):
        Partial()
