"""
Local share store.
Keeps each group of shares as a file in a directory we control.

Shares are signed, so tampering on disk is caught at recovery time. An
optional AES-256-GCM key additionally hides the share values at rest.
"""

import json
import logging
import os
import time
from pathlib import Path

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from sealshare.errors import InvalidParameter
from sealshare.shamir import Share, dump_shares, load_shares
from sealshare.stores.base import ShareStore, check_group_id


logger = logging.getLogger(__name__)

NONCE_SIZE = 12  # AES-256-GCM standard
KEY_SIZE = 32


class LocalShareStore(ShareStore):
    """
    File-backed share store.

    Args:
        storage_dir: Directory holding one file per group.
        encryption_key: Optional 32-byte AES key for encryption at rest.
    """

    def __init__(self, storage_dir: str | Path, encryption_key: bytes = None):
        if encryption_key is not None and len(encryption_key) != KEY_SIZE:
            raise InvalidParameter(f"encryption_key must be {KEY_SIZE} bytes")

        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)
        self.encryption_key = encryption_key

    @property
    def _suffix(self) -> str:
        return ".enc" if self.encryption_key else ".json"

    def _group_file(self, group_id: str) -> Path:
        return self.storage_dir / f"group-{check_group_id(group_id)}{self._suffix}"

    def _meta_file(self, group_id: str) -> Path:
        return self.storage_dir / f"group-{check_group_id(group_id)}.meta.json"

    def save_group(self, group_id: str, shares: list[Share]) -> dict:
        """Write the shares, encrypted if the store has a key."""
        group_file = self._group_file(group_id)
        payload = dump_shares(shares).encode("utf-8")

        if self.encryption_key:
            nonce = os.urandom(NONCE_SIZE)
            payload = nonce + AESGCM(self.encryption_key).encrypt(nonce, payload, group_id.encode())

        group_file.write_bytes(payload)

        meta = {
            "group_id": group_id,
            "share_count": len(shares),
            "indices": [share.index for share in shares],
            "stored_at": int(time.time()),
            "encrypted": bool(self.encryption_key),
        }
        self._meta_file(group_id).write_text(json.dumps(meta, indent=2))
        logger.debug("Stored %d shares for group %s", len(shares), group_id)

        return {
            "group_id": group_id,
            "location": str(group_file),
            "share_count": len(shares),
            "success": True,
        }

    def load_group(self, group_id: str) -> list[Share] | None:
        """
        Read a group back.

        Raises:
            InvalidParameter: If the file cannot be decrypted with this key.
        """
        group_file = self._group_file(group_id)
        if not group_file.exists():
            return None

        payload = group_file.read_bytes()
        if self.encryption_key:
            nonce, ciphertext = payload[:NONCE_SIZE], payload[NONCE_SIZE:]
            try:
                payload = AESGCM(self.encryption_key).decrypt(nonce, ciphertext, group_id.encode())
            except InvalidTag:
                raise InvalidParameter(f"Cannot decrypt shares for group {group_id}") from None

        return load_shares(payload.decode("utf-8"))

    def delete_group(self, group_id: str) -> bool:
        group_file = self._group_file(group_id)
        if not group_file.exists():
            return False
        group_file.unlink()
        self._meta_file(group_id).unlink(missing_ok=True)
        return True

    def list_groups(self) -> list[str]:
        groups = []
        for path in sorted(self.storage_dir.glob(f"group-*{self._suffix}")):
            if path.name.endswith(".meta.json"):
                continue
            groups.append(path.name[len("group-"):-len(self._suffix)])
        return groups

    def get_info(self, group_id: str) -> dict | None:
        """Metadata about a stored group, without reading the shares."""
        meta_file = self._meta_file(group_id)
        if not meta_file.exists():
            return None
        return json.loads(meta_file.read_text())
