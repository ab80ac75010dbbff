"""
Share stores.
Each store keeps the shares of one split together under a group id.
"""

from sealshare.stores.base import ShareStore
from sealshare.stores.local import LocalShareStore

__all__ = [
    "ShareStore",
    "LocalShareStore",
]
