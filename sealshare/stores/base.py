"""
Base class for all share stores.
Persistence is optional: SecretSharing never needs a store to split or recover.
"""

import re
from abc import ABC, abstractmethod

from sealshare.errors import InvalidParameter
from sealshare.shamir import Share


GROUP_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def check_group_id(group_id: str) -> str:
    """Reject group ids that are unsafe as file or key names."""
    if not isinstance(group_id, str) or not GROUP_ID_PATTERN.match(group_id):
        raise InvalidParameter(f"Invalid group id: {group_id!r}")
    return group_id


class ShareStore(ABC):
    """Abstract base class for keeping the shares of one split together."""

    @abstractmethod
    def save_group(self, group_id: str, shares: list[Share]) -> dict:
        """
        Store all shares produced by one split under a group id.

        Args:
            group_id: Caller-chosen identifier for the split.
            shares: The shares to keep. Replaces any earlier group.

        Returns:
            Storage receipt (location, share count, etc.)
        """

    @abstractmethod
    def load_group(self, group_id: str) -> list[Share] | None:
        """Load a stored group, or None if it does not exist."""

    @abstractmethod
    def delete_group(self, group_id: str) -> bool:
        """Delete a stored group. Returns False if it did not exist."""

    @abstractmethod
    def list_groups(self) -> list[str]:
        """List stored group ids."""
