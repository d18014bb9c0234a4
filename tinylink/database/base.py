"""Abstract base class for link store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, List
from datetime import datetime

from .models import Link


class LinkStoreBase(ABC):
    """Abstract base class for link store operations.

    Every implementation is the single owner of its Link records; callers
    never mutate a returned Link in place.
    """

    #: Backend identifier reported by health checks
    name = "abstract"

    @abstractmethod
    async def create(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> Link:
        """Create a new link.

        Args:
            short_code: The short code to use
            original_url: The destination URL (already validated)
            created_at: Optional creation timestamp (defaults to now UTC)

        Returns:
            The stored link with zero clicks

        Raises:
            DuplicateKeyError: If short_code already exists
        """
        pass

    @abstractmethod
    async def find(self, short_code: str) -> Optional[Link]:
        """Get the link for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The link if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_all(self) -> List[Link]:
        """List every link, newest first.

        Returns:
            A fresh list ordered by created_at descending
        """
        pass

    @abstractmethod
    async def increment_clicks(self, short_code: str) -> Optional[Link]:
        """Record one click: bump the counter and stamp last_clicked.

        Args:
            short_code: The short code that was visited

        Returns:
            The updated link, or None if the code does not exist
        """
        pass

    @abstractmethod
    async def exists(self, short_code: str) -> bool:
        """Check if a short code is assigned.

        Args:
            short_code: The short code to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    async def delete(self, short_code: str) -> bool:
        """Delete a link.

        Args:
            short_code: The short code to delete

        Returns:
            True if it was present and removed, False if not found
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release connections held by the store."""
        pass
