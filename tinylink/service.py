"""Business logic service for the link shortener."""

import logging
from typing import Optional, Dict, Any, List

from .allocator import CodeAllocator
from .database.base import LinkStoreBase
from .database.models import Link
from .common.validators import is_valid_url
from .errors import InvalidURLError, NotFoundError


class LinkService:
    """Service layer for link creation, redirects and housekeeping."""

    def __init__(
        self,
        store: LinkStoreBase,
        allocator: Optional[CodeAllocator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize link service.

        Args:
            store: Link store instance
            allocator: Optional code allocator (built on the same store by default)
            logger: Optional logger
        """
        self.store = store
        self.allocator = allocator or CodeAllocator(store, logger=logger)
        self.logger = logger or logging.getLogger(__name__)

    async def create_link(
        self,
        original_url: str,
        custom_code: Optional[str] = None,
    ) -> Link:
        """Create a new link.

        Args:
            original_url: The destination URL
            custom_code: Optional custom short code

        Returns:
            The stored link

        Raises:
            InvalidURLError: If the destination URL is invalid
            InvalidFormatError: If the custom code is malformed
            CodeTakenError: If the custom code is already assigned
            DuplicateKeyError: If a concurrent request created the same code first
            AllocationExhaustedError: If no free random code was found
        """
        is_valid, error = is_valid_url(original_url)
        if not is_valid:
            raise InvalidURLError(f"Invalid URL: {error}")

        short_code = await self.allocator.allocate(custom_code)
        link = await self.store.create(short_code, original_url)

        self.logger.info(f"Created short URL: {short_code} -> {original_url}")
        return link

    async def resolve(self, short_code: str) -> Optional[Link]:
        """Resolve a short code for a redirect and record the click.

        Args:
            short_code: The short code that was visited

        Returns:
            The link after the click was counted, or None if not found
        """
        link = await self.store.increment_clicks(short_code)

        if link is None:
            self.logger.warning(f"Short code not found: {short_code}")
            return None

        self.logger.debug(f"Redirecting {short_code} -> {link.original_url}")
        return link

    async def get_link(self, short_code: str) -> Link:
        """Look up a link without counting a click.

        Raises:
            NotFoundError: If the short code is not assigned
        """
        link = await self.store.find(short_code)
        if link is None:
            raise NotFoundError(short_code)
        return link

    async def list_links(self) -> List[Link]:
        """List all links, newest first."""
        return await self.store.list_all()

    async def delete_link(self, short_code: str) -> None:
        """Delete a link.

        Args:
            short_code: The short code to delete

        Raises:
            NotFoundError: If the short code is not assigned
        """
        if not await self.store.delete(short_code):
            raise NotFoundError(short_code)

        self.logger.info(f"Deleted short URL: {short_code}")

    async def health_check(self) -> Dict[str, Any]:
        """Perform health check.

        Returns:
            Dictionary with store health, backend name and database connectivity
        """
        healthy = await self.store.health_check()

        return {
            "store": healthy,
            "backend": self.store.name,
            "database_connected": bool(getattr(self.store, "connected", False)),
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
