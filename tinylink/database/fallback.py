"""Backend selection: durable PostgreSQL with an in-memory fallback."""

import logging
from typing import Optional, List
from datetime import datetime

from .base import LinkStoreBase
from .memory import MemoryLinkStore
from .models import Link
from .postgres import PostgresLinkStore


class FallbackLinkStore(LinkStoreBase):
    """Link store that routes every call to one of two backends.

    The durable backend is used while its ``connected`` flag is set. The
    first time the flag is seen cleared, the store switches to the volatile
    backend for the remainder of the process. Callers never see which one is
    active except through ``name``.
    """

    def __init__(
        self,
        memory: MemoryLinkStore,
        durable: Optional[LinkStoreBase] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize the selector.

        Args:
            memory: Volatile backend, always available
            durable: Optional durable backend exposing a ``connected`` flag
            logger: Optional logger instance
        """
        self.memory = memory
        self.durable = durable
        self.logger = logger or logging.getLogger(__name__)
        self._use_durable = durable is not None and durable.connected

    @property
    def active(self) -> LinkStoreBase:
        """The backend serving the current call."""
        if self._use_durable:
            if self.durable.connected:
                return self.durable
            self._use_durable = False
            self.logger.warning(
                "Durable store disconnected, using in-memory storage from now on"
            )
        return self.memory

    @property
    def name(self) -> str:
        return self.active.name

    @property
    def connected(self) -> bool:
        """True while the durable backend is serving requests."""
        return self.active is self.durable

    async def create(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> Link:
        return await self.active.create(short_code, original_url, created_at)

    async def find(self, short_code: str) -> Optional[Link]:
        return await self.active.find(short_code)

    async def list_all(self) -> List[Link]:
        return await self.active.list_all()

    async def increment_clicks(self, short_code: str) -> Optional[Link]:
        return await self.active.increment_clicks(short_code)

    async def exists(self, short_code: str) -> bool:
        return await self.active.exists(short_code)

    async def delete(self, short_code: str) -> bool:
        return await self.active.delete(short_code)

    async def health_check(self) -> bool:
        return await self.active.health_check()

    async def close(self) -> None:
        if self.durable is not None:
            await self.durable.close()
        await self.memory.close()


async def open_link_store(
    database_url: Optional[str],
    pool_max_size: int = 10,
    connection_timeout_seconds: int = 5,
    create_tables: bool = True,
    logger: Optional[logging.Logger] = None,
) -> FallbackLinkStore:
    """Pick the backend once at startup.

    Args:
        database_url: PostgreSQL connection URL, or empty/None for memory only
        pool_max_size: Maximum size of the PostgreSQL pool
        connection_timeout_seconds: Connection timeout in seconds
        create_tables: Create the links table if missing
        logger: Optional logger instance

    Returns:
        A FallbackLinkStore wrapping whichever backends are usable
    """
    logger = logger or logging.getLogger(__name__)
    memory = MemoryLinkStore(logger=logger)

    if not database_url:
        logger.info("No database URL provided, using in-memory storage only")
        return FallbackLinkStore(memory, logger=logger)

    durable = PostgresLinkStore(
        db_config=database_url,
        pool_max_size=pool_max_size,
        connection_timeout_seconds=connection_timeout_seconds,
        create_tables=create_tables,
        logger=logger,
    )

    if not await durable.connect():
        logger.warning("Using in-memory storage instead")
        await durable.close()
        return FallbackLinkStore(memory, logger=logger)

    return FallbackLinkStore(memory, durable=durable, logger=logger)
