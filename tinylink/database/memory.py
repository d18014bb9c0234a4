"""In-process link store used when no database is reachable."""

import logging
import threading
from itertools import count
from typing import Callable, Dict, List, Optional
from datetime import datetime

from .base import LinkStoreBase
from .models import Link, utc_now
from ..errors import DuplicateKeyError


class MemoryLinkStore(LinkStoreBase):
    """Volatile link store backed by a dict.

    Each mutation runs inside one critical section without awaiting, so
    check-and-insert and increments are atomic with respect to other
    coroutines and threads, and a cancelled caller cannot leave a record
    half-updated. Records are copied on the way out.
    """

    name = "memory"

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize an empty store.

        Args:
            clock: Source of timestamps for created_at/last_clicked
            logger: Optional logger instance
        """
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)
        self._links: Dict[str, Link] = {}
        # short_code -> insertion sequence, for ordering equal created_at values
        self._sequence: Dict[str, int] = {}
        self._counter = count()
        self._lock = threading.Lock()
        self.logger.info("In-memory link store initialized")

    async def create(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> Link:
        link = Link(
            short_code=short_code,
            original_url=original_url,
            created_at=created_at or self.clock(),
        )

        with self._lock:
            if short_code in self._links:
                raise DuplicateKeyError(short_code)
            self._links[short_code] = link
            self._sequence[short_code] = next(self._counter)

        self.logger.info(f"Created link: {short_code} -> {original_url}")
        return link.copy()

    async def find(self, short_code: str) -> Optional[Link]:
        with self._lock:
            link = self._links.get(short_code)
            return link.copy() if link else None

    async def list_all(self) -> List[Link]:
        with self._lock:
            snapshot = [
                (link.created_at, self._sequence[code], link.copy())
                for code, link in self._links.items()
            ]

        snapshot.sort(key=lambda item: (item[0], item[1]), reverse=True)
        return [link for _, _, link in snapshot]

    async def increment_clicks(self, short_code: str) -> Optional[Link]:
        with self._lock:
            link = self._links.get(short_code)
            if link is None:
                return None
            link.clicks += 1
            link.last_clicked = self.clock()
            updated = link.copy()

        self.logger.debug(f"Incremented clicks for {short_code}: {updated.clicks}")
        return updated

    async def exists(self, short_code: str) -> bool:
        with self._lock:
            return short_code in self._links

    async def delete(self, short_code: str) -> bool:
        with self._lock:
            removed = self._links.pop(short_code, None)
            self._sequence.pop(short_code, None)

        if removed is not None:
            self.logger.info(f"Deleted link: {short_code}")
        return removed is not None

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        """Nothing to release; records stay until the process exits."""
        pass

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)
