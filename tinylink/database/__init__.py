"""Storage layer for the link shortener."""

from .base import LinkStoreBase
from .fallback import FallbackLinkStore, open_link_store
from .memory import MemoryLinkStore
from .models import Link
from .postgres import PostgresLinkStore

__all__ = [
    "LinkStoreBase",
    "FallbackLinkStore",
    "MemoryLinkStore",
    "PostgresLinkStore",
    "Link",
    "open_link_store",
]
