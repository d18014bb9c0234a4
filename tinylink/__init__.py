"""Core business logic for the link shortener."""

from .shortcode import ShortCodeGenerator
from .allocator import CodeAllocator
from .service import LinkService

__version__ = "1.0.0"

__all__ = ["ShortCodeGenerator", "CodeAllocator", "LinkService", "__version__"]
