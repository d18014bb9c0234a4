"""Short code allocation."""

import logging
from typing import Optional

from .shortcode import ShortCodeGenerator
from .database.base import LinkStoreBase
from .common.validators import is_valid_short_code
from .errors import AllocationExhaustedError, CodeTakenError, InvalidFormatError


class CodeAllocator:
    """Produce a valid short code that is not assigned at call time.

    The existence check is advisory: nothing is reserved, so the caller must
    create the link right away and still handle DuplicateKeyError from the
    store if a concurrent request won the race.
    """

    def __init__(
        self,
        store: LinkStoreBase,
        generator: Optional[ShortCodeGenerator] = None,
        max_attempts: int = 5,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize allocator.

        Args:
            store: Store used for existence checks
            generator: Optional short code generator
            max_attempts: Random codes drawn before giving up
            logger: Optional logger
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.store = store
        self.generator = generator or ShortCodeGenerator()
        self.max_attempts = max_attempts
        self.logger = logger or logging.getLogger(__name__)

    async def allocate(self, requested_code: Optional[str] = None) -> str:
        """Return a usable short code.

        Args:
            requested_code: Caller-chosen code, or None for a random one

        Returns:
            The short code

        Raises:
            InvalidFormatError: requested_code is malformed
            CodeTakenError: requested_code is already assigned
            AllocationExhaustedError: every random draw collided
        """
        if requested_code is not None:
            return await self._allocate_custom(requested_code)
        return await self._allocate_random()

    async def _allocate_custom(self, requested_code: str) -> str:
        # One deterministic attempt: a taken custom code is never altered
        is_valid, error = is_valid_short_code(requested_code)
        if not is_valid:
            raise InvalidFormatError(f"Invalid short code: {error}")

        if await self.store.exists(requested_code):
            raise CodeTakenError(requested_code)

        return requested_code

    async def _allocate_random(self) -> str:
        for attempt in range(self.max_attempts):
            code = self.generator.generate_random()

            if not await self.store.exists(code):
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {code}")
                return code

            self.logger.debug(f"Collision on generated code {code}")

        self.logger.error(
            f"Unable to generate unique short code after {self.max_attempts} attempts"
        )
        raise AllocationExhaustedError(self.max_attempts)
