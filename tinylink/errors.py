"""Exceptions raised by the link core."""


class TinyLinkError(Exception):
    """Base class for all link shortener errors."""


class InvalidFormatError(TinyLinkError, ValueError):
    """A requested short code does not match the code format."""


class InvalidURLError(TinyLinkError, ValueError):
    """A destination URL failed validation."""


class CodeTakenError(TinyLinkError):
    """A requested short code is already assigned."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' already exists")
        self.short_code = short_code


class DuplicateKeyError(TinyLinkError):
    """The store rejected an insert because the short code exists."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' already exists")
        self.short_code = short_code


class AllocationExhaustedError(TinyLinkError):
    """Every random code drawn within the retry budget collided."""

    def __init__(self, attempts: int):
        super().__init__(
            f"Unable to generate unique short code after {attempts} attempts"
        )
        self.attempts = attempts


class NotFoundError(TinyLinkError):
    """An operation targeted a short code that does not exist."""

    def __init__(self, short_code: str):
        super().__init__(f"Short code '{short_code}' not found")
        self.short_code = short_code


class StoreUnavailableError(TinyLinkError):
    """The storage backend could not be reached."""
