"""Short code generation utilities."""

import random
import string
from typing import Optional


class ShortCodeGenerator:
    """Generate random short codes."""

    # Base36 characters (lowercase letters and digits)
    BASE36_CHARS = string.ascii_lowercase + string.digits

    def __init__(
        self,
        default_length: int = 6,
        alphabet: str = BASE36_CHARS,
        rng: Optional[random.Random] = None,
    ):
        """Initialize short code generator.

        Codes are for collision avoidance, not secrecy, so a plain PRNG is used.

        Args:
            default_length: Default length for generated codes
            alphabet: Characters to draw from
            rng: Optional random.Random instance (seedable for tests)
        """
        if default_length < 1:
            raise ValueError("default_length must be at least 1")
        self.default_length = default_length
        self.alphabet = alphabet
        self.rng = rng or random.Random()

    def generate_random(self, length: Optional[int] = None) -> str:
        """Generate a random short code.

        Args:
            length: Length of the code (uses default if not specified)

        Returns:
            Random short code
        """
        length = length or self.default_length
        return "".join(self.rng.choices(self.alphabet, k=length))
