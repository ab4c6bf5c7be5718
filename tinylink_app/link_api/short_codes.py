"""
Short code generation for the in-memory link API.
The real server owns code generation; this only feeds the local stand-in.
"""

import string
import random
from typing import Container


class RandomShortCodeStrategy:
    """
    Random alphanumeric codes with collision checking.

    Pros: Simple, unpredictable
    Cons: Collision risk grows with the number of stored links
    """

    def __init__(self, length: int = 6, max_retries: int = 5):
        self.length = length
        self.max_retries = max_retries
        self.characters = string.ascii_letters + string.digits

    def generate(self, taken: Container[str]) -> str:
        """
        Generate a code not present in `taken`.

        Raises:
            RuntimeError: every attempt collided
        """
        for _ in range(self.max_retries):
            short_code = self._generate_random_string()
            if short_code not in taken:
                return short_code

        raise RuntimeError(
            f"Could not generate unique short code after {self.max_retries} attempts"
        )

    def _generate_random_string(self) -> str:
        """Generate a random string of specified length"""
        return ''.join(random.choice(self.characters) for _ in range(self.length))
