"""Abstract base class for short code generators.

A generator produces candidate short codes only. It never checks the store:
uniqueness against existing mappings is enforced by URLShortenerService,
which retries on collision.

Example:
    >>> from tinylinks.generators import RandomShortCodeGenerator
    >>> generator = RandomShortCodeGenerator(length=7)
    >>> len(generator.generate_shortcode('https://example.com'))
    7
"""

from abc import ABC, abstractmethod


class ShortCodeBaseGenerator(ABC):
    """Interface for short code generation strategies.

    Methods:
        generate_shortcode(target: str) -> str:
            Return a non-empty candidate short code for the given long URL.
            Implementations may ignore the URL.
    """

    @abstractmethod
    def generate_shortcode(self, target: str) -> str:
        """Produce a candidate short code.

        Args:
            target (str):
                The long URL being shortened.

        Returns:
            str: a non-empty candidate short code.
        """
        pass
