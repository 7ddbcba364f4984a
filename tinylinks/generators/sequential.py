"""Counter-based short code generator

Issues strictly increasing integers from a process-wide counter and encodes
each one in Base62. Codes never repeat during the lifetime of a generator
instance; they may still collide with mappings seeded into the store from
elsewhere, which the service handles by retrying.

Example:
    >>> generator = SequentialShortCodeGenerator()
    >>> generator.generate_shortcode('https://example.com')
    'Aa4'
    >>> generator.generate_shortcode('https://example.com')
    'Aa5'
"""

import threading

from tinylinks.constants import Sequence
from tinylinks.exceptions import BadConfigurationError
from tinylinks.generators.base import ShortCodeBaseGenerator
from tinylinks.utils.shortener import encode_base62


class SequentialShortCodeGenerator(ShortCodeBaseGenerator):
    """Thread-safe counter + Base62 short code generator.

    Code length grows monotonically as the counter crosses Base62 digit
    boundaries (62**3, 62**4, ...).

    Attributes:
        start (int):
            First integer issued by this generator.
    """

    def __init__(self, start: int = Sequence.START):
        if not isinstance(start, int) or isinstance(start, bool) or start < 0:
            raise BadConfigurationError(f'Counter start must be a non-negative integer (given value: {start!r}).')

        self.start = start
        self._next = start
        self._lock = threading.Lock()

    def _fetch_and_increment(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the next integer this generator will issue."""
        with self._lock:
            return self._next

    def generate_shortcode(self, target: str) -> str:
        return encode_base62(self._fetch_and_increment())
