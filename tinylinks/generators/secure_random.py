"""Random fixed-length short code generator

Draws every character independently and uniformly from the Base62 alphabet
using the `secrets` module. Two calls may return the same code; collisions
are resolved by the service's bounded retry loop.

Collision odds for length 7 (62**7 ~ 3.5e12 codes) stay below 1e-5 for the
first million mappings.
"""

import secrets

from tinylinks.constants import CodeLength
from tinylinks.exceptions import BadConfigurationError
from tinylinks.generators.base import ShortCodeBaseGenerator
from tinylinks.utils.shortener import ALPHABET


class RandomShortCodeGenerator(ShortCodeBaseGenerator):
    """Cryptographically random Base62 short code generator.

    Attributes:
        length (int):
            Number of characters per code, within [CodeLength.MIN, CodeLength.MAX].

    Raises:
        BadConfigurationError:
            If length is not an integer within the allowed bounds.
    """

    def __init__(self, length: int = CodeLength.DEFAULT):
        if not isinstance(length, int) or isinstance(length, bool) or not CodeLength.MIN <= length <= CodeLength.MAX:
            raise BadConfigurationError(
                f'Code length must be an integer between {CodeLength.MIN} and {CodeLength.MAX} (given value: {length!r}).'
            )
        self.length = length

    def generate_shortcode(self, target: str) -> str:
        return ''.join(secrets.choice(ALPHABET) for _ in range(self.length))
