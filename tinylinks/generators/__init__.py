from tinylinks.generators.base import ShortCodeBaseGenerator
from tinylinks.generators.sequential import SequentialShortCodeGenerator
from tinylinks.generators.secure_random import RandomShortCodeGenerator


__all__ = [
    'ShortCodeBaseGenerator',
    'SequentialShortCodeGenerator',
    'RandomShortCodeGenerator',
]
