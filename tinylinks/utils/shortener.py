"""Base62 encoding utilities for short codes

The alphabet is Base62 safe: 26 lowercase + 26 uppercase + 10 digits, in that
order, so `encode_base62(0) == 'a'` and `encode_base62(61) == '9'`.

Functions:
    encode_base62(number) -> str:
        Encode a non-negative integer, most significant digit first.
    decode_base62(code) -> int:
        Inverse of encode_base62().

Example:
    >>> from tinylinks.utils import encode_base62
    >>> encode_base62(100_000)
    'Aa4'
    >>> decode_base62('Aa4')
    100000
"""

import string


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)
_INDEX = {char: i for i, char in enumerate(ALPHABET)}


def encode_base62(number: int) -> str:
    """Encode a non-negative integer into a Base62 string.

    Args:
        number (int):
            Integer to encode.

    Returns:
        str: Base62 representation without padding, most significant digit first.

    Raises:
        TypeError: If number is not an integer.
        ValueError: If number is negative.
    """
    if not isinstance(number, int) or isinstance(number, bool):
        raise TypeError(f'Number must be of type integer (given type: {type(number)}).')
    if number < 0:
        raise ValueError(f'Number must be a non-negative integer (given value: {number}).')

    if number == 0:
        return ALPHABET[0]

    digits = []
    while number:
        number, remainder = divmod(number, BASE)
        digits.append(ALPHABET[remainder])
    return ''.join(reversed(digits))


def decode_base62(code: str) -> int:
    """Decode a Base62 string back into an integer.

    Raises:
        ValueError: If code is empty or contains characters outside ALPHABET.
    """
    if not code:
        raise ValueError('Code must be a non-empty string.')

    number = 0
    for char in code:
        if char not in _INDEX:
            raise ValueError(f"Character '{char}' is not part of the Base62 alphabet (given code: {code}).")
        number = number * BASE + _INDEX[char]
    return number
