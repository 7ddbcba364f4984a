"""Unit tests for RandomShortCodeGenerator.

Test coverage includes:

1. Output format
   - Codes have exactly the configured length.
   - All characters belong to the Base62 alphabet.

2. Configuration
   - Lengths within [4, 12] are accepted.
   - Lengths outside [4, 12] or of the wrong type raise BadConfigurationError.

3. Uniqueness under volume
   - 10,000 codes of length 7 are pairwise distinct.

4. Random source
   - Characters are drawn through the `secrets` module.
"""

from unittest.mock import patch

import pytest

from tinylinks.exceptions import BadConfigurationError
from tinylinks.generators import RandomShortCodeGenerator
from tinylinks.utils.shortener import ALPHABET


# -------------------------------
# 1. Output format
# -------------------------------


def test_default_length_is_seven():
    generator = RandomShortCodeGenerator()
    assert len(generator.generate_shortcode('https://example.com')) == 7


@pytest.mark.parametrize('length', [4, 5, 8, 12])
def test_codes_have_configured_length(length):
    generator = RandomShortCodeGenerator(length=length)
    for _ in range(50):
        code = generator.generate_shortcode('https://example.com')
        assert len(code) == length
        assert set(code) <= set(ALPHABET)


# -------------------------------
# 2. Configuration
# -------------------------------


@pytest.mark.parametrize('length', [0, 3, 13, 100, -7, 7.0, '7', None, True])
def test_invalid_length_raises_error(length):
    with pytest.raises(BadConfigurationError, match='Code length must be an integer between 4 and 12'):
        RandomShortCodeGenerator(length=length)


# -------------------------------
# 3. Uniqueness under volume
# -------------------------------


def test_ten_thousand_codes_are_distinct():
    generator = RandomShortCodeGenerator(length=7)
    codes = [generator.generate_shortcode('https://example.com') for _ in range(10_000)]

    assert len(set(codes)) == 10_000
    assert all(len(code) == 7 for code in codes)
    assert all(set(code) <= set(ALPHABET) for code in codes)


# -------------------------------
# 4. Random source
# -------------------------------


def test_uses_secrets_module():
    generator = RandomShortCodeGenerator(length=4)
    with patch('tinylinks.generators.secure_random.secrets.choice', return_value='Z') as choice:
        assert generator.generate_shortcode('https://example.com') == 'ZZZZ'
    assert choice.call_count == 4
    choice.assert_called_with(ALPHABET)
