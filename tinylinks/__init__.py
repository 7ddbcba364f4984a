from tinylinks.models import URLMappingModel
from tinylinks.service import URLShortenerService
from tinylinks.exceptions import (
    TinyLinksError,
    ValidationError,
    InvalidURLError,
    ConfigurationError,
    BadConfigurationError,
    ShortCodeGenerationExhaustedError,
)


__all__ = [
    'URLMappingModel',
    'URLShortenerService',
    'TinyLinksError',
    'ValidationError',
    'InvalidURLError',
    'ConfigurationError',
    'BadConfigurationError',
    'ShortCodeGenerationExhaustedError',
]
