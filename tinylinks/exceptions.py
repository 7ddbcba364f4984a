"""Application-wide exception hierarchy.

Every exception carries an `error_code` and an `http_status` hint so transport
adapters can translate failures without inspecting messages:

    ValidationError                     -> 400 (client mistake)
    ConfigurationError                  -> 500
    ShortCodeGenerationExhaustedError   -> 503 (collision space exhausted)

Not-found lookups are not exceptions; the service returns None for them.
"""


class TinyLinksError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:tinylinks_error'
    http_status = 500


class ValidationError(TinyLinksError):
    """Base exception for invalid caller input."""

    error_code = 'input:validation_error'
    http_status = 400


class InvalidURLError(ValidationError):
    """Raised when a long URL is blank, malformed, or uses a disallowed scheme."""

    error_code = 'input:invalid_url_error'


class ConfigurationError(TinyLinksError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError, ValidationError):
    """Raised when a component is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
    http_status = 400


class ShortCodeGenerationExhaustedError(TinyLinksError):
    """Raised when every generation attempt produced a short code already in use."""

    error_code = 'capacity:shortcode_generation_exhausted_error'
    http_status = 503

    def __init__(self, attempts: int, message: str | None = None):
        self.attempts = attempts
        super().__init__(message or f'Failed to generate a unique short code after {attempts} attempts.')
