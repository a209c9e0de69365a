class UrlShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:url_shortener_error'


class UrlValidationError(UrlShortenerError):
    """Base exception for caller-correctable URL input errors."""

    error_code = 'validation:url_validation_error'


class EmptyInputError(UrlValidationError):
    """Raised when the submitted URL is empty after trimming whitespace."""

    error_code = 'validation:empty_input_error'


class InvalidUrlError(UrlValidationError):
    """Raised when the normalized URL is not a well-formed absolute http(s) URL."""

    error_code = 'validation:invalid_url_error'


class ConfigurationError(UrlShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
