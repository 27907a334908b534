class DocverifyError(Exception):
    """Base exception for all pipeline errors."""


class ConfigurationError(DocverifyError):
    """Raised when required configuration is missing or invalid."""


class AuthError(ConfigurationError):
    """Raised when an external service credential is not configured."""


class ValidationError(DocverifyError):
    """Raised when caller input is rejected before any network call."""


class UpstreamError(DocverifyError):
    """Raised on transport-level failures talking to an external service."""
