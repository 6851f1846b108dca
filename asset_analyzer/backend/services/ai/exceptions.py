"""
Shared exceptions for AI service modules.
"""


class AIServiceError(Exception):
    """Raised when AI service operations fail."""

    pass


class ConfigurationError(AIServiceError):
    """Raised when the AI service credential is not provisioned."""

    pass
