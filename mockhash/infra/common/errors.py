"""Centralized error types."""


class MockHashError(Exception):
    """Base exception for mockhash errors."""
    pass


class ConfigError(MockHashError):
    """Configuration error."""
    pass


class CapabilityUnavailable(MockHashError):
    """Hashing primitive cannot be used in this runtime."""
    pass


class EncodingError(MockHashError):
    """Body could not be encoded for its declared content type."""
    pass
