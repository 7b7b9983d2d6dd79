"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConnectionError(AdapterError):
    """Raised when the search provider cannot be reached (DNS, connect, timeout)."""


class DecodeError(AdapterError):
    """Raised when the provider response body cannot be decoded."""


class ConfigurationError(AdapterError):
    """Raised when adapter configuration is invalid."""
