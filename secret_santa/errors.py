"""Exception types for the gift exchange."""


class SecretSantaError(Exception):
    """Base class for gift exchange errors."""


class ValidationError(SecretSantaError, ValueError):
    """Raised when roster input is rejected (empty name, unknown group)."""


class ConfigError(SecretSantaError):
    """Raised when a configuration file cannot be used."""
