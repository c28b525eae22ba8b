"""Project-wide exception types."""

class StatDistError(Exception):
    """Base exception for all library errors."""


class InvalidParameterError(StatDistError, ValueError):
    """Raised when distribution parameters violate their constraints."""


class DataSourceError(StatDistError):
    """Raised when sample data is missing or unusable."""


class DistributionFitError(StatDistError):
    """Raised when distribution fitting fails or is implausible."""


class ConfigError(StatDistError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""
