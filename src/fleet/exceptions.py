class InvalidConfigurationError(ValueError):
    """Raised when a building configuration is out of range."""
