class ConfigurationError(Exception):
    """Raised when a required input directory or setting is missing."""
