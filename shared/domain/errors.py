"""Domain exceptions."""


class ConfigurationError(ValueError):
    """Raised when an alphabet or length bounds cannot describe a search space."""


class OutputSinkError(OSError):
    """Raised when the match output file cannot be opened or written."""
