class InvalidInput(ValueError):
    """Raised when an advisory computation is asked to work on an empty or malformed input."""
