class ValidationError(ValueError):
    """Malformed input rejected before any search work is done."""
