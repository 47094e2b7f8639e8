class ParseError(ValueError):
    """Command output did not have the expected shape."""
