class InvalidArgumentError(ValueError):
    """A PersonIdent was built with a missing name or email."""
    pass
