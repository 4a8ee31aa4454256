"""
Zoo Console - Errors
Exceptions raised when the zoo is wired up with invalid arguments.
"""


class InvalidArgumentError(ValueError):
    """A constructor or factory received an argument it cannot accept."""
    pass
