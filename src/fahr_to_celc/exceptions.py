"""Exceptions raised by fahr_to_celc."""


class EmptyInputError(ValueError):
    """Raised when an operation needs at least one value and got none."""
