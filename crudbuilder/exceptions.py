class QueryBuilderError(Exception):
    """A base class for all errors raised by query builders."""


class InvalidArgumentError(QueryBuilderError, ValueError):
    """A required argument of a builder method is missing or blank."""


class IllegalStateError(QueryBuilderError, RuntimeError):
    """A builder method was called in a state that does not allow it."""
