"""
Exception types raised by streamlab.

Only failures the library itself detects get a dedicated type.
Everything else (bad arguments, failing user callbacks) propagates
as the standard Python exception it already is.
"""


class StreamError(Exception):
    """Base class for all streamlab errors."""
    pass


class NoSuchElementError(StreamError, LookupError):
    """Raised when a value is requested from an empty OptionalValue."""
    pass


class IllegalStateError(StreamError):
    """Raised when an object is used in a state that does not allow it."""
    pass


class StreamConsumedError(IllegalStateError):
    """Raised when a stream is operated on after it has already been used."""
    pass


class DuplicateKeyError(StreamError, KeyError):
    """Raised when to_dict() meets the same key twice without a merge function."""
    pass


class PipelineError(StreamError, ValueError):
    """Raised when a declarative pipeline cannot be built or decoded."""
    pass
