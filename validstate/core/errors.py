"""
Exception types for validated reducers.
"""


class ValidStateError(Exception):
    """Base class for validstate errors."""
    pass


class InvalidStateError(ValidStateError, TypeError):
    """Raised when a reducer produces a state that is not a mapping."""
    pass


class ActionLogError(ValidStateError):
    """Raised when an action log line cannot be decoded into an action."""
    pass
