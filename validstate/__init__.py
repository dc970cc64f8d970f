"""
Validated reducers.

Decorates pure state-transition functions so every transition attaches a fresh
validation report to the resulting state.
"""

from .core import (
    DEFAULT_ERROR_KEY,
    ValidateOptions,
    errors_reducer,
    get_errors,
    has_errors,
    iter_errors,
    validate_reducer,
    validate_store,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ERROR_KEY",
    "ValidateOptions",
    "errors_reducer",
    "get_errors",
    "has_errors",
    "iter_errors",
    "validate_reducer",
    "validate_store",
]
