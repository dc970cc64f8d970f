"""
Core validation primitives.

This module provides the reducer decoration layer:
- validate_reducer: Wrap a reducer so each result carries a validation report
- validate_store: Store enhancer that decorates the reducer before construction
- errors_reducer: Pass-through reducer for the error slot in combined reducers
- Report: Read-only helpers over nested validation reports
- State: Structural copy helpers (omit / assign)
"""

from .options import DEFAULT_ERROR_KEY, ValidateOptions
from .reducer import validate_reducer, errors_reducer
from .store import validate_store
from .report import has_errors, iter_errors, get_errors
from .state import omit, assign
from .errors import ValidStateError, InvalidStateError, ActionLogError

__all__ = [
    "DEFAULT_ERROR_KEY",
    "ValidateOptions",
    "validate_reducer",
    "errors_reducer",
    "validate_store",
    "has_errors",
    "iter_errors",
    "get_errors",
    "omit",
    "assign",
    "ValidStateError",
    "InvalidStateError",
    "ActionLogError",
]
