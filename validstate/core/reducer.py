"""
Reducer decoration: attach a validation report to every transition.

The decorated reducer is a pure function value:
- Same result as the raw reducer, except for the error key field
- The error key is stripped before validation (no report-on-report)
- A fresh report replaces whatever the raw reducer left under the key
"""

from typing import Any, Callable, Dict, Mapping, Optional

from .options import OptionsLike, resolve_options
from .state import assign, omit
from .types import Reducer, Validator

Decorator = Callable[..., Callable[..., Dict[str, Any]]]


def validate_reducer(validate: Validator, options: OptionsLike = None) -> Decorator:
    """
    Build a reducer decorator bound to a validation function.

    Usage:
        decorate = validate_reducer(validate, ValidateOptions(error_key="myErrors"))
        validated = decorate(reducer, preloaded_state)
        new_state = validated(state, action)

    Args:
        validate: Pure function (state_without_error_key) -> report
        options: ValidateOptions or a mapping with ``error_key``/``errorKey``

    Returns:
        Function (reducer, preloaded_state=None) -> validated reducer
    """
    error_key = resolve_options(options).error_key

    def decorate(
        reducer: Reducer, preloaded_state: Optional[Mapping[str, Any]] = None
    ) -> Callable[..., Dict[str, Any]]:
        def validated_reducer(state: Optional[Mapping[str, Any]] = None, action: Any = None) -> Dict[str, Any]:
            if state is None:
                state = preloaded_state
            result = reducer(state, action)
            errors = validate(omit(result, error_key))
            return assign(result, error_key, errors)

        return validated_reducer

    return decorate


def errors_reducer(state: Optional[Mapping[str, Any]] = None, action: Any = None) -> Mapping[str, Any]:
    """
    Pass-through reducer for the error slot of a combined reducer.

    Declares the slot without managing it; the validated reducer overwrites it
    on every transition.
    """
    if state is None:
        return {}
    return state
