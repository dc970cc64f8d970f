"""
Store enhancer: decorate the reducer before the store is constructed.
"""

from typing import Any, Callable, Mapping, Optional

from .options import OptionsLike
from .reducer import validate_reducer
from .types import CreateStore, Reducer, Validator


def validate_store(validate: Validator, options: OptionsLike = None) -> Callable[[CreateStore], CreateStore]:
    """
    Build a store enhancer that validates every transition.

    Only the reducer argument is substituted; preloaded state and any inner
    enhancer are passed to ``create_store`` untouched, and its return value is
    returned as-is.

    Usage:
        store = create_store(reducer, validate_store(validate))
    """

    def enhance(create_store: CreateStore) -> CreateStore:
        def create_validated_store(
            reducer: Reducer,
            preloaded_state: Optional[Mapping[str, Any]] = None,
            enhancer: Optional[Callable[[CreateStore], CreateStore]] = None,
        ) -> Any:
            validated = validate_reducer(validate, options)(reducer, preloaded_state)
            return create_store(validated, preloaded_state, enhancer)

        return create_validated_store

    return enhance
