"""
Type aliases shared by the decoration layer.
"""

from typing import Any, Callable, Mapping, Optional, TypeVar

S = TypeVar("S", bound=Mapping[str, Any])
A = TypeVar("A")

# Nested mapping of field -> message (or nested report)
Report = Mapping[str, Any]

# Reducer signature: (current_state, action) -> new_state
Reducer = Callable[[Optional[S], Optional[A]], S]

# Validator signature: (state_without_error_key) -> report
Validator = Callable[[Mapping[str, Any]], Report]

# Store-construction primitive: (reducer, preloaded_state, enhancer) -> store
CreateStore = Callable[..., Any]
