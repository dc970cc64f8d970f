"""
Load callables from "package.module:attribute" references.
"""

import importlib
from typing import Any, Callable


class LoadError(Exception):
    """Raised when a reference cannot be resolved to a callable."""
    pass


def load_callable(ref: str) -> Callable[..., Any]:
    """
    Resolve ``module:attr`` (attr may be dotted) to a callable.

    Raises:
        LoadError: If the reference is malformed, missing, or not callable
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise LoadError(f"Expected 'module:attribute', got {ref!r}")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise LoadError(f"Cannot import module {module_name!r}: {e}") from e

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise LoadError(f"{module_name!r} has no attribute {attr_path!r}") from e

    if not callable(obj):
        raise LoadError(f"{ref!r} is not callable")
    return obj
