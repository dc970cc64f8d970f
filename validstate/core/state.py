"""
Structural copy helpers for mapping-shaped state.

State is never mutated. Both helpers return a new dict and share unchanged
nested values with the source.
"""

from typing import Any, Dict, Mapping

from .errors import InvalidStateError


def _require_mapping(state: Any) -> Mapping[str, Any]:
    if not isinstance(state, Mapping):
        raise InvalidStateError(
            f"State must be a mapping, got {type(state).__name__}"
        )
    return state


def omit(state: Mapping[str, Any], key: str) -> Dict[str, Any]:
    """
    Copy state without one field.

    Args:
        state: Source mapping
        key: Field to drop (missing key is a no-op)

    Returns:
        New dict without ``key``

    Raises:
        InvalidStateError: If state is not a mapping
    """
    src = _require_mapping(state)
    return {k: v for k, v in src.items() if k != key}


def assign(state: Mapping[str, Any], key: str, value: Any) -> Dict[str, Any]:
    """
    Copy state with one field set (added or overwritten).

    Raises:
        InvalidStateError: If state is not a mapping
    """
    out = dict(_require_mapping(state))
    out[key] = value
    return out
