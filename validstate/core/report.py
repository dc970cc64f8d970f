"""
Read-only helpers over validation reports.

A report is a nested mapping whose leaves are error messages. Absent keys,
None, empty strings and empty nested mappings all mean "no error".
"""

from typing import Any, Iterator, Mapping, Tuple

from .options import DEFAULT_ERROR_KEY


def iter_errors(report: Any, prefix: str = "") -> Iterator[Tuple[str, str]]:
    """
    Yield (dotted_path, message) for every error leaf, depth first, in key order.

    Example:
        list(iter_errors({"dog": {"age": "Dog Age is required"}}))
        -> [("dog.age", "Dog Age is required")]
    """
    if isinstance(report, Mapping):
        items = [(k, report[k]) for k in sorted(report.keys(), key=str)]
    elif isinstance(report, (list, tuple)):
        items = list(enumerate(report))
    else:
        return
    for key, value in items:
        path = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, (Mapping, list, tuple)):
            yield from iter_errors(value, path)
        elif value:
            yield path, str(value)


def has_errors(report: Any) -> bool:
    """Return True if any leaf of the report holds a message."""
    for _ in iter_errors(report):
        return True
    return False


def get_errors(state: Any, error_key: str = DEFAULT_ERROR_KEY) -> Mapping[str, Any]:
    """Return the report stored in a validated state, or an empty mapping."""
    if not isinstance(state, Mapping):
        return {}
    report = state.get(error_key)
    if report is None:
        return {}
    return report
