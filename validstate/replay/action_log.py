"""
JSONL action log reader.

Each non-blank line is one action: a JSON object with a string "type" field.
"""

import json
from typing import Any, Dict, Iterator

from ..core.errors import ActionLogError


def _decode(line: str, lineno: int) -> Dict[str, Any]:
    try:
        action = json.loads(line)
    except ValueError as e:
        raise ActionLogError(f"line {lineno}: invalid JSON ({e})") from e
    if not isinstance(action, dict):
        raise ActionLogError(f"line {lineno}: action must be a JSON object")
    if not isinstance(action.get("type"), str):
        raise ActionLogError(f"line {lineno}: action is missing a string 'type'")
    return action


def read_actions(path: str) -> Iterator[Dict[str, Any]]:
    """
    Read actions from a JSONL file.

    Args:
        path: Path to JSONL file

    Yields:
        Actions in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ActionLogError: If a line is not a valid action
    """
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            if not line.strip():
                continue
            yield _decode(line, lineno)
