"""
Replay tooling for validated reducers.

Replay folds an action stream through a reducer to reconstruct state.
Must be deterministic: same actions -> same state and same report.
"""

from .runner import INIT_ACTION_TYPE, ReplayResult, replay
from .action_log import read_actions

__all__ = [
    "INIT_ACTION_TYPE",
    "ReplayResult",
    "replay",
    "read_actions",
]
