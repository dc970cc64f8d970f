"""
Replay runner: reconstruct state from an action stream.

Replay is pure apart from debug logging: it applies the reducer to each action
in order, starting from the initialisation probe.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from ..core.types import Reducer

logger = logging.getLogger(__name__)

INIT_ACTION_TYPE = "@@validstate/INIT"


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied (initialisation probe excluded)
    """
    state: Mapping[str, Any]
    applied: int


def replay(
    reducer: Reducer,
    actions: Iterable[Any],
    preloaded_state: Optional[Mapping[str, Any]] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: Reducer (usually a validated one)
        actions: Actions in dispatch order
        preloaded_state: Initial state passed to the initialisation probe

    Returns:
        ReplayResult with final state and count
    """
    st = reducer(preloaded_state, {"type": INIT_ACTION_TYPE})
    count = 0

    for action in actions:
        st = reducer(st, action)
        count += 1

    logger.debug("Replayed %d actions", count)
    return ReplayResult(state=st, applied=count)
