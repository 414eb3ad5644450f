"""
Replay runner: fold a sequence of actions through a reducer.

Replay is pure: no store, no subscriptions, the reducer is applied to each
action in order and only the final state is kept.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..core.logging_config import get_logger
from ..redux.action import action_type
from ..redux.reducer import Reducer


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions applied
    """
    state: Any
    applied: int


def replay(
    reducer: Reducer,
    actions: Iterable[Any],
    state: Any = None,
    until: Optional[int] = None,
    source: Optional[str] = None,
) -> ReplayResult:
    """
    Replay actions to reconstruct state.

    Args:
        reducer: Reducer to apply
        actions: Actions in dispatch order
        state: Starting state (None = reducer's initial state)
        until: Stop after this many actions (None = all)
        source: Where the actions came from, for log correlation

    Returns:
        ReplayResult with final state and count

    The reducer substitutes its initial state for None on the first action.
    With no actions to apply nothing calls the reducer, so the starting
    `state` is returned as given (None included).
    """
    log = get_logger(__name__, source=source)
    count = 0

    for action in actions:
        if until is not None and count >= until:
            break
        state = reducer(state, action)
        count += 1
        log.debug("Applied action #%d of type %r", count, action_type(action))

    log.debug("Replay finished after %d actions", count)
    return ReplayResult(state=state, applied=count)
