"""
Replay system: fold recorded actions through a reducer.

Same actions, same reducer -> same state.
"""

from .runner import ReplayResult, replay
from .source import iter_actions, read_actions, load_reducer

__all__ = [
    "ReplayResult",
    "replay",
    "iter_actions",
    "read_actions",
    "load_reducer",
]
