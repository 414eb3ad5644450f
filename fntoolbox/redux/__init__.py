"""
Action-keyed state reducers.

- Action / action creators: `type`-discriminated records
- create_reducer: bind a type -> reducer dispatch table
- slice_reducer: declare the table through a chainable SliceBuilder
"""

from .action import (
    Action,
    EmptyActionCreator,
    PayloadActionCreator,
    create_action,
    action_type,
    action_payload,
)
from .reducer import Reducer, SliceBuilder, create_reducer, slice_reducer

__all__ = [
    "Action",
    "EmptyActionCreator",
    "PayloadActionCreator",
    "create_action",
    "action_type",
    "action_payload",
    "Reducer",
    "SliceBuilder",
    "create_reducer",
    "slice_reducer",
]
