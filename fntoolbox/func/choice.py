"""
Dispatch by key: functional replacement of a `switch` statement.
"""

from typing import Any, Callable, Hashable, Mapping, Optional, Sequence


def _nothing(*_args: Any) -> None:
    return None


def choose(
    key: Hashable,
    actions: Optional[Mapping[Hashable, Callable[..., Any]]] = None,
    default_action: Optional[Callable[..., Any]] = None,
    args: Sequence[Any] = (),
) -> Any:
    """
    Call the function registered under `key`, or `default_action`.

    Args:
        key: Lookup key (exact match, no normalization)
        actions: Mapping of key -> function
        default_action: Called when `key` is not in `actions` (default: returns None)
        args: Positional arguments passed to whichever function is chosen

    Returns:
        Result of the chosen function. Exceptions raised by it propagate.

    Example:
        choose("x", {"x": lambda: 1, "y": lambda: 2}, lambda: 0) -> 1
    """
    if actions is None:
        actions = {}
    if default_action is None:
        default_action = _nothing
    if key in actions:
        return actions[key](*args)
    return default_action(*args)
