"""
Action model and action creators.

An action is anything with a `type` discriminant: the Action dataclass
below, or a plain mapping such as {"type": "inc", "payload": 1}.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

from ..core.errors import ActionFormatError


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Discriminant used as the dispatch key (str, int, Enum member, ...)
        payload: Action-specific data, None for empty actions
        meta: Free-form metadata (origin, correlation ids, ...), not part of the hash
    """
    type: Hashable
    payload: Any = None
    meta: Dict[str, Any] = field(default_factory=dict, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        if self.payload is not None:
            out["payload"] = self.payload
        if self.meta:
            out["meta"] = dict(self.meta)
        return out

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Action":
        if "type" not in data:
            raise ActionFormatError(f"Action has no type: {dict(data)!r}")
        return Action(
            type=data["type"],
            payload=data.get("payload"),
            meta=dict(data.get("meta") or {}),
        )


def action_type(action: Any) -> Hashable:
    """
    Get the discriminant of an action (mapping or object).

    Raises:
        ActionFormatError: If the action carries no `type`
    """
    if isinstance(action, Mapping):
        if "type" not in action:
            raise ActionFormatError(f"Action has no type: {dict(action)!r}")
        return action["type"]
    try:
        return action.type
    except AttributeError:
        raise ActionFormatError(f"Action has no type: {action!r}") from None


def action_payload(action: Any) -> Any:
    """Get the payload of an action, None when it carries none."""
    if isinstance(action, Mapping):
        return action.get("payload")
    return getattr(action, "payload", None)


class EmptyActionCreator:
    """
    Action creator producing actions with nothing but `type`.

    Usage:
        reset = EmptyActionCreator("RESET")
        reset()     -> Action(type="RESET")
        reset.type  -> "RESET"
    """

    def __init__(self, type: Hashable) -> None:
        self.type = type

    def __call__(self) -> Action:
        return Action(type=self.type)

    def __repr__(self) -> str:
        return f"EmptyActionCreator({self.type!r})"


class PayloadActionCreator:
    """
    Action creator producing actions that carry a payload.

    Without `prepare` the creator takes exactly one argument, which becomes
    the payload. With `prepare`, the payload is prepare(*args, **kwargs).

    Usage:
        add = PayloadActionCreator("ADD")
        add(5) -> Action(type="ADD", payload=5)

        move = PayloadActionCreator("MOVE", lambda x, y: {"x": x, "y": y})
        move(1, 2) -> Action(type="MOVE", payload={"x": 1, "y": 2})
    """

    def __init__(self, type: Hashable, prepare: Optional[Callable[..., Any]] = None) -> None:
        self.type = type
        self.prepare = prepare

    def __call__(self, *args: Any, **kwargs: Any) -> Action:
        if self.prepare is not None:
            return Action(type=self.type, payload=self.prepare(*args, **kwargs))
        if len(args) != 1 or kwargs:
            raise TypeError(
                f"{self!r} takes exactly one payload argument without prepare, "
                f"got {len(args)} positional and {len(kwargs)} keyword"
            )
        return Action(type=self.type, payload=args[0])

    def __repr__(self) -> str:
        return f"PayloadActionCreator({self.type!r})"


def create_action(type: Hashable, prepare: Optional[Callable[..., Any]] = None, payload: bool = False):
    """
    Build an action creator.

    Args:
        type: Action discriminant, exposed as `creator.type`
        prepare: Builds the payload from the creator's arguments
        payload: Create a payload-bearing creator even without `prepare`

    Returns:
        EmptyActionCreator or PayloadActionCreator
    """
    if prepare is None and not payload:
        return EmptyActionCreator(type)
    return PayloadActionCreator(type, prepare)
