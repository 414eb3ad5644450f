"""
Reducer builders.

A reducer is a pure function (state, action) -> new_state. It must not
mutate `state`; returning the same object means "no change".

create_reducer() binds a dispatch table of action type -> reducer.
slice_reducer() builds the same table through a chainable API where every
registration says whether the handler wants the action payload.
"""

import logging
from typing import Any, Callable, Dict, Hashable, Mapping, Optional

from ..core.errors import BuilderSealedError
from ..func.choice import choose
from .action import action_payload, action_type

logger = logging.getLogger(__name__)

# (state, action) -> new_state
Reducer = Callable[[Any, Any], Any]


def create_reducer(init_state: Any) -> Callable[..., Reducer]:
    """
    Create clean and readable reducers.

    Usage:
        counter = create_reducer(0)({
            "inc": lambda state, action: state + 1,
            "dec": lambda state, action: state - 1,
        })
        counter(None, {"type": "inc"}) -> 1

    Args:
        init_state: State used when the reducer is called with state=None

    Returns:
        bind(reducers, default_reducer=None) -> reducer
    """
    def keep_state(state: Any, action: Any) -> Any:
        return state if state is not None else init_state

    def bind(
        reducers: Mapping[Hashable, Reducer],
        default_reducer: Optional[Reducer] = None,
    ) -> Reducer:
        table: Dict[Hashable, Reducer] = dict(reducers)
        fallback = default_reducer if default_reducer is not None else keep_state

        def reducer(state: Any, action: Any) -> Any:
            if state is None:
                state = init_state
            return choose(action_type(action), table, fallback, (state, action))

        return reducer

    return bind


class SliceBuilder:
    """
    Chainable registration API handed to a slice_reducer() builder.

    Usage:
        slice.handle(reset, lambda state: 0) \\
             .handle_payload(add, lambda state, amount: state + amount) \\
             .default(lambda state, action: state)
    """

    def __init__(self) -> None:
        self._reducers: Dict[Hashable, Reducer] = {}
        self._default: Optional[Reducer] = None
        self._sealed = False

    def _register(self, key: Hashable, wrapper: Reducer) -> "SliceBuilder":
        if self._sealed:
            raise BuilderSealedError(f"Slice already built, cannot register {key!r}")
        if key in self._reducers:
            logger.debug("Replacing slice handler for %r", key)
        self._reducers[key] = wrapper
        return self

    def handle(self, action_creator: Any, reducer: Callable[[Any], Any]) -> "SliceBuilder":
        """
        Register a payload-free handler: reducer(state) -> new_state.

        The action itself is not passed on.
        """
        def wrapper(state: Any, action: Any) -> Any:
            return reducer(state)

        return self._register(action_creator.type, wrapper)

    def handle_payload(self, action_creator: Any, reducer: Callable[[Any, Any], Any]) -> "SliceBuilder":
        """Register a payload-aware handler: reducer(state, action.payload) -> new_state."""
        def wrapper(state: Any, action: Any) -> Any:
            return reducer(state, action_payload(action))

        return self._register(action_creator.type, wrapper)

    def default(self, reducer: Reducer) -> "SliceBuilder":
        """Register the fallback for unhandled action types: reducer(state, action)."""
        if self._sealed:
            raise BuilderSealedError("Slice already built, cannot set default reducer")
        self._default = reducer
        return self

    @property
    def fallback(self) -> Optional[Reducer]:
        return self._default

    def seal(self) -> None:
        self._sealed = True

    def table(self) -> Dict[Hashable, Reducer]:
        return dict(self._reducers)


def slice_reducer(init_state: Any) -> Callable[[Callable[[SliceBuilder], None]], Reducer]:
    """
    Reducer for a slice of state, declared through a SliceBuilder.

    Usage:
        reducer = slice_reducer(0)(lambda s: (
            s.handle(reset, lambda state: 0)
             .handle_payload(add, lambda state, amount: state + amount)
        ))

    Each builder invocation starts from an empty table. Once the builder
    returns, the SliceBuilder is sealed and the reducer is bound.
    """
    create = create_reducer(init_state)

    def build(builder: Callable[[SliceBuilder], None]) -> Reducer:
        slice_api = SliceBuilder()
        builder(slice_api)
        slice_api.seal()
        logger.debug("Built slice reducer with %d handlers", len(slice_api.table()))
        return create(slice_api.table(), slice_api.fallback)

    return build
