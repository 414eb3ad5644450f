"""
Small value-level combinators: identity, lazyish, local, locker and the
Y fixed-point combinator.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

_UNSET = object()


def identity(x: T) -> T:
    """Return the argument unchanged."""
    return x


def lazyish(x: T) -> Callable[[], T]:
    """Put `x` under function abstraction."""
    return lambda: x


def local(f: Optional[Callable[[], T]] = None) -> Optional[T]:
    """
    Local binding: evaluate `f` right away.

    Lets a block of temporaries live inside an expression:

        area = local(lambda: (lambda w, h: w * h)(3, 4))
    """
    if f is None:
        return None
    return f()


@dataclass
class LockState:
    """
    Mutable cell behind a lock function.

    Fields:
        threshold: Number of pass-through calls before locking
        count: Calls seen so far
        value: Locked value, or _UNSET until the lock engages
    """
    threshold: int
    count: int = 0
    value: Any = _UNSET

    @property
    def locked(self) -> bool:
        return self.value is not _UNSET


def locker(n: int = 1) -> Callable[[T], T]:
    """
    Create a function that can "lock the thing".

    During the first `n` calls the returned function acts as identity.
    The argument of call `n + 1` is memoized, and every later call ignores
    its argument and returns the memoized value.

    Each call to locker() creates an independent lock.

    Example:
        lock = locker()
        lock("Repeat after me!") -> "Repeat after me!"
        lock("I like you!") -> "I like you!"
        lock("I hate you.") -> "I like you!"
    """
    state = LockState(threshold=n)

    def lock(thing: T) -> T:
        if state.locked:
            return state.value
        if state.count < state.threshold:
            state.count += 1
            return thing
        state.value = thing
        return thing

    return lock


def Y(f: Callable[[Callable[..., T]], Callable[..., T]]) -> Callable[..., T]:
    """
    Y-combinator: fixed point of the higher-order function `f`.

    `f` receives the function being defined and returns its body, so
    recursion needs no name:

        fact = Y(lambda self: lambda n: 1 if n <= 1 else n * self(n - 1))
        fact(5) -> 120

    The self-application h(h) sits behind a lambda so it is only expanded
    when the recursive call actually happens.
    """
    return (lambda g: g(g))(
        lambda h: lambda *args, **kwargs: f(h(h))(*args, **kwargs)
    )
