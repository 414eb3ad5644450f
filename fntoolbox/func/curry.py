"""
Argument-level function transformers: curry, partial, rearg.

    f(a, b, c)  <=>  curry(f)(a)(b)(c)()  <=>  partial(f)(a)(b, c)
"""

from typing import Any, Callable, Tuple

# Fills rearranged positions no index points at
ABSENT = None


def partial(f: Callable[..., Any]) -> Callable[..., Callable[..., Any]]:
    """
    Bind leading arguments of `f`.

    partial(f)(*init)(*rest) == f(*init, *rest)

    The second call invokes `f` right away; wrap in curry() for more stages.
    """
    def bind(*init: Any) -> Callable[..., Any]:
        def call(*rest: Any) -> Any:
            return f(*init, *rest)
        return call
    return bind


def curry(f: Callable[..., Any]) -> Callable[..., Any]:
    """
    Accumulate arguments over any number of calls; a call with no
    arguments invokes `f` with everything collected so far.

    Every call returns a fresh closure, so one intermediate step may be
    continued along several independent branches.

    Example:
        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3)() -> 6
        add3(1, 2)(3)() -> 6
    """
    def curried(*args: Any) -> Any:
        if not args:
            return f()
        return curry(partial(f)(*args))
    return curried


def _arrange(indices: Tuple[int, ...], args: Tuple[Any, ...]) -> list:
    m = len(indices)
    prefix = [ABSENT] * (max(indices) + 1 if indices else 0)
    for position, value in zip(indices, args):
        prefix[position] = value
    return prefix + list(args[m:])


def _awaiting(
    f: Callable[..., Any],
    indices: Tuple[int, ...],
    collected: Tuple[Any, ...],
    remaining: int,
) -> Callable[..., Any]:
    """Continuation that still needs `remaining` arguments before calling `f`."""
    def take(*args: Any) -> Any:
        if not args and remaining > 0:
            return take
        if len(args) >= remaining:
            return f(*_arrange(indices, collected + args))
        return _awaiting(f, indices, collected + args, remaining - len(args))
    return take


def _rearranged(f: Callable[..., Any], indices: Tuple[int, ...]) -> Callable[..., Any]:
    for position in indices:
        if position < 0:
            raise ValueError(f"rearg indices must be non-negative, got {position}")
    return _awaiting(f, indices, (), len(indices))


def rearg(f: Callable[..., Any]) -> Callable[..., Any]:
    """
    Rearrange arguments of `f`.

    Indices are collected in curried form and closed by an empty call.
    The i-th argument of the resulting function becomes argument
    `indices[i]` of `f`. The resulting function is curried down to
    `len(indices)` arguments; extra arguments are passed through after
    the rearranged ones and untargeted positions receive None.

    Example:
        pad_left = lambda s, width, fill: s.rjust(width, fill)
        re_pad = rearg(pad_left)(1, 2, 0)()
        re_pad(10, ".", "Bar") -> ".......Bar"

        backwards = rearg(lambda *xs: xs)(4, 3)(2, 1, 0)()
        backwards("f")("g", "h")("i")("j") -> ("j", "i", "h", "g", "f")
    """
    def collect(collected: Tuple[int, ...]) -> Callable[..., Any]:
        def indices(*more: int) -> Any:
            if not more:
                return _rearranged(f, collected)
            return collect(collected + more)
        return indices
    return collect(())
