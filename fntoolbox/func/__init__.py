"""
Function transformers and dispatch.

- choose: key -> function dispatch with a default branch
- curry / partial / rearg: argument accumulation and rearrangement
- locker: pass-through-then-freeze memoization
- Y: fixed-point combinator for anonymous recursion
- identity / lazyish / local: value-level helpers
"""

from .choice import choose
from .curry import curry, partial, rearg
from .tools import identity, lazyish, local, locker, LockState, Y

__all__ = [
    "choose",
    "curry",
    "partial",
    "rearg",
    "identity",
    "lazyish",
    "local",
    "locker",
    "LockState",
    "Y",
]
