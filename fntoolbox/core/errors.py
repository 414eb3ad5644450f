"""
Exception types for fntoolbox.
"""


class ActionFormatError(ValueError):
    """Raised when an action carries no `type` discriminant."""
    pass


class BuilderSealedError(Exception):
    """Raised when a slice builder is used after its reducer was built."""
    pass


class ActionLogError(Exception):
    """Raised when an action log cannot be decoded."""
    pass


class ReducerLoadError(Exception):
    """Raised when a reducer import path cannot be resolved."""
    pass
