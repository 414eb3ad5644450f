"""
Tests for key-based dispatch.
"""

import pytest

from fntoolbox.func.choice import choose


def test_choose_picks_registered_action():
    """Registered key runs its function."""
    assert choose("x", {"x": lambda: 1, "y": lambda: 2}, lambda: 0, []) == 1


def test_choose_falls_back_to_default():
    """Unknown key runs the default action."""
    assert choose("z", {"x": lambda: 1}, lambda: 0, []) == 0


def test_choose_defaults():
    """Missing table and default give None."""
    assert choose("anything") is None
    assert choose("x", {"y": lambda: 2}) is None


def test_choose_passes_args():
    """Args go to whichever function is chosen."""
    table = {"add": lambda a, b: a + b}
    assert choose("add", table, lambda a, b: None, (2, 3)) == 5
    assert choose("mul", table, lambda a, b: a * b, (2, 3)) == 6


def test_choose_exact_key_match():
    """No normalization: keys of different type or case do not match."""
    table = {1: lambda: "int", "A": lambda: "upper"}
    assert choose("1", table, lambda: "default") == "default"
    assert choose("a", table, lambda: "default") == "default"
    assert choose(1, table, lambda: "default") == "int"


def test_choose_propagates_errors():
    """Exceptions from the chosen function are not swallowed."""
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        choose("x", {"x": boom})

    with pytest.raises(RuntimeError, match="boom"):
        choose("y", {}, boom)


def test_choose_non_callable_fails_at_call():
    """A non-callable entry surfaces as TypeError when chosen."""
    with pytest.raises(TypeError):
        choose("x", {"x": 42})
