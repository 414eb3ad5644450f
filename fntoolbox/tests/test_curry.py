"""
Tests for curry and partial.
"""

from fntoolbox.func.curry import curry, partial


def add3(a, b, c):
    return a + b + c


def test_curry_any_split():
    """Every split of the arguments gives the same result."""
    expected = add3(1, 2, 3)

    assert curry(add3)(1)(2)(3)() == expected
    assert curry(add3)(1, 2)(3)() == expected
    assert curry(add3)(1)(2, 3)() == expected
    assert curry(add3)(1, 2, 3)() == expected


def test_curry_empty_call_terminates():
    """No arity introspection: only the empty call invokes f."""
    calls = []

    def f(*args):
        calls.append(args)
        return len(args)

    chain = curry(f)(1)(2)(3)
    assert calls == []  # nothing invoked yet

    assert chain() == 3
    assert calls == [(1, 2, 3)]


def test_curry_without_arguments():
    """curry(f)() calls f with no arguments."""
    assert curry(lambda: "called")() == "called"


def test_curry_branches_are_independent():
    """Continuing one step twice gives two independent chains."""
    step = curry(lambda *xs: list(xs))(1)

    left = step(2)
    right = step(3)

    assert left() == [1, 2]
    assert right() == [1, 3]
    assert step() == [1]


def test_curry_keeps_argument_order():
    """Arguments are passed in accumulation order."""
    assert curry(lambda *xs: "".join(xs))("a")("b", "c")("d")() == "abcd"


def test_partial_prefix_and_suffix():
    """partial(f)(*P)(*S) == f(*P, *S)."""
    f = lambda a, b: a + b  # noqa: E731
    g = partial(f)(3)
    assert g(4) == 7
    assert partial(add3)(1, 2)(3) == add3(1, 2, 3)
    assert partial(add3)()(1, 2, 3) == add3(1, 2, 3)


def test_partial_invokes_once():
    """Second stage invokes f immediately, it is not re-curried."""
    calls = []

    def f(*args):
        calls.append(args)
        return args

    bound = partial(f)("x")
    assert bound() == ("x",)
    assert bound("y") == ("x", "y")
    assert calls == [("x",), ("x", "y")]
