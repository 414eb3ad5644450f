"""
Tests for locker, Y and the value-level helpers.
"""

from fntoolbox.func.tools import Y, identity, lazyish, local, locker


def test_locker_default_locks_first_value():
    """locker() passes one call through, then freezes the second."""
    lock = locker()

    assert lock("I like you!") == "I like you!"
    assert lock("I hate you.") == "I hate you."
    assert lock("Anything else") == "I hate you."
    assert lock(None) == "I hate you."


def test_locker_n_pass_through_calls():
    """Calls 1..n are identity, call n+1 sets the locked value."""
    lock = locker(2)

    assert lock("Repeat after me!") == "Repeat after me!"
    assert lock(42) == 42
    assert lock("All right...") == "All right..."
    assert lock("Something new") == "All right..."
    assert lock(0) == "All right..."


def test_locker_zero_locks_immediately():
    """With n=0 the very first argument is locked."""
    lock = locker(0)

    assert lock("first") == "first"
    assert lock("second") == "first"


def test_locker_identity_calls_return_same_object():
    """Pass-through calls return the argument itself."""
    lock = locker(3)
    thing = {"a": 1}
    assert lock(thing) is thing


def test_locker_locked_value_may_be_none():
    """None is a legitimate locked value."""
    lock = locker(0)

    assert lock(None) is None
    assert lock("ignored") is None


def test_locker_instances_are_independent():
    """Each locker() call owns its own state."""
    a = locker(0)
    b = locker(0)

    a("a-value")
    assert b("b-value") == "b-value"
    assert a("other") == "a-value"
    assert b("other") == "b-value"


def test_y_factorial():
    """Y gives anonymous recursion."""
    fact = Y(lambda self: lambda n: 1 if n <= 1 else n * self(n - 1))
    assert fact(5) == 120
    assert fact(0) == 1


def test_y_multiple_arguments():
    """Recursive calls may take several arguments."""
    gcd = Y(lambda self: lambda a, b: a if b == 0 else self(b, a % b))
    assert gcd(48, 18) == 6


def test_y_is_lazy():
    """Building the fixed point does not call f's body."""
    calls = []

    def f(self):
        calls.append("expanded")
        return lambda n: n

    h = Y(f)
    assert calls == []
    assert h(7) == 7
    assert calls == ["expanded"]


def test_y_fixed_point_property():
    """Y(f) behaves like f(Y(f))."""
    f = lambda self: lambda n: 0 if n == 0 else 2 + self(n - 1)  # noqa: E731
    h = Y(f)
    for n in range(6):
        assert h(n) == f(h)(n) == 2 * n


def test_identity_and_lazyish():
    """identity returns its argument; lazyish defers it."""
    obj = object()
    assert identity(obj) is obj

    thunk = lazyish(obj)
    assert callable(thunk)
    assert thunk() is obj


def test_local_evaluates_immediately():
    """local(f) evaluates f right away."""
    assert local(lambda: (lambda w, h: w * h)(3, 4)) == 12
    assert local() is None


def test_locker_returns_plain_function():
    """The lock keeps its state private to the closure."""
    lock = locker(1)
    assert not hasattr(lock, "state")
    lock("a")
    assert lock("b") == "b"
    assert lock("c") == "b"
