"""Tests for register composition.

Critical Invariants:
- A register action only changes its own slice
- Sibling slices stay reference-identical
- Nested registers still funnel through the root store's dispatch
"""

import pytest

from bookie import Register, ReentrantDispatchError


def test_create_registers_sets_defaults(store):
    """Register creation merges the initial value into the root state."""
    assert store.get_state() is None

    store.create_register("foo", 0)
    store.create_register("bar", 0)

    assert store.get_state() == {"foo": 0, "bar": 0}


def test_register_creation_does_not_notify(store):
    """Initialization is not a dispatch: listeners are not called."""
    calls = []
    store.subscribe(calls.append)

    store.create_register("foo", 0)

    assert calls == []


def test_register_actions_are_isolated(store):
    """CRITICAL: An action on `foo` leaves `bar` untouched.

    Why: Registers let independent consumers share one root state safely.
    """
    bar_value = {"items": []}
    foo = store.create_register("foo", 0)
    store.create_register("bar", bar_value)

    foo.create_action(lambda count: count + 1)()

    state = store.get_state()
    assert state["foo"] == 1
    assert state["bar"] is bar_value


def test_sibling_actions(store):
    """Each register increments only its own slice."""
    foo = store.create_register("foo", 0)
    bar = store.create_register("bar", 0)
    foo_inc = foo.create_action(lambda count: count + 1)
    bar_inc = bar.create_action(lambda count: count + 1)

    foo_inc()
    assert store.get_state() == {"foo": 1, "bar": 0}

    bar_inc()
    assert store.get_state() == {"foo": 1, "bar": 1}


def test_register_state_is_protected(store):
    """The root state produced by register actions is write-protected."""
    foo = store.create_register("foo", 0)
    foo.create_action(lambda count: count + 1)()

    state = store.get_state()
    with pytest.raises(TypeError):
        state["foo"] = 100

    assert store.get_state()["foo"] == 1


def test_register_payload(store):
    """Register transitions receive the action payload."""
    todos = store.create_register("todos", ())
    add = todos.create_action(lambda items, text: (*items, text))

    add("write tests")
    add("ship")

    assert store.get_state()["todos"] == ("write tests", "ship")


def test_register_noop_keeps_root_identity(store):
    """Returning the same slice keeps the root state object and skips listeners."""
    foo = store.create_register("foo", 0)
    calls = []
    store.subscribe(calls.append)
    before = store.get_state()

    foo.create_action(lambda count: count)()

    assert store.get_state() is before
    assert calls == []


def test_register_actions_notify_store_listeners(store):
    """Register actions trigger root store listeners with the whole state."""
    seen = []
    unsubscribe = store.subscribe(seen.append)
    foo = store.create_register("foo", 0)
    bar = store.create_register("bar", 0)
    foo_inc = foo.create_action(lambda count: count + 1)
    bar_inc = bar.create_action(lambda count: count + 1)

    foo_inc()
    bar_inc()
    unsubscribe()
    foo_inc()
    bar_inc()

    assert seen == [{"foo": 1, "bar": 0}, {"foo": 1, "bar": 1}]
    assert store.get_state() == {"foo": 2, "bar": 2}


def test_nested_register_starts_absent(store):
    """Child registers have no initial value; their slice reads as None."""
    session = store.create_register("session", {})
    prefs = session.create_register("prefs")
    seen = []

    def record(current):
        seen.append(current)
        return {"theme": "dark"}

    prefs.create_action(record)()

    assert seen == [None]
    assert store.get_state() == {"session": {"prefs": {"theme": "dark"}}}


def test_deeply_nested_registers(store):
    """CRITICAL: Each nesting level adds exactly one scope indirection.

    Why: The nested consumer must behave like it owns an independent store.
    """
    root = store.create_register("a", {"untouched": 1})
    level_b = root.create_register("b")
    level_c = level_b.create_register("c")
    increment = level_c.create_action(lambda count: (count or 0) + 1)

    increment()
    increment()

    state = store.get_state()
    assert state["a"]["untouched"] == 1
    assert state["a"]["b"]["c"] == 2
    assert increment.path == ("a", "b", "c")


def test_nested_action_keeps_parent_siblings(store):
    """A nested write shares every untouched value along the path."""
    untouched = ["keep"]
    outer = store.create_register("outer", {"sibling": untouched})
    other = {"n": 0}
    store.create_register("other", other)
    inner = outer.create_register("inner")

    inner.create_action(lambda value: "set")()

    state = store.get_state()
    assert state["other"] is other
    assert state["outer"]["sibling"] is untouched
    assert state["outer"]["inner"] == "set"


def test_nested_reentrancy_guard(store):
    """Nested register actions share the root store's guard."""
    foo = store.create_register("foo", 0)
    inner = foo.create_register("inner")
    bump = foo.create_action(lambda count: count + 1)

    def reenter(value):
        bump()
        return value

    with pytest.raises(ReentrantDispatchError):
        inner.create_action(reenter)()

    assert store.get_state() == {"foo": 0}
    assert not store.is_dispatching


def test_register_over_scalar_state(settings):
    """Registering on a scalar root replaces it with a mapping."""
    from bookie import create_store

    store = create_store(5, settings=settings)
    store.create_register("foo", 0)

    assert store.get_state() == {"foo": 0}


def test_recreating_register_resets_slice(store):
    """Creating a register for an existing scope overwrites its value."""
    foo = store.create_register("foo", 0)
    foo.create_action(lambda count: count + 5)()

    store.create_register("foo", 0)

    assert store.get_state() == {"foo": 0}


def test_create_register_during_dispatch_warns(store):
    """Registering from inside a transition is allowed but warned about."""

    def register_inside(state):
        store.create_register("late", 1)
        return {"replaced": True}

    with pytest.warns(RuntimeWarning, match="during a dispatch"):
        store.create_action(register_inside)()

    assert store.get_state() == {"replaced": True}


def test_register_metadata(store):
    """Registers expose their scope, parent and path."""
    foo = store.create_register("foo", 0)
    child = foo.create_register("child")

    assert isinstance(foo, Register)
    assert foo.scope == "foo"
    assert foo.parent is store
    assert child.parent is foo
    assert child.path == ("foo", "child")
    assert repr(child) == "Register(path=('foo', 'child'))"


def test_register_is_immutable(store):
    """Register handles cannot be re-pointed."""
    foo = store.create_register("foo", 0)

    with pytest.raises(AttributeError):
        foo.scope = "bar"  # type: ignore[misc]


def test_register_action_metadata(store):
    """Register actions keep the user function's name and bind to the root store."""
    foo = store.create_register("foo", 0)

    def increment(count):
        return count + 1

    action = foo.create_action(increment)

    assert action.name == "increment"
    assert action.store is store
    assert action.path == ("foo",)
