"""End-to-end store and register workflows."""

import sys

sys.path.insert(0, "src")

from bookie import create_store


def test_counter_scenario():
    """Counter store increments 0 -> 1 -> 2."""
    store = create_store(0)
    inc = store.create_action(lambda s: s + 1)

    inc()
    assert store.get_state() == 1

    inc()
    assert store.get_state() == 2


def test_two_registers_scenario():
    """Two registers share one root state; writes stay in their slice."""
    store = create_store()
    foo = store.create_register("foo", 0)
    store.create_register("bar", 0)

    assert store.get_state() == {"foo": 0, "bar": 0}
    bar_before = store.get_state()["bar"]

    foo.create_action(lambda s: s + 1)()

    assert store.get_state() == {"foo": 1, "bar": 0}
    assert store.get_state()["bar"] is bar_before


def test_login_flow_with_nested_registers():
    """A small app: session register with a nested preferences register."""
    store = create_store()
    session = store.create_register("session", {"user": None})
    prefs = session.create_register("prefs")
    counter = store.create_register("visits", 0)

    log_in = session.create_action(lambda s, user: {**s, "user": user})
    log_out = session.create_action(lambda s: {"user": None})
    set_theme = prefs.create_action(lambda p, theme: {**(p or {}), "theme": theme})
    visit = counter.create_action(lambda n: n + 1)

    history = []
    unsubscribe = store.subscribe(history.append)

    log_in("ada")
    set_theme("dark")
    visit()
    unsubscribe()
    log_out()

    assert [dict(h["session"]) for h in history] == [
        {"user": "ada"},
        {"user": "ada", "prefs": {"theme": "dark"}},
        {"user": "ada", "prefs": {"theme": "dark"}},
    ]
    assert history[1]["visits"] == 0
    assert history[2]["visits"] == 1
    assert store.get_state() == {"session": {"user": None}, "visits": 1}
    # Snapshots held by observers are unaffected by later dispatches
    assert history[0]["session"]["user"] == "ada"
