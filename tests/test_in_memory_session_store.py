import pytest

from adapters.session_store.in_memory_session_store import InMemorySessionStore
from contracts import INITIAL_STATE, CalculatorState
from ports.session_store import SessionStore


def test_in_memory_store_satisfies_port():
    assert isinstance(InMemorySessionStore(), SessionStore)


def test_create_starts_in_initial_state():
    store = InMemorySessionStore()

    session_id = store.create()

    assert store.get(session_id) == INITIAL_STATE
    assert store.list_ids() == [session_id]


def test_put_replaces_state():
    store = InMemorySessionStore()
    session_id = store.create()
    state = CalculatorState(current_operand="42")

    store.put(session_id, state)

    assert store.get(session_id) is state


def test_unknown_session_raises_key_error():
    store = InMemorySessionStore()

    with pytest.raises(KeyError):
        store.get("missing")
    with pytest.raises(KeyError):
        store.put("missing", INITIAL_STATE)
    with pytest.raises(KeyError):
        store.delete("missing")


def test_delete_removes_session():
    store = InMemorySessionStore()
    session_id = store.create()

    store.delete(session_id)

    assert len(store) == 0


def test_oldest_session_is_evicted_over_limit():
    store = InMemorySessionStore(max_sessions=2)
    first = store.create()
    second = store.create()
    third = store.create()

    assert store.list_ids() == [second, third]
    with pytest.raises(KeyError):
        store.get(first)


def test_max_sessions_must_be_positive():
    with pytest.raises(ValueError):
        InMemorySessionStore(max_sessions=0)
