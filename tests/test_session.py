from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from ticketflow_client.auth_store import AuthStore
from ticketflow_client.exceptions import AuthError, SessionProviderError
from ticketflow_client.models import User
from ticketflow_client.session import SessionProvider, SessionStore

from support import ALICE, Recorder, body_of, make_http


def _store(auth_store: AuthStore, handler=None) -> SessionStore:
    handler = handler or Recorder({})
    return SessionStore(http=make_http(handler), auth_store=auth_store)


@pytest.mark.parametrize(
    "raw",
    [
        json.dumps({"token": "jwt"}),
        json.dumps({"user": ALICE}),
        json.dumps({"token": "", "user": ALICE}),
        json.dumps({"token": "jwt", "user": {"id": "1"}}),
        json.dumps(["jwt", ALICE]),
        "{not json",
    ],
)
def test_malformed_record_restores_anonymous(auth_store: AuthStore, raw: str) -> None:
    auth_store._path().write_text(raw)
    store = _store(auth_store)

    state = store.initialize()

    assert state.ready is True
    assert state.credential is None
    assert state.identity is None
    assert auth_store.read_raw() is None


def test_undecodable_record_restores_anonymous(auth_store: AuthStore) -> None:
    auth_store._path().write_bytes(b"\xff\xfe{garbage")
    store = _store(auth_store)

    state = store.initialize()

    assert state.ready is True
    assert state.authenticated is False
    assert auth_store.read_raw() is None

    with SessionProvider(make_http(Recorder({})), auth_store) as provided:
        assert provided.ready is True


def test_missing_record_restores_anonymous(auth_store: AuthStore) -> None:
    store = _store(auth_store)
    assert store.ready is False
    store.initialize()
    assert store.ready is True
    assert store.authenticated is False


def test_valid_record_is_restored(auth_store: AuthStore) -> None:
    auth_store.save("jwt", ALICE)
    store = _store(auth_store)
    store.initialize()
    assert store.authenticated is True
    assert store.credential == "jwt"
    assert store.identity.name == "Alice"


def test_initialize_happens_once(auth_store: AuthStore) -> None:
    store = _store(auth_store)
    store.initialize()
    auth_store.save("jwt", ALICE)
    state = store.initialize()
    assert state.ready is True
    assert state.credential is None


def test_login_persists_and_adopts_identity(auth_store: AuthStore) -> None:
    recorder = Recorder({("POST", "/auth/login"): {"token": "jwt", "user": ALICE}})
    store = _store(auth_store, recorder)
    store.initialize()

    async def scenario():
        async with store.http:
            return await store.login("alice@example.com", "secret123")

    user = asyncio.run(scenario())

    assert user.name == "Alice"
    assert store.identity.name == "Alice"
    assert store.credential == "jwt"
    assert '"Alice"' in auth_store.read_raw()
    login_call = recorder.calls("POST", "/auth/login")[0]
    assert body_of(login_call) == {"email": "alice@example.com", "password": "secret123"}
    assert "Authorization" not in login_call.headers


def test_login_failure_leaves_state_unchanged(auth_store: AuthStore) -> None:
    recorder = Recorder(
        {("POST", "/auth/login"): httpx.Response(401, json={"message": "Invalid credentials"})}
    )
    store = _store(auth_store, recorder)
    store.initialize()
    before = store.state

    async def scenario():
        async with store.http:
            await store.login("alice@example.com", "wrong")

    with pytest.raises(AuthError, match="Invalid credentials"):
        asyncio.run(scenario())
    assert store.state == before
    assert auth_store.read_raw() is None


def test_register_carries_name(auth_store: AuthStore) -> None:
    recorder = Recorder({("POST", "/auth/register"): {"token": "jwt-2", "user": ALICE}})
    store = _store(auth_store, recorder)

    async def scenario():
        async with store.http:
            await store.register("alice@example.com", "secret123", "Alice")

    asyncio.run(scenario())
    assert body_of(recorder.calls("POST", "/auth/register")[0]) == {
        "email": "alice@example.com",
        "password": "secret123",
        "name": "Alice",
    }
    assert store.authenticated is True
    assert json.loads(auth_store.read_raw())["token"] == "jwt-2"


def test_logout_clears_memory_and_storage(auth_store: AuthStore) -> None:
    auth_store.save("jwt", ALICE)
    store = _store(auth_store)
    store.initialize()

    store.logout()
    store.logout()

    assert store.ready is True
    assert store.credential is None and store.identity is None
    assert auth_store.read_raw() is None


def test_escape_hatches_patch_memory_only(auth_store: AuthStore) -> None:
    store = _store(auth_store)
    store.initialize()

    store.set_credential("tok")
    store.set_identity(User(id="9", email="x@example.com", name="X"))

    assert store.authenticated is True
    assert auth_store.read_raw() is None
    store.set_credential(None)
    assert store.authenticated is False
    assert store.identity.id == "9"


def test_provider_fails_fast_outside_lifecycle(auth_store: AuthStore) -> None:
    provider = SessionProvider(make_http(Recorder({})), auth_store)
    with pytest.raises(SessionProviderError):
        provider.store

    with provider as store:
        assert provider.store is store
        assert store.ready is True

    with pytest.raises(SessionProviderError):
        provider.store
