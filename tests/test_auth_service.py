import asyncio

import pytest

from business_directory_api.app.core import security
from business_directory_api.app.core.errors import AuthError, AuthErrorKind, StoreError
from business_directory_api.app.services.auth_service import AuthService


def run(coro):
    return asyncio.run(coro)


def test_register_opens_session(auth, store):
    user = run(auth.register("a@b.com", "secret1", "Ann"))

    assert auth.is_authenticated
    assert auth.current_user == user
    assert user.email == "a@b.com"
    assert user.name == "Ann"
    assert store.fetch_user("a@b.com").id == user.id


def test_logout_clears_session(auth):
    run(auth.register("a@b.com", "secret1", "Ann"))
    auth.logout()

    session = auth.session()
    assert not session.is_authenticated
    assert session.user is None


def test_login_after_register(auth):
    registered = run(auth.register("a@b.com", "secret1", "Ann"))
    auth.logout()

    user = run(auth.login("A@B.com", "secret1"))
    assert user.id == registered.id
    assert auth.session().user == registered


@pytest.mark.parametrize("email, password", [("a@b.com", "wrong12"), ("nobody@b.com", "secret1")])
def test_bad_credentials_are_indistinguishable(auth, email, password):
    run(auth.register("a@b.com", "secret1", "Ann"))
    auth.logout()

    with pytest.raises(AuthError) as excinfo:
        run(auth.login(email, password))
    assert excinfo.value.kind == AuthErrorKind.invalid_credentials
    assert not auth.is_authenticated


def test_failed_login_keeps_existing_session(auth):
    user = run(auth.register("a@b.com", "secret1", "Ann"))
    with pytest.raises(AuthError):
        run(auth.login("a@b.com", "wrong12"))
    assert auth.current_user == user


def test_duplicate_registration_leaves_record_unchanged(auth, store):
    first = run(auth.register("a@b.com", "secret1", "Ann"))
    auth.logout()

    with pytest.raises(AuthError) as excinfo:
        run(auth.register("A@b.com", "other12", "Impostor"))
    assert excinfo.value.kind == AuthErrorKind.user_already_exists

    stored = store.fetch_user("a@b.com")
    assert stored.id == first.id
    assert stored.name == "Ann"
    assert stored.password == "secret1"
    assert not auth.is_authenticated


def test_delay_uses_injected_sleep(store):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    service = AuthService(store, delay_seconds=1.5, sleep=fake_sleep)
    run(service.register("a@b.com", "secret1", "Ann"))
    run(service.login("a@b.com", "secret1"))
    assert waits == [1.5, 1.5]


def test_no_delay_by_default(store):
    async def forbidden_sleep(seconds):
        raise AssertionError("sleep should not be called")

    service = AuthService(store, sleep=forbidden_sleep)
    run(service.register("a@b.com", "secret1", "Ann"))


def test_hashed_passwords(store):
    service = AuthService(store, hash_passwords=True)
    run(service.register("a@b.com", "secret1", "Ann"))

    assert store.fetch_user("a@b.com").password != "secret1"
    service.logout()
    assert run(service.login("a@b.com", "secret1")).email == "a@b.com"
    with pytest.raises(AuthError):
        run(service.login("a@b.com", "secret2"))


def test_rejected_insert_is_a_server_error(auth, store, monkeypatch):
    monkeypatch.setattr(store, "create_user", lambda email, password, name: None)
    with pytest.raises(AuthError) as excinfo:
        run(auth.register("a@b.com", "secret1", "Ann"))
    assert excinfo.value.kind == AuthErrorKind.server_error
    assert not auth.is_authenticated


@pytest.mark.parametrize("action", ["login", "register"])
def test_store_failure_is_a_server_error(auth, store, monkeypatch, action):
    def broken(email):
        raise StoreError("disk I/O error")

    monkeypatch.setattr(store, "fetch_user", broken)
    with pytest.raises(AuthError) as excinfo:
        if action == "login":
            run(auth.login("a@b.com", "secret1"))
        else:
            run(auth.register("a@b.com", "secret1", "Ann"))
    assert excinfo.value.kind == AuthErrorKind.server_error


@pytest.mark.parametrize("email", ["a@b.com", "nobody@b.com"])
def test_unknown_email_runs_password_verification(store, monkeypatch, email):
    service = AuthService(store, hash_passwords=True)
    run(service.register("a@b.com", "secret1", "Ann"))
    service.logout()

    calls = []
    real_verify = security.verify_password

    def counting_verify(plain, stored):
        calls.append(stored)
        return real_verify(plain, stored)

    monkeypatch.setattr(security, "verify_password", counting_verify)
    with pytest.raises(AuthError) as excinfo:
        run(service.login(email, "wrong12"))
    assert excinfo.value.kind == AuthErrorKind.invalid_credentials
    assert len(calls) == 1
    assert "$" in calls[0]
