"""Tests for login sessions."""

from datetime import UTC, datetime

import pytest

from book_catalog.domain.errors import InvalidCredentialsError, InvalidInputError
from book_catalog.services.cache import InMemoryCache
from book_catalog.services.sessions import SessionService
from book_catalog.services.users import UserService


def test_login_issues_token_resolving_to_identity(
    user_service: UserService, session_service: SessionService
) -> None:
    user_service.register("alice", "secret")

    session = session_service.login("alice", "secret")

    assert session.identity == "alice"
    assert session.expires_at > datetime.now(tz=UTC)
    assert session_service.resolve_identity(session.token) == "alice"


def test_each_login_gets_a_new_token(
    user_service: UserService, session_service: SessionService
) -> None:
    user_service.register("alice", "secret")

    first = session_service.login("alice", "secret")
    second = session_service.login("alice", "secret")

    assert first.token != second.token
    assert session_service.resolve_identity(first.token) == "alice"
    assert session_service.resolve_identity(second.token) == "alice"


def test_login_rejects_bad_credentials(
    user_service: UserService, session_service: SessionService
) -> None:
    user_service.register("alice", "secret")

    with pytest.raises(InvalidCredentialsError):
        session_service.login("alice", "wrong")
    with pytest.raises(InvalidCredentialsError):
        session_service.login("bob", "secret")


def test_login_requires_values(session_service: SessionService) -> None:
    with pytest.raises(InvalidInputError):
        session_service.login("", "secret")
    with pytest.raises(InvalidInputError):
        session_service.login("alice", None)


def test_unknown_or_missing_token_is_anonymous(
    session_service: SessionService,
) -> None:
    assert session_service.resolve_identity(None) is None
    assert session_service.resolve_identity("") is None
    assert session_service.resolve_identity("not-a-token") is None


def test_expired_session_is_anonymous(user_service: UserService) -> None:
    service = SessionService(
        user_service=user_service, cache=InMemoryCache(), ttl_seconds=0
    )
    user_service.register("alice", "secret")

    session = service.login("alice", "secret")

    assert service.resolve_identity(session.token) is None


def test_logout_invalidates_token(
    user_service: UserService, session_service: SessionService
) -> None:
    user_service.register("alice", "secret")
    session = session_service.login("alice", "secret")

    session_service.logout(session.token)

    assert session_service.resolve_identity(session.token) is None


def test_expired_sessions_do_not_accumulate(user_service: UserService) -> None:
    cache = InMemoryCache()
    service = SessionService(user_service=user_service, cache=cache, ttl_seconds=0)
    user_service.register("alice", "secret")

    for _ in range(20):
        service.login("alice", "secret")

    assert cache._entries == {}


def test_live_sessions_survive_cache_sweep(user_service: UserService) -> None:
    cache = InMemoryCache()
    user_service.register("alice", "secret")
    expired = SessionService(user_service=user_service, cache=cache, ttl_seconds=0)
    live = SessionService(user_service=user_service, cache=cache, ttl_seconds=3600)

    kept = live.login("alice", "secret")
    expired.login("alice", "secret")

    assert live.resolve_identity(kept.token) == "alice"
    assert len(cache._entries) == 1
