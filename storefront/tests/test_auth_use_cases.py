from __future__ import annotations

import pytest

from storefront.application.services.token_service import JwtTokenService
from storefront.application.use_cases.users.login_user import LoginUserUseCase
from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.application.use_cases.users.verify_token import VerifyTokenUseCase
from storefront.domain.users.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    MissingTokenError,
    UserAlreadyExistsError,
)
from storefront.tests.fakes import DeterministicHasher, InMemoryUserRepository

SECRET = "unit-test-secret"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def tokens() -> JwtTokenService:
    return JwtTokenService(secret=SECRET, ttl_seconds=7 * 86400)


def _register(users, tokens) -> RegisterUserUseCase:
    return RegisterUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def _login(users, tokens) -> LoginUserUseCase:
    return LoginUserUseCase(users=users, tokens=tokens, password_hasher=DeterministicHasher())


def test_register_user_success(users, tokens) -> None:
    user, token = _register(users, tokens).execute("alice", "alice@x.com", "secret1")

    assert user.id == 1
    assert user.username == "alice"
    assert user.password_hash != "secret1"
    assert tokens.decode(token).user_id == user.id


@pytest.mark.parametrize(
    ("username", "email"),
    [("alice", "other@x.com"), ("bob", "alice@x.com")],
)
def test_register_duplicate_identity_raises(users, tokens, username: str, email: str) -> None:
    use_case = _register(users, tokens)
    use_case.execute("alice", "alice@x.com", "secret1")

    with pytest.raises(UserAlreadyExistsError):
        use_case.execute(username, email, "secret1")

    assert len(users.all()) == 1


def test_login_returns_token_for_registered_user(users, tokens) -> None:
    registered, _ = _register(users, tokens).execute("alice", "alice@x.com", "secret1")

    user, token = _login(users, tokens).execute("alice@x.com", "secret1")

    assert user.id == registered.id
    claims = VerifyTokenUseCase(tokens=tokens).execute(token)
    assert claims.user_id == registered.id
    assert claims.email == "alice@x.com"


@pytest.mark.parametrize(
    ("email", "password"),
    [("alice@x.com", "wrong-password"), ("nobody@x.com", "secret1")],
)
def test_login_invalid_credentials_use_one_message(users, tokens, email: str, password: str) -> None:
    _register(users, tokens).execute("alice", "alice@x.com", "secret1")

    with pytest.raises(InvalidCredentialsError) as info:
        _login(users, tokens).execute(email, password)

    assert info.value.message == "Invalid email or password"
    assert int(info.value.status) == 401


def test_verify_token_requires_token(tokens) -> None:
    with pytest.raises(MissingTokenError):
        VerifyTokenUseCase(tokens=tokens).execute("")


def test_verify_token_rejects_garbage(tokens) -> None:
    with pytest.raises(InvalidTokenError):
        VerifyTokenUseCase(tokens=tokens).execute("not-a-jwt")
