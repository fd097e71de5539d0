from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from storefront.application.use_cases.users.register_user import RegisterUserUseCase
from storefront.domain.users.entities import User
from storefront.domain.users.exceptions import InvalidCredentialsError, UserAlreadyExistsError
from storefront.interfaces.http.controllers.auth_controller import AuthController
from storefront.shared.errors import register_error_handler

CREATED = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


def _user(username: str = "alice", email: str = "alice@x.com") -> User:
    return User(
        id=1,
        username=username,
        email=email,
        password_hash="hash",
        created_at=CREATED,
        updated_at=CREATED,
    )


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    register_error_handler(app)
    return app


def test_register_endpoint_returns_token_and_public_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str, str]] = {}

    class StubRegister:
        def execute(self, username: str, email: str, password: str) -> tuple[User, str]:
            register_called["args"] = (username, email, password)
            return _user(username, email), "token123"

    controller = AuthController(
        register_use_case=cast(RegisterUserUseCase, StubRegister()),
        login_use_case=MagicMock(),
    )
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/register",
            json={"username": "alice", "email": " Alice@X.com ", "password": "secret1"},
        )

    assert response.status_code == 201
    assert register_called["args"] == ("alice", "alice@x.com", "secret1")
    payload = response.get_json()
    assert payload["message"] == "User registered successfully"
    assert payload["token"] == "token123"
    assert payload["user"] == {
        "id": 1,
        "username": "alice",
        "email": "alice@x.com",
        "createdAt": "2025-03-01T12:00:00Z",
    }
    assert "password" not in str(payload)


@pytest.mark.parametrize(
    ("body", "message"),
    [
        ({}, "Username, email, and password are required"),
        ({"username": "alice", "email": "a@x.com"}, "Username, email, and password are required"),
        ({"username": "al", "email": "a@x.com", "password": "secret1"},
         "Username must be between 3 and 30 characters"),
        ({"username": "a" * 31, "email": "a@x.com", "password": "secret1"},
         "Username must be between 3 and 30 characters"),
        ({"username": "alice", "email": "not-an-email", "password": "secret1"},
         "Please enter a valid email address"),
        ({"username": "alice", "email": "a@x.com", "password": "12345"},
         "Password must be at least 6 characters long"),
    ],
)
def test_register_validation_errors_return_400(flask_app: Flask, body: dict, message: str) -> None:
    register = MagicMock()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/register", json=body)

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "validation_error"
    assert payload["message"] == message
    register.execute.assert_not_called()


def test_register_conflict_returns_409(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = UserAlreadyExistsError()
    controller = AuthController(register_use_case=register, login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/register",
            json={"username": "alice", "email": "alice@x.com", "password": "secret1"},
        )

    assert response.status_code == 409
    assert response.get_json()["message"] == "User with this email or username already exists"


def test_login_missing_fields_returns_400(flask_app: Flask) -> None:
    controller = AuthController(register_use_case=MagicMock(), login_use_case=MagicMock())
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"email": "alice@x.com"})

    assert response.status_code == 400
    assert response.get_json()["message"] == "Email and password are required"


def test_login_bad_credentials_returns_401(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = InvalidCredentialsError()
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"email": "alice@x.com", "password": "nope!!"})

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "invalid_credentials",
        "message": "Invalid email or password",
    }


def test_login_success_returns_200(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.return_value = (_user(), "tok")
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"email": "ALICE@x.com", "password": "secret1"})

    assert response.status_code == 200
    login.execute.assert_called_once_with("alice@x.com", "secret1")
    assert response.get_json()["message"] == "Login successful"


def test_unexpected_failure_returns_500_without_details(flask_app: Flask) -> None:
    login = MagicMock()
    login.execute.side_effect = RuntimeError("db exploded at /var/lib/secret")
    controller = AuthController(register_use_case=MagicMock(), login_use_case=login)
    flask_app.register_blueprint(controller.as_blueprint())

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"email": "alice@x.com", "password": "secret1"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "internal_error", "message": "Internal server error"}
