from __future__ import annotations

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError

from storefront.interfaces.http.controllers import misc_controller
from storefront.interfaces.http.controllers.misc_controller import MiscController


@pytest.fixture()
def client() -> FlaskClient:
    app = Flask(__name__)
    app.register_blueprint(MiscController().as_blueprint())
    return app.test_client()


def test_health_ok_when_every_table_answers(client: FlaskClient, monkeypatch) -> None:
    monkeypatch.setattr(
        misc_controller, "check_tables", lambda: {"users": "ok", "products": "ok"}
    )

    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json()["ok"] is True
    assert response.get_json()["database"] == "ok"


def test_health_degraded_when_a_table_is_missing(client: FlaskClient, monkeypatch) -> None:
    monkeypatch.setattr(
        misc_controller, "check_tables", lambda: {"users": "ok", "products": "unreachable"}
    )

    response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json()["database"] == "degraded"


def test_health_unreachable_when_connection_fails(client: FlaskClient, monkeypatch) -> None:
    def _refuse() -> dict[str, str]:
        raise OperationalError("connect", {}, Exception("connection refused"))

    monkeypatch.setattr(misc_controller, "check_tables", _refuse)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json() == {"ok": False, "database": "unreachable"}
