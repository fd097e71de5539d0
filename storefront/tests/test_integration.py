from __future__ import annotations

from datetime import UTC, datetime

import pytest

from storefront.app import create_app
from storefront.domain.users.entities import User as DomainUser
from storefront.domain.users.exceptions import UserAlreadyExistsError
from storefront.infrastructure.db import ENGINE, Base, SessionLocal
from storefront.infrastructure.db.models import Product, User
from storefront.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)


@pytest.fixture(autouse=True)
def reset_database() -> None:
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)


@pytest.fixture()
def client():
    app = create_app()
    with app.test_client() as client:
        yield client


def _register(client, username: str = "alice", email: str = "alice@x.com"):
    return client.post(
        "/auth/register",
        json={"username": username, "email": email, "password": "secret1"},
    )


def test_register_then_duplicate_conflicts(client) -> None:
    first = _register(client)
    assert first.status_code == 201
    assert first.get_json()["token"]

    second = _register(client, email="other@x.com")
    assert second.status_code == 409

    session = SessionLocal()
    try:
        assert session.query(User).filter(User.username == "alice").count() == 1
        stored = session.query(User).one()
        assert stored.password_hash != "secret1"
    finally:
        session.close()


def test_login_token_carries_registered_user_id(client) -> None:
    registered = _register(client).get_json()["user"]

    login = client.post("/auth/login", json={"email": "Alice@X.com", "password": "secret1"})
    assert login.status_code == 200
    assert login.get_json()["user"]["id"] == registered["id"]

    wrong = client.post("/auth/login", json={"email": "alice@x.com", "password": "secret2"})
    assert wrong.status_code == 401


def test_product_crud_round_trip(client) -> None:
    token = _register(client).get_json()["token"]
    headers = {"Authorization": f"Bearer {token}"}
    body = {
        "name": "Kettle",
        "description": "1.7l steel kettle",
        "price": 39.9,
        "category": "Kitchen",
        "stock": 12,
    }

    created = client.post("/products", json=body, headers=headers)
    assert created.status_code == 201
    product = created.get_json()["data"]
    assert {k: product[k] for k in body} == body

    fetched = client.get(f"/products/{product['id']}", headers=headers).get_json()["data"]
    assert fetched == product

    untouched = client.put(f"/products/{product['id']}", json={}, headers=headers)
    assert untouched.status_code == 200
    after = untouched.get_json()["data"]
    assert {k: after[k] for k in body} == body
    assert after["createdAt"] == product["createdAt"]
    assert datetime.fromisoformat(after["updatedAt"]) >= datetime.fromisoformat(product["updatedAt"])

    deleted = client.delete(f"/products/{product['id']}", headers=headers)
    assert deleted.status_code == 200

    assert client.get(f"/products/{product['id']}", headers=headers).status_code == 404

    session = SessionLocal()
    try:
        assert session.query(Product).count() == 0
    finally:
        session.close()


def test_listing_twenty_five_products(client) -> None:
    token = _register(client).get_json()["token"]
    headers = {"Authorization": f"Bearer {token}"}
    for i in range(25):
        client.post(
            "/products",
            json={"name": f"p{i}", "description": "d", "price": i, "category": "c", "stock": i},
            headers=headers,
        )

    page = client.get("/products?page=3&limit=10", headers=headers).get_json()

    assert len(page["data"]) == 5
    assert page["pagination"]["totalPages"] == 3
    assert page["pagination"]["totalItems"] == 25
    assert [item["name"] for item in page["data"]] == ["p4", "p3", "p2", "p1", "p0"]


def test_products_require_token(client) -> None:
    assert client.get("/products").status_code == 401
    assert client.delete("/products/1").status_code == 401


def test_health_reports_database(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {
        "ok": True,
        "database": "ok",
        "tables": {"users": "ok", "products": "ok"},
    }


def test_health_flags_missing_table(client) -> None:
    Product.__table__.drop(bind=ENGINE)

    response = client.get("/health")

    assert response.status_code == 503
    assert response.get_json() == {
        "ok": False,
        "database": "degraded",
        "tables": {"users": "ok", "products": "unreachable"},
    }


def test_out_of_range_paging_is_not_a_server_error(client) -> None:
    token = _register(client).get_json()["token"]
    headers = {"Authorization": f"Bearer {token}"}

    for query in ("page=99999999999999999999&limit=10", "page=1&limit=99999999999999999999"):
        response = client.get(f"/products?{query}", headers=headers)
        assert response.status_code == 200
        assert response.get_json()["pagination"]["totalItems"] == 0


def test_store_rejects_duplicate_insert_that_skipped_the_precheck() -> None:
    now = datetime.now(UTC)
    user = DomainUser(
        id=0,
        username="racer",
        email="racer@x.com",
        password_hash="hash",
        created_at=now,
        updated_at=now,
    )
    repository = SqlAlchemyUserRepository()
    repository.add(user)

    with pytest.raises(UserAlreadyExistsError):
        repository.add(user)

    assert repository.find_by_email("racer@x.com") is not None
