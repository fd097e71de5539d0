# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from storefront.domain.products.entities import NewProduct, PageRequest
from storefront.domain.products.entities import Product as DomainProduct
from storefront.domain.products.repositories import ProductRepository
from storefront.infrastructure.db.models import Product
from storefront.infrastructure.db.session import session_scope


def _aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=UTC)


def _to_domain(row: Product) -> DomainProduct:
    return DomainProduct(
        id=row.id,
        name=row.name,
        description=row.description,
        price=float(row.price),
        category=row.category,
        stock=int(row.stock),
        created_at=_aware(row.created_at),
        updated_at=_aware(row.updated_at),
    )


class SqlAlchemyProductRepository(ProductRepository):
    def list_page(self, page: PageRequest) -> list[DomainProduct]:
        with session_scope() as session:
            rows = (
                session.query(Product)
                .order_by(Product.created_at.desc(), Product.id.desc())
                .offset(page.offset)
                .limit(page.limit)
                .all()
            )
            return [_to_domain(row) for row in rows]

    def count(self) -> int:
        with session_scope() as session:
            return session.query(Product).count()

    def find_by_id(self, product_id: int) -> DomainProduct | None:
        with session_scope() as session:
            row = session.get(Product, product_id)
            return _to_domain(row) if row else None

    def add(self, product: NewProduct) -> DomainProduct:
        with session_scope() as session:
            row = Product(
                name=product.name,
                description=product.description,
                price=product.price,
                category=product.category,
                stock=product.stock,
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def update(self, product_id: int, changes: Mapping[str, Any]) -> DomainProduct | None:
        with session_scope() as session:
            row = session.get(Product, product_id)
            if row is None:
                return None
            for field, value in changes.items():
                setattr(row, field, value)
            row.updated_at = datetime.now(UTC)
            session.flush()
            session.refresh(row)
            return _to_domain(row)

    def delete(self, product_id: int) -> DomainProduct | None:
        with session_scope() as session:
            row = session.get(Product, product_id)
            if row is None:
                return None
            snapshot = _to_domain(row)
            session.delete(row)
            return snapshot
